# tests/test_api.py

from fastapi.testclient import TestClient

from workflow_generator.api.main import app
from conftest import EXAMPLE_WORKFLOW_TEXT, SLACK_REQUEST

client = TestClient(app)


def test_generate_happy_path(stub_llm, gemini_env):
    stub_llm("```json\n" + EXAMPLE_WORKFLOW_TEXT + "\n```")

    resp = client.post("/api/v1/workflows/generate", json={"prompt": SLACK_REQUEST})
    assert resp.status_code == 200

    data = resp.json()
    assert data["fileSaved"] is True
    assert data["workflow"]["nodes"][0]["type"] == "n8n-nodes-base.manualTrigger"
    assert data["n8n-autopaste"] == data["workflow"]
    assert (gemini_env / data["fileName"]).is_file()


def test_generate_accepts_empty_body(stub_llm):
    stub_llm('{"nodes": [], "connections": {}}')

    resp = client.post("/api/v1/workflows/generate", json={})
    assert resp.status_code == 200
    assert resp.json()["originalPrompt"] == ""


def test_generate_error_is_500_with_kind_prefix(stub_llm):
    stub_llm(RuntimeError("API key not valid. Please pass a valid API key."))

    resp = client.post("/api/v1/workflows/generate", json={"prompt": SLACK_REQUEST})
    assert resp.status_code == 500
    assert resp.json()["detail"].startswith("Invalid API key.")


def test_describe_node():
    resp = client.get("/api/v1/nodes/workflow-generator")
    assert resp.status_code == 200
    assert resp.json()["displayName"] == "Workflow Generator (AI)"
