# tests/conftest.py

import pytest

from workflow_generator.integrations.llm_client import LLMClient

EXAMPLE_WORKFLOW_TEXT = """
{
"nodes": [
    { "parameters": {}, "id": "f0ed5a53-5523-41a4-9961-a47ad43e26a3", "name": "Start", "type": "n8n-nodes-base.manualTrigger", "typeVersion": 1, "position": [820, 300] },
    { "parameters": { "channel": "general", "text": "hello world" }, "id": "e6f49129-844c-4a11-9a29-07f0f622919d", "name": "Slack", "type": "n8n-nodes-base.slack", "typeVersion": 2, "position": [1040, 300], "credentials": {} }
],
"connections": {
    "Start": { "main": [ [ { "node": "Slack", "type": "main", "index": 0 } ] ] }
}
}
"""

SLACK_REQUEST = "Create a workflow that sends 'hello world' to Slack when I start it manually."


@pytest.fixture(autouse=True)
def gemini_env(monkeypatch, tmp_path):
    """Fake credential and a per-test output directory."""
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    monkeypatch.delenv("GEMINI_MODEL", raising=False)
    monkeypatch.delenv("GEMINI_BASE_URL", raising=False)
    monkeypatch.delenv("GEMINI_TIMEOUT", raising=False)
    monkeypatch.setenv("WORKFLOW_OUTPUT_DIR", str(tmp_path / "generated-workflows"))
    return tmp_path / "generated-workflows"


@pytest.fixture
def stub_llm(monkeypatch):
    """
    Replace the Gemini call. Returns a setter: pass the reply text,
    or an exception instance to raise.
    """
    calls = []

    def install(reply):
        def fake_generate_content(prompt, settings=None):
            calls.append(prompt)
            if isinstance(reply, BaseException):
                raise reply
            return reply

        monkeypatch.setattr(LLMClient, "generate_content", fake_generate_content)
        return calls

    return install
