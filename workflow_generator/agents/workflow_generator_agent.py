# workflow_generator/agents/workflow_generator_agent.py

from __future__ import annotations

import json
import logging
import os
import re
from typing import Any, Optional, Tuple

import openai

from workflow_generator.core.config import Settings, get_settings
from workflow_generator.core.errors import (
    InvalidCredentialError,
    MalformedOutputError,
    ModelUnavailableError,
    WorkflowGenerationError,
)
from workflow_generator.core.models import GenerationResult
from workflow_generator.integrations.llm_client import LLMClient
from workflow_generator.utils.helpers import dedent_and_strip, safe_file_stamp

logger = logging.getLogger(__name__)

_PROMPT_SLOT = "{user_prompt}"

MASTER_PROMPT = dedent_and_strip("""
    You are an expert n8n workflow generator. Your task is to convert the user's plain text request into a valid n8n workflow JSON object.
    The final output MUST be ONLY the JSON object, with no other text, comments, or markdown "json" tags before or after it.
    The JSON must have two top-level keys: "nodes" and "connections".
    Always start the workflow with a trigger node, like "n8n-nodes-base.manualTrigger" or "n8n-nodes-base.webhook".
    Do not try to guess credentials; leave the "credentials" block empty.
    EXAMPLE:
    USER PROMPT: "Create a workflow that sends 'hello world' to the 'general' channel in Slack when I start it manually."
    YOUR JSON OUTPUT:
    {
    "nodes": [
        { "parameters": {}, "id": "f0ed5a53-5523-41a4-9961-a47ad43e26a3", "name": "Start", "type": "n8n-nodes-base.manualTrigger", "typeVersion": 1, "position": [820, 300] },
        { "parameters": { "channel": "general", "text": "hello world" }, "id": "e6f49129-844c-4a11-9a29-07f0f622919d", "name": "Slack", "type": "n8n-nodes-base.slack", "typeVersion": 2, "position": [1040, 300], "credentials": {} }
    ],
    "connections": {
        "Start": { "main": [ [ { "node": "Slack", "type": "main", "index": 0 } ] ] }
    }
    }
    --- END OF EXAMPLES ---
    Now, generate the JSON for the following user request.
    USER PROMPT: "{user_prompt}"
    YOUR JSON OUTPUT:
""")

# ```json (any case) and bare ```; a word after any other ``` is content
_FENCE = re.compile(r"```(?:json)?", re.IGNORECASE)

FILE_PREFIX = "n8n-workflow-"


class WorkflowGeneratorAgent:
    """
    Turns a plain-text request into an n8n workflow:

      1) compose_prompt()      embed the request in the master prompt
      2) LLMClient             one Gemini call, no retries
      3) parse_workflow()      strip code fences and json.loads
      4) save_workflow()       pretty-print to <output_dir>/n8n-workflow-<stamp>.json
      5) GenerationResult      returned to the host

    Steps 2 and 3 are fatal on failure. A failed save only flips fileSaved.
    """

    # ---------------------------
    # Prompt
    # ---------------------------
    @staticmethod
    def compose_prompt(user_prompt: str) -> str:
        return MASTER_PROMPT.replace(_PROMPT_SLOT, user_prompt or "")

    # ---------------------------
    # Response handling
    # ---------------------------
    @staticmethod
    def sanitize_response(text: str) -> str:
        """
        Remove every code fence marker, wherever it appears, then trim.
        """
        return _FENCE.sub("", text or "").strip()

    @staticmethod
    def parse_workflow(text: str) -> Any:
        cleaned = WorkflowGeneratorAgent.sanitize_response(text)
        try:
            return json.loads(cleaned)
        except json.JSONDecodeError as e:
            raise MalformedOutputError(str(e)) from e

    @staticmethod
    def classify_error(error: Exception) -> WorkflowGenerationError:
        """
        Map a remote-call failure onto the error taxonomy.
        Status classes from the openai client win; the message substrings
        are a best-effort fallback for errors that carry no status.
        """
        if isinstance(error, WorkflowGenerationError):
            return error

        message = str(error)
        if isinstance(error, openai.NotFoundError):
            return ModelUnavailableError(message)
        if isinstance(error, (openai.AuthenticationError, openai.PermissionDeniedError)):
            return InvalidCredentialError(message)
        if "models/" in message:
            return ModelUnavailableError(message)
        if "API key" in message:
            return InvalidCredentialError(message)
        return WorkflowGenerationError(message)

    # ---------------------------
    # Persistence
    # ---------------------------
    @staticmethod
    def build_file_name(stamp: Optional[str] = None, attempt: int = 0) -> str:
        suffix = f"-{attempt}" if attempt else ""
        return f"{FILE_PREFIX}{stamp or safe_file_stamp()}{suffix}.json"

    @staticmethod
    def save_workflow(workflow: Any, output_dir: str) -> Tuple[bool, str, str, str]:
        """
        Write the workflow as two-space indented JSON.
        Never overwrites: a name already taken in the same millisecond gets
        a -1, -2, ... suffix.
        Returns (saved, full_path, file_name, message) and never raises on
        a bad or unwritable path.
        """
        stamp = safe_file_stamp()
        attempt = 0
        file_name = WorkflowGeneratorAgent.build_file_name(stamp)
        full_path = os.path.join(output_dir, file_name)

        try:
            if not os.path.isdir(output_dir):
                os.makedirs(output_dir, exist_ok=True)
                logger.info("Created directory: %s", output_dir)

            while True:
                try:
                    f = open(full_path, "x", encoding="utf-8")
                    break
                except FileExistsError:
                    attempt += 1
                    file_name = WorkflowGeneratorAgent.build_file_name(stamp, attempt)
                    full_path = os.path.join(output_dir, file_name)

            with f:
                json.dump(workflow, f, indent=2, ensure_ascii=False)
        except (OSError, ValueError) as e:
            message = f"❌ Failed to save workflow file: {e}"
            logger.warning(message)
            return False, full_path, file_name, message

        message = f"✅ Workflow successfully saved to: {full_path}"
        logger.info(message)
        return True, full_path, file_name, message

    # ---------------------------
    # Public entrypoint
    # ---------------------------
    @staticmethod
    def generate(
        user_prompt: str,
        output_dir: Optional[str] = None,
        settings: Optional[Settings] = None,
    ) -> GenerationResult:
        settings = settings or get_settings()
        user_prompt = user_prompt or ""
        master_prompt = WorkflowGeneratorAgent.compose_prompt(user_prompt)

        try:
            raw = LLMClient.generate_content(master_prompt, settings)
        except Exception as e:
            err = WorkflowGeneratorAgent.classify_error(e)
            logger.error("Gemini API error: %s", err)
            if err is e:
                raise
            raise err from e

        try:
            workflow = WorkflowGeneratorAgent.parse_workflow(raw)
        except MalformedOutputError as e:
            logger.error("Gemini returned unparseable output: %s", e)
            raise

        directory = os.path.expanduser(output_dir or settings.output_dir)
        saved, full_path, file_name, message = WorkflowGeneratorAgent.save_workflow(workflow, directory)

        return GenerationResult(
            autopaste=workflow,
            workflow=workflow,
            file_saved=saved,
            saved_to_path=full_path,
            file_name=file_name,
            save_message=message,
            directory=directory,
            instructions=(
                f"File saved successfully! You can import it from: {full_path}"
                if saved
                else "File save failed. Check the logs for error details."
            ),
            original_prompt=user_prompt,
        )
