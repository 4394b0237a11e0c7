# workflow_generator/core/errors.py

from __future__ import annotations


class WorkflowGenerationError(RuntimeError):
    """
    Fatal failure of a generate() call. The message prefix tells callers
    which kind of failure happened; subclasses carry the same information
    as a type.
    """

    prefix = "Failed to generate workflow."

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"{self.prefix} Error: {detail}")


class ModelUnavailableError(WorkflowGenerationError):
    prefix = "Model not available. Try using 'gemini-1.5-flash' or 'gemini-1.5-pro'."


class InvalidCredentialError(WorkflowGenerationError):
    prefix = "Invalid API key. Please check your Gemini API key."


class MalformedOutputError(WorkflowGenerationError):
    prefix = "Failed to parse AI response as JSON. The AI might have returned invalid JSON."
