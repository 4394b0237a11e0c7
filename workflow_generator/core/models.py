# workflow_generator/core/models.py

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


# ===== GENERATE API SCHEMA =====

class GenerateRequest(BaseModel):
    prompt: str = Field("", description="Natural-language description of the workflow to build")
    output_directory: Optional[str] = Field(
        None, description="Overrides WORKFLOW_OUTPUT_DIR for this request"
    )


# ===== RESULT RECORD =====

class GenerationResult(BaseModel):
    """
    One generator run. Field aliases are the keys the host sees downstream,
    so always serialize with to_json_item().
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    autopaste: Any = Field(..., alias="n8n-autopaste")
    workflow: Any
    file_saved: bool = Field(..., alias="fileSaved")
    saved_to_path: str = Field(..., alias="savedToPath")
    file_name: str = Field(..., alias="fileName")
    save_message: str = Field(..., alias="saveMessage")
    directory: str
    instructions: str
    original_prompt: str = Field(..., alias="originalPrompt")

    def to_json_item(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
