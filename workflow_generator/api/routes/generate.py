# workflow_generator/api/routes/generate.py

import logging
from typing import Any

from fastapi import APIRouter, HTTPException

from workflow_generator.core.errors import WorkflowGenerationError
from workflow_generator.core.models import GenerateRequest
from workflow_generator.nodes.workflow_generator_node import WorkflowGeneratorNode

router = APIRouter(prefix="/api/v1", tags=["v1"])

node = WorkflowGeneratorNode()


class RequestContext:
    """
    Execution context for one HTTP request: node parameters come from the body.
    """

    def __init__(self, req: GenerateRequest):
        self._params = {
            "prompt": req.prompt,
            "outputDirectory": req.output_directory or "",
        }
        self.logger = logging.getLogger("workflow_generator.node")

    def get_node_parameter(self, name: str, item_index: int = 0, default: Any = None) -> Any:
        return self._params.get(name, default)


@router.get("/nodes/workflow-generator")
async def describe_node():
    return node.description


@router.post("/workflows/generate")
def generate_workflow(req: GenerateRequest):
    """
    Run the generator node once and return its single output item.
    Generation failures come back as 500 with the kind-specific message.
    """
    try:
        batches = node.execute(RequestContext(req))
    except WorkflowGenerationError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e

    return batches[0][0]["json"]
