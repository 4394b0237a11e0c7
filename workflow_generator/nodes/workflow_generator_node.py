# workflow_generator/nodes/workflow_generator_node.py

from __future__ import annotations

from typing import Any, Dict, List

from workflow_generator.agents.workflow_generator_agent import WorkflowGeneratorAgent
from workflow_generator.core.errors import WorkflowGenerationError


class WorkflowGeneratorNode:
    """
    Host-facing node. The host passes an execution context exposing:
      - get_node_parameter(name, item_index, default)
      - logger (info / warning / error)
    and receives one output batch holding exactly one item.
    """

    description: Dict[str, Any] = {
        "displayName": "Workflow Generator (AI)",
        "name": "workflowGeneratorAi",
        "icon": "fa:magic",
        "group": ["transform"],
        "version": 1,
        "description": "Generates an n8n workflow from a text prompt using an LLM.",
        "defaults": {"name": "Workflow Generator (AI)"},
        "inputs": ["main"],
        "outputs": ["main"],
        "properties": [
            {
                "displayName": "Describe the workflow you want to build",
                "name": "prompt",
                "type": "string",
                "default": "",
                "placeholder": 'e.g., When a webhook is called, send "Hello World" to Slack.',
                "required": True,
                "typeOptions": {"rows": 5},
            },
            {
                "displayName": "Output Directory",
                "name": "outputDirectory",
                "type": "string",
                "default": "",
                "placeholder": "Leave empty to use WORKFLOW_OUTPUT_DIR",
                "required": False,
            },
        ],
    }

    def execute(self, context) -> List[List[Dict[str, Any]]]:
        user_prompt = context.get_node_parameter("prompt", 0, "") or ""
        output_dir = context.get_node_parameter("outputDirectory", 0, "") or None

        try:
            result = WorkflowGeneratorAgent.generate(user_prompt, output_dir=output_dir)
        except WorkflowGenerationError as e:
            context.logger.error(f"Workflow generation failed: {e}")
            raise

        if result.file_saved:
            context.logger.info(result.save_message)
        else:
            context.logger.warning(result.save_message)

        return [[{"json": result.to_json_item()}]]
