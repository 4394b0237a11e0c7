# workflow_generator/api/main.py

from fastapi import FastAPI

from workflow_generator.core.config import get_settings
from workflow_generator.utils.logger import init_logger
from workflow_generator.api.routes.generate import router as generate_router


init_logger(get_settings().log_level)

app = FastAPI(
    title="n8n Workflow Generator",
    version="1.0.0",
    openapi_url="/api/v1/openapi.json",
    docs_url="/api/v1/docs"
)

app.include_router(generate_router)  # /api/v1/workflows/generate, /api/v1/nodes/workflow-generator
