"""FastAPI application serving the agent workflow planner."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from server.logging_setup import setup_logging
from server.plan_routes import router as plan_router
from server.settings import CORS_ORIGINS, HOST, LOG_LEVEL, PORT, VERSION
from server.template_routes import router as template_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging on startup."""
    setup_logging(LOG_LEVEL)
    logger.info("agent workflow planner %s starting, CORS origins: %s", VERSION, CORS_ORIGINS)
    yield


app = FastAPI(
    title="Agent Workflow Planner API",
    description="Turns plain-English workflow descriptions into validated agent plans",
    version=VERSION,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=CORS_ORIGINS != ["*"],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

# include routes
app.include_router(plan_router, prefix="/api")
app.include_router(template_router, prefix="/api")


def _format_validation_error(error: dict) -> str:
    if error["type"] == "description_too_short":
        return error["msg"]
    location = ".".join(str(part) for part in error["loc"] if part != "body")
    return f"{location}: {error['msg']}" if location else error["msg"]


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies as 400 {errors: [...]}."""
    return JSONResponse(
        status_code=400,
        content={"errors": [_format_validation_error(error) for error in exc.errors()]},
    )


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root():
    """Service status and endpoint index."""
    return {
        "status": "ok",
        "version": VERSION,
        "endpoints": {
            "plan": "POST /api/plan",
            "validate": "POST /api/plan/validate",
            "layout": "POST /api/plan/layout",
            "export": "POST /api/plan/export/{json|mermaid|sequence}",
            "templates": "GET /api/templates",
        },
    }


def main() -> None:
    import uvicorn
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    main()
