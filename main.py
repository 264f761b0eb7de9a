from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv
from contextlib import asynccontextmanager
import os
import logging
import traceback

from app.config import LaunchConfig, FetchConfig, get_env_presence, is_dev
from app.fixtures import router as fixtures_router

load_dotenv()

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application lifecycle events."""
    launch_config = LaunchConfig.from_env()
    fetch_config = FetchConfig.from_env()
    logger.info(f"[fikstur] Browser profile: {launch_config}")
    logger.info(f"[fikstur] Fixture URL: {fetch_config.url} (timeout {fetch_config.timeout_ms}ms)")

    configured = [name for name, present in get_env_presence().items() if present]
    logger.info(f"[fikstur] Configured env vars: {', '.join(configured) or 'none'}")

    yield


app = FastAPI(title="Karaman FK Fikstür API", version="0.1.0", lifespan=lifespan)


# Error masking middleware
@app.middleware("http")
async def error_masking_middleware(request: Request, call_next):
    """Mask detailed errors in production; show full errors in dev."""
    try:
        response = await call_next(request)
        return response
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unhandled error: {str(e)}")
        content = {"success": False, "error": str(e) or "Internal server error"}
        if is_dev():
            logger.error(traceback.format_exc())
            content["traceback"] = traceback.format_exc()
        return JSONResponse(status_code=500, content=content)


app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()],
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(fixtures_router)


@app.get("/")
async def root():
    return {
        "message": "Karaman FK Fikstür API",
        "endpoints": {
            "fikstur": "/api/fikstur",
            "health": "/health"
        }
    }


@app.get("/health")
async def health():
    return {"status": "OK", "message": "API çalışıyor"}


if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", "3000"))
    logger.info(f"API server listening on http://localhost:{port}")
    logger.info(f"Fixture endpoint: http://localhost:{port}/api/fikstur")
    uvicorn.run(app, host="0.0.0.0", port=port)
