"""
Quiz Manager Server

FastAPI server exposing:
- Quiz import/export and deletion
- Quiz-taking session (one attempt at a time)
- Attempt history statistics
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import app_state
from quiz_manager.config import get_config
from quiz_manager.router import router as quiz_router

# =============================================================================
# LOGGING
# =============================================================================

config = get_config()
logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("server")


# =============================================================================
# FASTAPI APP
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage app lifecycle."""
    logger.info("Starting Quiz Manager...")
    app_state.init_state(config)
    yield
    app_state.cleanup()
    logger.info("Quiz Manager stopped")


app = FastAPI(
    title="Quiz Manager",
    description="Quiz import, sessions, grading and statistics",
    version="0.1.0",
    lifespan=lifespan
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://localhost:8001",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:8001",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(quiz_router)


@app.get("/health")
async def health():
    return {"status": "ok"}


# =============================================================================
# MAIN
# =============================================================================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8001)
