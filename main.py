# FILE: main.py
"""
SpecForge Backend - FastAPI Application
Version: 0.1.0

Features:
- Generate a project specification (user stories, grouped tasks, risks) from a goal via an LLM
- Browse the five most recent specifications
- Edit task title/description, move tasks up/down within a story
- Export a specification as markdown
- Health/status probe for backend, database and LLM

Run:
    python main.py          (uses HOST/PORT from the environment)
"""
import logging
from pathlib import Path

from dotenv import load_dotenv

# Load .env FIRST before any other imports that might need env vars
load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

import specforge
from specforge import __version__
from specforge.config import load_settings, require_env_or_exit
from specforge.db import init_engine, init_db, dispose_engine
from specforge.error_handlers import register_error_handlers
from specforge.llm.generator import init_generation_client, close_generation_client
from specforge.routers.status import router as status_router
from specforge.specs.router import router as specs_router

settings = load_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
)
logger = logging.getLogger("specforge")

STATIC_DIR = Path(specforge.__file__).resolve().parent / "static"

app = FastAPI(
    title="SpecForge",
    version=__version__,
    description="Turn a product goal into user stories, grouped tasks and risks",
)

# ====== CORS ======

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)


# ====== LIFECYCLE ======

@app.on_event("startup")
def on_startup():
    logger.info("[startup] Checking environment variables...")
    require_env_or_exit()  # Exits if DATABASE_URL or OPENAI_API_KEY is missing

    init_engine(settings.database_url)
    init_db()
    logger.info("[startup] Database: [OK] tables ready")

    init_generation_client(settings)
    logger.info("[startup] LLM client: [OK] model=%s", settings.openai_model)


@app.on_event("shutdown")
def on_shutdown():
    logger.info("[shutdown] Closing LLM client and database engine...")
    close_generation_client()
    dispose_engine()


# ====== ROUTERS ======

app.include_router(specs_router)
app.include_router(status_router)


# ====== STATIC FILES ======

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


@app.get("/", include_in_schema=False)
def read_index():
    """Serve static UI."""
    return FileResponse(str(STATIC_DIR / "index.html"))


if __name__ == "__main__":
    import uvicorn

    require_env_or_exit()
    logger.info("Server listening on http://%s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
