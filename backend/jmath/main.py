# backend/jmath/main.py
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
import httpx
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from jmath.api.routes import health, tutor
from jmath.core.config import get_settings
from jmath.core.errors import ApiError, INTERNAL_ERROR_MESSAGE

PACKAGE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"
STATIC_DIR = PACKAGE_DIR / "static"

settings = get_settings()


def setup_logging() -> None:
    """Configure root logging for the whole application"""
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else settings.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    # Silence per-request transport logs
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info(f"🚀 Starting {settings.APP_NAME} API")

    if not settings.is_configured:
        logger.warning("⚠️ OPENROUTER_API_KEY not set - tutor endpoints will answer 500")
    else:
        logger.info(f"✅ Using model {settings.OPENROUTER_MODEL}")

    app.state.http_client = httpx.AsyncClient(timeout=settings.OPENROUTER_TIMEOUT)

    yield

    await app.state.http_client.aclose()
    logger.info(f"🛑 Shutting down {settings.APP_NAME} API")


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="AI math tutor: step-by-step solutions, concept explanations, practice problems and concept maps",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Middleware setup
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(tutor.router, prefix=settings.API_PREFIX, tags=["tutor"])
app.include_router(health.router, tags=["health"])
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


@app.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index():
    """Single-page tutor UI"""
    html = (TEMPLATES_DIR / "index.html").read_text(encoding="utf-8")
    return HTMLResponse(html)


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    if exc.status_code >= 500:
        logger.error(f"❌ {request.url.path} failed ({exc.status_code}): {exc.message}")
    else:
        logger.warning(f"⚠️ {request.url.path} rejected ({exc.status_code}): {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Internal Server Error ({request.url.path}): {str(exc)}")
    return JSONResponse(
        status_code=500,
        content={"error": INTERNAL_ERROR_MESSAGE.format(detail=str(exc))}
    )


def main():
    import uvicorn
    uvicorn.run("jmath.main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG)


if __name__ == "__main__":
    main()
