import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

from app.config import get_settings
from app.database import engine, Base
from app.exceptions import AppError
from app.routers import auth, thumbnail, user
from app.services.storage import storage

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("%s starting up", settings.app_name)
    # Create database tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # Ensure the image staging directory exists
    await storage.ensure_storage_exists()

    yield

    logger.info("%s shutting down", settings.app_name)
    await engine.dispose()


app = FastAPI(
    title=settings.app_name,
    description="""
    ## AI Thumbnail Generation API

    This API allows you to:

    1. **Create an account** and log in with a session cookie
    2. **Generate video thumbnails** from a title, a style preset, a color scheme and optional details
    3. **Manage your gallery**: list, view and delete generated thumbnails

    ### Styles:
    - Bold & Graphic
    - Tech/Futuristic
    - Minimalist
    - Photorealistic
    - Illustrated

    ### Color schemes:
    vibrant, sunset, forest, neon, purple, monochrome, ocean, pastel
    """,
    version="1.0.0",
    lifespan=lifespan,
)

# Session cookie carrying the logged-in user id
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.secret_key,
    session_cookie=settings.session_cookie,
    max_age=settings.session_max_age,
    same_site="lax",
    https_only=settings.session_https_only,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE"],
    allow_headers=["Content-Type"],
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"message": str(exc.detail)})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    return JSONResponse(status_code=400, content={"message": message})


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"message": str(exc) if settings.debug else "Internal server error"},
    )


# Include routers
app.include_router(auth.router, prefix="/api")
app.include_router(thumbnail.router, prefix="/api")
app.include_router(user.router, prefix="/api")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": settings.app_name}


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "service": settings.app_name,
        "version": "1.0.0",
        "docs": "/docs",
        "endpoints": {
            "register": "POST /api/auth/register",
            "login": "POST /api/auth/login",
            "logout": "POST /api/auth/logout",
            "verify": "GET /api/auth/verify",
            "generate_thumbnail": "POST /api/thumbnail/generate",
            "delete_thumbnail": "DELETE /api/thumbnail/delete/{thumbnail_id}",
            "list_thumbnails": "GET /api/user/thumbnails",
            "get_thumbnail": "GET /api/user/thumbnail/{thumbnail_id}",
        }
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, log_level=settings.log_level.lower())
