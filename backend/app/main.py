"""FastAPI application entry point"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.config import settings
from app.api import notes, plans, preferences
from app.database import get_store
from app.utils.monitoring import StructuredLogger, storage_metrics
from contextlib import asynccontextmanager


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan"""
    # Startup
    store = get_store()
    store.initialize()
    app.state.document_store = store
    StructuredLogger.log_event(
        "server_started",
        "Daily Planner server running",
        metadata={"database": str(store.path), "environment": settings.ENVIRONMENT},
    )
    yield
    # Shutdown
    StructuredLogger.log_event("server_stopped", "Daily Planner server stopped")


app = FastAPI(
    title="Daily Planner API",
    description="Notes and hourly plans keyed by calendar day",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors in the {success, message} envelope"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": str(exc.detail)},
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=422,
        content={"success": False, "message": "Invalid request body", "data": jsonable_errors(exc)},
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    return [
        {"loc": list(error.get("loc", [])), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]


# Include routers
app.include_router(notes.router, prefix="/api/notes", tags=["notes"])
app.include_router(plans.router, prefix="/api/plans", tags=["plans"])
app.include_router(preferences.router, prefix="/api/preferences", tags=["preferences"])


@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "Daily Planner API",
        "metrics": storage_metrics.get_metrics(),
    }


@app.get("/")
async def root():
    """Root endpoint"""
    return {"message": "Daily Planner API", "version": "1.0.0"}
