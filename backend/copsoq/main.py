"""FastAPI application entry point."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from copsoq.api.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware
from copsoq.api.routes import assessments, cascade, catalog, cohort, metrics, results
from copsoq.core.config import get_settings
from copsoq.core.structured_logging import setup_logging

settings = get_settings()
setup_logging(settings.log_level)

docs_enabled = settings.api_docs_enabled
if docs_enabled is None:
    docs_enabled = settings.environment != "production"

app = FastAPI(
    title="COPSOQ Engine API",
    description="Scoring, risk classification and cascade visibility for COPSOQ-III assessments",
    version="1.0.0",
    docs_url="/api/docs" if docs_enabled else None,
    redoc_url="/api/redoc" if docs_enabled else None,
    openapi_url="/api/openapi.json" if docs_enabled else None,
)

# Middleware configuration (order matters - applied in reverse order)
# 1. Request logging (outermost - logs all requests)
app.add_middleware(RequestLoggingMiddleware)

# 2. Security headers
app.add_middleware(SecurityHeadersMiddleware)

# 3. CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


app.include_router(catalog.router, prefix="/api/catalog", tags=["catalog"])
app.include_router(cascade.router, prefix="/api/cascade", tags=["cascade"])
app.include_router(results.router, prefix="/api/results", tags=["results"])
app.include_router(assessments.router, prefix="/api/assessments", tags=["assessments"])
app.include_router(cohort.router, prefix="/api/cohort", tags=["cohort"])
app.include_router(metrics.router, prefix="/api", tags=["metrics"])
