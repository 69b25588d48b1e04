"""
FastAPI application for the Destinations API.

Serves the destinations catalog plus a landing page and a health check.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from destinations_api import __version__
from destinations_api.catalog import destination_count, is_catalog_loaded, lifespan
from destinations_api.config import get_app_env, get_cors_origins

from .destinations import router as destinations_router
from .middleware import RequestIDMiddleware, RequestLoggingMiddleware
from .schemas import HealthResponse

app = FastAPI(
    title="Destinations API",
    description="Travel destinations catalog",
    version=__version__,
    lifespan=lifespan,
)

# Middleware is applied in reverse registration order: CORS runs outermost
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(RequestIDMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID"],
)

app.include_router(destinations_router)


@app.get("/", response_class=HTMLResponse)
async def root():
    """Landing page"""
    return """
    <!DOCTYPE html>
    <html>
        <head>
            <title>Destinations API</title>
            <style>
                body {
                    font-family: Arial, sans-serif;
                    max-width: 800px;
                    margin: 50px auto;
                    padding: 20px;
                }
                h1 { color: #1B7F79; }
                a { color: #1B7F79; text-decoration: none; }
                a:hover { text-decoration: underline; }
                ul { line-height: 2; }
            </style>
        </head>
        <body>
            <h1>Destinations API</h1>
            <p>Browse the travel destinations catalog.</p>
            <h2>Quick Links</h2>
            <ul>
                <li><a href="/api/destinations">Destinations</a></li>
                <li><a href="/docs">API Documentation (Swagger UI)</a></li>
                <li><a href="/redoc">API Documentation (ReDoc)</a></li>
                <li><a href="/health">Health Check</a></li>
            </ul>
        </body>
    </html>
    """


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint"""
    loaded = is_catalog_loaded()
    return HealthResponse(
        status="healthy",
        service="destinations-api",
        version=__version__,
        environment=get_app_env(),
        catalog_loaded=loaded,
        destination_count=destination_count() if loaded else 0,
    )
