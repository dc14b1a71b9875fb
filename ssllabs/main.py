from fastapi import FastAPI
from contextlib import asynccontextmanager
from ssllabs.api.routes import router
from ssllabs.core.config import settings

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    Nothing to initialize; just report startup and shutdown.
    """
    # Startup
    print("Starting SSL Labs Report Fetcher...")
    if settings.USE_MOCK:
        print("USE_MOCK enabled - SSL Labs responses are simulated")

    yield

    # Shutdown
    print("Shutting down SSL Labs Report Fetcher...")

app = FastAPI(
    title="SSL Labs Report Fetcher",
    description="API for fetching SSL Labs reports and extracting their result tables",
    version="1.0.0",
    lifespan=lifespan
)

# Include API routes
app.include_router(router)

@app.get("/")
async def root():
    """Root endpoint with basic info"""
    return {
        "service": "SSL Labs Report Fetcher",
        "version": "1.0.0",
        "endpoints": {
            "ssllabs": "POST /ssllabs"
        }
    }
