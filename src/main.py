"""Main FastAPI application."""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.v1 import classifications
from src.apimachinery.object_controller import ClientSet
from src.config.config import settings

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for the object controller client."""
    try:
        # Startup: open the shared HTTP connection pool
        app.state.client_set = ClientSet.from_settings(settings)
        yield
    finally:
        # Shutdown: close the connection pool
        if hasattr(app.state, 'client_set'):
            await app.state.client_set.close()

app = FastAPI(
    title="Topology Classification API",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(classifications.router, prefix="/api/v1", tags=["Classifications"])

@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
