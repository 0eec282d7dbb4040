"""
FastAPI server for Behavior Core
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routes import router
from .. import __version__
from ..core.config import Config

app = FastAPI(title="Behavior Core API", version=__version__)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, restrict this
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routes
app.include_router(router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": "Behavior Core",
        "version": __version__,
        "status": "running"
    }


@app.get("/health")
async def health():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "max_steps": Config.MAX_STEPS
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=Config.API_HOST, port=Config.API_PORT)
