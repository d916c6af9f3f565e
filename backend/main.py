"""TxLens - Helius transaction viewer."""
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from config import settings
from api import router

# Create FastAPI app
app = FastAPI(
    title="TxLens",
    description="Fetch a Solana transaction from Helius and render it as summary, tree, events and flow diagrams",
    version="0.1.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(router, prefix="/api")


@app.on_event("startup")
async def startup():
    """Initialize on startup."""
    logger.info("Starting TxLens API...")
    logger.info(f"Helius endpoint: {settings.helius_base_url}/v0/transactions")


@app.on_event("shutdown")
async def shutdown():
    """Cleanup on shutdown."""
    logger.info("Shutting down TxLens API...")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "TxLens",
        "description": "Helius transaction viewer",
        "docs": "/docs",
        "api": "/api"
    }


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=True
    )
