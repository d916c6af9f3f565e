"""API package."""
from fastapi import APIRouter
from .routes import router as transactions_router, health_router

# Combine all routers
router = APIRouter()
router.include_router(transactions_router)
router.include_router(health_router)

__all__ = ["router"]
