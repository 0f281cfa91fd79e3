"""
Glovebox API - Routes Module
All API endpoints organized by resource
"""

from fastapi import APIRouter

# Import all routers
from app.routes.check_notifications import router as check_notifications_router

# Main router
api_router = APIRouter()

# Include all routers
api_router.include_router(check_notifications_router)

__all__ = ["api_router"]
