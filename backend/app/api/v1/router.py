"""
API Router v1

Combines all route modules.
"""

from fastapi import APIRouter

from app.api.v1.routes import normalize, standards

api_router = APIRouter()

api_router.include_router(normalize.router, prefix="/normalize", tags=["Normalization"])
api_router.include_router(standards.router, prefix="/standards", tags=["Standards"])
