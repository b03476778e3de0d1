from fastapi import APIRouter
from app.api.endpoints import asteroids, tools

api_router = APIRouter()

api_router.include_router(asteroids.router, prefix="/asteroids", tags=["asteroids"])
api_router.include_router(tools.router, prefix="/tools", tags=["tools"])
