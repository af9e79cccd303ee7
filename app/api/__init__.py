"""API router aggregation."""

from fastapi import APIRouter

from app.api.endpoints import (
    auth,
    client_logs,
    client_workouts,
    clients,
    health,
    templates,
    users,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, tags=["auth"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(templates.router, prefix="/templates", tags=["templates"])
api_router.include_router(clients.router, prefix="/clients", tags=["clients"])
api_router.include_router(client_logs.router, prefix="/clients", tags=["client-logs"])
api_router.include_router(client_workouts.router, prefix="/client-workouts", tags=["client-workouts"])
