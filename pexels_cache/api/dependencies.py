"""Request-scoped access to the application's PhotoRepository"""

from fastapi import Request

from ..services import PhotoRepository


def get_repository(request: Request) -> PhotoRepository:
    return request.app.state.repository
