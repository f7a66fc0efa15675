"""Like use cases."""

from .toggle_like import GetLikeStateUseCase, LikeRequest, LikeResponse, ToggleLikeUseCase

__all__ = [
    "GetLikeStateUseCase",
    "LikeRequest",
    "LikeResponse",
    "ToggleLikeUseCase",
]
