"""User use cases."""

from .session import (
    GetPrivateDataRequest,
    GetPrivateDataUseCase,
    GetSessionRequest,
    GetSessionUseCase,
    PrivateDataResponse,
    SessionInfo,
    SessionUser,
    UpdateUserImageInput,
    UpdateUserImageRequest,
    UpdateUserImageUseCase,
)

__all__ = [
    "GetPrivateDataRequest",
    "GetPrivateDataUseCase",
    "GetSessionRequest",
    "GetSessionUseCase",
    "PrivateDataResponse",
    "SessionInfo",
    "SessionUser",
    "UpdateUserImageInput",
    "UpdateUserImageRequest",
    "UpdateUserImageUseCase",
]
