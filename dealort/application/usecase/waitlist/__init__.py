"""Waitlist use cases."""

from .waitlist import (
    CheckWaitlistInput,
    CheckWaitlistResponse,
    CheckWaitlistUseCase,
    JoinWaitlistInput,
    JoinWaitlistRequest,
    JoinWaitlistUseCase,
)

__all__ = [
    "CheckWaitlistInput",
    "CheckWaitlistResponse",
    "CheckWaitlistUseCase",
    "JoinWaitlistInput",
    "JoinWaitlistRequest",
    "JoinWaitlistUseCase",
]
