"""Transactional email adapter."""

from .resend import MockEmailClient, ResendEmailClient

__all__ = ["ResendEmailClient", "MockEmailClient"]
