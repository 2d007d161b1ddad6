"""Verification code storage module"""

from app.services.verification.verification_store import VerificationStore

__all__ = ["VerificationStore"]
