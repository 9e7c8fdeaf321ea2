"""Interfaces/abstracciones del Core.

- Define contratos (Protocol) que implementan adaptadores concretos.
- El Core depende de estas abstracciones, no de httpx ni del disco.
"""

from core.interfaces.credential_store import CredentialStore
from core.interfaces.lms import LMSApi

__all__ = [
    "CredentialStore",
    "LMSApi",
]
