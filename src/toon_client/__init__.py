"""Toon API Client."""

from .api import ToonClient, open_session
from .auth import ToonAuth
from .connection import ToonConnector
from .exceptions import (
    ToonAuthError,
    ToonConfigError,
    ToonConnectionError,
    ToonDecodeError,
    ToonError,
    ToonNotFoundError,
    ToonResponseError,
    ToonServerError,
    ToonUnsupportedError,
    ToonValidationError,
)
from .models import Agreement, Credentials, Session, ThermostatInfo, ThermostatState

__all__ = [
    "Agreement",
    "Credentials",
    "Session",
    "ThermostatInfo",
    "ThermostatState",
    "ToonAuth",
    "ToonAuthError",
    "ToonClient",
    "ToonConfigError",
    "ToonConnectionError",
    "ToonConnector",
    "ToonDecodeError",
    "ToonError",
    "ToonNotFoundError",
    "ToonResponseError",
    "ToonServerError",
    "ToonUnsupportedError",
    "ToonValidationError",
    "open_session",
]
