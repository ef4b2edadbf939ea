"""Toon API Client."""

import logging
import math
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Dict, Optional

from .auth import ToonAuth
from .connection import ToonConnector
from .const import ENDPOINT_SET_POINT, ENDPOINT_STATE
from .exceptions import ToonResponseError, ToonUnsupportedError, ToonValidationError
from .models import Credentials, Session, ThermostatInfo, ThermostatState
from .utils import encode_temperature

_LOGGER = logging.getLogger(__name__)


class ToonClient:
    """Client for the authenticated part of the Toon API."""

    def __init__(self, auth: ToonAuth, session: Session) -> None:
        """Initialize the client with an authorized session."""
        self.auth = auth
        self.session = session

    @property
    def connector(self) -> ToonConnector:
        return self.auth.connector

    def _session_params(self) -> Dict[str, str]:
        return {
            "clientId": self.session.client_id,
            "clientIdChecksum": self.session.client_id_checksum,
            "random": self.session.random,
        }

    async def get_thermostat_state(self) -> ThermostatState:
        """Fetch the current thermostat state."""
        data = await self.connector.get_json(ENDPOINT_STATE, self._session_params())
        state = ThermostatState.from_api(data)
        if not state.success:
            raise ToonResponseError("Thermostat state request was not successful")
        return state

    async def get_thermostat_info(self) -> ThermostatInfo:
        """Fetch the current thermostat info."""
        state = await self.get_thermostat_state()
        return state.thermostat_info

    async def set_temperature(self, degrees: float) -> Optional[str]:
        """Set the target temperature in degrees.

        A value of 0 is a no-op and returns None. Negative values are
        rejected. Otherwise the raw response body is returned unparsed.
        """
        if not math.isfinite(degrees) or degrees < 0:
            raise ToonValidationError(f"Invalid temperature: {degrees}")
        if degrees == 0:
            _LOGGER.debug("Setpoint 0 requested, nothing to do")
            return None

        value = encode_temperature(degrees)
        params = {
            "clientId": self.session.client_id,
            "clientIdChecksum": self.session.client_id_checksum,
            "value": value,
            "random": self.session.random,
        }
        _LOGGER.debug("Setting temperature to %s (%d)", degrees, value)
        return await self.connector.get_text(ENDPOINT_SET_POINT, params)

    async def get_program_state(self) -> None:
        raise ToonUnsupportedError("Program state query is not supported")

    async def get_power_usage(self) -> None:
        raise ToonUnsupportedError("Power usage query is not supported")

    async def logout(self) -> None:
        """Invalidate the session (best effort)."""
        await self.auth.async_logout(self.session)


@asynccontextmanager
async def open_session(
    connector: ToonConnector, credentials: Credentials
) -> AsyncGenerator[ToonClient, None]:
    """
    Logs in, yields a ToonClient and always logs out afterwards.
    """
    auth = ToonAuth(connector)
    session = await auth.async_login(credentials)
    client = ToonClient(auth, session)
    try:
        yield client
    finally:
        await client.logout()
