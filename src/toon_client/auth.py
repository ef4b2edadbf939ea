"""Authentication module for Toon API."""

import logging
from dataclasses import replace

from .connection import ToonConnector
from .const import ENDPOINT_AUTH_START, ENDPOINT_LOGIN, ENDPOINT_LOGOUT
from .exceptions import ToonAuthError, ToonError
from .models import Credentials, Session
from .utils import generate_nonce

_LOGGER = logging.getLogger(__name__)


class ToonAuth:
    """Performs the login handshake and the logout call."""

    def __init__(self, connector: ToonConnector) -> None:
        self.connector = connector

    async def async_login(self, credentials: Credentials) -> Session:
        """Log in and authorize the first agreement.

        The login response carries the client identifiers and the list of
        agreements. The first agreement is then authorized with auth/start,
        after which a fresh nonce is attached to the session. A session is
        only returned once both steps succeeded.
        """
        _LOGGER.debug("Logging in as %s", credentials.username)
        data = await self.connector.get_json(
            ENDPOINT_LOGIN,
            {"username": credentials.username, "password": credentials.password},
        )
        session = Session.from_api(data)

        if data.get("success") is False or not session.client_id:
            raise ToonAuthError(f"Login failed for {credentials.username}")

        agreement = session.agreement
        if agreement is None:
            raise ToonAuthError("Login returned no agreements")

        if len(session.agreements) > 1:
            _LOGGER.debug(
                "%d agreements found, using %s", len(session.agreements), agreement.agreement_id
            )

        await self.connector.get_text(
            ENDPOINT_AUTH_START,
            {
                "clientId": session.client_id,
                "clientIdChecksum": session.client_id_checksum,
                "agreementId": agreement.agreement_id,
                "agreementIdChecksum": agreement.agreement_id_checksum,
            },
        )

        session = replace(session, random=generate_nonce())
        _LOGGER.debug("Session established for agreement %s", agreement.agreement_id)
        return session

    async def async_logout(self, session: Session) -> None:
        """Invalidate the session server-side. Failures are only logged."""
        try:
            await self.connector.get_text(
                ENDPOINT_LOGOUT,
                {
                    "clientId": session.client_id,
                    "clientIdChecksum": session.client_id_checksum,
                    "random": session.random,
                },
            )
        except ToonError as e:
            _LOGGER.warning("Logout failed: %s", e)
        else:
            _LOGGER.debug("Logged out")
