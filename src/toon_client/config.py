"""Credential loading for the Toon CLI."""

import logging
import os
import stat
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from .const import DEFAULT_CONFIG_FILE, ENV_PASSWORD, ENV_USERNAME
from .exceptions import ToonConfigError
from .models import Credentials

_LOGGER = logging.getLogger(__name__)

REQUIRED_MODE = 0o600


def check_permissions(path: Path) -> None:
    """Refuse config files that anyone but the owner can read or write."""
    try:
        st = path.stat()
    except FileNotFoundError:
        raise ToonConfigError(f"Configuration file {path} does not exist")
    except OSError as e:
        raise ToonConfigError(f"Could not open {path} for reading: {e}") from e

    if not stat.S_ISREG(st.st_mode):
        raise ToonConfigError(f"Configuration file {path} is not a regular file")

    mode = stat.S_IMODE(st.st_mode)
    if mode != REQUIRED_MODE:
        raise ToonConfigError(
            f"Configuration file {path} has mode {mode:o}, expected {REQUIRED_MODE:o} (owner read/write only)"
        )


def load_config(path: Union[str, Path]) -> Dict[str, Any]:
    """Load a YAML config file after checking its permissions."""
    path = Path(path).expanduser()
    check_permissions(path)

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ToonConfigError(f"Could not read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ToonConfigError(f"Could not parse {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ToonConfigError(f"Configuration file {path} must contain a mapping")
    return data


def resolve_credentials(
    username: Optional[str] = None,
    password: Optional[str] = None,
    config_file: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Credentials:
    """Combine flags, environment and config file into Credentials.

    Flags win over environment variables, which win over the file. The
    default config file is only consulted when no file was given and the
    flags and environment together do not supply both values.
    """
    env = os.environ if environ is None else environ
    username = username or env.get(ENV_USERNAME) or None
    password = password or env.get(ENV_PASSWORD) or None

    if config_file is None and not (username and password):
        config_file = DEFAULT_CONFIG_FILE
        _LOGGER.debug("Using default configuration %s", config_file)

    if config_file is not None:
        config = load_config(config_file)
        file_username = config.get("username")
        file_password = config.get("password")
        for key, value in (("username", file_username), ("password", file_password)):
            if value is not None and not isinstance(value, str):
                raise ToonConfigError(f"'{key}' in {config_file} must be a string")
        username = username or file_username
        password = password or file_password

    if not username or not password:
        raise ToonConfigError("Username and password required")

    return Credentials(username=username, password=password)
