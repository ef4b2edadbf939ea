"""CLI for Toon Client."""

import argparse
import asyncio
import json
import logging
import math
import sys
from typing import List, Optional

import aiohttp

from toon_client import (
    Credentials,
    ThermostatInfo,
    ToonClient,
    ToonConfigError,
    ToonConnector,
    ToonError,
    ToonUnsupportedError,
    ToonValidationError,
    open_session,
)
from toon_client.config import resolve_credentials
from toon_client.const import DEFAULT_TIMEOUT

EXIT_ERROR = 1
EXIT_CONFIG = 2
EXIT_UNSUPPORTED = 3
EXIT_INTERRUPTED = 130

logging.basicConfig(level=logging.INFO, format='%(message)s')
_LOGGER = logging.getLogger(__name__)


def format_thermostat_info(info: ThermostatInfo) -> List[str]:
    """Human readable lines for the temperature query."""
    return [
        f"Current temperature: {info.current_temperature}",
        f"Active state: {info.active_state_label}",
    ]


async def create_session(args) -> aiohttp.ClientSession:
    """Create aiohttp session with optional insecure SSL."""
    timeout = aiohttp.ClientTimeout(total=args.timeout)
    if args.insecure:
        print("WARNING: SSL verification disabled via --insecure")
        connector = aiohttp.TCPConnector(ssl=False)
        return aiohttp.ClientSession(connector=connector, timeout=timeout)
    return aiohttp.ClientSession(timeout=timeout)


async def cmd_temp(client: ToonClient, args) -> None:
    """Print current temperature and active state."""
    info = await client.get_thermostat_info()
    if args.json:
        print(json.dumps(info.to_dict(), indent=2))
        return
    for line in format_thermostat_info(info):
        print(line)


async def cmd_program(client: ToonClient, args) -> None:
    await client.get_program_state()


async def cmd_power(client: ToonClient, args) -> None:
    await client.get_power_usage()


async def cmd_set(client: ToonClient, args) -> None:
    """Change the setpoint and print the raw confirmation."""
    result = await client.set_temperature(args.set)
    if result is not None:
        print(result)


async def run(args, credentials: Credentials) -> None:
    """Log in, run the selected operations in order, always log out."""
    async with await create_session(args) as websession:
        connector = ToonConnector(websession, timeout=args.timeout)
        async with open_session(connector, credentials) as client:
            if args.temp:
                await cmd_temp(client, args)
            if args.program:
                await cmd_program(client, args)
            if args.power:
                await cmd_power(client, args)
            if args.set > 0:
                await cmd_set(client, args)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Toon thermostat CLI")
    parser.add_argument("--config", help="YAML configuration file with username and password")
    parser.add_argument("--username", help="Username")
    parser.add_argument("--password", help="Password")
    parser.add_argument("--temp", action="store_true", help="Get current temperature in Celsius")
    parser.add_argument("--program", action="store_true", help="Get current program state")
    parser.add_argument("--power", action="store_true", help="Get current power usage in Watts")
    parser.add_argument("--set", type=float, default=0.0, metavar="DEGREES", help="Set temperature")
    parser.add_argument("--json", action="store_true", help="Output thermostat info as JSON")
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT, help="Request timeout in seconds")
    parser.add_argument("--insecure", action="store_true", help="Disable SSL verification")
    parser.add_argument("--debug", action="store_true", help="Log requests and raw responses")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        if not math.isfinite(args.set) or args.set < 0:
            raise ToonValidationError(f"Invalid temperature: {args.set}")
        credentials = resolve_credentials(args.username, args.password, args.config)
        asyncio.run(run(args, credentials))
    except (ToonConfigError, ToonValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_CONFIG)
    except ToonUnsupportedError as e:
        print(f"Not supported: {e}", file=sys.stderr)
        sys.exit(EXIT_UNSUPPORTED)
    except ToonError as e:
        _LOGGER.error("Error: %s", e)
        sys.exit(EXIT_ERROR)
    except KeyboardInterrupt:
        sys.exit(EXIT_INTERRUPTED)


if __name__ == "__main__":
    main()
