"""Constants for Toon API Client."""

API_BASE_URL = "https://toonopafstand.eneco.nl/toonMobileBackendWeb/client/"

# Endpoints
ENDPOINT_LOGIN = "login"
ENDPOINT_AUTH_START = "auth/start"
ENDPOINT_LOGOUT = "auth/logout"
ENDPOINT_STATE = "auth/retrieveToonState"
ENDPOINT_SET_POINT = "auth/setPoint"

# Thermostat program states (activeState codes)
STATE_LABELS = {
    0: "comfort",
    1: "thuis",
    2: "slapen",
    3: "weg",
}

DEFAULT_TIMEOUT = 30
DEFAULT_CONFIG_FILE = "~/.toon-client.conf"

ENV_USERNAME = "TOON_USERNAME"
ENV_PASSWORD = "TOON_PASSWORD"
