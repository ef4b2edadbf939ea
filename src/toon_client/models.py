"""Data models for Toon API objects."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .const import STATE_LABELS
from .exceptions import ToonDecodeError


def _str(value: Any) -> str:
    """Identifiers come back as strings or numbers depending on the backend."""
    if value is None:
        return ""
    return str(value)


def _int(data: Dict[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None or value == "":
        return 0
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ToonDecodeError(f"Field '{key}' is not an integer: {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ToonDecodeError(f"Field '{key}' is not an integer: {value!r}") from e


@dataclass(frozen=True)
class Credentials:
    """Username and password for the login step."""

    username: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class Agreement:
    """Binding between the account and one installation."""

    agreement_id: str
    agreement_id_checksum: str
    city: str = ""
    display_common_name: str = ""
    display_hardware_version: str = ""
    display_software_version: str = ""
    house_number: str = ""
    is_toon_solar: bool = False
    postal_code: str = ""
    street: str = ""

    @property
    def address(self) -> str:
        """Single line address, empty parts skipped."""
        street = " ".join(p for p in (self.street, self.house_number) if p)
        town = " ".join(p for p in (self.postal_code, self.city) if p)
        return ", ".join(p for p in (street, town) if p)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Agreement":
        """Factory method to create agreement from API response."""
        return cls(
            agreement_id=_str(data.get("agreementId")),
            agreement_id_checksum=_str(data.get("agreementIdChecksum")),
            city=_str(data.get("city")),
            display_common_name=_str(data.get("displayCommonName")),
            display_hardware_version=_str(data.get("displayHardwareVersion")),
            display_software_version=_str(data.get("displaySoftwareVersion")),
            house_number=_str(data.get("houseNumber")),
            is_toon_solar=bool(data.get("isToonSolar", False)),
            postal_code=_str(data.get("postalCode")),
            street=_str(data.get("street")),
        )


@dataclass(frozen=True)
class Session:
    """Identifiers required by every authenticated call.

    Built from the login response; ``random`` stays empty until the
    agreement has been authorized.
    """

    client_id: str
    client_id_checksum: str
    password_hash: str = field(default="", repr=False)
    sample: bool = False
    success: bool = False
    agreements: Tuple[Agreement, ...] = ()
    random: str = ""

    @property
    def agreement(self) -> Optional[Agreement]:
        """The agreement the session is bound to (always the first one)."""
        return self.agreements[0] if self.agreements else None

    @property
    def is_authorized(self) -> bool:
        return bool(self.random)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Session":
        """Factory method to create session from the login response."""
        agreements = data.get("agreements") or []
        if not isinstance(agreements, list):
            raise ToonDecodeError("Field 'agreements' is not a list")
        return cls(
            client_id=_str(data.get("clientId")),
            client_id_checksum=_str(data.get("clientIdChecksum")),
            password_hash=_str(data.get("passwordHash")),
            sample=bool(data.get("sample", False)),
            success=bool(data.get("success", False)),
            agreements=tuple(Agreement.from_api(a) for a in agreements if isinstance(a, dict)),
        )


@dataclass(frozen=True)
class ThermostatInfo:
    """Snapshot of the thermostat. Temperatures are hundredths of a degree."""

    current_temp: int = 0
    current_setpoint: int = 0
    current_display_temp: int = 0
    program_state: int = 0
    active_state: int = 0
    next_program: int = 0
    next_state: int = 0
    next_time: int = 0
    next_setpoint: int = 0
    random_config_id: int = 0
    error_found: int = 0
    boiler_module_connected: int = 0
    real_setpoint: int = 0
    burner_info: str = ""
    ot_comm_error: str = ""
    current_modulation_level: int = 0
    have_ot_boiler: int = 0

    @property
    def current_temperature(self) -> float:
        return self.current_temp / 100.0

    @property
    def setpoint_temperature(self) -> float:
        return self.current_setpoint / 100.0

    @property
    def next_setpoint_temperature(self) -> float:
        return self.next_setpoint / 100.0

    @property
    def active_state_label(self) -> str:
        return STATE_LABELS.get(self.active_state, "")

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict with degrees added next to the raw values."""
        return {
            "currentTemp": self.current_temp,
            "currentSetpoint": self.current_setpoint,
            "currentDisplayTemp": self.current_display_temp,
            "programState": self.program_state,
            "activeState": self.active_state,
            "activeStateLabel": self.active_state_label,
            "nextProgram": self.next_program,
            "nextState": self.next_state,
            "nextTime": self.next_time,
            "nextSetpoint": self.next_setpoint,
            "randomConfigId": self.random_config_id,
            "errorFound": self.error_found,
            "boilerModuleConnected": self.boiler_module_connected,
            "realSetpoint": self.real_setpoint,
            "burnerInfo": self.burner_info,
            "otCommError": self.ot_comm_error,
            "currentModulationLevel": self.current_modulation_level,
            "haveOTBoiler": self.have_ot_boiler,
            "currentTemperature": self.current_temperature,
            "setpointTemperature": self.setpoint_temperature,
        }

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "ThermostatInfo":
        """Factory method to create thermostat info from API response."""
        return cls(
            current_temp=_int(data, "currentTemp"),
            current_setpoint=_int(data, "currentSetpoint"),
            current_display_temp=_int(data, "currentDisplayTemp"),
            program_state=_int(data, "programState"),
            active_state=_int(data, "activeState"),
            next_program=_int(data, "nextProgram"),
            next_state=_int(data, "nextState"),
            next_time=_int(data, "nextTime"),
            next_setpoint=_int(data, "nextSetpoint"),
            random_config_id=_int(data, "randomConfigId"),
            error_found=_int(data, "errorFound"),
            boiler_module_connected=_int(data, "boilerModuleConnected"),
            real_setpoint=_int(data, "realSetpoint"),
            burner_info=_str(data.get("burnerInfo")),
            ot_comm_error=_str(data.get("otCommError")),
            current_modulation_level=_int(data, "currentModulationLevel"),
            have_ot_boiler=_int(data, "haveOTBoiler"),
        )


@dataclass(frozen=True)
class ThermostatState:
    """Envelope returned by the state endpoint."""

    success: bool
    thermostat_info: ThermostatInfo

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "ThermostatState":
        info = data.get("thermostatInfo") or {}
        if not isinstance(info, dict):
            raise ToonDecodeError("Field 'thermostatInfo' is not an object")
        return cls(
            success=bool(data.get("success", False)),
            thermostat_info=ThermostatInfo.from_api(info),
        )
