"""PostgreSQL-backed enum types for all ORM models.

Each StrEnum maps 1:1 to a PostgreSQL CREATE TYPE ... AS ENUM and is also
the closed domain Pydantic validates against at the API boundary, so a
value outside the set is rejected rather than stored as free text.
"""

from enum import StrEnum

# ── Farm & crop lifecycle enums ─────────────────────────────────────────────


class CropStatusEnum(StrEnum):
    """Lifecycle of a crop cycle on a field."""

    planning = "planning"
    planted = "planted"
    growing = "growing"
    harvested = "harvested"
    failed = "failed"


class SoilTypeEnum(StrEnum):
    """Soil texture classification of a field."""

    clay = "clay"
    sandy = "sandy"
    loamy = "loamy"
    silt = "silt"
    peaty = "peaty"
    chalky = "chalky"
    black = "black"
    red = "red"
    alluvial = "alluvial"


class IrrigationMethodEnum(StrEnum):
    """How water reaches a field."""

    drip = "drip"
    sprinkler = "sprinkler"
    flood = "flood"
    center_pivot = "center_pivot"
    manual = "manual"
    rainfed = "rainfed"


class SeasonEnum(StrEnum):
    """Indian agricultural seasons plus the calendar seasons used in reports."""

    kharif = "kharif"
    rabi = "rabi"
    zaid = "zaid"
    summer = "summer"
    winter = "winter"
    monsoon = "monsoon"


# ── Observation enums ───────────────────────────────────────────────────────


class WeatherConditionEnum(StrEnum):
    """Reported sky / precipitation condition."""

    clear = "clear"
    partly_cloudy = "partly-cloudy"
    cloudy = "cloudy"
    fog = "fog"
    rain = "rain"
    snow = "snow"
    thunderstorm = "thunderstorm"


class TrendEnum(StrEnum):
    """Direction of a price change against the previous same-series record."""

    up = "up"
    down = "down"
    stable = "stable"


# ── Auth enums ──────────────────────────────────────────────────────────────


class UserRoleEnum(StrEnum):
    """Role claim carried by access tokens."""

    admin = "admin"
    farmer = "farmer"
