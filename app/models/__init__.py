"""ORM model registry: importing this module registers every table on Base.metadata.

Alembic ``env.py`` imports ``Base`` from here (not from ``base.py``) so that
autogenerate sees all tables.  Application code can also do::

    from app.models import MarketPrice, DistrictStatistic, ...
"""

# ── Base & Mixins ───────────────────────────────────────────────────────────
from app.models.base import (
    AppendOnlyMixin,
    Base,
    TimestampMixin,
    UUIDPrimaryKeyMixin,
)

# ── Enums ───────────────────────────────────────────────────────────────────
from app.models.enums import (
    CropStatusEnum,
    IrrigationMethodEnum,
    SeasonEnum,
    SoilTypeEnum,
    TrendEnum,
    UserRoleEnum,
    WeatherConditionEnum,
)

# ── Farmer-owned models ─────────────────────────────────────────────────────
from app.models.farmer import CropCycle, FarmerProfile, FarmField

# ── Public reference data ───────────────────────────────────────────────────
from app.models.encyclopedia import EncyclopediaEntry
from app.models.market import MarketPrice
from app.models.regional import DistrictStatistic
from app.models.weather import WeatherRecord

__all__ = [
    # Base & mixins
    "AppendOnlyMixin",
    "Base",
    # Farmer-owned
    "CropCycle",
    # Enums
    "CropStatusEnum",
    # Reference data
    "DistrictStatistic",
    "EncyclopediaEntry",
    "FarmField",
    "FarmerProfile",
    "IrrigationMethodEnum",
    "MarketPrice",
    "SeasonEnum",
    "SoilTypeEnum",
    "TimestampMixin",
    "TrendEnum",
    "UUIDPrimaryKeyMixin",
    "UserRoleEnum",
    "WeatherConditionEnum",
    "WeatherRecord",
]
