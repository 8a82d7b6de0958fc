"""Constrained scalar types shared by request schemas.

Each type mirrors a CHECK constraint and the NUMERIC(precision, scale) of
its column.  Values outside the range, or carrying more digits than the
column stores, are rejected with the Pydantic error for the violated bound;
nothing is clamped or rounded.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated

from pydantic import Field, StringConstraints

PHONE_PATTERN = r"^[+]?[0-9\s\-()]{10,20}$"
EMAIL_PATTERN = r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$"

# NUMERIC(12, 2)
PriceAmount = Annotated[Decimal, Field(gt=0, max_digits=12, decimal_places=2)]

PhoneNumber = Annotated[
	str,
	StringConstraints(strip_whitespace=True, min_length=10, max_length=20, pattern=PHONE_PATTERN),
]

EmailAddress = Annotated[
	str,
	StringConstraints(strip_whitespace=True, max_length=255, pattern=EMAIL_PATTERN),
]

LandSizeHectares = Annotated[
	Decimal,
	Field(ge=Decimal("0.01"), le=Decimal("10000"), max_digits=7, decimal_places=2),
]

# NUMERIC(5, 2)
Percentage = Annotated[Decimal, Field(ge=0, le=100, max_digits=5, decimal_places=2)]

# NUMERIC(14, 2): areas and production tonnage
LargeMeasure = Annotated[Decimal, Field(ge=0, max_digits=14, decimal_places=2)]

# NUMERIC(10, 3)
YieldRate = Annotated[Decimal, Field(ge=0, max_digits=10, decimal_places=3)]

# NUMERIC(10, 2)
RainfallMillimetres = Annotated[Decimal, Field(ge=0, max_digits=10, decimal_places=2)]

Latitude = Annotated[Decimal, Field(ge=-90, le=90, max_digits=10, decimal_places=8)]

Longitude = Annotated[Decimal, Field(ge=-180, le=180, max_digits=11, decimal_places=8)]

RecordedYear = Annotated[int, Field(ge=1000, le=9999)]

NonEmptyText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=200)]
