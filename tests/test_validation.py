from __future__ import annotations

import uuid
from datetime import UTC, date, datetime
from decimal import Decimal

import pytest
from pydantic import ValidationError

from app.errors import RecordValidationError
from app.models.enums import CropStatusEnum, WeatherConditionEnum
from app.models.farmer import expected_harvest_date
from app.schemas.farmer import CropCycleCreate, CropCycleRead, FarmerProfileUpsert, FieldCreate
from app.schemas.market import MarketPriceIn
from app.schemas.regional import DistrictStatisticIn
from app.schemas.weather import WeatherRecordIn
from app.services.ingest_service import validate_batch


def _error_fields(exc: ValidationError) -> set[str]:
    return {".".join(str(part) for part in item["loc"]) for item in exc.errors()}


@pytest.mark.parametrize("coverage", ["0", "100", "55.5"])
def test_irrigation_coverage_bounds_accepted(coverage: str) -> None:
    record = DistrictStatisticIn(state="Maharashtra", district="Pune", irrigation_coverage_percent=coverage)
    assert record.irrigation_coverage_percent == Decimal(coverage)


@pytest.mark.parametrize("coverage", [150, -1, 100.01])
def test_irrigation_coverage_out_of_range_rejected(coverage: float) -> None:
    with pytest.raises(ValidationError) as exc_info:
        DistrictStatisticIn(state="Maharashtra", district="Pune", irrigation_coverage_percent=coverage)
    assert _error_fields(exc_info.value) == {"irrigation_coverage_percent"}


def test_unknown_soil_type_rejected() -> None:
    with pytest.raises(ValidationError) as exc_info:
        FieldCreate(field_name="North plot", soil_type="volcanic")
    assert _error_fields(exc_info.value) == {"soil_type"}
    assert exc_info.value.errors()[0]["type"] == "enum"


def test_known_soil_type_accepted() -> None:
    assert FieldCreate(field_name="North plot", soil_type="black").soil_type == "black"


def test_record_validation_error_names_field_and_constraint() -> None:
    with pytest.raises(ValidationError) as exc_info:
        FieldCreate(field_name="North plot", soil_type="volcanic")
    error = RecordValidationError.from_pydantic(exc_info.value, prefix=("records", 3))
    assert error.errors[0]["field"] == "records.3.soil_type"
    assert error.errors[0]["constraint"] == "enum"
    assert str(error).startswith("records.3.soil_type:")


@pytest.mark.parametrize("phone", ["+91 98765 43210", "(020) 2567-8901", "9876543210"])
def test_phone_accepted(phone: str) -> None:
    assert FarmerProfileUpsert(full_name="Asha Patil", phone=phone).phone == phone


@pytest.mark.parametrize("phone", ["12345", "98765abc43210", "+91 98765 43210 12345 678"])
def test_phone_rejected(phone: str) -> None:
    with pytest.raises(ValidationError) as exc_info:
        FarmerProfileUpsert(full_name="Asha Patil", phone=phone)
    assert _error_fields(exc_info.value) == {"phone"}


def test_email_rejected() -> None:
    with pytest.raises(ValidationError) as exc_info:
        FarmerProfileUpsert(full_name="Asha Patil", email="asha@farm")
    assert _error_fields(exc_info.value) == {"email"}


@pytest.mark.parametrize("land", ["0.01", "10000", "12.50"])
def test_land_size_accepted(land: str) -> None:
    assert FarmerProfileUpsert(full_name="Asha Patil", land_area_ha=land).land_area_ha == Decimal(land)


@pytest.mark.parametrize("land", ["0", "0.001", "10000.01"])
def test_land_size_rejected(land: str) -> None:
    with pytest.raises(ValidationError) as exc_info:
        FarmerProfileUpsert(full_name="Asha Patil", land_area_ha=land)
    assert _error_fields(exc_info.value) == {"land_area_ha"}


def test_market_price_must_be_positive() -> None:
    with pytest.raises(ValidationError) as exc_info:
        MarketPriceIn(
            commodity="Onion",
            market_name="Lasalgaon",
            state="Maharashtra",
            arrival_date=date(2024, 3, 1),
            modal_price=0,
        )
    assert _error_fields(exc_info.value) == {"modal_price"}


@pytest.mark.parametrize("price", ["0.001", "1e13", "12345678901"])
def test_market_price_beyond_column_precision_rejected(price: str) -> None:
    with pytest.raises(ValidationError) as exc_info:
        MarketPriceIn(
            commodity="Onion",
            market_name="Lasalgaon",
            state="Maharashtra",
            arrival_date=date(2024, 3, 1),
            modal_price=price,
        )
    assert _error_fields(exc_info.value) == {"modal_price"}
    assert exc_info.value.errors()[0]["type"].startswith("decimal_")


def test_market_price_at_column_limit_accepted() -> None:
    record = MarketPriceIn(
        commodity="Onion",
        market_name="Lasalgaon",
        state="Maharashtra",
        arrival_date=date(2024, 3, 1),
        modal_price="9999999999.99",
    )
    assert record.modal_price == Decimal("9999999999.99")


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("irrigation_coverage_percent", "55.555"),
        ("yield_mt_per_ha", "0.0001"),
        ("area_ha", "1e15"),
        ("production_mt", "0.125"),
        ("rainfall_mm", "123456789.5"),
        ("horticulture_area_ha", "1000000000000"),
    ],
)
def test_district_measure_beyond_column_precision_rejected(field: str, value: str) -> None:
    with pytest.raises(ValidationError) as exc_info:
        DistrictStatisticIn(state="Maharashtra", district="Pune", **{field: value})
    assert _error_fields(exc_info.value) == {field}


def test_district_measures_at_column_scale_accepted() -> None:
    record = DistrictStatisticIn(
        state="Maharashtra",
        district="Pune",
        area_ha="999999999999.99",
        yield_mt_per_ha="2.125",
        rainfall_mm="712.40",
        irrigation_coverage_percent="55.55",
    )
    assert record.yield_mt_per_ha == Decimal("2.125")
    assert record.area_ha == Decimal("999999999999.99")


def test_batch_error_names_record_and_field_for_unstorable_measure() -> None:
    base = {"commodity": "Onion", "market_name": "Lasalgaon", "state": "Maharashtra", "arrival_date": "2024-03-01"}
    with pytest.raises(RecordValidationError) as exc_info:
        validate_batch(MarketPriceIn, [{**base, "modal_price": "2100"}, {**base, "modal_price": "0.001"}])
    assert [error["field"] for error in exc_info.value.errors] == ["records.1.modal_price"]


def test_field_coordinates_beyond_column_scale_rejected() -> None:
    assert FieldCreate(field_name="North plot", latitude="18.52043012").latitude == Decimal("18.52043012")
    with pytest.raises(ValidationError) as exc_info:
        FieldCreate(field_name="North plot", latitude="18.520430123", longitude="73.856743")
    assert _error_fields(exc_info.value) == {"latitude"}


def test_recorded_year_must_have_four_digits() -> None:
    with pytest.raises(ValidationError):
        DistrictStatisticIn(state="Maharashtra", district="Pune", recorded_year=999)


def test_weather_condition_uses_hyphenated_labels() -> None:
    record = WeatherRecordIn(location="Pune", observed_on=date(2024, 7, 1), weather_condition="partly-cloudy")
    assert record.weather_condition is WeatherConditionEnum.partly_cloudy

    with pytest.raises(ValidationError):
        WeatherRecordIn(location="Pune", observed_on=date(2024, 7, 1), humidity=101)


def test_crop_cycle_create_has_no_harvest_date_input() -> None:
    with pytest.raises(ValidationError):
        CropCycleCreate(
            crop_name="Soybean",
            planting_date=date(2024, 6, 15),
            expected_harvest_date=date(2024, 12, 1),
        )


def test_harvest_date_is_planting_plus_120_days() -> None:
    assert expected_harvest_date(date(2024, 6, 15)) == date(2024, 10, 13)
    assert expected_harvest_date(date(2023, 12, 1)) == date(2024, 3, 30)


def test_crop_cycle_read_derives_harvest_date() -> None:
    now = datetime.now(UTC)
    cycle = CropCycleRead(
        id=uuid.uuid4(),
        field_id=uuid.uuid4(),
        crop_name="Soybean",
        planting_date=date(2024, 6, 15),
        status=CropStatusEnum.planted,
        created_at=now,
        updated_at=now,
    )
    assert cycle.expected_harvest_date == date(2024, 10, 13)
    assert cycle.model_dump()["expected_harvest_date"] == date(2024, 10, 13)
