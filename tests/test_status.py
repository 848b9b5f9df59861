import pytest
from pydantic import ValidationError

from batteryinfo.system.attributes import CapacityLevel, PowerSupplyStatus
from batteryinfo.system.status import BatteryRecord


def _record(**overrides: object) -> BatteryRecord:
    values: dict[str, object] = {
        "capacity": 42,
        "status": PowerSupplyStatus.CHARGING,
        "capacity_level": CapacityLevel.NORMAL,
        "manufacturer": "Acme",
        "model_name": "X100",
        "serial_number": "SN123",
    }
    values.update(overrides)
    return BatteryRecord(**values)  # type: ignore[arg-type]


def test_summary_format() -> None:
    record = _record()
    assert record.summary() == "Acme: X100 (SN123) | 42% (Normal) | Charging "
    assert str(record) == record.summary()


def test_summary_not_charging_label() -> None:
    record = _record(status=PowerSupplyStatus.NOT_CHARGING, capacity=57)
    assert record.summary().endswith("| 57% (Normal) | Not charging ")


def test_default_record_is_unknown() -> None:
    record = BatteryRecord()
    assert record.summary() == "Unknown: Unknown (Unknown) | Unknown% (Unknown) | Unknown "
    assert record.is_charging is False


def test_text_fields_are_trimmed() -> None:
    record = _record(manufacturer="  Acme  ")
    assert record.manufacturer == "Acme"


def test_empty_text_field_rejected() -> None:
    with pytest.raises(ValidationError):
        _record(serial_number="   ")


@pytest.mark.parametrize("capacity", [101, -1])
def test_capacity_out_of_range_rejected(capacity: int) -> None:
    with pytest.raises(ValidationError):
        _record(capacity=capacity)


def test_record_is_immutable() -> None:
    record = _record()
    with pytest.raises(ValidationError):
        record.capacity = 10  # type: ignore[misc]


def test_formatted_capacity_and_charging() -> None:
    record = _record()
    assert record.formatted_capacity == "42%"
    assert record.is_charging is True


def test_as_attributes_order_and_labels() -> None:
    record = _record(model_name=None)
    assert list(record.as_attributes().items()) == [
        ("capacity", "42"),
        ("capacity_level", "Normal"),
        ("manufacturer", "Acme"),
        ("model_name", "Unknown"),
        ("serial_number", "SN123"),
        ("status", "Charging"),
    ]
