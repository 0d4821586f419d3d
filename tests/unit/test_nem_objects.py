"""Unit tests for SimpleNEM12 record types, code enums and reading containers."""

from datetime import date
from decimal import Decimal

import pytest

from simple_nem12 import EnergyUnit, InvalidQualityError, InvalidUnitError, MeterRead, MeterVolume, Quality, RecordType


class TestRecordType:
    """Tests for record indicator lookup."""

    @pytest.mark.parametrize(
        ("indicator", "expected"),
        [
            ("100", RecordType.START),
            ("200", RecordType.NMI),
            ("300", RecordType.VOLUME),
            ("900", RecordType.END),
        ],
    )
    def test_known_indicators(self, indicator: str, expected: RecordType) -> None:
        assert RecordType.from_indicator(indicator) is expected

    @pytest.mark.parametrize("indicator", ["400", "500", "", "ABC", "1000"])
    def test_unknown_indicators(self, indicator: str) -> None:
        """Test that anything else falls back to UNKNOWN."""
        assert RecordType.from_indicator(indicator) is RecordType.UNKNOWN

    def test_boundary_types(self) -> None:
        assert RecordType.START.is_boundary
        assert RecordType.END.is_boundary
        assert not RecordType.NMI.is_boundary
        assert not RecordType.VOLUME.is_boundary

    def test_min_fields(self) -> None:
        assert RecordType.NMI.min_fields == 3
        assert RecordType.VOLUME.min_fields == 4


class TestCodeEnums:
    """Tests for EnergyUnit and Quality lookups."""

    def test_unit_from_code(self) -> None:
        assert EnergyUnit.from_code("E1") is EnergyUnit.E1
        assert EnergyUnit.from_code("KWH") is EnergyUnit.KWH

    def test_unit_from_unknown_code(self) -> None:
        with pytest.raises(InvalidUnitError, match="'kwh'"):
            EnergyUnit.from_code("kwh")

    def test_unit_of_measure(self) -> None:
        """Test that reactive data streams map to kVArh."""
        assert EnergyUnit.E1.uom == "kWh"
        assert EnergyUnit.B1.uom == "kWh"
        assert EnergyUnit.Q1.uom == "kVArh"
        assert EnergyUnit.K1.uom == "kVArh"

    def test_quality_from_code(self) -> None:
        assert Quality.from_code("A") is Quality.A
        assert Quality.from_code("A").is_actual
        assert not Quality.from_code("E").is_actual

    def test_quality_from_unknown_code(self) -> None:
        with pytest.raises(InvalidQualityError):
            Quality.from_code("a")


class TestMeterRead:
    """Tests for MeterRead accumulation."""

    def test_empty_meter_read(self) -> None:
        meter_read = MeterRead(nmi="6123456789", energy_unit=EnergyUnit.E1)

        assert meter_read.total_volume == Decimal(0)
        assert meter_read.start_date is None
        assert meter_read.end_date is None

    def test_total_volume_is_exact(self) -> None:
        """Test that many small volumes sum without float drift."""
        meter_read = MeterRead(nmi="6123456789", energy_unit=EnergyUnit.E1)
        for day in range(1, 11):
            meter_read.append_volume(date(2016, 11, day), MeterVolume(volume=Decimal("0.1"), quality=Quality.A))

        assert meter_read.total_volume == Decimal("1.0")

    def test_date_range_and_sorting(self) -> None:
        """Test that volumes appended out of order sort by date."""
        meter_read = MeterRead(nmi="6123456789", energy_unit=EnergyUnit.E1)
        meter_read.append_volume(date(2016, 11, 15), MeterVolume(volume=Decimal("3"), quality=Quality.A))
        meter_read.append_volume(date(2016, 11, 13), MeterVolume(volume=Decimal("1"), quality=Quality.E))

        assert meter_read.start_date == date(2016, 11, 13)
        assert meter_read.end_date == date(2016, 11, 15)
        assert [d for d, _ in meter_read.sorted_volumes()] == [date(2016, 11, 13), date(2016, 11, 15)]

    def test_meter_volume_is_immutable(self) -> None:
        volume = MeterVolume(volume=Decimal("1.5"), quality=Quality.A)

        with pytest.raises(AttributeError):
            volume.volume = Decimal("2")  # type: ignore[misc]
