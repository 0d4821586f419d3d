"""
Record types, code enumerations and reading containers for SimpleNEM12 data.

A SimpleNEM12 file is a cut-down NEM12 file with four record types:

    100                                   start of file
    200,<NMI>,<EnergyUnit>                start of a meter block
    300,<YYYYMMDD>,<volume>,<Quality>     one daily volume for the current meter
    900                                   end of file
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum

from .exceptions import InvalidQualityError, InvalidUnitError


class RecordType(Enum):
    """Record indicator found in the first field of every line."""

    START = "100"
    NMI = "200"
    VOLUME = "300"
    END = "900"
    UNKNOWN = ""

    @classmethod
    def from_indicator(cls, indicator: str) -> "RecordType":
        """Return the record type for an indicator, or UNKNOWN if unrecognised."""
        for record_type in cls:
            if record_type is not cls.UNKNOWN and record_type.value == indicator:
                return record_type
        return cls.UNKNOWN

    @property
    def min_fields(self) -> int:
        """Number of fields (indicator included) the record needs to be processed."""
        return _MIN_FIELDS[self]

    @property
    def is_boundary(self) -> bool:
        return self in (RecordType.START, RecordType.END)


_MIN_FIELDS = {
    RecordType.START: 1,
    RecordType.NMI: 3,
    RecordType.VOLUME: 4,
    RecordType.END: 1,
    RecordType.UNKNOWN: 1,
}


class EnergyUnit(Enum):
    """
    Energy unit codes accepted on 200 records.

    KWH is the plain unit code. The remaining members are NEM12 data stream
    suffixes, each of which implies a unit of measure (see ``uom``).
    """

    KWH = "KWH"
    E1 = "E1"  # Import, general supply
    E2 = "E2"  # Import, controlled load
    B1 = "B1"  # Export, general supply
    B2 = "B2"
    Q1 = "Q1"  # Reactive import
    K1 = "K1"  # Reactive export

    @classmethod
    def from_code(cls, code: str) -> "EnergyUnit":
        """
        Look up a unit by its exact, case-sensitive code.

        Raises:
            InvalidUnitError: If the code is not a known unit.
        """
        try:
            return cls(code)
        except ValueError:
            raise InvalidUnitError(f"Invalid energy unit encountered: {code!r}") from None

    @property
    def uom(self) -> str:
        """Unit of measure the code stands for."""
        if self in (EnergyUnit.Q1, EnergyUnit.K1):
            return "kVArh"
        return "kWh"


class Quality(Enum):
    """Quality flag of a 300 record volume."""

    A = "A"  # Actual
    E = "E"  # Forward estimate
    F = "F"  # Final substituted
    N = "N"  # Null
    S = "S"  # Substituted
    V = "V"  # Variable

    @classmethod
    def from_code(cls, code: str) -> "Quality":
        """
        Look up a quality flag by its exact, case-sensitive code.

        Raises:
            InvalidQualityError: If the code is not a known quality flag.
        """
        try:
            return cls(code)
        except ValueError:
            raise InvalidQualityError(f"Invalid quality encountered: {code!r}") from None

    @property
    def is_actual(self) -> bool:
        return self is Quality.A


@dataclass(frozen=True)
class MeterVolume:
    """A single daily volume. The reading date is the key it is stored under."""

    volume: Decimal
    quality: Quality


@dataclass
class MeterRead:
    """All volumes read for one NMI and energy unit, keyed by reading date."""

    nmi: str
    energy_unit: EnergyUnit
    volumes: dict[date, MeterVolume] = field(default_factory=dict)

    def append_volume(self, reading_date: date, volume: MeterVolume) -> None:
        """Store a volume for a date. A later volume for the same date replaces the earlier one."""
        self.volumes[reading_date] = volume

    @property
    def total_volume(self) -> Decimal:
        """Exact sum of all stored volumes."""
        return sum((v.volume for v in self.volumes.values()), Decimal(0))

    @property
    def start_date(self) -> date | None:
        return min(self.volumes) if self.volumes else None

    @property
    def end_date(self) -> date | None:
        return max(self.volumes) if self.volumes else None

    def sorted_volumes(self) -> list[tuple[date, MeterVolume]]:
        """Return (date, volume) pairs in date order."""
        return sorted(self.volumes.items())
