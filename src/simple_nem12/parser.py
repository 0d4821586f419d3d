"""
SimpleNEM12 record stream parser.

Turns the lines of a SimpleNEM12 file into MeterRead objects, one per
NMI/energy unit block, in the order their 200 records first appear.

Bad dates, unknown record types and short records are logged and the line
is skipped. Everything else that is wrong with the input aborts the parse
with a SimpleNem12Error subclass and no partial result.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal

from aws_lambda_powertools import Logger

from .config import DATE_FORMAT, DATE_LENGTH, DELIMITER, EXPECTED_BOUNDARY_COUNT, MIN_NMI_LENGTH, SERVICE_NAME
from .exceptions import (
    InvalidNmiError,
    InvalidQualityError,
    InvalidUnitError,
    InvalidVolumeError,
    MalformedStreamError,
    VolumeBeforeHeaderError,
)
from .nem_objects import EnergyUnit, MeterRead, MeterVolume, Quality, RecordType

logger = Logger(service=SERVICE_NAME, child=True)

# Signed plain or exponent decimal, no underscores, NaN or Infinity
VOLUME_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


@dataclass
class _ParseContext:
    """Mutable state for a single parse call."""

    boundary_count: int = 0
    meter_reads: list[MeterRead] = field(default_factory=list)
    blocks: dict[tuple[str, EnergyUnit], MeterRead] = field(default_factory=dict)
    current: MeterRead | None = None
    volume_count: int = 0
    skipped_count: int = 0


class SimpleNem12Parser:
    """
    Parser for SimpleNEM12 record streams.

    The parser holds no state between calls, so one instance can parse any
    number of files.

    Example:
        parser = SimpleNem12Parser()
        for meter_read in parser.parse(lines):
            print(meter_read.nmi, meter_read.total_volume)
    """

    def parse(self, lines: Iterable[str]) -> list[MeterRead]:
        """
        Parse SimpleNEM12 lines into meter reads.

        Args:
            lines: Raw record lines, e.g. an open text file

        Returns:
            MeterRead objects in the order their 200 records first appear

        Raises:
            MalformedStreamError: If the stream does not hold exactly one 100 and one 900 record
            InvalidNmiError: If a 200 record has an empty or short NMI
            InvalidUnitError: If a 200 record has an unknown energy unit
            VolumeBeforeHeaderError: If a 300 record appears before any 200 record
            InvalidVolumeError: If a 300 record volume is not a decimal number
            InvalidQualityError: If a 300 record has an unknown quality flag
        """
        ctx = _ParseContext()

        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            row = [value.strip() for value in line.rstrip("\r\n").split(DELIMITER)]
            self._process_record(ctx, row, line_number)

        if ctx.boundary_count != EXPECTED_BOUNDARY_COUNT:
            logger.error("Beginning/End of record not found", extra={"boundary_count": ctx.boundary_count})
            raise MalformedStreamError()

        logger.info(
            "Parsed SimpleNEM12 stream",
            extra={
                "nmi_count": len(ctx.meter_reads),
                "volume_count": ctx.volume_count,
                "skipped_count": ctx.skipped_count,
            },
        )
        return ctx.meter_reads

    def _process_record(self, ctx: _ParseContext, row: list[str], line_number: int) -> None:
        """Dispatch a split line on its record indicator."""
        record_type = RecordType.from_indicator(row[0])

        if record_type is RecordType.UNKNOWN:
            logger.warning(
                "Invalid record type encountered",
                extra={"line_number": line_number, "record_type": row[0]},
            )
            ctx.skipped_count += 1
            return

        if len(row) < record_type.min_fields:
            logger.warning(
                "Record has too few fields, skipping",
                extra={
                    "line_number": line_number,
                    "record_type": record_type.value,
                    "field_count": len(row),
                    "expected_fields": record_type.min_fields,
                },
            )
            ctx.skipped_count += 1
            return

        if record_type.is_boundary:
            ctx.boundary_count += 1
        elif record_type is RecordType.NMI:
            self._create_meter_read(ctx, row[1], row[2], line_number)
        elif record_type is RecordType.VOLUME:
            self._create_meter_volume(ctx, row[1], row[2], row[3], line_number)

    def _create_meter_read(self, ctx: _ParseContext, nmi: str, unit: str, line_number: int) -> None:
        """
        Start (or resume) the block for an NMI and make it current.

        A repeated 200 record for the same NMI and unit resumes the existing
        MeterRead instead of creating a second one.
        """
        if not nmi or len(nmi) < MIN_NMI_LENGTH:
            logger.error("Invalid NMI encountered", extra={"line_number": line_number, "nmi": nmi})
            raise InvalidNmiError()

        try:
            energy_unit = EnergyUnit.from_code(unit)
        except InvalidUnitError:
            logger.error("Invalid energy unit encountered", extra={"line_number": line_number, "raw_value": unit})
            raise

        key = (nmi, energy_unit)

        meter_read = ctx.blocks.get(key)
        if meter_read is None:
            meter_read = MeterRead(nmi=nmi, energy_unit=energy_unit)
            ctx.blocks[key] = meter_read
            ctx.meter_reads.append(meter_read)
        else:
            logger.debug("Resuming NMI block", extra={"line_number": line_number, "nmi": nmi})

        ctx.current = meter_read

    def _create_meter_volume(
        self,
        ctx: _ParseContext,
        reading_date: str,
        volume: str,
        quality: str,
        line_number: int,
    ) -> None:
        """Append a 300 record volume to the current MeterRead."""
        parsed_date = _parse_date(reading_date)
        if parsed_date is None:
            logger.warning(
                "Error parsing date in record, the record will not be processed",
                extra={"line_number": line_number, "raw_value": reading_date},
            )
            ctx.skipped_count += 1
            return

        if ctx.current is None:
            logger.error("Volume record before NMI record", extra={"line_number": line_number})
            raise VolumeBeforeHeaderError()

        parsed_volume = _parse_volume(volume, line_number)
        try:
            parsed_quality = Quality.from_code(quality)
        except InvalidQualityError:
            logger.error("Invalid quality encountered", extra={"line_number": line_number, "raw_value": quality})
            raise

        ctx.current.append_volume(parsed_date, MeterVolume(volume=parsed_volume, quality=parsed_quality))
        ctx.volume_count += 1


def _parse_date(record: str) -> date | None:
    """Parse a Date8 (YYYYMMDD) field, returning None if it is not one."""
    if len(record) != DATE_LENGTH or not record.isdigit():
        return None
    try:
        return datetime.strptime(record, DATE_FORMAT).date()
    except ValueError:
        return None


def _parse_volume(value: str, line_number: int) -> Decimal:
    """Convert a volume field to an exact Decimal."""
    if not VOLUME_PATTERN.fullmatch(value):
        logger.error("Invalid volume encountered", extra={"line_number": line_number, "raw_value": value})
        raise InvalidVolumeError(f"Invalid volume encountered: {value!r}")
    return Decimal(value)


def parse_simple_nem12(lines: Iterable[str]) -> list[MeterRead]:
    """Parse SimpleNEM12 lines with a fresh SimpleNem12Parser."""
    return SimpleNem12Parser().parse(lines)


def find_meter_read(meter_reads: Iterable[MeterRead], nmi: str) -> MeterRead | None:
    """Return the first MeterRead for an NMI, or None if there is none."""
    return next((mr for mr in meter_reads if mr.nmi == nmi), None)


def total_volume_by_nmi(meter_reads: Iterable[MeterRead]) -> dict[str, Decimal]:
    """Sum total volumes per NMI across all of its energy unit blocks."""
    totals: dict[str, Decimal] = {}
    for meter_read in meter_reads:
        totals[meter_read.nmi] = totals.get(meter_read.nmi, Decimal(0)) + meter_read.total_volume
    return totals
