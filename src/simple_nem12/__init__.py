"""
simple_nem12
~~~~~
Parse SimpleNEM12 files, a cut-down form of the AEMO NEM12 interval
metering format, into per-NMI daily volumes.
"""

from .exceptions import (
    InvalidNmiError,
    InvalidQualityError,
    InvalidUnitError,
    InvalidVolumeError,
    MalformedStreamError,
    SimpleNem12Error,
    VolumeBeforeHeaderError,
)
from .nem_objects import EnergyUnit, MeterRead, MeterVolume, Quality, RecordType
from .parser import SimpleNem12Parser, find_meter_read, parse_simple_nem12, total_volume_by_nmi
from .reader import open_simple_nem12_file, read_simple_nem12_file

__version__ = "0.1.0"

__all__ = [
    "EnergyUnit",
    "InvalidNmiError",
    "InvalidQualityError",
    "InvalidUnitError",
    "InvalidVolumeError",
    "MalformedStreamError",
    "MeterRead",
    "MeterVolume",
    "Quality",
    "RecordType",
    "SimpleNem12Error",
    "SimpleNem12Parser",
    "VolumeBeforeHeaderError",
    "__version__",
    "find_meter_read",
    "open_simple_nem12_file",
    "parse_simple_nem12",
    "read_simple_nem12_file",
    "total_volume_by_nmi",
]
