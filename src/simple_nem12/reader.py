"""
File access for SimpleNEM12 data.

Opening files is kept out of the parser: these helpers only resolve a path
to a text handle (plain CSV or a ZIP holding a single CSV) and feed its
lines to SimpleNem12Parser. I/O errors propagate to the caller before any
record is parsed.
"""

import io
import zipfile
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from aws_lambda_powertools import Logger

from .config import FILE_ENCODING, SERVICE_NAME
from .nem_objects import MeterRead
from .parser import SimpleNem12Parser

logger = Logger(service=SERVICE_NAME, child=True)


def read_simple_nem12_file(file_path: str | Path, parser: SimpleNem12Parser | None = None) -> list[MeterRead]:
    """
    Read and parse a SimpleNEM12 file.

    Args:
        file_path: Path to a SimpleNEM12 file (CSV or ZIP)
        parser: Parser to use, a new SimpleNem12Parser if omitted

    Returns:
        MeterRead objects in the order their 200 records first appear
    """
    parser = parser or SimpleNem12Parser()
    logger.info("Reading SimpleNEM12 file", extra={"file": str(file_path)})

    with open_simple_nem12_file(file_path) as file_handle:
        return parser.parse(file_handle)


@contextmanager
def open_simple_nem12_file(file_path: str | Path) -> Generator[TextIO]:
    """
    Open a SimpleNEM12 file (CSV or ZIP) and yield a text file handle.

    Raises:
        ValueError: If a ZIP archive does not contain exactly one file
        OSError: If the file cannot be opened
    """
    if zipfile.is_zipfile(file_path):
        with zipfile.ZipFile(file_path) as zf:
            files = zf.namelist()
            if len(files) != 1:
                raise ValueError(f"ZIP must contain exactly one file, found {len(files)}")

            with zf.open(files[0]) as binary_file:
                yield io.TextIOWrapper(binary_file, encoding=FILE_ENCODING, newline="")
        return

    with Path(file_path).open(encoding=FILE_ENCODING, newline="") as f:
        yield f
