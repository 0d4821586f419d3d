"""Shared pytest fixtures for simple-nem12 tests."""

import sys
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent / ".." / "src"))


# ==================== Paths ====================


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def simple_nem12_file(fixtures_dir: Path) -> str:
    """Return path to a valid SimpleNEM12 file with two NMIs."""
    return str(fixtures_dir / "simple_nem12.csv")


@pytest.fixture
def simple_nem12_missing_start_file(fixtures_dir: Path) -> str:
    """Return path to a SimpleNEM12 file without its 100 record."""
    return str(fixtures_dir / "simple_nem12_missing_start.csv")


@pytest.fixture
def simple_nem12_missing_end_file(fixtures_dir: Path) -> str:
    """Return path to a SimpleNEM12 file without its 900 record."""
    return str(fixtures_dir / "simple_nem12_missing_end.csv")


@pytest.fixture
def simple_nem12_inconsistent_record_file(fixtures_dir: Path) -> str:
    """Return path to a SimpleNEM12 file with one malformed 300 date."""
    return str(fixtures_dir / "simple_nem12_inconsistent_record.csv")


@pytest.fixture
def simple_nem12_invalid_nmi_file(fixtures_dir: Path) -> str:
    """Return path to a SimpleNEM12 file with a five character NMI."""
    return str(fixtures_dir / "simple_nem12_invalid_nmi.csv")


@pytest.fixture
def simple_nem12_missing_nmi_file(fixtures_dir: Path) -> str:
    """Return path to a SimpleNEM12 file with an empty NMI."""
    return str(fixtures_dir / "simple_nem12_missing_nmi.csv")


@pytest.fixture
def temp_directory() -> Generator[str]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


# ==================== Sample Data ====================


@pytest.fixture
def simple_nem12_lines(simple_nem12_file: str) -> list[str]:
    """Lines of the valid SimpleNEM12 sample file."""
    return Path(simple_nem12_file).read_text().splitlines()
