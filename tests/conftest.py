"""Shared pytest configuration and fixtures for the visiontac test suite."""

import sys
from pathlib import Path

import pytest

# Ensure the project root is in the path for imports
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from tests.infrastructure.fixtures import ADVANCED_LINES, STANDARD_LINES, build_log  # noqa: E402
from visiontac.constants import ADVANCED_HEADER, STANDARD_HEADER  # noqa: E402


# =============================================================================
# Shared Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def standard_log_text() -> str:
    return build_log(STANDARD_HEADER, STANDARD_LINES)


@pytest.fixture
def advanced_log_text() -> str:
    return build_log(ADVANCED_HEADER, ADVANCED_LINES)


@pytest.fixture
def standard_log_file(tmp_path: Path, standard_log_text: str) -> Path:
    path = tmp_path / "standard.csv"
    path.write_bytes(standard_log_text.encode("ascii"))
    return path


@pytest.fixture
def advanced_log_file(tmp_path: Path, advanced_log_text: str) -> Path:
    path = tmp_path / "advanced.csv"
    path.write_bytes(advanced_log_text.encode("ascii"))
    return path
