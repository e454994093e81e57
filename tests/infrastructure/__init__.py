"""Test infrastructure - sample data and helpers.

This package contains test support code, NOT actual tests.
"""

from pathlib import Path

INFRASTRUCTURE_DIR = Path(__file__).parent
FIXTURES_DIR = INFRASTRUCTURE_DIR / "fixtures"
