"""Shared test fixtures for Wellscore tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Test hermeticity
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _force_hermetic_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENCRYPTION_KEY", "")
    monkeypatch.setenv("DB_PATH", ":memory:")
    for name in (
        "WEIGHT_METABOLIC",
        "WEIGHT_VO2_MAX",
        "WEIGHT_GRIP_STRENGTH",
        "WEIGHT_BODY_COMPOSITION",
    ):
        monkeypatch.delenv(name, raising=False)


# Allow running tests without `pip install -e .` by making `src/` importable.
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_SRC_DIR = _PROJECT_ROOT / "src"
if str(_SRC_DIR) not in sys.path:
    sys.path.insert(0, str(_SRC_DIR))


# ---------------------------------------------------------------------------
# Metric records
# ---------------------------------------------------------------------------

@pytest.fixture
def healthy_young_male() -> dict[str, str]:
    """The reference 'healthy young male' record."""
    return {
        "age": "25",
        "sex": "male",
        "a1c": "5.2",
        "ldl": "80",
        "hdl": "55",
        "totalCholesterol": "170",
        "vo2Max": "55",
        "gripStrength": "48",
        "bodyFat": "12",
        "smm": "41",
    }


# ---------------------------------------------------------------------------
# In-memory storage fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def assessment_db():
    """Create an in-memory AssessmentDatabase for testing."""
    from wellscore.core.storage.database import AssessmentDatabase

    db = AssessmentDatabase(":memory:")
    db.initialize()
    yield db
    db.close()


@pytest.fixture
def field_encryptor():
    """Create a FieldEncryptor with a test key."""
    from cryptography.fernet import Fernet

    from wellscore.core.storage.encryption import FieldEncryptor

    return FieldEncryptor(Fernet.generate_key().decode())


@pytest.fixture
def assessment_repository(assessment_db, field_encryptor):
    """Create an AssessmentRepository backed by in-memory SQLite."""
    from wellscore.core.storage.repository import AssessmentRepository

    return AssessmentRepository(assessment_db, field_encryptor)
