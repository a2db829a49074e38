"""Shared fixtures for unit and integration tests."""

import sys
from pathlib import Path

import pytest
from loguru import logger

from resumetex.contexts.templating.resume_record import ResumeRecord

FIXTURES_PATH = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks added by setup_logger() so later tests never write to closed streams."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="WARNING")


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_PATH


@pytest.fixture
def full_record_path() -> Path:
    return FIXTURES_PATH / "full_resume.yaml"


@pytest.fixture
def full_record(full_record_path) -> ResumeRecord:
    """Every field populated; the first job is current."""
    return ResumeRecord.from_yaml(full_record_path)


@pytest.fixture
def minimal_record_dict() -> dict:
    """Name, email and summary only, in snake_case keys."""
    return {
        "contact_info": {"name": "Sam Lee", "email": "sam@example.com"},
        "summary": "Data analyst.",
    }
