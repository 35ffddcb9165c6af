"""Shared pytest fixtures for the enum-lookup test suite.

This module provides the enum-like objects used across unit tests: Python
Enum classes (with and without duplicate values) and plain dict mappings.
"""

import enum

import pytest
import structlog


# ============================================================================
# Enum Fixtures
# ============================================================================

class StringEnum(enum.Enum):
    Fruit = "Apple"
    Vegetable = "Cucumber"
    Nut = "Almond"


class NumericEnum(enum.Enum):
    One = 1
    Two = 2
    Three = 3


class MixedEnum(enum.Enum):
    Fruit = "Apple"
    Vegetable = "Cucumber"
    Nut = "Almond"
    One = 1
    Two = 2
    Three = 3


class NonUniqueEnum(enum.Enum):
    """Duplicate values become aliases, which still show up as keys."""

    Fruit = "Apple"
    Vegetable = "Cucumber"
    Nut = "Almond"
    Favorite = "Apple"
    One = 1
    Two = 2
    Three = 3
    First = 1


@pytest.fixture
def string_enum():
    return StringEnum


@pytest.fixture
def numeric_enum():
    return NumericEnum


@pytest.fixture
def mixed_enum():
    return MixedEnum


@pytest.fixture
def non_unique_enum():
    return NonUniqueEnum


# ============================================================================
# Mapping Fixtures
# ============================================================================

@pytest.fixture
def custom_enum_like():
    return {"A": "ValueA", "B": "ValueB", "C": 123}


@pytest.fixture
def non_unique_custom_enum_like():
    return {"A": "ValueA", "B": "ValueB", "C": "ValueA"}


@pytest.fixture
def empty_enum_like():
    return {}


# ============================================================================
# Logging Fixtures
# ============================================================================

@pytest.fixture
def reset_logging():
    """Restore structlog defaults after a test reconfigures logging."""
    from enum_lookup.core.logging import configure_logging

    yield
    configure_logging()
    structlog.reset_defaults()
