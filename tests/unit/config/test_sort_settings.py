"""
Tests for sort parameter settings.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from sortparam.config.settings import SortSettings, get_settings, load_settings
from sortparam.exceptions import SortConfigurationError
from sortparam.models import Order, Sort


def test_settings_defaults():
    """Test default settings values."""
    settings = SortSettings()

    assert settings.sort_parameter == "sort"
    assert settings.property_delimiter == ","
    assert settings.qualifier_delimiter == "_"
    assert settings.fallback_sort == Sort.unsorted()
    assert settings.log_level == "INFO"


@pytest.mark.parametrize("value", ["", "   "])
def test_blank_sort_parameter_rejected(value):
    """Test a blank parameter name is rejected."""
    with pytest.raises(ValidationError, match="SortParameter must not be null"):
        SortSettings(sort_parameter=value)


@pytest.mark.parametrize("value", ["", "   "])
def test_blank_property_delimiter_rejected(value):
    """Test a blank property delimiter is rejected."""
    with pytest.raises(ValidationError, match="Property delimiter"):
        SortSettings(property_delimiter=value)


def test_load_settings_wraps_validation_error():
    """Test load_settings reports SortConfigurationError."""
    with pytest.raises(SortConfigurationError) as exc_info:
        load_settings(sort_parameter="  ")

    assert exc_info.value.field_name == "sort_parameter"
    assert exc_info.value.invalid_value == "  "
    assert isinstance(exc_info.value.__cause__, ValidationError)


def test_qualifier_delimiter_reset():
    """Test a None qualifier delimiter resets to the default."""
    settings = SortSettings(qualifier_delimiter=None)

    assert settings.qualifier_delimiter == "_"


def test_fallback_sort_instance():
    """Test a Sort instance is accepted as fallback."""
    fallback = Sort.of([Order.desc("created")])

    assert SortSettings(fallback_sort=fallback).fallback_sort == fallback


def test_fallback_sort_none():
    """Test the fallback may be None."""
    assert SortSettings(fallback_sort=None).fallback_sort is None


def test_fallback_sort_expression_uses_delimiter():
    """Test fallback expressions are parsed with the configured delimiter."""
    settings = SortSettings(property_delimiter=";", fallback_sort="a;b;desc c")

    assert settings.fallback_sort == Sort.of(
        [Order.desc("a"), Order.desc("b"), Order.asc("c")]
    )


def test_log_level_normalized():
    """Test log level is upper-cased and validated."""
    assert SortSettings(log_level="debug").log_level == "DEBUG"

    with pytest.raises(ValidationError, match="Invalid log level"):
        SortSettings(log_level="chatty")


def test_settings_from_environment(monkeypatch):
    """Test settings are read from SORTPARAM_ variables."""
    monkeypatch.setenv("SORTPARAM_SORT_PARAMETER", "order")
    monkeypatch.setenv("SORTPARAM_PROPERTY_DELIMITER", "|")
    monkeypatch.setenv("SORTPARAM_FALLBACK_SORT", "lastname|desc")

    settings = get_settings()

    assert settings.sort_parameter == "order"
    assert settings.property_delimiter == "|"
    assert settings.fallback_sort == Sort.of([Order.desc("lastname")])


def test_invalid_environment(monkeypatch):
    """Test an invalid environment value is a configuration error."""
    monkeypatch.setenv("SORTPARAM_PROPERTY_DELIMITER", " ")

    with pytest.raises(SortConfigurationError) as exc_info:
        get_settings()

    assert exc_info.value.field_name == "property_delimiter"
