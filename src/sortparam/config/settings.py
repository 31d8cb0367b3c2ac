"""
Sort parameter settings and configuration management.
"""

from __future__ import annotations

from typing import Annotated, Any, Optional

from pydantic import Field, ValidationError, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from sortparam.exceptions import SortConfigurationError
from sortparam.models.sort import Sort
from sortparam.parsers.sort_parser import has_text, parse_sort

DEFAULT_SORT_PARAMETER = "sort"
DEFAULT_PROPERTY_DELIMITER = ","
DEFAULT_QUALIFIER_DELIMITER = "_"


class SortSettings(BaseSettings):
    """Sort parameter settings loaded from environment variables."""

    # Request parameter
    sort_parameter: str = Field(default=DEFAULT_SORT_PARAMETER)
    property_delimiter: str = Field(default=DEFAULT_PROPERTY_DELIMITER)
    qualifier_delimiter: str = Field(default=DEFAULT_QUALIFIER_DELIMITER)

    # Used when neither the request nor a default declaration gives a sort
    fallback_sort: Annotated[Optional[Sort], NoDecode] = Field(
        default_factory=Sort.unsorted
    )

    # Logging
    log_level: str = Field(default="INFO")

    @field_validator("sort_parameter")
    @classmethod
    def validate_sort_parameter(cls, v: str) -> str:
        """Validate the sort parameter name."""
        if not has_text(v):
            raise ValueError("SortParameter must not be null nor empty!")
        return v

    @field_validator("property_delimiter")
    @classmethod
    def validate_property_delimiter(cls, v: str) -> str:
        """Validate the property delimiter."""
        if not has_text(v):
            raise ValueError("Property delimiter must not be null or empty!")
        return v

    @field_validator("qualifier_delimiter", mode="before")
    @classmethod
    def reset_qualifier_delimiter(cls, v: Optional[str]) -> str:
        """Reset a missing qualifier delimiter to the default."""
        if v is None:
            return DEFAULT_QUALIFIER_DELIMITER
        return v

    @field_validator("fallback_sort", mode="before")
    @classmethod
    def parse_fallback_sort(cls, v: Any, info: ValidationInfo) -> Any:
        """Parse a fallback sort given as whitespace-separated sort expressions."""
        if isinstance(v, str):
            delimiter = info.data.get("property_delimiter", DEFAULT_PROPERTY_DELIMITER)
            return parse_sort(v.split(), delimiter)
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()

    model_config = SettingsConfigDict(
        env_prefix="SORTPARAM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def load_settings(**overrides: Any) -> SortSettings:
    """
    Build settings, reporting invalid values as SortConfigurationError.

    Parameters
    ----------
    **overrides : Any
        Values taking precedence over the environment.

    Returns
    -------
    SortSettings
        The validated settings.

    Raises
    ------
    SortConfigurationError
        If any value fails validation.
    """
    try:
        return SortSettings(**overrides)
    except ValidationError as e:
        first = e.errors()[0]
        field_name = str(first["loc"][0]) if first["loc"] else None
        raise SortConfigurationError(
            f"Invalid sort configuration for {field_name}: {first['msg']}",
            field_name=field_name,
            invalid_value=first.get("input"),
        ) from e


def get_settings() -> SortSettings:
    """Get sort parameter settings."""
    return load_settings()
