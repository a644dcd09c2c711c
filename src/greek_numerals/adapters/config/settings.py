"""Typed view of the ``[greek_numerals]`` configuration section."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from greek_numerals.domain.enums import Case, OutputFormat
from greek_numerals.domain.errors import ConfigurationError

#: Name of the configuration section read by :func:`load_numeral_settings`.
SECTION = "greek_numerals"


class NumeralSettings(BaseModel):
    """Defaults applied by ``greek-numerals convert``.

    Attributes:
        case: Letter case used when ``--case`` is omitted.
        output_format: Output format used when ``--format`` is omitted
            (``format`` in TOML).

    Example:
        >>> NumeralSettings.model_validate({"case": "UPPER", "format": "json"}).case
        <Case.UPPER: 'upper'>
        >>> NumeralSettings().output_format
        <OutputFormat.HUMAN: 'human'>
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    case: Case = Case.LOWER
    output_format: OutputFormat = Field(default=OutputFormat.HUMAN, alias="format")

    @field_validator("case", "output_format", mode="before")
    @classmethod
    def _fold_case(cls, v: Any) -> Any:
        """Accept ``"Upper"`` and ``" json "`` as well as canonical values."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


def _describe(exc: ValidationError) -> str:
    """Flatten pydantic errors into ``field: message`` pairs."""
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc']) or SECTION}: {error['msg']}" for error in exc.errors()
    )


def load_numeral_settings(config: Config) -> NumeralSettings:
    """Validate the ``[greek_numerals]`` section of ``config``.

    A missing section yields the built-in defaults.

    Args:
        config: Already-loaded layered configuration.

    Returns:
        Frozen settings model.

    Raises:
        ConfigurationError: If the section is not a table or holds unknown
            keys or invalid values.

    Example:
        >>> load_numeral_settings(Config({"greek_numerals": {"case": "upper"}}, {})).case
        <Case.UPPER: 'upper'>
        >>> load_numeral_settings(Config({}, {})).case
        <Case.LOWER: 'lower'>
    """
    section: Any = config.get(SECTION, default={})
    if not isinstance(section, Mapping):
        raise ConfigurationError(f"[{SECTION}] must be a table, got {type(section).__name__}")
    try:
        return NumeralSettings.model_validate(dict(section))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [{SECTION}] configuration - {_describe(exc)}") from exc


__all__ = [
    "SECTION",
    "NumeralSettings",
    "load_numeral_settings",
]
