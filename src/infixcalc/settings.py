"""Configuration for result formatting."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

ENV_PREFIX = "INFIXCALC_"


@dataclass(frozen=True)
class FormatSettings:
    significant_digits: int = 15
    mantissa_digits: int = 6
    scientific_upper: float = 1e10
    scientific_lower: float = 1e-6


DEFAULT_SETTINGS = FormatSettings()


def _coerce(raw: Mapping[str, object], key: str, convert, default):
    value = raw.get(key)
    if value is None:
        return default
    try:
        return convert(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid value for {key!r}: {value!r}") from e


def _as_int(value: object) -> int:
    return int(float(value))  # type: ignore[arg-type]


def load_settings(raw: Mapping[str, object] | None) -> FormatSettings:
    """Build settings from a mapping; missing keys keep their defaults."""
    raw = raw or {}
    defaults = DEFAULT_SETTINGS
    significant_digits = _coerce(raw, "significant_digits", _as_int, defaults.significant_digits)
    mantissa_digits = _coerce(raw, "mantissa_digits", _as_int, defaults.mantissa_digits)
    scientific_upper = _coerce(raw, "scientific_upper", float, defaults.scientific_upper)
    scientific_lower = _coerce(raw, "scientific_lower", float, defaults.scientific_lower)
    return FormatSettings(
        significant_digits=max(1, significant_digits),
        mantissa_digits=max(1, mantissa_digits),
        scientific_upper=scientific_upper,
        scientific_lower=scientific_lower,
    )


def settings_from_env(environ: Mapping[str, str] | None = None) -> FormatSettings:
    """Read ``INFIXCALC_*`` variables, e.g. ``INFIXCALC_SIGNIFICANT_DIGITS=12``."""
    environ = os.environ if environ is None else environ
    raw = {
        key[len(ENV_PREFIX) :].lower(): value
        for key, value in environ.items()
        if key.startswith(ENV_PREFIX)
    }
    return load_settings(raw)
