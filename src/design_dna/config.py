"""Configuration loading and management for Design DNA.

Configuration sources are merged in priority order:
    1. Defaults (defined in NormalizationConfig / ThresholdConfig)
    2. Project config (./design-dna.toml)
    3. Explicit config file
    4. Environment variables (DESIGN_DNA_* prefix)
    5. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(min_page_threshold=5)
    >>> config.thresholds.min_page_threshold
    5
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]
OutputFormat = Literal["json", "table"]

PROJECT_CONFIG_NAME = "design-dna.toml"
ENV_PREFIX = "DESIGN_DNA_"


@dataclass(frozen=True)
class ThresholdConfig:
    """Thresholds and tuning parameters for the normalization engine.

    Attributes:
        Cross-page validation:
            min_page_threshold: Distinct pages a token needs to become a standard

        Color deduplication:
            color_delta_e: CIEDE2000 distance below which colors merge (2.3 = JND)

        Unit normalization:
            base_font_size: Root font size in px used for rem/em

        Spacing scale:
            spacing_candidates: Base units tried in order
            spacing_coverage_threshold: Fraction of values a candidate must divide

        Confidence levels:
            low_confidence_below: Values under this are "low"
            medium_confidence_below: Values under this are "medium", else "high"
            density_bonus_cap: Maximum uplift for repeated in-page occurrences
            density_bonus_divisor: Extra occurrences per page needed for +1.0 bonus

        Component confidence (weights must sum to 1.0):
            component_page_weight: Weight of page coverage
            component_consistency_weight: Weight of variant consistency
            component_density_weight: Weight of instance density
            expected_instances_per_page: Density at which the density term saturates
    """

    # === Cross-page validation ===
    min_page_threshold: int = 3

    # === Color deduplication ===
    color_delta_e: float = 2.3

    # === Unit normalization ===
    base_font_size: float = 16.0

    # === Spacing scale ===
    spacing_candidates: tuple[int, ...] = (4, 6, 8, 10)
    spacing_coverage_threshold: float = 0.8

    # === Confidence levels ===
    low_confidence_below: float = 0.3
    medium_confidence_below: float = 0.6
    density_bonus_cap: float = 0.2
    density_bonus_divisor: float = 5.0

    # === Component confidence weights (sum = 1.0) ===
    component_page_weight: float = 0.5
    component_consistency_weight: float = 0.3
    component_density_weight: float = 0.2
    expected_instances_per_page: float = 3.0

    def __post_init__(self) -> None:
        """Validate threshold configuration."""
        if self.min_page_threshold < 0:
            raise ValueError("min_page_threshold must be non-negative")
        if self.color_delta_e <= 0:
            raise ValueError("color_delta_e must be positive")
        if self.base_font_size <= 0:
            raise ValueError("base_font_size must be positive")

        if not self.spacing_candidates:
            raise ValueError("spacing_candidates must not be empty")
        if any(c < 1 for c in self.spacing_candidates):
            raise ValueError("spacing_candidates must be positive integers")

        ratio_fields = [
            "spacing_coverage_threshold",
            "low_confidence_below",
            "medium_confidence_below",
            "density_bonus_cap",
        ]
        for field_name in ratio_fields:
            value = getattr(self, field_name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{field_name} must be between 0.0 and 1.0")

        if self.low_confidence_below > self.medium_confidence_below:
            raise ValueError("low_confidence_below must not exceed medium_confidence_below")
        if self.density_bonus_divisor <= 0:
            raise ValueError("density_bonus_divisor must be positive")
        if self.expected_instances_per_page <= 0:
            raise ValueError("expected_instances_per_page must be positive")

        weight_sum = (
            self.component_page_weight
            + self.component_consistency_weight
            + self.component_density_weight
        )
        if not 0.99 <= weight_sum <= 1.01:
            raise ValueError(f"Component weights must sum to 1.0, got {weight_sum:.3f}")


DEFAULT_THRESHOLDS = ThresholdConfig()


@dataclass(frozen=True)
class NormalizationConfig:
    """Configuration for a normalization run.

    Attributes:
        thresholds: Algorithm thresholds (nested config)
        verbosity: Logging verbosity level
        output_format: CLI rendering ("json" or "table")
    """

    thresholds: ThresholdConfig = field(default_factory=ThresholdConfig)
    verbosity: Verbosity = "normal"
    output_format: OutputFormat = "json"

    def __post_init__(self) -> None:
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise ValueError("verbosity must be one of quiet/normal/verbose")
        if self.output_format not in ("json", "table"):
            raise ValueError("output_format must be 'json' or 'table'")


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> NormalizationConfig:
    """Load configuration with auto-discovery and merging.

    Threshold fields (e.g. ``min_page_threshold``) may be passed directly as
    overrides or set as ``DESIGN_DNA_MIN_PAGE_THRESHOLD``; they are routed
    into the nested ``ThresholdConfig``.

    Raises:
        ConfigurationError: If a config file is invalid or missing, or a value is
            out of range
    """
    merged: dict[str, Any] = {}
    threshold_values: dict[str, Any] = {}

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        try:
            _merge_file(_load_toml_file(project_config), merged, threshold_values)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Invalid project config '{project_config}': {e}")

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        try:
            _merge_file(_load_toml_file(config_file), merged, threshold_values)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Invalid config file '{config_file}': {e}")

    env_top, env_thresholds = _load_env_vars()
    merged.update(env_top)
    threshold_values.update(env_thresholds)

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    threshold_names = {f.name for f in fields(ThresholdConfig)}
    for key, value in overrides.items():
        if value is None:
            continue
        if key in threshold_names:
            threshold_values[key] = value
        else:
            merged[key] = value

    if "spacing_candidates" in threshold_values:
        threshold_values["spacing_candidates"] = tuple(threshold_values["spacing_candidates"])

    try:
        thresholds = replace(DEFAULT_THRESHOLDS, **threshold_values)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid [thresholds] config: {e}")

    try:
        return NormalizationConfig(thresholds=thresholds, **merged)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _merge_file(data: dict, merged: dict[str, Any], threshold_values: dict[str, Any]) -> None:
    section = data.pop("thresholds", None)
    if section is not None:
        if not isinstance(section, dict):
            raise InvalidConfigError("thresholds", section, "must be a table")
        threshold_values.update(section)
    merged.update(data)


def _load_env_vars() -> tuple[dict[str, Any], dict[str, Any]]:
    """Load configuration from DESIGN_DNA_* environment variables.

    Supported environment variables:
        DESIGN_DNA_VERBOSITY: quiet/normal/verbose
        DESIGN_DNA_OUTPUT_FORMAT: json/table
        DESIGN_DNA_MIN_PAGE_THRESHOLD: int
        DESIGN_DNA_COLOR_DELTA_E: float
        DESIGN_DNA_BASE_FONT_SIZE: float
        ...any other scalar ThresholdConfig field

    Returns:
        (top-level fields, threshold fields) parsed from the environment.
    """
    top: dict[str, Any] = {}
    thresholds: dict[str, Any] = {}

    for target, cls in ((top, NormalizationConfig), (thresholds, ThresholdConfig)):
        type_hints = get_type_hints(cls)
        for field_name in cls.__dataclass_fields__:
            env_key = f"{ENV_PREFIX}{field_name.upper()}"
            env_value = os.environ.get(env_key)
            if env_value is None:
                continue

            type_hint = type_hints.get(field_name)
            if type_hint is None:
                continue

            try:
                parsed = _parse_env_value(env_value, type_hint)
            except ValueError as e:
                raise InvalidConfigError(env_key, env_value, str(e))
            if parsed is not None:
                target[field_name] = parsed

    return top, thresholds


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Returns None for types that cannot be expressed as a single env string.
    """
    origin = getattr(type_hint, "__origin__", None)

    if origin is tuple or origin is list:
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    with open(path, "rb") as f:
        return tomllib.load(f)
