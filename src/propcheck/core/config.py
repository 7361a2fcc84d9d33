"""Runner configuration: settings model plus YAML preset loading.

Precedence (highest to lowest):
1. overrides - Direct keyword overrides from the caller
2. config_file - User's YAML configuration file
3. preset - Named preset from propcheck/core/presets/
4. defaults - Built-in Pydantic defaults
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


class RunnerSettings(BaseModel):
    """Settings consumed by the property runner."""

    model_config = {"frozen": True, "extra": "forbid"}

    max_examples: int = Field(
        default=100,
        gt=0,
        description="Number of examples to sample before declaring the property passed",
    )
    max_shrinks: int = Field(
        default=1000,
        ge=0,
        description="Maximum successful reduction steps when minimising a counterexample",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for the runner's random source (None for a fresh unseeded source)",
    )
    preset_name: str | None = Field(
        default=None,
        description="Preset name used to build these settings (if any)",
    )


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dicts, with override taking precedence.

    Returns:
        Merged dict (new dict, does not mutate inputs).
    """
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _get_presets_dir() -> Path:
    """Get the presets directory path."""
    return Path(__file__).parent / "presets"


def list_presets(presets_dir: Path | None = None) -> list[str]:
    """List available preset names (without .yaml extension), sorted."""
    directory = presets_dir if presets_dir is not None else _get_presets_dir()
    if not directory.exists():
        return []
    return sorted(p.stem for p in directory.glob("*.yaml"))


def load_preset(preset_name: str, presets_dir: Path | None = None) -> dict[str, Any]:
    """Load a preset configuration by name.

    Raises:
        FileNotFoundError: If preset does not exist.
        yaml.YAMLError: If preset YAML is malformed.
        ValueError: If preset is not a YAML mapping.
    """
    directory = presets_dir if presets_dir is not None else _get_presets_dir()
    preset_path = directory / f"{preset_name}.yaml"

    if not preset_path.exists():
        available = list_presets(directory)
        raise FileNotFoundError(f"Preset '{preset_name}' not found. Available presets: {available}")

    with preset_path.open() as f:
        loaded = yaml.safe_load(f)
        if not isinstance(loaded, dict):
            raise ValueError(f"Preset '{preset_name}' must be a YAML mapping, got {type(loaded).__name__}")
        return loaded


def load_config(
    *,
    preset: str | None = None,
    config_file: Path | None = None,
    overrides: dict[str, Any] | None = None,
    presets_dir: Path | None = None,
) -> RunnerSettings:
    """Load runner settings with precedence handling.

    Raises:
        FileNotFoundError: If preset or config_file not found.
        yaml.YAMLError: If YAML is malformed.
        pydantic.ValidationError: If final settings fail validation.
    """
    config_dict: dict[str, Any] = {}

    if preset is not None:
        config_dict = load_preset(preset, presets_dir)

    if config_file is not None:
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")
        with config_file.open() as f:
            file_config = yaml.safe_load(f) or {}
        config_dict = deep_merge(config_dict, file_config)

    if overrides is not None:
        config_dict = deep_merge(config_dict, overrides)

    config_dict["preset_name"] = preset

    return RunnerSettings(**config_dict)
