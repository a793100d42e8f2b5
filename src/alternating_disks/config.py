"""Configuration helpers: environment settings and YAML run configs."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Callable, Iterable

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .alternate import sort_alternate
from .disks import DiskRow
from .lawnmower import sort_lawnmower
from .results import SortResult

SortFunction = Callable[[DiskRow], SortResult]

ALGORITHMS: dict[str, SortFunction] = {
    "alternate": sort_alternate,
    "lawnmower": sort_lawnmower,
}

DEFAULTS: dict[str, Any] = {
    "light_count": 3,
    "algorithms": ["alternate", "lawnmower"],
    "benchmark": {"start": 1, "stop": 50, "check_bounds": True},
    "report": {"indent": 2},
    "plot": {"title": "Swaps per light disk count"},
}


def _merge_dict(base: dict[str, Any], layer: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of *base* with *layer* applied; nested sections merge key by key."""

    merged = copy.deepcopy(base)
    for key, value in layer.items():
        section = merged.get(key)
        merged[key] = _merge_dict(section, value) if isinstance(value, dict) and isinstance(section, dict) else value
    return merged


def load_config(
    path: str | None,
    overrides: dict[str, Any] | None = None,
    defaults: dict[str, Any] | None = None,
) -> dict[str, Any]:
    config = copy.deepcopy(defaults if defaults is not None else DEFAULTS)
    if path:
        with Path(path).open("r", encoding="utf-8") as fh:
            file_cfg = yaml.safe_load(fh) or {}
        if not isinstance(file_cfg, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        config = _merge_dict(config, file_cfg)
    if overrides:
        config = _merge_dict(config, overrides)
    return config


def resolve_algorithms(names: str | Iterable[str]) -> list[tuple[str, SortFunction]]:
    """Map algorithm names to their sort functions, preserving order."""

    if isinstance(names, str):
        names = names.split(",")
    resolved: list[tuple[str, SortFunction]] = []
    for raw in names:
        name = raw.strip().lower()
        if not name:
            continue
        func = ALGORITHMS.get(name)
        if func is None:
            known = ", ".join(sorted(ALGORITHMS))
            raise ValueError(f"Unknown algorithm {raw!r}; expected one of {known}")
        resolved.append((name, func))
    if not resolved:
        raise ValueError("No algorithms selected")
    return resolved


class DisksSettings(BaseSettings):
    """Environment driven defaults for the command line driver."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    light_count: int = Field(default=3, ge=1, alias="DISKS_LIGHT_COUNT")
    algorithms: str = Field(default="alternate,lawnmower", alias="DISKS_ALGORITHMS")
    log_level: str = Field(default="WARNING", alias="DISKS_LOG_LEVEL")


def load_settings() -> DisksSettings:
    """Read the ``DISKS_*`` variables (and ``.env``) that seed the CLI defaults."""

    return DisksSettings()


def settings_defaults(settings: DisksSettings) -> dict[str, Any]:
    """Return ``DEFAULTS`` with the environment settings applied on top."""

    return _merge_dict(
        DEFAULTS,
        {"light_count": settings.light_count, "algorithms": settings.algorithms},
    )
