"""Alternating disks public package exports."""

from .alternate import sort_alternate
from .config import DisksSettings, load_config, load_settings
from .disks import Color, DiskIndexError, DiskRow, DiskStateError, InvalidConstructionError
from .lawnmower import sort_lawnmower
from .results import SortResult

__all__ = [
    "Color",
    "DiskIndexError",
    "DiskRow",
    "DiskStateError",
    "DisksSettings",
    "InvalidConstructionError",
    "SortResult",
    "load_config",
    "load_settings",
    "sort_alternate",
    "sort_lawnmower",
]
