"""Kata discovery and loading for fleetkata.

Each kata is a module under fleetkata/ defining:
    NAME         — CLI-facing kata name
    DESCRIPTION  — one-line summary
    <function>   — the kata's entry point, named in KATA_MODULES
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass
from typing import Callable, Optional

# Dotted module path -> name of its entry-point function.
KATA_MODULES = {
    "fleetkata.rating": "rating",
    "fleetkata.report_lines": "report_lines",
}


@dataclass
class KataInfo:
    """Metadata about a discovered kata."""

    name: str
    description: str
    module: str
    entry_point: Callable


def _load_module(module_path: str) -> Optional[KataInfo]:
    """Import a kata module and read its metadata.

    Returns None if the module can't be imported or lacks its entry point.
    """
    try:
        mod = importlib.import_module(module_path)
    except ImportError:
        return None

    entry_point = getattr(mod, KATA_MODULES[module_path], None)
    if entry_point is None:
        return None

    return KataInfo(
        name=getattr(mod, "NAME", module_path.rsplit(".", 1)[-1]),
        description=getattr(mod, "DESCRIPTION", ""),
        module=module_path,
        entry_point=entry_point,
    )


def list_katas() -> list[KataInfo]:
    """Discover all available katas, sorted by name."""
    katas = []
    for module_path in KATA_MODULES:
        info = _load_module(module_path)
        if info:
            katas.append(info)
    return sorted(katas, key=lambda k: k.name)


def load_kata(name: str) -> Optional[KataInfo]:
    """Load a single kata by its NAME (e.g., 'rating').

    Returns:
        KataInfo if a kata with that name exists, None otherwise.
    """
    for info in list_katas():
        if info.name == name:
            return info
    return None
