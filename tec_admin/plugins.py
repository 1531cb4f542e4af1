"""Read-only plugin installation registries.

The notice controller only needs two questions answered per plugin slug: is it
installed, and is it active. :class:`PluginRegistry` names that contract;
:class:`StaticPluginRegistry` answers from fixed sets (CLI flags, tests), and
:func:`plugin_file_exists` checks a plugin's main file on disk.
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ
from pathlib import Path


class PluginRegistry(typ.Protocol):
    """Installation state lookup keyed by plugin slug."""

    def is_installed(self, slug: str) -> bool: ...

    def is_active(self, slug: str) -> bool: ...


class StaticPluginRegistry:
    """Registry answering from explicit installed and active slug sets."""

    def __init__(
        self,
        installed: cabc.Iterable[str] = (),
        active: cabc.Iterable[str] = (),
    ) -> None:
        self.installed = frozenset(installed)
        self.active = frozenset(active)

    def is_installed(self, slug: str) -> bool:
        return slug in self.installed

    def is_active(self, slug: str) -> bool:
        return slug in self.active


def plugin_file_exists(plugins_dir: Path, plugin_dir: str, main_file: str) -> bool:
    """Return True when the plugin's main file exists under ``plugins_dir``."""
    return (plugins_dir / plugin_dir / main_file).is_file()


__all__ = [
    "PluginRegistry",
    "StaticPluginRegistry",
    "plugin_file_exists",
]
