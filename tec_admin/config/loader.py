"""Load admin configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .help_page import _build_help_page_config
from .helpers import _normalize_upsell_setting, _optional_str
from .models import AdminConfig, AdminConfigError, NoticeSettings, SiteConfig


def load_admin_config(path: Path) -> AdminConfig:
    """Load the YAML configuration describing the site, notices, and help page.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/admin.yaml``).

    Returns
    -------
    AdminConfig
        Parsed configuration with site URLs, notice settings, and the optional
        Community Help page definition.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    AdminConfigError
        If required sections or fields are missing or invalid.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_admin_config(Path("config/admin.yaml"))  # doctest: +SKIP
    >>> config.notices.plugin_slug  # doctest: +SKIP
    'event-tickets'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    site = _build_site_config(raw.get("site"))
    notices = _build_notice_settings(raw.get("notices"), site=site)
    help_page_raw = raw.get("help_page")
    help_page = _build_help_page_config(help_page_raw) if help_page_raw else None

    return AdminConfig(site=site, notices=notices, help_page=help_page)


def _build_site_config(payload: object) -> SiteConfig:
    """Build site URLs, falling back to dataclass defaults for missing keys."""
    base = SiteConfig()
    match payload:
        case None:
            return base
        case dict() as data:
            pass
        case _:
            msg = "Site configuration must be a mapping."
            raise AdminConfigError(msg)
    plugins_dir = _optional_str(data.get("plugins_dir"))
    return SiteConfig(
        admin_url=_optional_str(data.get("admin_url")) or base.admin_url,
        network_admin_url=_optional_str(data.get("network_admin_url"))
        or base.network_admin_url,
        common_url=_optional_str(data.get("common_url")) or base.common_url,
        resources_url=_optional_str(data.get("resources_url")) or base.resources_url,
        plugins_dir=Path(plugins_dir) if plugins_dir else base.plugins_dir,
    )


def _build_notice_settings(payload: object, *, site: SiteConfig) -> NoticeSettings:
    """Build companion notice settings, inheriting URLs from the site block."""
    match payload:
        case None:
            data: dict[str, typ.Any] = {}
        case dict():
            data = payload
        case _:
            msg = "Notices configuration must be a mapping."
            raise AdminConfigError(msg)
    return NoticeSettings(
        plugin_slug=_optional_str(data.get("plugin_slug")) or NoticeSettings().plugin_slug,
        admin_url=site.admin_url,
        network_admin_url=site.network_admin_url,
        common_url=site.common_url,
        hide_upsell=_normalize_upsell_setting(data.get("hide_upsell")),
    )


__all__ = ["load_admin_config"]
