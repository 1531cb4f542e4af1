"""Utility helpers shared by the tec_admin configuration loader and renderers."""

from __future__ import annotations

import typing as typ
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from .models import AdminConfigError, LinkConfig, SectionHeaderConfig

HIDE_ALL_UPSELLS = "all"


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _require_str(payload: typ.Mapping[str, object], key: str, where: str) -> str:
    """Return ``payload[key]`` as a stripped string or raise AdminConfigError."""
    value = _optional_str(payload.get(key))
    if value is None:
        msg = f"{where} is missing '{key}'."
        raise AdminConfigError(msg)
    return value


def _build_link(payload: object, where: str) -> LinkConfig:
    """Build a LinkConfig from a ``{label, href}`` mapping."""
    match payload:
        case {"label": label, "href": href} if label and href:
            return LinkConfig(label=str(label), href=str(href))
        case _:
            msg = f"{where} requires a link with 'label' and 'href'."
            raise AdminConfigError(msg)


def _build_section_header(payload: typ.Mapping[str, object], where: str) -> SectionHeaderConfig:
    """Build a section header from ``heading`` and ``link`` entries."""
    return SectionHeaderConfig(
        heading=_require_str(payload, "heading", where),
        link=_build_link(payload.get("link"), where),
    )


def _normalize_upsell_setting(value: object) -> bool | str | list[str]:
    """Normalize the ``hide_upsell`` option into a bool, ``"all"``, or key list."""
    match value:
        case None:
            return False
        case bool():
            return value
        case str() as text:
            stripped = text.strip()
            if stripped.lower() in {"", "0", "false", "no"}:
                return False
            if stripped.lower() in {"1", "true", "yes", HIDE_ALL_UPSELLS}:
                return HIDE_ALL_UPSELLS
            return [segment.strip() for segment in stripped.split(",") if segment.strip()]
        case list() as items:
            return [str(item).strip() for item in items if str(item).strip()]
        case _:
            msg = "'hide_upsell' must be a boolean, 'all', or a list of upsell keys."
            raise AdminConfigError(msg)


def should_hide_upsell(setting: bool | str | list[str], key: str) -> bool:
    """Return True when the upsell identified by ``key`` is suppressed.

    Examples
    --------
    >>> should_hide_upsell(True, "event-tickets-install-notice")
    True
    >>> should_hide_upsell(["event-tickets-activate-notice"], "event-tickets-install-notice")
    False
    """
    if setting is True or setting == HIDE_ALL_UPSELLS:
        return True
    if isinstance(setting, list):
        return key in setting
    return False


def add_query_arg(url: str, args: typ.Mapping[str, str]) -> str:
    """Return ``url`` with ``args`` merged into its query string.

    Existing parameters with the same name are replaced; the remaining query
    order is preserved, blank values included.

    Examples
    --------
    >>> add_query_arg("https://example.test/wp-admin/admin.php", {"page": "x"})
    'https://example.test/wp-admin/admin.php?page=x'
    """
    parts = urlsplit(url)
    query = [
        (key, value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
        if key not in args
    ]
    query.extend((key, str(value)) for key, value in args.items())
    return urlunsplit(parts._replace(query=urlencode(query)))


def join_url(base: str, path: str) -> str:
    """Join a relative ``path`` onto ``base``; absolute URLs pass through."""
    if urlsplit(path).scheme:
        return path
    return f"{base.rstrip('/')}/{path.lstrip('/')}"


__all__ = [
    "HIDE_ALL_UPSELLS",
    "_build_link",
    "_build_section_header",
    "_normalize_upsell_setting",
    "_optional_str",
    "_require_str",
    "add_query_arg",
    "join_url",
    "should_hide_upsell",
]
