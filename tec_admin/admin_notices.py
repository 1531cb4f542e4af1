"""In-memory registries for admin notices and their assets.

The host dashboard collects notices as ``(id, render, options, visible)``
tuples and decides at render time which ones to print; assets are attached to
hooks and enqueued only when their conditional holds. These registries keep
that contract without a host so the notice controller can be hooked, rendered,
and inspected from the CLI and tests.
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import logging

logger = logging.getLogger(__name__)


class NoticeError(ValueError):
    """Raised when a notice is registered or rendered with invalid data."""


@dc.dataclass(slots=True, frozen=True)
class NoticeOptions:
    """Display options attached to a registered notice."""

    dismiss: bool = True
    type: str = "warning"


@dc.dataclass(slots=True)
class AdminNotice:
    """A registered notice with its render callback and visibility predicate."""

    notice_id: str
    render: cabc.Callable[[], str]
    options: NoticeOptions
    visible: cabc.Callable[[], bool]


class NoticeRegistry:
    """Collect admin notices in registration order."""

    def __init__(self) -> None:
        self._notices: dict[str, AdminNotice] = {}

    def register(
        self,
        notice_id: str,
        render: cabc.Callable[[], str],
        options: NoticeOptions | None = None,
        visible: cabc.Callable[[], bool] | None = None,
    ) -> AdminNotice:
        """Register a notice; ids must be unique."""
        if notice_id in self._notices:
            msg = f"Notice '{notice_id}' is already registered."
            raise NoticeError(msg)
        notice = AdminNotice(
            notice_id=notice_id,
            render=render,
            options=options or NoticeOptions(),
            visible=visible or (lambda: True),
        )
        self._notices[notice_id] = notice
        logger.debug("registered notice %s", notice_id)
        return notice

    def get(self, notice_id: str) -> AdminNotice:
        """Return the notice registered under ``notice_id``."""
        try:
            return self._notices[notice_id]
        except KeyError as exc:
            known = ", ".join(self._notices) or "none"
            msg = f"Unknown notice '{notice_id}'. Known notices: {known}"
            raise KeyError(msg) from exc

    def __contains__(self, notice_id: object) -> bool:
        return notice_id in self._notices

    def __len__(self) -> int:
        return len(self._notices)

    def render_visible(self) -> cabc.Iterator[tuple[str, str]]:
        """Yield ``(notice_id, html)`` for each notice whose predicate holds."""
        for notice in self._notices.values():
            if notice.visible():
                yield notice.notice_id, notice.render()


@dc.dataclass(slots=True)
class Asset:
    """A script or stylesheet attached to one or more hooks."""

    handle: str
    path: str
    dependencies: list[str]
    hooks: list[str]
    groups: list[str] = dc.field(default_factory=list)
    conditional: cabc.Callable[[], bool] | None = None

    @property
    def kind(self) -> str:
        """Return ``"css"`` or ``"js"`` based on the asset path."""
        return "css" if self.path.endswith(".css") else "js"


class AssetRegistry:
    """Collect assets and resolve which ones to enqueue for a hook."""

    def __init__(self) -> None:
        self._assets: dict[str, Asset] = {}

    def register(self, asset: Asset) -> Asset:
        self._assets[asset.handle] = asset
        return asset

    def group(self, name: str) -> list[Asset]:
        """Return every asset registered in group ``name``."""
        return [asset for asset in self._assets.values() if name in asset.groups]

    def enqueued(self, hook: str) -> list[Asset]:
        """Return the assets attached to ``hook`` whose conditional is true."""
        return [
            asset
            for asset in self._assets.values()
            if hook in asset.hooks and (asset.conditional is None or asset.conditional())
        ]


__all__ = [
    "AdminNotice",
    "Asset",
    "AssetRegistry",
    "NoticeError",
    "NoticeOptions",
    "NoticeRegistry",
]
