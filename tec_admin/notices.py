"""Install and activate notices for the Event Tickets companion plugin.

:class:`InstallEventTicketsNotice` decides, for the current admin request,
whether the dashboard should nudge the user to install Event Tickets or to
activate an installed copy. The host's globals are injected:

- a :class:`~tec_admin.plugins.PluginRegistry` for installation state,
- an :class:`AdminContext` describing the current screen and request,
- optional admin helpers able to recognise plugin screens,
- a filter applied to the activate decision (identity by default).

Both decisions are recomputed on every call. The install notice requires the
plugin to be absent and the activate notice requires it to be installed, so
the two can never show together whatever the registry reports.

Typical usage mirrors the dashboard bootstrap:

>>> from tec_admin.admin_notices import AssetRegistry, NoticeRegistry
>>> from tec_admin.plugins import StaticPluginRegistry
>>> context = AdminContext(screen=AdminScreen(id="edit-tribe_events"))
>>> notice = InstallEventTicketsNotice(StaticPluginRegistry(), context)
>>> notices = NoticeRegistry()
>>> notice.hook(notices, AssetRegistry())
>>> [notice_id for notice_id, _ in notices.render_visible()]
['event-tickets-install']
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import logging
import typing as typ

from . import _constants as const
from .admin_notices import (
    Asset,
    AssetRegistry,
    NoticeError,
    NoticeOptions,
    NoticeRegistry,
)
from .config.helpers import add_query_arg, join_url, should_hide_upsell
from .config.models import NoticeSettings
from .templating import TemplateEngine

if typ.TYPE_CHECKING:
    from .plugins import PluginRegistry

logger = logging.getLogger(__name__)

NOTICE_ACTIONS = frozenset({"install", "activate"})


def _is_empty(value: str | None) -> bool:
    """Return True for request values the host treats as empty, ``"0"`` included."""
    return value in (None, "", "0")


class AdminHelpers(typ.Protocol):
    """Optional capability reporting whether the screen belongs to the plugin."""

    def is_screen(self) -> bool: ...


@dc.dataclass(slots=True, frozen=True)
class AdminScreen:
    """Current admin screen metadata."""

    id: str | None = None
    post_type: str | None = None


@dc.dataclass(slots=True, frozen=True)
class AdminContext:
    """Snapshot of the admin request the notices are evaluated against."""

    is_admin: bool = True
    is_network_admin: bool = False
    can_install_plugins: bool = True
    screen: AdminScreen | None = None
    request_vars: cabc.Mapping[str, str] = dc.field(default_factory=dict)

    def request_var(self, name: str) -> str | None:
        """Return the request variable ``name`` or None when absent."""
        return self.request_vars.get(name)


def _identity(value: bool) -> bool:  # noqa: FBT001 - filter callback signature
    return value


class InstallEventTicketsNotice:
    """Decide and render the Event Tickets install/activate notices."""

    def __init__(
        self,
        registry: PluginRegistry,
        context: AdminContext,
        *,
        settings: NoticeSettings | None = None,
        admin_helpers: AdminHelpers | None = None,
        should_display_filter: cabc.Callable[[bool], bool] = _identity,
        template_factory: cabc.Callable[[], TemplateEngine] = TemplateEngine,
    ) -> None:
        """Bind the notice to its collaborators.

        Parameters
        ----------
        registry : PluginRegistry
            Installation state lookup queried on every decision.
        context : AdminContext
            Current admin screen and request variables.
        settings : NoticeSettings, optional
            Plugin slug, host URLs, and upsell suppression. Defaults to
            :class:`NoticeSettings` defaults.
        admin_helpers : AdminHelpers, optional
            Extra screen detection used when the built-in checks miss.
        should_display_filter : callable, optional
            Post-processing applied to the activate decision.
        template_factory : callable, optional
            Builds the template engine on first use.
        """
        self.registry = registry
        self.context = context
        self.settings = settings or NoticeSettings()
        self.admin_helpers = admin_helpers
        self.has_admin_helpers = callable(getattr(admin_helpers, "is_screen", None))
        self.should_display_filter = should_display_filter
        self._template_factory = template_factory
        self._template: TemplateEngine | None = None

    @property
    def plugin_slug(self) -> str:
        return self.settings.plugin_slug

    def hook(self, notices: NoticeRegistry, assets: AssetRegistry) -> None:
        """Register the assets and both notices for admins who can install plugins."""
        if not self.context.is_admin or not self.context.can_install_plugins:
            return

        self.assets(assets)
        options = NoticeOptions(dismiss=True, type="warning")
        notices.register(
            const.NOTICE_INSTALL_ID,
            self.notice_install,
            options,
            self.should_display_notice_install,
        )
        notices.register(
            const.NOTICE_ACTIVATE_ID,
            self.notice_activate,
            options,
            self.should_display_notice_activate,
        )

    def assets(self, assets: AssetRegistry) -> None:
        """Register the notice script and stylesheet."""
        assets.register(
            Asset(
                handle=f"{const.ASSETS_GROUP}-js",
                path="admin/notice-install-event-tickets.js",
                dependencies=["jquery", "tribe-common"],
                hooks=["admin_enqueue_scripts"],
                groups=[const.ASSETS_GROUP],
                conditional=self.should_enqueue_assets,
            )
        )
        assets.register(
            Asset(
                handle=f"{const.ASSETS_GROUP}-css",
                path="admin/notice-install-event-tickets.css",
                dependencies=["wp-components", "tec-variables-full"],
                hooks=["admin_enqueue_scripts", "wp_enqueue_scripts"],
                groups=[const.ASSETS_GROUP],
                conditional=self.should_enqueue_assets,
            )
        )

    def is_installed(self) -> bool:
        return self.registry.is_installed(self.plugin_slug)

    def is_active(self) -> bool:
        return self.registry.is_active(self.plugin_slug)

    def is_install_plugin_page(self) -> bool:
        """Return True on the classic "Install Plugin" screen."""
        return self.context.request_var("action") == const.INSTALL_PLUGIN_ACTION

    def should_display_notice_install(self) -> bool:
        """Return True when the install notice should be displayed."""
        if should_hide_upsell(self.settings.hide_upsell, const.UPSELL_INSTALL_KEY):
            return False

        display = (
            not self.is_installed()
            and _is_empty(self.context.request_var(const.WELCOME_MESSAGE_VAR))
            and self.is_tec_related_page()
            and not self.is_install_plugin_page()
        )
        logger.debug("install notice for %s: %s", self.plugin_slug, display)
        return display

    def should_display_notice_activate(self) -> bool:
        """Return True when the activate notice should be displayed."""
        if should_hide_upsell(self.settings.hide_upsell, const.UPSELL_ACTIVATE_KEY):
            return False

        installed = self.is_installed()
        active = self.is_active()
        if active and not installed:
            logger.warning(
                "registry reports %s active but not installed", self.plugin_slug
            )
        plugin_status_check = installed and not active
        display = bool(
            self.should_display_filter(plugin_status_check and self.is_tec_related_page())
        )
        logger.debug("activate notice for %s: %s", self.plugin_slug, display)
        return display

    def should_enqueue_assets(self) -> bool:
        return self.should_display_notice_activate() or self.should_display_notice_install()

    def is_tec_related_page(self) -> bool:
        """Return True when the current admin screen belongs to the calendar."""
        if not self.context.is_admin:
            return False

        screen = self.context.screen
        if screen is None:
            return False

        if screen.post_type in const.TEC_POST_TYPES:
            return True

        screen_id = screen.id or ""
        if const.EVENTS_POST_TYPE in screen_id:
            return True
        if screen_id.startswith(const.SCREEN_ID_PREFIX):
            return True
        if const.SETTINGS_SCREEN_MARKER in screen_id:
            return True

        if self.has_admin_helpers and self.admin_helpers is not None:
            return bool(self.admin_helpers.is_screen())

        return False

    def notice_install(self) -> str:
        """Return the install notice HTML."""
        return self.get_template().template(
            const.NOTICE_TEMPLATE, self.get_template_data(), echo=False
        )

    def notice_activate(self) -> str:
        """Return the activate notice HTML."""
        overrides = {
            "description": (
                "You're almost there! Activate Event Tickets for free and you'll "
                "be able to sell tickets, collect RSVPs, and manage attendees all "
                "from your Dashboard."
            ),
            "button_label": "Activate Event Tickets",
            "action": "activate",
        }
        return self.get_template().template(
            const.NOTICE_TEMPLATE, self.get_template_data(overrides), echo=False
        )

    def get_template_data(
        self, overrides: cabc.Mapping[str, str] | None = None
    ) -> dict[str, str]:
        """Return the notice template data with ``overrides`` applied.

        Raises
        ------
        NoticeError
            If the resulting ``action`` is not ``install`` or ``activate``.
        """
        if self.context.is_network_admin:
            admin_url = join_url(self.settings.network_admin_url, "settings.php")
        else:
            admin_url = join_url(self.settings.admin_url, "admin.php")
        redirect_url = add_query_arg(admin_url, {"page": const.TICKETS_SETTINGS_PAGE})

        data = {
            "action": "install",
            "title": "Start selling tickets to your Events",
            "description": (
                "Sell tickets, collect RSVPs, and manage attendees for free with "
                "Event Tickets."
            ),
            "button_label": "Install Event Tickets",
            "tickets_logo": join_url(self.settings.common_url, const.TICKETS_LOGO_PATH),
            "redirect_url": redirect_url,
            "plugin_slug": self.plugin_slug,
        }
        data.update(overrides or {})
        if data["action"] not in NOTICE_ACTIONS:
            msg = f"Unknown notice action '{data['action']}'."
            raise NoticeError(msg)
        return data

    def get_template(self) -> TemplateEngine:
        """Return the template engine, building it on first use."""
        if self._template is None:
            self._template = self._template_factory()
        return self._template


__all__ = [
    "NOTICE_ACTIONS",
    "AdminContext",
    "AdminHelpers",
    "AdminScreen",
    "InstallEventTicketsNotice",
]
