"""Unit tests for the Event Tickets install/activate notice decisions.

These tests drive :class:`tec_admin.notices.InstallEventTicketsNotice` with
static registries and hand-built admin contexts, covering screen detection,
upsell suppression, the activate filter, template data, and hook wiring.

Usage
-----
Run ``pytest tests/test_notices.py -v`` or ``make test`` to execute the suite.
"""

from __future__ import annotations

import itertools
import typing as typ

import pytest
from bs4 import BeautifulSoup

from tec_admin.admin_notices import AssetRegistry, NoticeError, NoticeRegistry
from tec_admin.config import NoticeSettings
from tec_admin.notices import AdminContext, AdminScreen, InstallEventTicketsNotice
from tec_admin.plugins import StaticPluginRegistry
from tec_admin.templating import TemplateEngine

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from pytest_mock import MockerFixture

SLUG = "event-tickets"
EVENTS_SCREEN = AdminScreen(id="edit-tribe_events", post_type="tribe_events")


def _notice(
    *,
    installed: bool = False,
    active: bool = False,
    screen: AdminScreen | None = EVENTS_SCREEN,
    request_vars: cabc.Mapping[str, str] | None = None,
    settings: NoticeSettings | None = None,
    **kwargs: typ.Any,  # noqa: ANN401 - forwarded constructor options
) -> InstallEventTicketsNotice:
    context_kwargs = {
        key: kwargs.pop(key)
        for key in ("is_admin", "is_network_admin", "can_install_plugins")
        if key in kwargs
    }
    registry = StaticPluginRegistry(
        installed=[SLUG] if installed else [],
        active=[SLUG] if active else [],
    )
    context = AdminContext(
        screen=screen, request_vars=dict(request_vars or {}), **context_kwargs
    )
    return InstallEventTicketsNotice(registry, context, settings=settings, **kwargs)


def test_install_notice_shows_when_plugin_missing() -> None:
    """Missing plugin on a calendar screen shows install and hides activate."""
    notice = _notice()
    assert notice.should_display_notice_install() is True
    assert notice.should_display_notice_activate() is False


def test_activate_notice_shows_when_installed_but_inactive() -> None:
    """An installed but inactive plugin shows only the activate notice."""
    notice = _notice(installed=True)
    assert notice.should_display_notice_activate() is True
    assert notice.should_display_notice_install() is False


def test_no_notice_when_installed_and_active() -> None:
    notice = _notice(installed=True, active=True)
    assert notice.should_display_notice_install() is False
    assert notice.should_display_notice_activate() is False


@pytest.mark.parametrize(
    ("installed", "active", "relevant"),
    list(itertools.product([True, False], repeat=3)),
)
def test_notices_never_show_together(
    installed: bool,  # noqa: FBT001
    active: bool,  # noqa: FBT001
    relevant: bool,  # noqa: FBT001
) -> None:
    """Install and activate decisions are never both true."""
    screen = EVENTS_SCREEN if relevant else AdminScreen(id="dashboard")
    notice = _notice(installed=installed, active=active, screen=screen)
    assert not (
        notice.should_display_notice_install()
        and notice.should_display_notice_activate()
    ), f"both notices shown for installed={installed} active={active}"


@pytest.mark.parametrize("installed", [True, False])
def test_outside_admin_hides_both_notices(installed: bool) -> None:  # noqa: FBT001
    notice = _notice(installed=installed, is_admin=False)
    assert notice.is_tec_related_page() is False
    assert notice.should_display_notice_install() is False
    assert notice.should_display_notice_activate() is False


@pytest.mark.parametrize("hide_upsell", [True, "all"])
@pytest.mark.parametrize("installed", [True, False])
def test_upsell_suppression_hides_both_notices(
    hide_upsell: bool | str,
    installed: bool,  # noqa: FBT001
) -> None:
    notice = _notice(installed=installed, settings=NoticeSettings(hide_upsell=hide_upsell))
    assert notice.should_display_notice_install() is False
    assert notice.should_display_notice_activate() is False


def test_upsell_suppression_by_key_only_hides_matching_notice() -> None:
    settings = NoticeSettings(hide_upsell=["event-tickets-install-notice"])
    assert _notice(settings=settings).should_display_notice_install() is False
    assert _notice(installed=True, settings=settings).should_display_notice_activate()


@pytest.mark.parametrize(
    ("value", "expected"),
    [("", True), ("0", True), ("1", False), ("yes", False)],
)
def test_welcome_message_request_hides_install_notice(
    value: str,
    expected: bool,  # noqa: FBT001
) -> None:
    """Only a non-empty welcome message value suppresses the install notice."""
    notice = _notice(request_vars={"welcome-message-the-events-calendar": value})
    assert notice.should_display_notice_install() is expected


def test_install_plugin_screen_hides_install_notice() -> None:
    notice = _notice(request_vars={"action": "install-plugin"})
    assert notice.is_install_plugin_page() is True
    assert notice.should_display_notice_install() is False


@pytest.mark.parametrize(
    "screen",
    [
        AdminScreen(id="edit", post_type="tribe_events"),
        AdminScreen(id="edit", post_type="tribe_organizer"),
        AdminScreen(id="edit", post_type="tribe_venue"),
        AdminScreen(id="tribe_events_page_tribe-help"),
        AdminScreen(id="tec-events-settings"),
        AdminScreen(id="toplevel_page_tribe-common"),
    ],
    ids=["events", "organizers", "venues", "events-id", "tec-prefix", "settings"],
)
def test_calendar_screens_are_relevant(screen: AdminScreen) -> None:
    assert _notice(screen=screen).is_tec_related_page() is True


@pytest.mark.parametrize(
    "screen",
    [None, AdminScreen(), AdminScreen(id="dashboard", post_type="post")],
    ids=["no-screen", "empty-screen", "dashboard"],
)
def test_other_screens_are_not_relevant(screen: AdminScreen | None) -> None:
    notice = _notice(screen=screen)
    assert notice.is_tec_related_page() is False
    assert notice.should_display_notice_install() is False


def test_admin_helpers_extend_screen_detection(mocker: MockerFixture) -> None:
    """The optional helpers capability is consulted when built-in checks miss."""
    helpers = mocker.Mock()
    helpers.is_screen.return_value = True
    notice = _notice(screen=AdminScreen(id="dashboard"), admin_helpers=helpers)
    assert notice.has_admin_helpers is True
    assert notice.is_tec_related_page() is True
    helpers.is_screen.assert_called_once_with()


def test_helpers_without_screen_check_are_ignored() -> None:
    notice = _notice(screen=AdminScreen(id="dashboard"), admin_helpers=object())
    assert notice.has_admin_helpers is False
    assert notice.is_tec_related_page() is False


def test_activate_filter_receives_raw_decision(mocker: MockerFixture) -> None:
    """The activate filter sees the raw decision and its result wins."""
    hook = mocker.Mock(return_value=False)
    notice = _notice(installed=True, should_display_filter=hook)
    assert notice.should_display_notice_activate() is False
    hook.assert_called_once_with(True)


def test_activate_filter_can_force_display(mocker: MockerFixture) -> None:
    hook = mocker.Mock(return_value=True)
    notice = _notice(installed=True, active=True, should_display_filter=hook)
    assert notice.should_display_notice_activate() is True
    hook.assert_called_once_with(False)


def test_active_but_not_installed_shows_nothing_and_warns(
    mocker: MockerFixture, caplog: pytest.LogCaptureFixture
) -> None:
    registry = mocker.Mock(spec=StaticPluginRegistry)
    registry.is_installed.return_value = False
    registry.is_active.return_value = True
    notice = InstallEventTicketsNotice(registry, AdminContext(screen=EVENTS_SCREEN))
    with caplog.at_level("WARNING", logger="tec_admin.notices"):
        assert notice.should_display_notice_install() is False
        assert notice.should_display_notice_activate() is False
    assert "active but not installed" in caplog.text


def test_registry_is_queried_on_every_decision(mocker: MockerFixture) -> None:
    registry = mocker.Mock(spec=StaticPluginRegistry)
    registry.is_installed.return_value = False
    registry.is_active.return_value = False
    notice = InstallEventTicketsNotice(registry, AdminContext(screen=EVENTS_SCREEN))
    notice.should_display_notice_install()
    notice.should_display_notice_install()
    assert registry.is_installed.call_count == 2
    registry.is_installed.assert_called_with(SLUG)


def test_template_data_defaults_to_install() -> None:
    settings = NoticeSettings(
        admin_url="https://example.test/wp-admin/",
        common_url="https://example.test/wp-content/plugins/the-events-calendar/common/",
    )
    data = _notice(settings=settings).get_template_data()
    assert data["action"] == "install"
    assert data["button_label"] == "Install Event Tickets"
    assert data["redirect_url"] == (
        "https://example.test/wp-admin/admin.php?page=tec-tickets-settings"
    )
    assert data["tickets_logo"] == (
        "https://example.test/wp-content/plugins/the-events-calendar/common/"
        "src/resources/images/logo/event-tickets.svg"
    )


def test_template_data_uses_network_admin_settings() -> None:
    settings = NoticeSettings(network_admin_url="https://example.test/wp-admin/network/")
    data = _notice(settings=settings, is_network_admin=True).get_template_data()
    assert data["redirect_url"] == (
        "https://example.test/wp-admin/network/settings.php?page=tec-tickets-settings"
    )


def test_template_data_rejects_unknown_action() -> None:
    with pytest.raises(NoticeError, match="Unknown notice action"):
        _notice().get_template_data({"action": "delete"})


def test_notice_html_reflects_action() -> None:
    install = BeautifulSoup(_notice().notice_install(), "html.parser")
    activate = BeautifulSoup(_notice(installed=True).notice_activate(), "html.parser")
    install_button = install.select_one("[data-test='notice-install'] button")
    activate_button = activate.select_one("[data-test='notice-activate'] button")
    assert install_button is not None, "expected install notice button"
    assert activate_button is not None, "expected activate notice button"
    assert install_button.get("data-action") == "install"
    assert activate_button.get_text(strip=True) == "Activate Event Tickets"
    assert activate_button.get("data-plugin-slug") == SLUG


def test_template_engine_is_built_once(mocker: MockerFixture) -> None:
    factory = mocker.Mock(return_value=TemplateEngine())
    notice = _notice(template_factory=factory)
    notice.notice_install()
    notice.notice_activate()
    assert notice.get_template() is factory.return_value
    factory.assert_called_once_with()


def test_hook_registers_notices_and_assets() -> None:
    notices = NoticeRegistry()
    assets = AssetRegistry()
    _notice().hook(notices, assets)

    assert len(notices) == 2
    install = notices.get("event-tickets-install")
    assert install.options.dismiss is True
    assert install.options.type == "warning"
    assert "event-tickets-activate" in notices
    assert [notice_id for notice_id, _ in notices.render_visible()] == [
        "event-tickets-install"
    ]
    group = assets.group("tribe-events-admin-notice-install-event-tickets")
    assert sorted(asset.kind for asset in group) == ["css", "js"]
    assert len(assets.enqueued("admin_enqueue_scripts")) == 2
    assert len(assets.enqueued("wp_enqueue_scripts")) == 1


def test_assets_skipped_when_no_notice_shows() -> None:
    assets = AssetRegistry()
    _notice(installed=True, active=True).hook(NoticeRegistry(), assets)
    assert assets.enqueued("admin_enqueue_scripts") == []


@pytest.mark.parametrize(
    "context_kwargs",
    [{"is_admin": False}, {"can_install_plugins": False}],
    ids=["front-end", "no-capability"],
)
def test_hook_is_noop_without_admin_capability(
    context_kwargs: dict[str, bool],
) -> None:
    notices = NoticeRegistry()
    assets = AssetRegistry()
    _notice(**context_kwargs).hook(notices, assets)
    assert len(notices) == 0
    assert assets.enqueued("admin_enqueue_scripts") == []
