"""Cyclopts CLI entrypoint for the tec_admin help page and notices.

The ``tec-admin`` console script defined here renders the Community Help page
to static HTML and previews the Event Tickets companion notices for a given
admin screen. Typical usage involves running ``tec-admin help-page`` in CI to
regenerate the page, and ``tec-admin notices --screen-id edit-tribe_events``
to check which notice a screen would show.

Examples
--------
Render the help page for the default configuration:

>>> from tec_admin.cli import main
>>> main()  # doctest: +SKIP

Preview the notices on the events list with Event Tickets installed:

>>> from tec_admin.cli import app
>>> app(
...     ["notices", "--screen-id", "edit-tribe_events", "--installed"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .admin_notices import AssetRegistry, NoticeRegistry
from .config import AdminConfigError, NoticeSettings, load_admin_config
from .help_page import HelpPageBuilder, plugin_exists_in
from .notices import AdminContext, AdminScreen, InstallEventTicketsNotice
from .plugins import StaticPluginRegistry

DEFAULT_CONFIG = Path("config/admin.yaml")

app = App(name="tec-admin", config=cyclopts.config.Env("TEC_ADMIN_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _parse_request_vars(pairs: list[str]) -> dict[str, str]:
    """Parse ``key=value`` pairs into a request variable mapping."""
    request_vars: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            msg = f"Request variables must look like key=value, got {pair!r}."
            raise ValueError(msg)
        request_vars[key] = value
    return request_vars


@app.command(name="help-page", help="Render the Community Help page to HTML.")
def help_page(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to admin config", env_var="TEC_ADMIN_CONFIG")
    ] = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path | None, Parameter(help="Override the output file")
    ] = None,
    plugins_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the plugins directory used to detect plugin files"),
    ] = None,
) -> None:
    """Render the Community Help page for the requested configuration.

    Parameters
    ----------
    config : Path, optional
        Path to the ``admin.yaml`` configuration file (overridable via
        ``TEC_ADMIN_CONFIG``).
    output : Path or None, optional
        Override the configured output file.
    plugins_dir : Path or None, optional
        Directory searched for installed-but-inactive plugin files.

    Raises
    ------
    AdminConfigError
        If the configuration has no ``help_page`` block.
    """
    admin_config = load_admin_config(config)
    page = admin_config.help_page
    if page is None:
        msg = f"No 'help_page' block defined in '{config}'."
        raise AdminConfigError(msg)
    if output is not None:
        page.output = output
    builder = HelpPageBuilder(
        page,
        site=admin_config.site,
        plugin_exists=plugin_exists_in(plugins_dir) if plugins_dir else None,
    )
    path = builder.run()
    print(f"wrote {_format_path(path)}")


@app.command(help="Preview the Event Tickets notices for an admin screen.")
def notices(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to admin config", env_var="TEC_ADMIN_CONFIG")
    ] = DEFAULT_CONFIG,
    screen_id: typ.Annotated[str | None, Parameter(help="Current screen id")] = None,
    post_type: typ.Annotated[
        str | None, Parameter(help="Current screen post type")
    ] = None,
    request: typ.Annotated[
        list[str] | None, Parameter(help="Request variables as key=value")
    ] = None,
    installed: typ.Annotated[
        bool, Parameter(help="Treat the companion plugin as installed")
    ] = False,
    active: typ.Annotated[
        bool, Parameter(help="Treat the companion plugin as active")
    ] = False,
    network_admin: bool = False,
    admin: bool = True,
) -> None:
    """Print the HTML of each notice that would show on the described screen.

    Parameters
    ----------
    config : Path, optional
        Path to the ``admin.yaml`` configuration file; a missing file falls
        back to default notice settings.
    screen_id, post_type : str or None, optional
        Current screen metadata; omit both to simulate a request without a
        screen.
    request : list[str] or None, optional
        Request variables such as ``action=install-plugin``.
    installed, active : bool, optional
        Installation state reported for the companion plugin.
    network_admin : bool, optional
        Evaluate against the network admin.
    admin : bool, optional
        Set ``--no-admin`` to simulate a front-end request.
    """
    settings = load_admin_config(config).notices if config.exists() else NoticeSettings()
    slug = settings.plugin_slug
    screen = (
        AdminScreen(id=screen_id, post_type=post_type)
        if screen_id or post_type
        else None
    )
    context = AdminContext(
        is_admin=admin,
        is_network_admin=network_admin,
        screen=screen,
        request_vars=_parse_request_vars(request or []),
    )
    notice = InstallEventTicketsNotice(
        StaticPluginRegistry(
            installed=[slug] if installed else [],
            active=[slug] if active else [],
        ),
        context,
        settings=settings,
    )
    registry = NoticeRegistry()
    notice.hook(registry, AssetRegistry())
    shown = False
    for notice_id, html in registry.render_visible():
        shown = True
        print(f"<!-- {notice_id} -->")
        print(html)
    if not shown:
        print("no notices")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``tec-admin`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
