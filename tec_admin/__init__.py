"""Admin help page and companion plugin notices for the events calendar.

This package exposes the CLI entry points used by ``uv run tec-admin`` to
render the Community Help page and to preview the Event Tickets install and
activate notices for a given admin screen.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from tec_admin import main
>>> main()  # doctest: +SKIP
>>> from tec_admin import app
>>> app(["help-page", "--config", "config/admin.yaml"])  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
