"""Jinja template engine shared by the help page and admin notices."""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

DEFAULT_TEMPLATES_DIR = Path(__file__).parent / "templates"


class TemplateEngine:
    """Render named templates from the package template folder."""

    def __init__(self, *, templates_dir: Path | None = None) -> None:
        """Configure the Jinja environment rooted at ``templates_dir``.

        Parameters
        ----------
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``tec_admin/templates``.
        """
        self.templates_dir = templates_dir or DEFAULT_TEMPLATES_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def template(
        self,
        name: str,
        data: typ.Mapping[str, typ.Any] | None = None,
        echo: bool = True,  # noqa: FBT001, FBT002
    ) -> str:
        """Render ``name`` with ``data`` as context.

        The rendered HTML is always returned; when ``echo`` is true it is also
        written to stdout.
        """
        html = self.env.get_template(name).render(**dict(data or {}))
        if echo:
            sys.stdout.write(html)
        return html


__all__ = ["DEFAULT_TEMPLATES_DIR", "TemplateEngine"]
