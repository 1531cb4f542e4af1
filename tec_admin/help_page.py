"""Community Help page rendering pipeline.

This module turns the ``help_page`` block of ``config/admin.yaml`` into the
static Community Help document: a grid of product cards, knowledge-base link
groups, FAQ cards, and free-extension cards. The main entry point is
:class:`HelpPageBuilder`, which resolves each product's call to action,
renders ``help_community.jinja``, and persists the HTML.

Each product card offers exactly one affordance:

- ``active``: the product is installed and active; a disabled "Active" button.
- ``activate``: the plugin files exist but it is not active; a link to the
  plugins screen.
- ``learn-more``: anything else; an external link to the product page.

Typical usage mirrors the CLI:

>>> from pathlib import Path
>>> from tec_admin.config import load_admin_config
>>> config = load_admin_config(Path("config/admin.yaml"))  # doctest: +SKIP
>>> HelpPageBuilder(config.help_page, site=config.site).run()  # doctest: +SKIP
PosixPath('public/help-community.html')
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import logging
import typing as typ

from . import _constants as const
from .config import ProductConfig
from .config.helpers import join_url
from .plugins import plugin_file_exists
from .templating import TemplateEngine

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import HelpPageConfig, SiteConfig

logger = logging.getLogger(__name__)

PluginExists = cabc.Callable[[ProductConfig], bool]


@dc.dataclass(slots=True, frozen=True)
class ProductAffordance:
    """Call to action rendered on a product card."""

    kind: typ.Literal["active", "activate", "learn-more"]
    label: str
    href: str | None = None
    external: bool = False


@dc.dataclass(slots=True, frozen=True)
class ProductCard:
    """Template-ready product card."""

    slug: str
    title: str
    description: str
    logo_url: str
    affordance: ProductAffordance


def product_affordance(
    product: ProductConfig, *, plugin_exists: bool, admin_url: str
) -> ProductAffordance:
    """Choose the single affordance shown on ``product``'s card."""
    if product.is_installed:
        return ProductAffordance(kind="active", label="Active")
    if plugin_exists:
        return ProductAffordance(
            kind="activate", label="Activate", href=join_url(admin_url, "plugins.php")
        )
    return ProductAffordance(
        kind="learn-more", label="Learn More", href=product.link, external=True
    )


def plugin_exists_in(plugins_dir: Path) -> PluginExists:
    """Return a predicate checking a product's main file under ``plugins_dir``."""

    def _exists(product: ProductConfig) -> bool:
        return plugin_file_exists(plugins_dir, product.plugin_dir, product.main_file)

    return _exists


class HelpPageBuilder:
    """Render the Community Help page from structured config data."""

    def __init__(
        self,
        help_page: HelpPageConfig,
        *,
        site: SiteConfig,
        plugin_exists: PluginExists | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the builder and template engine.

        Parameters
        ----------
        help_page : HelpPageConfig
            Parsed ``help_page`` block; provides the product lookup, the
            ordered community product slugs, and the FAQ, extension, and
            knowledge-base sections.
        site : SiteConfig
            Host URLs used for the plugins screen link and resource images.
        plugin_exists : callable, optional
            Predicate telling whether a product's plugin files are present.
            Defaults to checking ``site.plugins_dir`` on disk.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``tec_admin/templates``.
        """
        self.help_page = help_page
        self.site = site
        self.plugin_exists = plugin_exists or plugin_exists_in(site.plugins_dir)
        self.engine = TemplateEngine(templates_dir=templates_dir)

    def product_cards(self) -> list[ProductCard]:
        """Resolve the community products into template-ready cards.

        Slugs missing from the product lookup are skipped.
        """
        cards: list[ProductCard] = []
        for slug in self.help_page.community_products:
            product = self.help_page.products.get(slug)
            if product is None:
                logger.warning("skipping unknown community product %s", slug)
                continue
            affordance = product_affordance(
                product,
                plugin_exists=not product.is_installed and self.plugin_exists(product),
                admin_url=self.site.admin_url,
            )
            cards.append(
                ProductCard(
                    slug=product.slug,
                    title=product.title,
                    description=product.description,
                    logo_url=self.resource_url(product.logo),
                    affordance=affordance,
                )
            )
        return cards

    def resource_url(self, path: str) -> str:
        return join_url(self.site.resources_url, path)

    def render(self) -> str:
        """Render the help page HTML and return it."""
        context = {
            "page": self.help_page,
            "products": self.product_cards(),
            "resource_url": self.resource_url,
        }
        html = self.engine.template(const.HELP_PAGE_TEMPLATE, context, echo=False)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def run(self) -> Path:
        """Render and write the help page HTML, returning the output path.

        Parent directories are created as needed and filesystem errors
        propagate.
        """
        output_path = self.help_page.output
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(), encoding="utf-8")
        return output_path


__all__ = [
    "HelpPageBuilder",
    "ProductAffordance",
    "ProductCard",
    "plugin_exists_in",
    "product_affordance",
]
