"""Typed dataclasses describing tec_admin configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from .._constants import PLUGIN_SLUG


class AdminConfigError(ValueError):
    """Raised when the admin configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class LinkConfig:
    """Plain hyperlink shown in section headers and knowledge-base cards."""

    label: str
    href: str


@dc.dataclass(slots=True)
class SectionHeaderConfig:
    """Heading plus "see all" link rendered above a help page grid."""

    heading: str
    link: LinkConfig


@dc.dataclass(slots=True)
class ProductConfig:
    """Product metadata looked up by slug when rendering product cards."""

    slug: str
    title: str
    logo: str
    description: str
    plugin_dir: str
    main_file: str
    link: str
    is_installed: bool = False


@dc.dataclass(slots=True)
class FaqConfig:
    """Frequently asked question card content."""

    question: str
    answer: str
    link: str


@dc.dataclass(slots=True)
class ExtensionConfig:
    """Free extension card content."""

    title: str
    description: str
    link: str


@dc.dataclass(slots=True)
class KnowledgebaseCardConfig:
    """Group of knowledge-base links under an illustrated title."""

    title: str
    image: str
    alt: str
    links: list[LinkConfig]


@dc.dataclass(slots=True)
class KnowledgebaseSectionConfig:
    """The "Start Here" knowledge-base grid."""

    header: SectionHeaderConfig
    cards: list[KnowledgebaseCardConfig]


@dc.dataclass(slots=True)
class FaqSectionConfig:
    """FAQ grid configuration."""

    header: SectionHeaderConfig
    items: list[FaqConfig]


@dc.dataclass(slots=True)
class ExtensionsSectionConfig:
    """Free extensions grid configuration."""

    header: SectionHeaderConfig
    intro: str
    items: list[ExtensionConfig]


@dc.dataclass(slots=True)
class HelpPageConfig:
    """Aggregated Community Help page content sourced from YAML config."""

    output: Path
    title: str
    header_image: str
    description: str
    products: dict[str, ProductConfig]
    community_products: list[str]
    knowledgebase: KnowledgebaseSectionConfig
    faqs: FaqSectionConfig
    extensions: ExtensionsSectionConfig


@dc.dataclass(slots=True)
class SiteConfig:
    """Host URLs and paths shared by the help page and notices."""

    admin_url: str = "/wp-admin/"
    network_admin_url: str = "/wp-admin/network/"
    common_url: str = "/wp-content/plugins/the-events-calendar/common/"
    resources_url: str = "/wp-content/plugins/the-events-calendar/common/src/resources/"
    plugins_dir: Path = Path("wp-content/plugins")


@dc.dataclass(slots=True)
class NoticeSettings:
    """Companion plugin notice settings."""

    plugin_slug: str = PLUGIN_SLUG
    admin_url: str = "/wp-admin/"
    network_admin_url: str = "/wp-admin/network/"
    common_url: str = "/wp-content/plugins/the-events-calendar/common/"
    hide_upsell: bool | str | list[str] = False


@dc.dataclass(slots=True)
class AdminConfig:
    """Top-level configuration loaded from ``config/admin.yaml``."""

    site: SiteConfig
    notices: NoticeSettings
    help_page: HelpPageConfig | None = None


__all__ = [
    "AdminConfig",
    "AdminConfigError",
    "ExtensionConfig",
    "ExtensionsSectionConfig",
    "FaqConfig",
    "FaqSectionConfig",
    "HelpPageConfig",
    "KnowledgebaseCardConfig",
    "KnowledgebaseSectionConfig",
    "LinkConfig",
    "NoticeSettings",
    "ProductConfig",
    "SectionHeaderConfig",
    "SiteConfig",
]
