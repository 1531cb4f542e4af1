"""Load and validate admin configuration YAML for tec_admin.

This subpackage parses the project's ``admin.yaml`` file, applies defaults for
site URLs and notice settings, and produces strongly typed dataclasses
(:class:`AdminConfig`, :class:`HelpPageConfig`, etc.) that the help page
builder and the notice controller consume. The primary entry point is
:func:`load_admin_config`.

Examples
--------
>>> from pathlib import Path
>>> from tec_admin.config import load_admin_config
>>> config = load_admin_config(Path("config/admin.yaml"))  # doctest: +SKIP
>>> config.help_page.community_products  # doctest: +SKIP
['events-community', 'events-community-tickets']
"""

from .loader import load_admin_config
from .models import (
    AdminConfig,
    AdminConfigError,
    ExtensionConfig,
    ExtensionsSectionConfig,
    FaqConfig,
    FaqSectionConfig,
    HelpPageConfig,
    KnowledgebaseCardConfig,
    KnowledgebaseSectionConfig,
    LinkConfig,
    NoticeSettings,
    ProductConfig,
    SectionHeaderConfig,
    SiteConfig,
)

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
    "load_admin_config",
]
