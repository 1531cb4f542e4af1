"""Community Help page configuration builders."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from .helpers import _build_link, _build_section_header, _optional_str, _require_str
from .models import (
    AdminConfigError,
    ExtensionConfig,
    ExtensionsSectionConfig,
    FaqConfig,
    FaqSectionConfig,
    HelpPageConfig,
    KnowledgebaseCardConfig,
    KnowledgebaseSectionConfig,
    LinkConfig,
    ProductConfig,
)


def _build_help_page_config(payload: typ.Mapping[str, typ.Any]) -> HelpPageConfig:
    """Build the help page configuration from the provided payload."""
    match payload:
        case dict() as data:
            output = Path(data.get("output", "public/help-community.html"))
        case _:
            msg = "Help page configuration must be a mapping."
            raise AdminConfigError(msg)

    products = _build_products(data.get("products"))
    community_products = _build_community_products(data.get("community_products"))

    return HelpPageConfig(
        output=output,
        title=_optional_str(data.get("title")) or "Community Help",
        header_image=_optional_str(data.get("header_image"))
        or "images/help/help-community-header.png",
        description=_require_str(data, "description", "Help page"),
        products=products,
        community_products=community_products,
        knowledgebase=_build_knowledgebase(data.get("knowledgebase")),
        faqs=_build_faq_section(data.get("faqs")),
        extensions=_build_extensions_section(data.get("extensions")),
    )


def _build_products(payload: object) -> dict[str, ProductConfig]:
    """Build the product metadata lookup keyed by slug."""
    match payload:
        case None:
            return {}
        case dict() as entries:
            pass
        case _:
            msg = "Help page 'products' must be a mapping keyed by slug."
            raise AdminConfigError(msg)
    products: dict[str, ProductConfig] = {}
    for slug, entry in entries.items():
        match entry:
            case dict() as data:
                pass
            case _:
                msg = f"Product '{slug}' must be a mapping."
                raise AdminConfigError(msg)
        where = f"Product '{slug}'"
        products[str(slug)] = ProductConfig(
            slug=str(slug),
            title=_require_str(data, "title", where),
            logo=_require_str(data, "logo", where),
            description=_require_str(data, "description", where),
            plugin_dir=_require_str(data, "plugin_dir", where),
            main_file=_require_str(data, "main_file", where),
            link=_require_str(data, "link", where),
            is_installed=bool(data.get("is_installed", False)),
        )
    return products


def _build_community_products(payload: object) -> list[str]:
    """Return the ordered list of product slugs shown on the page."""
    match payload:
        case None:
            return []
        case list() as items:
            return [slug for item in items if (slug := _optional_str(item))]
        case _:
            msg = "Help page 'community_products' must be a list of slugs."
            raise AdminConfigError(msg)


def _build_knowledgebase(payload: object) -> KnowledgebaseSectionConfig:
    """Build the knowledge-base section with its link cards."""
    match payload:
        case dict() as data:
            header = _build_section_header(data, "Knowledgebase section")
        case _:
            msg = "Help page 'knowledgebase' must be a mapping."
            raise AdminConfigError(msg)
    cards: list[KnowledgebaseCardConfig] = []
    for entry in data.get("cards") or []:
        match entry:
            case {"title": title, "image": image, **rest} if title and image:
                pass
            case _:
                msg = "Knowledgebase cards require 'title' and 'image'."
                raise AdminConfigError(msg)
        links: list[LinkConfig] = [
            _build_link(link, f"Knowledgebase card '{title}'")
            for link in rest.get("links") or []
        ]
        cards.append(
            KnowledgebaseCardConfig(
                title=str(title),
                image=str(image),
                alt=_optional_str(rest.get("alt")) or "",
                links=links,
            )
        )
    return KnowledgebaseSectionConfig(header=header, cards=cards)


def _build_faq_section(payload: object) -> FaqSectionConfig:
    """Build the FAQ section; an empty item list renders an empty grid."""
    match payload:
        case dict() as data:
            header = _build_section_header(data, "FAQ section")
        case _:
            msg = "Help page 'faqs' must be a mapping."
            raise AdminConfigError(msg)
    items: list[FaqConfig] = []
    for entry in data.get("items") or []:
        match entry:
            case {"question": question, "answer": answer, "link": link}:
                pass
            case _:
                msg = "FAQ entries require 'question', 'answer', and 'link'."
                raise AdminConfigError(msg)
        items.append(FaqConfig(question=str(question), answer=str(answer), link=str(link)))
    return FaqSectionConfig(header=header, items=items)


def _build_extensions_section(payload: object) -> ExtensionsSectionConfig:
    """Build the free extensions section."""
    match payload:
        case dict() as data:
            header = _build_section_header(data, "Extensions section")
        case _:
            msg = "Help page 'extensions' must be a mapping."
            raise AdminConfigError(msg)
    items: list[ExtensionConfig] = []
    for entry in data.get("items") or []:
        match entry:
            case {"title": title, "description": description, "link": link}:
                pass
            case _:
                msg = "Extension entries require 'title', 'description', and 'link'."
                raise AdminConfigError(msg)
        items.append(
            ExtensionConfig(title=str(title), description=str(description), link=str(link))
        )
    return ExtensionsSectionConfig(
        header=header,
        intro=_optional_str(data.get("intro")) or "",
        items=items,
    )


__all__ = [
    "_build_community_products",
    "_build_extensions_section",
    "_build_faq_section",
    "_build_help_page_config",
    "_build_knowledgebase",
    "_build_products",
]
