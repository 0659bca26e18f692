"""
Template catalog provider.

Exposes lookups over the static catalog and metadata tables, the startup
consistency check, and the process-wide keyword index built on first use.
"""

import logging
from functools import lru_cache

from ..errors import ConsistencyError
from .catalog import MemeTemplate, get_template, get_template_ids, is_valid_template, templates
from .categories import CategoryInfo, categories, get_category, get_category_for_template
from .metadata import POPULARITY_LEVELS, Category, TemplateMetadata, get_metadata, template_metadata
from .search import KeywordIndex, SearchResult

logger = logging.getLogger(__name__)

MAX_SLOTS = 8


def get_all_template_ids() -> list[str]:
    return get_template_ids()


def validate_catalog(
    catalog: dict[str, MemeTemplate] = templates,
    metadata: dict[str, TemplateMetadata] = template_metadata,
    category_table: dict[Category, CategoryInfo] = categories,
) -> None:
    """
    Check that the static tables agree with each other.

    Raises:
        ConsistencyError: listing every problem found.
    """
    problems: list[str] = []

    missing_metadata = [tid for tid in catalog if tid not in metadata]
    if missing_metadata:
        problems.append(f"templates without metadata: {', '.join(missing_metadata)}")
    orphan_metadata = [tid for tid in metadata if tid not in catalog]
    if orphan_metadata:
        problems.append(f"metadata without template: {', '.join(orphan_metadata)}")

    for template in catalog.values():
        if not 1 <= template.slots <= MAX_SLOTS:
            problems.append(f"{template.id}: slot count {template.slots} outside 1-{MAX_SLOTS}")
        if len(template.example) != template.slots:
            problems.append(
                f"{template.id}: {len(template.example)} example lines for {template.slots} slots"
            )

    for meta in metadata.values():
        if meta.popularity is not None and meta.popularity not in POPULARITY_LEVELS:
            problems.append(f"{meta.id}: unknown popularity '{meta.popularity}'")
        unknown_similar = [tid for tid in meta.similar if tid not in catalog]
        if unknown_similar:
            problems.append(f"{meta.id}: unknown similar templates {', '.join(unknown_similar)}")

    # Every template belongs to exactly one category, and it is the one its metadata names
    memberships: dict[str, list[Category]] = {}
    for category_id, info in category_table.items():
        for template_id in info.templates:
            memberships.setdefault(template_id, []).append(category_id)
            if template_id not in catalog:
                problems.append(f"category {category_id.value} lists unknown template {template_id}")

    for template_id in catalog:
        owners = memberships.get(template_id, [])
        if len(owners) != 1:
            names = ", ".join(owner.value for owner in owners) or "none"
            problems.append(f"{template_id}: expected exactly one category, found {names}")
        elif template_id in metadata and metadata[template_id].category != owners[0]:
            problems.append(
                f"{template_id}: metadata category {metadata[template_id].category.value} "
                f"but listed under {owners[0].value}"
            )

    if problems:
        raise ConsistencyError("Template catalog is inconsistent: " + "; ".join(problems))


@lru_cache(maxsize=None)
def get_keyword_index() -> KeywordIndex:
    """Validate the catalog and build the keyword index, once per process."""
    validate_catalog()
    index = KeywordIndex(template_metadata)
    logger.info(f"Keyword index built: {len(index)} keywords over {len(template_metadata)} templates")
    return index


__all__ = [
    "Category",
    "CategoryInfo",
    "KeywordIndex",
    "MemeTemplate",
    "SearchResult",
    "TemplateMetadata",
    "categories",
    "get_all_template_ids",
    "get_category",
    "get_category_for_template",
    "get_keyword_index",
    "get_metadata",
    "get_template",
    "is_valid_template",
    "template_metadata",
    "templates",
    "validate_catalog",
]
