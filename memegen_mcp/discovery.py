"""
Catalog discovery tools: browse categories, list a category, keyword search,
and full template details.
"""

import logging
from typing import Any

from .errors import NotFoundError
from .schemas import SearchByCategoryInput, SearchByKeywordInput, TemplateDetailsInput, validate_input
from .templates import categories, get_keyword_index, get_metadata, get_template

logger = logging.getLogger(__name__)

_POPULARITY_ORDER = {"high": 0, "medium": 1, "low": 2}


def browse_categories() -> dict[str, Any]:
    summaries = [
        {
            "id": info.id.value,
            "name": info.name,
            "description": info.description,
            "count": len(info.templates),
        }
        for info in categories.values()
    ]
    return {
        "categories": summaries,
        "total_templates": sum(summary["count"] for summary in summaries),
    }


def search_by_category(category: str) -> dict[str, Any]:
    """
    List the templates of one category, most popular first, then by name.

    Raises:
        ValidationError: if ``category`` is not one of the nine categories.
    """
    args = validate_input(SearchByCategoryInput, category=category)
    info = categories[args.category]

    entries = []
    for template_id in info.templates:
        template = get_template(template_id)
        meta = get_metadata(template_id)
        if template is None or meta is None:
            raise NotFoundError(f'Template "{template_id}" not found in catalog or metadata')
        entries.append({
            "id": template.id,
            "name": template.name,
            "usage": meta.usage,
            "slots": template.slots,
            "example": list(template.example),
            "popularity": meta.popularity,
        })

    entries.sort(key=lambda entry: (_POPULARITY_ORDER.get(entry["popularity"], 3), entry["name"].lower()))

    return {
        "category": info.id.value,
        "category_name": info.name,
        "category_description": info.description,
        "templates": entries,
        "count": len(entries),
    }


def search_by_keyword(query: str, limit: int | None = None) -> dict[str, Any]:
    """
    Keyword search enriched with template data.

    Raises:
        ValidationError: on a blank query or non-positive limit.
    """
    args = validate_input(SearchByKeywordInput, query=query, limit=limit)
    hits = get_keyword_index().search(args.query)[:args.limit]

    results = []
    for hit in hits:
        template = get_template(hit.template_id)
        meta = get_metadata(hit.template_id)
        if template is None or meta is None:
            raise NotFoundError(f'Template "{hit.template_id}" not found')
        results.append({
            "id": template.id,
            "name": template.name,
            "usage": meta.usage,
            "slots": template.slots,
            "category": meta.category.value,
            "relevance": round(hit.relevance, 2),
        })

    logger.debug(f"Keyword search '{args.query}' returned {len(results)} results")
    return {"query": args.query, "results": results, "count": len(results)}


def get_template_details(template_ids: list[str]) -> dict[str, Any]:
    """
    Full details for one or more templates.

    Raises:
        ValidationError: if no ids are given.
        NotFoundError: listing every unknown id.
    """
    args = validate_input(TemplateDetailsInput, template_ids=template_ids)

    details = []
    not_found = []
    for template_id in args.template_ids:
        template = get_template(template_id)
        meta = get_metadata(template_id)
        if template is None or meta is None:
            not_found.append(template_id)
            continue
        details.append({
            "id": template.id,
            "name": template.name,
            "usage": meta.usage,
            "category": meta.category.value,
            "keywords": list(meta.keywords),
            "slots": template.slots,
            "example": list(template.example),
            "similar": list(meta.similar),
            "popularity": meta.popularity,
        })

    if not_found:
        raise NotFoundError(f"Template(s) not found: {', '.join(not_found)}")

    return {"templates": details, "count": len(details)}
