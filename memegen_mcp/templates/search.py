"""
Keyword search over template metadata.

An inverted index (keyword -> template ids) is built once from the metadata
table. Queries are matched term by term, exactly against the index and fuzzily
against every indexed keyword, then scored with a precision bias: the score is
divided by the size of the template's keyword list, so a template with a few
specific keywords outranks one with a long generic list.
"""

from collections.abc import Mapping
from dataclasses import dataclass

from .metadata import TemplateMetadata


@dataclass(frozen=True)
class SearchResult:
    template_id: str
    relevance: float


def _normalize(query: str) -> str:
    return query.lower().strip()


class KeywordIndex:
    """Read-only inverted index from lower-cased keyword to template ids."""

    def __init__(self, metadata: Mapping[str, TemplateMetadata]):
        self._metadata = metadata
        self._index: dict[str, set[str]] = {}
        for template_id, meta in metadata.items():
            for keyword in meta.keywords:
                self._index.setdefault(keyword.lower(), set()).add(template_id)

    def __len__(self) -> int:
        return len(self._index)

    def all_keywords(self) -> list[str]:
        return sorted(self._index)

    def templates_for_keyword(self, keyword: str) -> list[str]:
        """Template ids holding exactly this keyword."""
        return sorted(self._index.get(_normalize(keyword), ()))

    def search(self, query: str) -> list[SearchResult]:
        normalized = _normalize(query)
        if not normalized:
            return []

        terms = normalized.split()
        matched: dict[str, list[str]] = {}

        for term in terms:
            for template_id in sorted(self._index.get(term, ())):
                matched.setdefault(template_id, []).append(term)

            # Partial matches catch plurals and word stems in either direction
            for keyword, template_ids in self._index.items():
                if keyword == term or (term not in keyword and keyword not in term):
                    continue
                for template_id in sorted(template_ids):
                    keywords = matched.setdefault(template_id, [])
                    if keyword not in keywords:
                        keywords.append(keyword)

        results = []
        for template_id, keywords in matched.items():
            relevance = self._relevance(template_id, keywords, terms)
            if relevance > 0:
                results.append(SearchResult(template_id=template_id, relevance=relevance))

        results.sort(key=lambda result: result.relevance, reverse=True)
        return results

    def _relevance(self, template_id: str, matched_keywords: list[str], terms: list[str]) -> float:
        meta = self._metadata.get(template_id)
        if meta is None:
            return 0.0

        exact = sum(1 for keyword in matched_keywords if keyword in terms)
        partial = sum(
            1 for keyword in matched_keywords
            if any(term in keyword or keyword in term for term in terms)
        )
        usage = meta.usage.lower()
        usage_hits = sum(1 for term in terms if term in usage)

        score = exact * 2 + partial + usage_hits * 0.5
        return score / (len(meta.keywords) + 1)
