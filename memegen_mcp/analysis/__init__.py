"""
Text analysis: content signals, template suggestions, and quote extraction.
"""

from .content import ContentSignals, analyze_content
from .quotes import ExtractedQuote, QuoteReport, extract_key_quotes
from .suggester import SuggestionReport, TemplateSuggestion, suggest_templates, suggest_templates_batch

__all__ = [
    'ContentSignals',
    'ExtractedQuote',
    'QuoteReport',
    'SuggestionReport',
    'TemplateSuggestion',
    'analyze_content',
    'extract_key_quotes',
    'suggest_templates',
    'suggest_templates_batch',
]
