"""Meeting context classification package."""

from .classifier import ClassificationResult, classify, score_text
from .keywords import INLINE_CONTEXT_KEYWORDS, MEETING_CONTEXT_KEYWORDS, KeywordTable

__all__ = [
    "ClassificationResult",
    "classify",
    "score_text",
    "KeywordTable",
    "MEETING_CONTEXT_KEYWORDS",
    "INLINE_CONTEXT_KEYWORDS",
]
