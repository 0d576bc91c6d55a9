"""Keyword-count classifier mapping free text to a functional domain."""

import logging
from dataclasses import dataclass, field
from typing import Dict

from ..catalog.models import Domain
from .keywords import KeywordTable


@dataclass(frozen=True)
class ClassificationResult:
    """Outcome of a classification

    Args:
        domain: Winning domain, or Domain.GENERAL when nothing matched
        confidence: Winner score over the highest score, 0.0 without a match
        scores: Keyword hit count per domain, in table order
    """
    domain: Domain
    confidence: float
    scores: Dict[Domain, int] = field(default_factory=dict)


def score_text(text: str, table: KeywordTable) -> Dict[Domain, int]:
    """Count, per domain, the keywords contained in ``text`` as substrings"""
    lowered = text.lower()
    return {
        domain: sum(1 for keyword in keywords if keyword in lowered)
        for domain, keywords in table.keywords.items()
    }


def classify(text: str, table: KeywordTable) -> ClassificationResult:
    """Assign ``text`` to the domain with the most keyword hits

    Ties go to the domain listed first in the table. Since the winner holds the
    highest score, confidence is 1.0 whenever any keyword matched.
    """
    scores = score_text(text, table)

    best_domain = None
    best_score = 0
    for domain, score in scores.items():
        if score > best_score:
            best_domain, best_score = domain, score

    if best_domain is None:
        logging.info(f"[Classifier] No keyword from '{table.name}' matched, using '{Domain.GENERAL.value}'")
        return ClassificationResult(Domain.GENERAL, 0.0, scores)

    confidence = best_score / max(scores.values())
    logging.info(
        f"[Classifier] '{table.name}' v{table.version} -> {best_domain.value} "
        f"(score={best_score}, confidence={confidence:.2f})"
    )
    return ClassificationResult(best_domain, confidence, scores)


__all__ = [
    "ClassificationResult",
    "score_text",
    "classify",
]
