"""Keyword classifier that picks an archetype for an analysis context.

The whole free text of the context (main pain, pain points, trend title,
why-trending) is lowercased and each archetype scores one point per
keyword found as a substring.  Scores below ``MIN_SCORE`` fall back to
the landing/waitlist archetype.
"""

from __future__ import annotations

from mvp_scaffold.models import AnalysisContext, ArchetypeId, Classification

from .registry import ARCHETYPES

MIN_SCORE = 2
CONFIDENCE_DIVISOR = 5
FALLBACK_ARCHETYPE = ArchetypeId.LANDING_WAITLIST


def classification_text(context: AnalysisContext) -> str:
    """Concatenate the context's free-text fields into one lowercased string."""
    analysis = context.analysis
    parts = [
        analysis.main_pain if analysis else "",
        *(analysis.key_pain_points if analysis else []),
        context.trend.title,
        context.trend.why_trending,
    ]
    return " ".join(parts).lower()


def score_archetypes(context: AnalysisContext) -> dict[ArchetypeId, int]:
    """Return ``{archetype: keyword_hits}`` in registry order."""
    text = classification_text(context)
    return {
        definition.id: sum(1 for kw in definition.keywords if kw.lower() in text)
        for definition in ARCHETYPES
    }


def confidence_for(match_count: int) -> int:
    """Map a keyword hit count onto a 0-100 confidence."""
    return min(100, round(match_count / CONFIDENCE_DIVISOR * 100))


def classify(context: AnalysisContext) -> Classification:
    """Select the best-matching archetype for *context*.

    The strictly highest score wins; ties go to the archetype declared
    first in the registry.  A winning score below ``MIN_SCORE`` is
    overridden to ``landing-waitlist``.  Confidence is derived from the
    raw score of the archetype that is actually returned.
    """
    scores = score_archetypes(context)

    best = ARCHETYPES[0].id
    best_score = scores[best]
    for archetype_id, score in scores.items():
        if score > best_score:
            best, best_score = archetype_id, score

    if best_score < MIN_SCORE:
        best = FALLBACK_ARCHETYPE

    return Classification(
        archetype=best,
        confidence=confidence_for(scores[best]),
        scores=scores,
    )
