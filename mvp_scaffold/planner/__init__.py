"""MVP planner -- decides what to build from an analysis context.

Holds the static archetype registry, the keyword classifier and one pure
configuration deriver per archetype.

Usage::

    from mvp_scaffold.planner import classify, derive_landing_config

    result = classify(context)
    print(result.archetype, result.confidence)
"""

from .ai_tool import derive_ai_tool_config
from .calculator import derive_calculator_config, detect_calculator_kind
from .classifier import (
    CONFIDENCE_DIVISOR,
    MIN_SCORE,
    classification_text,
    classify,
    confidence_for,
    score_archetypes,
)
from .dashboard import derive_dashboard_config
from .landing import derive_landing_config
from .registry import (
    ARCHETYPES,
    UnknownArchetypeError,
    archetype_ids,
    get_definition,
    lookup,
    resolve_archetype_id,
)

__all__ = [
    # Registry
    "ARCHETYPES",
    "UnknownArchetypeError",
    "archetype_ids",
    "get_definition",
    "lookup",
    "resolve_archetype_id",
    # Classifier
    "MIN_SCORE",
    "CONFIDENCE_DIVISOR",
    "classify",
    "classification_text",
    "confidence_for",
    "score_archetypes",
    # Derivers
    "derive_ai_tool_config",
    "derive_calculator_config",
    "detect_calculator_kind",
    "derive_dashboard_config",
    "derive_landing_config",
]
