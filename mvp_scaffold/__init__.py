"""mvp_scaffold -- turns a market-analysis context into a deployable MVP.

Pipeline: classify the context into one of four archetypes (AI tool,
calculator, dashboard, landing + waitlist), derive the archetype's
configuration, and render a complete Next.js 14 project as a file map.

Usage::

    from mvp_scaffold import generate_mvp, recommend

    print(recommend(context).reason)
    project = generate_mvp(context)
    project.files["package.json"]
"""

from .config import Settings, StackVersions
from .models import (
    AnalysisContext,
    ArchetypeId,
    GeneratedProject,
    InvalidContextError,
    Recommendation,
    load_context,
)
from .planner import UnknownArchetypeError, classify
from .scaffolder import MVPGenerator, generate_mvp, recommend

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "generate_mvp",
    "recommend",
    "classify",
    "MVPGenerator",
    # Models
    "AnalysisContext",
    "ArchetypeId",
    "GeneratedProject",
    "Recommendation",
    "load_context",
    # Configuration
    "Settings",
    "StackVersions",
    # Errors
    "InvalidContextError",
    "UnknownArchetypeError",
]
