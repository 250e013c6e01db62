"""Pydantic v2 models for the MVP scaffolder.

Defines the input bundle (``AnalysisContext``) produced by the upstream
analysis services, the static archetype records, the four per-archetype
configuration variants, and the final ``GeneratedProject`` output.

Every model is frozen: a context is built once and then handed by
reference through classification, derivation and generation.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)


class InvalidContextError(ValueError):
    """Raised when input cannot be turned into a usable ``AnalysisContext``."""


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _null_means_absent(cls, data: Any) -> Any:
        # JSON null on a field that has a default is treated as a missing key.
        if not isinstance(data, dict):
            return data
        optional: set[str] = set()
        for name, field in cls.model_fields.items():
            if not field.is_required():
                optional.add(name)
                if field.alias:
                    optional.add(field.alias)
        return {k: v for k, v in data.items() if not (v is None and k in optional)}


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ArchetypeId(str, Enum):
    """The four MVP shapes the scaffolder can produce."""
    AI_TOOL = "ai-tool"
    CALCULATOR = "calculator"
    DASHBOARD = "dashboard"
    LANDING_WAITLIST = "landing-waitlist"


class Complexity(str, Enum):
    """Implementation complexity tier of an archetype."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class CalculatorKind(str, Enum):
    """Field-schema family selected by the calculator deriver."""
    COST = "cost"
    ROI = "roi"
    CONVERSION = "conversion"
    GENERIC = "generic"


# ---------------------------------------------------------------------------
# Analysis context (input)
# ---------------------------------------------------------------------------

class TrendInfo(_Frozen):
    """The trend being analysed. Only ``title`` is required."""
    id: Optional[str] = Field(default=None, description="Upstream trend identifier")
    title: str = Field(..., description="Trend title")
    category: str = Field(default="", description="Trend category")
    why_trending: str = Field(default="", description="Why the trend is rising")

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("trend.title must be a non-empty string")
        return value


class TargetSegment(_Frozen):
    """One audience segment."""
    name: str = Field(..., description="Segment name")
    size: str = Field(default="", description="Rough segment size")
    willingness_to_pay: str = Field(default="", description="low / medium / high")
    where_to_find: str = Field(default="", description="Channels where the segment gathers")


class TargetAudience(_Frozen):
    """Primary audience plus optional segments."""
    primary: str = Field(default="", description="Primary audience description")
    segments: list[TargetSegment] = Field(default_factory=list)


class AnalysisInfo(_Frozen):
    """Pain-point analysis. Every field is optional."""
    main_pain: str = Field(default="", description="The single most important pain")
    key_pain_points: list[str] = Field(default_factory=list)
    target_audience: Optional[TargetAudience] = Field(default=None)
    opportunities: list[str] = Field(default_factory=list)
    risks: list[str] = Field(default_factory=list)

    @field_validator("target_audience", mode="before")
    @classmethod
    def _audience_from_string(cls, value: Any) -> Any:
        # Some upstream steps send the audience as a bare string.
        if isinstance(value, str):
            return {"primary": value}
        return value


class RedditSources(_Frozen):
    communities: list[str] = Field(default_factory=list)


class RelatedQuery(_Frozen):
    query: str


class GoogleTrendsSources(_Frozen):
    related_queries: list[RelatedQuery] = Field(default_factory=list)


class SourceSynthesis(_Frozen):
    key_insights: list[str] = Field(default_factory=list)
    content_gaps: list[str] = Field(default_factory=list)


class SourcesInfo(_Frozen):
    """Community and query hints collected by the source aggregator."""
    reddit: Optional[RedditSources] = None
    google_trends: Optional[GoogleTrendsSources] = None
    synthesis: Optional[SourceSynthesis] = None


class Competitor(_Frozen):
    name: str
    website: str = ""
    description: str = ""


class CompetitionInfo(_Frozen):
    """Competitor scan results."""
    competitors: list[Competitor] = Field(default_factory=list)
    strategic_positioning: str = ""
    differentiation_opportunities: list[str] = Field(default_factory=list)


class PitchInfo(_Frozen):
    """Pitch-deck naming."""
    company_name: str = ""
    tagline: str = ""


# -- Product specification (optional upstream step) -------------------------

class RequiredField(_Frozen):
    name: str
    type: str = "text"
    description: str = ""
    example: str = ""


class UserInput(_Frozen):
    primary_input: str = ""
    input_type: str = Field(
        default="text",
        description="text | url | file | form | selection | voice | image",
    )
    required_fields: list[RequiredField] = Field(default_factory=list)


class UserOutput(_Frozen):
    primary_output: str = ""
    output_format: str = Field(
        default="list",
        description="text | report | score | list | visualization | recommendation | action",
    )
    example: str = ""
    value_proposition: str = ""


class MagicLocation(_Frozen):
    type: str = ""
    description: str = ""
    technical_approach: str = ""
    ai_prompt_hint: str = ""


class ProductSpecification(_Frozen):
    """Canonical input/output shape for the AI-tool archetype."""
    user_input: UserInput = Field(default_factory=UserInput)
    user_output: UserOutput = Field(default_factory=UserOutput)
    magic_location: MagicLocation = Field(default_factory=MagicLocation)


class AnalysisContext(_Frozen):
    """The structured business/market-analysis bundle.

    Only ``trend.title`` is required; every other section may be absent and
    every consumer falls back to documented defaults.
    """
    trend: TrendInfo
    analysis: Optional[AnalysisInfo] = None
    sources: Optional[SourcesInfo] = None
    competition: Optional[CompetitionInfo] = None
    pitch: Optional[PitchInfo] = None
    product_spec: Optional[ProductSpecification] = Field(default=None, alias="productSpec")

    # -- Convenience accessors ---------------------------------------------

    @property
    def main_pain(self) -> str:
        """Main pain, or the trend title when no analysis is present."""
        if self.analysis and self.analysis.main_pain:
            return self.analysis.main_pain
        return self.trend.title

    @property
    def pain_points(self) -> list[str]:
        return list(self.analysis.key_pain_points) if self.analysis else []

    @property
    def opportunities(self) -> list[str]:
        return list(self.analysis.opportunities) if self.analysis else []

    @property
    def company_name(self) -> str:
        return self.pitch.company_name.strip() if self.pitch else ""

    @property
    def tagline(self) -> str:
        return self.pitch.tagline.strip() if self.pitch else ""

    @property
    def communities(self) -> list[str]:
        if self.sources and self.sources.reddit:
            return [c for c in self.sources.reddit.communities if c]
        return []

    def audience(self, default: str) -> str:
        """Primary target audience, or *default* when unknown."""
        if self.analysis and self.analysis.target_audience:
            primary = self.analysis.target_audience.primary.strip()
            if primary:
                return primary
        return default


def load_context(data: AnalysisContext | dict[str, Any]) -> AnalysisContext:
    """Validate raw JSON-shaped data into an ``AnalysisContext``.

    Raises:
        InvalidContextError: If the payload has no usable ``trend.title`` or
            any section has the wrong shape.
    """
    if isinstance(data, AnalysisContext):
        return data
    if not isinstance(data, dict):
        raise InvalidContextError(
            f"Expected a mapping for the analysis context, got {type(data).__name__}"
        )
    try:
        return AnalysisContext.model_validate(data)
    except ValidationError as exc:
        raise InvalidContextError(f"Invalid analysis context: {exc}") from exc


# ---------------------------------------------------------------------------
# Archetype registry record
# ---------------------------------------------------------------------------

class ArchetypeDefinition(_Frozen):
    """Static description of one archetype."""
    id: ArchetypeId
    name: str
    name_ru: str
    description: str
    description_ru: str
    icon: str
    keywords: tuple[str, ...]
    features: tuple[str, ...]
    tech_stack: tuple[str, ...]
    complexity: Complexity
    generation_time: str


# ---------------------------------------------------------------------------
# Per-archetype configuration
# ---------------------------------------------------------------------------

class AIToolConfig(_Frozen):
    tool_name: str
    tool_description: str
    input_type: Literal["text", "url", "form"] = "text"
    input_placeholder: str = ""
    system_prompt: str = ""
    output_format: Literal["text", "json", "list", "table"] = "list"
    example_input: str = ""
    example_output: str = ""


class CalculatorField(_Frozen):
    name: str
    label: str
    type: Literal["number", "select", "text", "range"]
    placeholder: Optional[str] = None
    options: list[str] = Field(default_factory=list)
    min: Optional[float] = None
    max: Optional[float] = None
    default_value: Union[int, float, str, None] = None


class ResultField(_Frozen):
    name: str
    label: str
    format: Literal["currency", "percent", "number", "text"]


class CalculatorConfig(_Frozen):
    calculator_name: str
    calculator_description: str
    kind: CalculatorKind
    fields: list[CalculatorField]
    result_fields: list[ResultField]
    formula: str = ""


class DataSource(_Frozen):
    name: str
    type: Literal["api", "scrape", "rss", "manual"]
    url: Optional[str] = None
    refresh_interval: Optional[int] = Field(default=None, description="Minutes")


class DashboardMetric(_Frozen):
    name: str
    label: str
    type: Literal["number", "chart", "list", "status"]


class DashboardFilter(_Frozen):
    name: str
    label: str
    type: Literal["select", "date", "search"]
    options: list[str] = Field(default_factory=list)


class DashboardConfig(_Frozen):
    dashboard_name: str
    dashboard_description: str
    data_sources: list[DataSource]
    metrics: list[DashboardMetric]
    filters: list[DashboardFilter] = Field(default_factory=list)


class FeatureCard(_Frozen):
    icon: str
    title: str
    description: str


class LandingConfig(_Frozen):
    product_name: str
    tagline: str
    problem_statement: str
    solution_benefits: list[str]
    cta_text: str
    features: list[FeatureCard]


ArchetypeConfig = Union[AIToolConfig, CalculatorConfig, DashboardConfig, LandingConfig]


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

class Classification(_Frozen):
    """Outcome of keyword classification."""
    archetype: ArchetypeId
    confidence: int = Field(..., ge=0, le=100)
    scores: dict[ArchetypeId, int] = Field(default_factory=dict)


class Recommendation(_Frozen):
    """Display-only recommendation with a canned justification."""
    archetype: ArchetypeId
    confidence: int = Field(..., ge=0, le=100)
    reason: str
    alternatives: list[ArchetypeId]
    scores: dict[ArchetypeId, int] = Field(default_factory=dict)


class GeneratedProject(_Frozen):
    """A complete, deployable source tree for one archetype."""
    archetype: ArchetypeId
    project_name: str
    files: dict[str, str] = Field(
        ..., description="Relative path -> content, in assembly order"
    )
    readme: str
    env_example: str
    features: list[str]
    setup_instructions: list[str]
    generation_time: str = ""
    tech_stack: list[str] = Field(default_factory=list)
    confidence: Optional[int] = Field(
        default=None, description="Classifier confidence; None when overridden"
    )
