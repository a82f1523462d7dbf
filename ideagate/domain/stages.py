"""Stage catalog and lookup helpers.

Pure domain logic with no external dependencies. The catalog is an
immutable tuple ordered by id, with a read-only index for lookups.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from ideagate.core.exceptions import CatalogConfigError

DEFAULT_STAGE_ICON = "📋"


@dataclass(frozen=True)
class Stage:
    """One unit of progressively deeper analysis. Ids are ordinal."""

    id: int
    title: str
    icon: str
    description: str = ""
    teaser: str | None = None
    locked_content: str | None = None
    estimated_time: str | None = None
    value: str | None = None  # priced-value label, informational only


STAGE_CATALOG: tuple[Stage, ...] = (
    Stage(
        id=1,
        title="Idea Validation",
        icon="🧩",
        description="Validate your startup idea with AI-powered analysis",
    ),
    Stage(
        id=2,
        title="Solution & Launch Priorities",
        icon="🧩",
        description="MVP definition, what to launch first, and phased approach",
        teaser="Product roadmap with feature prioritization, development timeline, and MVP definition...",
        locked_content=(
            "Complete product roadmap with feature prioritization using RICE scoring, development "
            "timeline, MVP definition, user stories, and technical architecture. Includes design "
            "system and UX guidelines."
        ),
        estimated_time="2-3 weeks",
        value="$2,000",
    ),
    Stage(
        id=3,
        title="Financial Projections",
        icon="💰",
        description="Revenue models, pricing strategies, and financial forecasting",
        teaser=(
            "Detailed financial projections including revenue models, pricing strategies, and "
            "3-year financial forecasts..."
        ),
        locked_content=(
            "Complete financial modeling with multiple scenarios, break-even analysis, funding "
            "requirements, and investor-ready financial statements. Includes SaaS metrics, unit "
            "economics, and growth projections."
        ),
        estimated_time="2-3 weeks",
        value="$2,500",
    ),
    Stage(
        id=4,
        title="Go-to-Market Strategy",
        icon="🎯",
        description="Customer acquisition, marketing channels, and launch plan",
        teaser=(
            "Comprehensive go-to-market strategy with customer acquisition funnels, marketing "
            "channel analysis..."
        ),
        locked_content=(
            "Detailed GTM strategy including customer personas, acquisition funnels, marketing "
            "channel analysis, content strategy, PR plan, and launch sequence. Includes competitor "
            "analysis and positioning strategy."
        ),
        estimated_time="3-4 weeks",
        value="$3,000",
    ),
    Stage(
        id=5,
        title="Team & Resources",
        icon="👥",
        description="Key roles, hiring, and team structure",
        teaser=(
            "Team structure and hiring plan with key roles, equity distribution, and recruitment "
            "strategy..."
        ),
        locked_content=(
            "Organizational structure, key hire requirements, equity distribution plan, recruitment "
            "strategy, and compensation benchmarks. Includes founder agreements and vesting "
            "schedules."
        ),
        estimated_time="1-2 weeks",
        value="$1,500",
    ),
    Stage(
        id=6,
        title="Capital Requirements",
        icon="💎",
        description="Funding needs, capital sources, and runway",
        teaser="Funding strategy with investor targeting, pitch deck structure, and funding timeline...",
        locked_content=(
            "Complete funding strategy including investor targeting, pitch deck templates, "
            "valuation analysis, term sheet negotiation, and funding timeline. Includes demo day "
            "preparation and investor relations."
        ),
        estimated_time="3-4 weeks",
        value="$4,000",
    ),
    Stage(
        id=7,
        title="Execution Plan",
        icon="🚀",
        description="90-day action plan, milestones, and success metrics",
        teaser=(
            "90-day execution plan with specific milestones, success metrics, and accountability "
            "framework..."
        ),
        locked_content=(
            "Detailed 90-day execution plan with specific milestones, success metrics, "
            "accountability framework, and weekly check-ins. Includes risk mitigation strategies "
            "and contingency plans."
        ),
        estimated_time="1-2 weeks",
        value="$1,000",
    ),
)

TOTAL_STAGES = len(STAGE_CATALOG)


def validate_catalog(catalog: Iterable[Stage]) -> tuple[Stage, ...]:
    """Check catalog invariants and return it as a tuple.

    Raises:
        CatalogConfigError: if ids are not 1..N in order, or stage 1 carries lock content
    """
    stages = tuple(catalog)
    if not stages:
        raise CatalogConfigError("Stage catalog is empty")

    for expected_id, stage in enumerate(stages, start=1):
        if stage.id != expected_id:
            raise CatalogConfigError(
                f"Stage ids must be contiguous from 1; expected {expected_id}, got {stage.id}"
            )

    first = stages[0]
    if first.teaser is not None or first.locked_content is not None:
        raise CatalogConfigError("Stage 1 is always unlocked and cannot carry teaser or locked content")

    return stages


def index_catalog(catalog: Iterable[Stage]) -> Mapping[int, Stage]:
    """Build a read-only id -> Stage index."""
    return MappingProxyType({stage.id: stage for stage in catalog})


_STAGES_BY_ID = index_catalog(validate_catalog(STAGE_CATALOG))


def get_stage_by_id(stage_id: int) -> Stage | None:
    return _STAGES_BY_ID.get(stage_id)


def get_stage_icon(stage_id: int) -> str:
    """Stage icon by id, falling back to a generic icon for unknown ids."""
    stage = get_stage_by_id(stage_id)
    return stage.icon if stage else DEFAULT_STAGE_ICON
