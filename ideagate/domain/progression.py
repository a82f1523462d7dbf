"""Stage progression: unlock status, visible content and progress.

Pure read-side projection over an externally owned completed-stage set.
Nothing here records completions or keeps state between calls.
"""

from collections.abc import Collection, Iterable
from dataclasses import dataclass, field
from enum import StrEnum

from ideagate.domain.numbers import round_half_up
from ideagate.domain.stages import STAGE_CATALOG, Stage, index_catalog, validate_catalog
from ideagate.schemas.assessment import RiskAssessment

FIRST_STAGE_ID = 1


class StageState(StrEnum):
    """Observable stage states. Transitions only go LOCKED -> UNLOCKED."""

    LOCKED = "locked"
    UNLOCKED = "unlocked"


@dataclass(frozen=True)
class LockedStageView:
    """Teaser shown for a locked stage. Never carries locked_content."""

    id: int
    title: str
    icon: str
    description: str
    teaser: str | None
    estimated_time: str | None
    value: str | None
    completed: bool = False

    @property
    def state(self) -> StageState:
        return StageState.LOCKED


@dataclass(frozen=True)
class UnlockedStageView:
    """Full content of an unlocked stage. Stage 1 may carry the risk assessment."""

    id: int
    title: str
    icon: str
    description: str
    teaser: str | None
    locked_content: str | None
    estimated_time: str | None
    value: str | None
    completed: bool = False
    assessment: RiskAssessment | None = None

    @property
    def state(self) -> StageState:
        return StageState.UNLOCKED


StageView = UnlockedStageView | LockedStageView


@dataclass(frozen=True)
class JourneyOverview:
    """Every stage view plus derived progress for one idea."""

    stages: list[StageView]
    progress_percent: int
    total_stages: int
    completed_stage_ids: frozenset[int]
    remaining: list[Stage] = field(default_factory=list)
    next_stage_id: int | None = None


def is_stage_unlocked(stage_id: int, completed_stage_ids: Collection[int]) -> bool:
    """Stage k is unlocked iff k == 1 or stage k-1 is completed.

    Only the immediate predecessor counts: {1, 3} unlocks 2 and 4, not 5.
    """
    return stage_id == FIRST_STAGE_ID or (stage_id - 1) in completed_stage_ids


def compute_progress_percent(completed_stage_ids: Collection[int], total_stages: int) -> int:
    """Completed share of all stages as 0-100, rounded half up.

    Pure function -- deterministic, no side effects.
    """
    if total_stages <= 0:
        return 0
    percent = int(round_half_up(100 * len(set(completed_stage_ids)) / total_stages))
    return max(0, min(100, percent))


def get_locked_stages(catalog: Iterable[Stage], completed_stage_ids: Collection[int]) -> list[Stage]:
    """Stages not yet completed (what's left), regardless of unlock status."""
    return [stage for stage in catalog if stage.id not in completed_stage_ids]


def build_stage_view(
    stage: Stage,
    completed_stage_ids: Collection[int],
    assessment: RiskAssessment | None = None,
) -> StageView:
    completed = stage.id in completed_stage_ids

    if not is_stage_unlocked(stage.id, completed_stage_ids):
        return LockedStageView(
            id=stage.id,
            title=stage.title,
            icon=stage.icon,
            description=stage.description,
            teaser=stage.teaser,
            estimated_time=stage.estimated_time,
            value=stage.value,
            completed=completed,
        )

    return UnlockedStageView(
        id=stage.id,
        title=stage.title,
        icon=stage.icon,
        description=stage.description,
        teaser=stage.teaser,
        locked_content=stage.locked_content,
        estimated_time=stage.estimated_time,
        value=stage.value,
        completed=completed,
        assessment=assessment if stage.id == FIRST_STAGE_ID else None,
    )


def view_stage(
    catalog: Iterable[Stage],
    completed_stage_ids: Collection[int],
    requested_stage_id: int,
    assessment: RiskAssessment | None = None,
) -> StageView | None:
    """View of one stage, or None when the id is not in the catalog."""
    stage = index_catalog(catalog).get(requested_stage_id)
    if stage is None:
        return None
    return build_stage_view(stage, completed_stage_ids, assessment)


class StageProgressionEngine:
    """Projects a completed-stage set onto the stage catalog.

    Validates the catalog once on construction; every query is recomputed
    from its arguments, so a single engine is safe to share across requests.
    """

    def __init__(self, catalog: Iterable[Stage] = STAGE_CATALOG):
        self.catalog = validate_catalog(catalog)
        self._by_id = index_catalog(self.catalog)

    @property
    def total_stages(self) -> int:
        return len(self.catalog)

    def get_stage(self, stage_id: int) -> Stage | None:
        return self._by_id.get(stage_id)

    def is_unlocked(self, stage_id: int, completed_stage_ids: Collection[int]) -> bool:
        return stage_id in self._by_id and is_stage_unlocked(stage_id, completed_stage_ids)

    def view(
        self,
        completed_stage_ids: Collection[int],
        requested_stage_id: int,
        assessment: RiskAssessment | None = None,
    ) -> StageView | None:
        stage = self._by_id.get(requested_stage_id)
        if stage is None:
            return None
        return build_stage_view(stage, completed_stage_ids, assessment)

    def views(
        self,
        completed_stage_ids: Collection[int],
        assessment: RiskAssessment | None = None,
    ) -> list[StageView]:
        return [build_stage_view(stage, completed_stage_ids, assessment) for stage in self.catalog]

    def progress_percent(self, completed_stage_ids: Collection[int]) -> int:
        return compute_progress_percent(completed_stage_ids, self.total_stages)

    def locked_stages(self, completed_stage_ids: Collection[int]) -> list[Stage]:
        return get_locked_stages(self.catalog, completed_stage_ids)

    def next_stage_id(self, completed_stage_ids: Collection[int]) -> int | None:
        """Lowest unlocked stage that is not yet completed."""
        for stage in self.catalog:
            if stage.id not in completed_stage_ids and is_stage_unlocked(stage.id, completed_stage_ids):
                return stage.id
        return None

    def overview(
        self,
        completed_stage_ids: Collection[int],
        assessment: RiskAssessment | None = None,
    ) -> JourneyOverview:
        completed = frozenset(completed_stage_ids)
        return JourneyOverview(
            stages=self.views(completed, assessment),
            progress_percent=self.progress_percent(completed),
            total_stages=self.total_stages,
            completed_stage_ids=completed,
            remaining=self.locked_stages(completed),
            next_stage_id=self.next_stage_id(completed),
        )
