"""StageService: orchestrates stage progression with the completion store.

This is the integration point where the pure progression engine meets
persisted completion state. The engine only reads; completions are
recorded here, on behalf of the surrounding application.
"""

from typing import Protocol, runtime_checkable

import structlog

from ideagate.core.exceptions import StageLockedError, UnknownStageError
from ideagate.domain.progression import JourneyOverview, StageProgressionEngine, StageView
from ideagate.schemas.assessment import RiskAssessment

logger = structlog.get_logger(__name__)


@runtime_checkable
class StageCompletionStore(Protocol):
    """Persistence collaborator owning each idea's completed-stage set."""

    async def load_completed_stages(self, idea_id: str) -> set[int]:
        ...

    async def record_stage_completion(self, idea_id: str, stage_id: int) -> None:
        ...


class StageService:
    """Service layer for stage views and completion recording."""

    def __init__(self, store: StageCompletionStore, engine: StageProgressionEngine | None = None):
        """Initialize with dependency-injected store.

        Args:
            store: Completion store (not global state)
            engine: Progression engine, defaults to the built-in catalog
        """
        self.store = store
        self.engine = engine or StageProgressionEngine()

    async def get_stage_view(
        self,
        idea_id: str,
        stage_id: int,
        assessment: RiskAssessment | None = None,
    ) -> StageView:
        """Return the view of one stage for an idea.

        Raises:
            UnknownStageError: stage_id is not in the catalog
        """
        completed = await self.store.load_completed_stages(idea_id)
        view = self.engine.view(completed, stage_id, assessment)
        if view is None:
            raise UnknownStageError(stage_id)
        return view

    async def get_overview(
        self,
        idea_id: str,
        assessment: RiskAssessment | None = None,
    ) -> JourneyOverview:
        completed = await self.store.load_completed_stages(idea_id)
        return self.engine.overview(completed, assessment)

    async def complete_stage(self, idea_id: str, stage_id: int) -> JourneyOverview:
        """Record a stage as complete and return the refreshed overview.

        Idempotent: completing an already-completed stage records nothing.

        Raises:
            UnknownStageError: stage_id is not in the catalog
            StageLockedError: the stage's predecessor is not complete
        """
        if self.engine.get_stage(stage_id) is None:
            raise UnknownStageError(stage_id)

        completed = await self.store.load_completed_stages(idea_id)

        if stage_id in completed:
            logger.info("stage_already_completed", idea_id=idea_id, stage_id=stage_id)
            return self.engine.overview(completed)

        if not self.engine.is_unlocked(stage_id, completed):
            logger.info("stage_completion_rejected_locked", idea_id=idea_id, stage_id=stage_id)
            raise StageLockedError(stage_id)

        await self.store.record_stage_completion(idea_id, stage_id)
        completed = {*completed, stage_id}

        overview = self.engine.overview(completed)
        logger.info(
            "stage_completed",
            idea_id=idea_id,
            stage_id=stage_id,
            progress_percent=overview.progress_percent,
            next_stage_id=overview.next_stage_id,
        )
        return overview
