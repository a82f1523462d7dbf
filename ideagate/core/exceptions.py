class IdeaGateError(Exception):
    """Base exception for the idea gate."""

    pass


class QuestionConfigError(IdeaGateError, ValueError):
    """Raised when a question definition pairs its kind with rules it cannot use."""

    pass


class CatalogConfigError(IdeaGateError, ValueError):
    """Raised when the stage catalog breaks its ordering or lock invariants."""

    pass


class UnknownStageError(IdeaGateError):
    """Raised when a stage id is not in the catalog."""

    def __init__(self, stage_id: int):
        self.stage_id = stage_id
        super().__init__(f"Unknown stage: {stage_id}")


class StageLockedError(IdeaGateError):
    """Raised when completing a stage whose predecessor is not complete."""

    def __init__(self, stage_id: int):
        self.stage_id = stage_id
        super().__init__(f"Stage {stage_id} is locked until stage {stage_id - 1} is complete")


class AnswersIncompleteError(IdeaGateError):
    """Raised when a full answer set fails validation."""

    def __init__(self, errors: dict[str, str]):
        self.errors = errors
        super().__init__(f"Please complete all required questions ({len(errors)} invalid)")
