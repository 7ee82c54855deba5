from typing import List, Optional

from pkg_aligner.models.domain_models import Move


class AlignmentError(Exception):
    pass


class ProjectLayoutError(AlignmentError):
    """The project root is not a directory or holds no recognised source tree."""

    def __init__(self, message: str):
        super().__init__(f"{message}. Exiting. Repair and rerun.")


class MoveExecutionError(AlignmentError):
    """A physical move failed; earlier moves stay done, later ones were not attempted."""

    def __init__(self, move: Move, completed: List[Move], cause: Optional[BaseException] = None):
        self.move = move
        self.completed = list(completed)
        self.cause = cause
        super().__init__(
            f"Failed to move {move.source} to {move.destination} after {len(self.completed)} "
            f"successful move(s): {cause}"
        )
