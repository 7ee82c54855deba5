from pydantic import BaseModel
from typing import List, Optional

from pkg_aligner.models.domain_models import AlignmentRun, Move
from pkg_aligner.models.problems import Problem


class MoveDto(BaseModel):
    source: str
    destination: str

    @classmethod
    def from_move(cls, move: Move) -> "MoveDto":
        return cls(source=str(move.source), destination=str(move.destination))


class ProblemDto(BaseModel):
    kind: str
    message: str
    path: Optional[str] = None
    package: Optional[str] = None
    destination: Optional[str] = None
    sources: List[str] = []
    blocking_path: Optional[str] = None

    @classmethod
    def from_problem(cls, problem: Problem) -> "ProblemDto":
        path = getattr(problem, "path", None)
        package = getattr(problem, "package", None)
        destination = getattr(problem, "destination", None)
        blocking_path = getattr(problem, "blocking_path", None)
        return cls(
            kind=problem.kind.value,
            message=problem.describe(),
            path=str(path) if path else None,
            package=str(package) if package else None,
            destination=str(destination) if destination else None,
            sources=[str(s) for s in getattr(problem, "sources", ())],
            blocking_path=str(blocking_path) if blocking_path else None,
        )


class AlignmentReportDto(BaseModel):
    dry_run: bool
    source_trees: List[str] = []
    moves: List[MoveDto] = []
    problems: List[ProblemDto] = []
    executed: List[MoveDto] = []

    @classmethod
    def from_run(cls, run: AlignmentRun) -> "AlignmentReportDto":
        return cls(
            dry_run=run.dry_run,
            source_trees=[str(t) for t in run.source_trees],
            moves=[MoveDto.from_move(m) for m in run.moves],
            problems=[ProblemDto.from_problem(p) for p in run.problems],
            executed=[MoveDto.from_move(m) for m in run.executed],
        )
