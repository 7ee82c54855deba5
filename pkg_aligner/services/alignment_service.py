import shutil
from pathlib import Path
from typing import List, Optional, Union

from loguru import logger

from pkg_aligner.analyzers.analyzer_factory import AnalyzerFactory
from pkg_aligner.analyzers.base_analyzer import BaseSourceAnalyzer
from pkg_aligner.models.domain_models import AlignmentRun, Move, ParsedPackagePath
from pkg_aligner.models.exceptions import MoveExecutionError, ProjectLayoutError
from pkg_aligner.models.problems import Problem
from pkg_aligner.models.report_dto import AlignmentReportDto
from pkg_aligner.services.conflict_detector import detect_conflicts


class AlignmentService:
    """
    Aligns the directory structure of a project with its package structure.

    Files are only moved, never edited. When any file would need editing, or
    the planned moves would collide, every problem is reported and nothing
    is moved at all.
    """

    def __init__(self, analyzer: Optional[BaseSourceAnalyzer] = None):
        self.analyzer = analyzer or AnalyzerFactory.create_analyzer("scala")

    def align_project(
        self,
        project_root: Union[str, Path],
        required_root_package: Optional[ParsedPackagePath] = None,
        dry_run: bool = False
    ) -> AlignmentRun:
        """
        Plan the moves for ``project_root`` and, when planning found no
        problems and ``dry_run`` is false, perform them.

        Args:
            project_root: Project directory holding the source trees
            required_root_package: Package every file must be declared under
            dry_run: Report the moves without touching the file system

        Returns:
            The run with its planned moves, problems and executed moves

        Raises:
            ProjectLayoutError: The project has no recognised source tree
            MoveExecutionError: A move failed part way through execution
        """
        project_root = Path(project_root).resolve()
        self.require_source_project(project_root)

        run = self.plan(project_root, required_root_package)
        run.dry_run = dry_run

        if run.has_problems:
            logger.warning(
                f"Cannot move about {len(run.moves)} files until these problems are repaired manually:"
            )
            for problem in run.problems:
                logger.warning(problem.describe())
            return run

        for move in run.moves:
            logger.info(str(move))

        if dry_run:
            logger.info(f"{len(run.moves)} files to be moved")
        else:
            self.execute(run)
        return run

    def plan(
        self,
        project_root: Path,
        required_root_package: Optional[ParsedPackagePath] = None
    ) -> AlignmentRun:
        run = AlignmentRun(source_trees=self.analyzer.source_trees(project_root))

        for tree in run.source_trees:
            for outcome in self.analyzer.plan_tree(tree, required_root_package):
                if isinstance(outcome, Move):
                    run.moves.append(outcome)
                elif isinstance(outcome, Problem):
                    run.problems.append(outcome)

        run.problems.extend(detect_conflicts(run.moves, run.source_trees))
        logger.info(f"Planned {len(run.moves)} moves with {len(run.problems)} problems")
        return run

    def execute(self, run: AlignmentRun) -> List[Move]:
        if not run.can_proceed:
            raise ValueError("Refusing to execute a run that has problems")

        logger.info(f"Moving {len(run.moves)} files...")
        for move in run.moves:
            try:
                self._execute_move(move)
            except OSError as e:
                logger.error(f"Stopped after {len(run.executed)} of {len(run.moves)} moves")
                raise MoveExecutionError(move, run.executed, e) from e
            run.executed.append(move)
        logger.info(f"Moving {len(run.moves)} files...done")
        return run.executed

    def require_source_project(self, project_root: Path) -> None:
        if not project_root.is_dir():
            raise ProjectLayoutError(f"Not an existing directory: {project_root}")

        if not self.analyzer.source_trees(project_root):
            raise ProjectLayoutError(
                f"Not a {self.analyzer.language.capitalize()} project because there is no directory "
                f"{self.analyzer.describe_source_trees()}"
            )

    @staticmethod
    def _execute_move(move: Move) -> None:
        if move.destination.exists():
            raise FileExistsError(f"Destination already exists: {move.destination}")
        parent = move.destination.parent
        if not parent.is_dir():
            parent.mkdir(parents=True)
            logger.info(f"Created {parent}")
        shutil.move(str(move.source), str(move.destination))
        logger.info(f"Moved {move.source} to {move.destination}")


def align_project(
    project_root: Union[str, Path],
    required_root_package: Optional[ParsedPackagePath] = None,
    dry_run: bool = False,
    language: str = "scala"
) -> AlignmentRun:
    service = AlignmentService(AnalyzerFactory.create_analyzer(language))
    return service.align_project(project_root, required_root_package, dry_run)


def export_report(run: AlignmentRun, output_path: Path) -> Path:
    """Export the run to a JSON file"""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    report = AlignmentReportDto.from_run(run)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(report.model_dump_json(indent=2))

    logger.info(f"✅ Exported alignment report to: {output_path}")
    return output_path
