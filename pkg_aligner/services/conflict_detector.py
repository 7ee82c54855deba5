from collections import defaultdict
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from loguru import logger

from pkg_aligner.models.domain_models import Move
from pkg_aligner.models.problems import (
    MkDirWouldFailDueToFileInTheWay,
    MultipleSourcesForDestination,
    Problem,
)
from pkg_aligner.utils.common import first_file_ancestor


def clashing_moves(moves: Sequence[Move]) -> List[Problem]:
    """One problem per destination claimed by more than one move.

    Each problem lists the sources of every planned move, not only the
    clashing ones.
    """
    by_destination: Dict[Path, List[Move]] = defaultdict(list)
    for move in moves:
        by_destination[move.destination].append(move)

    all_sources = tuple(m.source for m in moves)
    return [
        MultipleSourcesForDestination(destination, all_sources)
        for destination, group in by_destination.items()
        if len(group) > 1
    ]


def mkdir_problems(moves: Sequence[Move], trees: Optional[Sequence[Path]] = None) -> List[Problem]:
    """Moves whose destination already exists, or whose needed directory is taken by a plain file."""
    problems: List[Problem] = []
    for move in moves:
        if move.destination.exists():
            problems.append(MkDirWouldFailDueToFileInTheWay(move.destination))
            continue
        stop_at = _tree_containing(move.destination, trees)
        if stop_at is None:
            continue
        blocker = first_file_ancestor(move.destination.parent, stop_at)
        if blocker is not None:
            problems.append(MkDirWouldFailDueToFileInTheWay(move.destination, blocker))
    return problems


def detect_conflicts(moves: Sequence[Move], trees: Optional[Sequence[Path]] = None) -> List[Problem]:
    problems = clashing_moves(moves) + mkdir_problems(moves, trees)
    if problems:
        logger.debug(f"Found {len(problems)} conflict(s) among {len(moves)} planned moves")
    return problems


def _tree_containing(path: Path, trees: Optional[Sequence[Path]]) -> Optional[Path]:
    for tree in trees or ():
        if tree in path.parents:
            return tree
    return None
