"""
Test cases for conflicts between planned moves.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from pkg_aligner.models.domain_models import Move
from pkg_aligner.models.problems import (
    MkDirWouldFailDueToFileInTheWay,
    MultipleSourcesForDestination,
    ProblemKind,
)
from pkg_aligner.services.conflict_detector import clashing_moves, detect_conflicts, mkdir_problems


class TestClashingMoves:

    def test_distinct_destinations_do_not_clash(self, tmp_path):
        moves = [
            Move(tmp_path / "x" / "A.scala", tmp_path / "a" / "A.scala"),
            Move(tmp_path / "x" / "B.scala", tmp_path / "a" / "B.scala"),
        ]
        assert clashing_moves(moves) == []

    def test_shared_destination_lists_every_source(self, tmp_path):
        destination = tmp_path / "a" / "A.scala"
        moves = [
            Move(tmp_path / "x" / "A.scala", destination),
            Move(tmp_path / "y" / "A.scala", destination),
            Move(tmp_path / "z" / "Other.scala", tmp_path / "a" / "Other.scala"),
        ]
        problems = clashing_moves(moves)
        assert problems == [
            MultipleSourcesForDestination(destination, tuple(m.source for m in moves))
        ]
        assert problems[0].kind == ProblemKind.MULTIPLE_SOURCES_FOR_DESTINATION

    def test_one_problem_per_clashing_destination(self, tmp_path):
        moves = [
            Move(tmp_path / "x" / "A.scala", tmp_path / "a" / "A.scala"),
            Move(tmp_path / "y" / "A.scala", tmp_path / "a" / "A.scala"),
            Move(tmp_path / "x" / "B.scala", tmp_path / "b" / "B.scala"),
            Move(tmp_path / "y" / "B.scala", tmp_path / "b" / "B.scala"),
            Move(tmp_path / "z" / "B.scala", tmp_path / "b" / "B.scala"),
        ]
        destinations = [p.destination for p in clashing_moves(moves)]
        assert destinations == [tmp_path / "a" / "A.scala", tmp_path / "b" / "B.scala"]

    def test_move_clash_definition(self, tmp_path):
        first = Move(tmp_path / "x" / "A.scala", tmp_path / "a" / "A.scala")
        second = Move(tmp_path / "y" / "A.scala", tmp_path / "a" / "A.scala")
        assert first.clashes_with(second)
        assert not first.clashes_with(first)


class TestMkdirProblems:

    @pytest.fixture
    def tree(self, tmp_path):
        tree = tmp_path / "src" / "main" / "scala"
        tree.mkdir(parents=True)
        return tree

    def test_existing_file_at_destination(self, tree):
        destination = tree / "a" / "A.scala"
        destination.parent.mkdir()
        destination.write_text("package other\n")
        moves = [Move(tree / "A.scala", destination)]
        assert mkdir_problems(moves, [tree]) == [MkDirWouldFailDueToFileInTheWay(destination)]

    def test_file_where_a_directory_is_needed(self, tree):
        (tree / "a").write_text("not a directory\n")
        destination = tree / "a" / "b" / "A.scala"
        problems = mkdir_problems([Move(tree / "A.scala", destination)], [tree])
        assert problems == [MkDirWouldFailDueToFileInTheWay(destination, tree / "a")]
        assert str(tree / "a") in problems[0].describe()

    def test_existing_directory_at_destination(self, tree):
        destination = tree / "a" / "Bar.scala"
        destination.mkdir(parents=True)
        (destination / "README").write_text("not a source file\n")
        moves = [Move(tree / "foo" / "Bar.scala", destination)]
        assert mkdir_problems(moves, [tree]) == [MkDirWouldFailDueToFileInTheWay(destination)]

    def test_existing_directories_are_fine(self, tree):
        (tree / "a" / "b").mkdir(parents=True)
        assert mkdir_problems([Move(tree / "A.scala", tree / "a" / "b" / "A.scala")], [tree]) == []

    def test_without_trees_only_destination_is_checked(self, tree):
        destination = tree / "A.scala"
        destination.write_text("package a\n")
        assert mkdir_problems([Move(tree / "x" / "A.scala", destination)]) == [
            MkDirWouldFailDueToFileInTheWay(destination)
        ]

    def test_detect_conflicts_combines_both_checks(self, tree):
        blocked = tree / "b" / "B.scala"
        blocked.parent.mkdir()
        blocked.write_text("package other\n")
        moves = [
            Move(tree / "x" / "A.scala", tree / "a" / "A.scala"),
            Move(tree / "y" / "A.scala", tree / "a" / "A.scala"),
            Move(tree / "B.scala", blocked),
        ]
        kinds = [p.kind for p in detect_conflicts(moves, [tree])]
        assert kinds == [
            ProblemKind.MULTIPLE_SOURCES_FOR_DESTINATION,
            ProblemKind.MKDIR_WOULD_FAIL_DUE_TO_FILE_IN_THE_WAY,
        ]
