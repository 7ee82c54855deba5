"""
Package Folder Aligner - move source files into the directories their package
declarations name.

Planning finds every required move and every problem first; files are moved
only when no problem was found, and file contents are never edited.
"""

__version__ = "0.1.0"
__license__ = "MIT"

# Public API
from pkg_aligner.analyzers.analyzer_factory import AnalyzerFactory
from pkg_aligner.models.domain_models import AlignmentRun, Move, ParsedPackagePath
from pkg_aligner.models.problems import Problem, ProblemKind
from pkg_aligner.services.alignment_service import AlignmentService, align_project

__all__ = [
    "AnalyzerFactory",
    "AlignmentRun",
    "AlignmentService",
    "Move",
    "ParsedPackagePath",
    "Problem",
    "ProblemKind",
    "align_project",
]
