"""
Problems that block an alignment run.

Problems are plain values collected while planning; they are never raised.
The set of variants is closed: every problem is one of the dataclasses below,
identified by its ``ProblemKind``.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Tuple, Optional

from pkg_aligner.models.domain_models import ParsedPackagePath


class ProblemKind(Enum):
    NO_PACKAGE_DECLARATIONS = "no_package_declarations"
    PACKAGE_FILE_LACKS_PACKAGE_OBJECT = "package_file_lacks_package_object"
    PACKAGE_FILE_WITH_MULTIPLE_PACKAGE_OBJECTS = "package_file_with_multiple_package_objects"
    PACKAGE_NOT_UNDER_REQUIRED_ROOT = "package_not_under_required_root"
    MKDIR_WOULD_FAIL_DUE_TO_FILE_IN_THE_WAY = "mkdir_would_fail_due_to_file_in_the_way"
    MULTIPLE_SOURCES_FOR_DESTINATION = "multiple_sources_for_destination"


class Problem(ABC):
    kind: ProblemKind

    @abstractmethod
    def describe(self) -> str:
        pass

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True)
class NoPackageDeclarations(Problem):
    path: Path
    kind = ProblemKind.NO_PACKAGE_DECLARATIONS

    def describe(self) -> str:
        return f"No package declarations in {self.path}"


@dataclass(frozen=True)
class PackageFileLacksPackageObject(Problem):
    path: Path
    kind = ProblemKind.PACKAGE_FILE_LACKS_PACKAGE_OBJECT

    def describe(self) -> str:
        return f"Package file {self.path} lacks a package object declaration"


@dataclass(frozen=True)
class PackageFileWithMultiplePackageObjects(Problem):
    path: Path
    kind = ProblemKind.PACKAGE_FILE_WITH_MULTIPLE_PACKAGE_OBJECTS

    def describe(self) -> str:
        return f"Package file {self.path} declares more than one package object"


@dataclass(frozen=True)
class PackageNotUnderRequiredRoot(Problem):
    path: Path
    package: ParsedPackagePath
    required_root: Optional[ParsedPackagePath] = None
    kind = ProblemKind.PACKAGE_NOT_UNDER_REQUIRED_ROOT

    def describe(self) -> str:
        message = f"{self.path} declares \"package {self.package}\""
        if self.required_root:
            message += f" which is not under required root package {self.required_root}"
        return message


@dataclass(frozen=True)
class MkDirWouldFailDueToFileInTheWay(Problem):
    destination: Path
    blocking_path: Optional[Path] = None
    kind = ProblemKind.MKDIR_WOULD_FAIL_DUE_TO_FILE_IN_THE_WAY

    def describe(self) -> str:
        blocker = self.blocking_path or self.destination
        return f"Cannot move a file to {self.destination}: {blocker} is in the way"


@dataclass(frozen=True)
class MultipleSourcesForDestination(Problem):
    destination: Path
    sources: Tuple[Path, ...]
    kind = ProblemKind.MULTIPLE_SOURCES_FOR_DESTINATION

    def describe(self) -> str:
        listed = "\n".join(f"  {s}" for s in self.sources)
        return f"Multiple sources for destination {self.destination}, files being moved:\n{listed}"
