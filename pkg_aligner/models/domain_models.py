from dataclasses import dataclass, field
from functools import reduce
from pathlib import Path
from typing import List, Tuple, Optional, TYPE_CHECKING

from pkg_aligner.config.language_constants import PackageNameConstants

if TYPE_CHECKING:
    from pkg_aligner.models.problems import Problem


def _is_identifier(segment: str) -> bool:
    return bool(PackageNameConstants.SEGMENT.fullmatch(segment))


@dataclass(frozen=True)
class ParsedPackagePath:
    """Package name as an ordered sequence of segments, e.g. ("com", "example", "api")."""
    segments: Tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "segments", tuple(self.segments))
        if not self.segments:
            raise ValueError("A package path needs at least one segment")
        bad = [s for s in self.segments if not _is_identifier(s)]
        if bad:
            raise ValueError(f"Invalid package segment(s): {', '.join(repr(s) for s in bad)}")

    @classmethod
    def parse(cls, dotted: str) -> "ParsedPackagePath":
        return cls(tuple(dotted.strip().split(".")))

    def __add__(self, other: "ParsedPackagePath") -> "ParsedPackagePath":
        if not isinstance(other, ParsedPackagePath):
            return NotImplemented
        return ParsedPackagePath(self.segments + other.segments)

    def append(self, name: str) -> "ParsedPackagePath":
        return ParsedPackagePath(self.segments + (name,))

    def is_prefix_of(self, other: "ParsedPackagePath") -> bool:
        if len(self.segments) > len(other.segments):
            return False
        return all(p == q for p, q in zip(self.segments, other.segments))

    def as_relative_path(self) -> Path:
        return Path(*self.segments)

    @property
    def dotted(self) -> str:
        return ".".join(self.segments)

    def __str__(self) -> str:
        return self.dotted


@dataclass(frozen=True)
class PackageObjectDeclaration:
    name: str


@dataclass(frozen=True)
class PackageDeclarations:
    """Package information scraped from the lines of one source file."""
    packages: Tuple[ParsedPackagePath, ...] = ()
    package_objects: Tuple[PackageObjectDeclaration, ...] = ()

    def net_package(self) -> Optional[ParsedPackagePath]:
        # package a / package b / package c  ==>  a.b.c
        if not self.packages:
            return None
        return reduce(lambda acc, decl: acc + decl, self.packages)


@dataclass(frozen=True)
class Move:
    source: Path
    destination: Path

    def clashes_with(self, other: "Move") -> bool:
        return self.destination == other.destination and self.source != other.source

    def __str__(self) -> str:
        return f"{self.source} -> {self.destination}"


@dataclass
class AlignmentRun:
    moves: List[Move] = field(default_factory=list)
    problems: List["Problem"] = field(default_factory=list)
    dry_run: bool = True
    executed: List[Move] = field(default_factory=list)
    source_trees: List[Path] = field(default_factory=list)

    @property
    def has_problems(self) -> bool:
        return bool(self.problems)

    @property
    def can_proceed(self) -> bool:
        return not self.problems

