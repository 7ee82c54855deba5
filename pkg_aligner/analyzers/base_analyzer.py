from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Iterable, Tuple, Union

from loguru import logger

from pkg_aligner.models.domain_models import (
    Move,
    PackageDeclarations,
    PackageObjectDeclaration,
    ParsedPackagePath,
)
from pkg_aligner.models.problems import (
    NoPackageDeclarations,
    PackageFileLacksPackageObject,
    PackageFileWithMultiplePackageObjects,
    PackageNotUnderRequiredRoot,
    Problem,
)
from pkg_aligner.utils.common import read_file_lines


class BaseSourceAnalyzer(ABC):
    """
    Works out where each source file of a project belongs from the package
    declarations it contains.

    Declarations are found by matching single lines, not by parsing the
    language, so a declaration inside a comment or a string literal counts
    like any other.
    """

    def __init__(self, language: str, source_suffix: str, package_file_name: Optional[str] = None):
        self.language = language
        self.source_suffix = source_suffix
        self.package_file_name = package_file_name

    # Declarations

    def parse_declarations(self, lines: Iterable[str]) -> PackageDeclarations:
        packages: List[ParsedPackagePath] = []
        package_objects: List[PackageObjectDeclaration] = []

        for line in lines:
            package = self._parse_package_line(line)
            if package:
                packages.append(package)

            package_object = self._parse_package_object_line(line)
            if package_object and package_object not in package_objects:
                package_objects.append(package_object)

        return PackageDeclarations(packages=tuple(packages), package_objects=tuple(package_objects))

    def parse_file(self, file_path: Path) -> PackageDeclarations:
        return self.parse_declarations(read_file_lines(file_path))

    # Canonical paths

    def effective_package(self, file_path: Path,
                          declarations: PackageDeclarations) -> Union[Problem, ParsedPackagePath]:
        net_package = declarations.net_package()
        if net_package is None:
            return NoPackageDeclarations(file_path)

        if self.package_file_name and file_path.name == self.package_file_name:
            package_objects = declarations.package_objects
            if not package_objects:
                return PackageFileLacksPackageObject(file_path)
            if len(package_objects) > 1:
                return PackageFileWithMultiplePackageObjects(file_path)
            return net_package.append(package_objects[0].name)

        return net_package

    def resolve_canonical_parent(self, file_path: Path, declarations: PackageDeclarations, tree: Path,
                                 required_root: Optional[ParsedPackagePath] = None) -> Union[Problem, Path]:
        package = self.effective_package(file_path, declarations)
        if isinstance(package, Problem):
            return package

        if required_root is not None and not required_root.is_prefix_of(package):
            return PackageNotUnderRequiredRoot(file_path, package, required_root)

        return tree / package.as_relative_path()

    def canonical_parent_for(self, file_path: Path, tree: Path,
                             required_root: Optional[ParsedPackagePath] = None) -> Union[Problem, Path]:
        return self.resolve_canonical_parent(file_path, self.parse_file(file_path), tree, required_root)

    # Planning

    def move_for(self, file_path: Path, tree: Path,
                 required_root: Optional[ParsedPackagePath] = None) -> Optional[Union[Problem, Move]]:
        canonical_parent = self.canonical_parent_for(file_path, tree, required_root)
        if isinstance(canonical_parent, Problem):
            logger.debug(f"Problem with {file_path}: {canonical_parent.describe()}")
            return canonical_parent

        if canonical_parent != file_path.parent:
            return Move(file_path, canonical_parent / file_path.name)

        logger.debug(f"Already in place: {file_path}")
        return None

    def plan_tree(self, tree: Path,
                  required_root: Optional[ParsedPackagePath] = None) -> List[Union[Problem, Move]]:
        code_files = self._get_code_files(tree)
        logger.info(f"Found {len(code_files)} {self.language} files under {tree}")

        planned: List[Union[Problem, Move]] = []
        for file_path in code_files:
            outcome = self.move_for(file_path, tree, required_root)
            if outcome is not None:
                planned.append(outcome)
        return planned

    # Project layout

    def expected_source_trees(self, project_root: Path) -> List[Path]:
        trees = []
        for parts in self._source_tree_parts():
            tree = project_root.joinpath(*parts)
            if tree not in trees:
                trees.append(tree)
        return trees

    def source_trees(self, project_root: Path) -> List[Path]:
        return [tree for tree in self.expected_source_trees(project_root) if tree.is_dir()]

    def describe_source_trees(self) -> str:
        names = ["/".join(parts) for parts in self._source_tree_parts()]
        return ", ".join(names[:-1]) + f" nor {names[-1]}" if len(names) > 1 else names[0]

    def _get_code_files(self, tree: Path) -> List[Path]:
        return sorted(p for p in tree.rglob(f"*{self.source_suffix}") if p.is_file())

    def _package_path_from_dotted(self, dotted: str) -> Optional[ParsedPackagePath]:
        # `package a.b.` is read as a.b
        dotted = dotted.rstrip(".")
        try:
            return ParsedPackagePath.parse(dotted)
        except ValueError:
            logger.debug(f"Ignoring malformed package name: {dotted}")
            return None

    @abstractmethod
    def _parse_package_line(self, line: str) -> Optional[ParsedPackagePath]:
        pass

    @abstractmethod
    def _parse_package_object_line(self, line: str) -> Optional[PackageObjectDeclaration]:
        pass

    @abstractmethod
    def _source_tree_parts(self) -> Tuple[Tuple[str, ...], ...]:
        pass
