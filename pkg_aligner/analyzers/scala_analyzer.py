from typing import Optional, Tuple

from pkg_aligner.analyzers.base_analyzer import BaseSourceAnalyzer
from pkg_aligner.config.language_constants import ScalaAlignerConstant, ScalaParsingConstants
from pkg_aligner.models.domain_models import PackageObjectDeclaration, ParsedPackagePath


class ScalaSourceAnalyzer(BaseSourceAnalyzer):
    """
    Scala files may chain package clauses, so

        package com.example
        package api

    places a file in ``com.example.api``. A ``package.scala`` file belongs to
    the package named by its package object, one level below its clauses.
    """

    def __init__(self):
        super().__init__(
            language=ScalaAlignerConstant.SCALA_LANGUAGE,
            source_suffix=ScalaAlignerConstant.SCALA_EXTENSION,
            package_file_name=ScalaAlignerConstant.SCALA_PACKAGE_FILE,
        )

    def _parse_package_line(self, line: str) -> Optional[ParsedPackagePath]:
        match = ScalaParsingConstants.PACKAGE_DECLARATION.fullmatch(line)
        if not match:
            return None
        return self._package_path_from_dotted(match.group(1))

    def _parse_package_object_line(self, line: str) -> Optional[PackageObjectDeclaration]:
        match = ScalaParsingConstants.PACKAGE_OBJECT_DECLARATION.fullmatch(line)
        if not match:
            return None
        return PackageObjectDeclaration(match.group(2))

    def _source_tree_parts(self) -> Tuple[Tuple[str, ...], ...]:
        return ScalaAlignerConstant.SCALA_SOURCE_TREES
