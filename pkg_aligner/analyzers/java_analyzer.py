from typing import Optional, Tuple

from pkg_aligner.analyzers.base_analyzer import BaseSourceAnalyzer
from pkg_aligner.config.language_constants import JavaAlignerConstant, JavaParsingConstants
from pkg_aligner.models.domain_models import PackageObjectDeclaration, ParsedPackagePath


class JavaSourceAnalyzer(BaseSourceAnalyzer):
    def __init__(self):
        # Java has no package objects, package-info.java is placed like any other file
        super().__init__(
            language=JavaAlignerConstant.JAVA_LANGUAGE,
            source_suffix=JavaAlignerConstant.JAVA_EXTENSION,
            package_file_name=None,
        )

    def _parse_package_line(self, line: str) -> Optional[ParsedPackagePath]:
        match = JavaParsingConstants.PACKAGE_DECLARATION.fullmatch(line)
        if not match:
            return None
        return self._package_path_from_dotted(match.group(1))

    def _parse_package_object_line(self, line: str) -> Optional[PackageObjectDeclaration]:
        return None

    def _source_tree_parts(self) -> Tuple[Tuple[str, ...], ...]:
        return JavaAlignerConstant.JAVA_SOURCE_TREES
