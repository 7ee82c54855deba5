"""
Test cases for resolving where a source file should live.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from pkg_aligner.analyzers.scala_analyzer import ScalaSourceAnalyzer
from pkg_aligner.models.domain_models import ParsedPackagePath
from pkg_aligner.models.problems import (
    NoPackageDeclarations,
    PackageFileLacksPackageObject,
    PackageFileWithMultiplePackageObjects,
    PackageNotUnderRequiredRoot,
    ProblemKind,
)


class TestCanonicalParent:

    @pytest.fixture
    def analyzer(self):
        return ScalaSourceAnalyzer()

    @pytest.fixture
    def tree(self, tmp_path):
        return tmp_path / "src" / "main" / "scala"

    def resolve(self, analyzer, tree, name, lines, required_root=None):
        file_path = tree / "anywhere" / name
        declarations = analyzer.parse_declarations(lines)
        return analyzer.resolve_canonical_parent(file_path, declarations, tree, required_root)

    def test_plain_file_uses_declared_package(self, analyzer, tree):
        result = self.resolve(analyzer, tree, "Bar.scala", ["package a.b", "class Bar"])
        assert result == tree / "a" / "b"

    def test_chained_declarations(self, analyzer, tree):
        result = self.resolve(analyzer, tree, "Bar.scala", ["package a", "package b", "class Bar"])
        assert result == tree / "a" / "b"

    def test_no_declarations(self, analyzer, tree):
        result = self.resolve(analyzer, tree, "Bar.scala", ["class Bar"])
        assert isinstance(result, NoPackageDeclarations)
        assert result.path == tree / "anywhere" / "Bar.scala"
        assert result.kind == ProblemKind.NO_PACKAGE_DECLARATIONS

    def test_package_file_nests_package_object(self, analyzer, tree):
        result = self.resolve(analyzer, tree, "package.scala", ["package a.b", "package object util {", "}"])
        assert result == tree / "a" / "b" / "util"

    def test_package_file_without_package_object(self, analyzer, tree):
        result = self.resolve(analyzer, tree, "package.scala", ["package a.b", "object util"])
        assert isinstance(result, PackageFileLacksPackageObject)

    def test_package_file_with_two_package_objects(self, analyzer, tree):
        result = self.resolve(analyzer, tree, "package.scala", [
            "package a.b",
            "package object util {",
            "}",
            "package object more {",
            "}",
        ])
        assert isinstance(result, PackageFileWithMultiplePackageObjects)

    def test_package_file_with_no_declarations_reports_that_first(self, analyzer, tree):
        result = self.resolve(analyzer, tree, "package.scala", ["package object util {"])
        assert isinstance(result, NoPackageDeclarations)

    def test_package_object_ignored_in_other_files(self, analyzer, tree):
        result = self.resolve(analyzer, tree, "Types.scala", [
            "package a.b",
            "package object util {",
            "package object more {",
        ])
        assert result == tree / "a" / "b"

    def test_package_under_required_root(self, analyzer, tree):
        required = ParsedPackagePath.parse("com.example.api")
        result = self.resolve(analyzer, tree, "Foo.scala", ["package com.example.api.foo"], required)
        assert result == tree / "com" / "example" / "api" / "foo"

    def test_package_outside_required_root(self, analyzer, tree):
        required = ParsedPackagePath.parse("com.example.api")
        result = self.resolve(analyzer, tree, "Foo.scala", ["package com.other.x"], required)
        assert isinstance(result, PackageNotUnderRequiredRoot)
        assert result.package == ParsedPackagePath.parse("com.other.x")
        assert "com.other.x" in result.describe()
        assert str(result.path) in result.describe()

    def test_required_root_applies_to_effective_package(self, analyzer, tree):
        required = ParsedPackagePath.parse("com.example.api")
        result = self.resolve(analyzer, tree, "package.scala",
                              ["package com.example", "package object api {"], required)
        assert result == tree / "com" / "example" / "api"
