import re
from typing import Tuple


class ScalaAlignerConstant:
    SCALA_LANGUAGE = "scala"
    SCALA_EXTENSION = ".scala"
    SCALA_PACKAGE_FILE = "package.scala"

    # Relative to the project root, in scan order
    SCALA_SOURCE_TREES: Tuple[Tuple[str, ...], ...] = (
        ("src", "main", "scala"),
        ("src", "test", "scala"),
        ("src", "it", "scala"),
    )


class ScalaParsingConstants:
    # `package com.example.api` with nothing after the dotted name
    PACKAGE_DECLARATION = re.compile(r"^package\s+([a-zA-Z][a-zA-Z0-9._]*)$")

    # `package object api {` and `package api ... {`
    PACKAGE_OBJECT_DECLARATION = re.compile(r"^package\s+(object\s+)?([a-zA-Z][a-zA-Z0-9_]*).*\{$")


class JavaAlignerConstant:
    JAVA_LANGUAGE = "java"
    JAVA_EXTENSION = ".java"

    JAVA_SOURCE_TREES: Tuple[Tuple[str, ...], ...] = (
        ("src", "main", "java"),
        ("src", "test", "java"),
        ("src", "it", "java"),
    )


class JavaParsingConstants:
    PACKAGE_DECLARATION = re.compile(r"^package\s+([a-zA-Z][a-zA-Z0-9._]*)\s*;\s*$")


class PackageNameConstants:
    SEGMENT = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
