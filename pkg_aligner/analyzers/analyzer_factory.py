from pkg_aligner.analyzers.base_analyzer import BaseSourceAnalyzer
from pkg_aligner.analyzers.java_analyzer import JavaSourceAnalyzer
from pkg_aligner.analyzers.scala_analyzer import ScalaSourceAnalyzer

from loguru import logger


class AnalyzerFactory:

    SUPPORTED_LANGUAGES = ("scala", "java")

    @staticmethod
    def create_analyzer(language: str = "scala") -> BaseSourceAnalyzer:
        logger.debug(f"Creating analyzer for language: {language}")
        if language.lower() == "scala":
            return ScalaSourceAnalyzer()
        if language.lower() == "java":
            return JavaSourceAnalyzer()
        raise ValueError(f"Unsupported language: {language}")
