import os
from typing import Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

from pkg_aligner.models.domain_models import ParsedPackagePath

load_dotenv()


class Configs(BaseSettings):

    # Project used by the CLI when no path is passed
    ALIGNER_PROJECT_ROOT: str = os.getenv("ALIGNER_PROJECT_ROOT", os.getcwd())

    # Dotted package every file must live under, empty for no restriction
    ALIGNER_REQUIRED_ROOT_PACKAGE: str = os.getenv("ALIGNER_REQUIRED_ROOT_PACKAGE", "")

    ALIGNER_LANGUAGE: str = os.getenv("ALIGNER_LANGUAGE", "scala")

    # Empty disables the file sink
    ALIGNER_LOG_FILE: str = os.getenv("ALIGNER_LOG_FILE", "pkg_aligner.log")

    def required_root_package(self) -> Optional[ParsedPackagePath]:
        """Parse the configured root package, None when unrestricted."""
        if not self.ALIGNER_REQUIRED_ROOT_PACKAGE.strip():
            return None
        return ParsedPackagePath.parse(self.ALIGNER_REQUIRED_ROOT_PACKAGE)

    class Config:
        case_sensitive = True


configs = Configs()
