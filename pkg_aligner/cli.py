"""
Package Folder Aligner CLI - Command Line Interface

This module provides the command-line interface for the package folder aligner.
"""

import argparse
import sys
import time
from pathlib import Path
from typing import Optional

from loguru import logger

from pkg_aligner import __version__
from pkg_aligner.analyzers.analyzer_factory import AnalyzerFactory
from pkg_aligner.config.config import configs
from pkg_aligner.models.domain_models import ParsedPackagePath
from pkg_aligner.models.exceptions import AlignmentError
from pkg_aligner.services.alignment_service import AlignmentService, export_report

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss,SSS} - {name} - {level} - {message}"


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: Enable verbose (DEBUG) logging
        log_file: Also log to this file when set
    """
    level = "DEBUG" if verbose else "INFO"

    logger.remove()
    logger.add(sys.stdout, level=level, format=LOG_FORMAT)
    if log_file:
        logger.add(log_file, level=level, format=LOG_FORMAT)


def package_path(value: str) -> ParsedPackagePath:
    """argparse type for dotted package names such as com.example.api"""
    try:
        return ParsedPackagePath.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid package name {value!r}: {e}")


def align_command(args: argparse.Namespace) -> int:
    """
    Execute the align command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 for error)
    """
    setup_logging(args.verbose, args.log_file)
    start_time = time.perf_counter()

    project_path = Path(args.project_path).resolve()
    required_root = args.root_package
    if required_root is None:
        try:
            required_root = configs.required_root_package()
        except ValueError as e:
            logger.error(f"Configuration Error: ALIGNER_REQUIRED_ROOT_PACKAGE is invalid: {e}")
            return 1

    mode = "Planning" if args.dry_run else "Aligning"
    logger.info(f"{mode} {args.language} project at: {project_path}")
    if required_root:
        logger.info(f"Required root package: {required_root}")

    try:
        service = AlignmentService(AnalyzerFactory.create_analyzer(args.language))
        run = service.align_project(project_path, required_root, dry_run=args.dry_run)
    except AlignmentError as e:
        logger.error(str(e))
        return 1
    finally:
        elapsed = time.perf_counter() - start_time
        logger.debug(f"Finished in {elapsed:.2f}s")

    if args.output:
        export_report(run, Path(args.output))

    if run.has_problems:
        logger.info(f"No files were moved, {len(run.problems)} problems need repair")
    elif not args.dry_run:
        logger.info(f"✅ Alignment completed, moved {len(run.executed)} files")
    return 0


def create_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog='pkg-aligner',
        description='Move source files into the directories matching their package declarations'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'Package Folder Aligner {__version__}'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    align_parser = subparsers.add_parser(
        'align',
        help='Align the directory layout of a project with its packages'
    )

    align_parser.add_argument(
        'project_path',
        type=str,
        nargs='?',
        default=configs.ALIGNER_PROJECT_ROOT,
        help='Path to the project to align (default: ALIGNER_PROJECT_ROOT or the current directory)'
    )

    align_parser.add_argument(
        '--language', '-l',
        type=str,
        default=configs.ALIGNER_LANGUAGE,
        choices=AnalyzerFactory.SUPPORTED_LANGUAGES,
        help='Programming language of the project (default: scala)'
    )

    align_parser.add_argument(
        '--root-package', '-r',
        type=package_path,
        default=None,
        help='Package every source file must be declared under, e.g. com.example.api'
    )

    align_parser.add_argument(
        '--dry-run', '-n',
        action='store_true',
        help='Only report the moves, do not touch any file'
    )

    align_parser.add_argument(
        '--output', '-o',
        type=str,
        help='Write the planned moves and problems to this JSON file (optional)'
    )

    align_parser.add_argument(
        '--log-file',
        type=str,
        default=configs.ALIGNER_LOG_FILE,
        help='Log file (default: pkg_aligner.log, empty to disable)'
    )

    align_parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose (DEBUG) logging'
    )

    align_parser.set_defaults(func=align_command)

    return parser


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv)

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, 'func'):
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
