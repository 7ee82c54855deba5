"""
Package Folder Aligner - Entry point for CLI execution.

Allows running the package as a module: python -m pkg_aligner
"""

from pkg_aligner.cli import main
import sys

if __name__ == '__main__':
    sys.exit(main())
