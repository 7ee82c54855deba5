from pathlib import Path
from typing import List, Optional


def read_file_lines(file_path: Path) -> List[str]:
    """Read file lines with encoding fallback."""
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return f.read().splitlines()
    except UnicodeDecodeError:
        with open(file_path, 'r', encoding='latin1') as f:
            return f.read().splitlines()


def first_file_ancestor(path: Path, stop_at: Path) -> Optional[Path]:
    """
    Walk from ``path`` up to (excluding) ``stop_at`` and return the first
    existing path that is a plain file, or None when every step is a
    directory or missing.
    """
    for candidate in [path, *path.parents]:
        if candidate == stop_at or candidate == candidate.parent:
            break
        if candidate.is_file():
            return candidate
    return None
