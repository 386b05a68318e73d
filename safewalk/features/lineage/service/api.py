import os
from pathlib import Path
from typing import Iterator, Union

def find_parents(path: Union[str, os.PathLike]) -> Iterator[Path]:
    """
    Yields every ancestor of an existing file or directory, nearest first,
    ending at the filesystem anchor (e.g. '/' or 'C:\\').
    For a file the first item is its containing directory. A root
    directory has no parents and yields nothing.

    Raises FileNotFoundError immediately if `path` doesn't exist.
    """
    if path is None or str(os.fspath(path)).strip() == "":
        raise ValueError("`path` cannot be empty")

    target = Path(os.path.abspath(path))
    if not target.exists():
        raise FileNotFoundError(f"Path not found: {target}")

    return iter(target.parents)
