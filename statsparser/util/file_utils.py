import sys
from pathlib import Path
from typing import Optional

STDIN_MARKER = "-"


def read_text(source: Optional[str]) -> str:
    """
    Read the statistics text from a file path, or from stdin for '-' / None.

    Raises:
        FileNotFoundError: If the path does not exist
        IsADirectoryError: If the path is a directory
    """
    if source is None or source == STDIN_MARKER:
        return sys.stdin.read()

    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {source}")
    if path.is_dir():
        raise IsADirectoryError(f"Input path is a directory: {source}")
    # utf-8-sig: messages saved from SSMS usually carry a BOM
    return path.read_text(encoding="utf-8-sig")


def write_text(content: str, destination: Optional[str]) -> None:
    """Write content to destination, or to stdout when no destination is given."""
    if not destination:
        sys.stdout.write(content)
        return

    path = Path(destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
