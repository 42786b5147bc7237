"""CHANGELOG.md manipulation.

New release entries are prepended below the file header. The rest of the
file is kept byte for byte by using a targeted regex on the header line
rather than parsing the markdown.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from conventional_release.exceptions import ChangelogFileError

if TYPE_CHECKING:
    from pathlib import Path

_RELEASE_HEADING = r"^## \[{version}\]"


def has_release(content: str, version: str) -> bool:
    """Whether ``content`` already has a heading for ``version``."""
    pattern = _RELEASE_HEADING.format(version=re.escape(version))
    return re.search(pattern, content, re.MULTILINE) is not None


def prepend_release_entry(
    path: Path,
    entry: str,
    version: str,
    header: str = "# Changelog",
) -> Path:
    """Insert a release entry at the top of a changelog file.

    The file is created with ``header`` if it does not exist. An existing
    header line is moved above the new entry.

    Args:
        path: Changelog file
        entry: Rendered release entry, starting with its ``##`` heading
        version: Version of the entry, used to refuse duplicates
        header: Top-level heading of the file

    Returns:
        Path to the updated changelog

    Raises:
        ChangelogFileError: If the version is already listed or the file
            cannot be read or written
    """
    try:
        existing = path.read_text() if path.exists() else ""
    except OSError as e:
        raise ChangelogFileError(f"Could not read {path}: {e}") from e

    if has_release(existing, version):
        raise ChangelogFileError(f"{path} already contains an entry for {version}")

    # Whole header line only, plus the blank lines following it
    header_pattern = rf"^{re.escape(header)}[ \t]*$\n*"
    remainder = re.sub(header_pattern, "", existing, count=1, flags=re.MULTILINE)

    parts = [header, entry.strip("\n")]
    if remainder.strip():
        parts.append(remainder.strip("\n"))
    content = "\n\n".join(parts) + "\n"

    try:
        path.write_text(content)
    except OSError as e:
        raise ChangelogFileError(f"Could not write {path}: {e}") from e
    return path
