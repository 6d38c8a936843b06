"""Path validation and title extraction.

One anchored pattern both recognizes the supported operations and extracts
the page title. Titles are concatenated straight into file paths, so the
character class below is the only guard against path traversal.
"""

from dataclasses import dataclass
import re

TITLE_CHARS = r"[_a-zA-Z0-9.]+"

# groups: 1 = "op/title" (optional), 2 = op, 3 = title
VALID_PATH = re.compile(rf"/((edit|save|view|styles)/({TITLE_CHARS}))?")
VALID_TITLE = re.compile(TITLE_CHARS)


class InvalidPathError(ValueError):
    pass


@dataclass(frozen=True)
class PathMatch:
    operation: str | None  # None for the bare front path "/"
    title: str


def match_path(path: str, pattern: re.Pattern[str] = VALID_PATH) -> PathMatch | None:
    m = pattern.fullmatch(path)
    if m is None:
        return None
    return PathMatch(operation=m.group(2), title=m.group(3) or "")


def get_title(path: str, pattern: re.Pattern[str] = VALID_PATH) -> str:
    match = match_path(path, pattern)
    if match is None:
        raise InvalidPathError(f"Invalid page title in path: {path!r}")
    return match.title


def is_valid_title(title: str) -> bool:
    return VALID_TITLE.fullmatch(title) is not None
