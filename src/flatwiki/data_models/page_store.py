"""Flat-file store for wiki pages: one ``<title>.txt`` file per page."""

import logging
import os
from pathlib import Path

from flatwiki.data_models.page import Page

logger = logging.getLogger(__name__)

PAGE_SUFFIX = ".txt"
PAGE_MODE = 0o600


class PageStore:
    def __init__(self, pages_path: Path) -> None:
        self._pages_path = pages_path
        pages_path.mkdir(parents=True, exist_ok=True)

    @property
    def pages_path(self) -> Path:
        return self._pages_path

    def path_for(self, title: str) -> Path:
        # title is trusted: callers only pass titles that passed path validation
        return self._pages_path / f"{title}{PAGE_SUFFIX}"

    def read(self, title: str) -> Page | None:
        """Return the stored page, or None if no file exists for title.

        Any other read failure (permissions, title naming a directory, ...)
        propagates as OSError.
        """
        try:
            body = self.path_for(title).read_bytes()
        except FileNotFoundError:
            return None
        return Page(title=title, body=body)

    def load(self, title: str) -> Page:
        """Return the page for title, with an empty body if it cannot be read.

        A missing page is a normal state, not an error. Unreadable files are
        treated the same way but logged.
        """
        try:
            page = self.read(title)
        except OSError as exc:
            logger.warning("Could not read page %s: %s", title, exc)
            page = None
        if page is None:
            return Page(title=title)
        return page

    def save(self, page: Page) -> None:
        """Write page.body to its file, creating or truncating it.

        New files are created owner read/write only. Raises OSError on failure.
        """
        fd = os.open(
            self.path_for(page.title),
            os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
            PAGE_MODE,
        )
        with os.fdopen(fd, "wb") as f:
            f.write(page.body)

    def titles(self) -> list[str]:
        return sorted(
            p.stem for p in self._pages_path.glob(f"*{PAGE_SUFFIX}") if p.is_file()
        )
