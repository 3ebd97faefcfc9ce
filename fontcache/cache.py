import os
import threading
from typing import Callable, Iterable, List, Mapping, Optional

from .models import FontInfo
from . import catalog, metadata
from .logging_config import logger

ListDir = Callable[[str], Iterable[str]]

def list_directory(directory: str) -> List[str]:
    """Paths of the entries directly inside ``directory``; raises OSError if unreadable."""
    with os.scandir(directory) as entries:
        return [os.path.join(directory, entry.name) for entry in entries]

class FontCache:
    """In-memory font metadata cache, populated once on first read.

    Every public operation holds a single lock for its whole duration,
    including the directory scan of the first call, so concurrent callers
    never see a partially built list and the scan runs at most once.
    Directories that cannot be enumerated are skipped and recorded in
    ``skipped_directories``; the cache still counts as loaded afterwards.
    """

    def __init__(
        self,
        os_name: Optional[str] = None,
        list_dir: ListDir = list_directory,
        environ: Optional[Mapping[str, str]] = None,
    ):
        self.os_name = os_name if os_name is not None else catalog.current_os()
        self._list_dir = list_dir
        self._environ = environ
        self._fonts: List[FontInfo] = []
        self._loaded = False
        self._skipped: List[str] = []
        self._lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        with self._lock:
            return self._loaded

    @property
    def skipped_directories(self) -> List[str]:
        with self._lock:
            return list(self._skipped)

    def populate(self) -> None:
        """Scan the font directories unless that has already happened."""
        with self._lock:
            self._populate()

    def _populate(self) -> None:
        # Caller must hold self._lock
        if self._loaded:
            return

        directories = catalog.directories_for(self.os_name, self._environ)
        logger.info(f"Scanning {len(directories)} font directories for {self.os_name}")

        fonts: List[FontInfo] = []
        for directory in directories:
            try:
                entries = list(self._list_dir(directory))
            except OSError as e:
                logger.debug(f"Skipping font directory {directory}: {e}")
                self._skipped.append(directory)
                continue

            fonts.extend(metadata.parse(path) for path in entries if metadata.is_font_file(path))

        self._fonts = fonts
        self._loaded = True

        if self._skipped:
            logger.info(f"Skipped {len(self._skipped)} unreadable font directories")
        logger.info(f"Font cache loaded with {len(fonts)} fonts")

    def get_all_fonts(self) -> List[FontInfo]:
        with self._lock:
            self._populate()
            return list(self._fonts)

    def get_paginated_fonts(self, page: int, page_size: int) -> List[FontInfo]:
        """Zero-based page of fonts; empty once the page starts past the end."""
        if page < 0 or page_size < 0:
            raise ValueError(f"page and page_size must be non-negative, got {page}, {page_size}")

        with self._lock:
            self._populate()

            start = page * page_size
            end = min(start + page_size, len(self._fonts))
            if start >= len(self._fonts):
                return []
            return self._fonts[start:end]

    def get_font_count(self) -> int:
        with self._lock:
            self._populate()
            return len(self._fonts)
