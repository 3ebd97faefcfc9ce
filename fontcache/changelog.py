import datetime
import os
from typing import Optional

from .config import CHANGELOG_PATH
from .logging_config import logger

FALLBACK_CHANGELOG = """
## v1.0.2 ({today})

- [Improved] Better version comparison
- [Fixed] Version check issues

## v1.0.1 (2023-11-15)

- [New] Changelog viewer
- [Improved] Context menu positioning
- [Fixed] Theme menu display in the settings sidebar

## v1.0.0 (2023-10-01)

- [New] First release
- [New] Browse and preview system fonts
- [New] Favourite fonts
- [New] Font search
"""

def get_changelog_text(path: str = CHANGELOG_PATH, today: Optional[datetime.date] = None) -> str:
    """Contents of the changelog file, or the built-in changelog if it cannot be read."""
    if os.path.exists(path):
        try:
            with open(path, encoding="utf-8") as f:
                content = f.read()
            logger.info(f"Read changelog from {path}")
            return content
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read changelog {path}: {e}")

    today = today or datetime.date.today()
    logger.info("Using built-in changelog")
    return FALLBACK_CHANGELOG.format(today=today.strftime("%Y-%m-%d"))
