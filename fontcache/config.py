import os
SERVER_NAME       = "font-cache-mcp"
LOG_LEVEL         = os.environ.get("FONT_CACHE_LOG_LEVEL", "INFO")
LOG_FORMAT        = os.environ.get("FONT_CACHE_LOG_FORMAT", "json")
CHANGELOG_PATH    = os.environ.get("FONT_CACHE_CHANGELOG", "CHANGELOG.md")
DEFAULT_PAGE_SIZE = 50
