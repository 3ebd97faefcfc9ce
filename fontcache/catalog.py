"""Per-OS catalog of the directories that conventionally hold installed fonts."""
import os
import platform
from typing import List, Mapping, Optional

WINDOWS_FONT_DIRS = [
    "C:\\Windows\\Fonts",
    "C:\\Users\\Public\\AppData\\Local\\Microsoft\\Windows\\Fonts",
]

MACOS_FONT_DIRS = [
    "/System/Library/Fonts",
    "/Library/Fonts",
    "/Users/Shared/Library/Fonts",
]

def current_os() -> str:
    """Identifier of the running OS: 'windows', 'macos' or the lower-cased system name."""
    system = platform.system().lower()
    return {"windows": "windows", "darwin": "macos"}.get(system, system)

def directories_for(os_name: str, environ: Optional[Mapping[str, str]] = None) -> List[str]:
    """Ordered candidate font directories for ``os_name``.

    Unsupported platforms get an empty list, so the cache ends up empty
    instead of failing. On macOS an unset HOME yields ``/Library/Fonts``
    relative to the empty string, which simply fails to enumerate.
    """
    if os_name == "windows":
        return list(WINDOWS_FONT_DIRS)
    if os_name == "macos":
        env = os.environ if environ is None else environ
        home = env.get("HOME", "")
        return MACOS_FONT_DIRS + [f"{home}/Library/Fonts"]
    return []
