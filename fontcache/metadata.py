import os
from .models import FontInfo

FONT_EXTENSIONS = {"ttf", "otf", "ttc", "woff", "woff2"}
DEFAULT_STYLE = "Regular"

def is_font_file(path: str) -> bool:
    """True when the final extension is a recognised font format (case-sensitive)."""
    return os.path.splitext(path)[1][1:] in FONT_EXTENSIONS

def parse(path: str) -> FontInfo:
    """Derive display metadata for a font file from its filename alone.

    ``Helvetica-Bold.otf`` gives name ``Helvetica-Bold``, family ``Helvetica``
    and style ``Bold``. Names without a hyphen, or with nothing after it,
    fall back to the ``Regular`` style.
    """
    file_name = os.path.basename(path)
    name = file_name.split(".")[0]
    parts = name.split("-")
    family = parts[0]
    style = parts[1] if len(parts) > 1 and parts[1] else DEFAULT_STYLE
    return FontInfo(name=name, path=path, family=family, style=style)
