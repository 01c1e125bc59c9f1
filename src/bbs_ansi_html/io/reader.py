"""Load ANSI art files for conversion."""

from pathlib import Path

from bbs_ansi_html.converter import ansi_to_html
from bbs_ansi_html.core.options import ConversionOptions
from bbs_ansi_html.logging import get_logger

log = get_logger(__name__)


def load_bytes(path: str | Path) -> bytes:
    """Read the raw bytes of an art file (.ans, .asc, .diz, ...)."""
    path = Path(path)
    data = path.read_bytes()
    log.debug("file_loaded", path=str(path), size=len(data))
    return data


def convert_file(path: str | Path, options: ConversionOptions | None = None) -> str:
    """Load an art file from disk and convert it to an HTML fragment."""
    return ansi_to_html(load_bytes(path), options)
