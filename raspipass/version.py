"""Version marker file lookup."""
import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

VERSION_FILE = "/raspipass/version"
DEFAULT_VERSION = "0"


def split_lines(text: str) -> list[str]:
    """Split on ``\\n`` only, dropping a ``\\r`` before it and a trailing empty line."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def read_version(path: Union[str, Path] = VERSION_FILE) -> Union[list[str], str]:
    """Read the deployed version from the marker file.

    Returns the file's lines with newline characters stripped, or the
    literal ``"0"`` when the file does not exist. Bytes that are not valid
    UTF-8 are replaced rather than rejected.
    """
    version_file = Path(path)
    if not version_file.exists():
        logger.debug("Version file %s not found, using %r", version_file, DEFAULT_VERSION)
        return DEFAULT_VERSION

    text = version_file.read_bytes().decode("utf-8", errors="replace")
    lines = split_lines(text)
    logger.debug("Read version %r from %s", lines, version_file)
    return lines
