"""Reading engine description files and reporting messages to the user."""

from __future__ import annotations

import logging
from pathlib import Path
from xml.parsers import expat

logger = logging.getLogger(__name__)


def load_file_content(filename: str | Path) -> str:
    """Return the whole content of ``filename`` decoded as UTF-8.

    Raises OSError when the file cannot be read.
    """
    return Path(filename).read_text(encoding="utf-8")


def parse_engine_version(filename: str | Path) -> str | None:
    """Return the text of the first ``<version>`` element in ``filename``.

    An engine file may list several versions; only the first is kept.
    A parse error stops parsing and is logged; whatever was found before
    it is still returned. None means no version text was found.
    """
    data = Path(filename).read_bytes()

    in_version_tag = False
    first_version: str | None = None

    def start_element(name: str, attributes: dict[str, str]) -> None:
        nonlocal in_version_tag
        if name == "version":
            in_version_tag = True

    def end_element(name: str) -> None:
        nonlocal in_version_tag
        if name == "version":
            in_version_tag = False

    def characters(text: str) -> None:
        nonlocal first_version
        if in_version_tag and first_version is None:
            first_version = text

    parser = expat.ParserCreate()
    parser.buffer_text = True
    parser.StartElementHandler = start_element
    parser.EndElementHandler = end_element
    parser.CharacterDataHandler = characters
    try:
        parser.Parse(data, True)
    except expat.ExpatError as exc:
        logger.error("ERROR: %s", exc)
    return first_version


def show_message(summary: str, details: str | None) -> str:
    """Report a message to the user and return the text that was shown."""
    message = summary if details is None else f"{summary}\n{details}"
    logger.info("%s", message)
    return message