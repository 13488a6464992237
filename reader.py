"""
reader.py - Text Sources

Turns a file on disk into the single text buffer the tag cloud pipeline
consumes. Plain text is read line by line; HTML is parsed and reduced to
its visible text.
"""

import os
import re

from bs4 import BeautifulSoup

from utils import get_logger
from tagcloud.errors import InvalidArgument, SourceUnavailable

HTML_SUFFIXES = (".htm", ".html")

# Tags whose content never shows up as page text
NON_CONTENT_TAGS = ["script", "style", "noscript", "svg", "iframe",
                    "form", "meta", "link"]

logger = get_logger("READER")


def join_lines(lines):
    """
    Concatenate lines, following each one with a single space.

    Line terminators are dropped, so a word at the end of one line and a word
    at the start of the next stay separate tokens.
    """
    return "".join(line.rstrip("\r\n") + " " for line in lines)


def read_text(path):
    """
    Read a plain text file into one buffer (see join_lines).

    Raises:
        SourceUnavailable: If the file cannot be opened or read
    """
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return join_lines(f)
    except OSError as e:
        raise SourceUnavailable(path, e) from e


def extract_visible_text(soup):
    """Visible text of a parsed page, whitespace collapsed to single spaces."""
    for tag in soup(NON_CONTENT_TAGS):
        tag.decompose()
    root = soup.body or soup
    text = root.get_text(separator=" ")
    return re.sub(r"\s+", " ", text).strip()


def read_html(path):
    """
    Read an HTML file and return its visible text.

    Raises:
        SourceUnavailable: If the file cannot be opened or read
    """
    try:
        with open(path, "rb") as f:
            content = f.read()
    except OSError as e:
        raise SourceUnavailable(path, e) from e
    return extract_visible_text(BeautifulSoup(content, "lxml"))


def resolve_format(path, fmt="auto"):
    if fmt == "auto":
        return "html" if path.lower().endswith(HTML_SUFFIXES) else "text"
    if fmt not in ("text", "html"):
        raise InvalidArgument("FORMAT", f"unknown input format {fmt!r}")
    return fmt


def read_source(path, fmt="auto"):
    """
    Read path as text or HTML.

    Args:
        path: Input file path
        fmt: "text", "html", or "auto" (choose by file suffix)

    Raises:
        SourceUnavailable: If path is missing or unreadable
        InvalidArgument: If fmt is not a known format
    """
    if not path:
        raise SourceUnavailable(path, "no input file given")
    fmt = resolve_format(path, fmt)
    logger.info(f"Reading {path} as {fmt} ({_size(path)}).")
    if fmt == "html":
        return read_html(path)
    return read_text(path)


def _size(path):
    try:
        return f"{os.path.getsize(path)} bytes"
    except OSError:
        return "size unknown"
