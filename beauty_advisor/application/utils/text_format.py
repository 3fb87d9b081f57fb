from __future__ import annotations

import re

_BOLD = re.compile(r"\*\*(.*?)\*\*")
_HEADING = re.compile(r"^###\s+", re.MULTILINE)


def clean_markdown_formatting(text: str) -> str:
    """Strip **bold** markers and leading ### headings from model output."""
    cleaned = _BOLD.sub(r"\1", text)
    return _HEADING.sub("", cleaned)
