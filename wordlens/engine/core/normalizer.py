"""Content normalization for keyword matching.

Uploaded content may be legacy rich text (RTF). Before any matching or
highlighting it is reduced to plain text so that keyword word boundaries
fall where a reader would expect them:
- Control words, groups and table destinations are stripped
- Paragraph, line, tab, bullet, dash and quote controls become plain text
- Whitespace is normalized (one blank line between paragraphs at most)
"""

import logging
import re

from ..errors import NormalizationError
from .rtf import (
    BACKSLASH_PLACEHOLDER,
    CLOSE_BRACE_PLACEHOLDER,
    COMPILED_RULES,
    DESTINATION_GROUP_PATTERN,
    ESCAPED_LITERALS,
    HEX_ESCAPE_PATTERN,
    OPEN_BRACE_PLACEHOLDER,
    RTF_HEADER_PATTERN,
    UNICODE_ESCAPE_PATTERN,
)

logger = logging.getLogger(__name__)

_LITERAL_TO_PLACEHOLDER = {
    "\\": BACKSLASH_PLACEHOLDER,
    "{": OPEN_BRACE_PLACEHOLDER,
    "}": CLOSE_BRACE_PLACEHOLDER,
}


def is_rtf(content: str) -> bool:
    """Check whether content carries an RTF header (``{\\rtf``)."""
    return bool(content) and RTF_HEADER_PATTERN.match(content) is not None


def _protect(char: str) -> str:
    # Decoded characters must survive the brace and backslash cleanup
    return _LITERAL_TO_PLACEHOLDER.get(char, char)


def _decode_unicode(match: re.Match[str]) -> str:
    code = int(match.group(1))
    if code < 0:
        code += 65536
    try:
        return _protect(chr(code))
    except ValueError:
        return ""


def _decode_hex(match: re.Match[str]) -> str:
    return _protect(bytes([int(match.group(1), 16)]).decode("cp1252", errors="replace"))


def _drop_destination_groups(text: str) -> str:
    """Remove font, color, stylesheet and other non-text groups.

    Groups are matched by brace depth, so nested entries such as
    ``{\\fonttbl{\\f0 Arial;}{\\f1 Times;}}`` are removed whole.
    """
    while True:
        match = DESTINATION_GROUP_PATTERN.search(text)
        if match is None:
            return text

        depth = 0
        end = None
        for pos in range(match.start(), len(text)):
            char = text[pos]
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    end = pos
                    break

        if end is None:
            raise NormalizationError(f"Unterminated RTF group at offset {match.start()}")
        text = text[: match.start()] + text[end + 1 :]


def strip_rtf(content: str) -> str:
    """Strip RTF markup, keeping the document text.

    Args:
        content: RTF source.

    Returns:
        Plain text (whitespace not yet normalized).

    Raises:
        NormalizationError: If the group braces do not balance.
    """
    text = content
    for literal, placeholder in ESCAPED_LITERALS:
        text = text.replace(literal, placeholder)

    if text.count("{") != text.count("}"):
        raise NormalizationError(
            f"Unbalanced RTF groups: {text.count('{')} opened, {text.count('}')} closed"
        )

    text = _drop_destination_groups(text)
    text = UNICODE_ESCAPE_PATTERN.sub(_decode_unicode, text)
    text = HEX_ESCAPE_PATTERN.sub(_decode_hex, text)

    for pattern, replacement in COMPILED_RULES:
        text = pattern.sub(replacement, text)

    return (
        text.replace(BACKSLASH_PLACEHOLDER, "\\")
        .replace(OPEN_BRACE_PLACEHOLDER, "{")
        .replace(CLOSE_BRACE_PLACEHOLDER, "}")
    )


def normalize_whitespace(text: str) -> str:
    """Normalize line endings and spacing.

    CRLF and CR become LF, runs of spaces collapse to one, each line loses
    leading and trailing spaces and tabs, and no more than one blank line
    separates paragraphs. Applying it twice gives the same result as once.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = re.sub(r" {2,}", " ", text)
    text = "\n".join(line.strip(" \t") for line in text.split("\n"))
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def normalize_content(raw: str) -> str:
    """Turn uploaded content into plain text ready for matching.

    RTF stripping only runs on RTF content; plain text only receives
    whitespace normalization. Malformed RTF falls back to the unmodified
    raw content.

    Args:
        raw: Content as uploaded.

    Returns:
        Normalized plain text.
    """
    if not raw:
        return ""

    if is_rtf(raw):
        try:
            text = strip_rtf(raw)
        except NormalizationError as e:
            logger.warning(f"RTF normalization failed, using raw content: {e}")
            return raw
    else:
        text = raw

    return normalize_whitespace(text)
