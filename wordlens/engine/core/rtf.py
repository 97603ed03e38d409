"""RTF control-word rules for the content normalizer.

Rules are applied in order. Longer control words come before their
prefixes (``\\ansicpg`` before ``\\ansi``) so a prefix rule never leaves a
dangling parameter behind.
"""

import re

# Placeholders for escaped literals while control words are stripped
# (Unicode private use area, never present in real documents)
BACKSLASH_PLACEHOLDER = "\ue000"
OPEN_BRACE_PLACEHOLDER = "\ue001"
CLOSE_BRACE_PLACEHOLDER = "\ue002"

ESCAPED_LITERALS = (
    ("\\\\", BACKSLASH_PLACEHOLDER),
    ("\\{", OPEN_BRACE_PLACEHOLDER),
    ("\\}", CLOSE_BRACE_PLACEHOLDER),
)

RTF_HEADER_PATTERN = re.compile(r"^\s*\{\\rtf\d*")

# Destination groups that carry no document text. Groups opened with the
# ignorable-destination marker ``{\*`` are dropped as well.
DESTINATION_GROUP_PATTERN = re.compile(
    r"\{\\(?:\*|(?:fonttbl|colortbl|expandedcolortbl|stylesheet|info|listtable"
    r"|listoverridetable|generator|pict|header[lrf]?|footer[lrf]?)\b)"
)

UNICODE_ESCAPE_PATTERN = re.compile(r"\\u(-?\d+)(?:\\'[0-9a-fA-F]{2}|\?)?")
HEX_ESCAPE_PATTERN = re.compile(r"\\'([0-9a-fA-F]{2})")

# Header, font, paragraph and character formatting with no text equivalent.
# The delimiter space after each is appended when the rules are compiled.
FORMATTING_RULES: tuple[tuple[str, str], ...] = (
    (r"\\rtf\d+", ""),
    (r"\\ansicpg\d+", ""),
    (r"\\ansi\b", ""),
    (r"\\cocoartf\d+", ""),
    (r"\\deff\d+", ""),
    (r"\\deflang\d+", ""),
    (r"\\uc\d+", ""),
    (r"\\marg[lrtb]\d+", ""),
    (r"\\fs\d+", ""),
    (r"\\f\d+", ""),
    (r"\\cf\d+", ""),
    (r"\\cb\d+", ""),
    (r"\\highlight\d+", ""),
    (r"\\chc[bf]pat\d+", ""),
    (r"\\pardeftab\d+", ""),
    (r"\\pard\b", ""),
    (r"\\slmult\d+", ""),
    (r"\\sl\d+", ""),
    (r"\\s[ab]\d+", ""),
    (r"\\fi-?\d+", ""),
    (r"\\li\d+", ""),
    (r"\\ri\d+", ""),
    (r"\\q[clrj]\b", ""),
    (r"\\b0?\b", ""),
    (r"\\i0?\b", ""),
    (r"\\ulnone\b", ""),
    (r"\\ul\b", ""),
    (r"\\striked\d+", ""),
    (r"\\strike\b", ""),
    (r"\\(?:scaps|caps|outl|shad)\b", ""),
    (r"\\sectd\b", ""),
    (r"\\sect\b", ""),
)

# Control words with a plain-text equivalent. The single space after a
# control word is its delimiter, not document text.
TEXT_RULES: tuple[tuple[str, str], ...] = (
    (r"\\par\b ?", "\n"),
    (r"\\line\b ?", "\n"),
    (r"\\page\b ?", "\n\n"),
    (r"\\tab\b ?", "\t"),
    (r"\\endash\b ?", "\u2013"),
    (r"\\emdash\b ?", "\u2014"),
    (r"\\lquote\b ?", "\u2018"),
    (r"\\rquote\b ?", "\u2019"),
    (r"\\ldblquote\b ?", "\u201c"),
    (r"\\rdblquote\b ?", "\u201d"),
    (r"\\bullet\b", "\u2022"),
)

# Anything left after the specific rules
CLEANUP_RULES: tuple[tuple[str, str], ...] = (
    (r"\\[a-zA-Z]+-?\d+ ?", ""),
    (r"\\[a-zA-Z]+ ?", ""),
    (r"\\[^a-zA-Z\s]", ""),
    (r"[{}]", ""),
)


def _compile(
    rules: tuple[tuple[str, str], ...], delimiter: str = ""
) -> tuple[tuple[re.Pattern[str], str], ...]:
    return tuple((re.compile(pattern + delimiter), replacement) for pattern, replacement in rules)


COMPILED_RULES = (
    _compile(FORMATTING_RULES, delimiter=" ?") + _compile(TEXT_RULES) + _compile(CLEANUP_RULES)
)
