"""Snippet placeholder rendering."""

import re

_PLACEHOLDER = re.compile(r"\$\{\d+:([^{}]*)\}")
_CHOICE = re.compile(r"\$\{\d+\|([^|]*)\|\}")
_EMPTY_TAB_STOP = re.compile(r"\$\{\d+\}|\$\d+")
_ESCAPED_DOLLAR = "\\$"
_DOLLAR_SENTINEL = "\x00"


def render_snippet(snippet: str) -> str:
    """
    Resolve snippet syntax to the plain text an editor would insert.

    `${1:text}` becomes `text` (nested placeholders resolve inside out),
    `${1|a,b|}` becomes `a`, bare tab stops vanish and `\\$` becomes `$`.
    """
    text = snippet.replace(_ESCAPED_DOLLAR, _DOLLAR_SENTINEL)
    previous = None
    while previous != text:
        previous = text
        text = _PLACEHOLDER.sub(lambda m: m.group(1), text)
    text = _CHOICE.sub(lambda m: m.group(1).split(",")[0], text)
    text = _EMPTY_TAB_STOP.sub("", text)
    return text.replace(_DOLLAR_SENTINEL, "$")
