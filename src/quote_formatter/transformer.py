"""Text transformation applied to chat messages."""

import re
from typing import Any

QUOTED_SPAN = re.compile(r'"([^"]*)"')


def _strip_span(match: re.Match) -> str:
    return '"' + match.group(1).replace("*", "") + '"'


def remove_asterisks_from_quotes(text: Any) -> Any:
    """
    Remove every `*` found between a pair of double quotes.

    Quotes pair up left to right without nesting, so a trailing unmatched
    `"` and everything after it is left as is. Asterisks outside quote
    pairs are kept. Non-string and empty input is returned unchanged.

    Example:
        >>> remove_asterisks_from_quotes('He said "hello *world*" loudly')
        'He said "hello world" loudly'
    """
    if not text or not isinstance(text, str):
        return text

    return QUOTED_SPAN.sub(_strip_span, text)
