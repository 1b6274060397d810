"""Literal placeholder substitution for message files."""

import re
from typing import Mapping


def substitute_tokens(text: str, tokens: Mapping[str, str]) -> str:
    """Replace every occurrence of each placeholder in text with its value.

    All placeholders are replaced in a single left-to-right pass, so a value
    that itself contains a placeholder is inserted as-is. Text that matches
    no placeholder (including unknown ``${...}`` names) is left untouched.

    Args:
        text: Source text
        tokens: Placeholder -> replacement mapping, e.g. {"${BUILD_ID}": "42"}

    Returns:
        Text with placeholders substituted

    Example:
        >>> substitute_tokens("build ${BUILD_ID}", {"${BUILD_ID}": "42"})
        'build 42'
    """
    if not text or not tokens:
        return text

    # Longest first so no placeholder can shadow a longer one sharing its prefix
    keys = sorted(tokens, key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(key) for key in keys))
    return pattern.sub(lambda match: tokens[match.group(0)], text)
