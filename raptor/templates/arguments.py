"""Helper argument tokenizer.

Raw argument text such as '"hello world" 5 true user.name' is split on
unquoted whitespace and every token is classified, in this order:

    1. quoted string   "text"      -> str (quotes removed)
    2. number          5, 3.14     -> int or float (finite only)
    3. boolean         true/false  -> bool
    4. null            null        -> None
    5. context path    user.name   -> value from the context

A bare numeral is never a path, and a quoted "true" is a string.
"""

import math
import re
from typing import Any

_INT_RE = re.compile(r"[+-]?\d+")


def tokenize(raw: str) -> list[str]:
    """Split raw argument text on whitespace outside double quotes.

    An escaped quote (\\") does not open or close a quoted span. Quote
    characters are kept in the token so classification can see them.
    """
    tokens: list[str] = []
    current: list[str] = []
    in_quotes = False

    for i, char in enumerate(raw):
        if char == '"' and (i == 0 or raw[i - 1] != "\\"):
            in_quotes = not in_quotes
            current.append(char)
        elif char.isspace() and not in_quotes:
            token = "".join(current).strip()
            if token:
                tokens.append(token)
                current = []
        else:
            current.append(char)

    token = "".join(current).strip()
    if token:
        tokens.append(token)
    return tokens


def _parse_number(token: str) -> int | float | None:
    """Parse a finite numeric literal, or return None."""
    if _INT_RE.fullmatch(token):
        return int(token)
    try:
        number = float(token)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


def classify(token: str) -> tuple[bool, Any]:
    """Classify a single token.

    Returns:
        (True, value) for a literal, (False, token) when the token is a
        context path that the caller must resolve
    """
    if token.startswith('"') and token.endswith('"'):
        return True, token[1:-1]

    number = _parse_number(token)
    if number is not None:
        return True, number

    if token == "true":
        return True, True
    if token == "false":
        return True, False
    if token == "null":
        return True, None

    return False, token
