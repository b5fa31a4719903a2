from __future__ import annotations

import math
import re

# Whitespace and line terminators as the browser's trim and parseFloat see them.
JS_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# Same grammar a browser's parseFloat accepts as a leading prefix.
_LEADING_FLOAT = re.compile(
    r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)


def strip_js_whitespace(text: str) -> str:
    return text.strip(JS_WHITESPACE)


def parse_leading_float(text: str) -> float:
    """Parse the numeric prefix of ``text``, ignoring anything after it.

    Returns ``math.nan`` when ``text`` does not start with an ASCII number
    once leading whitespace is skipped.
    """
    match = _LEADING_FLOAT.match(text.lstrip(JS_WHITESPACE))
    if not match:
        return math.nan
    return float(match.group(0))


def is_numeric_char(char: str) -> bool:
    # A lone whitespace character converts to 0 in the browser, not NaN.
    return char in JS_WHITESPACE or char in "0123456789"
