"""Input Sanitization: pure text checks and HTML escaping for persisted fields.

Invariants:
    - escape_text is idempotent: escape_text(escape_text(v)) == escape_text(v)
    - escape_text never decodes input; only well-formed references
      (&name; &#NN; &#xHH;) pass through unchanged, every other & becomes &amp;
    - is_alpha_space accepts US-English letters and spaces only, with at least one letter
"""

import re

_ALPHA_SPACE = re.compile(r"[A-Za-z ]+")

_BARE_AMPERSAND = re.compile(
    r"&(?!(?:[A-Za-z][A-Za-z0-9]*|#[0-9]+|#[xX][0-9A-Fa-f]+);)"
)

_MARKUP = str.maketrans({
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#x27;",
})


def escape_text(value: str) -> str:
    """HTML-escape ``& < > " '``; references already present are not escaped twice."""
    return _BARE_AMPERSAND.sub("&amp;", value).translate(_MARKUP)


def is_alpha_space(value: str) -> bool:
    """True when value is letters and spaces only and not blank."""
    return bool(_ALPHA_SPACE.fullmatch(value)) and not value.isspace()
