"""Canonicalization of numeric text from sensor exports."""

from typing import Optional

# Dash-like code points that spreadsheet exports emit in place of a minus sign
_DASH_CHARACTERS = (
    "‐"  # HYPHEN
    "‑"  # NON-BREAKING HYPHEN
    "‒"  # FIGURE DASH
    "–"  # EN DASH
    "—"  # EM DASH
    "―"  # HORIZONTAL BAR
    "−"  # MINUS SIGN
)

_TRANSLATION = str.maketrans({**{c: "-" for c in _DASH_CHARACTERS}, ",": "."})


def normalize_number_string(text: Optional[str]) -> Optional[str]:
    """
    Rewrite a numeric fragment so float() accepts it.

    Unicode dash variants become ASCII hyphen-minus and a comma decimal
    separator becomes a period. All other characters are kept.

    Args:
        text: Raw numeric text (may be empty or None)

    Returns:
        Normalized text, or the input unchanged when empty
    """
    if not text:
        return text
    return text.translate(_TRANSLATION)
