"""
normalization.py
-----------------
Deterministic tweet normalization: an ordered list of string rewrite rules
turning raw tweet text into clean, lowercase ASCII text with ``<user>`` and
``<number>`` sentinels.
"""

from __future__ import annotations

import re
import string
from dataclasses import dataclass
from typing import Callable, Iterable, Tuple

import pandas as pd

USER_TOKEN = "<user>"
NUMBER_TOKEN = "<number>"
SENTINELS = (USER_TOKEN, NUMBER_TOKEN)

# Everything in string.punctuation except the hyphen (split later on).
_PUNCT_NO_HYPHEN = string.punctuation.replace("-", "")
_PUNCT_RE = re.compile(
    "(" + "|".join(re.escape(s) for s in SENTINELS) + ")"
    + "|[" + re.escape(_PUNCT_NO_HYPHEN) + "]"
)


@dataclass(frozen=True)
class NormalizationRule:
    """A single named rewrite step."""

    name: str
    transform: Callable[[str], str]

    def apply(self, text: str) -> str:
        return self.transform(text)


def _sub(pattern: str, repl, flags: int = 0) -> Callable[[str], str]:
    compiled = re.compile(pattern, flags)
    return lambda text: compiled.sub(repl, text)


def _strip_punctuation(text: str) -> str:
    # group 1 is a sentinel token, kept as-is
    return _PUNCT_RE.sub(lambda m: m.group(1) or "", text)


RULES: Tuple[NormalizationRule, ...] = (
    NormalizationRule("non_ascii", _sub(r"[^\x00-\x7F]", "")),
    # later punctuation removal can still join letters into "http" ("ht.tp")
    NormalizationRule("urls", _sub(r"http\S*", "", re.IGNORECASE)),
    NormalizationRule("lowercase", str.lower),
    NormalizationRule("mentions", _sub(r"@\w+", USER_TOKEN)),
    NormalizationRule("hashtags", _sub(r"#\w+", "")),
    NormalizationRule("slashes", lambda text: text.replace("/", " ")),
    NormalizationRule("possessives", lambda text: text.replace("'s", "")),
    NormalizationRule("punctuation", _strip_punctuation),
    NormalizationRule("numbers", _sub(r"\d+", NUMBER_TOKEN)),
    NormalizationRule("hyphens", lambda text: text.replace("-", " ")),
    NormalizationRule("line_breaks", _sub(r"\r\n|\r|\n", " ")),
    NormalizationRule("whitespace", _sub(r"\s+", " ")),
    NormalizationRule("trim", _sub(r"^ | $", "")),
)


def normalize_text(text: str, rules: Iterable[NormalizationRule] = RULES) -> str:
    """Map raw tweet text to its cleaned form.

    Rules run in the order given (``RULES`` by default):

      1. drop non-ASCII characters (emoji, accents, curly quotes)
      2. drop URLs (``http`` up to the next whitespace)
      3. lowercase
      4. ``@mention`` -> ``<user>``
      5. drop ``#hashtag``
      6. ``/`` -> space
      7. drop ``'s``
      8. drop punctuation except ``-`` (sentinels are kept)
      9. digit runs -> ``<number>``
     10. ``-`` -> space
     11. line breaks -> space
     12. whitespace runs (and single tabs) -> one space
     13. trim one leading / trailing space

    Raises
    ------
    TypeError
        If ``text`` is not a string.
    """
    if not isinstance(text, str):
        raise TypeError(f"normalize_text expects str, got {type(text).__name__}")

    for rule in rules:
        text = rule.apply(text)
    return text


def normalize_series(series: pd.Series) -> pd.Series:
    """Apply ``normalize_text`` to a pandas Series; missing values become ''."""
    return series.fillna("").astype(str).apply(normalize_text)
