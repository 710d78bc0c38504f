from __future__ import annotations
import re
import unicodedata

def norm_text(s: str) -> str:
    """Fold compatibility forms and collapse runs of whitespace."""
    folded = unicodedata.normalize("NFKC", s or "")
    return re.sub(r"\s+", " ", folded).strip()

def norm_input(s: str) -> str:
    # fullwidth digits typed on some keyboards fold to ASCII under NFKC
    return unicodedata.normalize("NFKC", s or "").strip()
