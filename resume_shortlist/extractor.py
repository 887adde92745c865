# extractor.py
import re
from typing import List

# ---------- Stop Words ----------
STOP_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of",
    "with", "by", "is", "are", "was", "were", "be", "been", "have", "has",
    "had", "do", "does", "did", "will", "would", "could", "should", "may",
    "might", "must", "can", "this", "that", "these", "those", "i", "you",
    "he", "she", "it", "we", "they", "me", "him", "her", "us", "them",
})

MIN_KEYWORD_LENGTH = 3

_NON_WORD = re.compile(r"[^a-z0-9_]")


# ---------- Normalization ----------
def normalize_token(token: str) -> str:
    return _NON_WORD.sub("", token.lower())


# ---------- Public API ----------
def extract_keywords(text: str) -> List[str]:
    """Split job text into lowercase keywords, keeping input order and duplicates.

    Tokens are normalized before filtering, so "(a)" or "it," can never
    slip through as a short token or stop word.
    """
    keywords: List[str] = []
    for raw in text.split():
        token = normalize_token(raw)
        if len(token) < MIN_KEYWORD_LENGTH or token in STOP_WORDS:
            continue
        keywords.append(token)
    return keywords
