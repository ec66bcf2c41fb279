"""
Keyword tag generation for articles.

Tags are the most frequent meaningful words of an article's content.
"""
import re
from collections import Counter
from typing import List

MAX_TAGS = 3
MIN_WORD_LENGTH = 3

STOPWORDS = frozenset({
    "the", "and", "a", "an", "in", "of", "for", "is", "on",
    "with", "as", "at", "be", "to", "this", "that", "it",
})

_WORD_PATTERN = re.compile(r"\b\w+\b", re.ASCII)


def tokenize(text: str) -> List[str]:
    """
    Split text into lower-cased ASCII word tokens.

    Args:
        text: Free text

    Returns:
        Tokens in order of appearance
    """
    return _WORD_PATTERN.findall(text.lower())


def generate_tags(content: str, limit: int = MAX_TAGS) -> List[str]:
    """
    Derive up to ``limit`` tags from content.

    Words shorter than three characters and stopwords are ignored. Remaining
    words are ranked by descending frequency; words with equal frequency keep
    the order in which they first appear in the content.

    Args:
        content: Article content
        limit: Maximum number of tags to return

    Returns:
        List of tags, most frequent first
    """
    if not content:
        return []

    counts = Counter(
        word for word in tokenize(content)
        if len(word) >= MIN_WORD_LENGTH and word not in STOPWORDS
    )
    # most_common keeps insertion (first-seen) order among equal counts
    return [word for word, _ in counts.most_common(limit)]
