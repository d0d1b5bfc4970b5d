"""Keyword-based tag inference for generated documents."""

import re
from typing import List

MAX_TAGS = 5
MAX_WORDS_PER_SOURCE = 10
TITLE_TAG_COUNT = 2
PROMPT_TAG_COUNT = 3
MIN_WORD_LENGTH = 3
MAX_WORD_LENGTH = 15

STOP_WORDS = frozenset({
    "a", "an", "and", "are", "as", "at", "be", "by", "for", "from", "has", "he",
    "in", "is", "it", "its", "of", "on", "that", "the", "to", "was", "will",
    "with", "this", "but", "they", "have", "had", "what", "said", "each",
    "which", "their", "time", "if", "up", "out", "many", "then", "them",
    "these", "so", "some", "her", "would", "make", "like", "into", "him", "two",
    "more", "very", "know", "just", "first", "get", "over", "think", "also",
    "your", "work", "life", "only", "can", "still", "should", "after", "being",
    "now", "made", "before", "here", "through", "when", "where", "how", "all",
    "any", "may", "say", "there", "use", "than", "she", "well", "other",
    "create", "generate", "write", "design", "build",
})

_NON_WORD = re.compile(r"[^\w\s]")
_NUMERIC = re.compile(r"\d+")


def extract_meaningful_words(text: str) -> List[str]:
    """
    Tokenize text into candidate keywords.

    Args:
        text: Free text.

    Returns:
        Up to ten qualifying lower-case words in original order.
    """
    words = []
    for word in _NON_WORD.sub(" ", text.lower()).split():
        if not MIN_WORD_LENGTH <= len(word) <= MAX_WORD_LENGTH:
            continue
        if word in STOP_WORDS or _NUMERIC.fullmatch(word):
            continue
        words.append(word)
        if len(words) == MAX_WORDS_PER_SOURCE:
            break
    return words


def extract_tags(title: str, prompt: str, category: str, doc_type: str) -> List[str]:
    """
    Infer display tags for a new document.

    Title keywords rank first, then prompt keywords, then the category
    (unless personal) and the type (unless a plain document).

    Args:
        title: Document title.
        prompt: Generation prompt.
        category: Document category value.
        doc_type: Document type value.

    Returns:
        At most five unique tags in insertion order.
    """
    # dict keys keep first-seen order
    tags = dict.fromkeys(extract_meaningful_words(title)[:TITLE_TAG_COUNT])
    tags.update(dict.fromkeys(
        extract_meaningful_words(prompt)[:PROMPT_TAG_COUNT]))

    if category != "personal":
        tags.setdefault(category)
    if doc_type != "document":
        tags.setdefault(doc_type)

    return list(tags)[:MAX_TAGS]
