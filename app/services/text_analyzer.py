import re
from collections import Counter
from typing import Iterable, List

TOP_WORDS_LIMIT = 3

_NON_WORD = re.compile(r"[^\w\s]")


def find_top_words(text: str, banned: Iterable[str], limit: int = TOP_WORDS_LIMIT) -> List[str]:
    """
    Return the most frequent words of ``text``, skipping banned ones.

    Text is lower-cased and stripped of punctuation before splitting. The
    banned words are compared as given, so only lower-case entries can match.
    Equal counts keep the order in which the words first appear.
    """
    banned_set = set(banned)
    words = _NON_WORD.sub("", (text or "").lower()).split()
    counts = Counter(word for word in words if word not in banned_set)
    return [word for word, _ in counts.most_common(limit)]
