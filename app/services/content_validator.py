from typing import Iterable, List


def validate_content(content: str, banned: Iterable[str]) -> List[str]:
    """
    Return the banned words found in ``content``, each once, in first-seen order.

    Content is lower-cased; banned words are not.
    """
    banned_set = set(banned)
    found = {}
    for word in (content or "").lower().split():
        if word in banned_set:
            found.setdefault(word, None)
    return list(found)
