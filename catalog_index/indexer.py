"""
Inverted token index: token -> list of item positions.
"""
from typing import Dict, List, Sequence
from .utils import tokenize


def index_tokens(token_index: Dict[str, List[int]], text: str, item_index: int) -> None:
    """
    Register every distinct token of `text` against `item_index`.
    A token repeated inside the same text is posted once.
    """
    for token in dict.fromkeys(tokenize(text)):
        token_index.setdefault(token, []).append(item_index)


def intersect_indexes(lists: Sequence[Sequence[int]]) -> List[int]:
    """
    Intersect posting lists, smallest first, stopping as soon as nothing is left.
    Returns item positions in ascending order.
    """
    if not lists:
        return []

    ordered = sorted(lists, key=len)
    working = set(ordered[0])
    for postings in ordered[1:]:
        working &= set(postings)
        if not working:
            break

    return sorted(working)
