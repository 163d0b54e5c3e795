"""
Symbol Tree module.
The Morse alphabet stored as a flattened complete binary tree: walking to the
dot child of node i lands on 2*i+1, the dash child on 2*i+2. The table and its
reverse map are built once at import time and never mutated.
"""

import numpy as np
from typing import Dict, List

import config

TREE = config.DECODE_MAP

# Character -> node index. Sentinel nodes are not addressable.
CHAR_TO_INDEX: Dict[str, int] = {
    ch: i for i, ch in enumerate(TREE) if ch != config.SENTINEL
}


class NotFound(LookupError):
    """Raised when a character has no node in the tree."""

    def __init__(self, ch: str):
        super().__init__(f"Character {ch!r} is not in the Morse symbol tree")
        self.char = ch


def lookup_index(ch: str) -> int:
    """
    Return the node index holding `ch`.
    A space resolves to the placeholder node so that it survives a round trip.
    Case is not normalized here.
    """
    if ch == config.GROUP_SEPARATOR:
        ch = config.SPACE_PLACEHOLDER
    try:
        return CHAR_TO_INDEX[ch]
    except KeyError:
        raise NotFound(ch) from None


def lookup_char(index: int) -> str:
    """Return the character at `index`, or the sentinel if out of bounds or unused."""
    if 0 <= index < len(TREE):
        return TREE[index]
    return config.SENTINEL


def is_populated(index: int) -> bool:
    return lookup_char(index) != config.SENTINEL


def depth(index: int) -> int:
    """Number of edges between the root and `index` (= Morse tokens needed)."""
    return (index + 1).bit_length() - 1


# Depth of every node (root = 0). Used to size encoder output.
NODE_DEPTHS = np.array([depth(i) for i in range(len(TREE))], dtype=np.int64)


def alphabet() -> List[str]:
    """All mapped characters, in table (breadth-first) order."""
    return [ch for ch in TREE if ch != config.SENTINEL]
