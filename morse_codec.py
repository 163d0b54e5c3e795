"""
Morse Codec module.
Encodes text by walking each character's node up to the root of the symbol
tree, and decodes by walking down from the root following dot/dash tokens.
"""

from typing import Dict, List

import config
import symbol_tree


class UnsupportedCharacter(ValueError):
    """Raised by encode when a character has no Morse code."""

    def __init__(self, ch: str, position: int = -1):
        msg = f"Unsupported character {ch!r}"
        if position >= 0:
            msg += f" at position {position}"
        super().__init__(msg)
        self.char = ch
        self.position = position


def normalize_char(ch: str) -> str:
    # 'ß'.upper() == 'SS' のように複数文字になる場合はそのまま
    upper = ch.upper()
    return upper if len(upper) == 1 else ch


def _node_index(ch: str, position: int = -1) -> int:
    try:
        return symbol_tree.lookup_index(normalize_char(ch))
    except symbol_tree.NotFound as e:
        raise UnsupportedCharacter(ch, position) from e


def _path_from_index(index: int) -> str:
    tokens: List[str] = []
    node = index
    while node != 0:
        # Odd nodes are dot children (2*i+1), even nodes are dash children.
        bit = node % 2
        tokens.append(config.DOT if bit == 1 else config.DASH)
        node = (node - 1) // 2
    # Leaf-to-root -> root-to-leaf
    tokens.reverse()
    return "".join(tokens)


def encode_char(ch: str) -> str:
    """Return the Morse group for a single character."""
    return _path_from_index(_node_index(ch))


def encoded_length(text: str) -> int:
    """
    Size of encode(text): the depth of every character's node plus one
    separator between consecutive groups.
    """
    if not text:
        return 0
    indices = [_node_index(ch, i) for i, ch in enumerate(text)]
    return int(symbol_tree.NODE_DEPTHS[indices].sum()) + len(indices) - 1


def encode(text: str) -> str:
    """
    Encode text into Morse groups joined by single spaces.

    Raises:
        UnsupportedCharacter: if any character is missing from the tree.
            Nothing is returned for the rest of the input.
    """
    groups = [_path_from_index(_node_index(ch, i)) for i, ch in enumerate(text)]
    return config.GROUP_SEPARATOR.join(groups)


def decode_group(group: str) -> str:
    """
    Decode one group of tokens.
    Unknown, over-long or malformed groups decode to a space.
    """
    limit = len(symbol_tree.TREE)
    node = 1
    for token in group:
        if token not in (config.DOT, config.DASH):
            return config.UNKNOWN_CHAR
        # Past the last level the node can only grow, so stop tracking it.
        if node > limit:
            continue
        node = node * 2 + (1 if token == config.DASH else 0)

    ch = symbol_tree.lookup_char(node - 1)
    if ch in (config.SENTINEL, config.SPACE_PLACEHOLDER):
        return config.UNKNOWN_CHAR
    return ch


def decode(tokens: str) -> str:
    """
    Decode space separated Morse groups into text.
    Any run of whitespace counts as a single separator.
    """
    return "".join(decode_group(group) for group in tokens.split())


# Character -> Morse code for every symbol in the tree
MORSE_DICT: Dict[str, str] = {
    ch: _path_from_index(symbol_tree.lookup_index(ch)) for ch in symbol_tree.alphabet()
}
