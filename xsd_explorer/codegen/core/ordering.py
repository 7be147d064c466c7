"""
Deterministic ordering of unordered name/value mappings.

Generated files must be byte-identical across runs, so anything emitted from
a dict (union members, enum maps) goes through :func:`to_sorted_pairs`.
"""

from typing import List, Mapping, Tuple


def to_sorted_pairs(mapping: Mapping[str, str]) -> List[Tuple[str, str]]:
    """
    Sort a mapping into (key, value) pairs.

    Pairs are ordered by value ascending; pairs sharing a value are ordered
    by key descending.

    Example:
        >>> to_sorted_pairs({"b": "2", "a": "2", "c": "1"})
        [('c', '1'), ('b', '2'), ('a', '2')]
    """
    pairs = sorted(mapping.items(), key=lambda pair: pair[0], reverse=True)
    # Stable second pass keeps the key-descending order inside equal values
    pairs.sort(key=lambda pair: pair[1])
    return pairs
