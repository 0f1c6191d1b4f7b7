"""
Root extraction and palatalization (consonant mutation) for Locit.

Before some endings the final consonant or consonant cluster of a root
mutates: apl-is -> apļ-a, brie-dis -> brie-ža, zib-snis -> zib-šņa.
"""

from typing import List, Tuple

# ============================================================================
# Palatalization Rules
# ============================================================================

# Ordered (ending, replacement) pairs; the first matching ending wins, so
# clusters must stay ahead of their single-letter tails.
PALATALIZATION_RULES: List[Tuple[str, str]] = [
    ('sn', 'šņ'),
    ('zn', 'žņ'),
    ('sl', 'šļ'),
    ('zl', 'žļ'),
    ('ln', 'ļņ'),
    ('st', 'šķ'),
    ('ll', 'ļļ'),
    ('nn', 'ņņ'),
    ('l', 'ļ'),
    ('r', 'ŗ'),  # only with use_palatalized_r
    ('n', 'ņ'),
    ('b', 'bj'),
    ('m', 'mj'),
    ('p', 'pj'),
    ('v', 'vj'),
    ('d', 'ž'),
    ('z', 'ž'),
    ('c', 'č'),
    ('k', 'ķ'),
    ('g', 'ģ'),
    ('t', 'š'),
    ('s', 'š'),
]


def extract_root(base: str, suffix_len: int) -> str:
    """
    Strip the declension suffix from a base form.

    Args:
        base: Nominative singular, lowercase.
        suffix_len: Number of trailing characters to remove.

    Returns:
        The root.
    """
    if suffix_len <= 0:
        return base
    return base[:len(base) - suffix_len]


def palatalize(root: str, use_palatalized_r: bool = False) -> str:
    """
    Palatalize the end of a root.

    Args:
        root: Root of a noun.
        use_palatalized_r: Enable the dialectal r -> ŗ rule.

    Returns:
        Root with its final consonant (cluster) mutated, or the root
        unchanged if no rule matches.

    Example:
        >>> palatalize("zibsn")
        'zibšņ'
        >>> palatalize("lāc")
        'lāč'
    """
    for ending, replacement in PALATALIZATION_RULES:
        if ending == 'r' and not use_palatalized_r:
            continue
        if root.endswith(ending):
            return root[:-len(ending)] + replacement
    return root
