"""
Approximate string matching used by every scoring dimension.

Similarity is case-insensitive and based on normalized Levenshtein distance,
with a hard per-call threshold below which no credit is given.
"""

from talentmatch.utils.constants import CONTAINMENT_SIMILARITY, DEFAULT_FUZZY_THRESHOLD


def levenshtein_distance(source: str, target: str) -> int:
    """
    Edit distance between two strings (unit-cost insert, delete, substitute).

    Args:
        source: First string
        target: Second string

    Returns:
        Minimum number of single-character edits turning one into the other
    """
    rows, cols = len(source) + 1, len(target) + 1
    table = [[0] * cols for _ in range(rows)]

    for i in range(rows):
        table[i][0] = i
    for j in range(cols):
        table[0][j] = j

    for i in range(1, rows):
        for j in range(1, cols):
            if source[i - 1] == target[j - 1]:
                table[i][j] = table[i - 1][j - 1]
            else:
                table[i][j] = 1 + min(
                    table[i - 1][j - 1],  # substitute
                    table[i][j - 1],  # insert
                    table[i - 1][j],  # delete
                )

    return table[rows - 1][cols - 1]


def similarity(
    first: str,
    second: str,
    threshold: float = DEFAULT_FUZZY_THRESHOLD,
) -> float:
    """
    Score how alike two strings are, in [0, 1].

    Equal strings (ignoring case) score 1.0 and containment of one in the
    other scores 0.9. Otherwise the normalized edit distance is returned if
    it reaches ``threshold`` and 0 if it does not.

    Args:
        first: First string
        second: Second string
        threshold: Minimum normalized similarity that earns credit

    Returns:
        Similarity score
    """
    if not first or not second:
        return 0.0

    a = first.casefold()
    b = second.casefold()

    if a == b:
        return 1.0

    if a in b or b in a:
        return CONTAINMENT_SIMILARITY

    longer, shorter = (a, b) if len(a) >= len(b) else (b, a)
    distance = levenshtein_distance(longer, shorter)
    score = 1 - distance / len(longer)

    return score if score >= threshold else 0.0
