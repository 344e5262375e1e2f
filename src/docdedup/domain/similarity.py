"""Positional hash similarity.

Compares two hash strings character by character over their overlapping
length. This measures how alike the hash texts are, not how alike the
documents are: unrelated content whose hashes share leading digits scores
high.
"""


def positional_similarity(hash_a: str, hash_b: str) -> int:
    """Percentage (0-100) of overlapping positions where the characters agree.

    Rounds half up. Returns 0 when either hash is empty.
    """
    overlap = min(len(hash_a), len(hash_b))
    if overlap == 0:
        return 0
    matching = sum(1 for i in range(overlap) if hash_a[i] == hash_b[i])
    # integer half-up rounding of 100 * matching / overlap
    return (200 * matching + overlap) // (2 * overlap)
