"""
Ordering of backend scores.

Scores that cannot be ordered against each other (either side is NaN)
compare as equal. Where NaN entries end up relative to their neighbours
therefore depends on the sort algorithm and is undefined.
"""

from functools import cmp_to_key

from rerank_proxy.infra.tei.schemas import TEIRankResult


def _compare_descending(a: TEIRankResult, b: TEIRankResult) -> int:
    if a.score > b.score:
        return -1
    if a.score < b.score:
        return 1
    return 0


def rank(results: list[TEIRankResult]) -> list[TEIRankResult]:
    """Return results sorted by score, highest first. Nothing is dropped."""
    return sorted(results, key=cmp_to_key(_compare_descending))
