"""Tag overlap ranking."""

from collections.abc import Iterable


def rank_tags(
    reference_tags: Iterable[str] | None,
    candidate_tags: Iterable[str] | None,
) -> int:
    """Count how many of the candidate's tags also appear in the reference tags.

    This is a one-directional containment count, not the size of a set
    intersection: a tag repeated on the candidate is counted every time, and
    the score is not normalized by the number of tags.

    Args:
        reference_tags: Tags of the post we are finding related content for.
        candidate_tags: Tags of the post being scored.

    Returns:
        Non-negative score; 0 when either side is missing or empty.
    """
    if not reference_tags or not candidate_tags:
        return 0
    reference = set(reference_tags)
    return sum(1 for tag in candidate_tags if tag in reference)
