"""Query/candidate similarity scoring."""
from __future__ import annotations

from rapidfuzz.distance import JaroWinkler

# Scores under this are reported as 0.0 (see score()).
MIN_SIMILARITY = 0.5


def score(query: str, candidate: str, cutoff: float = MIN_SIMILARITY) -> float:
    """
    Case-insensitive Jaro-Winkler similarity of query and candidate, in [0, 1].

    Any pair sharing a single character within the match window already scores
    around 1/3, so similarities below ``cutoff`` collapse to 0.0. Pass
    ``cutoff=0`` for the raw metric.
    """
    return JaroWinkler.similarity(
        query.lower(),
        candidate.lower(),
        prefix_weight=0.1,
        score_cutoff=cutoff,
    )
