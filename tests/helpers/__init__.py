from helpers.naive_distance import (
    NaiveLevenshtein,
    NaiveRunFinder,
    naive_edit_distance,
    naive_runs,
    naive_repeated_starts,
)


__all__ = [
    "NaiveLevenshtein",
    "NaiveRunFinder",
    "naive_edit_distance",
    "naive_runs",
    "naive_repeated_starts",
]
