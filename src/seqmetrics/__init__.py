from seqmetrics.utils import (
    DEFAULT_MIN_RUN_LENGTH,
    EqualityFn,
    InvalidArgumentError,
    Run,
    TokenType,
    as_sequence,
    default_equals,
    get_tokenizer,
    resolve_equality,
    tokenize_chars,
    tokenize_lines,
    tokenize_words,
)
from seqmetrics.levenshtein import (
    BatchDistance,
    DistanceEngine,
    DistanceMatrix,
    DistanceResult,
    LevenshteinDistance,
    distance_matrix,
    edit_distance,
    similarity_ratio,
    string_distance,
)
from seqmetrics.runs import (
    RunDetector,
    RunDetectorConfig,
    find_repeated_runs,
    find_runs,
    iter_runs,
)

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_MIN_RUN_LENGTH",
    "EqualityFn",
    "InvalidArgumentError",
    "Run",
    "TokenType",
    "as_sequence",
    "default_equals",
    "get_tokenizer",
    "resolve_equality",
    "tokenize_chars",
    "tokenize_lines",
    "tokenize_words",
    "BatchDistance",
    "DistanceEngine",
    "DistanceMatrix",
    "DistanceResult",
    "LevenshteinDistance",
    "distance_matrix",
    "edit_distance",
    "similarity_ratio",
    "string_distance",
    "RunDetector",
    "RunDetectorConfig",
    "find_repeated_runs",
    "find_runs",
    "iter_runs",
]
