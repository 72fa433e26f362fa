import logging
from dataclasses import dataclass
from typing import TypeVar, List, Optional, Sequence, Tuple
from .utils import EqualityFn, TokenType, as_sequence, get_tokenizer, resolve_equality

T = TypeVar('T')

logger = logging.getLogger(__name__)


class DistanceMatrix:
    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        self.cells: List[int] = [0] * (rows * cols)

    def __getitem__(self, index: Tuple[int, int]) -> int:
        i, j = index
        return self.cells[self._offset(i, j)]

    def __setitem__(self, index: Tuple[int, int], value: int):
        i, j = index
        self.cells[self._offset(i, j)] = value

    def _offset(self, i: int, j: int) -> int:
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexError(f"Cell ({i}, {j}) outside {self.rows}x{self.cols} matrix")
        return i * self.cols + j

    def row(self, i: int) -> List[int]:
        start = self._offset(i, 0)
        return self.cells[start:start + self.cols]

    @property
    def distance(self) -> int:
        return self.cells[-1]

    def __repr__(self) -> str:
        return f"DistanceMatrix({self.rows}x{self.cols}, distance={self.distance})"


@dataclass
class DistanceResult:
    original_length: int
    modified_length: int
    edit_distance: int
    similarity_ratio: float

    @classmethod
    def from_distance(cls, distance: int, orig_len: int, mod_len: int) -> 'DistanceResult':
        longest = max(orig_len, mod_len)
        sim_ratio = 1.0 - distance / longest if longest > 0 else 1.0
        return cls(
            original_length=orig_len,
            modified_length=mod_len,
            edit_distance=distance,
            similarity_ratio=sim_ratio
        )


def _flipped(eq: EqualityFn) -> EqualityFn:
    return lambda x, y: eq(y, x)


class LevenshteinDistance:
    def __init__(self, original: Optional[Sequence[T]], modified: Optional[Sequence[T]],
                 eq: Optional[EqualityFn] = None):
        self.original = as_sequence(original)
        self.modified = as_sequence(modified)
        self.eq = resolve_equality(eq)
        self.n = len(self.original)
        self.m = len(self.modified)
        self._edit_distance: Optional[int] = None

    def compute(self) -> int:
        if self._edit_distance is None:
            logger.debug("Computing edit distance for %d x %d elements", self.n, self.m)
            self._edit_distance = self._rolling_distance()
        return self._edit_distance

    def _rolling_distance(self) -> int:
        if self.n == 0:
            return self.m
        if self.m == 0:
            return self.n
        # the shorter sequence indexes the rows kept in memory
        outer, inner, eq = self.original, self.modified, self.eq
        if self.m > self.n:
            outer, inner, eq = self.modified, self.original, _flipped(self.eq)
        width = len(inner)
        prev = list(range(width + 1))
        curr = [0] * (width + 1)
        for i in range(1, len(outer) + 1):
            curr[0] = i
            item = outer[i - 1]
            for j in range(1, width + 1):
                if eq(item, inner[j - 1]):
                    curr[j] = prev[j - 1]
                else:
                    curr[j] = 1 + min(prev[j], curr[j - 1], prev[j - 1])
            prev, curr = curr, prev
        return prev[width]

    def compute_matrix(self) -> DistanceMatrix:
        logger.debug("Filling %d x %d distance matrix", self.n + 1, self.m + 1)
        matrix = DistanceMatrix(self.n + 1, self.m + 1)
        cells, cols = matrix.cells, matrix.cols
        for i in range(self.n + 1):
            cells[i * cols] = i
        for j in range(1, self.m + 1):
            cells[j] = j
        for i in range(1, self.n + 1):
            row, above = i * cols, (i - 1) * cols
            item = self.original[i - 1]
            for j in range(1, self.m + 1):
                if self.eq(item, self.modified[j - 1]):
                    cells[row + j] = cells[above + j - 1]
                else:
                    cells[row + j] = 1 + min(cells[above + j], cells[row + j - 1], cells[above + j - 1])
        self._edit_distance = matrix.distance
        return matrix

    def get_edit_distance(self) -> int:
        return self.compute()

    def get_result(self) -> DistanceResult:
        return DistanceResult.from_distance(self.compute(), self.n, self.m)


def edit_distance(original: Optional[Sequence[T]], modified: Optional[Sequence[T]],
                  eq: Optional[EqualityFn] = None) -> int:
    """Return the Levenshtein distance between two sequences.

    ``None`` is accepted for either argument and treated as an empty
    sequence, so ``edit_distance(None, b) == len(b)``. ``eq`` is called as
    ``eq(item_of_original, item_of_modified)`` and defaults to ``==``.
    """
    return LevenshteinDistance(original, modified, eq).compute()


def distance_matrix(original: Optional[Sequence[T]], modified: Optional[Sequence[T]],
                    eq: Optional[EqualityFn] = None) -> DistanceMatrix:
    return LevenshteinDistance(original, modified, eq).compute_matrix()


def string_distance(s: Optional[str], t: Optional[str]) -> int:
    """Character-level edit distance; ``None`` counts as the empty string."""
    return LevenshteinDistance(s or '', t or '').compute()


def similarity_ratio(original: Optional[Sequence[T]], modified: Optional[Sequence[T]],
                     eq: Optional[EqualityFn] = None) -> float:
    return LevenshteinDistance(original, modified, eq).get_result().similarity_ratio


class DistanceEngine:
    def __init__(self, use_full_matrix: bool = False, eq: Optional[EqualityFn] = None):
        self.use_full_matrix = use_full_matrix
        self.eq = eq

    def distance(self, original: Optional[Sequence[T]], modified: Optional[Sequence[T]]) -> int:
        calculator = LevenshteinDistance(original, modified, self.eq)
        if self.use_full_matrix:
            return calculator.compute_matrix().distance
        return calculator.compute()

    def distance_strings(self, original: Optional[str], modified: Optional[str],
                         token_type: TokenType = TokenType.CHAR) -> int:
        tokenize = get_tokenizer(token_type)
        return self.distance(tokenize(original), tokenize(modified))

    def similarity(self, original: Optional[Sequence[T]], modified: Optional[Sequence[T]]) -> float:
        original, modified = as_sequence(original), as_sequence(modified)
        distance = self.distance(original, modified)
        return DistanceResult.from_distance(distance, len(original), len(modified)).similarity_ratio


class BatchDistance:
    def __init__(self, engine: Optional[DistanceEngine] = None):
        self.engine = engine or DistanceEngine()

    def distance_multiple(self, pairs: List[Tuple[Sequence[T], Sequence[T]]]) -> List[int]:
        results = []
        for orig, mod in pairs:
            results.append(self.engine.distance(orig, mod))
        return results

    def distance_all_against_base(self, base: Sequence[T], targets: List[Sequence[T]]) -> List[int]:
        results = []
        for target in targets:
            results.append(self.engine.distance(base, target))
        return results

    def closest(self, base: Sequence[T], candidates: List[Sequence[T]]) -> Optional[int]:
        best_index: Optional[int] = None
        best_distance: Optional[int] = None
        for index, candidate in enumerate(candidates):
            distance = self.engine.distance(base, candidate)
            if best_distance is None or distance < best_distance:
                best_index, best_distance = index, distance
        return best_index
