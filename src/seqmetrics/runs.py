import logging
from dataclasses import dataclass
from typing import TypeVar, List, Optional, Iterator, Sequence
from .utils import (
    DEFAULT_MIN_RUN_LENGTH, EqualityFn, InvalidArgumentError, Run,
    as_sequence, resolve_equality
)

T = TypeVar('T')

logger = logging.getLogger(__name__)


def _check_min_run_length(value: int):
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"min_run_length must be an integer, got {value!r}")
    if value < 1:
        raise InvalidArgumentError(f"min_run_length must be at least 1, got {value}")


@dataclass
class RunDetectorConfig:
    min_run_length: int = DEFAULT_MIN_RUN_LENGTH
    equals: Optional[EqualityFn] = None

    def __post_init__(self):
        _check_min_run_length(self.min_run_length)
        self.equals = resolve_equality(self.equals)


def _scan(seq: Sequence[T], equals: EqualityFn) -> Iterator[Run]:
    # explicit flag: any value, None included, may legitimately open a run
    has_previous = False
    previous = None
    run_start = 0
    run_length = 0
    for index, item in enumerate(seq):
        if has_previous and equals(previous, item):
            run_length += 1
        else:
            if has_previous:
                yield Run(run_start, run_length)
            run_start, run_length = index, 1
            has_previous = True
        previous = item
    if has_previous:
        yield Run(run_start, run_length)


class RunDetector:
    def __init__(self, config: Optional[RunDetectorConfig] = None):
        self.config = config or RunDetectorConfig()

    def scan(self, seq: Sequence[T]) -> Iterator[Run]:
        return _scan(as_sequence(seq, allow_none=False), self.config.equals)

    def find_runs(self, seq: Sequence[T]) -> List[Run]:
        seq = as_sequence(seq, allow_none=False)
        logger.debug("Scanning %d elements for runs of at least %d",
                     len(seq), self.config.min_run_length)
        return [run for run in _scan(seq, self.config.equals)
                if run.length >= self.config.min_run_length]

    def find(self, seq: Sequence[T]) -> List[int]:
        return [run.start for run in self.find_runs(seq)]


def find_repeated_runs(seq: Sequence[T], min_run_length: int = DEFAULT_MIN_RUN_LENGTH,
                       equals: Optional[EqualityFn] = None) -> List[int]:
    """Return the start indices of maximal runs holding at least
    ``min_run_length`` consecutive equal elements, in ascending order.

    Adjacent elements belong to the same run when ``equals(previous, item)``
    is true; the default is ``==``. Raises :class:`InvalidArgumentError` when
    ``seq`` is ``None`` or ``min_run_length`` is not an integer >= 1. An empty
    sequence yields ``[]``.
    """
    return RunDetector(RunDetectorConfig(min_run_length, equals)).find(seq)


def find_runs(seq: Sequence[T], min_run_length: int = DEFAULT_MIN_RUN_LENGTH,
              equals: Optional[EqualityFn] = None) -> List[Run]:
    return RunDetector(RunDetectorConfig(min_run_length, equals)).find_runs(seq)


def iter_runs(seq: Sequence[T], equals: Optional[EqualityFn] = None) -> Iterator[Run]:
    return RunDetector(RunDetectorConfig(1, equals)).scan(seq)
