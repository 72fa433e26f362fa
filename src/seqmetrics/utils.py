import operator
import re
from collections.abc import Sequence
from enum import Enum
from typing import TypeVar, List, NamedTuple, Optional, Callable, Any

T = TypeVar('T')

EqualityFn = Callable[[Any, Any], bool]

default_equals: EqualityFn = operator.eq

DEFAULT_MIN_RUN_LENGTH = 2


class InvalidArgumentError(ValueError):
    pass


class Run(NamedTuple):
    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length

    def __repr__(self) -> str:
        return f"Run(start={self.start}, length={self.length})"


class TokenType(str, Enum):
    LINE = 'line'
    WORD = 'word'
    CHAR = 'char'


def resolve_equality(eq: Optional[EqualityFn]) -> EqualityFn:
    if eq is None:
        return default_equals
    if not callable(eq):
        raise InvalidArgumentError(f"Equality function must be callable, got {type(eq).__name__}")
    return eq


def as_sequence(value: Any, allow_none: bool = True) -> Sequence:
    """Normalise an input into something indexable.

    ``None`` becomes an empty list when ``allow_none`` is true and raises
    :class:`InvalidArgumentError` otherwise. Sequences are returned as-is;
    any other iterable is materialised into a list exactly once.
    """
    if value is None:
        if allow_none:
            return []
        raise InvalidArgumentError("Sequence must not be None")
    if isinstance(value, Sequence):
        return value
    try:
        return list(value)
    except TypeError:
        raise InvalidArgumentError(f"Expected a sequence, got {type(value).__name__}") from None


def tokenize_lines(text: str) -> List[str]:
    if not text:
        return []
    return text.split('\n')


def tokenize_words(text: str) -> List[str]:
    if not text:
        return []
    return re.findall(r'\S+|\s+', text)


def tokenize_chars(text: str) -> List[str]:
    if not text:
        return []
    return list(text)


def get_tokenizer(token_type: TokenType) -> Callable[[str], List[str]]:
    tokenizers = {
        TokenType.LINE: tokenize_lines,
        TokenType.WORD: tokenize_words,
        TokenType.CHAR: tokenize_chars
    }
    return tokenizers[token_type]
