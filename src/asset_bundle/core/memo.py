"""Compute-once cache cell for lazily resolved values."""

from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class Memo(Generic[T]):
    """Holds a value that is computed on first successful access.

    A compute function returning ``None`` leaves the cell unset, so the
    next ``get`` runs it again. The first non-None result is kept for the
    lifetime of the cell.

    Example:
        >>> cell: Memo[str] = Memo()
        >>> cell.get(lambda: "abc")
        'abc'
        >>> cell.get(lambda: "other")
        'abc'
    """

    __slots__ = ("_value", "attempts")

    def __init__(self) -> None:
        self._value: T | None = None
        self.attempts = 0

    @property
    def is_set(self) -> bool:
        return self._value is not None

    @property
    def attempted(self) -> bool:
        """Whether computation ran at least once, successfully or not."""
        return self.attempts > 0

    def get(self, compute: Callable[[], T | None]) -> T | None:
        if self._value is None:
            self.attempts += 1
            self._value = compute()
        return self._value

    def peek(self) -> T | None:
        return self._value
