from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Sequence, Set
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Number = Union[int, float]
NumericSelector = Callable[[T], Number]


class InvalidOperation(ValueError):
    """raised when an operator that needs at least one element runs on an empty sequence"""

    def __init__(self, operation: str):
        super().__init__(f"{operation}: sequence contains no elements")
        self.operation = operation


class Ok(Generic[T]):
    """successful outcome of a result-typed operator"""

    is_ok = True
    is_err = False

    def __init__(self, value: T):
        self.value = value

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Ok) and self.value == other.value

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


class Err:
    """failed outcome of a result-typed operator, carrying the error instead of raising it"""

    is_ok = False
    is_err = True

    def __init__(self, error: InvalidOperation):
        self.error = error

    def unwrap(self):
        raise self.error

    def unwrap_or(self, default: T) -> T:
        return default

    def __eq__(self, other: Any) -> bool:
        # errors compare by kind and message, not identity
        return (isinstance(other, Err)
                and type(self.error) is type(other.error)
                and str(self.error) == str(other.error))

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result = Union[Ok[T], Err]
