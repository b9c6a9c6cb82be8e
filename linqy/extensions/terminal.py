from __future__ import annotations
import typing
import logging
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query

logger = logging.getLogger(__name__)

class _TerminalOperations(Generic[T]):
    def first(self: 'Query[T]') -> T:
        """get first element"""
        data = self._get_data()
        if len(data) == 0:
            logger.debug("first() called on an empty sequence")
            raise InvalidOperation("first")
        return data[0]

    def first_or_default(self: 'Query[T]', default_value: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        data = self._get_data()
        return data[0] if len(data) > 0 else default_value

    def count(self: 'Query[T]', predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return len(self._get_data())
        return sum(1 for x in self._get_data() if predicate(x))

    def any(self: 'Query[T]', predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition"""
        data = self._get_data()
        if predicate is None: return len(data) > 0
        return any(predicate(x) for x in data)

    def all(self: 'Query[T]', predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition. vacuously true when empty."""
        return all(predicate(x) for x in self._get_data())
