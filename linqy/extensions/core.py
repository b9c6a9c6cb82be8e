from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query

class _CoreOperations(Generic[T]):
    def where(self: 'Query[T]', predicate: Predicate[T]) -> List[T]:
        """filter elements based on a predicate"""
        return [x for x in self._get_data() if predicate(x)]

    def select(self: 'Query[T]', selector: Selector[T, U]) -> List[U]:
        """project each element to a new form"""
        return [selector(x) for x in self._get_data()]

    def order_by(self: 'Query[T]', key_selector: KeySelector[T, K]) -> List[T]:
        """sort a copy of the elements ascending by a key"""
        # sorted() is stable and computes each key once
        return sorted(self._get_data(), key=key_selector)

    def order_by_descending(self: 'Query[T]', key_selector: KeySelector[T, K]) -> List[T]:
        """sort a copy of the elements descending by a key"""
        # reverse=True keeps equal keys in their original order
        return sorted(self._get_data(), key=key_selector, reverse=True)
