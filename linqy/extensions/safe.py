from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query

class SafeAccessor(Generic[T]):
    """
    result-typed versions of the operators that need a non-empty sequence.
    an empty sequence gives Err(InvalidOperation) instead of raising; anything
    raised by a selector still propagates.
    """
    def __init__(self, query_instance: 'Query[T]'):
        self._query = query_instance

    def _capture(self, operation: Callable[[], U]) -> Result[U]:
        try: return Ok(operation())
        except InvalidOperation as e: return Err(e)

    def first(self) -> Result[T]:
        """first element as Ok, or Err when empty"""
        return self._capture(self._query.first)

    def average(self, selector: Optional[NumericSelector[T]] = None) -> Result[float]:
        """mean as Ok, or Err when empty"""
        return self._capture(lambda: self._query.average(selector))

    def max(self, selector: Optional[NumericSelector[T]] = None) -> Result[Number]:
        """maximum as Ok, or Err when empty"""
        return self._capture(lambda: self._query.max(selector))

    def min(self, selector: Optional[NumericSelector[T]] = None) -> Result[Number]:
        """minimum as Ok, or Err when empty"""
        return self._capture(lambda: self._query.min(selector))
