from __future__ import annotations
import typing
from collections.abc import Hashable
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query

class _SetOperations(Generic[T]):
    def distinct(self: 'Query[T]') -> List[T]:
        """
        return distinct elements by value equality, preserving order of first appearance.
        unhashable elements (dicts, lists) fall back to an equality scan.
        """
        data = self._get_data()
        try:
            # dicts are ordered, so fromkeys is an order-preserving unique filter
            return list(dict.fromkeys(data))
        except TypeError:
            pass

        seen_hashable = set()
        seen_unhashable = []
        result = []
        for item in data:
            if isinstance(item, Hashable):
                try:
                    if item in seen_hashable: continue
                    # an equal unhashable value may already be kept, e.g. {1} before frozenset({1})
                    if any(item == other for other in seen_unhashable): continue
                    seen_hashable.add(item)
                    result.append(item)
                    continue
                except TypeError:
                    # tuples holding unhashable members pass the isinstance check
                    pass
            if any(item == other for other in result): continue
            seen_unhashable.append(item)
            result.append(item)
        return result
