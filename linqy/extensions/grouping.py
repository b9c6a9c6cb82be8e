from __future__ import annotations
import typing
from collections import defaultdict
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query

class _GroupingOperations(Generic[T]):
    def group_by(self: 'Query[T]', key_selector: KeySelector[T, K]) -> Dict[K, List[T]]:
        """
        group elements by a key.
        keys appear in first-encountered order and each group keeps the original
        element order. keys must be hashable.
        """
        groups = defaultdict(list)
        for item in self._get_data():
            groups[key_selector(item)].append(item)
        return dict(groups)
