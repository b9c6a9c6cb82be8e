from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence as _SequenceABC
from .types import *

# --- operator groups ---
from .extensions.core import _CoreOperations
from .extensions.terminal import _TerminalOperations
from .extensions.set import _SetOperations
from .extensions.grouping import _GroupingOperations
from .extensions.stats import _StatsOperations

# --- accessors ---
from .extensions.safe import SafeAccessor
from .extensions.conversion import ConversionAccessor

logger = logging.getLogger(__name__)

# --- abstract base class ---

class IQuery(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> Sequence[T]:
        """get the wrapped sequence"""
        pass

# --- base query implementation ---

class _BaseQuery(IQuery[T]):
    def __init__(self, data: Iterable[T], numeric_fast_path: bool = True):
        """wrap a sequence by reference. other iterables are materialized once."""
        if isinstance(data, _SequenceABC):
            self._data = data
        else:
            # generators and views would be exhausted or drift between calls
            logger.debug("materializing %s into a list", type(data).__name__)
            self._data = list(data)
        self._numeric_fast_path = numeric_fast_path

    def _get_data(self) -> Sequence[T]:
        return self._data

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __len__(self) -> int:
        return self.count()

    def __repr__(self) -> str:
        return f"Query(count={len(self._data)})"

# --- main query class ---

class Query(
    _BaseQuery[T],
    _CoreOperations[T],
    _TerminalOperations[T],
    _SetOperations[T],
    _GroupingOperations[T],
    _StatsOperations[T]
):
    """an eager, linq-inspired query wrapper over a fixed python sequence."""
    def __init__(self, data: Iterable[T], numeric_fast_path: bool = True):
        super().__init__(data, numeric_fast_path)
        # --- initialize accessors ---
        self.safe = SafeAccessor(self)
        self.to = ConversionAccessor(self)
