from __future__ import annotations
import typing
import logging
import math
import numpy as np
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query

logger = logging.getLogger(__name__)

_IDENTITY = lambda item: item

class _StatsOperations(Generic[T]):
    def _get_values(self: 'Query[T]', selector: Optional[NumericSelector[T]]) -> List[Number]:
        """helper to extract numeric values in sequence order."""
        sel = selector if selector else _IDENTITY
        return [sel(x) for x in self._get_data()]

    def _require_values(self: 'Query[T]', operation: str,
                        selector: Optional[NumericSelector[T]]) -> List[Number]:
        """like _get_values, but an empty sequence is an invalid operation."""
        if len(self._get_data()) == 0:
            logger.debug("%s() called on an empty sequence", operation)
            raise InvalidOperation(operation)
        return self._get_values(selector)

    def _try_numpy(self: 'Query[T]', values: List[Number], operation: str) -> Optional[np.ndarray]:
        """
        float-only numpy fast path. ints stay on the builtins so big values never
        wrap around in int64, and nan stays on the builtins because np.max/np.min
        propagate it where max/min do not.
        """
        if not self._numeric_fast_path or not values:
            return None
        if not all(isinstance(v, float) and not math.isnan(v) for v in values):
            return None
        try:
            arr = np.asarray(values, dtype=np.float64)
        except (TypeError, ValueError):
            logger.debug("numpy fast path abandoned for %s()", operation)
            return None
        logger.debug("numpy fast path used for %s() over %d values", operation, len(values))
        return arr

    def sum(self: 'Query[T]', selector: Optional[NumericSelector[T]] = None) -> Number:
        """calc sum. 0 for an empty sequence."""
        values = self._get_values(selector)
        arr = self._try_numpy(values, 'sum')
        if arr is not None: return np.sum(arr).item()
        return sum(values)

    def average(self: 'Query[T]', selector: Optional[NumericSelector[T]] = None) -> float:
        """calc arithmetic mean"""
        values = self._require_values('average', selector)
        arr = self._try_numpy(values, 'average')
        if arr is not None: return np.mean(arr).item()
        return sum(values) / len(values)

    def max(self: 'Query[T]', selector: Optional[NumericSelector[T]] = None) -> Number:
        """find maximum selected value"""
        values = self._require_values('max', selector)
        arr = self._try_numpy(values, 'max')
        if arr is not None: return np.max(arr).item()
        return max(values)

    def min(self: 'Query[T]', selector: Optional[NumericSelector[T]] = None) -> Number:
        """find minimum selected value"""
        values = self._require_values('min', selector)
        arr = self._try_numpy(values, 'min')
        if arr is not None: return np.min(arr).item()
        return min(values)
