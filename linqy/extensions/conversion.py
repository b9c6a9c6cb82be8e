from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query

class ConversionAccessor(Generic[T]):
    def __init__(self, query_instance: 'Query[T]'):
        self._query = query_instance

    def list(self) -> List[T]:
        """convert to a new list. the wrapped sequence is never handed out."""
        return list(self._query._get_data())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._query._get_data())

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary. later elements win on duplicate keys."""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._query._get_data()}

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._query._get_data())

    def series(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list())

    def frame(self) -> pd.DataFrame:
        """convert to pandas dataframe, one row per element"""
        return pd.DataFrame(self.list())
