import typing
from .types import *

if typing.TYPE_CHECKING:
    from .query import Query

def from_sequence(data: Iterable[T], numeric_fast_path: bool = True) -> 'Query[T]':
    """wrap a sequence in a query without copying it"""
    from .query import Query
    return Query(data, numeric_fast_path=numeric_fast_path)

def from_range(start: int, count: int) -> 'Query[int]':
    """create query over a range"""
    from .query import Query
    return Query(range(start, start + count))

def repeat(item: T, count: int) -> 'Query[T]':
    """create query with repeated item"""
    from .query import Query
    return Query([item] * count)

def empty() -> 'Query[Any]':
    """create empty query"""
    from .query import Query
    return Query([])

# --- aliases ---
query = from_sequence
Q = from_sequence
