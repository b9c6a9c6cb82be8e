r"""
'    .__  .__
'    |  | |__| ____   ______ ___.__.
'    |  | |  |/    \ / ____/<   |  |
'    |  |_|  |   |  < <_|  | \___  |
'    |____/__|___|  /\__   | / ____|
'                 \/    |__| \/
"""

import logging

# expose the main class
from .query import Query

# expose the factory functions
from .factories import (
    from_sequence,
    from_range,
    repeat,
    empty,
    query,
    Q
)

# expose the error and result types
from .types import (
    InvalidOperation,
    Ok,
    Err,
    Result
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

# define what `import *` does
__all__ = [
    "Query",
    "from_sequence",
    "from_range",
    "repeat",
    "empty",
    "query",
    "Q",
    "InvalidOperation",
    "Ok",
    "Err",
    "Result"
]
