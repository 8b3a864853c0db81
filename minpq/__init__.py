from .indexed_heap import IndexedMinPQ  # noqa: F401
from .datatypes import HeapConfig  # noqa: F401
from .exception import (  # noqa: F401
    ValueNotFoundError,
    DuplicateValueError,
    HeapInvariantError,
)

__version__ = u"0.1.0"
