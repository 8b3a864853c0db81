"""
minpq-specific exception classes.
"""

from .utils.misc import oneline


class ValueNotFoundError(KeyError):
    @classmethod
    def for_value(cls, value):
        return cls(f"Value {value!r} is not in the priority queue")


class DuplicateValueError(ValueError):
    @classmethod
    def for_value(cls, value):
        return cls(
            oneline(
                f"""
            Value {value!r} is already in the priority queue;
            use update_priority to change its priority"""
            )
        )


class HeapInvariantError(AssertionError):
    def __init__(self, message, slot):
        super(HeapInvariantError, self).__init__(message)
        self.slot = slot
