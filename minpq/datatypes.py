"""
Contains various data structures used by the priority queue.
"""

import attr

from .utils.misc import oneline


@attr.s(frozen=True)
class HeapConfig:
    """
    Describes the construction-time parameters of an IndexedMinPQ. Neither
    parameter can change over the lifetime of a queue.

    Attributes
    ----------
    branching_factor: int
        The number of children each heap node can have. 2 gives a classic binary
        heap; larger values make the tree shallower, which speeds up inserts and
        priority updates but makes each level of a pop compare more children.
    capacity_hint: int
        The number of slots to reserve up front. This only affects performance,
        never behavior, and may be zero.
    """

    branching_factor = attr.ib(default=2)
    capacity_hint = attr.ib(default=0)

    @branching_factor.validator
    def _check_branching_factor(self, attribute, value):
        _check_int(attribute.name, value)
        if value < 2:
            raise ValueError(
                oneline(
                    f"""
                {attribute.name} must be at least 2;
                got {value!r}"""
                )
            )

    @capacity_hint.validator
    def _check_capacity_hint(self, attribute, value):
        _check_int(attribute.name, value)
        if value < 0:
            raise ValueError(f"{attribute.name} must be non-negative; got {value!r}")

    def evolve(self, **kwargs):
        return attr.evolve(self, **kwargs)


def _check_int(name, value):
    # bool is a subclass of int, but True is never a sensible heap parameter.
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int; got {type(value).__name__}")


@attr.s(slots=True)
class Node:
    """
    One occupied slot of the heap: a caller-supplied value and its current
    priority. The priority is overwritten in place when it's updated.
    """

    value = attr.ib()
    priority = attr.ib()

    def as_tuple(self):
        return (self.value, self.priority)
