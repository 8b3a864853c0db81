"""
Provides an indexed min-priority queue: a d-ary heap of (value, priority) pairs
together with a reverse index from each value to its slot in the heap.

The standard library's `heapq` can't do what we need here:

1. There's no way to find an element without scanning the whole heap, so checking
membership or looking up a priority is O(n).
2. Changing an element's priority means either an O(n) re-heapify or leaving stale
entries behind to be skipped later.
3. The branching factor is fixed at 2.

The implementation here keeps a dict from value to heap slot and updates it every
time a node moves, so membership and priority lookups are O(1) and priority
updates are a single O(log_d n) sift.
"""

import logging

from .datatypes import HeapConfig, Node
from .exception import DuplicateValueError, HeapInvariantError, ValueNotFoundError
from .utils.misc import oneline

logger = logging.getLogger(__name__)


class IndexedMinPQ:
    """
    A min-priority queue over hashable values, supporting O(1) membership tests
    and priority lookups and O(log_d n) priority updates.

    Each value can be present at most once. `pop` returns the (value, priority)
    pair with the *lowest* priority; for highest-first ordering, negate the
    priorities. Ties between equal priorities are broken arbitrarily.

    This class is not thread-safe.
    """

    def __init__(self, branching_factor=2, capacity_hint=0):
        config = HeapConfig(branching_factor, capacity_hint)
        self._config = config
        self._d = config.branching_factor
        # Slots at or past `_size` are always None; the list only grows when
        # every slot is occupied.
        self._nodes = [None] * config.capacity_hint
        self._size = 0
        self._slot_ixs_by_value = {}

        logger.debug(
            "Created priority queue with branching factor %d and %d reserved slots",
            config.branching_factor,
            config.capacity_hint,
        )

    @classmethod
    def from_config(cls, config):
        return cls(config.branching_factor, config.capacity_hint)

    @property
    def config(self):
        return self._config

    @property
    def branching_factor(self):
        return self._d

    def insert(self, value, priority):
        """
        Adds a value to the queue with the given priority.

        Raises DuplicateValueError if the value is already present; use
        `update_priority` or `push_or_update` to change an existing priority.
        """

        if value in self._slot_ixs_by_value:
            raise DuplicateValueError.for_value(value)

        node = Node(value, priority)
        ix = self._size
        if ix == len(self._nodes):
            self._nodes.append(node)
        else:
            self._nodes[ix] = node
        self._slot_ixs_by_value[value] = ix
        self._size += 1

        self._sift_up(ix)

    def pop(self):
        """
        Removes the lowest-priority value from the queue and returns it as a
        `(value, priority)` tuple, or returns None if the queue is empty.
        """

        if self._size == 0:
            return None

        root = self._nodes[0]
        del self._slot_ixs_by_value[root.value]
        self._detach_last_node(0)
        return root.as_tuple()

    def peek(self):
        """
        Returns the lowest-priority `(value, priority)` tuple without removing it,
        or None if the queue is empty.
        """

        if self._size == 0:
            return None
        return self._nodes[0].as_tuple()

    def remove(self, value):
        """
        Removes an arbitrary value from the queue and returns its priority.
        """

        if value not in self._slot_ixs_by_value:
            raise ValueNotFoundError.for_value(value)

        ix = self._slot_ixs_by_value.pop(value)
        removed_priority = self._nodes[ix].priority
        self._detach_last_node(ix)
        return removed_priority

    def contains(self, value):
        return value in self._slot_ixs_by_value

    def current_priority(self, value):
        """
        Returns a `(priority, found)` tuple. If the value isn't present, returns
        `(None, False)`.
        """

        ix = self._slot_ixs_by_value.get(value)
        if ix is None:
            return None, False
        return self._nodes[ix].priority, True

    def update_priority(self, value, priority):
        """
        Changes the priority of a value already in the queue.

        Raises ValueNotFoundError if the value isn't present, in which case the
        queue is left unchanged.
        """

        if value not in self._slot_ixs_by_value:
            raise ValueNotFoundError.for_value(value)

        ix = self._slot_ixs_by_value[value]
        node = self._nodes[ix]
        old_priority = node.priority
        node.priority = priority
        self._restore_order_at(ix, old_priority)

    def push_or_update(self, value, priority):
        """
        Inserts the value if it's absent; otherwise updates its priority.
        """

        if value in self._slot_ixs_by_value:
            self.update_priority(value, priority)
        else:
            self.insert(value, priority)

    def empty(self):
        return self._size == 0

    def size(self):
        return self._size

    def __len__(self):
        return self._size

    def __contains__(self, value):
        return self.contains(value)

    def __repr__(self):
        return f"IndexedMinPQ(size={self._size}, branching_factor={self._d})"

    def check_invariants(self):
        """
        Verifies that the heap is correctly ordered, densely packed, and in sync
        with its value index. Raises HeapInvariantError describing the first
        problem found. This takes O(n) time, so it's meant for tests and
        debugging.
        """

        nodes = self._nodes
        for ix in range(len(nodes)):
            node = nodes[ix]
            if ix >= self._size:
                if node is not None:
                    self._fail(f"Slot {ix} is past the end but still holds {node!r}", ix)
                continue

            if node is None:
                self._fail(f"Slot {ix} is empty but the heap has size {self._size}", ix)

            indexed_ix = self._slot_ixs_by_value.get(node.value)
            if indexed_ix != ix:
                self._fail(
                    oneline(
                        f"""
                    Value {node.value!r} is in slot {ix}
                    but is indexed at slot {indexed_ix!r}"""
                    ),
                    ix,
                )

            if ix > 0:
                parent = nodes[self._parent_ix(ix)]
                if node.priority < parent.priority:
                    self._fail(
                        oneline(
                            f"""
                        Slot {ix} has priority {node.priority!r},
                        lower than its parent's priority {parent.priority!r}"""
                        ),
                        ix,
                    )

        if len(self._slot_ixs_by_value) != self._size:
            self._fail(
                oneline(
                    f"""
                Index has {len(self._slot_ixs_by_value)} entries
                but the heap has size {self._size}"""
                ),
                None,
            )

    def _fail(self, message, slot):
        logger.debug("Heap invariant violated: %s", message)
        raise HeapInvariantError(message, slot)

    def _parent_ix(self, ix):
        return (ix - 1) // self._d

    def _swap(self, ix_a, ix_b):
        nodes = self._nodes
        nodes[ix_a], nodes[ix_b] = nodes[ix_b], nodes[ix_a]
        self._slot_ixs_by_value[nodes[ix_a].value] = ix_a
        self._slot_ixs_by_value[nodes[ix_b].value] = ix_b

    def _detach_last_node(self, hole_ix):
        """
        Fills the slot at `hole_ix`, whose node has already been dropped from the
        index, with the last node in the heap, then shrinks the heap by one.
        """

        vacated_priority = self._nodes[hole_ix].priority
        self._size -= 1
        last_ix = self._size
        last_node = self._nodes[last_ix]
        self._nodes[last_ix] = None
        if hole_ix == last_ix:
            return

        self._nodes[hole_ix] = last_node
        self._slot_ixs_by_value[last_node.value] = hole_ix
        self._restore_order_at(hole_ix, vacated_priority)

    def _restore_order_at(self, ix, old_priority):
        # Only one node changed, so order can only be broken on one side of it.
        if old_priority < self._nodes[ix].priority:
            self._sift_down(ix)
        else:
            self._sift_up(ix)

    def _sift_up(self, ix):
        nodes = self._nodes
        while ix > 0:
            parent_ix = self._parent_ix(ix)
            if not nodes[ix].priority < nodes[parent_ix].priority:
                break
            self._swap(ix, parent_ix)
            ix = parent_ix

    def _sift_down(self, ix):
        nodes = self._nodes
        d = self._d
        size = self._size
        while True:
            first_child_ix = ix * d + 1
            if first_child_ix >= size:
                break

            min_child_ix = first_child_ix
            for child_ix in range(first_child_ix + 1, min(first_child_ix + d, size)):
                if nodes[child_ix].priority < nodes[min_child_ix].priority:
                    min_child_ix = child_ix

            if not nodes[min_child_ix].priority < nodes[ix].priority:
                break
            self._swap(ix, min_child_ix)
            ix = min_child_ix
