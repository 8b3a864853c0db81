class SimpleMinPQ:
    """
    An alternative implementation of IndexedMinPQ which is simpler but less
    efficient. Used as an oracle in randomized tests.
    """

    def __init__(self):
        self._priorities_by_value = {}

    def insert(self, value, priority):
        assert value not in self._priorities_by_value
        self._priorities_by_value[value] = priority

    def update_priority(self, value, priority):
        assert value in self._priorities_by_value
        self._priorities_by_value[value] = priority

    def remove(self, value):
        return self._priorities_by_value.pop(value)

    def min_priority(self):
        return min(self._priorities_by_value.values())

    def priority(self, value):
        return self._priorities_by_value[value]

    def values(self):
        return list(self._priorities_by_value.keys())

    def __len__(self):
        return len(self._priorities_by_value)

    def _get_random_value(self, random):
        if len(self) == 0:
            return None
        return random.choice(sorted(self._priorities_by_value.keys()))


def assert_matches_oracle(queue, oracle):
    """
    Checks the queue's structural invariants, then checks that it holds exactly
    the values and priorities the oracle holds.
    """

    queue.check_invariants()
    assert queue.size() == len(oracle)
    assert queue.empty() == (len(oracle) == 0)
    for value in oracle.values():
        assert queue.contains(value)
        assert queue.current_priority(value) == (oracle.priority(value), True)


def drain(queue):
    "Pops every element from a queue and returns them as a list of pairs."
    pairs = []
    while not queue.empty():
        pairs.append(queue.pop())
    return pairs
