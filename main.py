import logging

import numpy as np

from src import DHeap

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
logger = logging.getLogger(__name__)

NUM_ITEMS = 10000


def check_drain(heap: DHeap, expected: list[int]) -> int:
    """Drain ``heap`` and count positions that differ from ``expected``."""
    errors = 0
    for want in expected:
        got = heap.delete_min()
        if got != want:
            logger.error("Oops! expected %d, got %d", want, got)
            errors += 1
    return errors


# Classic sequence: 37, 74, ... stepping by 37 modulo NUM_ITEMS until 0
print("Inserting the 37-step sequence into a binary heap...")
heap = DHeap()
i = 37
while i != 0:
    heap.insert(i)
    i = (i + 37) % NUM_ITEMS
print(f"Heap size: {len(heap)}, capacity: {heap.capacity}")
errors = check_drain(heap, list(range(1, NUM_ITEMS)))
print(f"Is empty: {heap.is_empty()}, errors: {errors}")

# Random permutation drained from heaps of several arities
rng = np.random.default_rng(37)
values = (rng.permutation(NUM_ITEMS) + 1).tolist()
for d in (2, 3, 5, 10):
    heap = DHeap(branching_factor=d)
    for v in values:
        heap.insert(v)
    errors = check_drain(heap, list(range(1, NUM_ITEMS + 1)))
    print(f"d={d}: drained {NUM_ITEMS} items, errors: {errors}")
