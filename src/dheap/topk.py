from typing import Any

from src.dheap.dheap import DHeap


def get_topk(heap: DHeap, k: int) -> list[Any]:
    """
    Function to get the K smallest elements from a heap.

    The heap itself is left untouched: its live elements are copied into a
    new heap with the same branching factor and key, which is then drained.

    Parameters
    ----------
    heap : DHeap
        A DHeap object
    k : int
        The number of 'top-K' elements to retrieve.

    Returns
    -------
    list[Any]
        The 'top-K' elements, smallest first.
    """
    if k <= 0:
        return []
    if heap.is_empty():
        return []

    items = [heap._get(i) for i in range(1, len(heap) + 1)]
    scratch = DHeap(
        items,
        branching_factor=heap.branching_factor,
        key=heap.key
    )
    return [scratch.delete_min() for _ in range(min(k, len(scratch)))]
