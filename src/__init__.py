from src.dheap.dheap import DHeap
from src.dheap.errors import DHeapError, InvalidArgumentError, UnderflowError
from src.dheap.topk import get_topk
