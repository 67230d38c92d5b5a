"""
Heap-order checks for test suites.

``is_valid_order`` drains the heap and inspects the extraction trace, so the
heap is empty afterwards. ``is_heap_ordered`` and ``first_violation`` walk the
backing array instead and leave the heap as it was.
"""
from more_itertools import pairwise

from heaps import HeapPrioQueue, as_order


def _unwrap(heap, order=None):
	"""Return the backing list and the order for a heap, a priority queue or a plain list."""
	if isinstance(heap, HeapPrioQueue): heap = heap.heap
	if isinstance(heap, list): return heap, as_order(order)
	return heap.data, heap.order if order is None else as_order(order)

def drain(heap):
	"""Extract every element, highest priority first."""
	if isinstance(heap, HeapPrioQueue): heap = heap.heap
	return [heap.extract_top() for _ in range(len(heap))]

def is_valid_order(heap):
	_, order = _unwrap(heap)
	trace = drain(heap)
	# An element must never outrank the one extracted before it
	return not any(order.before(b, a) for a, b in pairwise(trace))

def first_violation(heap, order=None):
	data, order = _unwrap(heap, order)
	before = order.before
	for i in range(1, len(data)):
		if before(data[i], data[(i-1)>>1]): return i
	return None

def is_heap_ordered(heap, order=None): return first_violation(heap, order) is None
