from operator import lt, gt, itemgetter

if 1: # Errors
	class HeapError(Exception):
		pass
	class EmptyHeapError(HeapError, IndexError):
		def __init__(self, message="Heap is empty"): super().__init__(message)
	class HeapFullError(HeapError, IndexError):
		def __init__(self, message="Heap is full"): super().__init__(message)

if 1: # Orders
	class Order:
		"""Ranks two elements for the heap.

		``before(a, b)`` must be a strict predicate: true only when ``a`` has
		to leave the heap before ``b``. Equal elements are never ``before``
		each other, so ties end up in arbitrary order.
		"""
		def __init__(self, before, name=None):
			self.before = before
			self.name = name
		@classmethod
		def from_comparator(cls, cmp, name=None):
			"""Wrap a three-way comparator; ``cmp(a, b) < 0`` means ``a`` comes first."""
			if hasattr(cmp, "compare"): cmp = cmp.compare
			return cls(lambda a, b: cmp(a, b) < 0, name)
		@classmethod
		def by_key(cls, key, order=None):
			base = as_order(order)
			before = base.before
			return cls(lambda a, b: before(key(a), key(b)), base.name)
		def reversed(self):
			before = self.before
			name = {"min": "max", "max": "min"}.get(self.name)
			return Order(lambda a, b: before(b, a), name)
		def __repr__(self): return "Order(%s)" % (self.name or "custom")
	MIN = Order(lt, "min")
	MAX = Order(gt, "max")
	def as_order(order):
		if order is None: return MIN
		if isinstance(order, Order): return order
		if isinstance(order, str):
			if order == "min": return MIN
			if order == "max": return MAX
			raise ValueError("Unknown heap order %r" % order)
		# Comparator object with a single compare method, or a bare comparator
		if hasattr(order, "compare") or callable(order): return Order.from_comparator(order)
		raise TypeError("Cannot use %r as a heap order" % (order,))

if 1: # Array heap impl
	def _heappush(heap, item, before):
		heap.append(item)
		_siftup(heap, len(heap)-1, before)
	def _heappop(heap, before):
		if not heap: raise EmptyHeapError()
		last = heap.pop()
		if len(heap) > 0:
			first = heap[0]
			heap[0] = last
			_siftdown(heap, 0, before)
			return first
		return last
	def _heapremove(heap, i, before):
		n = len(heap)
		if i < 0 or i >= n: raise IndexError("Index out of bounds")
		ret = heap[i]
		heap[i], heap[n-1] = heap[n-1], heap[i]
		heap.pop()
		if i < n-1:
			_siftdown(heap, i, before)
			_siftup(heap, i, before)
		return ret
	def _heapify(heap, before):
		# Bottom-up: leaves are already heaps, fix every parent from the last one to the root
		for i in range(len(heap)//2-1, -1, -1):
			_siftdown(heap, i, before)
	def _siftdown(heap, pos, before):
		n = len(heap)
		lc = ((pos+1)<<1)-1
		rc = lc+1
		while True:
			# No children
			if lc >= n: break
			# Select child to use for sifting
			prio_child = rc if rc < n and before(heap[rc], heap[lc]) else lc
			# Child outranks parent, swap and keep sifting
			if before(heap[prio_child], heap[pos]): heap[prio_child], heap[pos], pos = heap[pos], heap[prio_child], prio_child
			# Parent holds, we are done
			else: break
			# Update child pointer
			lc = ((pos+1)<<1)-1
			rc = lc+1
	def _siftup(heap, pos, before):
		while pos > 0:
			par = (pos-1)>>1
			if before(heap[pos], heap[par]):
				heap[par], heap[pos] = heap[pos], heap[par]
				pos = par
			else: break

	class Heap:
		"""Binary heap stored in a plain list.

		The element at index ``i`` has its children at ``2i+1`` and ``2i+2``.
		The heap copies ``data`` and orders it bottom-up in linear time; the
		caller's sequence is left untouched.
		"""
		default_order = MIN
		def __init__(self, data=None, order=None):
			self.order = as_order(self.default_order if order is None else order)
			if data is None: self.data = []
			else:
				self.data = list(data)
				_heapify(self.data, self.order.before)
		@classmethod
		def build(cls, sequence, order=None): return cls(sequence, order=order)
		def insert(self, item): _heappush(self.data, item, self.order.before)
		def peek(self):
			if not self.data: raise EmptyHeapError()
			return self.data[0]
		def extract_top(self): return _heappop(self.data, self.order.before)
		def sift_down(self, pos): _siftdown(self.data, pos, self.order.before)
		def sift_up(self, pos): _siftup(self.data, pos, self.order.before)
		def remove(self, i): return _heapremove(self.data, i, self.order.before)
		def index(self, v): return self.data.index(v)
		def clear(self): self.data.clear()
		def __len__(self): return len(self.data)
		def __getitem__(self, i): return self.data[i]
		def __iter__(self): return iter(self.data)
		def __repr__(self): return "%s(%r, order=%r)" % (type(self).__name__, self.data, self.order)
	class MinHeap(Heap):
		default_order = MIN
	class MaxHeap(Heap):
		default_order = MAX

	def heapsort(iterable, order=None):
		heap = Heap(iterable, order)
		return [heap.extract_top() for _ in range(len(heap))]

if 1: # Limited size heaps
	class CappedHeap(Heap):
		def __init__(self, capacity, data=None, order=None):
			if data is not None and len(data) > capacity: raise HeapFullError("Data exceeds capacity")
			self._capacity = capacity
			super().__init__(data, order)
		@classmethod
		def build(cls, sequence, order=None, capacity=None):
			sequence = list(sequence)
			return cls(len(sequence) if capacity is None else capacity, sequence, order)
		def insert(self, item):
			if len(self.data) >= self._capacity: raise HeapFullError()
			super().insert(item)
		def capacity(self): return self._capacity
		def is_full(self): return len(self.data) >= self._capacity
	class CappedMinHeap(CappedHeap):
		default_order = MIN
	class CappedMaxHeap(CappedHeap):
		default_order = MAX

if 1: # Queues based on min and max heap
	_prio = itemgetter(0)
	class HeapPrioQueue:
		"""Queue of ``(prio, item)`` entries ranked by ``prio`` alone."""
		def __init__(self, data=None, order=None): self.heap = Heap(data, Order.by_key(_prio, order))
		def push(self, prio, item): self.heap.insert((prio, item))
		def push_overflow(self, prio, item, max_size):
			# Full queue: the new entry is either rejected or replaces the root
			if len(self.heap) >= max_size:
				if self.heap.order.before((prio, item), self.heap.peek()): return (prio, item)
				ret = self.heap.extract_top()
			else: ret = None
			self.heap.insert((prio, item))
			return ret
		def pop(self): return self.heap.extract_top()
		def peek(self): return self.heap.peek()
		def remove(self, i): return self.heap.remove(i)
		def index(self, v): return next((i for i,x in enumerate(self.heap) if x[1] == v), None)
		def clear(self): self.heap.clear()
		def __len__(self): return len(self.heap)
		def __getitem__(self, i): return self.heap[i]
		def __iter__(self): return iter(self.heap)
		def keys(self): return (v[0] for v in self.heap)
		def values(self): return (v[1] for v in self.heap)
		@property
		def order(self): return self.heap.order
	class MinPrioQueue(HeapPrioQueue):
		def __init__(self, data=None): super().__init__(data, MIN)
	class MaxPrioQueue(HeapPrioQueue):
		def __init__(self, data=None): super().__init__(data, MAX)
	class CappedMinPrioQueue(MinPrioQueue):
		def __init__(self, capacity, data=None): self.heap = CappedHeap(capacity, data, Order.by_key(_prio, MIN))
		def push_overflow(self, prio, item, max_size=None): return super().push_overflow(prio, item, self.capacity() if max_size is None else max_size)
		def capacity(self): return self.heap.capacity()
	class CappedMaxPrioQueue(MaxPrioQueue):
		def __init__(self, capacity, data=None): self.heap = CappedHeap(capacity, data, Order.by_key(_prio, MAX))
		def push_overflow(self, prio, item, max_size=None): return super().push_overflow(prio, item, self.capacity() if max_size is None else max_size)
		def capacity(self): return self.heap.capacity()
