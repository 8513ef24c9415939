import math
import operator

MIN, MAX = "min", "max"
# orientation -> (not worse than, strictly better than, root-seeking sentinel)
_ORDERS = {
	MIN: (operator.le, operator.lt, -math.inf),
	MAX: (operator.ge, operator.gt, math.inf),
}

if 1: # Sifting on a plain list, shared by both orientations
	def _siftup(heap, pos, better, force=False):
		while pos > 0:
			par = (pos-1)>>1
			# Parent is not worse, we are done
			if not force and not better(heap[pos], heap[par]): break
			heap[par], heap[pos] = heap[pos], heap[par]
			pos = par
	def _siftdown(heap, pos, better):
		n = len(heap)
		lc = ((pos+1)<<1)-1
		rc = lc+1
		while True:
			# No children
			if lc >= n: break
			# Select child to use for sifting, left wins ties
			prio_child = rc if rc < n and better(heap[rc], heap[lc]) else lc
			# Child is strictly better than parent, swap and keep sifting
			if better(heap[prio_child], heap[pos]): heap[prio_child], heap[pos], pos = heap[pos], heap[prio_child], prio_child
			# Parent is not worse than either child, we are done
			else: break
			# Update child pointer
			lc = ((pos+1)<<1)-1
			rc = lc+1
	def _heapify(heap, better):
		for i in range(1,len(heap)):
			_siftup(heap, i, better)

if 1: # Generic binary heap
	class BinaryHeap:
		"""
		Array-backed binary heap ordered by `orientation` (MIN or MAX).

		The root holds the most favourable element: the minimum of a MIN heap,
		the maximum of a MAX heap. Children of index i live at 2i+1 and 2i+2.
		Empty-heap peeks and extractions return None, bad indices raise IndexError.
		"""
		def __init__(self, data=None, orientation=MIN):
			if orientation not in _ORDERS: raise ValueError(f"Unknown orientation {orientation!r}")
			self.orientation = orientation
			self._not_worse, self._better, self._sentinel = _ORDERS[orientation]
			self._data = [] if data is None else list(data)
			_heapify(self._data, self._better)

		def _check_index(self, index):
			if index < 0 or index >= len(self._data): raise IndexError("Index out of bounds")
		def _bubble(self, old, new, index):
			# Sink a value that got worse, raise one that did not
			if self._better(old, new): _siftdown(self._data, index, self._better)
			else: _siftup(self._data, index, self._better)

		def insert(self, value):
			self._data.append(value)
			_siftup(self._data, len(self._data)-1, self._better)
		def extract_top(self):
			if not self._data: return None
			last = self._data.pop()
			if not self._data: return last
			top = self._data[0]
			self._data[0] = last
			_siftdown(self._data, 0, self._better)
			return top
		def peek_top(self): return self._data[0] if self._data else None
		def peek_opposite(self):
			"""Opposite extreme (max of a MIN heap, min of a MAX heap). O(n) scan."""
			if not self._data: return None
			return max(self._data) if self.orientation == MIN else min(self._data)
		def extract_opposite(self):
			if not self._data: return None
			pick = max if self.orientation == MIN else min
			index = pick(range(len(self._data)), key=self._data.__getitem__)
			return self.delete_at(index)

		def search(self, value, exhaustive=False):
			"""
			Index of `value`, or None.

			The default is a greedy descent: from each node it follows the left child
			if that child is not worse than `value`, otherwise the right child under
			the same test, and never backtracks. It can therefore report None for a
			value that is present (e.g. 5 in the MIN heap [1, 2, 4, 5, 3, 6] is found,
			but 4 in [1, 3, 4, 3.5] is not). delete_value() relies on exactly this
			behaviour. Pass exhaustive=True for a full O(n) scan. Assumes no duplicates.
			"""
			if exhaustive:
				return next((i for i,v in enumerate(self._data) if v == value), None)
			return self._search(value, 0)
		def _search(self, value, index):
			n = len(self._data)
			if index >= n: return None
			if self._data[index] == value: return index
			lc = 2*index+1
			rc = lc+1
			if lc < n and self._not_worse(self._data[lc], value): return self._search(value, lc)
			if rc < n and self._not_worse(self._data[rc], value): return self._search(value, rc)
			return None

		def decrease_key(self, index, value):
			"""Overwrite with a more favourable value and sift it up. No downward check."""
			self._check_index(index)
			self._data[index] = value
			_siftup(self._data, index, self._better)
		# Same operation, named for MAX heaps
		increase_key = decrease_key
		def change_key(self, index, value):
			self._check_index(index)
			old = self._data[index]
			self._data[index] = value
			self._bubble(old, value, index)

		def delete_at(self, index):
			self._check_index(index)
			ret = self._data[index]
			last = self._data.pop()
			if index < len(self._data):
				self._data[index] = last
				self._bubble(ret, last, index)
			return ret
		def delete_at_alternate(self, index):
			"""
			Same result as delete_at(index), reached differently: the slot is overwritten
			with the root-seeking sentinel (-inf for MIN, +inf for MAX), forced up to the
			root and removed with extract_top().
			"""
			self._check_index(index)
			ret = self._data[index]
			self._data[index] = self._sentinel
			# Forced so that ties with stored infinities cannot stop the climb
			_siftup(self._data, index, self._better, force=True)
			self.extract_top()
			return ret
		def delete_value(self, value):
			index = self.search(value)
			if index is None: return None
			return self.delete_at(index)

		def is_valid(self):
			return all(self._not_worse(self._data[(i-1)>>1], self._data[i]) for i in range(1,len(self._data)))
		def size(self): return len(self._data)
		def is_empty(self): return len(self._data) == 0
		def clear(self): self._data.clear()
		def to_list(self): return list(self._data)
		def __len__(self): return len(self._data)
		def __getitem__(self, i): return self._data[i]
		def __iter__(self): return iter(self._data)
		def __repr__(self): return f"{type(self).__name__}({self._data!r})"

	class MinHeap(BinaryHeap):
		def __init__(self, data=None): super().__init__(data, MIN)
	class MaxHeap(BinaryHeap):
		def __init__(self, data=None): super().__init__(data, MAX)

if __name__ == "__main__":
	import numpy as np
	rnd = np.random.sample(1000)
	# Sort with minheap
	minheap = MinHeap()
	for v in rnd: minheap.insert(v)
	assert minheap.is_valid()
	assert minheap.peek_opposite() == np.max(rnd)
	minheap_sorted = np.array([minheap.extract_top() for _ in range(rnd.shape[0])])
	assert minheap.extract_top() is None
	# Sort with maxheap
	maxheap = MaxHeap(rnd)
	assert maxheap.peek_opposite() == np.min(rnd)
	maxheap_sorted = np.array([maxheap.extract_top() for _ in range(rnd.shape[0])])
	# Both deletion paths agree
	a, b = MinHeap(rnd), MinHeap(rnd)
	for i in np.random.randint(0, 500, size=200):
		assert a.delete_at(i) == b.delete_at_alternate(i)
		assert a.is_valid() and b.is_valid()
	assert np.all(np.sort(a.to_list()) == np.sort(b.to_list()))
	# Sort with numpy (min to max)
	np_sorted = np.sort(rnd)
	# Test
	assert np.all(minheap_sorted == np_sorted)
	assert np.all(maxheap_sorted == np_sorted[::-1])
	print("heaps ok")
