from heaps import MaxHeap, MinHeap

class MedianTracker:
	"""
	Running median of a numeric stream kept in two heaps.

	`left` is a MAX heap with the lower half of the values seen so far, `right` a
	MIN heap with the upper half. Their sizes never differ by more than one and
	every value on the left is <= every value on the right, so the median is
	always one of the two tops. For an even count it is the lower middle value,
	i.e. sorted(values)[(k-1)//2] after k inserts.
	"""
	def __init__(self):
		self._left = MaxHeap()
		self._right = MinHeap()
		self.median = None

	@property
	def left(self): return self._left
	@property
	def right(self): return self._right

	def insert(self, value):
		left, right = self._left, self._right
		# First value ever goes left
		if left.is_empty():
			self.median = value
			left.insert(value)
			return self.median

		# Strictly below the left top goes left, anything else goes right
		if value < left.peek_top(): left.insert(value)
		else: right.insert(value)

		# One side is two ahead at most, a single move evens it out
		if len(left) - len(right) > 1: right.insert(left.extract_top())
		elif len(right) - len(left) > 1: left.insert(right.extract_top())

		self.median = right.peek_top() if len(right) > len(left) else left.peek_top()
		return self.median

	def extend(self, values):
		for v in values: self.insert(v)
		return self.median
	def running_medians(self, values):
		for v in values: yield self.insert(v)

	def size(self): return len(self._left) + len(self._right)
	def is_empty(self): return self._left.is_empty()
	def __len__(self): return self.size()
	def __repr__(self): return f"MedianTracker(median={self.median!r}, n={self.size()})"
