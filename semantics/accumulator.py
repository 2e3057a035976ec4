"""Running-mean accumulators for morpheme feature vectors."""

import logging

logger = logging.getLogger(__name__)


class EmbeddingAccumulator:
    """Running element-wise sum plus count; the mean is derived on demand."""

    def __init__(self, dimensions):
        self.sum = [0.0] * dimensions
        self.count = 0

    def _widen(self, dimensions):
        if dimensions > len(self.sum):
            logger.debug("Widening accumulator from %d to %d", len(self.sum), dimensions)
            self.sum.extend([0.0] * (dimensions - len(self.sum)))

    def _resize(self, dimensions):
        # The sum follows the length of the latest vector: zero-padded when
        # it grows, truncated when it shrinks.
        if dimensions < len(self.sum):
            logger.debug("Truncating accumulator from %d to %d", len(self.sum), dimensions)
            del self.sum[dimensions:]
        else:
            self._widen(dimensions)

    def add(self, vector):
        self._resize(len(vector))
        for i, value in enumerate(vector):
            self.sum[i] += value
        self.count += 1

    def merge(self, other):
        """Fold *other* into this accumulator (sum of sums, sum of counts)."""
        self._widen(len(other.sum))
        for i, value in enumerate(other.sum):
            self.sum[i] += value
        self.count += other.count

    def mean(self):
        if self.count == 0:
            return [0.0] * len(self.sum)
        return [value / self.count for value in self.sum]

    def __repr__(self):
        return f"EmbeddingAccumulator(count={self.count}, sum={self.sum!r})"


class EmbeddingTable:
    """Accumulators keyed by ``MorphemeKey``, created lazily on first add."""

    def __init__(self):
        self.accumulators = {}

    def add(self, key, vector):
        acc = self.accumulators.get(key)
        if acc is None:
            acc = self.accumulators[key] = EmbeddingAccumulator(len(vector))
        acc.add(vector)

    def mean(self, key):
        """Mean vector for *key*, or None if the key was never added."""
        acc = self.accumulators.get(key)
        return acc.mean() if acc is not None else None

    def merge(self, other):
        """Merge another table into this one, key by key."""
        for key, acc in other.accumulators.items():
            mine = self.accumulators.get(key)
            if mine is None:
                mine = self.accumulators[key] = EmbeddingAccumulator(len(acc.sum))
            mine.merge(acc)
        return self

    def items(self):
        """All ``(key, mean)`` pairs sorted by key: prefixes, roots, suffixes."""
        return [(key, self.accumulators[key].mean()) for key in sorted(self.accumulators)]

    def __len__(self):
        return len(self.accumulators)

    def __contains__(self, key):
        return key in self.accumulators
