"""
seeded sample data for tests: faker for realistic records, numpy's
generator for numbers. the same seed always yields the same data.
"""
import numpy as np
from faker import Faker
from typing import Any, Dict, List, Optional


class SampleData:

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def integers(self, count: int, low: int = -100, high: int = 100) -> List[int]:
        # convert numpy ints to native python ints
        return [int(x) for x in self._rng.integers(low, high, size=count, endpoint=True)]

    def words(self, count: int) -> List[str]:
        return [self._fake.word() for _ in range(count)]

    def people(self, count: int) -> List[Dict[str, Any]]:
        return [
            {
                'id': index + 1,
                'name': self._fake.first_name(),
                'city': self._fake.city(),
                'age': int(self._rng.integers(18, 80)),
                'active': bool(self._rng.integers(0, 2)),
            }
            for index in range(count)
        ]


def sample(seed: Optional[int] = None) -> SampleData:
    return SampleData(seed)
