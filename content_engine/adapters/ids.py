import itertools
from uuid import uuid4


class RandomIdGenerator:
    """Prefixed uuid4 identifiers; unique for the process lifetime."""

    def __init__(self, prefix: str = "block") -> None:
        self.prefix = prefix

    def next(self) -> str:
        return f"{self.prefix}_{uuid4().hex}"


class SequentialIdGenerator:
    """Deterministic identifiers (prefix_1, prefix_2, ...) for tests and fixtures."""

    def __init__(self, prefix: str = "block", start: int = 1) -> None:
        self.prefix = prefix
        self._counter = itertools.count(start)

    def next(self) -> str:
        return f"{self.prefix}_{next(self._counter)}"
