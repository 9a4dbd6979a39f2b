from collections import deque
from typing import Callable, Generic, Iterable, Iterator, Optional, Self, TypeVar, overload

T = TypeVar("T")
U = TypeVar("U")

_MISSING = object()


class Peekable(Generic[T], Iterator[T]):
    def __init__(self, iterable: Iterable[T]):
        self._it = iter(iterable)
        self._cache = deque()
        self.consumed = 0

    def __iter__(self) -> Self:
        return self

    def __bool__(self) -> bool:
        return not self.at_end()

    def at_end(self) -> bool:
        if self._cache:
            return False
        try:
            self._cache.append(next(self._it))
        except StopIteration:
            return True
        return False

    @overload
    def peek(self) -> T:
        ...

    @overload
    def peek(self, default: U) -> T | U:
        ...

    def peek(self, default: U = _MISSING) -> T | U:
        if self.at_end():
            if default is _MISSING:
                raise StopIteration
            return default
        return self._cache[0]

    def next_if(self, predicate: Callable[[T], bool]) -> Optional[T]:
        if self.at_end() or not predicate(self._cache[0]):
            return None
        return next(self)

    def __next__(self) -> T:
        if self._cache:
            item = self._cache.popleft()
        else:
            item = next(self._it)
        self.consumed += 1
        return item
