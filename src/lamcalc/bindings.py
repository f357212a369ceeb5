from __future__ import annotations

from typing import Generic, Iterator, Mapping, TypeVar

T = TypeVar("T")


class Bindings(Generic[T]):
    """Persistent environment. `extend` returns a new environment and leaves
    the original untouched, so sibling scopes never see each other's entries."""

    def __init__(self, key=None, val=None, next=None):
        self.key = key
        self.val = val
        self.next = next

    @staticmethod
    def from_mapping(mapping: Mapping[str, T]) -> Bindings[T]:
        env = Bindings()
        for k, v in mapping.items():
            env = env.extend(k, v)
        return env

    def get(self, k: str) -> T:
        match self.key:
            case None:
                raise LookupError(k)
            case key if key == k:
                return self.val
            case _:
                return self.next.get(k)

    def extend(self, k: str, v: T) -> Bindings[T]:
        return Bindings(k, v, self)

    def __contains__(self, k: str) -> bool:
        try:
            self.get(k)
        except LookupError:
            return False
        return True

    def items(self) -> Iterator[tuple[str, T]]:
        seen = set()
        env = self
        while env.key is not None:
            if env.key not in seen:
                seen.add(env.key)
                yield env.key, env.val
            env = env.next
