from dataclasses import dataclass
import enum
from typing import Iterator

ALPHABET_SIZE = 26


class Status(enum.Enum):
    NEVER_USED = enum.auto()
    TOMBSTONED = enum.auto()
    OCCUPIED = enum.auto()


@dataclass
class Slot:
    key: str
    status: Status

    @classmethod
    def empty(cls):
        return Slot("", Status.NEVER_USED)

    def is_available(self) -> bool:
        return self.status != Status.OCCUPIED


@dataclass
class Table:
    slots: tuple[Slot, ...]

    def __init__(self, size: int = ALPHABET_SIZE) -> None:
        if not 0 < size <= ALPHABET_SIZE:
            raise ValueError(f"size must be between 1 and {ALPHABET_SIZE}, got {size}")
        self.slots = tuple(Slot.empty() for _ in range(size))

    def add(self, key: str) -> bool:
        # no membership check: a key already present is stored again
        slot = self.find_available(self.home(key))
        if slot is None:
            return False

        slot.key = key
        slot.status = Status.OCCUPIED
        return True

    def delete(self, key: str) -> bool:
        slot = self.slots[self.home(key)]
        if slot.status != Status.OCCUPIED:
            return False

        slot.status = Status.TOMBSTONED
        return True

    def delete_probing(self, key: str) -> bool:
        """Like delete, but follows the probe chain to reach keys that
        collided away from their home slot."""
        index = self.find(key)
        if index is None:
            return False

        self.slots[index].status = Status.TOMBSTONED
        return True

    def find(self, key: str) -> int | None:
        for index in self.probe(self.home(key)):
            slot = self.slots[index]
            match slot.status:
                case Status.NEVER_USED:
                    return None
                case Status.TOMBSTONED:
                    continue
                case Status.OCCUPIED:
                    if slot.key == key:
                        return index
        return None

    def __contains__(self, key: str) -> bool:
        return self.find(key) is not None

    def find_available(self, home: int) -> Slot | None:
        for index in self.probe(home):
            slot = self.slots[index]
            if slot.is_available():
                return slot
        return None

    def probe(self, home: int) -> Iterator[int]:
        index = home
        for _ in range(len(self.slots)):
            yield index
            index = (index + 1) % len(self.slots)

    def home(self, key: str) -> int:
        index = hash_key(key)
        if not 0 <= index < len(self.slots):
            raise ValueError(f"key {key!r} hashes outside the table")
        return index

    def entries(self) -> list[tuple[int, str, Status]]:
        return [(i, slot.key, slot.status) for i, slot in enumerate(self.slots)]

    def count(self) -> int:
        return sum(1 for slot in self.slots if slot.status == Status.OCCUPIED)


def hash_key(key: str) -> int:
    return ord(key[-1]) - ord("a")
