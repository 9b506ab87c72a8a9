from abc import ABC, abstractmethod
from typing import Any, TypeAlias


# Symbol -> occurrence count
FreqTableType: TypeAlias = dict[int, int]
# Symbol -> bit string such as "101"
CodebookType: TypeAlias = dict[int, str]
AlphabetType: TypeAlias = list[int]


class Compressor(ABC):
    @abstractmethod
    def encode(self, data: bytes) -> dict[str, Any]:
        pass

    @abstractmethod
    def decode(self, encoded: dict[str, Any]) -> bytes:
        pass
