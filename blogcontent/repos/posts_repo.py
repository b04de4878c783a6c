from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Union

PathLike = Union[str, Path]


class FileReader(ABC):
    """Read access to the content directory. Both operations may raise OSError."""

    @abstractmethod
    def list_entries(self, path: PathLike) -> List[str]:
        ...

    @abstractmethod
    def read_text(self, path: PathLike) -> str:
        ...


class LocalFileReader(FileReader):
    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def list_entries(self, path: PathLike) -> List[str]:
        return sorted(entry.name for entry in Path(path).iterdir())

    def read_text(self, path: PathLike) -> str:
        return Path(path).read_text(encoding=self.encoding)
