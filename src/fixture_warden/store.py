"""Filesystem access for fixtures."""

import os
import shutil
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path, PurePath


class FixtureStore(ABC):
    """Abstract access to the fixture tree."""

    @abstractmethod
    def is_dir(self, path: PurePath) -> bool:
        pass

    @abstractmethod
    def exists(self, path: PurePath) -> bool:
        pass

    @abstractmethod
    def list_dir(self, path: PurePath) -> list[str]:
        """Return the entry names of a directory."""
        pass

    @abstractmethod
    def read_text(self, path: PurePath) -> str:
        pass

    @abstractmethod
    def write_text(self, path: PurePath, content: str) -> None:
        """Replace the whole content of a file."""
        pass


class DiskStore(FixtureStore):
    """Fixtures on the local filesystem."""

    def is_dir(self, path: PurePath) -> bool:
        return Path(path).is_dir()

    def exists(self, path: PurePath) -> bool:
        return Path(path).exists()

    def list_dir(self, path: PurePath) -> list[str]:
        return [entry.name for entry in os.scandir(path)]

    def read_text(self, path: PurePath) -> str:
        return Path(path).read_text(encoding="utf-8")

    def write_text(self, path: PurePath, content: str) -> None:
        """Write to a temporary sibling, then move it over the original."""
        target = Path(path)
        fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)
            if target.exists():
                shutil.copymode(target, tmp_name)
            os.replace(tmp_name, target)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
