"""Loading files, optionally relative to an assets folder."""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "FileError",
    "FileLoader",
    "set_pc_assets_folder",
    "load_file",
    "load_string",
]


class FileError(Exception):
    """A file could not be loaded."""

    def __init__(self, kind: BaseException | str, path: str) -> None:
        self.kind = kind
        self.path = path
        super().__init__(f"Couldn't load file {path}: {kind}")


class FileLoader:
    """Loads files, prefixing paths with an optional assets folder."""

    def __init__(self, pc_assets_folder: str | None = None) -> None:
        self.pc_assets_folder = pc_assets_folder

    def set_pc_assets_folder(self, path: str) -> None:
        """Resolve later paths relative to this folder."""
        self.pc_assets_folder = path

    def _resolve(self, path: str) -> str:
        if self.pc_assets_folder is not None:
            return f"{self.pc_assets_folder}/{path}"
        return path

    def load_file(self, path: str) -> bytes:
        """Read the whole file; FileError if it cannot be read."""
        full_path = self._resolve(path)
        try:
            return Path(full_path).read_bytes()
        except OSError as error:
            raise FileError(error, full_path) from error

    def load_string(self, path: str) -> str:
        """Read the file as UTF-8, replacing invalid sequences."""
        return self.load_file(path).decode("utf-8", errors="replace")


_default = FileLoader()


def set_pc_assets_folder(path: str) -> None:
    """Set the assets folder of the default loader."""
    _default.set_pc_assets_folder(path)


def load_file(path: str) -> bytes:
    """Read a file with the default loader."""
    return _default.load_file(path)


def load_string(path: str) -> str:
    """Read a text file with the default loader."""
    return _default.load_string(path)