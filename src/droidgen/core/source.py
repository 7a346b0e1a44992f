"""Template stores: where template entries and their bytes come from."""

from __future__ import annotations

import importlib.resources as ilr
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

BUNDLED_TEMPLATE = "android"


@dataclass(frozen=True)
class TemplateEntry:
    """A single template entry addressed by its slash-separated relative path."""

    path: str
    is_dir: bool

    @property
    def name(self) -> str:
        return self.path.rsplit("/", 1)[-1]


class TemplateSource(Protocol):
    """Read-only, path-addressable template tree."""

    def entries(self) -> list[TemplateEntry]:
        """All entries below the root (the root itself excluded), in lexical path order."""
        ...

    def read_bytes(self, path: str) -> bytes: ...


class TraversableTemplateSource:
    """Template tree backed by a directory, either on disk or inside a package."""

    def __init__(self, root: Traversable) -> None:
        self.root = root

    def _walk(self, node: Traversable, prefix: str) -> Iterator[TemplateEntry]:
        for child in node.iterdir():
            path = f"{prefix}{child.name}"
            if child.is_dir():
                yield TemplateEntry(path, is_dir=True)
                yield from self._walk(child, f"{path}/")
            else:
                yield TemplateEntry(path, is_dir=False)

    def entries(self) -> list[TemplateEntry]:
        return sorted(self._walk(self.root, ""), key=lambda e: e.path)

    def read_bytes(self, path: str) -> bytes:
        node = self.root
        for segment in path.split("/"):
            node = node.joinpath(segment)
        return node.read_bytes()

    def __repr__(self) -> str:
        return f"TraversableTemplateSource({self.root!r})"


class MappingTemplateSource:
    """In-memory template tree.

    Directories are implied by file paths; empty directories can be listed
    explicitly through *directories*.
    """

    def __init__(self, files: Mapping[str, bytes], directories: Iterable[str] = ()) -> None:
        self.files = dict(files)
        dirs = set(directories)
        for path in [*self.files, *dirs]:
            parts = path.split("/")
            dirs.update("/".join(parts[:i]) for i in range(1, len(parts)))
        self.directories = dirs

    def entries(self) -> list[TemplateEntry]:
        entries = [TemplateEntry(d, is_dir=True) for d in self.directories]
        entries += [TemplateEntry(f, is_dir=False) for f in self.files]
        return sorted(entries, key=lambda e: e.path)

    def read_bytes(self, path: str) -> bytes:
        if path in self.directories:
            raise IsADirectoryError(path)
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFoundError(path) from None


def bundled_templates(name: str = BUNDLED_TEMPLATE) -> TraversableTemplateSource:
    """Return the template tree shipped with the package."""
    return TraversableTemplateSource(ilr.files("droidgen").joinpath("templates").joinpath(name))
