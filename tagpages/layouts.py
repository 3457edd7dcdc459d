"""Locate and read layout templates from a site's ``_layouts`` directory."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .front_matter import read_document

if typ.TYPE_CHECKING:
    from pathlib import Path


class LayoutNotFoundError(FileNotFoundError):
    """Raised when a named layout does not exist in the layouts directory."""

    def __init__(self, directory: Path, name: str) -> None:
        self.directory = directory
        self.name = name
        super().__init__(f"Layout '{name}' not found in '{directory}'.")


@dc.dataclass(frozen=True, slots=True)
class Layout:
    """A layout file split into front matter and template body."""

    name: str
    path: Path
    data: typ.Mapping[str, typ.Any]
    content: str


class LayoutLoader:
    """Read layouts keyed by directory and file name, caching each file once."""

    def __init__(self) -> None:
        self._cache: dict[tuple[Path, str], Layout] = {}

    def load(self, directory: Path, name: str) -> Layout:
        """Return the layout called ``name`` inside ``directory``.

        Parameters
        ----------
        directory : Path
            Layouts directory, normally ``<source>/_layouts``.
        name : str
            File name of the layout including its extension.

        Raises
        ------
        LayoutNotFoundError
            If no regular file called ``name`` exists in ``directory``.
        FrontMatterError
            If the layout's front matter is malformed.
        """
        key = (directory, name)
        if key in self._cache:
            return self._cache[key]
        path = directory / name
        if not path.is_file():
            raise LayoutNotFoundError(directory, name)
        document = read_document(path)
        layout = Layout(
            name=name, path=path, data=document.data, content=document.content
        )
        self._cache[key] = layout
        return layout


__all__ = ["Layout", "LayoutLoader", "LayoutNotFoundError"]
