"""FLA/XFL containers: the document plus its library of symbols and assets."""

import zipfile
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import BinaryIO, Callable, Protocol

from .constants import DOCUMENT_MEMBER, LIBRARY_PREFIX
from .dom.document import Document
from .dom.timeline import Symbol
from .dom.xml_loader import load_document, load_symbol
from .errors import ContainerError, MissingMemberError, SymbolNotFoundError
from .render.canvas import Canvas, PillowCanvas
from .render.renderer import render_symbol


class MemberStore(Protocol):
    """Named lookup of raw container members."""

    def read(self, name: str) -> bytes: ...


class ZipMemberStore:
    """Members of a zipped ``.fla`` file."""

    def __init__(self, source: str | Path | BinaryIO):
        try:
            self._zip = zipfile.ZipFile(source)
        except (zipfile.BadZipFile, OSError) as e:
            raise ContainerError(f"Cannot open FLA archive: {e}")

    def read(self, name: str) -> bytes:
        try:
            return self._zip.read(name)
        except KeyError:
            raise MissingMemberError(name)

    def close(self) -> None:
        self._zip.close()


class DirectoryMemberStore:
    """Members of an unpacked XFL folder."""

    def __init__(self, root: str | Path):
        self.root = Path(root)
        if not self.root.is_dir():
            raise ContainerError(f"Not a directory: {self.root}")

    def read(self, name: str) -> bytes:
        path = self.root.joinpath(*PurePosixPath(name).parts)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            raise MissingMemberError(name)


@dataclass(frozen=True)
class SymbolEntry:
    name: str
    symbol: Symbol


@dataclass(frozen=True)
class OpaqueEntry:
    """A library member that is not a symbol item, kept as raw bytes."""

    name: str
    data: bytes


LibraryEntry = SymbolEntry | OpaqueEntry


def load_library_entry(name: str, data: bytes) -> LibraryEntry:
    """Load ``.xml`` members as symbols and keep anything else opaque."""
    if PurePosixPath(name).suffix.lower() == ".xml":
        return SymbolEntry(name, load_symbol(data))
    return OpaqueEntry(name, data)


class Fla:
    """A loaded document and its library, keyed by include href."""

    def __init__(self, document: Document, library: dict[str, LibraryEntry]):
        self.document = document
        self.library = library

    @classmethod
    def open(cls, source: str | Path | BinaryIO) -> "Fla":
        """
        Load an ``.fla`` archive, or an XFL folder when ``source`` is a directory.

        Raises:
            ContainerError: If the container cannot be opened or a member is missing
            DocumentError: If an XML member is malformed
            EdgeParseError: If an edge definition is malformed
        """
        if isinstance(source, (str, Path)) and Path(source).is_dir():
            return cls.from_store(DirectoryMemberStore(source))

        store = ZipMemberStore(source)
        try:
            return cls.from_store(store)
        finally:
            store.close()

    @classmethod
    def from_store(cls, store: MemberStore) -> "Fla":
        document = load_document(store.read(DOCUMENT_MEMBER))
        library: dict[str, LibraryEntry] = {}
        for include in document.includes:
            data = store.read(f"{LIBRARY_PREFIX}/{include.href}")
            library[include.href] = load_library_entry(include.href, data)
        return cls(document, library)

    def get_library_entry(self, name: str) -> LibraryEntry | None:
        return self.library.get(name)

    def symbol_names(self) -> list[str]:
        """Names of renderable library symbols, in include order."""
        return [name for name, entry in self.library.items() if isinstance(entry, SymbolEntry)]

    def get_symbol(self, name: str) -> Symbol:
        """
        Look up a symbol by include href, falling back to the symbol's own name.

        Raises:
            SymbolNotFoundError: If no symbol matches
        """
        entry = self.library.get(name)
        if isinstance(entry, SymbolEntry):
            return entry.symbol
        for entry in self.library.values():
            if isinstance(entry, SymbolEntry) and entry.symbol.name == name:
                return entry.symbol
        raise SymbolNotFoundError(name)

    def render_symbol(
        self,
        name: str,
        scale: float,
        padding: float,
        *,
        canvas_factory: Callable[[int, int], Canvas] = PillowCanvas,
        workers: int | None = None,
        max_frames: int | None = None,
    ) -> list[Canvas]:
        """Render the named symbol into one canvas per output frame."""
        return render_symbol(
            self.get_symbol(name),
            scale,
            padding,
            canvas_factory=canvas_factory,
            workers=workers,
            max_frames=max_frames,
        )
