"""Document level records from ``DOMDocument.xml``."""

from dataclasses import dataclass

from ..constants import DEFAULT_FRAME_RATE


@dataclass(frozen=True)
class SymbolInclude:
    """A ``<symbols><Include href="..."/>`` reference into the library folder."""

    href: str
    item_id: str | None = None


@dataclass(frozen=True)
class Document:
    width: int = 550
    height: int = 400
    frame_rate: float = DEFAULT_FRAME_RATE
    background_color: str = "#FFFFFF"
    includes: tuple[SymbolInclude, ...] = ()

    @property
    def frame_duration(self) -> int:
        """Duration of one output frame in milliseconds."""
        return int(1000 / self.frame_rate) if self.frame_rate > 0 else 1000 // DEFAULT_FRAME_RATE
