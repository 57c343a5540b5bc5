"""Exception types raised while loading and rendering FLA content."""


class FlaError(Exception):
    """Base exception for every failure raised by fla_renderer."""
    pass


class ContainerError(FlaError):
    """The container could not be opened as a zip archive or XFL folder."""
    pass


class MissingMemberError(ContainerError):
    """A named member does not exist in the container."""

    def __init__(self, name: str):
        super().__init__(f"Missing container member '{name}'")
        self.name = name


class DocumentError(FlaError):
    """An XML document does not have the expected structure."""
    pass


class SymbolNotFoundError(FlaError):
    """No renderable symbol exists under the requested name."""

    def __init__(self, name: str):
        super().__init__(f"Could not locate symbol '{name}'")
        self.name = name


# Edge definition parsing


class EdgeParseError(FlaError):
    """An edge definition string could not be parsed."""
    pass


class InvalidDigitError(EdgeParseError):
    def __init__(self, char: str, base: int = 10):
        super().__init__(f"Invalid char in numeric '{char}' (base {base})")
        self.char = char
        self.base = base


class UnexpectedEndError(EdgeParseError):
    def __init__(self) -> None:
        super().__init__("Unexpected end of edge definition")


class UnknownCommandError(EdgeParseError):
    def __init__(self, char: str):
        super().__init__(f"Unknown edge command '{char}'")
        self.char = char


class InvalidSelectionMaskError(EdgeParseError):
    def __init__(self, value: int):
        super().__init__(f"Unexpected selection mask '{value}'")
        self.value = value


class InvalidFixedPointError(EdgeParseError):
    def __init__(self, char: str):
        super().__init__(f"Invalid fixed point char '{char}'")
        self.char = char


# Rendering


class RenderError(FlaError):
    """A symbol could not be rendered. No frames are produced."""
    pass


class NoBoundingBoxError(RenderError):
    def __init__(self) -> None:
        super().__init__("Could not determine a bounding box")


class MissingFillStyleIndexError(RenderError):
    def __init__(self, side: int):
        super().__init__(f"Missing fillStyle{side} index")
        self.side = side


class MissingFillStyleError(RenderError):
    def __init__(self, index: int):
        super().__init__(f"Missing FillStyle {index}")
        self.index = index


class MissingStrokeStyleIndexError(RenderError):
    def __init__(self) -> None:
        super().__init__("Missing strokeStyle index")


class MissingStrokeStyleError(RenderError):
    def __init__(self, index: int):
        super().__init__(f"Missing StrokeStyle {index}")
        self.index = index


class MissingColorError(RenderError):
    def __init__(self) -> None:
        super().__init__("Missing solid color")


class InvalidColorError(RenderError):
    def __init__(self, value: str):
        super().__init__(f"Invalid RGB color '{value}'")
        self.value = value


class UnsupportedError(RenderError):
    def __init__(self, feature: str):
        super().__init__(f"Unsupported: {feature}")
        self.feature = feature
