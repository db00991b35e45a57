"""Error kinds raised while loading grids and searching for cycles."""


class ArgumentError(Exception):
    """Raised when the command line does not match the expected usage."""


class ParseError(ValueError):
    """Raised when an input grid cannot be parsed."""

    def __init__(self, message: str, line_number: int | None = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class OutOfBoundsError(IndexError):
    """Raised when a coordinate lies outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(f"position ({x}, {y}) is outside the {width}x{height} grid")
