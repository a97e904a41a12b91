"""Exception hierarchy for Hullmesh."""


class HullmeshError(Exception):
    """Base exception for all Hullmesh errors."""

    pass


class InputError(HullmeshError):
    """Errors related to caller-provided buffers."""

    pass


class InvalidInputSizeError(InputError):
    """Input buffer has an unusable size.

    Raised before any work is done when a buffer exceeds the 16-bit index cap,
    describes too few vertices, or has an odd number of coordinates.
    """

    def __init__(self, count: int, reason: str) -> None:
        self.count = count
        self.reason = reason
        super().__init__(f"Invalid input size ({count}): {reason}")


class GeometryError(HullmeshError):
    """Errors in geometric calculations."""

    pass


class DegenerateTriangleError(GeometryError):
    """Triangle has (near) zero area where a proper triangle is required."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class InputFileError(HullmeshError):
    """Error loading a point or polygon file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load input '{path}': {reason}")


class OutputFileError(HullmeshError):
    """Error writing a result file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write output '{path}': {reason}")
