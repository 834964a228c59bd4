"""Exceptions raised for invalid scene configuration."""


class SdfTraceError(Exception):
    """Base class for sdftrace errors."""


class DegenerateVectorError(SdfTraceError, ValueError):
    """A zero-length vector was used where a direction is required."""


class DegenerateTileError(SdfTraceError, ValueError):
    """A checkerboard was configured with a zero or non-finite tile size."""
