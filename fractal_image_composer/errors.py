"""Exception types raised at the boundary of the fractal core."""


class FractalError(Exception):
    """Base class for every error this package raises."""


class InvalidArgumentError(FractalError, ValueError):
    """Caller supplied parameters that cannot be run (bad offsets, factors, depth)."""


class DecodeFailureError(FractalError, OSError):
    """Source image could not be read or decoded."""


class DegenerateReductionError(FractalError, ValueError):
    """Reduction factor would collapse a buffer dimension to zero."""

    def __init__(self, size, reduction_factor: int):
        width, height = size
        super().__init__(
            f"Reduction factor {reduction_factor} collapses {width}x{height} buffer "
            f"to {width // reduction_factor}x{height // reduction_factor}"
        )
        self.size = size
        self.reduction_factor = reduction_factor


class EncodeFailureError(FractalError, OSError):
    """Result image could not be encoded or written."""
