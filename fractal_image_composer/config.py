"""Run parameters and their validation."""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from .errors import InvalidArgumentError
from .geometry import Point

DEFAULT_REDUCTION_FACTOR = 2
DEFAULT_ITERATIONS = 2
MAX_OFFSETS = 10


def _to_int(value, name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}") from exc


def parse_offset_values(values: Sequence) -> List[Point]:
    """
    Pair up a flat list of coordinates [x0, y0, x1, y1, ...] into Points.

    Raises:
        InvalidArgumentError: on an odd count, more than MAX_OFFSETS points,
            or a value that is not an integer
    """
    if len(values) % 2 != 0:
        raise InvalidArgumentError("Must have an even number of offset values")
    if len(values) // 2 > MAX_OFFSETS:
        raise InvalidArgumentError(f"Too many offset values provided. Max {MAX_OFFSETS}.")
    coords = [_to_int(v, "Offset") for v in values]
    return [Point(coords[i], coords[i + 1]) for i in range(0, len(coords), 2)]


@dataclass
class FractalConfig:
    """
    Parameters for one fractal run.

    offsets=None means "paste once at the image centre"; an empty list means
    no pastes at all.
    """

    reduction_factor: int = DEFAULT_REDUCTION_FACTOR
    iterations: int = DEFAULT_ITERATIONS
    offsets: Optional[List[Point]] = None

    @classmethod
    def from_args(cls, params: Sequence) -> 'FractalConfig':
        """
        Build from the positional form [reduction iterations [x y]...].

        With no params the defaults apply. Once a reduction and iteration count
        are given, only the listed offsets are used, so none means no pastes.
        A reduction factor without an iteration count leaves an odd number of
        trailing values and is rejected.
        """
        if not params:
            return cls()
        if len(params) < 2:
            raise InvalidArgumentError("Must have an even number of offset values")
        config = cls(
            reduction_factor=_to_int(params[0], "Reduction factor"),
            iterations=_to_int(params[1], "Iterations"),
            offsets=parse_offset_values(list(params[2:])),
        )
        config.validate()
        return config

    def validate(self):
        """Raise InvalidArgumentError unless the core can run with these values."""
        if self.reduction_factor < 1:
            raise InvalidArgumentError(f"Reduction factor must be >= 1, got {self.reduction_factor}")
        if self.iterations < 0:
            raise InvalidArgumentError(f"Iterations must be >= 0, got {self.iterations}")
        if self.offsets is not None and len(self.offsets) > MAX_OFFSETS:
            raise InvalidArgumentError(f"Too many offset values provided. Max {MAX_OFFSETS}.")

    def resolve_offsets(self, width: int, height: int) -> List[Point]:
        """Configured offsets, or the centre of a width x height image if none were given."""
        if self.offsets is not None:
            return [Point(*p) for p in self.offsets]
        return [Point(width // 2, height // 2)]
