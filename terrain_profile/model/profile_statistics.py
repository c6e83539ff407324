"""ProfileStatistics - Aggregate metrics of an elevation profile."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class ProfileStatistics:
    """Summary of a profile, all values in meters.

    Attributes:
        length_m: Total planar (great-circle) length
        real_length_m: Total oblique length (3D per segment, summed)
        ascend_m: Total positive elevation change (non-negative)
        descend_m: Total negative elevation change as a magnitude (non-negative)
        min_elevation_m: Lowest elevation seen
        max_elevation_m: Highest elevation seen
    """

    length_m: float
    real_length_m: float
    ascend_m: float
    descend_m: float
    min_elevation_m: float
    max_elevation_m: float

    @property
    def elevation_range_m(self) -> float:
        """Difference between highest and lowest elevation."""
        return self.max_elevation_m - self.min_elevation_m

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def __repr__(self) -> str:
        return (
            f"ProfileStatistics(length={self.length_m:.0f}m, real={self.real_length_m:.0f}m, "
            f"+{self.ascend_m:.0f}m/-{self.descend_m:.0f}m, "
            f"elev={self.min_elevation_m:.0f}..{self.max_elevation_m:.0f}m)"
        )
