"""GPS boundary-walk filter.

While a farmer walks the edge of a field, the location provider pushes
a fix every second or so.  ``WalkSession`` turns that stream into
boundary vertices: fixes with poor accuracy are dropped, and a fix is
only kept once the walker has moved ``min_distance_m`` from the last
kept one, so standing still does not pile up jittery near-duplicates.

The session is owned by exactly one tracking flow and is not
thread-safe.  It has no clock: walk time limits and cancellation belong
to the caller, who simply stops calling ``accept`` and takes
``to_polygon()``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from land_boundary.core.constants import DEFAULT_WALK_MAX_ACCURACY_M, DEFAULT_WALK_MIN_DISTANCE_M
from land_boundary.geometry.primitives import distance

if TYPE_CHECKING:
    from land_boundary.core.config import EngineConfig
    from land_boundary.models.point import GeoPoint

logger = logging.getLogger("land_boundary.tracking.walk")


@dataclass(slots=True)
class WalkSession:
    """Mutable accumulator of boundary points for one GPS walk.

    Attributes:
        min_distance_m: Minimum spacing between kept fixes in metres.
        max_accuracy_m: Worst acceptable reported accuracy in metres.
        last_accepted_point: Most recently kept fix, ``None`` before the first.
        collected_points: Kept fixes in walk order.
    """

    min_distance_m: float = DEFAULT_WALK_MIN_DISTANCE_M
    max_accuracy_m: float = DEFAULT_WALK_MAX_ACCURACY_M
    last_accepted_point: GeoPoint | None = None
    collected_points: list[GeoPoint] = field(default_factory=list)

    @classmethod
    def from_config(cls, config: EngineConfig) -> WalkSession:
        """Start a walk with the configured spacing and accuracy limits."""
        return cls(
            min_distance_m=config.walk_min_distance_m,
            max_accuracy_m=config.walk_max_accuracy_m,
        )

    def accept(self, fix: GeoPoint, accuracy_m: float) -> bool:
        """Offer one GPS fix to the session.

        Args:
            fix: Reported position.
            accuracy_m: Reported horizontal accuracy radius in metres.

        Returns:
            ``True`` if the fix was kept as a boundary vertex.  Rejected
            fixes leave the session untouched.
        """
        if not (math.isfinite(fix.latitude) and math.isfinite(fix.longitude)):
            logger.debug("Rejected GPS fix | reason=non_finite | fix=%s", fix)
            return False

        # NaN accuracy fails this comparison and is rejected.
        if not accuracy_m <= self.max_accuracy_m:
            logger.debug(
                "Rejected GPS fix | reason=accuracy | accuracy=%.1f m | max=%.1f m",
                accuracy_m,
                self.max_accuracy_m,
            )
            return False

        if self.last_accepted_point is not None:
            moved_m = distance(self.last_accepted_point, fix)
            if not moved_m >= self.min_distance_m:
                logger.debug(
                    "Rejected GPS fix | reason=too_close | moved=%.1f m | min=%.1f m",
                    moved_m,
                    self.min_distance_m,
                )
                return False

        self.collected_points.append(fix)
        self.last_accepted_point = fix
        return True

    @property
    def point_count(self) -> int:
        return len(self.collected_points)

    def to_polygon(self) -> list[GeoPoint]:
        """Collected vertices as a new boundary point list (ring left open)."""
        logger.info(
            "GPS walk finished | points=%d",
            len(self.collected_points),
        )
        return list(self.collected_points)
