"""Stateful boundary capture.

- WalkSession: filters a stream of GPS fixes into boundary vertices
"""

from land_boundary.tracking.walk import WalkSession

__all__ = ["WalkSession"]
