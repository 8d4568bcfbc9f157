# geometry/hittable.py
from dataclasses import dataclass
from typing import Any
from core.vector import Vector3

@dataclass(frozen=True)
class Intersection:
    """
    Records details of a ray-shape intersection.

    Created fresh by each successful intersect() call; the shape never
    touches it afterwards.
    """
    t: float            # Ray parameter at intersection
    position: Vector3   # Intersection point
    normal: Vector3     # Surface normal at intersection
    material: Any = None
