# geometry/plane.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import Intersection

class Plane:
    """
    Infinite plane through a point, with a unit normal fixed at construction.
    Both sides report the same stored normal.
    """
    def __init__(self, point: Vector3, normal: Vector3, material=None):
        self.point = point
        self.normal = normal.normalize()
        self.material = material

    def intersect(self, ray: Ray, t_min: float, t_max: float) -> Optional[Intersection]:
        denom = ray.direction.dot(self.normal)
        # Parallel ray, including a ray lying in the plane
        if denom == 0:
            return None

        t = (self.point - ray.origin).dot(self.normal) / denom
        if t < t_min or t > t_max:
            return None

        return Intersection(t, ray.at(t), self.normal, self.material)

    def __repr__(self) -> str:
        return f"Plane({self.point!r}, {self.normal!r})"
