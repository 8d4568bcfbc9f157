# geometry/sphere.py
import math
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import Intersection

class Sphere:
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material=None):
        self.center = center
        self.radius = radius
        self.material = material

    @property
    def radius(self) -> float:
        return self._radius

    @radius.setter
    def radius(self, value: float):
        self._radius = value
        self.radius_squared = value * value

    def intersect(self, ray: Ray, t_min: float, t_max: float) -> Optional[Intersection]:
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        b = 2 * ray.direction.dot(oc)
        c = oc.dot(oc) - self.radius_squared

        # Zero-length direction
        if a == 0:
            return None

        delta = b * b - 4 * a * c
        if delta < 0:
            return None

        delta = math.sqrt(delta)
        t1 = (-b - delta) / (2 * a)
        t2 = (-b + delta) / (2 * a)

        # Near root unless it is behind the origin (ray starts inside)
        t = t1 if t1 >= 0 else t2
        if t < 0 or t < t_min or t > t_max:
            return None

        position = ray.at(t)
        normal = (position - self.center).normalize()
        return Intersection(t, position, normal, self.material)

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"
