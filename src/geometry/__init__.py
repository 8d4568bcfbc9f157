# geometry/__init__.py
from typing import Optional, Union
from core.ray import Ray
from geometry.hittable import Intersection
from geometry.plane import Plane
from geometry.sphere import Sphere
from geometry.triangle import Triangle

# The shape set is closed: anything the renderer can hit is one of these.
Shape = Union[Plane, Sphere, Triangle]
SHAPE_TYPES = (Plane, Sphere, Triangle)

def intersect(shape: Shape, ray: Ray, t_min: float, t_max: float) -> Optional[Intersection]:
    """
    Intersect a ray with any supported shape within [t_min, t_max].
    Returns None on a miss. Raises TypeError for objects that are not shapes.
    """
    if not isinstance(shape, SHAPE_TYPES):
        raise TypeError(f"not a shape: {type(shape).__name__}")
    return shape.intersect(ray, t_min, t_max)

__all__ = [
    "Intersection",
    "Plane",
    "Sphere",
    "Triangle",
    "Shape",
    "SHAPE_TYPES",
    "intersect",
]
