# geometry/world.py
import logging
from typing import Iterable, List, Optional
from core.ray import Ray
from geometry import Shape, intersect
from geometry.hittable import Intersection

logger = logging.getLogger(__name__)

class ShapeList:
    """
    An ordered list of shapes. hit() returns the closest intersection by
    narrowing t_max to the nearest hit found so far.
    """
    def __init__(self, shapes: Optional[Iterable[Shape]] = None):
        self.objects: List[Shape] = list(shapes) if shapes is not None else []

    def add(self, obj: Shape):
        self.objects.append(obj)

    def extend(self, objs: Iterable[Shape]):
        before = len(self.objects)
        self.objects.extend(objs)
        logger.debug("Added %d shapes (%d total)", len(self.objects) - before, len(self.objects))

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[Intersection]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = intersect(obj, ray, t_min, closest_so_far)
            # Strictly closer only, so ties keep the earlier shape
            if rec is not None and (hit_record is None or rec.t < hit_record.t):
                closest_so_far = rec.t
                hit_record = rec
        return hit_record
