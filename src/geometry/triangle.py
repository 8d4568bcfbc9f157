# geometry/triangle.py
from typing import Optional, Tuple
from core.vector import Vector3
from core.ray import Ray
from core.utils import column_matrix, determinant_3x3
from geometry.hittable import Intersection

class Triangle:
    """
    A single triangle with optional per-vertex normals.

    Hits are found by solving

        t * d + alpha * (P2 - P0) + beta * (P2 - P1) = P2 - O

    with Cramer's rule, so that alpha and beta are the barycentric weights
    of P0 and P1 and 1 - alpha - beta is the weight of P2.

    Smooth shading is used only when all three vertex normals are given;
    a partial set falls back to the flat face normal.
    """
    def __init__(self, p0: Vector3, p1: Vector3, p2: Vector3, material=None,
                 n0: Optional[Vector3] = None, n1: Optional[Vector3] = None,
                 n2: Optional[Vector3] = None):
        self.p0 = p0
        self.p1 = p1
        self.p2 = p2
        self.material = material
        self.n0 = n0
        self.n1 = n1
        self.n2 = n2

        self.edge0 = p2 - p0
        self.edge1 = p2 - p1
        # Operand order fixes the facing direction across adjacent faces
        self.face_normal = self.edge0.cross(self.edge1).normalize()

    @property
    def has_vertex_normals(self) -> bool:
        return self.n0 is not None and self.n1 is not None and self.n2 is not None

    def barycentric(self, ray: Ray) -> Optional[Tuple[float, float, float]]:
        """
        Solve for (t, alpha, beta). Returns None when the ray is parallel to
        the triangle or the triangle is degenerate. No range checks here.
        """
        d = ray.direction
        rhs = self.p2 - ray.origin

        det = determinant_3x3(column_matrix(d, self.edge0, self.edge1))
        if det == 0:
            return None

        t = determinant_3x3(column_matrix(rhs, self.edge0, self.edge1)) / det
        alpha = determinant_3x3(column_matrix(d, rhs, self.edge1)) / det
        beta = determinant_3x3(column_matrix(d, self.edge0, rhs)) / det
        return t, alpha, beta

    def normal_at(self, alpha: float, beta: float) -> Vector3:
        """
        Interpolated vertex normal (not renormalized) or the flat face normal.
        """
        if self.has_vertex_normals:
            return self.n0 * alpha + self.n1 * beta + self.n2 * (1 - alpha - beta)
        return self.face_normal

    def intersect(self, ray: Ray, t_min: float, t_max: float) -> Optional[Intersection]:
        solution = self.barycentric(ray)
        if solution is None:
            return None
        t, alpha, beta = solution

        if t < 0 or alpha < 0 or beta < 0:
            return None
        if alpha + beta > 1:
            return None
        if t < t_min or t > t_max:
            return None

        return Intersection(t, ray.at(t), self.normal_at(alpha, beta), self.material)

    def __repr__(self) -> str:
        return f"Triangle({self.p0!r}, {self.p1!r}, {self.p2!r})"
