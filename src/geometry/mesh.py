# geometry/mesh.py
import logging
from concurrent.futures import CancelledError, Future
from typing import Callable, List, Optional, Sequence
import numpy as np
from core.vector import Vector3
from geometry.triangle import Triangle

logger = logging.getLogger(__name__)

class MeshError(Exception):
    """Raised when mesh data cannot be turned into triangles."""

class Face:
    """Indices of a triangular face plus optional per-corner normals."""
    def __init__(self, a: int, b: int, c: int,
                 vertex_normals: Optional[Sequence[Vector3]] = None):
        self.a = a
        self.b = b
        self.c = c
        self.vertex_normals = list(vertex_normals) if vertex_normals is not None else None

    def __repr__(self) -> str:
        return f"Face({self.a}, {self.b}, {self.c})"

class Mesh:
    """
    Indexed triangle mesh as delivered by a mesh loader.
    Vertices are stored as an (N, 3) float array.
    """
    def __init__(self, vertices, faces: Sequence[Face]):
        self.vertices = np.asarray(vertices, dtype=np.float64).reshape(-1, 3)
        self.faces: List[Face] = list(faces)

    @classmethod
    def from_arrays(cls, vertices, indices) -> "Mesh":
        """Build a mesh from a vertex array and an (M, 3) index array."""
        indices = np.asarray(indices, dtype=np.int64).reshape(-1, 3)
        faces = [Face(int(a), int(b), int(c)) for a, b, c in indices]
        return cls(vertices, faces)

    def vertex(self, index: int) -> Vector3:
        return Vector3.from_array(self.vertices[index])

    def _face_indices(self) -> np.ndarray:
        return np.array([(f.a, f.b, f.c) for f in self.faces], dtype=np.int64).reshape(-1, 3)

    def _face_cross(self) -> np.ndarray:
        idx = self._face_indices()
        va = self.vertices[idx[:, 0]]
        vb = self.vertices[idx[:, 1]]
        vc = self.vertices[idx[:, 2]]
        # (c - b) x (a - b), length proportional to face area
        return np.cross(vc - vb, va - vb)

    def compute_face_normals(self) -> np.ndarray:
        """Unit normal per face, shape (M, 3). Degenerate faces get zeros."""
        normals = self._face_cross()
        lengths = np.linalg.norm(normals, axis=1, keepdims=True)
        return np.divide(normals, lengths, out=np.zeros_like(normals), where=lengths > 0)

    def compute_vertex_normals(self) -> np.ndarray:
        """
        Area-weighted vertex normals, shape (N, 3).

        Each face's vertex_normals is replaced by the normals of its three
        corners, which is what smooth shading interpolates.
        """
        normals = np.zeros_like(self.vertices)
        if self.faces:
            idx = self._face_indices()
            cross = self._face_cross()
            for corner in range(3):
                np.add.at(normals, idx[:, corner], cross)
        lengths = np.linalg.norm(normals, axis=1, keepdims=True)
        normals = np.divide(normals, lengths, out=np.zeros_like(normals), where=lengths > 0)

        for face in self.faces:
            face.vertex_normals = [
                Vector3.from_array(normals[face.a]),
                Vector3.from_array(normals[face.b]),
                Vector3.from_array(normals[face.c]),
            ]
        return normals

    def validate(self):
        count = len(self.vertices)
        for i, face in enumerate(self.faces):
            for index in (face.a, face.b, face.c):
                if not isinstance(index, (int, np.integer)):
                    raise MeshError(f"face {i} has non-integer vertex index {index!r}")
                if not 0 <= index < count:
                    raise MeshError(f"face {i} references vertex {index}, mesh has {count}")

    def __len__(self) -> int:
        return len(self.faces)

def mesh_to_triangles(mesh: Mesh, material, smooth_normals: bool = False) -> List[Triangle]:
    """
    One Triangle per face. With smooth_normals the vertex normals are
    computed first and passed to every triangle; otherwise triangles are flat.
    """
    mesh.validate()
    if smooth_normals:
        mesh.compute_vertex_normals()

    triangles = []
    for face in mesh.faces:
        p0 = mesh.vertex(face.a)
        p1 = mesh.vertex(face.b)
        p2 = mesh.vertex(face.c)
        if smooth_normals:
            n0, n1, n2 = face.vertex_normals
            triangles.append(Triangle(p0, p1, p2, material, n0, n1, n2))
        else:
            triangles.append(Triangle(p0, p1, p2, material))

    logger.debug("Converted %d faces (smooth=%s)", len(triangles), smooth_normals)
    return triangles

def load_mesh_shapes(future: Future, material, smooth_normals: bool, shapes: list,
                     on_loaded: Optional[Callable[[List[Triangle]], None]] = None,
                     on_error: Optional[Callable[[BaseException], None]] = None) -> Future:
    """
    Append the triangles of a mesh that is still loading.

    When the future resolves, its triangles are appended to shapes and
    on_loaded is called once. If loading or conversion fails nothing is
    appended and on_error is called once with the exception (a
    CancelledError if the load was cancelled). The shapes
    must not be queried until one of the two callbacks has run.
    """
    def _done(done: Future):
        if done.cancelled():
            exc = CancelledError()
        else:
            exc = done.exception()
        if exc is None:
            # Anything that is not a usable Mesh goes to on_error
            try:
                triangles = mesh_to_triangles(done.result(), material, smooth_normals)
            except (MeshError, IndexError, TypeError, ValueError, AttributeError) as e:
                exc = e
        if exc is not None:
            logger.error("Mesh load failed: %s", exc)
            if on_error is not None:
                on_error(exc)
            return

        shapes.extend(triangles)
        logger.info("Loaded mesh with %d triangles", len(triangles))
        if on_loaded is not None:
            on_loaded(triangles)

    future.add_done_callback(_done)
    return future
