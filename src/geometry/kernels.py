# geometry/kernels.py
# Batched versions of the sphere and triangle intersection contracts, one ray
# per array row. Both contracts reject t < 0, so MISS is never a valid hit.
# Imported on its own (geometry.kernels) so that the scalar shapes do not pull
# in numba.

import math
import numpy as np
from numba import njit, prange

MISS = -1.0

@njit
def _det3(a, b, c, d, e, f, g, h, i):
    return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)

@njit
def _sphere_t(o, d, c, r2, t_min, t_max):
    ocx = o[0] - c[0]
    ocy = o[1] - c[1]
    ocz = o[2] - c[2]
    a = d[0] * d[0] + d[1] * d[1] + d[2] * d[2]
    if a == 0.0:
        return MISS
    b = 2.0 * (d[0] * ocx + d[1] * ocy + d[2] * ocz)
    cc = ocx * ocx + ocy * ocy + ocz * ocz - r2

    delta = b * b - 4.0 * a * cc
    if delta < 0.0:
        return MISS
    delta = math.sqrt(delta)
    t1 = (-b - delta) / (2.0 * a)
    t2 = (-b + delta) / (2.0 * a)
    t = t1 if t1 >= 0.0 else t2
    if t < 0.0 or t < t_min or t > t_max:
        return MISS
    return t

@njit
def _triangle_t(o, d, p0, p1, p2, t_min, t_max):
    e0x = p2[0] - p0[0]
    e0y = p2[1] - p0[1]
    e0z = p2[2] - p0[2]
    e1x = p2[0] - p1[0]
    e1y = p2[1] - p1[1]
    e1z = p2[2] - p1[2]
    rx = p2[0] - o[0]
    ry = p2[1] - o[1]
    rz = p2[2] - o[2]

    det = _det3(d[0], e0x, e1x, d[1], e0y, e1y, d[2], e0z, e1z)
    if det == 0.0:
        return MISS, 0.0, 0.0

    t = _det3(rx, e0x, e1x, ry, e0y, e1y, rz, e0z, e1z) / det
    alpha = _det3(d[0], rx, e1x, d[1], ry, e1y, d[2], rz, e1z) / det
    beta = _det3(d[0], e0x, rx, d[1], e0y, ry, d[2], e0z, rz) / det

    if t < 0.0 or alpha < 0.0 or beta < 0.0:
        return MISS, 0.0, 0.0
    if alpha + beta > 1.0:
        return MISS, 0.0, 0.0
    if t < t_min or t > t_max:
        return MISS, 0.0, 0.0
    return t, alpha, beta

@njit(parallel=True)
def _sphere_kernel(origins, directions, center, r2, t_min, t_max, out):
    for k in prange(origins.shape[0]):
        out[k] = _sphere_t(origins[k], directions[k], center, r2, t_min, t_max)

@njit(parallel=True)
def _triangle_kernel(origins, directions, p0, p1, p2, t_min, t_max, out_t, out_alpha, out_beta):
    for k in prange(origins.shape[0]):
        t, alpha, beta = _triangle_t(origins[k], directions[k], p0, p1, p2, t_min, t_max)
        out_t[k] = t
        out_alpha[k] = alpha
        out_beta[k] = beta

def _as_rays(origins, directions):
    origins = np.ascontiguousarray(origins, dtype=np.float64).reshape(-1, 3)
    directions = np.ascontiguousarray(directions, dtype=np.float64).reshape(-1, 3)
    if origins.shape != directions.shape:
        raise ValueError("origins and directions must have the same number of rays")
    return origins, directions

def _as_point(p):
    return np.ascontiguousarray(np.asarray(tuple(p), dtype=np.float64).reshape(3))

def sphere_hits(origins, directions, center, radius: float,
                t_min: float, t_max: float) -> np.ndarray:
    """
    Hit parameter of every ray against one sphere, MISS where there is none.
    """
    origins, directions = _as_rays(origins, directions)
    out = np.empty(origins.shape[0], dtype=np.float64)
    _sphere_kernel(origins, directions, _as_point(center), float(radius) * float(radius),
                   float(t_min), float(t_max), out)
    return out

def triangle_hits(origins, directions, p0, p1, p2, t_min: float, t_max: float):
    """
    Hit parameter and barycentric (alpha, beta) of every ray against one
    triangle. Returns three arrays; t is MISS and alpha, beta are 0 on a miss.
    """
    origins, directions = _as_rays(origins, directions)
    n = origins.shape[0]
    out_t = np.empty(n, dtype=np.float64)
    out_alpha = np.empty(n, dtype=np.float64)
    out_beta = np.empty(n, dtype=np.float64)
    _triangle_kernel(origins, directions, _as_point(p0), _as_point(p1), _as_point(p2),
                     float(t_min), float(t_max), out_t, out_alpha, out_beta)
    return out_t, out_alpha, out_beta
