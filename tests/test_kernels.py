import numpy as np
import pytest
from core.vector import Vector3
from core.ray import Ray
from geometry.kernels import MISS, sphere_hits, triangle_hits
from geometry.sphere import Sphere
from geometry.triangle import Triangle

def test_sphere_hits():
    origins = [[0, 0, 5], [0, 3, 5], [0, 0, 0], [0, 0, 5]]
    directions = [[0, 0, -1], [0, 0, -1], [1, 0, 0], [0, 0, 1]]
    t = sphere_hits(origins, directions, (0, 0, 0), 1.0, 0.0, 1e6)
    assert np.allclose(t, [4, MISS, 1, MISS])

def test_sphere_hits_zero_direction():
    t = sphere_hits([[0, 0, 5]], [[0, 0, 0]], (0, 0, 0), 1.0, 0.0, 1e6)
    assert t[0] == MISS

def test_triangle_hits():
    origins = [[0.2, 0.2, 1], [0.6, 0.6, 1], [0.2, 0.2, 1], [0.2, 0.2, 1]]
    directions = [[0, 0, -1], [0, 0, -1], [1, 0, 0], [0, 0, -1]]
    t, alpha, beta = triangle_hits(origins, directions, (0, 0, 0), (1, 0, 0), (0, 1, 0), 0.0, 100.0)
    assert t[0] == pytest.approx(1)
    assert alpha[0] == pytest.approx(0.6)
    assert beta[0] == pytest.approx(0.2)
    assert t[1] == MISS
    assert t[2] == MISS
    assert t[3] == pytest.approx(1)

def test_triangle_hits_range():
    t, _, _ = triangle_hits([[0.2, 0.2, 1]], [[0, 0, -1]], (0, 0, 0), (1, 0, 0), (0, 1, 0), 0.0, 0.5)
    assert t[0] == MISS

def test_kernels_agree_with_shapes():
    rng = np.random.default_rng(7)
    origins = rng.uniform(-2, 2, size=(64, 3)) + [0, 0, 6]
    targets = rng.uniform(-1.5, 1.5, size=(64, 3))
    directions = targets - origins

    sphere = Sphere(Vector3(0.1, -0.2, 0.3), 1.2)
    tri = Triangle(Vector3(-1, -1, 0), Vector3(1.5, -1, 0.5), Vector3(0, 1.5, -0.5))

    ts = sphere_hits(origins, directions, sphere.center, sphere.radius, 0.0, 100.0)
    tt, _, _ = triangle_hits(origins, directions, tri.p0, tri.p1, tri.p2, 0.0, 100.0)

    for k in range(len(origins)):
        ray = Ray(Vector3.from_array(origins[k]), Vector3.from_array(directions[k]))
        s = sphere.intersect(ray, 0.0, 100.0)
        if s is None:
            assert ts[k] == MISS
        else:
            assert ts[k] == pytest.approx(s.t)
        h = tri.intersect(ray, 0.0, 100.0)
        if h is None:
            assert tt[k] == MISS
        else:
            assert tt[k] == pytest.approx(h.t)

def test_mismatched_rays_rejected():
    with pytest.raises(ValueError):
        sphere_hits([[0, 0, 0]], [[0, 0, 1], [0, 1, 0]], (0, 0, 0), 1.0, 0.0, 1.0)
