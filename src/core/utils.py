# core/utils.py
from core.vector import Vector3

def determinant_3x3(mat) -> float:
    """
    Determinant of a 3x3 matrix by cofactor expansion along the first row.
    Returns 0.0 for anything that is not three rows of at least three entries.
    """
    try:
        if len(mat) < 3 or len(mat[0]) < 3 or len(mat[1]) < 3 or len(mat[2]) < 3:
            return 0.0
    except TypeError:
        return 0.0
    (a, b, c), (d, e, f), (g, h, i) = mat[0][:3], mat[1][:3], mat[2][:3]
    return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)

def column_matrix(c0: Vector3, c1: Vector3, c2: Vector3):
    """
    Row-major 3x3 matrix whose columns are c0, c1 and c2.
    """
    return (
        (c0.x, c1.x, c2.x),
        (c0.y, c1.y, c2.y),
        (c0.z, c1.z, c2.z),
    )
