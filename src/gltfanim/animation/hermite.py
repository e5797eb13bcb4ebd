"""
Hermite Spline

Cubic Hermite interpolation used to resample CUBICSPLINE channels.
"""


def sample_hermite_spline(t: float, p0, m0, p1, m1):
    """
    Evaluate a cubic Hermite spline.

    p(t) = (2t^3 - 3t^2 + 1)p0 + (t^3 - 2t^2 + t)m0
         + (-2t^3 + 3t^2)p1 + (t^3 - t^2)m1

    Works with any value supporting scalar multiply and add (floats,
    numpy arrays of vectors or quaternion components).

    Args:
        t: Interpolation parameter in [0, 1]
        p0: Value at t = 0
        m0: Tangent at t = 0, already scaled by the interval length
        p1: Value at t = 1
        m1: Tangent at t = 1, already scaled by the interval length

    Returns:
        Interpolated value
    """
    t2 = t * t
    t3 = t2 * t

    a = 2.0 * t3 - 3.0 * t2 + 1.0
    b = t3 - 2.0 * t2 + t
    c = -2.0 * t3 + 3.0 * t2
    d = t3 - t2

    return p0 * a + m0 * b + p1 * c + m1 * d
