from typing import Sequence

from .math import Point


def solve_tridiagonal(bd: Sequence[float], d: Sequence[float], ad: Sequence[float],
                      rhs: Sequence[Point]) -> list[Point]:
    """
    Thomas algorithm for a tridiagonal system whose right-hand side holds 2D
    points. x and y are eliminated in the same pass but are independent.

      bd: sub-diagonal (bd[0] is unused)
      d:  diagonal
      ad: super-diagonal (ad[-1] is unused)

    Pivots are not checked: an exactly zero pivot raises ZeroDivisionError,
    a near-zero one blows the solution up.
    """
    size = len(d)
    if not (len(bd) == len(ad) == len(rhs) == size):
        raise ValueError("coefficient and rhs sequences must have the same length")
    if size < 2:
        raise ValueError(f"tridiagonal system needs at least 2 rows, got {size}")

    ad = [float(v) for v in ad]
    rx = [float(p[0]) for p in rhs]
    ry = [float(p[1]) for p in rhs]

    # forward elimination
    ad[0] = ad[0] / d[0]
    rx[0] = rx[0] / d[0]
    ry[0] = ry[0] / d[0]

    for i in range(1, size - 1):
        m = d[i] - bd[i] * ad[i - 1]
        ad[i] = ad[i] / m
        rx[i] = (rx[i] - bd[i] * rx[i - 1]) / m
        ry[i] = (ry[i] - bd[i] * ry[i - 1]) / m

    last = size - 1
    m = d[last] - bd[last] * ad[last - 1]
    rx[last] = (rx[last] - bd[last] * rx[last - 1]) / m
    ry[last] = (ry[last] - bd[last] * ry[last - 1]) / m

    # back substitution
    solution: list[Point] = [(0.0, 0.0)] * size
    solution[last] = (rx[last], ry[last])
    for i in range(last - 1, -1, -1):
        nx, ny = solution[i + 1]
        solution[i] = (rx[i] - ad[i] * nx, ry[i] - ad[i] * ny)
    return solution
