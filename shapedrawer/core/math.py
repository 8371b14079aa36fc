from typing import Literal

Point = tuple[float, float]
Op = tuple[Literal["M", "L", "C", "Z"], tuple]


def dist2(a: Point, b: Point) -> float:
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy


def add(a: Point, b: Point) -> Point:
    return a[0] + b[0], a[1] + b[1]


def scale(a: Point, k: float) -> Point:
    return a[0] * k, a[1] * k


def midpoint(a: Point, b: Point) -> Point:
    return 0.5 * (a[0] + b[0]), 0.5 * (a[1] + b[1])


def reflect(p: Point, about: Point) -> Point:
    """Mirror p through `about` (2*about - p)."""
    return 2.0 * about[0] - p[0], 2.0 * about[1] - p[1]


def triangle_area2(p0: Point, tap: Point, p1: Point) -> float:
    """
    Twice the unsigned area of triangle p0-tap-p1. Zero when the three
    points are collinear.
    """
    return abs(p0[0] * (tap[1] - p1[1])
               + tap[0] * (p1[1] - p0[1])
               + p1[0] * (p0[1] - tap[1]))


def project_point_to_segment(p: Point, a: Point, b: Point) -> tuple[Point, float]:
    ax, ay = a; bx, by = b; px, py = p
    vx, vy = bx - ax, by - ay
    denom = vx * vx + vy * vy
    if denom == 0.0:
        dx = px - ax; dy = py - ay
        return a, dx * dx + dy * dy
    t = ((px - ax) * vx + (py - ay) * vy) / denom
    if t < 0.0:
        qx, qy = ax, ay
    elif t > 1.0:
        qx, qy = bx, by
    else:
        qx, qy = ax + t * vx, ay + t * vy
    dx = px - qx; dy = py - qy
    return (qx, qy), dx * dx + dy * dy


def min_dist2_to_polyline(p: Point, polyline: list[Point]) -> float:
    """Squared distance from p to the nearest point of an open polyline."""
    if not polyline:
        return float("inf")
    if len(polyline) == 1:
        return dist2(p, polyline[0])
    best = float("inf")
    for a, b in zip(polyline, polyline[1:]):
        _, d2 = project_point_to_segment(p, a, b)
        if d2 < best:
            best = d2
    return best


def cubic_eval(p0: Point, c1: Point, c2: Point, p3: Point, t: float) -> Point:
    u = 1.0 - t
    uu = u * u
    tt = t * t
    uuu = uu * u
    ttt = tt * t
    x = uuu * p0[0] + 3.0 * uu * t * c1[0] + 3.0 * u * tt * c2[0] + ttt * p3[0]
    y = uuu * p0[1] + 3.0 * uu * t * c1[1] + 3.0 * u * tt * c2[1] + ttt * p3[1]
    return (x, y)


def flatten_ops(ops: list[Op], per_segment: int = 32) -> list[Point]:
    """
    Sample a list of drawing ops into a polyline. Cubics get `per_segment`
    samples each, lines contribute their endpoint, "Z" closes back to the
    last move-to.
    """
    per = max(1, per_segment)
    out: list[Point] = []
    start: Point | None = None
    cur: Point | None = None
    for op, data in ops:
        if op == "M":
            start = cur = data
            out.append(data)
        elif op == "L":
            out.append(data)
            cur = data
        elif op == "C":
            c1, c2, p3 = data
            p0 = cur if cur is not None else c1
            for i in range(1, per + 1):
                out.append(cubic_eval(p0, c1, c2, p3, i / per))
            cur = p3
        elif op == "Z":
            if start is not None and cur != start:
                out.append(start)
            cur = start
    return out
