
from __future__ import annotations
import math, numbers
from typing import Iterable, Optional
import numpy as np
from ..errors import InvalidOption, LengthMismatch, OutOfRangePoints, TooFewPoints
from ..types import Curve, Zone, as_curve
from .zones import get_zones
from .smooth import equally_spaced_smooth
from .slot import equally_spaced_slot

DEFAULT_NUMBER_OF_POINTS=100
DEFAULT_VARIANT="smooth"
VARIANTS={"smooth": equally_spaced_smooth, "slot": equally_spaced_slot}

def build_grid(xmin: float, xmax: float, step: float)->np.ndarray:
    # 共通グリッドの生成（既存仕様のまま）
    if xmax<=xmin: raise ValueError("--xmax must be > --xmin")
    if step<=0: raise ValueError("--step must be > 0")
    n=int(math.floor((xmax-xmin)/step))+1
    return xmin+np.arange(n)*step

def _is_number(v)->bool:
    return isinstance(v, numbers.Real) and not isinstance(v, bool) and math.isfinite(v)

def _ascending(c: Curve)->Curve:
    # 入力が降順なら x, y を一緒に反転（as_curve がコピー済みなので元配列は変わらない）
    if c.x.size>1 and c.x[0]>c.x[1]:
        return Curve(c.x[::-1].copy(), c.y[::-1].copy(), c.meta)
    return c

def _process_zone(c: Curve, zone: Zone, variant: str, reverse: bool):
    n=zone.number_of_points
    y=VARIANTS[variant](c.x, c.y, zone.from_, zone.to, n)
    # 1 点のゾーンはバケット中心 (from_) を向きによらず出力する
    if n==1: return np.array([float(zone.from_)]), y
    if reverse: return np.linspace(zone.to, zone.from_, n), y[::-1]
    return np.linspace(zone.from_, zone.to, n), y

def equally_spaced(curve, *, from_: Optional[float] = None, to: Optional[float] = None,
                   variant: str = DEFAULT_VARIANT, number_of_points: int = DEFAULT_NUMBER_OF_POINTS,
                   exclusions: Iterable = ())->Curve:
    """Resample a curve onto number_of_points equally spaced abscissas.

    The curve may be ascending or descending in x. from_/to default to the
    first/last abscissa of the (ascending) curve; from_ > to produces output
    in descending x order. Exclusions are skipped: each remaining zone gets
    points in proportion to its width and is resampled on its own.
    """
    c=_ascending(as_curve(curve))
    if c.x.size!=c.y.size: raise LengthMismatch("the x and y vector doesn't have the same size.")
    if c.x.size<2: raise TooFewPoints("at least two points are needed to resample a curve")
    if from_ is None: from_=float(c.x[0])
    if to is None: to=float(c.x[-1])
    if not _is_number(from_): raise InvalidOption("from", "'from' option must be a number")
    if not _is_number(to): raise InvalidOption("to", "'to' option must be a number")
    if not _is_number(number_of_points) or number_of_points!=int(number_of_points):
        raise InvalidOption("numberOfPoints", "'numberOfPoints' option must be an integer")
    number_of_points=int(number_of_points)
    if number_of_points<1: raise OutOfRangePoints("the number of points must be at least 1")
    if variant not in VARIANTS: raise InvalidOption("variant", f"'variant' option must be one of {sorted(VARIANTS)}")

    reverse=from_>to
    if reverse: from_, to = to, from_
    zones=get_zones(from_, to, number_of_points, exclusions, reverse=reverse)

    xs=[]; ys=[]
    for zone in zones:
        if zone.number_of_points<1: continue
        zx, zy = _process_zone(c, zone, variant, reverse)
        xs.append(zx); ys.append(zy)
    return Curve(np.concatenate(xs), np.concatenate(ys), c.meta)
