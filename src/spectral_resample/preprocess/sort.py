from __future__ import annotations
import numpy as np
from ..errors import LengthMismatch
from ..types import Curve, as_curve

def sort_x(curve, reverse: bool = False)->Curve:
    # (x, y) の組を x で安定ソート。同じ x の組は元の順序を保つ
    c=as_curve(curve)
    if c.x.size!=c.y.size: raise LengthMismatch("the x and y vector doesn't have the same size.")
    o=np.argsort(-c.x if reverse else c.x, kind="stable")
    return Curve(c.x[o], c.y[o], c.meta)
