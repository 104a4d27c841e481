# "smooth": 両端に y=0 の仮想点を足した折れ線を各バケットで積分し、幅で割る（面積保存）
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple
import numpy as np
from ..errors import TooFewPoints
from .buckets import bucket_step

def _padded_knots(x: np.ndarray, y: np.ndarray)->Iterator[Tuple[float, float]]:
    yield float(x[0]-(x[1]-x[0])), 0.0
    yield from zip(x.tolist(), y.tolist())
    yield float(x[-1]+(x[-1]-x[-2])), 0.0
    yield math.inf, 0.0

@dataclass
class _Segment:
    # left=None: -inf から最初の仮想点までのゼロ区間
    left: Optional[float]
    left_y: float
    right: float
    right_y: float
    area: float = 0.0  # -inf から left までの積分

    def advance(self, x: float, y: float):
        if self.left is not None:
            self.area += 0.5*(self.left_y+self.right_y)*(self.right-self.left)
        self.left, self.left_y = self.right, self.right_y
        self.right, self.right_y = x, y

    def slope(self)->float:
        return (self.right_y-self.left_y)/(self.right-self.left)

    def integral_to(self, t: float)->float:
        if self.left is None: return 0.0
        d=t-self.left
        return self.area + d*(self.left_y+0.5*self.slope()*d)

    def value_at(self, t: float)->float:
        if self.left is None: return 0.0
        return self.left_y + self.slope()*(t-self.left)

def equally_spaced_smooth(x, y, from_: float, to: float, number_of_points: int)->np.ndarray:
    x=np.asarray(x, float); y=np.asarray(y, float)
    if x.size<2: raise TooFewPoints("at least two points are needed to resample a curve")
    step=bucket_step(from_, to, number_of_points)
    knots=_padded_knots(x, y)
    seg=_Segment(None, 0.0, *next(knots))

    def reach(t: float):
        # 区間 (left, right] に t が入るまで進める
        while seg.right<t: seg.advance(*next(knots))

    if step==0:
        reach(from_)
        return np.full(number_of_points, seg.value_at(from_))

    output=np.zeros(number_of_points)
    lo=from_-step/2; hi=from_+step/2
    reach(lo)
    at_lo=seg.integral_to(lo)
    for j in range(number_of_points):
        reach(hi)
        at_hi=seg.integral_to(hi)
        output[j]=(at_hi-at_lo)/step
        at_lo=at_hi; hi+=step
    return output
