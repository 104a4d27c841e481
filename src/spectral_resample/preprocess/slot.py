from __future__ import annotations
from dataclasses import dataclass
import numpy as np
from ..errors import NonMonotonicInput, TooFewPoints
from .buckets import bucket_step

@dataclass
class _Slot:
    total: float = 0.0
    count: int = 0

    def add(self, v: float):
        self.total+=v; self.count+=1

    def mean(self)->float:
        return self.total/self.count if self.count>0 else 0.0

def equally_spaced_slot(x, y, from_: float, to: float, number_of_points: int)->np.ndarray:
    # "slot": バケット (lo, hi] に入った y の単純平均。サンプルがなければ 0
    x=np.asarray(x, float); y=np.asarray(y, float)
    if x.size==0: raise TooFewPoints("cannot resample an empty curve")
    if np.any(np.diff(x)<=0): raise NonMonotonicInput("x must be an increasing series")
    step=bucket_step(from_, to, number_of_points)

    if step==0:
        hit=x==from_
        return np.full(number_of_points, float(y[hit].mean()) if hit.any() else 0.0)

    output=np.zeros(number_of_points)
    lo=from_-step/2; hi=lo+step
    slot=_Slot(); j=0
    for xi, yi in zip(x.tolist(), y.tolist()):
        while xi>hi:
            output[j]=slot.mean(); j+=1
            if j==number_of_points: return output
            lo, hi = hi, hi+step
            slot=_Slot()
        if xi>lo: slot.add(yi)
    output[j]=slot.mean()
    return output
