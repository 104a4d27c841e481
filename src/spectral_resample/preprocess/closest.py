from __future__ import annotations
from ..errors import LengthMismatch, TooFewPoints
from ..types import XYPoint, as_curve

def closest_x(curve, target: float, reverse: bool = False)->XYPoint:
    # 二分探索で隣接 2 点まで絞り、近い方を返す（範囲外は端点にクリップ）
    # reverse=True は x が降順の系列。同距離のときは x の小さい方を返す
    # （降順の系列でも添字の小さい方 = x の大きい方ではなく、x の小さい方）
    c=as_curve(curve); x=c.x; y=c.y
    if x.size!=y.size: raise LengthMismatch("the x and y vector doesn't have the same size.")
    if x.size==0: raise TooFewPoints("cannot search an empty curve")
    sign=-1.0 if reverse else 1.0
    low, high = 0, x.size-1
    while high-low>1:
        middle=(low+high)//2
        if sign*x[middle]<sign*target: low=middle
        elif sign*x[middle]>sign*target: high=middle
        else: return XYPoint(float(x[middle]), float(y[middle]))
    d_low=abs(target-x[low]); d_high=abs(target-x[high])
    if d_low<d_high or (d_low==d_high and x[low]<=x[high]): i=low
    else: i=high
    return XYPoint(float(x[i]), float(y[i]))
