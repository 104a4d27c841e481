
from __future__ import annotations
from typing import Optional
import numpy as np
from ..types import Curve

def l2_normalize(c: Curve, eps: float=1e-12)->Optional[Curve]:
    # y の L2 正規化。ノルムが 0 / 非有限なら None（呼び出し側でスキップ）
    n=float(np.linalg.norm(c.y))
    if not np.isfinite(n) or n<=eps: return None
    return Curve(c.x, c.y/n, c.meta)
