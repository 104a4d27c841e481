from __future__ import annotations
from dataclasses import dataclass, field
from collections.abc import Mapping
from typing import Dict, Any, Optional
import numpy as np

@dataclass
class Curve: x: np.ndarray; y: np.ndarray; meta: Dict[str, Any] = field(default_factory=dict)

@dataclass(frozen=True)
class XYPoint: x: float; y: float

@dataclass(frozen=True)
class Exclusion: from_: Optional[float]; to: Optional[float]

@dataclass(frozen=True)
class Zone: from_: float; to: float; number_of_points: int

def as_curve(obj)->Curve:
    # Curve / {"x":..,"y":..} / (x, y) を受け付ける。配列はコピーして呼び出し側を変更しない
    if isinstance(obj, Curve): x, y, meta = obj.x, obj.y, dict(obj.meta)
    elif isinstance(obj, Mapping): x, y, meta = obj["x"], obj["y"], {}
    else:
        x, y = obj; meta = {}
    return Curve(np.array(x, dtype=float, ndmin=1), np.array(y, dtype=float, ndmin=1), meta)

def as_exclusion(obj)->Exclusion:
    if isinstance(obj, Exclusion): return obj
    if isinstance(obj, Mapping): return Exclusion(obj.get("from"), obj.get("to"))
    a, b = obj
    return Exclusion(a, b)
