from __future__ import annotations
import os, re, glob
from typing import List
import numpy as np
from ..types import Curve
from ..preprocess.sort import sort_x

CURVE_EXTS=(".txt",".csv",".xy",".dat")
COMMENT_PREFIXES=("#",";","!","*","//")
_SPLIT=re.compile(r"[,\s;]+")

def _row(line: str):
    # 先頭 2 列が数値の行だけを (x, y) として返す
    parts=_SPLIT.split(line.strip())
    if len(parts)<2: return None
    try: return float(parts[0]), float(parts[1])
    except ValueError: return None

def discover_files(input_dir: str)->List[str]:
    files=[]
    for ext in CURVE_EXTS:
        files += glob.glob(os.path.join(input_dir, f"*{ext}")) + glob.glob(os.path.join(input_dir, f"*{ext.upper()}"))
    return sorted(set(files))

def to_curve(x, y, source: str)->Curve:
    # x 昇順に並べ、重複 x は最初の点を残す
    c=sort_x(Curve(x, y, {"source": source}))
    _, idx=np.unique(c.x, return_index=True)
    return Curve(c.x[idx], c.y[idx], c.meta)

def read_any_curve(path: str)->Curve:
    rows=[]
    with open(path,"r",encoding="utf-8",errors="ignore") as f:
        for line in f:
            s=line.strip()
            if not s or s.startswith(COMMENT_PREFIXES): continue
            r=_row(s)
            if r is not None: rows.append(r)
    if not rows: raise ValueError(f"{os.path.basename(path)}: no numeric two-column rows")
    xy=np.asarray(rows, float)
    return to_curve(xy[:,0], xy[:,1], os.path.basename(path))
