
from __future__ import annotations
import sys, pandas as pd
from .preprocess.resample import equally_spaced
from .preprocess.closest import closest_x
from .types import Curve

def _read_curve(path: str, x_col, y_col)->Curve:
    df = pd.read_csv(path)
    # 列名の指定がなければ先頭 2 列を (x, y) とみなす
    if x_col is None and len(df.columns) > 0: x_col = df.columns[0]
    if y_col is None and len(df.columns) > 1: y_col = df.columns[1]
    if x_col not in df.columns or y_col not in df.columns:
        raise SystemExit(f"expected columns {x_col!r},{y_col!r} in {path}")
    return Curve(df[x_col].astype(float).to_numpy(), df[y_col].astype(float).to_numpy(), {"x_col": x_col, "y_col": y_col})

def curve_entry(args)->int:
    try:
        c = _read_curve(args.in_csv, args.x_col, args.y_col)
        r = equally_spaced(c, from_=args.from_, to=args.to, number_of_points=args.points,
                           variant=args.variant, exclusions=args.exclude)
    except ValueError as e:
        sys.stderr.write(f"[ERR] {e}\n"); return 1
    pd.DataFrame({c.meta["x_col"]: r.x, c.meta["y_col"]: r.y}).to_csv(args.out_csv, index=False)
    print(f"[OK] wrote {args.out_csv} ({len(r.x)} points, {args.variant})")
    return 0

def nearest_entry(args)->int:
    try:
        c = _read_curve(args.in_csv, args.x_col, args.y_col)
        p = closest_x(c, args.target, reverse=args.reverse)
    except ValueError as e:
        sys.stderr.write(f"[ERR] {e}\n"); return 1
    print(f"{p.x},{p.y}")
    return 0
