
from __future__ import annotations
import os, sys, argparse, numpy as np, pandas as pd
from typing import Optional, List, Sequence
from .io.readers import discover_files, read_any_curve
from .preprocess.resample import build_grid, equally_spaced, DEFAULT_VARIANT, VARIANTS
from .preprocess.normalize import l2_normalize
from .types import Exclusion

def parse_exclusion(text: str)->Exclusion:
    # "A:B" 形式（argparse の type= として使う）
    parts=text.split(":")
    if len(parts)!=2: raise argparse.ArgumentTypeError(f"exclusion must look like FROM:TO, got {text!r}")
    try: return Exclusion(float(parts[0]), float(parts[1]))
    except ValueError: raise argparse.ArgumentTypeError(f"exclusion bounds must be numbers, got {text!r}")

def run_dir(input_dir: str, xmin: float, xmax: float, step: float, variant: str = DEFAULT_VARIANT,
            exclusions: Sequence[Exclusion] = (), l2: bool = False, out_dir: Optional[str] = None)->int:
    if not os.path.isdir(input_dir):
        sys.stderr.write(f"[ERR] Not a directory: {input_dir}\n"); return 1
    try: grid=build_grid(xmin, xmax, step)
    except ValueError as e: sys.stderr.write(f"[ERR] Grid error: {e}\n"); return 1

    files=discover_files(input_dir)
    if not files:
        sys.stderr.write("[ERR] No candidate curve files.\n"); return 1

    rows=[]; labels=[]; skipped=[]; axis=None
    for fp in files:
        base=os.path.basename(fp)
        try:
            c=read_any_curve(fp)
            r=equally_spaced(c, from_=float(grid[0]), to=float(grid[-1]), number_of_points=len(grid),
                             variant=variant, exclusions=exclusions)
            if l2:
                r=l2_normalize(r)
                if r is None: raise ValueError("norm==0")
        except Exception as e:
            skipped.append((base, str(e))); continue
        rows.append(r.y); labels.append(base); axis=r.x

    if not rows:
        sys.stderr.write("[ERR] No valid curves.\n"); return 1
    X=np.vstack(rows)

    out_dir=out_dir or os.getcwd()
    patterns_csv=os.path.join(out_dir,"resampled_patterns.csv")
    np.savetxt(patterns_csv, X, delimiter=",")
    axis_csv=os.path.join(out_dir,"axis.csv")
    np.savetxt(axis_csv, axis, delimiter=",")

    tgt_df=pd.DataFrame({"file": labels, "label": list(range(len(labels))) })
    targets_csv=os.path.join(out_dir, "targets.csv")
    tgt_df.to_csv(targets_csv, index=False)

    print(f"[OK] files={len(labels)} skipped={len(skipped)} points={len(axis)} variant={variant}")
    if skipped:
        for n,r in skipped[:10]: print(f"   [skip] {n}: {r}")
        if len(skipped)>10: print(f"   ... and {len(skipped)-10} more")
    print(f"[OK] resampled_patterns -> {patterns_csv}  (numeric-only)")
    print(f"[OK] axis -> {axis_csv}")
    print(f"[OK] targets -> {targets_csv}")
    return 0

def main(argv: Optional[List[str]] = None)->int:
    ap=argparse.ArgumentParser(description="curves -> dataset (equally spaced grid, optional exclusions)")
    ap.add_argument("input_dir")
    ap.add_argument("--xmin", type=float, default=10.0)
    ap.add_argument("--xmax", type=float, default=80.0)
    ap.add_argument("--step", type=float, default=0.02)
    ap.add_argument("--variant", choices=sorted(VARIANTS), default=DEFAULT_VARIANT)
    ap.add_argument("--exclude", type=parse_exclusion, action="append", default=[])
    ap.add_argument("--l2", action="store_true")
    ap.add_argument("--out-dir", default=None)
    args=ap.parse_args(argv)
    return run_dir(args.input_dir, args.xmin, args.xmax, args.step, args.variant, args.exclude, args.l2, args.out_dir)
