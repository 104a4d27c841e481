
from __future__ import annotations
import argparse
from .pipeline import main as dataset_main, parse_exclusion
from .preprocess.resample import DEFAULT_NUMBER_OF_POINTS, DEFAULT_VARIANT, VARIANTS
from .curve_cli import curve_entry, nearest_entry

def build_parser()->argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="spectral-resample", description="スペクトル曲線の等間隔リサンプリング（除外区間対応）")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p = sub.add_parser("dataset", help="ディレクトリ内の曲線を共通グリッドへ変換しデータセットを生成")
    p.add_argument("input_dir")
    p.add_argument("--xmin", type=float, default=10.0)
    p.add_argument("--xmax", type=float, default=80.0)
    p.add_argument("--step", type=float, default=0.02)
    p.add_argument("--variant", choices=sorted(VARIANTS), default=DEFAULT_VARIANT)
    p.add_argument("--exclude", type=parse_exclusion, action="append", default=[], help="除外区間 FROM:TO（複数可）")
    p.add_argument("--l2", action="store_true", help="L2 正規化する")
    p.add_argument("--out-dir", default=None)

    # curve
    c = sub.add_parser("curve", help="2 列 CSV 曲線 1 本をリサンプリング")
    c.add_argument("--in-csv", required=True)
    c.add_argument("--out-csv", required=True)
    c.add_argument("--x-col", default=None)
    c.add_argument("--y-col", default=None)
    c.add_argument("--from", dest="from_", type=float, default=None)
    c.add_argument("--to", type=float, default=None)
    c.add_argument("--points", type=int, default=DEFAULT_NUMBER_OF_POINTS)
    c.add_argument("--variant", choices=sorted(VARIANTS), default=DEFAULT_VARIANT)
    c.add_argument("--exclude", type=parse_exclusion, action="append", default=[])

    # nearest
    n = sub.add_parser("nearest", help="target に最も近い x の点を表示")
    n.add_argument("--in-csv", required=True)
    n.add_argument("--target", type=float, required=True)
    n.add_argument("--x-col", default=None)
    n.add_argument("--y-col", default=None)
    n.add_argument("--reverse", action="store_true", help="x が降順の CSV")
    return parser

def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.cmd == "dataset":
        argv = [args.input_dir, "--xmin", str(args.xmin), "--xmax", str(args.xmax), "--step", str(args.step), "--variant", args.variant]
        for e in args.exclude: argv += ["--exclude", f"{e.from_}:{e.to}"]
        if args.l2: argv += ["--l2"]
        if args.out_dir: argv += ["--out-dir", args.out_dir]
        raise SystemExit(dataset_main(argv))
    elif args.cmd == "curve":
        raise SystemExit(curve_entry(args))
    elif args.cmd == "nearest":
        raise SystemExit(nearest_entry(args))
