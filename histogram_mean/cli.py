import argparse
import json
import sys
import time
from pathlib import Path

from .config_ini import DEFAULT_LABEL, DEFAULT_PRECISION, load_report_config
from .excel_writer import build_json_summary, write_xlsx
from .stats import EmptyDistribution, InvalidInput

_T0 = time.time()


def status(msg: str, enabled: bool = True):
    """Emit a lightweight progress message to stderr."""
    if not enabled:
        return
    dt = time.time() - _T0
    print(f"[{dt:6.1f}s] {msg}", file=sys.stderr, flush=True)


def format_report(summary: dict, precision: int) -> list[str]:
    lines = [
        f"sum {summary['total_weighted_sum']} {summary['total_count']}",
        f"mean {summary['mean']:.{precision}f}",
    ]
    for key, bucket in summary.get("quantiles", {}).items():
        lines.append(f"{key} {bucket}")
    return lines


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="histogram-mean: weighted mean of an index=value histogram (bucket i holds counts[i] observations of value i)."
    )
    parser.add_argument("counts", nargs="*", type=int, help="Bucket counts, index 0 first")
    parser.add_argument("--label", help=f"Name of the distribution in reports (default: {DEFAULT_LABEL})")
    parser.add_argument("--precision", type=int, help=f"Decimals for the printed mean (default: {DEFAULT_PRECISION})")
    parser.add_argument("--config", help="Optional key=value config with label/precision/quantiles defaults")
    parser.add_argument(
        "--quantile",
        type=float,
        action="append",
        help="Also report the bucket at this quantile (0..1). Repeatable, e.g. --quantile 0.5 --quantile 0.9",
    )
    parser.add_argument("--json", action="store_true", help="Print a JSON summary instead of text lines")
    parser.add_argument("--xlsx", help="Also write an .xlsx report to this path")
    parser.add_argument("--quiet", action="store_true", help="Suppress progress output")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    status_enabled = not bool(args.quiet)

    config_info = {"label": DEFAULT_LABEL, "precision": DEFAULT_PRECISION, "quantiles": []}
    if args.config:
        cfg_path = Path(args.config)
        if not cfg_path.exists():
            parser.error(f"config file not found: {cfg_path}")
        status(f"Loading config ({cfg_path.name})", status_enabled)
        config_info = load_report_config(str(cfg_path))

    label = args.label or config_info["label"]
    precision = args.precision if args.precision is not None else config_info["precision"]
    if precision < 0:
        parser.error("--precision must be >= 0")
    quantiles = args.quantile if args.quantile else config_info["quantiles"]
    for q in quantiles:
        if not 0.0 <= q <= 1.0:
            parser.error(f"quantile must be within [0, 1]: {q}")

    status(f"Computing mean over {len(args.counts)} bucket(s)", status_enabled)
    run = {"label": label, "counts": args.counts}
    try:
        summary = build_json_summary([run], quantiles)[0]
    except InvalidInput as exc:
        parser.error(str(exc))
    except EmptyDistribution as exc:
        print(f"no data: {exc}", file=sys.stderr)
        return 1

    if args.xlsx:
        status("Building Excel workbook", status_enabled)
        write_xlsx(
            [run],
            args.xlsx,
            quantiles=quantiles,
            precision=precision,
            status_cb=(lambda m: status(m, status_enabled)),
        )

    if args.json:
        print(json.dumps(summary, indent=2))
    else:
        for line in format_report(summary, precision):
            print(line)

    status("Done", status_enabled)
    return 0


if __name__ == "__main__":
    sys.exit(main())
