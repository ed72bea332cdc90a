from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill

from .stats import compute_mean, histogram_quantile

HEADER_FILL = PatternFill(start_color="DDEBF7", end_color="DDEBF7", fill_type="solid")


def set_basic_column_widths(ws, widths):
    for col, w in widths.items():
        ws.column_dimensions[col].width = w


def _style_header(ws, row: int = 1):
    for cell in ws[row]:
        cell.font = Font(bold=True)
        cell.fill = HEADER_FILL
        cell.alignment = Alignment(horizontal="center", vertical="center")


def quantile_label(q) -> str:
    """Column/key name for a quantile, e.g. 0.5 -> "q0.5", 1.0 -> "q1"."""
    return f"q{q:g}"


def build_json_summary(runs, quantiles=None):
    """Summary dicts for a list of ``{"label", "counts"}`` runs."""
    quantiles = list(quantiles or [])
    out = []
    for run in runs:
        counts = run["counts"]
        entry = {"label": run["label"], "buckets": len(counts)}
        entry.update(compute_mean(counts).as_dict())
        if quantiles:
            entry["quantiles"] = {quantile_label(q): histogram_quantile(counts, q) for q in quantiles}
        out.append(entry)
    return out


def write_xlsx(runs, out_path: str, quantiles=None, precision: int = 4, status_cb=None):
    """Write a Summary sheet plus one bucket table per run."""

    def _status(msg: str):
        if status_cb is not None:
            status_cb(msg)

    quantiles = list(quantiles or [])
    summaries = build_json_summary(runs, quantiles)

    _status("Creating workbook")
    wb = Workbook()
    ws_sum = wb.active
    ws_sum.title = "Summary"

    headers = ["label", "total_count", "total_weighted_sum", "mean"] + [quantile_label(q) for q in quantiles]
    ws_sum.append(headers)
    _style_header(ws_sum)
    for s in summaries:
        row = [s["label"], s["total_count"], s["total_weighted_sum"], s["mean"]]
        row += [s["quantiles"][quantile_label(q)] for q in quantiles]
        ws_sum.append(row)
    mean_fmt = "0." + "0" * precision if precision > 0 else "0"
    for cell in ws_sum["D"][1:]:
        cell.number_format = mean_fmt
    set_basic_column_widths(ws_sum, {"A": 24, "B": 14, "C": 20, "D": 12})

    for idx, run in enumerate(runs, start=1):
        title = "Buckets" if len(runs) == 1 else f"Buckets_{idx}"
        _status(f"Populating {title} ({run['label']})")
        ws = wb.create_sheet(title)
        ws.append(["value", "count", "value_x_count", "cumulative_count", "cumulative_share"])
        _style_header(ws)

        total = summaries[idx - 1]["total_count"]
        acc = 0
        for value, c in enumerate(run["counts"]):
            acc += c
            ws.append([value, c, value * c, acc, acc / total])
        for cell in ws["E"][1:]:
            cell.number_format = "0.00%"
        ws.freeze_panes = "A2"
        set_basic_column_widths(ws, {"A": 8, "B": 12, "C": 16, "D": 18, "E": 18})

    _status(f"Saving {out_path}")
    wb.save(out_path)
    return summaries
