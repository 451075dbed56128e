import math

from zoneprof.dto import ReportRow, ZoneReport

CUTOFF_NAME = "..."
COLUMN_HEADERS = ("Percentage (%)", "# Samples", "Name")


def format_percentage(fraction):
    """Converts a fraction to a percentage, floored to 3 decimals and clamped to [0, 100]."""
    value = math.floor(fraction * 100000) / 1000
    return min(max(value, 0.0), 100.0)


def _ratio(numerator, denominator):
    return numerator / denominator if denominator > 0 else 0.0


def _render_percentage(value):
    """Truncates a percentage to two decimals."""
    hundredths = round(value * 1000) // 10
    return f"{hundredths // 100}.{hundredths % 100:02d}"


def build_zone_report(zone_name, stats, timing, start_date, cutoff=0.1):
    """Ranks and trims the statistics of a zone.

    Fills `stats.function_to_percentage` in place; calling this repeatedly
    gives the same result for the same counts.
    """
    # A frame can be counted more than once per sample (recursion), but never
    # for more ticks than the zone saw.
    n_samples = stats.n_samples
    bound = max(stats.n_ticks, n_samples)
    # Samples can still be recorded while the report is built; only read a copy.
    function_to_count = dict(stats.function_to_count)
    counts = {}
    for name, count in function_to_count.items():
        stats.function_to_percentage[name] = format_percentage(_ratio(count, n_samples))
        counts[name] = min(max(count, 0), bound)

    names_in_order = sorted(counts, key=lambda name: (-function_to_count[name], name))

    rows = []
    cutoff_count = 0
    n_cutoff = 0
    for name in names_in_order:
        percentage = stats.function_to_percentage[name]
        if percentage >= cutoff:
            rows.append(ReportRow(percentage=_render_percentage(percentage), count=counts[name], name=name))
        else:
            n_cutoff += 1
            cutoff_count += counts[name]

    cutoff_row = None
    if n_cutoff > 0:
        cutoff_row = ReportRow(percentage=f"< {cutoff:g}", count=cutoff_count, name=CUTOFF_NAME)

    duration = math.floor(timing.duration * 1e6) / 1e6
    samples_per_second = math.floor(n_samples / duration) if duration > 0 else 0

    return ZoneReport(
        zone_name=zone_name,
        n_samples=n_samples,
        samples_per_second=samples_per_second,
        duration=duration,
        start_date=start_date,
        gc_percentage=format_percentage(_ratio(stats.n_gc_samples, n_samples)),
        n_gc_samples=stats.n_gc_samples,
        jit_percentage=format_percentage(_ratio(stats.n_jit_samples, n_samples)),
        n_jit_samples=stats.n_jit_samples,
        rows=rows,
        cutoff_row=cutoff_row,
    )


def _row_cells(row):
    return (row.percentage, str(row.count), row.name)


def _column_widths(report):
    widths = [len(header) for header in COLUMN_HEADERS]
    rows = list(report.rows)
    if report.cutoff_row:
        rows.append(report.cutoff_row)
    for row in rows:
        for i, cell in enumerate(_row_cells(row)):
            widths[i] = max(widths[i], len(cell))
    return widths


def _table_line(cells, widths):
    padded = [cell.ljust(width) for cell, width in zip(cells, widths)]
    return " | " + " | ".join(padded) + " |\n"


def _separator_line(widths):
    return " |-" + "-|-".join("-" * width for width in widths) + "-|\n"


def render_zone_report(report):
    """Renders a zone report as a header block followed by an aligned table."""
    widths = _column_widths(report)
    lines = [
        f" | Zone `{report.zone_name}` ({report.n_samples} samples | {report.samples_per_second} samples/s)\n",
        f" | Ran for {report.duration:.6f}s on `{report.start_date}`\n",
        f" | GC  : {_render_percentage(report.gc_percentage)} % ({report.n_gc_samples})\n",
        f" | JIT : {_render_percentage(report.jit_percentage)} % ({report.n_jit_samples})\n",
        " |\n",
        _table_line(COLUMN_HEADERS, widths),
        _separator_line(widths),
    ]
    for row in report.rows:
        lines.append(_table_line(_row_cells(row), widths))
    if report.cutoff_row:
        lines.append(_table_line(_row_cells(report.cutoff_row), widths))
    return "".join(lines)


def render_report(reports):
    """Renders several zone reports, separated by an empty line."""
    return "\n".join(render_zone_report(report) for report in reports)
