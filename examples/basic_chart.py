"""
Basic Chart Generation Example

This example renders the four panels of a job-application dashboard with the
DashboardCharts package: applications per company (bar), applications over
time (line), application sources (pie) and the share of sponsored postings
(donut).

Output: PNG files under output/, at twice the logical resolution, plus the
legend data each panel would display next to its chart.
"""

from datetime import date, timedelta
from pathlib import Path

from dashboard_charts import (
    Config,
    DashboardChart,
    RenderError,
    create_chart,
    get_legend,
)
from dashboard_charts.formatting import format_currency, format_long_date


# ============================================================================
# Sample Data
# ============================================================================

companies = [
    {"key": "Acme Corporation", "value": 14},
    {"key": "Globex", "value": 9},
    {"key": "Initech", "value": 6},
    {"key": "Umbrella Research & Development Labs", "value": 4},
    {"key": "Hooli", "value": 11},
]

start = date(2024, 3, 1)
timeline = [
    {"bucket": (start + timedelta(days=i)).isoformat(), "count": count}
    for i, count in enumerate([2, 5, 3, 8, 6, 9, 4, 7, 12, 10, 6, 8, 11, 5])
]

sources = [
    {"key": "LinkedIn", "value": 18},
    {"key": "Referral", "value": 7},
    {"key": "Company site", "value": 12},
    {"key": "Job board", "value": 5},
]

sponsored = [
    {"key": "true", "value": 31},
    {"key": "false", "value": 13},
]

salaries = [85000, 120000, 97500]


# ============================================================================
# Render
# ============================================================================

print("DashboardCharts example: job-application dashboard")
print("=" * 60)

output_dir = Path("output")
config = Config(device_scale=2.0, output_dir=output_dir)
config.ensure_directories()

try:
    bar_path = create_chart(
        "bar", companies,
        output_path=output_dir / "companies_bar.png",
        size=(640, 320),
        config=config,
    )
    print(f"Saved bar chart:   {bar_path}")

    line_path = create_chart(
        "line", timeline,
        output_path=output_dir / "timeline_line.png",
        color="#7928ca",
        size=(800, 300),
        config=config,
    )
    print(f"Saved line chart:  {line_path}")
    print(f"  Range: {format_long_date(timeline[0]['bucket'])} - {format_long_date(timeline[-1]['bucket'])}")

    pie_path = create_chart("pie", sources, output_path=output_dir / "sources_pie.png", config=config)
    print(f"Saved pie chart:   {pie_path}")

    # A dashboard panel is redrawn whenever its dataset changes
    panel = DashboardChart("donut", config=config, annotate=True)
    panel.render_chart(sponsored)
    summary = panel.get_summary()
    donut_path = panel.save_chart(str(output_dir / "sponsored_donut.png"))
    panel.close()
    print(f"Saved donut chart: {donut_path}")
    print(f"  Center readout: {summary.main_percentage}% {summary.main_label}")

except RenderError as e:
    print(f"Error creating chart (render failed): {e}")
    raise SystemExit(1)


# ============================================================================
# Legends
# ============================================================================

print()
print("Source legend:")
for entry in get_legend("pie", sources):
    print(f"  {entry.color}  {entry.label:<14} {entry.value:>5g}  {entry.percentage}%")

print()
print("Salary range: " + " / ".join(format_currency(s) for s in salaries))
