"""\
Example Output Validation Script

This script validates that the DashboardCharts example produced reasonable output.

Checks:
- PNG chart files exist and exceed a minimum size threshold
- Each image has the backing pixel size expected at device scale 2

Usage:
  python examples/basic_chart.py
  python examples/validate_output.py
"""

from __future__ import annotations

from pathlib import Path

SCALE = 2

# Logical sizes of the example panels
EXPECTED = {
    "companies_bar.png": (640, 320),
    "timeline_line.png": (800, 300),
    "sources_pie.png": (420, 200),
    "sponsored_donut.png": (220, 228),
}


def _png_size(path: Path) -> tuple[int, int]:
    with path.open("rb") as f:
        header = f.read(24)
    return int.from_bytes(header[16:20], "big"), int.from_bytes(header[20:24], "big")


def _check_file(path: Path, min_bytes: int) -> tuple[bool, str]:
    if not path.exists():
        return False, f"MISSING: {path}"
    size = path.stat().st_size
    if size < min_bytes:
        return False, f"TOO SMALL: {path} ({size} bytes < {min_bytes})"
    return True, f"OK: {path} ({size/1024:.1f} KB)"


def _check_dimensions(path: Path, logical: tuple[int, int]) -> tuple[bool, str]:
    expected = (logical[0] * SCALE, logical[1] * SCALE)
    actual = _png_size(path)
    if actual != expected:
        return False, f"WRONG SIZE: {path} ({actual[0]}x{actual[1]}, expected {expected[0]}x{expected[1]})"
    return True, f"OK: {path} ({actual[0]}x{actual[1]})"


def main() -> int:
    output = Path("output")

    print("Validating DashboardCharts example outputs")
    print("=" * 60)

    ok_all = True

    print("\nCharts:")
    for name, logical in EXPECTED.items():
        path = output / name
        ok, msg = _check_file(path, min_bytes=2_000)
        print(f"  {msg}")
        ok_all = ok_all and ok
        if ok:
            ok, msg = _check_dimensions(path, logical)
            print(f"  {msg}")
            ok_all = ok_all and ok

    print("\nSummary:")
    if ok_all:
        print("  SUCCESS: All expected outputs look reasonable")
        return 0

    print("  FAIL: One or more outputs missing/invalid")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
