"""Headless Boulder Creek return-interval run on an exported NWIS daily-values file.

Export daily mean discharge (parameter 00060) for site 06730500 from NWIS, then:

    python scripts/boulder_creek_quickstart.py --daily-values boulder_dv.csv --plot-dir figures
"""

from __future__ import annotations

import argparse
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

from flood_analysis.config import dump_json  # noqa: E402
from flood_analysis.logging_config import configure_logging  # noqa: E402
from flood_analysis.workflows import analyze_site_return_intervals  # noqa: E402
from flood_tools import plot_annual_maxima, plot_discharge_series, plot_return_intervals  # noqa: E402


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    p.add_argument("--daily-values", required=True, type=Path, help="CSV or parquet NWIS export")
    p.add_argument("--site", default="BOULDER", help="Gauge ID or USGS site number from config/sites.yaml")
    p.add_argument(
        "--threshold",
        type=float,
        action="append",
        default=[],
        help="Extra discharge threshold in cfs (repeatable)",
    )
    p.add_argument("--n-boot", type=int, default=0, help="Bootstrap resamples per threshold")
    p.add_argument("--log-level", default="INFO")
    p.add_argument("--json-logs", action="store_true", help="Emit logs as JSON lines")
    p.add_argument("--plot-dir", type=Path, help="Write PNG figures here")
    return p.parse_args()


def _describe(result) -> str:
    if not result.is_defined:
        return f"undefined ({result.reason})"
    return f"p={result.exceedance_probability:.4f}, return interval={result.return_interval:.1f} yr"


def main():
    args = parse_args()
    configure_logging(level=args.log_level, json_output=args.json_logs)

    analysis = analyze_site_return_intervals(
        args.site,
        args.daily_values,
        thresholds_cfs=args.threshold,
        n_boot=args.n_boot,
    )
    params = analysis.gev_params

    print(f"=== {analysis.site['name']} ({analysis.site['site_no']}) ===")
    print(f"Years of annual maxima: {len(analysis.annual_maxima)}")
    print(f"GEV: location={params.location:.1f} scale={params.scale:.1f} shape={params.shape:.3f}")
    print("\n=== Return intervals ===")
    for row in analysis.results:
        label = f" [{row.label}]" if row.label else ""
        print(f"{row.threshold_cfs:.0f} cfs{label}")
        print(f"  empirical: {_describe(row.empirical)}")
        print(f"  GEV:       {_describe(row.gev)}")
        if row.bootstrap:
            print(f"  bootstrap: {dump_json(row.bootstrap)}")
    print("\n=== GEV return levels (cfs) ===")
    for period, level in analysis.return_levels.items():
        print(f"  {period:>5.0f} yr: {level:.0f}")

    if args.plot_dir:
        args.plot_dir.mkdir(parents=True, exist_ok=True)
        event_year = analysis.site.get("event_year")
        figures = {
            "discharge.png": plot_discharge_series(analysis.daily_values),
            "annual_maxima.png": plot_annual_maxima(analysis.annual_maxima, event_year=event_year),
            "return_intervals.png": plot_return_intervals(analysis.annual_maxima, params),
        }
        for name, fig in figures.items():
            fig.savefig(args.plot_dir / name, dpi=150)
            print(f"[ok]   {args.plot_dir / name}")


if __name__ == "__main__":
    main()
