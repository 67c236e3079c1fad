"""High-level workflows tying the pipeline steps together."""

from flood_analysis.workflows.site_return_interval import (
    SiteAnalysis,
    ThresholdResult,
    analyze_site_return_intervals,
)

__all__ = ["analyze_site_return_intervals", "SiteAnalysis", "ThresholdResult"]
