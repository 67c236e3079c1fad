"""Plotting utilities for discharge records and return-interval estimates."""

from typing import Optional

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from flood_analysis.analysis import empirical_exceedance_table, gev_return_level
from flood_analysis.models import GEVParameters


def plot_discharge_series(
    daily_values: pd.DataFrame,
    figsize: tuple[int, int] = (12, 6),
    title: Optional[str] = None,
) -> plt.Figure:
    """Plot daily discharge over time.

    Args:
        daily_values: Cleaned frame with ``date`` and ``discharge_cfs`` columns.
        figsize: Figure size as (width, height).
        title: Plot title. If None, auto-generated from the site number.

    Returns:
        plt.Figure: The matplotlib figure object.
    """
    fig, ax = plt.subplots(figsize=figsize)
    ax.plot(daily_values["date"], daily_values["discharge_cfs"], linewidth=0.8)

    if title:
        ax.set_title(title)
    elif "site_no" in daily_values.columns and not daily_values.empty:
        ax.set_title(f"Daily discharge - USGS {daily_values['site_no'].iloc[0]}")
    ax.set_xlabel("Date")
    ax.set_ylabel("Discharge (cfs)")

    plt.tight_layout()
    return fig


def plot_annual_maxima(
    annual_maxima: pd.Series,
    event_year: Optional[int] = None,
    figsize: tuple[int, int] = (12, 6),
) -> plt.Figure:
    """Bar chart of annual maxima, with the flood event year highlighted.

    Args:
        annual_maxima: Series indexed by year.
        event_year: Year to draw in a contrasting colour.
        figsize: Figure size as (width, height).

    Returns:
        plt.Figure: The matplotlib figure object.
    """
    fig, ax = plt.subplots(figsize=figsize)

    colors = ["tab:red" if year == event_year else "tab:blue" for year in annual_maxima.index]
    ax.bar(annual_maxima.index, annual_maxima.values, color=colors)
    ax.set_title("Annual maximum discharge")
    ax.set_xlabel("Year")
    ax.set_ylabel("Discharge (cfs)")

    plt.tight_layout()
    return fig


def plot_return_intervals(
    annual_maxima: pd.Series,
    params: Optional[GEVParameters] = None,
    max_return_period: float = 200.0,
    figsize: tuple[int, int] = (10, 6),
) -> plt.Figure:
    """Plot empirical plotting positions and, optionally, the fitted GEV curve.

    Args:
        annual_maxima: Series indexed by year.
        params: Fitted GEV parameters. If None, only the empirical points are drawn.
        max_return_period: Upper end of the GEV curve (years).
        figsize: Figure size as (width, height).

    Returns:
        plt.Figure: The matplotlib figure object.
    """
    fig, ax = plt.subplots(figsize=figsize)

    table = empirical_exceedance_table(annual_maxima)
    ax.scatter(table["return_interval"], table["annual_max_cfs"], label="Observed (Weibull)", zorder=3)

    if params is not None:
        periods = np.logspace(np.log10(1.01), np.log10(max_return_period), 200)
        levels = [gev_return_level(params, p) for p in periods]
        ax.plot(periods, levels, color="tab:orange", label="Fitted GEV")

    ax.set_xscale("log")
    ax.set_title("Return interval of annual maximum discharge")
    ax.set_xlabel("Return interval (years)")
    ax.set_ylabel("Discharge (cfs)")
    ax.legend()

    plt.tight_layout()
    return fig
