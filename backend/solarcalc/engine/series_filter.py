"""
Display filters over generated series.

The daily view is a binary choice between the hourly and daily-in-month
series. The yearly view is either the full year or the single point of
one month. Neither filter reorders points.
"""

from solarcalc.config import (
    DailyGranularity,
    ExportView,
    EXPORT_FILENAMES,
    OVERALL_SCOPE,
)
from solarcalc.models.estimate import (
    DisplayFilter,
    EnergyPoint,
    EstimateViews,
    SeriesBundle,
)


def select_daily_view(
    hourly: list[EnergyPoint],
    daily: list[EnergyPoint],
    granularity: DailyGranularity,
) -> list[EnergyPoint]:
    """Return the hourly series for HOURLY, otherwise the daily-in-month series."""
    if DailyGranularity(granularity) == DailyGranularity.HOURLY:
        return list(hourly)
    return list(daily)


def select_yearly_view(yearly: list[EnergyPoint], scope: str) -> list[EnergyPoint]:
    """
    Return the full year for "Overall", else the points labelled with `scope`.

    An unmatched scope gives an empty list rather than an error.
    """
    if scope == OVERALL_SCOPE:
        return list(yearly)
    return [p for p in yearly if p.name == scope]


def daily_view_export(granularity: DailyGranularity) -> ExportView:
    """Export view matching the daily granularity."""
    if DailyGranularity(granularity) == DailyGranularity.HOURLY:
        return ExportView.HOURLY
    return ExportView.DAILY


def apply_filter(bundle: SeriesBundle, display_filter: DisplayFilter) -> EstimateViews:
    """Derive both displayed views and their export file names."""
    return EstimateViews(
        daily_view=select_daily_view(
            bundle.hourly, bundle.daily, display_filter.daily_granularity
        ),
        yearly_view=select_yearly_view(bundle.yearly, display_filter.yearly_scope),
        daily_view_filename=EXPORT_FILENAMES[
            daily_view_export(display_filter.daily_granularity)
        ],
        yearly_view_filename=EXPORT_FILENAMES[ExportView.YEARLY],
    )
