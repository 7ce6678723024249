"""
Pydantic models for solar energy estimation.

Provides models for:
  - Panel configuration: the inputs driving every calculation
  - Energy series: hourly, daily-in-month and yearly points
  - Display filter and the filtered views presented to the chart
"""

from typing import Optional

from pydantic import BaseModel, Field

from solarcalc.config import (
    DailyGranularity,
    PanelType,
    OVERALL_SCOPE,
    DEFAULT_MONTH,
    DEFAULT_EFFICIENCY_PERCENT,
    DEFAULT_VOLTAGE,
    DEFAULT_CURRENT,
    DEFAULT_COUNTRY,
    DEFAULT_YEARS,
)


class PanelConfiguration(BaseModel):
    """Panel parameters driving the estimation."""
    month: str = DEFAULT_MONTH
    efficiency_percent: float = DEFAULT_EFFICIENCY_PERCENT  # 1-100
    panel_type: PanelType = PanelType.MONOCRYSTALLINE
    voltage: float = DEFAULT_VOLTAGE    # V
    current: float = DEFAULT_CURRENT    # A

    # Accepted and echoed back, not used by any calculation
    country: str = Field(DEFAULT_COUNTRY, description="Unused by the estimator")
    years: int = Field(DEFAULT_YEARS, description="Unused by the estimator")


class EnergyPoint(BaseModel):
    """A single labelled energy value (kWh, 2 decimals)."""
    name: str       # "14:00", "Day 3", "March"
    energy: float


class SeriesBundle(BaseModel):
    """The three series produced by one regeneration."""
    hourly: list[EnergyPoint]   # 24 points
    daily: list[EnergyPoint]    # one per day of the selected month
    yearly: list[EnergyPoint]   # 12 points, January..December


class DisplayFilter(BaseModel):
    """User-selected view of the generated series."""
    daily_granularity: DailyGranularity = DailyGranularity.DAILY
    yearly_scope: str = OVERALL_SCOPE   # "Overall" or a month name


class EstimateViews(BaseModel):
    """Series currently presented, with their export file names."""
    daily_view: list[EnergyPoint]
    yearly_view: list[EnergyPoint]
    daily_view_filename: str
    yearly_view_filename: str


class EstimateInput(BaseModel):
    """Input for a full estimation run."""
    configuration: PanelConfiguration = Field(default_factory=PanelConfiguration)
    display_filter: DisplayFilter = Field(default_factory=DisplayFilter)
    seed: Optional[int] = Field(
        None, description="Seed for reproducible noise; omit for fresh draws"
    )


class EstimateOutput(BaseModel):
    """Result of a full estimation run."""
    configuration: PanelConfiguration
    nominal_daily_energy: float
    hourly: list[EnergyPoint]
    daily: list[EnergyPoint]
    yearly: list[EnergyPoint]
    daily_view: list[EnergyPoint]
    yearly_view: list[EnergyPoint]
    daily_view_filename: str
    yearly_view_filename: str


class NominalEnergyOutput(BaseModel):
    """Noise-free daily energy for a configuration."""
    configuration: PanelConfiguration
    nominal_daily_energy: float
