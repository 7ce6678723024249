"""
Pydantic models for CSV export and form options.
"""

from pydantic import BaseModel, Field

from solarcalc.config import ExportView, PanelType, DailyGranularity
from solarcalc.models.estimate import EnergyPoint


class ExportInput(BaseModel):
    """Input for exporting the series currently on display."""
    view: ExportView
    points: list[EnergyPoint] = Field(
        default_factory=list,
        description="Points exactly as displayed, in display order",
    )


class MonthOption(BaseModel):
    name: str
    days: int


class PanelTypeOption(BaseModel):
    panel_type: PanelType
    factor: float


class OptionsOutput(BaseModel):
    """Selectable values for the configuration form and the view filters."""
    months: list[MonthOption]
    panel_types: list[PanelTypeOption]
    daily_granularities: list[DailyGranularity]
    yearly_scopes: list[str]
