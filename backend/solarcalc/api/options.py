"""
API route listing the selectable form and filter values.
"""

from fastapi import APIRouter

from solarcalc.config import (
    DailyGranularity,
    PanelType,
    DAYS_IN_MONTH,
    MONTHS,
    OVERALL_SCOPE,
    PANEL_FACTORS,
)
from solarcalc.models.export import MonthOption, OptionsOutput, PanelTypeOption

router = APIRouter(prefix="/api/v1", tags=["options"])


@router.get("/options", response_model=OptionsOutput)
def get_options():
    """Months with day counts, panel types with factors, and view selectors."""
    return OptionsOutput(
        months=[MonthOption(name=m, days=DAYS_IN_MONTH[m]) for m in MONTHS],
        panel_types=[
            PanelTypeOption(panel_type=pt, factor=PANEL_FACTORS[pt])
            for pt in PanelType
        ],
        daily_granularities=list(DailyGranularity),
        yearly_scopes=[OVERALL_SCOPE, *MONTHS],
    )
