"""
API routes for solar energy estimation.
"""

import logging

import numpy as np
from fastapi import APIRouter, HTTPException

from solarcalc.engine.energy_formula import nominal_daily_energy, validate_configuration
from solarcalc.engine.series_filter import apply_filter
from solarcalc.engine.series_generator import regenerate
from solarcalc.models.estimate import (
    EstimateInput,
    EstimateOutput,
    NominalEnergyOutput,
    PanelConfiguration,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["estimate"])


@router.post("/estimate", response_model=EstimateOutput)
async def estimate(body: EstimateInput) -> EstimateOutput:
    """
    Generate hourly, daily-in-month and yearly energy series.

    Also returns the views selected by the display filter and the file
    names to use when exporting them. Pass `seed` to reproduce a run.
    """
    try:
        rng = np.random.default_rng(body.seed)
        bundle = regenerate(body.configuration, rng)
        views = apply_filter(bundle, body.display_filter)
        return EstimateOutput(
            configuration=body.configuration,
            nominal_daily_energy=round(nominal_daily_energy(body.configuration), 4),
            hourly=bundle.hourly,
            daily=bundle.daily,
            yearly=bundle.yearly,
            daily_view=views.daily_view,
            yearly_view=views.yearly_view,
            daily_view_filename=views.daily_view_filename,
            yearly_view_filename=views.yearly_view_filename,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.warning("Estimation failed: %s", e)
        raise HTTPException(status_code=500, detail=f"Estimation error: {str(e)}")


@router.post("/estimate/nominal", response_model=NominalEnergyOutput)
async def estimate_nominal(config: PanelConfiguration) -> NominalEnergyOutput:
    """Noise-free daily energy (kWh) for a panel configuration."""
    try:
        validate_configuration(config)
        return NominalEnergyOutput(
            configuration=config,
            nominal_daily_energy=round(nominal_daily_energy(config), 4),
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
