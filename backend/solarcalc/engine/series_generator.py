"""
Energy series generators.

Each generator scales the nominal daily energy by an independent uniform
noise factor per point and rounds to 2 decimals:

  Hourly   24 points "0:00".."23:00",         factor ~ U[0.90, 1.10)
  Daily    one point per day, "Day 1"..,      factor ~ U[0.85, 1.15)
  Yearly   12 points January..December,       factor ~ U[0.85, 1.15) × days

Hourly points resample the same daily rate; they are not a decomposition
of the daily total and are not normalized to it.

Randomness comes from an injected numpy Generator so a seed reproduces a
run. Without one, every call draws fresh noise.
"""

import logging
from typing import Optional

import numpy as np

from solarcalc.config import (
    MONTHS,
    HOURS_PER_DAY,
    HOURLY_NOISE,
    DAILY_NOISE,
    YEARLY_NOISE,
    ENERGY_DECIMALS,
)
from solarcalc.engine.energy_formula import (
    days_in_month,
    nominal_daily_energy,
    validate_configuration,
)
from solarcalc.models.estimate import EnergyPoint, PanelConfiguration, SeriesBundle

logger = logging.getLogger(__name__)


def _noise(rng: np.random.Generator, envelope: tuple[float, float], n: int) -> np.ndarray:
    low, high = envelope
    return rng.uniform(low, high, size=n)


def _point(name: str, energy: float) -> EnergyPoint:
    return EnergyPoint(name=name, energy=round(float(energy), ENERGY_DECIMALS))


def generate_hourly_series(
    config: PanelConfiguration,
    rng: Optional[np.random.Generator] = None,
) -> list[EnergyPoint]:
    """Hourly energy for one day under the configuration."""
    rng = rng if rng is not None else np.random.default_rng()
    nominal = nominal_daily_energy(config)
    factors = _noise(rng, HOURLY_NOISE, HOURS_PER_DAY)
    return [_point(f"{h}:00", nominal * factors[h]) for h in range(HOURS_PER_DAY)]


def generate_daily_series(
    config: PanelConfiguration,
    rng: Optional[np.random.Generator] = None,
) -> list[EnergyPoint]:
    """Daily energy for every day of the configured month."""
    rng = rng if rng is not None else np.random.default_rng()
    days = days_in_month(config.month)
    nominal = nominal_daily_energy(config)
    factors = _noise(rng, DAILY_NOISE, days)
    return [_point(f"Day {i + 1}", nominal * factors[i]) for i in range(days)]


def generate_yearly_series(
    config: PanelConfiguration,
    rng: Optional[np.random.Generator] = None,
) -> list[EnergyPoint]:
    """
    Monthly energy totals for a full year.

    Spans all twelve months whatever config.month is set to. Each month's
    factor perturbs its average daily energy, which is then multiplied by
    the month's day count.
    """
    rng = rng if rng is not None else np.random.default_rng()
    nominal = nominal_daily_energy(config)
    factors = _noise(rng, YEARLY_NOISE, len(MONTHS))
    return [
        _point(month, nominal * factors[i] * days_in_month(month))
        for i, month in enumerate(MONTHS)
    ]


def regenerate(
    config: PanelConfiguration,
    rng: Optional[np.random.Generator] = None,
) -> SeriesBundle:
    """
    Validate the configuration and regenerate all three series in full.

    Raises ConfigurationError (or InvalidMonthError) before any noise is drawn.
    """
    validate_configuration(config)
    rng = rng if rng is not None else np.random.default_rng()

    logger.debug(
        "Regenerating series: month=%s efficiency=%s panel=%s V=%s I=%s",
        config.month,
        config.efficiency_percent,
        config.panel_type.value,
        config.voltage,
        config.current,
    )

    return SeriesBundle(
        hourly=generate_hourly_series(config, rng),
        daily=generate_daily_series(config, rng),
        yearly=generate_yearly_series(config, rng),
    )
