"""
Base energy formula.

  E_nominal = K × (η / 100) × V × I × f_panel

  K        assumed peak sun hours per day (4)
  η        panel efficiency, percent
  V, I     panel voltage (V) and current (A)
  f_panel  derating factor of the panel material

The result is the noise-free daily energy every series generator scales.
"""

import math

from solarcalc.config import (
    PanelType,
    BASE_IRRADIANCE_CONSTANT,
    DAYS_IN_MONTH,
    PANEL_FACTORS,
)
from solarcalc.engine.errors import ConfigurationError, InvalidMonthError
from solarcalc.models.estimate import PanelConfiguration


def panel_factor(panel_type: PanelType) -> float:
    """Derating factor for a panel material."""
    return PANEL_FACTORS[PanelType(panel_type)]


def days_in_month(month: str) -> int:
    """Fixed day count for a month name (no leap years)."""
    try:
        return DAYS_IN_MONTH[month]
    except KeyError:
        raise InvalidMonthError(month) from None


def nominal_daily_energy(config: PanelConfiguration) -> float:
    """
    Noise-free daily energy for the configuration.

    Pure formula with no validation; call validate_configuration first
    when the input comes from outside.
    """
    return (
        BASE_IRRADIANCE_CONSTANT
        * (config.efficiency_percent / 100.0)
        * config.voltage
        * config.current
        * panel_factor(config.panel_type)
    )


def validate_configuration(config: PanelConfiguration) -> None:
    """
    Reject configurations that would yield zero, negative or undefined energy.

    country and years are not checked since no calculation reads them.
    """
    days_in_month(config.month)

    for field, value in (
        ("efficiency_percent", config.efficiency_percent),
        ("voltage", config.voltage),
        ("current", config.current),
    ):
        if not math.isfinite(value):
            raise ConfigurationError(f"{field} must be a finite number")
        if value <= 0:
            raise ConfigurationError(f"{field} must be positive (got {value})")

    if config.efficiency_percent > 100:
        raise ConfigurationError(
            f"efficiency_percent must not exceed 100 (got {config.efficiency_percent})"
        )
