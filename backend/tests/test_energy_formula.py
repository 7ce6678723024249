"""
Tests for the base energy formula, lookup tables and configuration validation.
"""

import pytest

from solarcalc.config import PanelType, MONTHS
from solarcalc.engine.energy_formula import (
    days_in_month,
    nominal_daily_energy,
    panel_factor,
    validate_configuration,
)
from solarcalc.engine.errors import ConfigurationError, InvalidMonthError
from solarcalc.models.estimate import PanelConfiguration


def _config(**overrides) -> PanelConfiguration:
    values = dict(
        month="February",
        efficiency_percent=18.0,
        panel_type=PanelType.MONOCRYSTALLINE,
        voltage=12.0,
        current=5.0,
    )
    values.update(overrides)
    return PanelConfiguration(**values)


# ---------------------------------------------------------------------------
# Nominal daily energy
# ---------------------------------------------------------------------------

class TestNominalDailyEnergy:
    def test_monocrystalline_reference_case(self):
        """4 × 0.18 × 12 × 5 × 1.0 = 43.2 kWh."""
        assert nominal_daily_energy(_config()) == pytest.approx(43.2)

    def test_thin_film_applies_factor(self):
        """4 × 0.18 × 12 × 5 × 0.9 = 38.88 kWh."""
        config = _config(panel_type=PanelType.THIN_FILM)
        assert nominal_daily_energy(config) == pytest.approx(38.88)

    def test_polycrystalline_applies_factor(self):
        config = _config(panel_type=PanelType.POLYCRYSTALLINE)
        assert nominal_daily_energy(config) == pytest.approx(41.04)

    def test_pure_function(self):
        config = _config()
        assert nominal_daily_energy(config) == nominal_daily_energy(config)

    def test_month_does_not_affect_nominal(self):
        assert nominal_daily_energy(_config(month="July")) == nominal_daily_energy(
            _config(month="February")
        )

    def test_country_and_years_are_ignored(self):
        base = nominal_daily_energy(_config())
        other = nominal_daily_energy(_config(country="Norway", years=25))
        assert base == other

    def test_scales_linearly_with_current(self):
        assert nominal_daily_energy(_config(current=10.0)) == pytest.approx(86.4)


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------

class TestPanelFactor:
    def test_factors(self):
        assert panel_factor(PanelType.MONOCRYSTALLINE) == 1.0
        assert panel_factor(PanelType.POLYCRYSTALLINE) == 0.95
        assert panel_factor(PanelType.THIN_FILM) == 0.9

    def test_accepts_raw_label(self):
        assert panel_factor("Thin-Film") == 0.9


class TestDaysInMonth:
    def test_february_has_no_leap_day(self):
        assert days_in_month("February") == 28

    def test_thirty_day_months(self):
        for month in ("April", "June", "September", "November"):
            assert days_in_month(month) == 30

    def test_year_total(self):
        assert sum(days_in_month(m) for m in MONTHS) == 365

    def test_unknown_month_raises(self):
        with pytest.raises(InvalidMonthError, match="Smarch"):
            days_in_month("Smarch")

    def test_month_names_are_case_sensitive(self):
        with pytest.raises(InvalidMonthError):
            days_in_month("march")


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

class TestValidateConfiguration:
    def test_valid_configuration_passes(self):
        validate_configuration(_config())

    def test_default_configuration_passes(self):
        validate_configuration(PanelConfiguration())

    @pytest.mark.parametrize("field", ["efficiency_percent", "voltage", "current"])
    def test_zero_rejected(self, field):
        with pytest.raises(ConfigurationError, match=field):
            validate_configuration(_config(**{field: 0.0}))

    @pytest.mark.parametrize("field", ["efficiency_percent", "voltage", "current"])
    def test_negative_rejected(self, field):
        with pytest.raises(ConfigurationError, match=field):
            validate_configuration(_config(**{field: -1.0}))

    def test_efficiency_above_100_rejected(self):
        with pytest.raises(ConfigurationError, match="exceed 100"):
            validate_configuration(_config(efficiency_percent=101.0))

    def test_efficiency_of_100_allowed(self):
        validate_configuration(_config(efficiency_percent=100.0))

    def test_infinite_voltage_rejected(self):
        with pytest.raises(ConfigurationError, match="finite"):
            validate_configuration(_config(voltage=float("inf")))

    def test_unknown_month_is_configuration_error(self):
        with pytest.raises(ConfigurationError):
            validate_configuration(_config(month="Undecember"))

    def test_errors_are_value_errors(self):
        assert issubclass(ConfigurationError, ValueError)
        assert issubclass(InvalidMonthError, ConfigurationError)
