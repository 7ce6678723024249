"""
Solar estimator configuration and constants.
"""

from enum import Enum


class PanelType(str, Enum):
    MONOCRYSTALLINE = "Monocrystalline"
    POLYCRYSTALLINE = "Polycrystalline"
    THIN_FILM = "Thin-Film"


class DailyGranularity(str, Enum):
    HOURLY = "hourly"  # Hourly for Day
    DAILY = "daily"    # Daily for Month


class ExportView(str, Enum):
    HOURLY = "hourly"
    DAILY = "daily"
    YEARLY = "yearly"


# Calendar order is significant: every series is produced in this order.
MONTHS: list[str] = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

# Non-leap year
DAYS_IN_MONTH: dict[str, int] = {
    "January": 31,
    "February": 28,
    "March": 31,
    "April": 30,
    "May": 31,
    "June": 30,
    "July": 31,
    "August": 31,
    "September": 30,
    "October": 31,
    "November": 30,
    "December": 31,
}

HOURS_PER_DAY = 24

# Assumed peak sun hours per day
BASE_IRRADIANCE_CONSTANT = 4.0

# Derating factor per panel material
PANEL_FACTORS: dict[PanelType, float] = {
    PanelType.MONOCRYSTALLINE: 1.0,
    PanelType.POLYCRYSTALLINE: 0.95,
    PanelType.THIN_FILM: 0.9,
}

# Uniform noise envelopes (low, high) applied multiplicatively per point
HOURLY_NOISE: tuple[float, float] = (0.9, 1.1)
DAILY_NOISE: tuple[float, float] = (0.85, 1.15)
YEARLY_NOISE: tuple[float, float] = (0.85, 1.15)

# Energy values are reported in kWh with two decimals
ENERGY_DECIMALS = 2

# Yearly scope selecting the full 12-month series
OVERALL_SCOPE = "Overall"

# Form defaults
DEFAULT_MONTH = "January"
DEFAULT_EFFICIENCY_PERCENT = 18.0
DEFAULT_VOLTAGE = 12.0
DEFAULT_CURRENT = 5.0
DEFAULT_COUNTRY = "India"
DEFAULT_YEARS = 1

EXPORT_FILENAMES: dict[ExportView, str] = {
    ExportView.HOURLY: "HourlyData.csv",
    ExportView.DAILY: "DailyData.csv",
    ExportView.YEARLY: "YearlyData.csv",
}

CSV_MEDIA_TYPE = "text/csv"
CSV_HEADER_FIELDS: tuple[str, str] = ("name", "energy")

# Local frontend dev servers allowed by CORS
CORS_ORIGINS: list[str] = [
    "http://localhost:5173",
    "http://localhost:3000",
    "http://127.0.0.1:5173",
    "http://127.0.0.1:3000",
]
