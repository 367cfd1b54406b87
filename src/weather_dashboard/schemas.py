"""
Domain models for the weather dashboard.

Pydantic models for data from external APIs and the derived report.
These define the canonical schema - datasources normalize API responses to
these, analysis derives new records from them. All models are frozen: a
record is never changed after it is built, only copied with updates.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

# =============================================================================
# Weather source
# =============================================================================


class RainChance(BaseModel):
    """Rain probability for the four 6-hour windows of one day.

    Each value is a percentage string (``"30%"``), an empty string, or the
    ``"-"`` sentinel the source uses for windows that already passed.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    t00_06: str = Field(default="", alias="T00_06")
    t06_12: str = Field(default="", alias="T06_12")
    t12_18: str = Field(default="", alias="T12_18")
    t18_24: str = Field(default="", alias="T18_24")

    @field_validator("t00_06", "t06_12", "t12_18", "t18_24", mode="before")
    @classmethod
    def _null_to_empty(cls, value: object) -> object:
        return "" if value is None else value

    @property
    def buckets(self) -> tuple[str, str, str, str]:
        """All four windows, earliest first."""
        return (self.t00_06, self.t06_12, self.t12_18, self.t18_24)

    def bucket_for_hour(self, hour: int) -> str:
        """Rain probability of the window containing ``hour`` (0-23)."""
        return self.buckets[(hour % 24) // 6]


class DailyForecastSource(BaseModel):
    """One day of the source forecast (today, tomorrow, ...)."""

    model_config = ConfigDict(frozen=True)

    date: str = ""
    date_label: str = ""
    telop: str = Field(default="", description="Short weather description, e.g. 晴れ")
    wind: str = ""
    min_celsius: str | None = None
    max_celsius: str | None = None
    chance_of_rain: RainChance = Field(default_factory=RainChance)


class WeatherForecast(BaseModel):
    """Decoded weather payload: a location and its daily forecasts."""

    model_config = ConfigDict(frozen=True)

    location: str
    public_time: str = ""
    days: list[DailyForecastSource] = Field(default_factory=list)


# =============================================================================
# News
# =============================================================================


class NewsItem(BaseModel):
    """A single headline from a news feed."""

    model_config = ConfigDict(frozen=True)

    title: str
    link: str
    description: str = ""
    pub_date: str = Field(default="", description="Display timestamp, MM/DD HH:MM")


# =============================================================================
# Derived report
# =============================================================================


class HourlySample(BaseModel):
    """One synthesized point of the hourly forecast."""

    model_config = ConfigDict(frozen=True)

    time: str = Field(..., description="Hour label, HH:00")
    temp: int
    desc: str = ""
    icon: str = ""
    rain_chance: str = ""
    chart_y: int = Field(default=0, description="Vertical chart position, smaller is warmer")


class DailySummary(BaseModel):
    """One row of the 3-day forecast table."""

    model_config = ConfigDict(frozen=True)

    date: str
    icon: str
    description: str
    max_temp: int
    min_temp: int
    rain_chance: str = "0%"


class WeatherReport(BaseModel):
    """Everything the dashboard page shows, assembled once per run."""

    model_config = ConfigDict(frozen=True)

    location: str
    temperature: int
    min_temp: int = 0
    max_temp: int = 0
    # Same as the reference temperature; there is no heat-index model
    feels_like: int = 0
    description: str = ""
    icon: str = ""
    wind: str = ""
    chance_of_rain: list[str] = Field(default_factory=list)
    update_time: str = ""
    hourly: list[HourlySample] = Field(default_factory=list)
    daily: list[DailySummary] = Field(default_factory=list)
    news: list[NewsItem] = Field(default_factory=list)
    economy_news: list[NewsItem] = Field(default_factory=list)
    is_using_fallback_data: bool = False
    has_min_temp: bool = False
