# src/pdc_capacity/utils/config.py
"""
Runtime settings for the capacity simulator.

Values come from PDC_* environment variables or a .env file in the
working directory. Anything missing falls back to the defaults below.
"""

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

from pdc_capacity.domain.models import GroupingMode, ViewMode

load_dotenv()


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PDC_",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    # Chart canvas (pixels)
    chart_width: int = 980
    chart_height: int = 360
    bar_fraction: float = 0.8
    grid_ticks: int = 5

    default_view: ViewMode = ViewMode.HOURLY
    default_grouping: GroupingMode = GroupingMode.FLOW

    def __repr__(self):
        return (
            f"<AppConfig chart={self.chart_width}x{self.chart_height} "
            f"view={self.default_view.value} grouping={self.default_grouping.value}>"
        )


# Singleton
config = AppConfig()
