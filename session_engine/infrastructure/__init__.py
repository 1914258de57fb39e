"""Infrastructure layer exports."""

from .holidays import HolidayProvider, StaticHolidayProvider, YamlHolidayProvider

__all__ = [
    "HolidayProvider",
    "StaticHolidayProvider",
    "YamlHolidayProvider",
]
