"""Home page use cases."""

from .get_home_overview import GetHomeOverviewUseCase, HomeOverviewResponse, HomeStats

__all__ = ["GetHomeOverviewUseCase", "HomeOverviewResponse", "HomeStats"]
