from .model import SeasonCode, SeasonHalf, SeasonInfo, SeasonStatus
from .calendar import (
    cost_label,
    current_shipping_season,
    format_date_range,
    parse_season_code,
    pre_book_start,
    season_info,
    season_status,
    seasons_with_status,
    ship_end,
    ship_start,
    status_label,
)
from .normalize import (
    compare_seasons,
    generate_season_options,
    is_future_season,
    is_historical_season,
    is_relevant_season,
    normalize_season_code,
    sort_seasons,
)

__all__ = [
    "SeasonCode", "SeasonHalf", "SeasonInfo", "SeasonStatus",
    "parse_season_code", "ship_start", "ship_end", "pre_book_start",
    "season_status", "current_shipping_season", "season_info", "seasons_with_status",
    "cost_label", "status_label", "format_date_range",
    "normalize_season_code", "compare_seasons", "sort_seasons",
    "is_future_season", "is_historical_season", "is_relevant_season", "generate_season_options",
]
