"""
Outbound payload entities.

Exports:
- UserRegistration: Account creation request
- MovieCreate / TvSeriesCreate: ContentCreate variants
- WatchEvent: Viewing progress
- RatingEvent: Score given to a content
- RecommendationQuery: Recommendation lookup (path + query string)
"""

from src.core.entities.payloads import (
    ContentCreate,
    MovieCreate,
    RatingEvent,
    RecommendationQuery,
    TvSeriesCreate,
    UserRegistration,
    WatchEvent,
    movie_create,
)

__all__ = [
    "ContentCreate",
    "MovieCreate",
    "RatingEvent",
    "RecommendationQuery",
    "TvSeriesCreate",
    "UserRegistration",
    "WatchEvent",
    "movie_create",
]
