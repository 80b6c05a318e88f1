"""
Outbound payload entities.

Transient request bodies assembled from form fields and sent to the
backend. None of them is persisted by this layer. Each entity knows how
to render itself as the JSON object expected by the backend (camelCase keys).
"""

from dataclasses import dataclass
from typing import Any, Optional, Union

from src.core.value_objects.coercion import Number, format_number

DEFAULT_DIRECTOR = "Unknown"


@dataclass(frozen=True)
class UserRegistration:
    """
    Account creation request.

    All fields are passed through as submitted, None when the field is absent.
    """

    username: Optional[str]
    email: Optional[str]
    password: Optional[str]
    tier: Optional[str]

    def to_payload(self) -> dict[str, Any]:
        return {
            "username": self.username,
            "email": self.email,
            "password": self.password,
            "tier": self.tier,
        }


@dataclass(frozen=True)
class MovieCreate:
    """
    Catalog entry of type MOVIE.

    Attributes:
        title: Title as submitted
        description: Free text description
        genre: Genre label
        release_year: Release year (NaN if the field was not numeric)
        duration: Runtime in minutes
        director: Director name, "Unknown" when left blank
    """

    title: Optional[str]
    description: Optional[str]
    genre: Optional[str]
    release_year: Number
    duration: Number
    director: str = DEFAULT_DIRECTOR

    content_type = "MOVIE"

    def to_payload(self) -> dict[str, Any]:
        return {
            "type": self.content_type,
            "title": self.title,
            "description": self.description,
            "genre": self.genre,
            "releaseYear": self.release_year,
            "duration": self.duration,
            "director": self.director,
        }


@dataclass(frozen=True)
class TvSeriesCreate:
    """
    Catalog entry of type TV_SERIES.

    Attributes:
        title: Title as submitted
        description: Free text description
        genre: Genre label
        release_year: Year of first broadcast
        seasons: Number of seasons
        episodes_per_season: Number of episodes per season
    """

    title: Optional[str]
    description: Optional[str]
    genre: Optional[str]
    release_year: Number
    seasons: Number
    episodes_per_season: Number

    content_type = "TV_SERIES"

    def to_payload(self) -> dict[str, Any]:
        return {
            "type": self.content_type,
            "title": self.title,
            "description": self.description,
            "genre": self.genre,
            "releaseYear": self.release_year,
            "seasons": self.seasons,
            "episodesPerSeason": self.episodes_per_season,
        }


ContentCreate = Union[MovieCreate, TvSeriesCreate]


def movie_create(
    title: Optional[str],
    description: Optional[str],
    genre: Optional[str],
    release_year: Number,
    duration: Number,
    director: Optional[str] = None,
) -> MovieCreate:
    """Build a MovieCreate, defaulting a blank director to "Unknown"."""
    return MovieCreate(
        title=title,
        description=description,
        genre=genre,
        release_year=release_year,
        duration=duration,
        director=director or DEFAULT_DIRECTOR,
    )


@dataclass(frozen=True)
class WatchEvent:
    """Viewing progress of a user on a content, in seconds."""

    user_id: Number
    content_id: Number
    progress: Number
    completed: bool = False

    def to_payload(self) -> dict[str, Any]:
        return {
            "userId": self.user_id,
            "contentId": self.content_id,
            "progress": self.progress,
            "completed": self.completed,
        }


@dataclass(frozen=True)
class RatingEvent:
    """Score given by a user to a content."""

    user_id: Number
    content_id: Number
    score: Number

    def to_payload(self) -> dict[str, Any]:
        return {
            "userId": self.user_id,
            "contentId": self.content_id,
            "score": self.score,
        }


@dataclass(frozen=True)
class RecommendationQuery:
    """
    Recommendation lookup.

    Not a body: user_id goes in the path and limit in the query string.
    """

    user_id: Number
    limit: Number

    def to_path(self) -> str:
        return (
            f"/api/recommendations/{format_number(self.user_id)}"
            f"?limit={format_number(self.limit)}"
        )
