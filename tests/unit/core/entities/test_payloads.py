"""
Tests for outbound payload entities.

Verifies the JSON objects sent to the backend:
- camelCase keys and the "type" discriminator of ContentCreate variants
- director defaulting for movies
- recommendation path and query string
"""

import math

import pytest

from src.core.entities.payloads import (
    MovieCreate,
    RatingEvent,
    RecommendationQuery,
    TvSeriesCreate,
    UserRegistration,
    WatchEvent,
    movie_create,
)


class TestUserRegistration:
    """Tests for UserRegistration."""

    def test_payload_passes_fields_through(self) -> None:
        registration = UserRegistration(
            username="alice", email="alice@example.com", password="s3cret", tier="PREMIUM"
        )
        assert registration.to_payload() == {
            "username": "alice",
            "email": "alice@example.com",
            "password": "s3cret",
            "tier": "PREMIUM",
        }

    def test_absent_fields_stay_none(self) -> None:
        payload = UserRegistration(username="bob", email=None, password=None, tier=None).to_payload()
        assert payload["tier"] is None


class TestContentCreate:
    """Tests for the MovieCreate / TvSeriesCreate variants."""

    def test_movie_payload(self) -> None:
        movie = movie_create(
            title="Inception",
            description="Dreams within dreams",
            genre="Sci-Fi",
            release_year=2010,
            duration=148,
            director="Christopher Nolan",
        )
        assert movie.to_payload() == {
            "type": "MOVIE",
            "title": "Inception",
            "description": "Dreams within dreams",
            "genre": "Sci-Fi",
            "releaseYear": 2010,
            "duration": 148,
            "director": "Christopher Nolan",
        }

    @pytest.mark.parametrize("director", [None, ""])
    def test_blank_director_defaults_to_unknown(self, director) -> None:
        movie = movie_create("Heat", "", "Crime", 1995, 170, director)
        assert movie.director == "Unknown"

    def test_movie_has_no_series_fields(self) -> None:
        payload = MovieCreate("Heat", "", "Crime", 1995, 170).to_payload()
        assert "seasons" not in payload
        assert "episodesPerSeason" not in payload

    def test_tv_series_payload(self) -> None:
        series = TvSeriesCreate(
            title="Dark",
            description="Time travel in Winden",
            genre="Thriller",
            release_year=2017,
            seasons=3,
            episodes_per_season=8,
        )
        payload = series.to_payload()
        assert payload["type"] == "TV_SERIES"
        assert payload["seasons"] == 3
        assert payload["episodesPerSeason"] == 8
        assert "duration" not in payload
        assert "director" not in payload

    def test_payloads_are_frozen(self) -> None:
        movie = MovieCreate("Heat", "", "Crime", 1995, 170)
        with pytest.raises(AttributeError):
            movie.title = "Ronin"  # type: ignore[misc]


class TestEvents:
    """Tests for WatchEvent and RatingEvent."""

    def test_watch_event_payload(self) -> None:
        event = WatchEvent(user_id=1, content_id=12, progress=3600, completed=True)
        assert event.to_payload() == {
            "userId": 1,
            "contentId": 12,
            "progress": 3600,
            "completed": True,
        }

    def test_rating_event_payload(self) -> None:
        assert RatingEvent(user_id=1, content_id=12, score=5).to_payload() == {
            "userId": 1,
            "contentId": 12,
            "score": 5,
        }

    def test_nan_is_kept_in_payload(self) -> None:
        payload = RatingEvent(user_id=math.nan, content_id=12, score=5).to_payload()
        assert math.isnan(payload["userId"])


class TestRecommendationQuery:
    """Tests for RecommendationQuery."""

    def test_path_with_limit(self) -> None:
        assert RecommendationQuery(user_id=7, limit=5).to_path() == "/api/recommendations/7?limit=5"

    def test_nan_values_are_forwarded(self) -> None:
        query = RecommendationQuery(user_id=math.nan, limit=math.nan)
        assert query.to_path() == "/api/recommendations/NaN?limit=NaN"
