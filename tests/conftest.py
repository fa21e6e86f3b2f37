"""Shared fixtures: canned API bodies and a fake HTTP client."""

import copy
from unittest.mock import MagicMock

import pytest

from w3w.config import reset_config

C2C_JSON = {
    "country": "GB",
    "square": {
        "southwest": {"lng": -0.195543, "lat": 51.520833},
        "northeast": {"lng": -0.195499, "lat": 51.52086},
    },
    "nearestPlace": "Bayswater, London",
    "coordinates": {"lng": -0.195521, "lat": 51.520847},
    "words": "filled.count.soap",
    "language": "en",
    "map": "https://w3w.co/filled.count.soap",
}

C2C_GEOJSON = {
    "features": [
        {
            "bbox": [-0.195543, 51.520833, -0.195499, 51.52086],
            "geometry": {"coordinates": [-0.195521, 51.520847], "type": "Point"},
            "type": "Feature",
            "properties": {
                "country": "GB",
                "nearestPlace": "Bayswater, London",
                "words": "filled.count.soap",
                "language": "en",
                "map": "https://w3w.co/filled.count.soap",
            },
        }
    ],
    "type": "FeatureCollection",
}

AUTOSUGGEST_JSON = {
    "suggestions": [
        {
            "country": "GB",
            "nearestPlace": "Bayswater, London",
            "words": "filled.count.soap",
            "rank": 1,
            "language": "en",
        },
        {
            "country": "GB",
            "nearestPlace": "Bayswater, London",
            "words": "filled.count.soaps",
            "rank": 2,
            "language": "en",
        },
    ]
}

GRID_JSON = {
    "lines": [
        {
            "start": {"lng": 0.116126, "lat": 52.207988},
            "end": {"lng": 0.116126, "lat": 52.208867},
        }
    ]
}

LANGUAGES_JSON = {
    "languages": [
        {"nativeName": "English", "code": "en", "name": "English"},
        {
            "nativeName": "Bosanski-Crnogorski-Hrvatski-Srpski",
            "code": "oo",
            "name": "Bosnian-Croatian-Montenegrin-Serbian",
            "locales": [
                {"nativeName": "Латиница", "code": "oo_cy", "name": "Cyrillic"},
                {"nativeName": "Latinica", "code": "oo_la", "name": "Latin"},
            ],
        },
    ]
}

BAD_WORDS_JSON = {
    "error": {
        "code": "BadWords",
        "message": "words must be a valid 3 word address, such as filled.count.soap",
    }
}


def make_response(body, status_code=200):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = body
    response.text = str(body)
    return response


@pytest.fixture
def http_client():
    """Fake HTTP client answering every GET with an empty JSON object."""
    client = MagicMock()
    client.get.return_value = make_response({})
    return client


@pytest.fixture
def respond(http_client):
    """Set the body (and status) the fake client answers with."""

    def _respond(body, status_code=200):
        response = make_response(body, status_code)
        http_client.get.return_value = response
        return response

    return _respond


@pytest.fixture
def c2c_json():
    return copy.deepcopy(C2C_JSON)


@pytest.fixture
def c2c_geojson():
    return copy.deepcopy(C2C_GEOJSON)


@pytest.fixture
def autosuggest_json():
    return copy.deepcopy(AUTOSUGGEST_JSON)


@pytest.fixture
def grid_json():
    return copy.deepcopy(GRID_JSON)


@pytest.fixture
def languages_json():
    return copy.deepcopy(LANGUAGES_JSON)


@pytest.fixture
def bad_words_json():
    return copy.deepcopy(BAD_WORDS_JSON)


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    for name in ("W3W_API_KEY", "W3W_API_BASE_URL", "W3W_API_HEADERS", "W3W_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()
