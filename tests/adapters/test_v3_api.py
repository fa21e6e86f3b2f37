"""Tests for the what3words v3 API adapter."""

import pytest
import requests

from w3w.adapters.v3 import HEADER_API_KEY, HEADER_WRAPPER, V3Api
from w3w.config import ApiConfig
from w3w.domain.errors import ApiError, ConfigurationError, ResponseDecodeError
from w3w.domain.models import (
    AutoSuggestOptions,
    BoundingBox,
    Circle,
    ConvertOptions,
    Coordinates,
)
from w3w.version import __version__


@pytest.fixture
def api(http_client):
    return V3Api(api_key="test-key", client=http_client)


def _last_call(http_client):
    args, kwargs = http_client.get.call_args
    return args[0], kwargs["params"], kwargs["headers"]


class TestHeaders:
    def test_default_headers(self, api, http_client):
        api.available_languages()

        _, _, headers = _last_call(http_client)
        assert headers[HEADER_API_KEY] == "test-key"
        assert headers[HEADER_WRAPPER] == f"what3words-python/{__version__}"

    def test_custom_headers_are_merged(self, http_client):
        api = V3Api(api_key="test-key", headers={"X-Trace": "1"}, client=http_client)
        api.set_header("X-Other", "2")
        api.available_languages()

        _, _, headers = _last_call(http_client)
        assert headers["X-Trace"] == "1"
        assert headers["X-Other"] == "2"
        assert headers[HEADER_API_KEY] == "test-key"

    def test_set_header_map_replaces_all_headers(self, api, http_client):
        api.set_header_map({"X-Only": "yes"})
        api.available_languages()

        _, _, headers = _last_call(http_client)
        assert headers == {"X-Only": "yes"}


class TestConfiguration:
    def test_default_base_url(self, api):
        assert api.versioned_url == "https://api.what3words.com/v3"

    def test_set_base_url(self, api, http_client):
        api.set_base_url("http://localhost:8080/")
        api.available_languages()

        url, _, _ = _last_call(http_client)
        assert url == "http://localhost:8080/v3/available-languages"

    def test_set_client(self, api, http_client, respond, languages_json):
        other = type(http_client)()
        other.get.return_value = respond(languages_json)
        api.set_client(other)

        assert api.available_languages().codes() == ["en", "oo"]
        other.get.assert_called_once()

    def test_default_client_is_retrying_session(self):
        api = V3Api(api_key="test-key")

        assert isinstance(api.client, requests.Session)
        assert api.client.get_adapter("https://api.what3words.com").max_retries.total == 2

    def test_from_config(self):
        api = V3Api.from_config(
            ApiConfig(key="cfg-key", base_url="https://w3w.internal", timeout_seconds=2.5)
        )

        assert api.headers[HEADER_API_KEY] == "cfg-key"
        assert api.versioned_url == "https://w3w.internal/v3"
        assert api.timeout_seconds == 2.5
        assert api.client is not None

    def test_from_config_without_key(self):
        with pytest.raises(ConfigurationError) as excinfo:
            V3Api.from_config(ApiConfig(key=""))
        assert excinfo.value.setting_name == "W3W_API_KEY"


class TestConvert:
    def test_convert_to_coordinates(self, api, http_client, respond, c2c_json):
        respond(c2c_json)

        result = api.convert_to_coordinates("filled.count.soap")

        url, params, _ = _last_call(http_client)
        assert url == "https://api.what3words.com/v3/convert-to-coordinates"
        assert params == {"words": "filled.count.soap", "format": "json"}
        assert result.words == "filled.count.soap"
        assert result.coordinates == Coordinates(51.520847, -0.195521)
        assert result.square.southwest == Coordinates(51.520833, -0.195543)
        assert result.country == "GB"
        assert result.nearest_place == "Bayswater, London"
        assert result.map_url == "https://w3w.co/filled.count.soap"

    def test_convert_to_3wa_with_options(self, api, http_client, respond, c2c_json):
        respond(c2c_json)

        result = api.convert_to_3wa(
            Coordinates(51.520847, -0.195521), ConvertOptions(language="en", locale="en_gb")
        )

        url, params, _ = _last_call(http_client)
        assert url == "https://api.what3words.com/v3/convert-to-3wa"
        assert params == {
            "coordinates": "51.520847,-0.195521",
            "format": "json",
            "language": "en",
            "locale": "en_gb",
        }
        assert result.words == "filled.count.soap"

    def test_convert_to_coordinates_geojson(self, api, http_client, respond, c2c_geojson):
        respond(c2c_geojson)

        result = api.convert_to_coordinates_geojson("filled.count.soap")

        _, params, _ = _last_call(http_client)
        assert params["format"] == "geojson"
        assert result.type == "FeatureCollection"
        feature = result.features[0]
        assert feature.geometry_type == "Point"
        assert feature.coordinates == [-0.195521, 51.520847]
        assert feature.properties["words"] == "filled.count.soap"
        assert feature.bbox == (-0.195543, 51.520833, -0.195499, 51.52086)

    def test_convert_to_3wa_geojson(self, api, http_client, respond, c2c_geojson):
        respond(c2c_geojson)

        api.convert_to_3wa_geojson(Coordinates(51.520847, -0.195521))

        url, params, _ = _last_call(http_client)
        assert url.endswith("/v3/convert-to-3wa")
        assert params["format"] == "geojson"

    def test_api_error_is_raised(self, api, respond, bad_words_json):
        respond(bad_words_json, status_code=400)

        with pytest.raises(ApiError) as excinfo:
            api.convert_to_coordinates("filled.count")
        assert excinfo.value.code == "BadWords"


class TestAutosuggest:
    def test_autosuggest_without_options(self, api, http_client, respond, autosuggest_json):
        respond(autosuggest_json)

        result = api.autosuggest("filled.count.so")

        url, params, _ = _last_call(http_client)
        assert url == "https://api.what3words.com/v3/autosuggest"
        assert params == {"input": "filled.count.so"}
        assert [s.words for s in result.suggestions] == [
            "filled.count.soap",
            "filled.count.soaps",
        ]
        assert result.top.rank == 1

    def test_autosuggest_options_are_sent(self, api, http_client, respond, autosuggest_json):
        respond(autosuggest_json)
        options = AutoSuggestOptions(
            focus=Coordinates(51.4243877, -0.34745),
            clip_to_country=("GB", "BE"),
            clip_to_circle=Circle(Coordinates(51.4, -0.3), 10),
            n_results=3,
            n_focus_results=1,
            prefer_land=False,
        )

        api.autosuggest("filled.count.so", options)

        _, params, _ = _last_call(http_client)
        assert params["input"] == "filled.count.so"
        assert params["focus"] == "51.424388,-0.347450"
        assert params["clip-to-country"] == "GB,BE"
        assert params["clip-to-circle"] == "51.400000,-0.300000,10.000000"
        assert params["n-results"] == "3"
        assert params["n-focus-results"] == "1"
        assert params["prefer-land"] == "false"

    def test_autosuggest_with_coordinates(self, api, http_client, respond, autosuggest_json):
        autosuggest_json["suggestions"][0]["coordinates"] = {"lat": 51.520847, "lng": -0.195521}
        respond(autosuggest_json)

        result = api.autosuggest_with_coordinates("filled.count.so")

        url, _, _ = _last_call(http_client)
        assert url == "https://api.what3words.com/v3/autosuggest-with-coordinates"
        assert result.suggestions[0].coordinates == Coordinates(51.520847, -0.195521)
        assert result.suggestions[1].coordinates is None


class TestGridAndLanguages:
    BOX = BoundingBox(
        southwest=Coordinates(52.207988, 0.116126),
        northeast=Coordinates(52.208867, 0.11754),
    )

    def test_grid_section(self, api, http_client, respond, grid_json):
        respond(grid_json)

        result = api.grid_section(self.BOX)

        url, params, _ = _last_call(http_client)
        assert url == "https://api.what3words.com/v3/grid-section"
        assert params == {
            "bounding-box": "52.207988,0.116126,52.208867,0.117540",
            "format": "json",
        }
        assert len(result.lines) == 1
        assert result.lines[0].end == Coordinates(52.208867, 0.116126)

    def test_grid_section_geojson(self, api, http_client, respond):
        respond({"type": "FeatureCollection", "features": []})

        result = api.grid_section_geojson(self.BOX)

        _, params, _ = _last_call(http_client)
        assert params["format"] == "geojson"
        assert result.features == ()

    def test_available_languages(self, api, http_client, respond, languages_json):
        respond(languages_json)

        result = api.available_languages()

        url, params, _ = _last_call(http_client)
        assert url == "https://api.what3words.com/v3/available-languages"
        assert params is None
        assert result.codes() == ["en", "oo"]
        assert [loc.code for loc in result.languages[1].locales] == ["oo_cy", "oo_la"]
        assert result.languages[1].locales[0].native_name == "Латиница"


class TestMalformedResponses:
    def test_convert_without_square(self, api, respond, c2c_json):
        del c2c_json["square"]
        respond(c2c_json)

        with pytest.raises(ResponseDecodeError) as excinfo:
            api.convert_to_coordinates("filled.count.soap")

        assert excinfo.value.status_code == 200
        assert isinstance(excinfo.value.cause, KeyError)

    def test_suggestion_without_words(self, api, respond):
        respond({"suggestions": [{"country": "GB"}]})

        with pytest.raises(ResponseDecodeError):
            api.autosuggest("filled.count.soap")

    @pytest.mark.parametrize(
        "body",
        [
            {"lines": [{"start": "north", "end": "south"}]},
            {"lines": [{"start": {"lat": 95, "lng": 0}, "end": {"lat": 0, "lng": 0}}]},
            {"lines": ["not a line"]},
        ],
    )
    def test_grid_section_with_bad_lines(self, api, respond, body):
        respond(body)

        with pytest.raises(ResponseDecodeError):
            api.grid_section(TestGridAndLanguages.BOX)

    def test_language_without_code(self, api, respond):
        respond({"languages": [{"name": "English"}]})

        with pytest.raises(ResponseDecodeError):
            api.available_languages()
