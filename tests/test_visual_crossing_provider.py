import httpx
import pytest

from weather_cache.exceptions import (
    UpstreamError,
    UpstreamMalformedResponseError,
    UpstreamUnavailableError,
)
from weather_cache.repositories import VisualCrossingProvider
from weather_cache.repositories.visual_crossing_provider import format_temperature

BASE_URL = "https://weather.example.test/timeline"


def make_provider(handler, api_key="secret-key"):
    """Provider whose HTTP client answers every request with ``handler``."""
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return VisualCrossingProvider(client, api_key=api_key, base_url=BASE_URL)


def json_handler(payload, status_code=200, seen=None):
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, json=payload)

    return handler


class TestVisualCrossingProvider:
    """Test cases for the Visual Crossing upstream client."""

    @pytest.mark.asyncio
    async def test_fetch_success(self):
        """The documented Boston example."""
        seen = []
        provider = make_provider(
            json_handler({"currentConditions": {"temp": 72.456, "conditions": "Clear"}}, seen=seen)
        )

        result = await provider.fetch("Boston")

        assert result.location_name == "Boston"
        assert result.temperature == "72.46"
        assert result.condition == "Clear"
        assert len(seen) == 1

    @pytest.mark.asyncio
    async def test_request_url_and_credential(self):
        """City goes in the path, the key in the query string."""
        seen = []
        provider = make_provider(
            json_handler({"currentConditions": {"temp": 1, "conditions": "Snow"}}, seen=seen)
        )

        await provider.fetch("San Jose")

        request = seen[0]
        assert request.method == "GET"
        assert request.url.path == "/timeline/San Jose"
        assert request.url.raw_path.split(b"?")[0] == b"/timeline/San%20Jose"
        assert request.url.params["key"] == "secret-key"

    def test_build_url_encodes_path_separators(self):
        """A slash in the city cannot escape the path segment."""
        provider = VisualCrossingProvider(httpx.AsyncClient(), api_key="k", base_url=BASE_URL + "/")

        assert provider.build_url("a/b") == f"{BASE_URL}/a%2Fb"

    @pytest.mark.asyncio
    async def test_location_name_echoes_query(self):
        """location_name is the query, not anything the provider says."""
        provider = make_provider(
            json_handler(
                {
                    "resolvedAddress": "Boston, MA, United States",
                    "currentConditions": {"temp": 50, "conditions": "Overcast"},
                }
            )
        )

        result = await provider.fetch("boston")

        assert result.location_name == "boston"

    @pytest.mark.asyncio
    async def test_integer_temperature_formatted(self):
        """Integer temperatures still get two fraction digits."""
        provider = make_provider(json_handler({"currentConditions": {"temp": 5, "conditions": "Clear"}}))

        result = await provider.fetch("Reykjavik")

        assert result.temperature == "5.00"

    @pytest.mark.asyncio
    async def test_not_found_status(self):
        """A 404 becomes UpstreamError carrying the status code."""
        provider = make_provider(json_handler({"error": "Bad location"}, status_code=404))

        with pytest.raises(UpstreamError) as exc_info:
            await provider.fetch("Atlantis")

        assert exc_info.value.status_code == 404
        assert "404" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_server_error_status(self):
        """Any non-200 status is an UpstreamError."""
        provider = make_provider(json_handler({}, status_code=503))

        with pytest.raises(UpstreamError, match="Weather API returned status code 503"):
            await provider.fetch("Boston")

    @pytest.mark.asyncio
    async def test_connection_error(self):
        """Transport failures become UpstreamUnavailableError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        provider = make_provider(handler)

        with pytest.raises(UpstreamUnavailableError, match="Failed to call Weather API"):
            await provider.fetch("Boston")

    @pytest.mark.asyncio
    async def test_timeout(self):
        """Timeouts are transport failures too."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        provider = make_provider(handler)

        with pytest.raises(UpstreamUnavailableError):
            await provider.fetch("Boston")

    @pytest.mark.asyncio
    async def test_body_not_json(self):
        """An undecodable body is a malformed response."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>oops</html>")

        provider = make_provider(handler)

        with pytest.raises(UpstreamMalformedResponseError, match="Failed to decode API response"):
            await provider.fetch("Boston")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {},
            [],
            {"currentConditions": None},
            {"currentConditions": "sunny"},
            {"currentConditions": {"conditions": "Clear"}},
            {"currentConditions": {"temp": "72.4", "conditions": "Clear"}},
            {"currentConditions": {"temp": True, "conditions": "Clear"}},
            {"currentConditions": {"temp": 72.4}},
            {"currentConditions": {"temp": 72.4, "conditions": 3}},
            {"currentConditions": {"temp": 10**400, "conditions": "Clear"}},
        ],
    )
    async def test_missing_or_mistyped_fields(self, payload):
        """Missing or wrongly typed fields raise instead of crashing."""
        provider = make_provider(json_handler(payload))

        with pytest.raises(UpstreamMalformedResponseError):
            await provider.fetch("Boston")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
    async def test_non_finite_temperature(self, literal):
        """NaN and infinities in the body are rejected, not formatted."""

        def handler(request: httpx.Request) -> httpx.Response:
            body = '{"currentConditions": {"temp": ' + literal + ', "conditions": "Clear"}}'
            return httpx.Response(200, content=body.encode(), headers={"content-type": "application/json"})

        provider = make_provider(handler)

        with pytest.raises(UpstreamMalformedResponseError, match="not a finite number"):
            await provider.fetch("Boston")

    def test_is_available(self):
        """Availability reflects whether a key is configured."""
        client = httpx.AsyncClient()
        assert VisualCrossingProvider(client, api_key="k", base_url=BASE_URL).is_available()
        assert not VisualCrossingProvider(client, api_key="", base_url=BASE_URL).is_available()

    @pytest.mark.parametrize(
        "value,expected",
        [(72.456, "72.46"), (-3.1, "-3.10"), (0, "0.00"), (99.999, "100.00")],
    )
    def test_format_temperature(self, value, expected):
        """Always two fraction digits with a dot separator."""
        assert format_temperature(value) == expected
