"""Unit tests for weather providers."""

import random

import httpx
import pytest

from skydive_logbook.application.ports.weather import WeatherProvider, WeatherProviderError
from skydive_logbook.domain.value_objects.safety import SafetyLevel, evaluate
from skydive_logbook.domain.value_objects.weather import WeatherObservation
from skydive_logbook.infrastructure.weather.fallback import FallbackWeatherProvider
from skydive_logbook.infrastructure.weather.openweathermap import OpenWeatherMapProvider
from skydive_logbook.infrastructure.weather.synthetic import SYNTHETIC_CONDITIONS, SyntheticWeatherProvider

pytestmark = pytest.mark.asyncio

OWM_PAYLOAD = {
    "weather": [{"description": "légère pluie"}],
    "main": {"temp": 17.6, "pressure": 1012, "humidity": 81},
    "visibility": 8500,
    "wind": {"speed": 5.0, "deg": 225},
}


def owm_provider(handler) -> OpenWeatherMapProvider:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return OpenWeatherMapProvider(api_key="test-key", base_url="https://owm.test/data/2.5", client=client)


class TestOpenWeatherMapProvider:

    async def test_maps_payload(self):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json=OWM_PAYLOAD)

        provider = owm_provider(handler)
        obs = await provider.fetch_current_conditions(46.2, 5.23)
        await provider.close()

        assert obs.temperature_celsius == 18
        assert obs.conditions_description == "Légère pluie"
        assert obs.wind_speed_kmh == pytest.approx(18.0)
        assert obs.wind == "18 km/h SO"
        assert obs.visibility == "8 km"
        assert obs.visibility_km == 8.0
        assert obs.pressure_hpa == 1012
        assert obs.humidity_percent == 81
        assert obs.source == "openweathermap"

        params = requests[0].url.params
        assert requests[0].url.path == "/data/2.5/weather"
        assert params["appid"] == "test-key"
        assert params["units"] == "metric"
        assert params["lang"] == "fr"

    async def test_halves_are_rounded_up(self):
        obs = OpenWeatherMapProvider.parse_payload({
            "weather": [{"description": "nuageux"}],
            "main": {"temp": 20.5},
            "visibility": 4500,
            "wind": {"speed": 20 / 3.6, "deg": 11.25},
        })

        assert obs.temperature_celsius == 21
        assert obs.visibility == "5 km"
        assert obs.wind == "20 km/h NNE"
        assert evaluate(obs) == SafetyLevel.GOOD

    async def test_missing_visibility_is_not_available(self):
        payload = {key: value for key, value in OWM_PAYLOAD.items() if key != "visibility"}
        provider = owm_provider(lambda request: httpx.Response(200, json=payload))

        obs = await provider.fetch_current_conditions(45.0, 5.0)

        assert obs.visibility == "N/A"
        assert obs.visibility_km == 10.0

    async def test_http_error_raises_provider_error(self):
        provider = owm_provider(lambda request: httpx.Response(401, json={"message": "Invalid API key"}))

        with pytest.raises(WeatherProviderError, match="401"):
            await provider.fetch_current_conditions(45.0, 5.0)

    async def test_malformed_payload_raises_provider_error(self):
        provider = owm_provider(lambda request: httpx.Response(200, json={"weather": []}))

        with pytest.raises(WeatherProviderError):
            await provider.fetch_current_conditions(45.0, 5.0)

    async def test_transport_error_raises_provider_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        provider = owm_provider(handler)

        with pytest.raises(WeatherProviderError):
            await provider.fetch_current_conditions(45.0, 5.0)

    async def test_api_key_is_required(self):
        with pytest.raises(ValueError):
            OpenWeatherMapProvider(api_key="")


class TestSyntheticWeatherProvider:

    async def test_observation_within_ranges(self):
        provider = SyntheticWeatherProvider(rng=random.Random(42))

        for _ in range(50):
            obs = await provider.fetch_current_conditions(45.0, 5.0)
            assert obs.conditions_description in SYNTHETIC_CONDITIONS
            assert 5 <= obs.temperature_celsius <= 29
            assert 5 <= obs.wind_speed_kmh <= 34
            assert 5 <= obs.visibility_km <= 12
            assert 1000 <= obs.pressure_hpa <= 1049
            assert 40 <= obs.humidity_percent <= 79
            assert obs.source == "synthetic"

    async def test_seeded_generation_is_reproducible(self):
        first = SyntheticWeatherProvider(rng=random.Random(7)).generate()
        second = SyntheticWeatherProvider(rng=random.Random(7)).generate()

        assert first.wind == second.wind
        assert first.visibility_km == second.visibility_km
        assert first.conditions_description == second.conditions_description


class FailingProvider(WeatherProvider):

    def __init__(self):
        self.calls = 0
        self.closed = False

    async def fetch_current_conditions(self, latitude, longitude):
        self.calls += 1
        raise WeatherProviderError("upstream unavailable")

    async def close(self):
        self.closed = True


class FixedProvider(WeatherProvider):

    def __init__(self, source="fixed"):
        self.source = source

    async def fetch_current_conditions(self, latitude, longitude):
        return WeatherObservation(temperature_celsius=15, conditions_description="Nuageux", source=self.source)


class TestFallbackWeatherProvider:

    async def test_primary_result_is_used(self):
        provider = FallbackWeatherProvider(FixedProvider("primary"), FixedProvider("fallback"))

        obs = await provider.fetch_current_conditions(45.0, 5.0)

        assert obs.source == "primary"

    async def test_failure_is_answered_by_fallback(self):
        primary = FailingProvider()
        provider = FallbackWeatherProvider(primary, FixedProvider("fallback"))

        obs = await provider.fetch_current_conditions(45.0, 5.0)

        assert primary.calls == 1
        assert obs.source == "fallback"

    async def test_close_closes_both(self):
        primary = FailingProvider()
        provider = FallbackWeatherProvider(primary, FixedProvider())

        await provider.close()

        assert primary.closed
