import pytest

from weather_cli.utils.conversions import (
    FALLBACK_EMOJI,
    convert_temperature,
    format_time,
    weather_emoji,
)


class TestConvertTemperature:
    def test_reference_value(self):
        celsius, fahrenheit = convert_temperature(300.0)

        assert celsius == pytest.approx(26.85)
        assert fahrenheit == pytest.approx(80.33)

    @pytest.mark.parametrize("kelvin", [0.0, 233.15, 273.15, 310.5])
    def test_fahrenheit_follows_celsius(self, kelvin):
        celsius, fahrenheit = convert_temperature(kelvin)

        assert celsius == pytest.approx(kelvin - 273.15)
        assert fahrenheit == pytest.approx((kelvin - 273.15) * 9 / 5 + 32)

    def test_freezing_point(self):
        assert convert_temperature(273.15) == pytest.approx((0.0, 32.0))


class TestWeatherEmoji:
    @pytest.mark.parametrize(
        "description,expected",
        [
            ("clear sky", "☀️"),
            ("broken clouds", "☁️"),
            ("light rain", "🌧️"),
            ("thunderstorm", "⛈️"),
            ("light snow", "❄️"),
            ("fog", "🌫️"),
            ("Clear Sky", "☀️"),
            ("HEAVY SNOW", "❄️"),
        ],
    )
    def test_keywords(self, description, expected):
        assert weather_emoji(description) == expected

    def test_first_keyword_in_order_wins(self):
        """Cloud is checked before rain, rain before thunderstorm"""
        assert weather_emoji("light rain and clouds") == "☁️"
        assert weather_emoji("thunderstorm with light rain") == "🌧️"

    @pytest.mark.parametrize("description", ["mist", "haze", "", "Unknown"])
    def test_fallback(self, description):
        assert weather_emoji(description) == FALLBACK_EMOJI


class TestFormatTime:
    def test_epoch(self):
        assert format_time(0) == "00:00"

    def test_utc_wall_clock(self):
        # 2023-11-14T22:13:20Z
        assert format_time(1700000000) == "22:13"
        assert format_time(1700040000) == "09:20"

    def test_zero_padding(self):
        assert format_time(3600 + 5 * 60) == "01:05"

    @pytest.mark.parametrize("timestamp", [-(10**20), 10**20])
    def test_out_of_range_falls_back_to_epoch(self, timestamp):
        assert format_time(timestamp) == "00:00"
