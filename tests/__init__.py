"""Tests for nws_weather_core."""
