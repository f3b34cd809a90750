"""Tests for CLI commands."""

import json
from pathlib import Path

import httpx
import respx

from aether.cli import main

BASE = "https://test-owm.example.com"


def _mock_owm(current: dict, forecast: dict):
    respx.get(f"{BASE}/weather").mock(return_value=httpx.Response(200, json=current))
    respx.get(f"{BASE}/forecast").mock(return_value=httpx.Response(200, json=forecast))


class TestCLI:
    def test_no_command_returns_1(self, capsys):
        result = main([])
        assert result == 1

    def test_config_show_masks_key(self, config_yaml_path: Path, capsys, monkeypatch):
        monkeypatch.delenv("AETHER_API_KEY", raising=False)
        result = main(["--config", str(config_yaml_path), "config", "show"])
        assert result == 0
        captured = capsys.readouterr()
        assert "file-key" not in captured.out
        assert "test-owm.example.com" in captured.out

    @respx.mock
    def test_now_city(self, config_yaml_path: Path, capsys, current_payload, forecast_payload):
        _mock_owm(current_payload(name="Toronto"), forecast_payload())
        result = main(["--config", str(config_yaml_path), "now", "--city", "toronto"])
        assert result == 0
        out = capsys.readouterr().out
        assert "AETHER | Toronto" in out
        assert "5-DAY FORECAST" in out

    @respx.mock
    def test_now_here_json(self, config_yaml_path: Path, capsys, current_payload, forecast_payload):
        _mock_owm(current_payload(), forecast_payload())
        result = main([
            "--config", str(config_yaml_path), "now", "--here", "--fahrenheit", "--json",
        ])
        assert result == 0
        data = json.loads(capsys.readouterr().out)
        assert data["weather"]["unit"] == "°F"
        assert data["weather"]["temp"] == 71
        assert data["preferences"]["fahrenheit"] is True

    @respx.mock
    def test_not_found(self, config_yaml_path: Path, capsys):
        respx.get(f"{BASE}/weather").mock(
            return_value=httpx.Response(404, json={"cod": "404", "message": "city not found"})
        )
        result = main(["--config", str(config_yaml_path), "now", "--city", "Nowhereville"])
        assert result == 1
        assert "City not found" in capsys.readouterr().out

    def test_here_without_location(self, tmp_path: Path, capsys):
        config_path = tmp_path / "test.yaml"
        config_path.write_text("display:\n  color: false\n")
        result = main(["--config", str(config_path), "now", "--here"])
        assert result == 1
        assert "Geolocation not supported" in capsys.readouterr().out

    @respx.mock
    def test_panel(self, config_yaml_path: Path, capsys, current_payload, forecast_payload):
        _mock_owm(current_payload(), forecast_payload())
        result = main([
            "--config", str(config_yaml_path), "now", "--city", "Toronto", "--panel", "wind",
        ])
        assert result == 0
        out = capsys.readouterr().out
        assert "== WIND ==" in out
        assert "Gust" in out

    @respx.mock
    def test_day_panel(self, config_yaml_path: Path, capsys, current_payload, forecast_payload):
        _mock_owm(current_payload(), forecast_payload())
        result = main([
            "--config", str(config_yaml_path), "now", "--city", "Toronto", "--day", "2", "--json",
        ])
        assert result == 0
        data = json.loads(capsys.readouterr().out)
        assert data["panel"]["kind"] == "forecast-day"

    @respx.mock
    def test_day_out_of_range(self, config_yaml_path: Path, capsys, current_payload, forecast_payload):
        _mock_owm(current_payload(), forecast_payload(count=8))
        result = main([
            "--config", str(config_yaml_path), "now", "--city", "Toronto", "--day", "4",
        ])
        assert result == 1
        assert "--day must be between 1 and" in capsys.readouterr().out
