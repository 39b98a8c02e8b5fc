"""Tests for config module."""

from pathlib import Path

import pytest
import yaml

from rollmetrics.config import (
    INDICATORS,
    build_indicator,
    build_indicators,
    get_nested,
    load_config,
)
from rollmetrics.drawdown import MaximumDrawdown
from rollmetrics.performance import AnnualizedReturn, SharpeRatio
from rollmetrics.report import snapshot
from rollmetrics.types import IndicatorResult, Mode


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_valid_yaml(self, tmp_path: Path) -> None:
        """Test loading a valid YAML file."""
        config_data = {"indicators": {"mdd": {"indicator": "maximum_drawdown", "freq": 10}}}
        config_file = tmp_path / "test.yaml"
        config_file.write_text(yaml.dump(config_data))

        result = load_config(config_file)

        assert result == config_data

    def test_load_missing_file(self) -> None:
        """Test loading a non-existent file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config("/nonexistent/path/config.yaml")

    def test_load_empty_yaml(self, tmp_path: Path) -> None:
        """Test loading an empty YAML file returns empty dict."""
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")

        assert load_config(config_file) == {}

    def test_load_string_path(self, tmp_path: Path) -> None:
        """Test loading with string path instead of Path object."""
        config_file = tmp_path / "test.yaml"
        config_file.write_text("indicators: {}\n")

        assert load_config(str(config_file)) == {"indicators": {}}


class TestGetNested:
    """Tests for get_nested function."""

    def test_existing_path(self) -> None:
        cfg = {"indicators": {"sharpe": {"freq": 12}}}
        assert get_nested(cfg, "indicators", "sharpe", "freq") == 12

    def test_missing_path_default(self) -> None:
        cfg = {"indicators": {}}
        assert get_nested(cfg, "indicators", "sharpe", "freq", default=10) == 10

    def test_non_dict_intermediate(self) -> None:
        cfg = {"indicators": [1, 2]}
        assert get_nested(cfg, "indicators", "x") is None


class TestBuildIndicator:
    """Tests for build_indicator."""

    def test_registry_names_match_classes(self) -> None:
        for name, cls in INDICATORS.items():
            assert cls.name == name
        assert len(INDICATORS) == 17

    def test_builds_with_params(self) -> None:
        ind = build_indicator({"indicator": "sharpe_ratio", "freq": 12, "risk_free": 0.02})
        assert isinstance(ind, SharpeRatio)
        assert ind.freq == 12
        assert ind.risk_free == 0.02

    def test_mode_string(self) -> None:
        ind = build_indicator({"indicator": "annualized_return", "freq": 4, "mode": "simple"})
        assert isinstance(ind, AnnualizedReturn)
        assert ind.mode is Mode.SIMPLE

    def test_unknown_indicator(self) -> None:
        with pytest.raises(ValueError, match="Unknown indicator"):
            build_indicator({"indicator": "calmar", "freq": 10})

    def test_missing_indicator_key(self) -> None:
        with pytest.raises(ValueError, match="no 'indicator' key"):
            build_indicator({"freq": 10})

    def test_unexpected_parameter(self) -> None:
        with pytest.raises(ValueError, match="Bad parameters"):
            build_indicator({"indicator": "ror", "freq": 10, "mar": 0.0})

    def test_invalid_window(self) -> None:
        with pytest.raises(ValueError, match="freq"):
            build_indicator({"indicator": "ror", "freq": 0})

    def test_spec_not_mutated(self) -> None:
        spec = {"indicator": "ror", "freq": 5}
        build_indicator(spec)
        assert spec == {"indicator": "ror", "freq": 5}


class TestBuildIndicators:
    """Tests for build_indicators and snapshot."""

    @pytest.fixture
    def config(self, tmp_path: Path) -> dict:
        config_file = tmp_path / "indicators.yaml"
        config_file.write_text(
            "indicators:\n"
            "  mdd_10:\n"
            "    indicator: maximum_drawdown\n"
            "    freq: 10\n"
            "  ret_10:\n"
            "    indicator: annualized_return\n"
            "    freq: 10\n"
            "    mode: geometric\n"
            "  ret_20:\n"
            "    indicator: annualized_return\n"
            "    freq: 20\n"
        )
        return load_config(config_file)

    def test_builds_in_order(self, config) -> None:
        built = build_indicators(config)
        assert list(built) == ["mdd_10", "ret_10", "ret_20"]
        assert isinstance(built["mdd_10"], MaximumDrawdown)

    def test_missing_section_is_empty(self) -> None:
        assert build_indicators({}) == {}

    def test_section_must_be_mapping(self) -> None:
        with pytest.raises(ValueError, match="mapping"):
            build_indicators({"indicators": ["ror"]})

    def test_snapshot(self, config, reference_returns) -> None:
        built = build_indicators(config)
        for ind in built.values():
            ind.extend(reference_returns)

        results = snapshot(built)

        assert [r.name for r in results] == ["mdd_10", "ret_10", "ret_20"]
        assert all(isinstance(r, IndicatorResult) for r in results)
        assert results[0].value == pytest.approx(0.014, abs=1e-7)
        assert results[1].value == pytest.approx(0.19135615147149543, abs=1e-7)
        assert results[2].value is None
        assert results[2].meta == {"slots": 10, "indicator": "annualized_return"}


def test_shipped_config_builds() -> None:
    """conf/indicators.yaml stays loadable."""
    path = Path(__file__).resolve().parents[1] / "conf" / "indicators.yaml"
    built = build_indicators(load_config(path))
    assert len(built) == 7
    assert built["cagr_36"].freq == 36
