"""
Tests for Configuration Loading
===============================
"""

import pytest
import yaml

from handsignals.modules.utils.config import Config, MetricsConfig


@pytest.fixture(autouse=True)
def fresh_config():
    Config.reset()
    yield
    Config.reset()


def write_config(tmp_path, data):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump(data))
    return str(path)


class TestMetricsConfig:
    """Test suite for MetricsConfig."""

    def test_defaults(self):
        config = MetricsConfig()
        assert config.min_flex_rel_distance == 0.5
        assert config.max_local_rot_z == 90.0
        assert config.base_rotation_bone == 1

    def test_from_dict(self):
        config = MetricsConfig.from_dict({
            "pinch_max_rel_distance": 0.7,
            "min_local_rot_z": 5,
            "base_rotation_bone": 2.0,
        })
        assert config.pinch_max_rel_distance == 0.7
        assert config.min_local_rot_z == 5.0
        assert isinstance(config.min_local_rot_z, float)
        assert config.base_rotation_bone == 2
        assert isinstance(config.base_rotation_bone, int)
        # untouched fields keep defaults
        assert config.palm_line_min_rel_distance == 0.2

    def test_from_dict_ignores_unknown_keys(self):
        config = MetricsConfig.from_dict({"not_a_field": 1})
        assert config == MetricsConfig()

    def test_frozen(self):
        with pytest.raises(AttributeError):
            MetricsConfig().max_local_rot_z = 10.0


class TestConfig:
    """Test suite for the YAML config manager."""

    def test_singleton(self):
        assert Config() is Config()

    def test_loads_file(self, tmp_path):
        path = write_config(tmp_path, {
            "metrics": {"max_local_rot_z": 45.0, "base_rotation_bone": 2},
            "logging": {"level": "DEBUG"},
        })
        config = Config().load(path)

        assert config.get("metrics.max_local_rot_z") == 45.0
        assert config.get("logging.level") == "DEBUG"
        assert config.metrics_config.max_local_rot_z == 45.0
        assert config.metrics_config.base_rotation_bone == 2

    def test_missing_file_uses_defaults(self, tmp_path):
        config = Config().load(str(tmp_path / "absent.yaml"))

        assert config.metrics == {}
        assert config.metrics_config == MetricsConfig()

    def test_get_default(self, tmp_path):
        config = Config().load(write_config(tmp_path, {"metrics": {}}))

        assert config.get("metrics.unknown", 3) == 3
        assert config.get("nothing.here") is None
        assert config.get_section("logging") == {}

    def test_overrides(self, tmp_path):
        path = write_config(tmp_path, {"metrics": {"pinch_max_rel_distance": 0.6, "pinch_min_rel_distance": 0.1}})
        config = Config().load(path, overrides={"metrics": {"pinch_max_rel_distance": 0.9}})

        assert config.metrics_config.pinch_max_rel_distance == 0.9
        assert config.metrics_config.pinch_min_rel_distance == 0.1

    def test_validation_warnings(self, tmp_path):
        path = write_config(tmp_path, {
            "metrics": {"max_local_rot_z": "wide", "min_local_rot_z": True, "base_rotation_bone": 1},
        })
        config = Config().load(path)
        warnings = config._validate()

        assert any("metrics.max_local_rot_z" in w for w in warnings)
        assert any("metrics.min_local_rot_z" in w for w in warnings)
        assert any("logging" in w for w in warnings)
        assert not any("base_rotation_bone" in w for w in warnings)

    def test_inverted_bands(self, tmp_path):
        path = write_config(tmp_path, {
            "metrics": {
                "pinch_max_rel_distance": 0.1,
                "pinch_min_rel_distance": 0.6,
                "min_local_rot_z": 30.0,
                "max_local_rot_z": 400.0,
                "base_rotation_bone": -1,
            },
            "logging": {"level": "INFO"},
        })
        warnings = Config().load(path)._validate()

        assert any("pinch_min_rel_distance" in w and "below" in w for w in warnings)
        assert any("max_local_rot_z (400.0) is outside" in w for w in warnings)
        assert any("base_rotation_bone" in w for w in warnings)
        assert not any("palm_line" in w for w in warnings)

    def test_bundled_config(self):
        config = Config().load()

        assert config.metrics_config == MetricsConfig()
        assert config._validate() == []

    def test_reset(self, tmp_path):
        Config().load(write_config(tmp_path, {"metrics": {"max_local_rot_z": 10.0}}))
        Config.reset()
        assert Config().get("metrics.max_local_rot_z") is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
