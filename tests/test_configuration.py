"""
Test configuration loading and its effect on command defaults.
"""

import yaml

from photodir.config import Config


def write_config(config_path, data) -> None:
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(yaml.safe_dump(data) if isinstance(data, dict) else data)


class TestConfiguration:
    """Test configuration values and fallbacks."""

    def test_defaults_without_file(self, test_config_path):
        config = Config(config_path=test_config_path)
        assert config.data == {}
        assert config.get_max_interval() == 0
        assert config.get_digits() is None
        assert config.get_sort() == "path"
        assert not test_config_path.exists(), "Reading config must not create it"

    def test_values_from_file(self, test_config_path):
        write_config(test_config_path, {"max_interval": 3, "digits": 4, "sort": "created"})
        config = Config(config_path=test_config_path)
        assert config.get_max_interval() == 3
        assert config.get_digits() == 4
        assert config.get_sort() == "created"

    def test_invalid_values_fall_back(self, test_config_path):
        write_config(test_config_path, {"max_interval": "soon", "digits": 0, "sort": "size"})
        config = Config(config_path=test_config_path)
        assert config.get_max_interval() == 0
        assert config.get_digits() is None
        assert config.get_sort() == "path"

    def test_malformed_yaml(self, test_config_path):
        write_config(test_config_path, "max_interval: [unclosed")
        assert Config(config_path=test_config_path).data == {}

    def test_non_mapping_yaml(self, test_config_path):
        write_config(test_config_path, "- just\n- a list\n")
        assert Config(config_path=test_config_path).data == {}

    def test_default_location(self):
        config = Config()
        assert config.config_path.name == "config.yml"
        assert config.program_root.name == ".photodir"


class TestConfigDefaults:
    """Test that the command line uses configured defaults."""

    def test_max_interval_default(self, cli_runner, make_photo_dir, test_config_path):
        directory = make_photo_dir("Weekend", {
            "a.jpg": "2025-05-01T12:00:00",
            "b.jpg": "2025-05-03T12:00:00",
        })
        result = cli_runner("-d", directory, "rename", config_path=test_config_path)
        assert result.exit_code == 1
        assert "too large" in result.output

        write_config(test_config_path, {"max_interval": 2})
        result = cli_runner("-d", directory, "rename", config_path=test_config_path)
        assert result.exit_code == 0
        assert (directory.parent / "2025-05-01 - 03 Weekend").is_dir()

    def test_digits_default(self, cli_runner, make_photo_dir, test_config_path):
        write_config(test_config_path, {"digits": 3})
        directory = make_photo_dir("Trip", {"x.jpg": "2025-05-01T12:00:00"})
        result = cli_runner("-d", directory, "files-rename", config_path=test_config_path)
        assert result.exit_code == 0
        assert (directory / "Trip 001.jpg").exists()

    def test_help_shows_configured_default(self, cli_runner, test_config_path):
        write_config(test_config_path, {"max_interval": 7})
        result = cli_runner("rename", "--help", config_path=test_config_path)
        assert result.exit_code == 0
        assert "default: 7" in result.output
