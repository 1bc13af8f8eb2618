import tempfile
import unittest
from pathlib import Path
from unittest import mock

from yaml import safe_load

from quoteplan import configuration
from quoteplan.errors import ConfigurationError
from quoteplan.model.layout import DEFAULT_LAYOUT_CONFIGURATION
from quoteplan.repository.configuration import ConfigurationRepository


class TestLayoutConfigurationFrom(unittest.TestCase):
    def test_defaults(self) -> None:
        config = configuration.get_default_configuration()

        self.assertEqual(
            configuration.layout_configuration_from(config),
            DEFAULT_LAYOUT_CONFIGURATION,
        )

    def test_partial_override(self) -> None:
        config = configuration.get_default_configuration()
        config["layout"] = {"day_width": 40}  # type: ignore[typeddict-item]

        layout = configuration.layout_configuration_from(config)

        self.assertEqual(layout["day_width"], 40)
        self.assertEqual(layout["daily_hour_limit"], 8)

    def test_invalid_values(self) -> None:
        for layout in (
            {"day_width": 0},
            {"daily_hour_limit": -8},
            {"minimum_width": -1},
            {"day_width": "wide"},
            {"item_row_height": True},
            {"colour": 3},
        ):
            config = configuration.get_default_configuration()
            config["layout"] = layout  # type: ignore[typeddict-item]
            with self.assertRaises(ConfigurationError):
                configuration.layout_configuration_from(config)

    def test_zero_minimum_width_is_allowed(self) -> None:
        config = configuration.get_default_configuration()
        config["layout"] = {"minimum_width": 0}  # type: ignore[typeddict-item]

        self.assertEqual(
            configuration.layout_configuration_from(config)["minimum_width"], 0
        )


class TestConfigurationRepository(unittest.TestCase):
    def setUp(self) -> None:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.config_path = Path(tmp.name) / "config.yaml"
        for name, value in (
            ("CONFIG_PATH", Path(tmp.name)),
            ("APP_CONFIG_PATH", self.config_path),
        ):
            patcher = mock.patch.object(configuration, name, value)
            patcher.start()
            self.addCleanup(patcher.stop)

    def test_missing_file_uses_defaults(self) -> None:
        repository = ConfigurationRepository()

        self.assertEqual(
            repository.get_config(), configuration.get_default_configuration()
        )

    def test_missing_keys_are_filled_in(self) -> None:
        self.config_path.write_text("work_on_saturday: true\n")

        config = ConfigurationRepository().get_config()

        self.assertTrue(config["work_on_saturday"])
        self.assertFalse(config["work_on_sunday"])
        self.assertEqual(config["layout"]["day_width"], 30)

    def test_non_mapping_file(self) -> None:
        self.config_path.write_text("- a\n- b\n")

        with self.assertRaises(ConfigurationError):
            ConfigurationRepository().get_config()

    def test_update_and_flush(self) -> None:
        repository = ConfigurationRepository()
        repository.update_config(work_on_sunday=True, layout={"day_width": 24})

        self.assertTrue(repository.flush())
        self.assertFalse(repository.flush())

        saved = safe_load(self.config_path.read_text())
        self.assertTrue(saved["work_on_sunday"])
        self.assertEqual(saved["layout"]["day_width"], 24)
        self.assertEqual(saved["layout"]["item_row_height"], 30)

    def test_update_rejects_bad_layout(self) -> None:
        repository = ConfigurationRepository()

        with self.assertRaises(ConfigurationError):
            repository.update_config(layout={"daily_hour_limit": 0})
        self.assertEqual(repository.get_config()["layout"]["daily_hour_limit"], 8)

    def test_get_config_returns_a_copy(self) -> None:
        repository = ConfigurationRepository()
        repository.get_config()["layout"]["day_width"] = 1

        self.assertEqual(repository.get_config()["layout"]["day_width"], 30)


if __name__ == "__main__":
    unittest.main(verbosity=2)
