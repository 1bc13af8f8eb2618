import tempfile
import unittest
from pathlib import Path
from unittest import mock

from typer.testing import CliRunner
from yaml import safe_load

from quoteplan import configuration
from quoteplan.repository.configuration import CONFIGURATION_REPO
from quoteplan.service.layout import clear_layout_cache
from quoteplan.terminal.app import app

PLAN = """\
segments:
  - id: a1
    originalRequirementId: 1
    resource_id: 1
    resource_name: Alice
    machine_name: Lathe
    resource_category: Machine
    segment_hours: 4
    total_training_hours: 4
    start_day: 1
    duration_days: 1
    start_hour_offset: 4
  - id: b1
    originalRequirementId: 2
    resource_id: 2
    resource_name: Bob
    machine_name: CAD
    resource_category: Software
    segment_hours: 8
    total_training_hours: 8
    start_day: 3
    duration_days: 1
    start_hour_offset: 0
"""


class TestCli(unittest.TestCase):
    def setUp(self) -> None:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.root = Path(tmp.name)
        for name, value in (
            ("CONFIG_PATH", self.root),
            ("APP_CONFIG_PATH", self.root / "config.yaml"),
        ):
            patcher = mock.patch.object(configuration, name, value)
            patcher.start()
            self.addCleanup(patcher.stop)

        # The repository caches the configuration it loaded first
        CONFIGURATION_REPO._config = None
        self.addCleanup(setattr, CONFIGURATION_REPO, "_config", None)
        clear_layout_cache()

        self.runner = CliRunner()
        self.plan = self.root / "plan.yaml"
        self.plan.write_text(PLAN)

    def test_layout_prints_yaml(self) -> None:
        result = self.runner.invoke(app, ["layout", str(self.plan)])

        self.assertEqual(result.exit_code, 0, result.output)
        document = safe_load(result.stdout)
        self.assertEqual(document["status"], "ready")
        self.assertEqual(
            [task["horizontal_offset"] for task in document["tasks"]], [15.0, 60.0]
        )
        self.assertEqual(document["engagements"][1]["padded_start_day"], 2)
        self.assertEqual(document["total_grid_height"], 140)

    def test_layout_alias_and_saturday_flag(self) -> None:
        result = self.runner.invoke(app, ["l", str(self.plan), "--saturday"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(safe_load(result.stdout)["rest_days"][:2], [7, 14])

    def test_gantt_renders_chart(self) -> None:
        result = self.runner.invoke(
            app, ["--no-header", "gantt", str(self.plan), "--days", "14"]
        )

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Alice", result.output)
        self.assertIn("Bob", result.output)
        self.assertIn("Month 1", result.output)

    def test_gantt_empty_plan(self) -> None:
        empty = self.root / "empty.yaml"
        empty.write_text("segments: []\n")

        result = self.runner.invoke(app, ["--no-header", "gantt", str(empty)])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("No training assignments", result.output)

    def test_gantt_unreadable_plan_shows_error_state(self) -> None:
        broken = self.root / "broken.yaml"
        broken.write_text("segments: [unclosed\n")

        result = self.runner.invoke(app, ["--no-header", "gantt", str(broken)])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("Error:", result.output)

    def test_gantt_rejects_bad_scroll_day(self) -> None:
        result = self.runner.invoke(
            app, ["gantt", str(self.plan), "--scroll-day", "later"]
        )

        self.assertNotEqual(result.exit_code, 0)

    def test_calendar(self) -> None:
        result = self.runner.invoke(app, ["--no-header", "calendar"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Month 12", result.output)

    def test_config_set_and_reject(self) -> None:
        result = self.runner.invoke(app, ["config", "set", "--work-on-sunday"])
        self.assertEqual(result.exit_code, 0, result.output)
        saved = safe_load((self.root / "config.yaml").read_text())
        self.assertTrue(saved["work_on_sunday"])

        result = self.runner.invoke(app, ["config", "set", "--day-width", "0"])
        self.assertEqual(result.exit_code, 1)


if __name__ == "__main__":
    unittest.main(verbosity=2)
