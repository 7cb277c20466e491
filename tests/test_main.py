import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from typer.testing import CliRunner

from friendlinks.checks.results import CheckResult, CheckStatus
from friendlinks.config import settings
from friendlinks.main import app

FRIENDS = """
[[blogs]]
name = "Alice"
url = "https://alice.example"

[[blogs]]
name = "Hidden"
url = "https://hidden.example"
hidden = true

[[nonBlogs]]
name = "Tools"
url = "https://tools.example"
"""


def _probe(statuses: dict[str, CheckStatus]):
    def probe(endpoint, timeout_ms, user_agent):
        status = statuses.get(endpoint.name, CheckStatus.OK)
        if status is CheckStatus.OK:
            return CheckResult(
                name=endpoint.name, url=endpoint.url, status=status, elapsed_ms=5, status_code=200
            )
        return CheckResult(
            name=endpoint.name,
            url=endpoint.url,
            status=status,
            elapsed_ms=timeout_ms,
            error_message=f"Timeout after {timeout_ms}ms",
        )

    return probe


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._td = tempfile.TemporaryDirectory()
        self.dir = Path(self._td.name)
        self.friends = self.dir / "friends.toml"
        self.friends.write_text(FRIENDS, encoding="utf-8")
        self.runner = CliRunner()

    def tearDown(self) -> None:
        self._td.cleanup()

    def test_check_all_healthy_exits_zero(self) -> None:
        with patch("friendlinks.main.run_http", side_effect=_probe({})) as mock_probe:
            result = self.runner.invoke(app, ["check", "--file", str(self.friends)])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Checking 2 sites...", result.output)
        self.assertIn("✅ Alice: OK (5ms)", result.output)
        self.assertIn("✅ OK: 2", result.output)
        self.assertNotIn("Hidden", result.output)
        self.assertEqual(mock_probe.call_count, 2)

    def test_check_timeout_exits_non_zero(self) -> None:
        with patch(
            "friendlinks.main.run_http", side_effect=_probe({"Tools": CheckStatus.TIMEOUT})
        ):
            result = self.runner.invoke(
                app, ["check", "--file", str(self.friends), "--timeout-ms", "250"]
            )

        self.assertEqual(result.exit_code, 1)
        self.assertIn("⏱️  Tools: TIMEOUT (250ms)", result.output)
        self.assertIn("⏱️  Timeouts: 1", result.output)

    def test_check_missing_file_aborts_before_probing(self) -> None:
        with patch("friendlinks.main.run_http") as mock_probe:
            result = self.runner.invoke(app, ["check", "--file", str(self.dir / "missing.toml")])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("Missing friends file", result.output)
        mock_probe.assert_not_called()

    def test_check_unreadable_file_reports_on_stderr(self) -> None:
        directory = self.dir / "dir.toml"
        directory.mkdir()

        with patch("friendlinks.main.run_http") as mock_probe:
            result = self.runner.invoke(app, ["check", "--file", str(directory)])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("Cannot read", result.output)
        self.assertIsInstance(result.exception, SystemExit)
        mock_probe.assert_not_called()

    def test_build_writes_page(self) -> None:
        footer = self.dir / "footer.html"
        footer.write_text("<footer>end</footer>", encoding="utf-8")
        output = self.dir / "dist" / "friends.html"

        result = self.runner.invoke(
            app,
            [
                "build",
                "--file",
                str(self.friends),
                "--footer",
                str(footer),
                "--output",
                str(output),
            ],
        )

        self.assertEqual(result.exit_code, 0, result.output)
        html = output.read_text(encoding="utf-8")
        self.assertIn("Alice", html)
        self.assertNotIn("Hidden", html)
        self.assertTrue(html.endswith("<footer>end</footer>"))

    def test_build_deploy_requires_settings(self) -> None:
        output = self.dir / "friends.html"
        with patch.object(settings, "DEPLOY_REMOTE_PATH", None), patch.object(
            settings, "DEPLOY_CACHE_URL", None
        ), patch("friendlinks.main.Deployer") as deployer_cls:
            result = self.runner.invoke(
                app,
                ["build", "--file", str(self.friends), "--output", str(output), "--deploy"],
            )

        self.assertEqual(result.exit_code, 1)
        deployer_cls.assert_not_called()

    def test_build_deploy_runs_deployer(self) -> None:
        output = self.dir / "friends.html"
        with patch.object(settings, "DEPLOY_REMOTE_PATH", "u@h:/p"), patch.object(
            settings, "DEPLOY_CACHE_URL", "https://h/cache/"
        ), patch("friendlinks.main.Deployer") as deployer_cls:
            result = self.runner.invoke(
                app,
                ["build", "--file", str(self.friends), "--output", str(output), "--deploy"],
            )

        self.assertEqual(result.exit_code, 0, result.output)
        deployer_cls.return_value.deploy.assert_called_once_with(output)


if __name__ == "__main__":
    unittest.main()
