"""Tests for the css-optimizer CLI commands."""
from __future__ import annotations

import json

from click.testing import CliRunner

from css_optimizer import __version__
from css_optimizer.cli.main import cli


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "shrink stylesheets" in result.output
        for command in ("optimize", "process", "settings", "serve"):
            assert command in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_serve_help(self) -> None:
        result = CliRunner().invoke(cli, ["serve", "--help"])
        assert result.exit_code == 0
        assert "--host" in result.output
        assert "--port" in result.output


# ---------------------------------------------------------------------------
# optimize
# ---------------------------------------------------------------------------


class TestOptimizeCommand:
    def test_stdout(self, tmp_path) -> None:
        src = tmp_path / "a.css"
        src.write_text(".a{color:red;color:blue;}", encoding="utf-8")
        result = CliRunner().invoke(cli, ["optimize", str(src)])
        assert result.exit_code == 0
        assert result.output == ".a{color:blue}\n"

    def test_stdin(self) -> None:
        result = CliRunner().invoke(cli, ["optimize", "-"], input="/* hi */ .a { color : red ; }")
        assert result.exit_code == 0
        assert result.output.strip() == ".a{color:red}"

    def test_output_file(self, tmp_path) -> None:
        src = tmp_path / "a.css"
        out = tmp_path / "a.min.css"
        src.write_text(".b{background:url(fonts/a.woff);}", encoding="utf-8")
        result = CliRunner().invoke(
            cli,
            ["optimize", str(src), "-o", str(out), "--base-url", "https://example.com/theme"],
        )
        assert result.exit_code == 0
        assert out.read_text(encoding="utf-8") == (
            '.b{background:url("https://example.com/theme/fonts/a.woff")}'
        )

    def test_no_preserve_at_rules(self, tmp_path) -> None:
        src = tmp_path / "a.css"
        src.write_text(".a{x:y} @media m{.b{x:y}}", encoding="utf-8")
        result = CliRunner().invoke(cli, ["optimize", str(src), "--no-preserve-at-rules"])
        assert result.output.strip() == ".a{x:y}"

    def test_missing_input(self, tmp_path) -> None:
        result = CliRunner().invoke(cli, ["optimize", str(tmp_path / "nope.css")])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# process
# ---------------------------------------------------------------------------


class TestProcessCommand:
    def _site(self, tmp_path):
        root = tmp_path / "www"
        (root / "css").mkdir(parents=True)
        (root / "css" / "style.css").write_text(".a { color: red; color: blue; }", encoding="utf-8")
        manifest = tmp_path / "styles.json"
        manifest.write_text(
            json.dumps(
                [
                    {"handle": "theme", "src": "/css/style.css"},
                    {"handle": "dashicons", "src": "/css/style.css"},
                ]
            ),
            encoding="utf-8",
        )
        return root, manifest

    def test_writes_files_and_summary(self, tmp_path) -> None:
        root, manifest = self._site(tmp_path)
        out = tmp_path / "out"
        result = CliRunner().invoke(
            cli,
            [
                "process", str(manifest),
                "--db", str(tmp_path / "opts.db"),
                "--root", str(root),
                "--site-url", "https://example.com",
                "-o", str(out),
            ],
        )
        assert result.exit_code == 0, result.output
        summary = json.loads(result.output)
        assert summary == [
            {
                "handle": "theme-optimized",
                "source": "https://example.com/css/style.css",
                "original_size": 31,
                "optimized_size": 14,
            }
        ]
        assert (out / "theme-optimized.css").read_text(encoding="utf-8") == ".a{color:blue}"

    def test_disabled_in_settings(self, tmp_path) -> None:
        root, manifest = self._site(tmp_path)
        db = str(tmp_path / "opts.db")
        runner = CliRunner()
        runner.invoke(cli, ["settings", "set", "--db", db, "--disabled"])
        result = runner.invoke(cli, ["process", str(manifest), "--db", db, "--root", str(root)])
        assert result.exit_code == 0
        assert json.loads(result.output) == []

    def test_bad_manifest(self, tmp_path) -> None:
        manifest = tmp_path / "styles.json"
        manifest.write_text('{"handle": "x"}', encoding="utf-8")
        result = CliRunner().invoke(cli, ["process", str(manifest), "--db", str(tmp_path / "o.db")])
        assert result.exit_code == 1
        assert "manifest must be a JSON list" in result.output


# ---------------------------------------------------------------------------
# settings
# ---------------------------------------------------------------------------


class TestSettingsCommands:
    def test_show_defaults(self, tmp_path) -> None:
        result = CliRunner().invoke(cli, ["settings", "show", "--db", str(tmp_path / "o.db")])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["enabled"] is True
        assert data["excluded_urls"] == []

    def test_set_changes_only_given_options(self, tmp_path) -> None:
        db = str(tmp_path / "o.db")
        runner = CliRunner()
        runner.invoke(cli, ["settings", "set", "--db", db, "--exclude-url", "*/vendor/*"])
        runner.invoke(cli, ["settings", "set", "--db", db, "--no-preserve-media-queries"])
        data = json.loads(runner.invoke(cli, ["settings", "show", "--db", db]).output)
        assert data["excluded_urls"] == ["*/vendor/*"]
        assert data["preserve_media_queries"] is False
        assert data["exclude_font_awesome"] is True

    def test_clear_exclusion_lists(self, tmp_path) -> None:
        db = str(tmp_path / "o.db")
        runner = CliRunner()
        runner.invoke(
            cli, ["settings", "set", "--db", db, "--exclude-url", "*/vendor/*", "--exclude-class", "hero"]
        )
        result = runner.invoke(cli, ["settings", "set", "--db", db, "--clear-excluded-urls"])
        assert result.exit_code == 0
        data = json.loads(runner.invoke(cli, ["settings", "show", "--db", db]).output)
        assert data["excluded_urls"] == []
        assert data["excluded_classes"] == ["hero"]

        runner.invoke(cli, ["settings", "set", "--db", db, "--clear-excluded-classes"])
        data = json.loads(runner.invoke(cli, ["settings", "show", "--db", db]).output)
        assert data["excluded_classes"] == []
