from typer.testing import CliRunner

import snipsmith
from snipsmith.ui.cli import app


def test_get_version_matches_public_api() -> None:
    assert snipsmith.get_version() == snipsmith.__version__
    assert isinstance(snipsmith.__version__, str)


def test_cli_version_flag() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0, result.stdout
    assert result.stdout.strip() == snipsmith.get_version()
