import logging

import pytest
from jgfmt.models import Language
from jgfmt_cli.config import FormatConfig


@pytest.fixture
def log():
    return logging.getLogger("tests.config")


def test_defaults_without_file(log):
    configs = FormatConfig(None, log).formatter_configs()

    assert configs[Language.JAVA].indent_size == 4
    assert configs[Language.GROOVY].use_tabs is False


def test_language_tables_override_shared_keys(tmp_path, log):
    path = tmp_path / "jgfmt.toml"
    path.write_text(
        "[tool.jgfmt]\n"
        "indent_size = 2\n"
        "\n"
        "[tool.jgfmt.groovy]\n"
        "use_tabs = true\n"
    )

    configs = FormatConfig(path, log).formatter_configs()

    assert configs[Language.JAVA].indent_size == 2
    assert configs[Language.JAVA].use_tabs is False
    assert configs[Language.GROOVY].indent_size == 2
    assert configs[Language.GROOVY].use_tabs is True


@pytest.mark.parametrize(
    "body",
    [
        "[tool.jgfmt]\nindent_size = 0\n",
        "[tool.jgfmt]\nunknown_key = 1\n",
        "[tool.jgfmt\nindent_size = 2\n",
    ],
)
def test_invalid_config_falls_back_to_defaults(tmp_path, log, caplog, body):
    path = tmp_path / "jgfmt.toml"
    path.write_text(body)

    with caplog.at_level(logging.ERROR, logger="tests.config"):
        configs = FormatConfig(path, log).formatter_configs()

    assert configs[Language.JAVA].indent_size == 4
    assert "Could not load config" in caplog.text


def test_missing_config_file_logged(tmp_path, log, caplog):
    with caplog.at_level(logging.ERROR, logger="tests.config"):
        FormatConfig(tmp_path / "absent.toml", log)

    assert "absent.toml" in caplog.text
