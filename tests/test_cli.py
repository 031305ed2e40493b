from typer.testing import CliRunner

from jgfmt_cli.main import app

runner = CliRunner()

UNFORMATTED = "class A{\nint x;\n}\n"
FORMATTED = "class A {\n    int x;\n}\n"


def test_cli_help():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "Format Java and Groovy files in place" in result.stdout
    assert "only format java files" in result.stdout
    assert "create a backup file" in result.stdout


def test_cli_help_does_not_touch_files(tmp_path):
    path = tmp_path / "A.java"
    path.write_text(UNFORMATTED)

    result = runner.invoke(app, ["--help", "-b", str(path)])

    assert result.exit_code == 0
    assert path.read_text() == UNFORMATTED
    assert [p.name for p in tmp_path.iterdir()] == ["A.java"]


def test_cli_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "java and groovy source formatter" in result.stdout
    assert "version 1.0.0" in result.stdout


def test_cli_version_does_not_format(tmp_path):
    path = tmp_path / "A.java"
    path.write_text(UNFORMATTED)

    result = runner.invoke(app, ["--version", str(path)])

    assert result.exit_code == 0
    assert path.read_text() == UNFORMATTED


def test_cli_requires_exactly_one_path(tmp_path):
    result = runner.invoke(app, [])
    assert result.exit_code == 0
    assert "Exactly one file can be formatted" in result.stdout

    result = runner.invoke(app, [str(tmp_path), str(tmp_path)])
    assert result.exit_code == 0
    assert "Exactly one file can be formatted" in result.stdout


def test_cli_missing_path(tmp_path):
    result = runner.invoke(app, [str(tmp_path / "nope.java")])
    assert result.exit_code == 0
    assert "cannot format:" in result.stdout


def test_cli_formats_file(tmp_path):
    path = tmp_path / "A.java"
    path.write_text(UNFORMATTED)

    result = runner.invoke(app, [str(path)])

    assert result.exit_code == 0
    assert path.read_text() == FORMATTED
    assert [p.name for p in tmp_path.iterdir()] == ["A.java"]


def test_cli_backup_flag(tmp_path):
    path = tmp_path / "A.java"
    path.write_text(UNFORMATTED)

    result = runner.invoke(app, ["-b", str(path)])

    assert result.exit_code == 0
    backups = list(tmp_path.glob("A.java_BACKUP_*"))
    assert len(backups) == 1
    assert backups[0].read_text() == UNFORMATTED
    assert path.read_text() == FORMATTED


def test_cli_directory_with_language_filter(tmp_path):
    java = tmp_path / "A.java"
    java.write_text(UNFORMATTED)
    groovy = tmp_path / "b.groovy"
    groovy.write_text("if(x){\nfoo()\n}\n")

    result = runner.invoke(app, ["--groovy", str(tmp_path)])

    assert result.exit_code == 0
    assert java.read_text() == UNFORMATTED
    assert groovy.read_text() == "if (x) {\n    foo()\n}\n"


def test_cli_both_filters_format_nothing(tmp_path):
    java = tmp_path / "A.java"
    java.write_text(UNFORMATTED)
    groovy = tmp_path / "b.groovy"
    groovy.write_text("if(x){\nfoo()\n}\n")

    result = runner.invoke(app, ["--java", "--groovy", str(tmp_path)])

    assert result.exit_code == 0
    assert java.read_text() == UNFORMATTED
    assert groovy.read_text() == "if(x){\nfoo()\n}\n"


def test_cli_config_file(tmp_path):
    config = tmp_path / "jgfmt.toml"
    config.write_text("[tool.jgfmt]\nindent_size = 2\n")
    path = tmp_path / "A.java"
    path.write_text(UNFORMATTED)

    result = runner.invoke(app, ["--config", str(config), str(path)])

    assert result.exit_code == 0
    assert path.read_text() == "class A {\n  int x;\n}\n"


def test_cli_unknown_option_aborts(tmp_path):
    path = tmp_path / "A.java"
    path.write_text(UNFORMATTED)

    result = runner.invoke(app, ["--recursive", str(path)])

    assert result.exit_code == 2
    assert path.read_text() == UNFORMATTED
