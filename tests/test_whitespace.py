from jgfmt.engine import FormatterEngine
from jgfmt.models import FormatterConfig
from jgfmt.rules.whitespace import WhitespaceCleanupRule


def test_whitespace_cleanup_simple():
    config = FormatterConfig()
    engine = FormatterEngine(config)
    engine.add_rule(WhitespaceCleanupRule(config))

    source = "int x = 1;   \nint y = 2;"
    expected = "int x = 1;\nint y = 2;\n"

    result = engine.format_string(source)
    assert result.source == expected
    assert result.modified is True


def test_whitespace_cleanup_idempotency():
    config = FormatterConfig()
    engine = FormatterEngine(config)
    engine.add_rule(WhitespaceCleanupRule(config))

    source = "int x = 1;\n"

    result1 = engine.format_string(source)
    assert result1.modified is False
    assert result1.source == source

    result2 = engine.format_string(result1.source)
    assert result2.modified is False
    assert result2.source == source


def test_whitespace_inside_text_block_is_kept():
    config = FormatterConfig()
    engine = FormatterEngine(config)
    engine.add_rule(WhitespaceCleanupRule(config))

    source = 'String s = """\n    a   \n    """;\n'

    result = engine.format_string(source)
    assert result.source == source
    assert result.modified is False


def test_empty_source_stays_empty():
    config = FormatterConfig()
    engine = FormatterEngine(config)
    engine.add_rule(WhitespaceCleanupRule(config))

    result = engine.format_string("")
    assert result.source == ""
    assert result.modified is False
