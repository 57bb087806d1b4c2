from composite_gradients.utils import (
    format_seconds_compact,
    format_value,
    key_value_pairs_to_string,
    print_config_line,
)


def test_format_value():
    assert format_value(True) == "on"
    assert format_value(False) == "off"
    assert format_value(12345) == "12,345"
    assert format_value(0.5) == "0.5"
    assert format_value(2.0) == "2"
    assert format_value("leading") == "leading"


def test_key_value_pairs():
    line = key_value_pairs_to_string([("Samples", 16), ("Three tone", False)])
    assert line == "Samples: 16  Three tone: off"


def test_format_seconds():
    assert format_seconds_compact(0.0125) == "12.5ms"
    assert format_seconds_compact(2.5) == "2.500s"


def test_config_line_routes_to_debug(capsys):
    print_config_line("source", [("Hues", 4)], debug=True)
    print_config_line("source", [("Hues", 4)], debug=False)
    assert capsys.readouterr().out.splitlines() == [
        "[debug] [source] Hues: 4",
        "[source] Hues: 4",
    ]
