"""Tests for JSON syntax coloring."""

import json

from termlog.constants import BLUE, GREEN, RESET, YELLOW
from termlog.json_colorizer import colorize_json, strip_ansi


class TestColorizeJSON:
    """Test token coloring."""

    def test_key_and_values(self):
        text = json.dumps({"k": "v", "n": -1.5e3, "t": True, "f": False, "z": None})
        colored = colorize_json(text)
        assert f'{BLUE}"k"{RESET}: {GREEN}"v"{RESET}' in colored
        assert f"{YELLOW}-1500.0{RESET}" in colored
        assert f"{YELLOW}true{RESET}" in colored
        assert f"{YELLOW}false{RESET}" in colored
        assert f"{YELLOW}null{RESET}" in colored

    def test_string_matching_number_colored_separately(self):
        colored = colorize_json(json.dumps({"n": 42, "s": "42"}))
        assert colored.count(f"{YELLOW}42{RESET}") == 1
        assert colored.count(f'{GREEN}"42"{RESET}') == 1

    def test_repeated_key_not_double_wrapped(self):
        colored = colorize_json(json.dumps([{"a": "a"}, {"a": 1}], indent=2))
        assert colored.count(f'{BLUE}"a"{RESET}') == 2
        assert colored.count(f'{GREEN}"a"{RESET}') == 1
        assert f"{BLUE}{BLUE}" not in colored

    def test_digits_and_literals_inside_strings_untouched(self):
        colored = colorize_json(json.dumps(["null 7 true"]))
        assert colored == f'[{GREEN}"null 7 true"{RESET}]'

    def test_escaped_quotes(self):
        text = json.dumps({"q": 'say "hi": 1'})
        colored = colorize_json(text)
        assert f'{GREEN}"say \\"hi\\": 1"{RESET}' in colored
        assert strip_ansi(colored) == text

    def test_strip_ansi_restores_document(self):
        text = json.dumps({"a": [1, {"b": None}], "c": "d"}, indent=4)
        assert strip_ansi(colorize_json(text)) == text
