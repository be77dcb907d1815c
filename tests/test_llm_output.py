from __future__ import annotations

import pytest

from pipeline.errors import MalformedResponseError
from utils.llm_output import extract_yaml_block, load_yaml_response, parse_index


def test_prefers_yaml_fence() -> None:
    response = "Sure!\n```yaml\n- 1 # B\n- 0 # A\n```\nHope this helps."
    assert extract_yaml_block(response) == "- 1 # B\n- 0 # A"


def test_falls_back_to_untagged_fence() -> None:
    response = "```\nyaml\nsummary: hi\n```"
    assert extract_yaml_block(response) == "summary: hi"


def test_falls_back_to_raw_text() -> None:
    assert extract_yaml_block("  - 0\n- 1  ") == "- 0\n- 1"


def test_empty_response_is_malformed() -> None:
    with pytest.raises(MalformedResponseError):
        extract_yaml_block("   ")


def test_load_checks_top_level_type() -> None:
    assert load_yaml_response("```yaml\n- 2\n- 0\n```", list) == [2, 0]
    with pytest.raises(MalformedResponseError, match="not a dict"):
        load_yaml_response("```yaml\n- 2\n```", dict)


def test_load_rejects_invalid_yaml() -> None:
    with pytest.raises(MalformedResponseError, match="not valid YAML"):
        load_yaml_response("```yaml\nkey: [unclosed\n```", dict)


@pytest.mark.parametrize("entry, expected", [(3, 3), ("3", 3), ("3 # Flow Engine", 3), (" 12 #x", 12)])
def test_parse_index(entry, expected) -> None:
    assert parse_index(entry) == expected


@pytest.mark.parametrize("entry", ["Flow Engine", None, True, "# 3"])
def test_parse_index_rejects_garbage(entry) -> None:
    with pytest.raises(MalformedResponseError):
        parse_index(entry)
