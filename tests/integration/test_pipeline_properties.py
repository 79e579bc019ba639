"""
Integration tests for the full validate/format/minify pipeline.

Covers the end-to-end scenarios and the canonical re-serialization
properties over a corpus of documents.
"""

import json

import pytest

import jsontidy
from jsontidy import ErrorCategory, Formatter, Processor

VALID_DOCUMENTS = [
    '{"a":1}',
    '{"a":{"b":[1,2,3]}}',
    "[]",
    "{}",
    '"just a string"',
    "3.14159",
    "-0",
    "null",
    '{"unicode": "héllo wörld €", "emoji": "😀"}',
    '{"escaped": "line\\nbreak \\"quoted\\" \\\\ \\u0041"}',
    '{"dup": 1, "dup": 2}',
    '[1, [2, [3, [4, [5]]]], {"x": [true, false, null]}]',
    '{\n  "z": 1,\n  "a": 2,\n  "m": {"nested": []}\n}',
    '{"big": 123456789012345678901234567890}',
    '{"overflow": [1e400, -1E400, 2.5e+999]}',
]

INVALID_DOCUMENTS = [
    '{"a": 1,}',
    "[1, 2",
    "{'a': 1}",
    '{"a" 1}',
    "undefined",
    '{"a": 01}',
    '"unterminated',
    "[1] [2]",
    '{"a": NaN}',
]


@pytest.fixture
def processor():
    return Processor()


@pytest.fixture
def formatter():
    return Formatter()


@pytest.mark.parametrize("text", VALID_DOCUMENTS)
def test_valid_documents_validate(processor, text):
    verdict = processor.validate_only(text)
    assert verdict.valid
    assert verdict.diagnostic is None


@pytest.mark.parametrize("text", INVALID_DOCUMENTS)
def test_invalid_documents_are_syntax_errors(processor, text):
    verdict = processor.validate_only(text)
    assert not verdict.valid
    assert verdict.diagnostic.category is ErrorCategory.SYNTAX
    assert verdict.diagnostic.byte_position >= 0
    assert (verdict.diagnostic.line is None) == (verdict.diagnostic.column is None)


@pytest.mark.parametrize("text", VALID_DOCUMENTS)
def test_minify_is_canonical(formatter, text):
    pretty = formatter.format(text).text
    assert formatter.minify(pretty).text == formatter.minify(text).text


@pytest.mark.parametrize("text", VALID_DOCUMENTS)
def test_minify_round_trip(formatter, text):
    assert json.loads(formatter.minify(text).text) == json.loads(text)


@pytest.mark.parametrize("text", VALID_DOCUMENTS)
def test_process_statistics_consistent(processor, text):
    result = processor.process(text)
    assert result.succeeded
    stats = result.statistics
    assert stats.line_count == result.formatted_text.count("\n") + 1
    assert stats.character_count == len(text)
    assert stats.minified_bytes <= stats.original_bytes


def test_scenario_pretty_and_minified(processor):
    result = processor.process('{"a":1}', {"indentation_width": 2})
    assert result.formatted_text == '{\n  "a": 1\n}'
    assert result.minified_text == '{"a":1}'


def test_scenario_trailing_comma(processor):
    diagnostic = processor.process('{"a": 1,}').diagnostic
    assert diagnostic.category is ErrorCategory.SYNTAX
    if "unexpected token" in diagnostic.message.lower():
        assert "missing commas, brackets, or quotes" in diagnostic.suggestion
    else:
        assert diagnostic.suggestion == (
            "Check JSON syntax for common errors like missing commas or brackets"
        )


def test_scenario_whitespace_only(processor):
    verdict = processor.validate_only("   ")
    assert not verdict.valid
    assert verdict.diagnostic.category is ErrorCategory.EMPTY
    assert verdict.diagnostic.message == "Content is empty"


def test_scenario_size_exceeded(processor):
    verdict = processor.validate_only("x" * 2000, {"max_size_bytes": 1000})
    assert not verdict.valid
    assert verdict.diagnostic.category is ErrorCategory.SIZE_EXCEEDED
    assert verdict.byte_size == 2000


def test_scenario_format_minify_format_stable(formatter):
    first = formatter.format('{"a":{"b":[1,2,3]}}').text
    again = formatter.format(formatter.minify(first).text).text
    assert again == first


def test_indentation_zero_uses_default(formatter):
    text = formatter.format('{"a":1}', {"indentation_width": 0}).text
    assert text == '{\n  "a": 1\n}'


def test_top_level_helpers():
    assert jsontidy.validate("[1]").valid
    assert jsontidy.process("[1]").minified_text == "[1]"


@pytest.mark.parametrize("literal", ["9" * 5000, "-" + "1" * 4301, "1e400", "-1e400"])
def test_unrepresentable_numbers_survive_pipeline(processor, literal):
    result = processor.process(f'{{"n": [{literal}]}}')
    assert result.succeeded
    assert result.minified_text == f'{{"n":[{literal}]}}'
    assert literal in result.formatted_text
