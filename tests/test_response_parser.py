import json

from jmath.services.response_parser import extract_json


def test_fenced_block_is_parsed():
    text = 'Here you go:\n```json\n{"solution": [{"step_number": 1}]}\n```\nGood luck!'
    assert extract_json(text) == {"solution": [{"step_number": 1}]}


def test_first_fenced_block_wins():
    text = '```json\n{"a": 1}\n```\nand\n```json\n{"a": 2}\n```'
    assert extract_json(text) == {"a": 1}


def test_whole_text_parsed_without_fence():
    assert extract_json('{"similar_problems": ["x+1=2"]}') == {"similar_problems": ["x+1=2"]}


def test_whole_text_may_be_any_json_value():
    assert extract_json("[1, 2, 3]") == [1, 2, 3]


def test_plain_text_returns_none():
    assert extract_json("graph TD; A-->B;") is None


def test_empty_input_returns_none():
    assert extract_json("") is None
    assert extract_json(None) is None


def test_malformed_fence_does_not_fall_back_to_whole_text():
    # the whole text is valid JSON, but the fence inside it is not
    text = '{"solution": [], "note": "```json {oops} ```"}'
    assert json.loads(text)["solution"] == []
    assert extract_json(text) is None


def test_malformed_fence_with_trailing_json():
    text = '```json\n{"solution": [1,}\n```\n{"solution": []}'
    assert extract_json(text) is None


def test_empty_fence_falls_back_to_whole_text():
    assert extract_json('{"a": "```json```"}') == {"a": "```json```"}
    assert extract_json("```json\n```") is None


def test_unlabelled_fence_is_not_a_json_fence():
    text = '```\n{"solution": []}\n```'
    assert extract_json(text) is None
