"""Tests for the response parsing helpers in :mod:`imagegen.utils`."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))
from imagegen.exceptions import ResponseShapeError
from imagegen.schemas import build_upstream_payload
from imagegen.utils import (
    download_filename,
    extract_image,
    normalise_inline_data,
    parse_data_url,
    to_data_url,
)


def _response(*parts: dict) -> dict:
    return {"candidates": [{"content": {"parts": list(parts)}}]}


def test_upstream_payload_embeds_prompt_as_only_variable_field() -> None:
    assert build_upstream_payload("a red cube") == {
        "contents": {"role": "user", "parts": {"text": "a red cube"}},
        "generation_config": {"response_modalities": ["TEXT", "IMAGE"]},
    }


def test_extract_image_builds_exact_data_url() -> None:
    payload = _response({"inline_data": {"mime_type": "image/png", "data": "AAAA"}})

    assert to_data_url(extract_image(payload)) == "data:image/png;base64,AAAA"


def test_both_casings_parse_identically() -> None:
    snake = _response({"inline_data": {"mime_type": "image/webp", "data": "QUJD"}})
    camel = _response({"inlineData": {"mimeType": "image/webp", "data": "QUJD"}})

    assert extract_image(snake) == extract_image(camel)


def test_missing_mime_type_defaults_to_jpeg() -> None:
    payload = _response({"inlineData": {"data": "AAAA"}})

    assert to_data_url(extract_image(payload)) == "data:image/jpeg;base64,AAAA"


def test_first_inline_part_wins_and_text_parts_are_skipped() -> None:
    payload = _response(
        {"text": "thinking..."},
        {"inline_data": {"mime_type": "image/png", "data": "Rmlyc3Q="}},
        {"inline_data": {"mime_type": "image/png", "data": "U2Vjb25k"}},
    )

    assert extract_image(payload).data == "Rmlyc3Q="


def test_normalise_inline_data_ignores_parts_without_inline_data() -> None:
    assert normalise_inline_data({"text": "hello"}) is None


@pytest.mark.parametrize(
    "payload, message",
    [
        ({}, "No candidates returned"),
        ({"candidates": []}, "No candidates returned"),
        ({"candidates": [{}]}, "No content parts returned"),
        ({"candidates": [{"content": {"role": "model"}}]}, "No content parts returned"),
        (_response({"text": "no image today"}), "No image data found in response"),
        (_response(), "No image data found in response"),
        (
            _response({"inline_data": {"mime_type": "image/png"}}),
            "No image data found in response candidate",
        ),
        (_response({"inline_data": {}}), "No image data found in response candidate"),
        (_response({"inlineData": {}}), "No image data found in response candidate"),
    ],
)
def test_extract_image_reports_missing_pieces(payload: dict, message: str) -> None:
    with pytest.raises(ResponseShapeError) as excinfo:
        extract_image(payload)

    assert str(excinfo.value) == message


def test_parse_data_url_decodes_payload() -> None:
    mime_type, content = parse_data_url("data:image/png;base64,aGVsbG8=")

    assert mime_type == "image/png"
    assert content == b"hello"


def test_parse_data_url_rejects_other_schemes() -> None:
    with pytest.raises(ValueError):
        parse_data_url("https://example.com/cat.png")


@pytest.mark.parametrize(
    "mime_type, expected",
    [
        ("image/png", "gemini-gen-1700000000000.png"),
        ("image/jpeg", "gemini-gen-1700000000000.jpg"),
        ("image/webp", "gemini-gen-1700000000000.webp"),
        ("application/x-unknown-image", "gemini-gen-1700000000000.png"),
    ],
)
def test_download_filename_follows_mime_type(mime_type: str, expected: str) -> None:
    assert download_filename(mime_type, timestamp_ms=1700000000000) == expected


def test_empty_snake_case_object_shadows_camel_case_part() -> None:
    payload = _response({"inline_data": {}, "inlineData": {"mimeType": "image/png", "data": "AAAA"}})

    with pytest.raises(ResponseShapeError, match="No image data found in response candidate"):
        extract_image(payload)


def test_null_snake_case_field_falls_back_to_camel_case() -> None:
    payload = _response({"inline_data": None, "inlineData": {"mimeType": "image/png", "data": "AAAA"}})

    assert to_data_url(extract_image(payload)) == "data:image/png;base64,AAAA"
