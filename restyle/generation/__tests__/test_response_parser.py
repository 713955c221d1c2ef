"""
Tests for Runware response parsing
"""

import json

import pytest

from restyle.generation.response_parser import extract_error_message, extract_image_url


class TestExtractImageUrl:
    def test_runware_data_shape(self):
        payload = {"data": [{"taskUUID": "abc", "imageURL": "https://im.runware.ai/a.jpg"}]}
        assert extract_image_url(payload) == "https://im.runware.ai/a.jpg"

    def test_priority_order(self):
        payload = {
            "imageUrl": "https://example.com/low.jpg",
            "images": [{"url": "https://example.com/lowest.jpg"}],
            "data": [{"imageURL": "https://example.com/high.jpg"}],
        }
        assert extract_image_url(payload) == "https://example.com/high.jpg"

    def test_image_urls_shape(self):
        payload = {"imageURLs": [{"imageURL": "https://example.com/b.jpg"}], "imageUrl": "x"}
        assert extract_image_url(payload) == "https://example.com/b.jpg"

    def test_flat_image_url(self):
        assert extract_image_url({"imageUrl": "https://example.com/c.jpg"}) == "https://example.com/c.jpg"

    def test_images_shape(self):
        assert extract_image_url({"images": [{"url": "https://example.com/d.jpg"}]}) == "https://example.com/d.jpg"

    def test_empty_values_skipped(self):
        payload = {"data": [{"imageURL": ""}], "imageUrl": "https://example.com/e.jpg"}
        assert extract_image_url(payload) == "https://example.com/e.jpg"

    @pytest.mark.parametrize("payload", [
        {},
        {"data": []},
        {"data": "oops"},
        {"data": [None]},
        {"imageUrl": 42},
        [],
        None,
        "https://example.com/f.jpg",
    ])
    def test_unrecognized_shapes(self, payload):
        assert extract_image_url(payload) is None


class TestExtractErrorMessage:
    def test_message_field(self):
        assert extract_error_message(json.dumps({"message": "Invalid API key"}), 401) == "Invalid API key"

    def test_error_field(self):
        assert extract_error_message(json.dumps({"error": "Rate limited"}), 429) == "Rate limited"

    def test_errors_list(self):
        body = json.dumps({"errors": [{"code": "invalidModel", "message": "Model not found"}]})
        assert extract_error_message(body, 400) == "Model not found"

    def test_nested_error_object(self):
        body = json.dumps({"error": {"message": "Upstream unavailable"}})
        assert extract_error_message(body, 503) == "Upstream unavailable"

    def test_raw_text(self):
        assert extract_error_message("Bad Gateway", 502) == "Bad Gateway"

    def test_json_without_message(self):
        assert extract_error_message(json.dumps({"status": "nope"}), 500) == "API error: 500"

    def test_empty_body(self):
        assert extract_error_message("", 500) == "API error: 500"
