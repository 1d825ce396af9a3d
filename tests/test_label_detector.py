"""
Tests for Google Vision label detection
"""

import json

import httpx
import pytest

from exceptions import LabelDetectionError
from services.label_detector import GoogleVisionLabelDetector

VISION_URL = "https://vision.test/v1"


def make_detector(handler, api_key="test-key", **kwargs):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return GoogleVisionLabelDetector(client, api_key=api_key, base_url=VISION_URL, **kwargs)


def vision_response(annotations):
    return httpx.Response(200, json={"responses": [{"labelAnnotations": annotations}]})


class TestDetect:
    """Vision request/response handling"""

    @pytest.mark.asyncio
    async def test_filters_generic_and_low_score_labels(self):
        annotations = [
            {"description": "Food", "score": 0.99},
            {"description": "Tomato", "score": 0.95},
            {"description": "Egg", "score": 0.9},
            {"description": "tomato", "score": 0.8},
            {"description": "Cheese", "score": 0.4},
        ]
        detector = make_detector(lambda request: vision_response(annotations))

        assert await detector.detect("aGVsbG8=") == ["tomato", "egg"]

    @pytest.mark.asyncio
    async def test_sends_label_detection_request(self):
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            seen["body"] = json.loads(request.content)
            return vision_response([])

        detector = make_detector(handler, max_labels=7)
        await detector.detect("data:image/jpeg;base64,aGVsbG8=")

        assert seen["url"] == f"{VISION_URL}/images:annotate?key=test-key"
        request = seen["body"]["requests"][0]
        assert request["image"]["content"] == "aGVsbG8="
        assert request["features"] == [{"type": "LABEL_DETECTION", "maxResults": 7}]

    @pytest.mark.asyncio
    async def test_missing_key_raises(self):
        detector = make_detector(lambda request: vision_response([]), api_key=None)
        with pytest.raises(LabelDetectionError):
            await detector.detect("aGVsbG8=")

    @pytest.mark.asyncio
    async def test_http_error_raises(self):
        detector = make_detector(lambda request: httpx.Response(403, text="API key invalid"))
        with pytest.raises(LabelDetectionError) as exc_info:
            await detector.detect("aGVsbG8=")
        assert "403" in exc_info.value.detail

    @pytest.mark.asyncio
    async def test_vision_error_object_raises(self):
        body = {"responses": [{"error": {"code": 3, "message": "Bad image data."}}]}
        detector = make_detector(lambda request: httpx.Response(200, json=body))
        with pytest.raises(LabelDetectionError) as exc_info:
            await detector.detect("aGVsbG8=")
        assert "Bad image data." in exc_info.value.detail

    @pytest.mark.asyncio
    async def test_network_error_raises(self):
        def handler(request):
            raise httpx.ConnectError("unreachable", request=request)

        detector = make_detector(handler)
        with pytest.raises(LabelDetectionError):
            await detector.detect("aGVsbG8=")

    @pytest.mark.asyncio
    async def test_non_numeric_score_raises(self):
        annotations = [{"description": "Tomato", "score": "high"}]
        detector = make_detector(lambda request: vision_response(annotations))
        with pytest.raises(LabelDetectionError) as exc_info:
            await detector.detect("aGVsbG8=")
        assert "score" in exc_info.value.detail

    @pytest.mark.asyncio
    async def test_string_error_object_raises(self):
        body = {"responses": [{"error": "quota exceeded"}]}
        detector = make_detector(lambda request: httpx.Response(200, json=body))
        with pytest.raises(LabelDetectionError) as exc_info:
            await detector.detect("aGVsbG8=")
        assert "quota exceeded" in exc_info.value.detail

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [
        {"responses": {"labelAnnotations": []}},
        {"responses": ["not an object"]},
        {"responses": [{"labelAnnotations": {"description": "Tomato"}}]},
    ])
    async def test_malformed_response_shape_raises(self, body):
        detector = make_detector(lambda request: httpx.Response(200, json=body))
        with pytest.raises(LabelDetectionError):
            await detector.detect("aGVsbG8=")
