from unittest.mock import MagicMock

import httplib2
import pytest
from fastapi.testclient import TestClient
from googleapiclient.errors import HttpError

from trend_digest.main import app
from trend_digest.services import youtube_service


def make_http_error(status: int, message: str = "boom") -> HttpError:
    content = ('{"error": {"message": "%s"}}' % message).encode("utf-8")
    return HttpError(httplib2.Response({"status": status}), content)


def search_item(video_id):
    return {"id": {"kind": "youtube#video", "videoId": video_id}, "snippet": {}}


def video_item(video_id, tags=None, description="", published_at=None):
    snippet = {"description": description}
    if tags is not None:
        snippet["tags"] = tags
    if published_at is not None:
        snippet["publishedAt"] = published_at
    return {"id": video_id, "snippet": snippet, "statistics": {"viewCount": "10"}}


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("YOUTUBE_API_KEY", "test-key")
    return "test-key"


@pytest.fixture
def youtube(monkeypatch, api_key):
    """Stubbed discovery client; set search/videos payloads on the returned mock."""
    client = MagicMock()
    client.search.return_value.list.return_value.execute.return_value = {"items": []}
    client.videos.return_value.list.return_value.execute.return_value = {"items": []}
    monkeypatch.setattr(youtube_service, "build", MagicMock(return_value=client))
    return client


@pytest.fixture
def client():
    return TestClient(app)
