# -*- coding: utf-8 -*-
"""
订阅源发现路由测试
"""

from __future__ import annotations

from typing import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from src.server.database import get_db
from src.server.main import app
from src.server.pubsub import get_event_publisher

FEED_URL = "https://example.com/feed.xml"
DAILY_RSS = (
    "<rss><channel><title>Daily</title>"
    "<description>News</description></channel></rss>"
)


@pytest.fixture()
def client(test_db_session: Session, publisher) -> Iterator[TestClient]:
    def override_get_db() -> Iterator[Session]:
        yield test_db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_event_publisher] = lambda: publisher
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_add_discover_feed_success(client: TestClient, serve_feed, publisher) -> None:
    serve_feed(DAILY_RSS)

    response = client.post(
        "/api/discover-feeds",
        json={"url": FEED_URL},
        headers={"X-User-Id": "user-1"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["kind"] == "success"
    assert body["feed"]["title"] == "Daily"
    assert body["feed"]["link"] == FEED_URL
    assert body["feed"]["type"] == "rss"
    assert len(publisher.events) == 1


def test_add_discover_feed_bad_request(client: TestClient, serve_feed) -> None:
    serve_feed(DAILY_RSS, content_type="text/html")

    response = client.post(
        "/api/discover-feeds",
        json={"url": FEED_URL},
        headers={"X-User-Id": "user-1"},
    )

    assert response.status_code == 200
    assert response.json() == {"kind": "error", "error_codes": ["BAD_REQUEST"]}


def test_add_discover_feed_requires_user(client: TestClient) -> None:
    response = client.post("/api/discover-feeds", json={"url": FEED_URL})
    assert response.status_code == 401


def test_add_discover_feed_rejects_invalid_url(client: TestClient) -> None:
    response = client.post(
        "/api/discover-feeds",
        json={"url": "not a url"},
        headers={"X-User-Id": "user-1"},
    )
    assert response.status_code == 422
