# -*- coding: utf-8 -*-
"""
订阅源格式解析测试
"""

from __future__ import annotations

from src.server.discover_feeds.schemas import FeedType
from src.server.discover_feeds.service.extract_service import (
    AtomDocument,
    RssDocument,
    extract_feed_metadata,
    parse_feed_document,
)

FEED_URL = "https://example.com/feed.xml"


def test_extract_rss_channel_fields() -> None:
    """RSS 文档提取标题与简介，链接取请求地址。"""
    metadata = extract_feed_metadata(
        FEED_URL,
        "<rss><channel><title>Daily</title>"
        "<description>News</description></channel></rss>",
    )
    assert metadata is not None
    assert metadata.title == "Daily"
    assert metadata.description == "News"
    assert metadata.type == FeedType.RSS
    assert metadata.link == FEED_URL
    assert metadata.image is None


def test_extract_rss_image_and_self_link_ignored() -> None:
    """频道图片被提取，文档内的 self 链接不影响 link。"""
    body = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:atom="http://www.w3.org/2005/Atom">
  <channel>
    <title><![CDATA[示例频道]]></title>
    <atom:link href="https://mirror.example.com/rss" rel="self"/>
    <image><url>https://example.com/logo.png</url></image>
  </channel>
</rss>
"""
    metadata = extract_feed_metadata(FEED_URL, body)
    assert metadata is not None
    assert metadata.title == "示例频道"
    assert metadata.description == ""
    assert metadata.image == "https://example.com/logo.png"
    assert metadata.link == FEED_URL


def test_extract_rdf_is_normalized_to_rss() -> None:
    """RSS 1.0 (RDF) 文档归并为 rss，图片位于根元素下。"""
    body = """<?xml version="1.0"?>
<rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"
         xmlns="http://purl.org/rss/1.0/">
  <channel rdf:about="https://example.com/">
    <title>RDF Channel</title>
    <description>Semantic news</description>
  </channel>
  <image rdf:about="https://example.com/rdf.png">
    <url>https://example.com/rdf.png</url>
  </image>
</rdf:RDF>
"""
    document = parse_feed_document(body)
    assert isinstance(document, RssDocument)

    metadata = extract_feed_metadata(FEED_URL, body)
    assert metadata is not None
    assert metadata.type == FeedType.RSS
    assert metadata.title == "RDF Channel"
    assert metadata.description == "Semantic news"
    assert metadata.image == "https://example.com/rdf.png"


def test_extract_atom_fields() -> None:
    """Atom 文档提取 title / subtitle / icon。"""
    body = """<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title type="text">Atom Blog</title>
  <subtitle>Thoughts</subtitle>
  <icon>https://example.com/icon.ico</icon>
  <link rel="self" href="https://elsewhere.example.com/atom"/>
</feed>
"""
    document = parse_feed_document(body)
    assert isinstance(document, AtomDocument)

    metadata = extract_feed_metadata(FEED_URL, body)
    assert metadata is not None
    assert metadata.type == FeedType.ATOM
    assert metadata.title == "Atom Blog"
    assert metadata.description == "Thoughts"
    assert metadata.image == "https://example.com/icon.ico"
    assert metadata.link == FEED_URL


def test_atom_with_empty_title_is_rejected() -> None:
    body = '<feed xmlns="http://www.w3.org/2005/Atom"><title></title></feed>'
    assert extract_feed_metadata(FEED_URL, body) is None


def test_rss_with_blank_title_is_rejected() -> None:
    body = "<rss><channel><title>   </title></channel></rss>"
    assert extract_feed_metadata(FEED_URL, body) is None


def test_missing_title_element_falls_back_to_url() -> None:
    """标题元素缺失时以请求地址作为标题。"""
    rss = extract_feed_metadata(
        FEED_URL, "<rss><channel><description>x</description></channel></rss>"
    )
    atom = extract_feed_metadata(
        FEED_URL, '<feed xmlns="http://www.w3.org/2005/Atom"></feed>'
    )
    assert rss is not None and rss.title == FEED_URL
    assert atom is not None and atom.title == FEED_URL


def test_rss_without_channel_is_rejected() -> None:
    assert extract_feed_metadata(FEED_URL, "<rss version='2.0'></rss>") is None


def test_unrecognized_root_is_rejected() -> None:
    body = "<html><head><title>Not a feed</title></head></html>"
    assert parse_feed_document(body) is None
    assert extract_feed_metadata(FEED_URL, body) is None


def test_unparseable_xml_is_rejected() -> None:
    assert extract_feed_metadata(FEED_URL, "<rss><channel><title>") is None
    assert extract_feed_metadata(FEED_URL, b"") is None


def test_rdf_root_requires_rdf_namespace() -> None:
    body = "<RDF><channel><title>Fake</title></channel></RDF>"
    assert parse_feed_document(body) is None
