# -*- coding: utf-8 -*-
"""
订阅源格式解析服务

功能：
- 将原始 XML 解析为元素树，识别 RSS / RDF / Atom 三种格式
- 按格式提取标题、简介、图片，归一化为 `FeedMetadata`

公开接口：
- `RssDocument`
- `AtomDocument`
- `parse_feed_document`
- `extract_feed_metadata`

内部方法：
- `_local_name`
- `_child`
- `_child_text`

说明：
- 元素按本地名匹配，忽略命名空间，RSS 1.0 与 Atom 1.0 的命名空间文档同样适用。
- 标题元素缺失时以请求地址兜底；标题元素存在但为空视为无效订阅源。
- `link` 始终取请求地址，而非文档内的 self 链接。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from loguru import logger
from lxml import etree

from ..schemas import FeedMetadata, FeedType

RDF_NAMESPACE = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"

_XML_PARSER = etree.XMLParser(
    ns_clean=True,
    recover=False,
    collect_ids=False,
    resolve_entities=False,
    no_network=True,
    remove_pis=False,
)


def _local_name(element: etree._Element) -> str:
    tag = element.tag
    if not isinstance(tag, str):
        # 注释、处理指令
        return ""
    return tag.rsplit("}", 1)[-1]


def _child(
    element: Optional[etree._Element], name: str
) -> Optional[etree._Element]:
    if element is None:
        return None
    for child in element:
        if _local_name(child) == name:
            return child
    return None


def _child_text(element: Optional[etree._Element], name: str) -> Optional[str]:
    """返回子元素文本；子元素缺失返回 None，存在但无文本返回空串。"""
    child = _child(element, name)
    if child is None:
        return None
    return "".join(child.itertext()).strip()


@dataclass(frozen=True)
class RssDocument:
    """RSS 2.0 / RDF (RSS 1.0) 文档"""

    root: etree._Element

    def to_metadata(self, url: str) -> Optional[FeedMetadata]:
        channel = _child(self.root, "channel")
        if channel is None:
            return None
        title = _child_text(channel, "title")
        # RSS 1.0 的 image 与 channel 同级
        image_url = _child_text(_child(channel, "image"), "url") or _child_text(
            _child(self.root, "image"), "url"
        )
        return FeedMetadata(
            title=url if title is None else title,
            description=_child_text(channel, "description") or "",
            image=image_url or None,
            link=url,
            type=FeedType.RSS,
        )


@dataclass(frozen=True)
class AtomDocument:
    """Atom 文档"""

    root: etree._Element

    def to_metadata(self, url: str) -> Optional[FeedMetadata]:
        title = _child_text(self.root, "title")
        return FeedMetadata(
            title=url if title is None else title,
            description=_child_text(self.root, "subtitle") or "",
            image=_child_text(self.root, "icon") or None,
            link=url,
            type=FeedType.ATOM,
        )


FeedDocument = Union[RssDocument, AtomDocument]


def parse_feed_document(content: Union[str, bytes]) -> Optional[FeedDocument]:
    """解析 XML 并按根元素识别订阅格式，无法识别时返回 None。"""
    raw = content.encode("utf-8") if isinstance(content, str) else content
    if not raw.strip():
        logger.warning("订阅源内容为空")
        return None
    try:
        root = etree.fromstring(raw, parser=_XML_PARSER)
    except etree.XMLSyntaxError as exc:
        logger.warning("订阅源 XML 解析失败：{}", exc)
        return None
    if root is None:
        return None

    name = _local_name(root)
    if name == "rss":
        return RssDocument(root)
    if name == "RDF" and root.tag == f"{{{RDF_NAMESPACE}}}RDF":
        return RssDocument(root)
    if name == "feed":
        return AtomDocument(root)
    logger.warning("无法识别的订阅源根元素：{}", root.tag)
    return None


def extract_feed_metadata(
    url: str, content: Union[str, bytes]
) -> Optional[FeedMetadata]:
    """提取订阅源元数据，文档无效或缺少可用标题时返回 None。"""
    document = parse_feed_document(content)
    if document is None:
        return None

    metadata = document.to_metadata(url)
    if metadata is None or not metadata.title:
        logger.warning("订阅源缺少可用标题：url={}", url)
        return None
    return metadata
