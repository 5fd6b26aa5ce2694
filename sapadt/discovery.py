"""The ADT core discovery service and its Atom service document."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Iterator, Optional, Union

from .endpoint import Endpoint


@dataclass(frozen=True)
class Category:
    """An ``atom:category`` of a collection."""

    term: str
    scheme: str


@dataclass(frozen=True)
class TemplateLinks:
    """An ``adtcomp:templateLinks`` element."""


@dataclass(frozen=True)
class Collection:
    """An ``app:collection``: one resource offered by the system."""

    title: str
    href: Optional[str] = None
    accept: Optional[str] = None
    categories: list[Category] = field(default_factory=list)
    template_links: Optional[TemplateLinks] = None


@dataclass(frozen=True)
class Workspace:
    """An ``app:workspace`` grouping collections."""

    title: str
    collections: list[Collection] = field(default_factory=list)


@dataclass(frozen=True)
class Service:
    """The ``app:service`` root of the discovery document."""

    workspaces: list[Workspace] = field(default_factory=list)


def _local(tag: str) -> str:
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[-1]
    return tag.rsplit(":", 1)[-1]


def _children(element: ET.Element, name: str) -> Iterator[ET.Element]:
    return (child for child in element if _local(child.tag) == name)


def _child(element: ET.Element, name: str) -> Optional[ET.Element]:
    return next(_children(element, name), None)


def _text(element: ET.Element) -> str:
    return (element.text or "").strip()


def _title(element: ET.Element) -> str:
    title = _child(element, "title")
    if title is None:
        raise ValueError(f"missing title in <{_local(element.tag)}>")
    return _text(title)


def _category(element: ET.Element) -> Category:
    try:
        return Category(term=element.attrib["term"], scheme=element.attrib["scheme"])
    except KeyError as missing:
        raise ValueError(f"category without {missing.args[0]} attribute") from None


def _collection(element: ET.Element) -> Collection:
    accept = _child(element, "accept")
    return Collection(
        title=_title(element),
        href=element.get("href"),
        accept=_text(accept) if accept is not None else None,
        categories=[_category(item) for item in _children(element, "category")],
        template_links=(
            TemplateLinks() if _child(element, "templateLinks") is not None else None
        ),
    )


def _workspace(element: ET.Element) -> Workspace:
    return Workspace(
        title=_title(element),
        collections=[_collection(item) for item in _children(element, "collection")],
    )


def parse_service(xml: Union[str, bytes]) -> Service:
    """Parse a discovery service document; raise ValueError if it is malformed."""
    if isinstance(xml, str):
        xml = xml.strip()
    else:
        xml = xml.strip()
    try:
        root = ET.fromstring(xml)
    except ET.ParseError as error:
        raise ValueError(f"malformed discovery document: {error}") from error
    if _local(root.tag) != "service":
        raise ValueError(f"unexpected root element <{_local(root.tag)}>")
    return Service(workspaces=[_workspace(item) for item in _children(root, "workspace")])


class CoreDiscovery(Endpoint):
    """The core discovery resource listing the services of the system."""

    STATEFUL = True
    METHOD = "GET"

    def url(self) -> str:
        return "sap/bc/adt/core/discovery"

    def parse_response(self, text: str) -> Service:
        return parse_service(text)