"""
XML text -> generic element tree consumed by the normalizers.

Tree contract:
- every element becomes a dict,
- tag and attribute names are lower-cased and keep their namespace prefix
  ("dc:creator", "@ispermalink"),
- attributes are stored under "@name", text content under "#text",
- repeated child tags become lists in document order.
"""

from __future__ import annotations

import re
from typing import Any, Dict, Optional, Union

from lxml import etree

from feedcanon.core.logging import get_logger
from feedcanon.services.accessors import ATTRIBUTE_PREFIX, TEXT_KEY

logger = get_logger()

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"

_XML_DECLARATION_RE = re.compile(r"^\s*<\?xml[^>]*\?>", re.IGNORECASE)


def _make_parser(recover: bool = False) -> etree.XMLParser:
    return etree.XMLParser(
        ns_clean=True,
        recover=recover,
        collect_ids=False,
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
        remove_pis=True,
        strip_cdata=True,
    )


def _parse_root(source: Union[str, bytes]) -> etree._Element:
    try:
        return etree.fromstring(source, parser=_make_parser())
    except etree.XMLSyntaxError as exc:
        # Undeclared HTML entities (&nbsp;) and stray markup are common in feeds.
        logger.info("document_recovering", error=str(exc))
        root = etree.fromstring(source, parser=_make_parser(recover=True))
    if root is None:
        raise etree.XMLSyntaxError("Document has no root element", 0, 1, 1)
    return root


def _prefix_for(namespace: str, element: etree._Element) -> Optional[str]:
    if namespace == XML_NAMESPACE:
        return "xml"
    for prefix, uri in element.nsmap.items():
        if uri == namespace and prefix:
            return prefix
    return None


def _element_name(element: etree._Element) -> str:
    local = etree.QName(element).localname
    if element.prefix:
        return f"{element.prefix}:{local}".lower()
    return local.lower()


def _attribute_name(name: str, element: etree._Element) -> str:
    qname = etree.QName(name)
    prefix = _prefix_for(qname.namespace, element) if qname.namespace else None
    if prefix:
        return f"{prefix}:{qname.localname}".lower()
    return qname.localname.lower()


def _append(node: Dict[str, Any], key: str, value: Any) -> None:
    if key not in node:
        node[key] = value
    elif isinstance(node[key], list):
        node[key].append(value)
    else:
        node[key] = [node[key], value]


def _element_to_node(element: etree._Element) -> Dict[str, Any]:
    node: Dict[str, Any] = {}
    for name, value in element.attrib.items():
        node[f"{ATTRIBUTE_PREFIX}{_attribute_name(name, element)}"] = value

    text_parts = [element.text or ""]
    for sub in element:
        if isinstance(sub.tag, str):
            _append(node, _element_name(sub), _element_to_node(sub))
        text_parts.append(sub.tail or "")

    text = "".join(text_parts).strip()
    if text:
        node[TEXT_KEY] = text
    return node


def build_document(source: Union[str, bytes]) -> Dict[str, Any]:
    """
    Tokenize an XML document into the generic tree.

    Malformed input is retried with a recovering parser. Raises
    lxml.etree.XMLSyntaxError when no root element can be recovered.
    """
    if isinstance(source, str):
        # lxml refuses str input that carries an encoding declaration.
        source = _XML_DECLARATION_RE.sub("", source.lstrip("\ufeff"), count=1).strip()
    else:
        source = source.strip()
    root = _parse_root(source)

    name = _element_name(root)
    logger.debug("document_built", root=name)
    return {name: _element_to_node(root)}
