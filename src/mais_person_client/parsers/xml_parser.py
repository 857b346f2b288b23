"""
Low-level XML navigation utilities for MAIS Person API documents.

Key behaviours:
1. Parsing is best-effort: lxml runs in recover mode and never raises
2. Namespace prefixes are stripped once at parse time, so every lookup
   uses plain local names (e.g. //edupersonaffiliation)
3. Every helper accepts a missing node and returns None (or [])
"""

import logging
from typing import List, Optional, Tuple, Union

from lxml import etree

logger = logging.getLogger(__name__)


def parse_xml(xml: Union[str, bytes]) -> Optional[etree._Element]:
    """
    Parse raw XML into an lxml element tree, recovering from broken input.

    Args:
        xml: Raw XML text as returned by the API

    Returns:
        Root element with namespaces stripped, or None if nothing at all
        could be recovered (e.g. empty input)
    """
    # Text input is already decoded; its encoding declaration no longer applies
    encoding = None
    if isinstance(xml, str):
        xml = xml.encode('utf-8')
        encoding = 'utf-8'

    if not xml or not xml.strip():
        logger.warning("Received empty XML document")
        return None

    parser = etree.XMLParser(
        recover=True, huge_tree=True, remove_blank_text=False, encoding=encoding
    )
    try:
        root = etree.fromstring(xml, parser)
    except etree.XMLSyntaxError as e:
        # recover=True still gives up on input with no element at all
        logger.warning(f"Unable to recover any XML structure: {e}")
        return None

    if len(parser.error_log):
        logger.warning(
            f"Recovered from {len(parser.error_log)} XML error(s); "
            f"last: {parser.error_log.last_error.message}"
        )

    if root is None:
        return None

    strip_namespaces(root)
    return root


def strip_namespaces(root: etree._Element) -> None:
    """Rewrite every element and attribute name to its local name, in place."""
    for elem in root.iter():
        # Comments and processing instructions have non-string tags
        if not isinstance(elem.tag, str):
            continue
        if elem.tag.startswith('{'):
            elem.tag = etree.QName(elem).localname
        for name in list(elem.attrib):
            if name.startswith('{'):
                value = elem.attrib.pop(name)
                elem.attrib[etree.QName(name).localname] = value
    etree.cleanup_namespaces(root)


def attribute(node: Optional[etree._Element], name: str) -> Optional[str]:
    """Attribute value of a node, None if node or attribute is missing."""
    if node is None:
        return None
    return node.get(name)


def child(node: Optional[etree._Element], path: str) -> Optional[etree._Element]:
    """First element matching a relative path (e.g. 'department')."""
    if node is None:
        return None
    return node.find(path)


def children(node: Optional[etree._Element], tag: str) -> List[etree._Element]:
    """Direct child elements with the given tag, in document order."""
    if node is None:
        return []
    return node.findall(tag)


def text(node: Optional[etree._Element]) -> Optional[str]:
    """
    Full text content of a node (all descendant text), trimmed.

    Returns None when the node is missing and '' when it is present but
    empty, so callers can tell the two apart.
    """
    if node is None:
        return None
    return ''.join(node.itertext()).strip()


def normalized_text(node: Optional[etree._Element]) -> Optional[str]:
    """Full text content with runs of whitespace collapsed to one space."""
    content = text(node)
    if content is None:
        return None
    return ' '.join(content.split())


def leading_text(node: Optional[etree._Element]) -> Optional[str]:
    """
    The element's own text before its first child element, trimmed.

    Used for "display" values such as <affiliation>Faculty<department/>...
    Whitespace-only leading text (pretty-printing) counts as absent.
    """
    if node is None or node.text is None:
        return None
    stripped = node.text.strip()
    return stripped or None


def collapse_lines(nodes: List[etree._Element]) -> Optional[Union[str, Tuple[str, ...]]]:
    """
    Collapse address <line> elements.

    Returns:
        None for no lines, the single line's text for exactly one line,
        otherwise a tuple of the line texts in document order
    """
    lines = [normalized_text(node) for node in nodes]
    if not lines:
        return None
    if len(lines) == 1:
        return lines[0]
    return tuple(lines)


class XmlDocument:
    """
    Navigable, namespace-free view over a raw XML document.

    Example:
        >>> doc = XmlDocument('<x:Person xmlns:x="urn:x" sunetid="donald"/>')
        >>> doc.root_name
        'Person'
        >>> doc.root_attribute('sunetid')
        'donald'
    """

    def __init__(self, xml: Union[str, bytes]):
        self.root = parse_xml(xml)

    @property
    def root_name(self) -> Optional[str]:
        if self.root is None:
            return None
        return self.root.tag

    def root_attribute(self, name: str) -> Optional[str]:
        return attribute(self.root, name)

    def find_all(self, tag: str) -> List[etree._Element]:
        """All elements named `tag` anywhere in the document, document order."""
        if self.root is None:
            return []
        return list(self.root.iter(tag))

    def find_first(self, path: str) -> Optional[etree._Element]:
        """
        First element matching an XPath expression.

        Args:
            path: XPath such as "//biodemo/gender"
        """
        matches = self.xpath(path)
        for match in matches:
            if isinstance(match, etree._Element):
                return match
        return None

    def xpath(self, expr: str) -> list:
        """Raw XPath query; returns [] for a document with no root."""
        if self.root is None:
            return []
        return self.root.xpath(expr)
