from __future__ import annotations

"""
Forward-Only XML Cursor.

Wraps the standard library pull parser behind a small reader interface:
advance to the next node, inspect the current element's name and
attributes, read an element's text or skip its subtree. Whitespace,
comments and processing instructions are never surfaced as nodes.
The reader never rewinds and does not own the underlying stream.
"""

import logging
import xml.etree.ElementTree as ET
from collections import deque
from enum import Enum
from typing import IO, Deque, Optional, Tuple, Union

from runsettings.domain.errors import SettingsException

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 16 * 1024

Source = Union[str, IO[str], IO[bytes]]


class NodeType(Enum):
    NONE = "none"
    ELEMENT = "element"
    END_ELEMENT = "end_element"


class SettingsReader:
    """
    Pull-based cursor over an XML document.

    A fresh reader sits before the first node; call read() to move onto
    the document element. Malformed markup is reported as SettingsException.

    Args:
        source: XML text or an open text/binary stream.
        chunk_size: Number of characters/bytes fed to the parser at a time.
    """

    def __init__(self, source: Source, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        self._source = source
        self._chunk_size = chunk_size
        self._parser = ET.XMLPullParser(events=("start", "end"))
        self._pending: Deque[Tuple[str, ET.Element]] = deque()
        self._exhausted = False

        self._node_type = NodeType.NONE
        self._element: Optional[ET.Element] = None
        self._level = 0
        self._depth = -1

        if isinstance(source, str):
            self._feed(source)
            self._close()

    # -------------------------------------------------------------------------
    # NODE STATE
    # -------------------------------------------------------------------------

    @property
    def node_type(self) -> NodeType:
        return self._node_type

    @property
    def name(self) -> str:
        """Local name of the current element, namespace stripped."""
        if self._element is None:
            return ""
        return _local_name(self._element.tag)

    @property
    def depth(self) -> int:
        """Nesting level of the current node; the document element is 0."""
        return self._depth

    def is_element(self, name: Optional[str] = None) -> bool:
        """True if positioned on a start element, optionally with the given name (case-insensitive)."""
        if self._node_type is not NodeType.ELEMENT:
            return False
        return name is None or self.name.lower() == name.lower()

    @property
    def is_empty_element(self) -> bool:
        """
        True if the current element has no child elements and no non-whitespace text.

        Whitespace is never surfaced as a node, so <X/>, <X></X> and <X>  </X>
        are all reported as empty.
        """
        if self._node_type is not NodeType.ELEMENT or self._element is None:
            return False
        upcoming = self._peek()
        if upcoming is None:
            return False
        event, elem = upcoming
        return event == "end" and elem is self._element and not (elem.text or "").strip()

    def get_attribute(self, name: str) -> Optional[str]:
        """Return an attribute of the current element, or None when absent."""
        if self._node_type is not NodeType.ELEMENT or self._element is None:
            return None
        return self._element.attrib.get(name)

    # -------------------------------------------------------------------------
    # MOVEMENT
    # -------------------------------------------------------------------------

    def read(self) -> bool:
        """
        Advance to the next node.

        Returns:
            bool: False once the end of the document has been reached.
        """
        event = self._next_event()
        if event is None:
            self._node_type = NodeType.NONE
            self._element = None
            return False

        kind, elem = event
        self._element = elem
        if kind == "start":
            self._node_type = NodeType.ELEMENT
            self._depth = self._level
            self._level += 1
        else:
            self._node_type = NodeType.END_ELEMENT
            self._level -= 1
            self._depth = self._level
        return True

    def skip(self) -> None:
        """Move past the current element and its whole subtree onto the next node."""
        if self._node_type is NodeType.ELEMENT:
            self._consume_to_end()
        self.read()

    def read_element_text(self) -> str:
        """
        Return the text content of the current element and move past it.

        Raises:
            SettingsException: If the reader is not positioned on an element.
        """
        if self._node_type is not NodeType.ELEMENT or self._element is None:
            raise SettingsException(f"Expected an element, found {self._node_type.value}.")
        elem = self._element
        self._consume_to_end()
        text = "".join(elem.itertext())
        self.read()
        return text

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -------------------------------------------------------------------------

    def _consume_to_end(self) -> None:
        target = self._element
        while not (self._node_type is NodeType.END_ELEMENT and self._element is target):
            if not self.read():
                break

    def _peek(self) -> Optional[Tuple[str, ET.Element]]:
        self._fill()
        return self._pending[0] if self._pending else None

    def _next_event(self) -> Optional[Tuple[str, ET.Element]]:
        self._fill()
        return self._pending.popleft() if self._pending else None

    def _fill(self) -> None:
        while not self._pending and not self._exhausted:
            chunk = self._source.read(self._chunk_size)  # type: ignore[union-attr]
            if chunk:
                self._feed(chunk)
            else:
                self._close()

    def _feed(self, data: Union[str, bytes]) -> None:
        try:
            self._parser.feed(data)
            self._pending.extend(self._parser.read_events())
        except ET.ParseError as e:
            self._exhausted = True
            logger.debug(f"Malformed settings document: {e}")
            raise SettingsException(f"Settings document is not well-formed: {e}") from e

    def _close(self) -> None:
        self._exhausted = True
        try:
            self._parser.close()
            self._pending.extend(self._parser.read_events())
        except ET.ParseError as e:
            logger.debug(f"Malformed settings document: {e}")
            raise SettingsException(f"Settings document is not well-formed: {e}") from e


def _local_name(tag: str) -> str:
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag
