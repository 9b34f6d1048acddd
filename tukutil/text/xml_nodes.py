"""Plain-text extraction of XML elements from a message body."""

import logging

logger = logging.getLogger(__name__)


def get_xml_node_list(message: str, node: str) -> str:
    """
    Return the first ``<node ...>...</node>`` element of ``message`` as text.

    Matching is textual, so prefixed names must be passed with their prefix
    (e.g. ``"soap:Body"``). Returns an empty string when the element is absent
    or its closing tag does not follow the opening one.
    """
    if not node or node not in message:
        logger.info("Message does not contain element: %s", node)
        return ""

    node_open = "<" + node
    node_close = "</" + node + ">"
    logger.debug("Searching for XML element: %s>", node_open)
    start = message.find(node_open)
    close_at = message.find(node_close, start) if start >= 0 else -1
    if start < 0 or close_at < 0:
        logger.info("Message does not contain a complete element: %s", node)
        return ""
    end = close_at + len(node_close)
    logger.debug("Extracted XML element nodelist")
    return message[start:end]
