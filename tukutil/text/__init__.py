"""String, key and XML helpers."""

from tukutil.text.strings import (
    ParsedInt,
    get_int_from_string,
    get_string_from_int,
    parse_int,
    pretty_author_institution,
    pretty_author_person,
    split_xdw_key,
    substr,
)
from tukutil.text.xml_nodes import get_xml_node_list

__all__ = [
    "ParsedInt",
    "get_int_from_string",
    "get_string_from_int",
    "get_xml_node_list",
    "parse_int",
    "pretty_author_institution",
    "pretty_author_person",
    "split_xdw_key",
    "substr",
]
