"""
XML parsing for eNom responses.

Turns a response body into nested dicts keyed by tag name, with
dashes turned into underscores ('interface-response' -> 'interface_response'):
elements with children become dicts, repeated tags become lists,
leaves become their text (None when empty). Attributes are dropped.
"""

from typing import Any, Dict, Union

from lxml import etree

from enom_client.exceptions import ParseError

ROOT_TAG = "interface_response"

# Secure parser
_parser = etree.XMLParser(
    resolve_entities=False,
    no_network=True,
    remove_blank_text=True,
)


def _local_name(tag: str) -> str:
    """Strip a '{namespace}' prefix from a tag and turn dashes into underscores."""
    return etree.QName(tag).localname.replace("-", "_")


def _element_to_value(elem: etree._Element) -> Any:
    children = [child for child in elem if isinstance(child.tag, str)]
    if not children:
        text = (elem.text or "").strip()
        return text or None

    result: Dict[str, Any] = {}
    for child in children:
        key = _local_name(child.tag)
        value = _element_to_value(child)
        if key in result:
            existing = result[key]
            if isinstance(existing, list):
                existing.append(value)
            else:
                result[key] = [existing, value]
        else:
            result[key] = value
    return result


def parse_xml(xml_data: Union[bytes, str]) -> Dict[str, Any]:
    """
    Parse an XML document into a nested mapping.

    Args:
        xml_data: Raw response body

    Returns:
        {root_tag: value}

    Raises:
        ParseError: If the body is not well-formed XML
    """
    if isinstance(xml_data, str):
        xml_data = xml_data.encode("utf-8")
    try:
        root = etree.fromstring(xml_data, _parser)
    except (etree.XMLSyntaxError, ValueError) as e:
        raise ParseError(f"XML parse error: {e}")
    if root is None:
        raise ParseError("XML parse error: empty document")
    return {_local_name(root.tag): _element_to_value(root)}


def extract_interface_response(document: Dict[str, Any]) -> Dict[str, Any]:
    """Return the content of the 'interface_response' root."""
    if ROOT_TAG not in document:
        raise ParseError(
            f"Response root is not '{ROOT_TAG}': {', '.join(document) or 'empty'}",
            response_data=document,
        )
    content = document[ROOT_TAG]
    return content if isinstance(content, dict) else {}
