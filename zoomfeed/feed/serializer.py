"""
Zoom XML Feed Serializer

Renders feed records as the <PRODUTOS> document Zoom ingests.
Every element of the schema is always written, empty when there is no
value, because Zoom rejects products with missing elements.
"""

import re
from typing import Callable, Iterable, List, Tuple

from lxml import etree

from ..errors import EncodeError
from ..models import FeedRecord

XML_HEADER = b'<?xml version="1.0" encoding="UTF-8"?>\n'
ROOT_ELEMENT = "PRODUTOS"
ITEM_ELEMENT = "PRODUTO"
INDENT = "    "

# Official Zoom element order (exact schema order)
FEED_SCHEMA: List[Tuple[str, Callable[[FeedRecord], object]]] = [
    ("CODIGO", lambda r: r.code),
    ("NOME", lambda r: r.name),
    ("DEPARTAMENTO", lambda r: r.department),
    ("SUBDEPARTAMENTO", lambda r: r.subdepartment),
    ("DESCRICAO", lambda r: r.description),
    ("PRECO", lambda r: r.price),
    ("PRECO_DE", lambda r: r.price_from),
    ("NPARCELA", lambda r: r.installment_count),
    ("VPARCELA", lambda r: r.installment_value),
    ("URL", lambda r: r.url),
    ("URL_IMAGEM", lambda r: r.image_url),
    ("MPC", lambda r: r.mpc),          # Manufacturer Part Number
    ("EAN", lambda r: r.ean),          # European Article Number
    ("SKU", lambda r: r.sku),          # Stock Keeping Unit
]

FEED_ELEMENTS = [name for name, _ in FEED_SCHEMA]

# Characters XML 1.0 does not allow, even escaped
_INVALID_XML_CHARS = re.compile(
    "[^\u0009\u000a\u000d\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


def clean_xml_text(value: object) -> str:
    """Convert a field value to text, replacing characters XML can't carry with U+FFFD."""
    if value is None:
        return ""
    return _INVALID_XML_CHARS.sub("\ufffd", str(value))


class FeedSerializer:
    """
    Serializes feed records to Zoom's XML format.

    Usage:
        serializer = FeedSerializer()
        content = serializer.serialize(records)   # bytes, UTF-8
    """

    def __init__(self, schema: List[Tuple[str, Callable[[FeedRecord], object]]] = FEED_SCHEMA):
        self.schema = schema

    def record_to_element(self, record: FeedRecord) -> etree._Element:
        """Build one <PRODUTO> element with every schema child, in order."""
        item = etree.Element(ITEM_ELEMENT)
        for name, extract in self.schema:
            child = etree.SubElement(item, name)
            child.text = clean_xml_text(extract(record))
        return item

    def build_tree(self, records: Iterable[FeedRecord]) -> etree._Element:
        root = etree.Element(ROOT_ELEMENT)
        for record in records:
            root.append(self.record_to_element(record))
        return root

    def serialize(self, records: Iterable[FeedRecord]) -> bytes:
        """
        Render the full feed document.

        Args:
            records: Feed records in output order

        Returns:
            UTF-8 bytes: XML declaration followed by the indented document

        Raises:
            EncodeError: If lxml can't build or serialize the document
        """
        try:
            root = self.build_tree(records)
            etree.indent(root, space=INDENT)
            body = etree.tostring(root, encoding="UTF-8", xml_declaration=False)
        except (etree.LxmlError, TypeError, ValueError) as e:
            raise EncodeError(f"Could not serialize feed: {e}") from e
        return XML_HEADER + body
