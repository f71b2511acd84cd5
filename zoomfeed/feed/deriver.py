"""
Field Derivation

Turns catalog records into Zoom feed records. Pure: no I/O, no clock.
"""

from typing import Iterable, List

from ..common.constants import INSTALLMENT_COUNT
from ..common.settings import FeedSettings
from ..models import CatalogRecord, FeedRecord
from .ean import extract_ean


def format_price(value: float, decimal_separator: str = ",") -> str:
    """Format a price with exactly two decimals and the feed's separator."""
    return f"{value:.2f}".replace(".", decimal_separator)


def installment_value(price: float, installments: int = INSTALLMENT_COUNT) -> float:
    """
    Value of each installment, truncated (not rounded) to cents.

    Published feeds have always truncated, so 10.00 / 3 is 3.33 and
    20.00 / 3 is 6.66.
    """
    return int((price / installments) * 100) / 100


class FieldDeriver:
    """
    Maps CatalogRecord -> FeedRecord using the feed's fixed values.

    Usage:
        deriver = FieldDeriver.from_settings(settings)
        feed_records = deriver.derive_all(catalog_records)
    """

    def __init__(
        self,
        department: str = "Informática",
        product_base_url: str = "https://www.zunka.com.br/product/",
        image_base_url: str = "https://www.zunka.com.br/img/",
        decimal_separator: str = ",",
    ):
        self.department = department
        self.product_base_url = product_base_url
        self.image_base_url = image_base_url
        self.decimal_separator = decimal_separator

    @classmethod
    def from_settings(cls, settings: FeedSettings) -> "FieldDeriver":
        return cls(
            department=settings.department,
            product_base_url=settings.product_base_url,
            image_base_url=settings.image_base_url,
            decimal_separator=settings.decimal_separator,
        )

    def image_url(self, record: CatalogRecord) -> str:
        if not record.images:
            return ""
        return f"{self.image_base_url}{record.id}/{record.images[0]}"

    def derive(self, record: CatalogRecord) -> FeedRecord:
        """Build the feed record for one catalog record."""
        # Structured EAN beats anything mined from the text block
        ean = record.ean or extract_ean(record.technical_info)
        price = format_price(record.price, self.decimal_separator)

        return FeedRecord(
            code=record.id,
            name=record.title,
            department=self.department,
            subdepartment=record.category,
            description=record.description,
            price=price,
            price_from=price,
            installment_count=INSTALLMENT_COUNT,
            installment_value=format_price(installment_value(record.price), self.decimal_separator),
            url=f"{self.product_base_url}{record.id}",
            image_url=self.image_url(record),
            ean=ean,
        )

    def derive_all(self, records: Iterable[CatalogRecord]) -> List[FeedRecord]:
        return [self.derive(record) for record in records]
