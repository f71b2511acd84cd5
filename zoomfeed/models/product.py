"""
Product data models.

Pure data classes for the catalog side (as stored in MongoDB) and the
feed side (as published to Zoom). No business logic - only data
structure definitions.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class CatalogRecord:
    """
    A commercializable product as read from the store.

    Field names follow the feed's vocabulary; the MongoDB field each
    one is read from is noted alongside.
    """

    id: str                     # _id (ObjectId hex)
    title: str                  # storeProductTitle
    price: float                # storeProductPrice
    category: str = ""          # storeProductCategory
    description: str = ""       # storeProductDetail
    technical_info: str = ""    # storeProductTechnicalInformation (may hide the EAN)
    ean: str = ""               # ean
    dealer_name: str = ""       # dealerName
    images: List[str] = field(default_factory=list)  # images (file names, first is the cover)

    def __post_init__(self):
        """Validate required fields after initialization."""
        if not self.id:
            raise ValueError("Catalog record id is required")
        if not self.title or not self.title.strip():
            raise ValueError("Catalog record title is required")


@dataclass(frozen=True)
class FeedRecord:
    """
    One <PRODUTO> entry of the Zoom feed.

    Prices are already formatted strings (two decimals, feed decimal
    separator) so serialization never does arithmetic.
    """

    code: str
    name: str
    department: str
    subdepartment: str
    description: str
    price: str
    price_from: str             # Zoom wants a "de" price even without a discount
    installment_count: int
    installment_value: str
    url: str
    image_url: str = ""
    mpc: str = ""               # Manufacturer part number (not tracked yet)
    ean: str = ""
    sku: str = ""               # Stock keeping unit (not tracked yet)
