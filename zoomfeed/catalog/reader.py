"""
Catalog Reader

Reads commercializable products from the site's MongoDB catalog.

Only products that can actually be sold are returned: flagged for
commercialization, in stock, priced, and with a non-blank title.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping

import pymongo
from bson import Decimal128, ObjectId
from bson.errors import BSONError
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from ..common.settings import FeedSettings
from ..errors import DecodeError, QueryError, ReadTimeoutError, StoreConnectionError
from ..models import CatalogRecord

logger = logging.getLogger(__name__)

ELIGIBILITY_FILTER: Dict[str, Any] = {
    "storeProductCommercialize": True,
    "storeProductQtd": {"$gt": 0},
    "storeProductPrice": {"$gt": 0},
    "storeProductTitle": {"$regex": r"\S"},
}

PROJECTION: Dict[str, bool] = {
    "storeProductTitle": True,
    "storeProductCategory": True,
    "storeProductDetail": True,
    "storeProductTechnicalInformation": True,
    "storeProductPrice": True,
    "ean": True,
    "images": True,
    "dealerName": True,
}

# MongoDB field -> CatalogRecord attribute, for the plain text fields
TEXT_FIELDS = {
    "storeProductTitle": "title",
    "storeProductCategory": "category",
    "storeProductDetail": "description",
    "storeProductTechnicalInformation": "technical_info",
    "ean": "ean",
    "dealerName": "dealer_name",
}


def connect_store(
    settings: FeedSettings,
    client_factory: Callable[..., MongoClient] = MongoClient,
) -> MongoClient:
    """
    Create a MongoDB client and make sure the server answers.

    Args:
        settings: Run settings (connection string and timeouts)
        client_factory: MongoClient or a stand-in with the same signature

    Returns:
        Connected client; the caller owns it and must close it

    Raises:
        StoreConnectionError: If the client can't be created or the ping
            fails or times out
    """
    timeout_ms = int(settings.connect_timeout * 1000)
    try:
        client = client_factory(
            settings.mongodb_uri,
            connectTimeoutMS=timeout_ms,
            serverSelectionTimeoutMS=timeout_ms,
        )
    except PyMongoError as e:
        raise StoreConnectionError(f"Invalid MongoDB configuration: {e}") from e

    try:
        with pymongo.timeout(settings.ping_timeout):
            client.admin.command("ping")
    except PyMongoError as e:
        client.close()
        if e.timeout:
            raise StoreConnectionError(
                f"MongoDB did not answer ping within {settings.ping_timeout:g}s: {e}"
            ) from e
        raise StoreConnectionError(f"Could not connect to MongoDB: {e}") from e

    logger.debug("Connected to MongoDB")
    return client


def _text(document: Mapping[str, Any], key: str, document_id: str) -> str:
    value = document.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(
            f"Product {document_id}: field '{key}' should be text, got {type(value).__name__}",
            document_id,
        )
    return value


def _price(document: Mapping[str, Any], document_id: str) -> float:
    value = document.get("storeProductPrice")
    if isinstance(value, Decimal128):
        return float(value.to_decimal())
    # bool is an int subclass but never a price
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    raise DecodeError(
        f"Product {document_id}: field 'storeProductPrice' should be a number, got {type(value).__name__}",
        document_id,
    )


def _images(document: Mapping[str, Any], document_id: str) -> List[str]:
    value = document.get("images")
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(img, str) for img in value):
        raise DecodeError(
            f"Product {document_id}: field 'images' should be a list of file names",
            document_id,
        )
    return list(value)


def decode_document(document: Mapping[str, Any]) -> CatalogRecord:
    """
    Map a projected MongoDB document to a CatalogRecord.

    Missing or null fields become empty values; fields of the wrong
    type are rejected.

    Raises:
        DecodeError: If the document doesn't have the catalog shape
    """
    raw_id = document.get("_id")
    if isinstance(raw_id, ObjectId):
        document_id = str(raw_id)
    elif isinstance(raw_id, str) and raw_id:
        document_id = raw_id
    else:
        raise DecodeError(f"Product document has no usable _id: {raw_id!r}")

    fields = {attr: _text(document, key, document_id) for key, attr in TEXT_FIELDS.items()}

    try:
        return CatalogRecord(
            id=document_id,
            price=_price(document, document_id),
            images=_images(document, document_id),
            **fields,
        )
    except ValueError as e:
        raise DecodeError(f"Product {document_id}: {e}", document_id) from e


class CatalogReader:
    """
    Reads eligible products from the catalog collection.

    Usage:
        reader = CatalogReader.from_client(client, settings)
        records = reader.read()
    """

    def __init__(self, collection: Collection, query_timeout: float = 3.0):
        """
        Initialize the reader.

        Args:
            collection: The products collection
            query_timeout: Budget in seconds for the whole scan
        """
        self.collection = collection
        self.query_timeout = query_timeout

    @classmethod
    def from_client(cls, client: MongoClient, settings: FeedSettings) -> "CatalogReader":
        collection = client[settings.database][settings.collection]
        return cls(collection, query_timeout=settings.query_timeout)

    def read(self) -> List[CatalogRecord]:
        """
        Scan the catalog in natural order.

        Returns:
            Eligible products, decoded

        Raises:
            ReadTimeoutError: If the scan exceeds query_timeout
            QueryError: If the query fails for any other driver reason
            DecodeError: If a document can't be decoded
        """
        records: List[CatalogRecord] = []
        try:
            with pymongo.timeout(self.query_timeout):
                with self.collection.find(ELIGIBILITY_FILTER, PROJECTION) as cursor:
                    for document in cursor:
                        records.append(decode_document(document))
        except PyMongoError as e:
            if e.timeout:
                raise ReadTimeoutError(
                    f"Catalog scan exceeded {self.query_timeout:g}s after {len(records)} products: {e}"
                ) from e
            raise QueryError(f"Catalog query failed: {e}") from e
        except BSONError as e:
            raise DecodeError(f"Invalid BSON in catalog after {len(records)} products: {e}") from e

        logger.debug("Read %d catalog records", len(records))
        return records
