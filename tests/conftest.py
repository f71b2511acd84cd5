"""Shared test fixtures."""

from unittest.mock import MagicMock

import pytest
from bson import ObjectId

from zoomfeed.common.settings import FeedSettings
from zoomfeed.models import CatalogRecord, FeedRecord

PRODUCT_ID = "5c8fa5fbb1d5e2a4c8b7e001"


def make_mongo_client(documents):
    """MagicMock MongoClient whose products collection yields `documents` from find()."""
    client = MagicMock()
    cursor = MagicMock()
    cursor.__enter__.return_value = cursor
    cursor.__iter__.return_value = iter(documents)
    collection = client.__getitem__.return_value.__getitem__.return_value
    collection.find.return_value = cursor
    return client


@pytest.fixture
def product_id():
    """Hex id shared by the product fixtures."""
    return PRODUCT_ID


@pytest.fixture
def mongo_client():
    """Factory building a mock MongoClient over the given documents."""
    return make_mongo_client


@pytest.fixture
def settings(tmp_path):
    """Settings pointing logs and feeds at a temporary directory."""
    return FeedSettings(
        mongodb_uri="mongodb://localhost:27017/zunka",
        log_dir=tmp_path / "log" / "zoom",
        output_dir=tmp_path / "dist" / "xml" / "zoom",
    )


@pytest.fixture
def product_document():
    """A projected products document as MongoDB returns it."""
    return {
        "_id": ObjectId(PRODUCT_ID),
        "storeProductTitle": "Notebook Dell Inspiron 15 i5 8GB",
        "storeProductCategory": "Notebooks",
        "storeProductDetail": "Notebook com tela de 15.6 polegadas.",
        "storeProductTechnicalInformation": "Peso; 2,1kg\nEAN; 7891234567890\nCor; Preto",
        "storeProductPrice": 3299.9,
        "ean": "",
        "images": ["dell-front.jpg", "dell-side.jpg"],
        "dealerName": "Aldo",
    }


@pytest.fixture
def minimal_record():
    """Catalog record with only required fields."""
    return CatalogRecord(
        id=PRODUCT_ID,
        title="Mouse USB",
        price=10.0,
    )


@pytest.fixture
def full_record():
    """Fully populated catalog record."""
    return CatalogRecord(
        id=PRODUCT_ID,
        title="Notebook Dell Inspiron 15 i5 8GB",
        price=3299.9,
        category="Notebooks",
        description="Notebook com tela de 15.6 polegadas.",
        technical_info="Peso; 2,1kg\nEAN; 7891234567890\nCor; Preto",
        ean="",
        dealer_name="Aldo",
        images=["dell-front.jpg", "dell-side.jpg"],
    )


@pytest.fixture
def feed_record():
    """A derived feed record."""
    return FeedRecord(
        code=PRODUCT_ID,
        name="Notebook Dell Inspiron 15 i5 8GB",
        department="Informática",
        subdepartment="Notebooks",
        description="Notebook com tela de 15.6 polegadas.",
        price="3299,90",
        price_from="3299,90",
        installment_count=3,
        installment_value="1099,96",
        url=f"https://www.zunka.com.br/product/{PRODUCT_ID}",
        image_url=f"https://www.zunka.com.br/img/{PRODUCT_ID}/dell-front.jpg",
        ean="7891234567890",
    )
