"""Tests for zoomfeed/models/product.py"""

import dataclasses

import pytest

from zoomfeed.models import CatalogRecord, FeedRecord


class TestCatalogRecord:
    def test_create_minimal(self, minimal_record):
        assert minimal_record.title == "Mouse USB"
        assert minimal_record.price == 10.0

    def test_default_values(self, minimal_record):
        assert minimal_record.images == []
        assert minimal_record.ean == ""
        assert minimal_record.technical_info == ""
        assert minimal_record.category == ""

    def test_images_not_shared_between_instances(self):
        a = CatalogRecord(id="a1", title="A", price=1.0)
        b = CatalogRecord(id="b1", title="B", price=1.0)
        a.images.append("a.jpg")
        assert b.images == []

    def test_raises_on_empty_id(self):
        with pytest.raises(ValueError, match="id is required"):
            CatalogRecord(id="", title="Mouse", price=10.0)

    def test_carries_only_feed_fields(self):
        names = {f.name for f in dataclasses.fields(CatalogRecord)}
        assert "quantity" not in names
        assert "commercialize" not in names

    def test_raises_on_blank_title(self):
        with pytest.raises(ValueError, match="title is required"):
            CatalogRecord(id="a1", title=" \t\n", price=10.0)


class TestFeedRecord:
    def test_untracked_fields_default_empty(self, feed_record):
        assert feed_record.mpc == ""
        assert feed_record.sku == ""

    def test_is_immutable(self, feed_record):
        with pytest.raises(dataclasses.FrozenInstanceError):
            feed_record.price = "1,00"
