import asyncio

import pytest

from contentdesk.adapters.dev_generator import DevGenerator
from contentdesk.domain.entities import ContentStatus, ContentType
from contentdesk.domain.errors import GenerationError


def test_article_draft():
    gen = DevGenerator()

    item = asyncio.run(gen.generate("article", {"topic": "Rain Gardens", "tone": "Friendly"}))

    assert item.type is ContentType.ARTICLE
    assert item.title == "Rain Gardens"
    assert item.status is ContentStatus.DRAFT
    assert "friendly" in item.meta_description
    assert gen.requests == [("article", {"topic": "Rain Gardens", "tone": "Friendly"})]


def test_product_draft():
    item = asyncio.run(
        DevGenerator().generate("product", {"product_name": "Hose", "features": ["50ft", "brass"]})
    )
    assert item.type is ContentType.PRODUCT
    assert item.short_description == "Hose - 50ft, brass"


def test_missing_topic():
    with pytest.raises(GenerationError, match="topic or product name"):
        asyncio.run(DevGenerator().generate("article", {"topic": "  "}))


def test_unsupported_kind():
    with pytest.raises(GenerationError):
        asyncio.run(DevGenerator().generate("video", {"topic": "x"}))
