"""
Dev Generator Adapter.

Builds template drafts instead of calling a generative backend, so the
library and workflow can be exercised offline.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from contentdesk.components.library import GenerationKind
from contentdesk.domain.entities import ContentItem, ContentType
from contentdesk.domain.errors import GenerationError

logger = logging.getLogger(__name__)


@dataclass
class DevGenerator:
    """Implements GeneratorPort with deterministic placeholder copy."""

    requests: list[tuple[GenerationKind, dict[str, Any]]] = field(default_factory=list)

    async def generate(self, kind: GenerationKind, params: dict[str, Any]) -> ContentItem:
        self.requests.append((kind, dict(params)))

        topic = str(params.get("topic") or params.get("product_name") or "").strip()
        if not topic:
            raise GenerationError("A topic or product name is required.")

        logger.info("Dev generator: %s draft for %r", kind, topic)

        if kind == "article":
            tone = params.get("tone", "Professional")
            return ContentItem(
                type=ContentType.ARTICLE,
                title=topic,
                meta_description=f"A {tone.lower()} article about {topic}.",
                body=f"<h2>{topic}</h2>\n<p>Draft article about {topic}.</p>",
                featured_image_prompt=f"Editorial illustration of {topic}",
            )

        if kind == "product":
            features = params.get("features", [])
            return ContentItem(
                type=ContentType.PRODUCT,
                title=topic,
                meta_description=f"Buy {topic}.",
                short_description=f"{topic} - " + ", ".join(features) if features else topic,
                long_description=f"<p>{topic}.</p>",
            )

        raise GenerationError(f"Unsupported content kind: {kind}")
