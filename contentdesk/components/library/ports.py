"""
Library component port definitions.
"""

from __future__ import annotations

from typing import Any, Literal, Protocol

from contentdesk.domain.entities import ContentItem

GenerationKind = Literal["article", "product"]


class GeneratorPort(Protocol):
    """Generative content backend (external collaborator)."""

    async def generate(self, kind: GenerationKind, params: dict[str, Any]) -> ContentItem:
        """
        Produce a draft with a fresh id and no author.

        Raises:
            GenerationError: backend failure; message is shown verbatim
        """
        ...
