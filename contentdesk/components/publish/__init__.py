"""Publish component - handles the approved -> published transition."""

from .component import PublishComponent
from .models import PublishInput, PublishOptions, PublishOutput, PublishResult
from .ports import PublisherPort

__all__ = [
    "PublishComponent",
    "PublishInput",
    "PublishOptions",
    "PublishOutput",
    "PublishResult",
    "PublisherPort",
]
