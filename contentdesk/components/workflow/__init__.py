"""
Workflow component - Content status lifecycle with role-gated transitions.
"""

from .component import (
    authorize,
    get_item_or_raise,
    resolve_rule,
    run_add_to_library,
    run_delete,
    run_transition,
)
from .models import (
    AddToLibraryInput,
    AddToLibraryOutput,
    DeleteItemInput,
    DeleteItemOutput,
    TransitionInput,
    TransitionOutput,
)
from .ports import ClockPort, ItemStorePort, PolicyPort, UserDirectoryPort

__all__ = [
    # Entry points
    "run_add_to_library",
    "run_delete",
    "run_transition",
    # Guards
    "authorize",
    "get_item_or_raise",
    "resolve_rule",
    # Input models
    "AddToLibraryInput",
    "DeleteItemInput",
    "TransitionInput",
    # Output models
    "AddToLibraryOutput",
    "DeleteItemOutput",
    "TransitionOutput",
    # Ports
    "ClockPort",
    "ItemStorePort",
    "PolicyPort",
    "UserDirectoryPort",
]
