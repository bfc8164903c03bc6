"""
Core Package - Multi-Event Scoring
multievent/core/__init__.py

Core infrastructure: dependencies, exceptions, logging.
Dependency providers live in multievent.core.dependencies.
"""

from multievent.core.exceptions import (
    DuplicateEntityException,
    EntityNotFoundException,
    RepositoryException,
)

__all__ = [
    "DuplicateEntityException",
    "EntityNotFoundException",
    "RepositoryException",
]
