"""Factory helpers for runtime entities."""

from .party_member_factory import create_party_member

__all__ = [
    "create_party_member",
]
