"""Repository exports."""

from .party_members_repo import PartyMembersRepository

__all__ = [
    "PartyMembersRepository",
]
