"""Domain definition exports."""

from .party_member_def import PartyMemberDef

__all__ = [
    "PartyMemberDef",
]
