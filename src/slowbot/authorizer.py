"""Deciding who may change a channel's slowmode."""

__all__ = ["CHANNEL_EDITING_PERMISSIONS", "Authorization", "is_authorized", "grants_channel_editing"]

from typing import List, Mapping

import discord

from .models import Member, Role

#: Holding any of these permission bits lets a member change slowmode.
CHANNEL_EDITING_PERMISSIONS = discord.Permissions(
    administrator=True, manage_channels=True
)


def grants_channel_editing(role: Role) -> bool:
    """Return whether a role carries a permission that allows editing channels."""
    return role.permissions.value & CHANNEL_EDITING_PERMISSIONS.value != 0


class Authorization:
    """The result of checking a member against a guild's roles.

    Truthy when the member is authorized.
    """

    def __init__(self, authorized: bool, *, unknown_roles: List[int]) -> None:
        self.authorized = authorized

        #: Role IDs of the member that weren't found among the guild's roles.
        #: These never grant anything.
        self.unknown_roles = unknown_roles

    def __bool__(self) -> bool:
        return self.authorized

    def __repr__(self) -> str:
        return (
            f"<Authorization authorized={self.authorized} "
            f"unknown_roles={self.unknown_roles!r}>"
        )


def is_authorized(
    member: Member, owner_id: int, guild_roles: Mapping[int, Role]
) -> Authorization:
    """Check whether a member may change slowmode in a guild.

    The guild owner always may. Anyone else needs a role with the Administrator
    or Manage Channels permission. Role IDs that can't be resolved are skipped
    and reported in :attr:`Authorization.unknown_roles`.
    """
    unknown_roles: List[int] = []

    if member.id == owner_id:
        return Authorization(True, unknown_roles=unknown_roles)

    for role_id in member.role_ids:
        role = guild_roles.get(role_id)
        if role is None:
            unknown_roles.append(role_id)
            continue
        if grants_channel_editing(role):
            return Authorization(True, unknown_roles=unknown_roles)

    return Authorization(False, unknown_roles=unknown_roles)
