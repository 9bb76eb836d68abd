"""Plain representations of the Discord objects the slowmode pipeline reads."""

__all__ = ["Member", "Role", "Guild", "Channel", "MessageEvent"]

from typing import Any, Dict, Iterable, Optional, Tuple

import discord


class Role:
    """A guild role and its permission bitset."""

    def __init__(self, id: int, *, name: str, permissions: discord.Permissions) -> None:
        self.id = id
        self.name = name
        self.permissions = permissions

    @classmethod
    def from_data(cls, data: Dict[str, Any]) -> "Role":
        return cls(
            int(data["id"]),
            name=data["name"],
            permissions=discord.Permissions(int(data["permissions"])),
        )

    def __repr__(self) -> str:
        return f"<Role id={self.id} name={self.name!r} permissions={self.permissions.value}>"


class Guild:
    def __init__(self, id: int, *, owner_id: int, roles: Iterable[Role]) -> None:
        self.id = id
        self.owner_id = owner_id

        #: Every role the guild defines, keyed by role ID.
        self.roles: Dict[int, Role] = {role.id: role for role in roles}

    @classmethod
    def from_data(cls, data: Dict[str, Any]) -> "Guild":
        return cls(
            int(data["id"]),
            owner_id=int(data["owner_id"]),
            roles=[Role.from_data(role) for role in data.get("roles", [])],
        )

    def __repr__(self) -> str:
        return f"<Guild id={self.id} owner_id={self.owner_id} roles={len(self.roles)}>"


class Member:
    """A user within a guild.

    Only the role IDs are kept; resolving them against the guild's roles is up
    to whoever needs the permissions.
    """

    def __init__(
        self,
        id: int,
        *,
        username: str,
        nick: Optional[str] = None,
        role_ids: Iterable[int] = (),
    ) -> None:
        self.id = id
        self.username = username
        self.nick = nick
        self.role_ids: Tuple[int, ...] = tuple(role_ids)

    @classmethod
    def from_data(cls, data: Dict[str, Any]) -> "Member":
        user = data["user"]
        return cls(
            int(user["id"]),
            username=user["username"],
            nick=data.get("nick"),
            role_ids=[int(role_id) for role_id in data.get("roles", [])],
        )

    @property
    def display_name(self) -> str:
        return self.nick or self.username

    def __repr__(self) -> str:
        return f"<Member id={self.id} username={self.username!r} nick={self.nick!r}>"


class Channel:
    def __init__(
        self, id: int, *, guild_id: Optional[int], rate_limit_per_user: int = 0
    ) -> None:
        self.id = id
        self.guild_id = guild_id

        #: The current slowmode of this channel, in seconds.
        self.rate_limit_per_user = rate_limit_per_user

    @classmethod
    def from_data(cls, data: Dict[str, Any]) -> "Channel":
        guild_id = data.get("guild_id")
        return cls(
            int(data["id"]),
            guild_id=int(guild_id) if guild_id is not None else None,
            rate_limit_per_user=data.get("rate_limit_per_user", 0),
        )

    def __repr__(self) -> str:
        return (
            f"<Channel id={self.id} guild_id={self.guild_id} "
            f"rate_limit_per_user={self.rate_limit_per_user}>"
        )


class MessageEvent:
    """An inbound message that was addressed to the bot."""

    def __init__(
        self,
        *,
        author_id: int,
        channel_id: int,
        content: str,
        source: Any = None,
    ) -> None:
        self.author_id = author_id
        self.channel_id = channel_id
        self.content = content

        #: The originating message, handed back to the gateway when replying.
        self.source = source

    @classmethod
    def from_message(cls, msg: discord.Message) -> "MessageEvent":
        return cls(
            author_id=msg.author.id,
            channel_id=msg.channel.id,
            content=msg.content,
            source=msg,
        )

    def __repr__(self) -> str:
        return f"<MessageEvent author_id={self.author_id} channel_id={self.channel_id}>"
