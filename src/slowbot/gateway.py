"""Lookups, channel updates and replies against Discord."""

__all__ = ["Gateway", "DiscordGateway"]

import abc

import discord
from discord.http import HTTPClient, Route

from .models import Channel, Guild, Member, MessageEvent


class Gateway(abc.ABC):
    """Everything the slowmode handler needs from the outside world.

    Failing lookups and updates raise :class:`discord.HTTPException`.
    """

    @abc.abstractmethod
    async def fetch_channel(self, channel_id: int) -> Channel:
        ...

    @abc.abstractmethod
    async def fetch_guild(self, guild_id: int) -> Guild:
        ...

    @abc.abstractmethod
    async def fetch_member(self, guild_id: int, user_id: int) -> Member:
        ...

    @abc.abstractmethod
    async def set_rate_limit(self, channel_id: int, seconds: int) -> None:
        """Change the slowmode of a channel."""

    @abc.abstractmethod
    async def reply(self, event: MessageEvent, content: str) -> None:
        """Reply to the message that an event came from."""


class DiscordGateway(Gateway):
    """A :class:`Gateway` talking to the Discord REST API directly."""

    def __init__(self, http: HTTPClient) -> None:
        self.http = http

    async def fetch_channel(self, channel_id: int) -> Channel:
        route = Route("GET", "/channels/{channel_id}", channel_id=channel_id)
        return Channel.from_data(await self.http.request(route))

    async def fetch_guild(self, guild_id: int) -> Guild:
        route = Route("GET", "/guilds/{guild_id}", guild_id=guild_id)
        return Guild.from_data(await self.http.request(route))

    async def fetch_member(self, guild_id: int, user_id: int) -> Member:
        route = Route(
            "GET",
            "/guilds/{guild_id}/members/{user_id}",
            guild_id=guild_id,
            user_id=user_id,
        )
        return Member.from_data(await self.http.request(route))

    async def set_rate_limit(self, channel_id: int, seconds: int) -> None:
        route = Route("PATCH", "/channels/{channel_id}", channel_id=channel_id)
        await self.http.request(route, json={"rate_limit_per_user": seconds})

    async def reply(self, event: MessageEvent, content: str) -> None:
        message: discord.Message = event.source
        await message.reply(content, mention_author=False)
