"""Handling of slowmode commands, from lookup to reply."""

__all__ = ["Outcome", "SlowmodeHandler", "has_bot_mention_prefix"]

import enum
import logging

import discord

from .authorizer import is_authorized
from .directive import Invalid, Query, SetTo
from .gateway import Gateway
from .interpreter import MAX_SLOWMODE, MIN_SLOWMODE, interpret
from .models import MessageEvent


def has_bot_mention_prefix(content: str, bot_id: int) -> bool:
    """Return whether a message starts by mentioning the bot."""
    return content.startswith((f"<@{bot_id}>", f"<@!{bot_id}>"))


class Outcome(enum.Enum):
    IGNORED = enum.auto()
    LOOKUP_FAILED = enum.auto()
    UNAUTHORIZED = enum.auto()
    INVALID = enum.auto()
    QUERIED = enum.auto()
    UPDATED = enum.auto()
    UPDATE_FAILED = enum.auto()


class SlowmodeHandler:
    """Carries out slowmode commands.

    Nothing is kept between events, so a single handler can serve any number of
    messages at once. Failures are logged and never raised.
    """

    def __init__(self, gateway: Gateway, *, log: logging.Logger) -> None:
        self.gateway = gateway
        self.log = log

    async def handle(self, event: MessageEvent) -> Outcome:
        try:
            channel = await self.gateway.fetch_channel(event.channel_id)
            if channel.guild_id is None:
                self.log.debug("Ignoring message in channel %d, not in a guild", channel.id)
                return Outcome.IGNORED
            guild = await self.gateway.fetch_guild(channel.guild_id)
            member = await self.gateway.fetch_member(guild.id, event.author_id)
        except (discord.HTTPException, KeyError, ValueError):
            # either the request failed or Discord sent something we can't read
            self.log.exception("Failed to look up the context of %r", event)
            return Outcome.LOOKUP_FAILED

        authorization = is_authorized(member, guild.owner_id, guild.roles)
        for role_id in authorization.unknown_roles:
            self.log.error(
                "Role %d of member %d doesn't exist in guild %d",
                role_id,
                member.id,
                guild.id,
            )

        if not authorization:
            self.log.info(
                "%s (%s) is not permitted to change slowmode in channel %d",
                member.username,
                member.display_name,
                channel.id,
            )
            return Outcome.UNAUTHORIZED

        directive = interpret(event.content, channel.rate_limit_per_user)

        if directive is None:
            return Outcome.IGNORED

        if isinstance(directive, Invalid):
            if directive.error is not None:
                self.log.error("Rejected slowmode from %d: %s", member.id, directive.error)
            else:
                self.log.error(
                    "Rejected slowmode from %d: %s (must be between %d and %d seconds)",
                    member.id,
                    directive.reason,
                    MIN_SLOWMODE,
                    MAX_SLOWMODE,
                )
            return Outcome.INVALID

        if isinstance(directive, Query):
            await self._reply(event, f"slowmode is set to {directive.formatted}")
            return Outcome.QUERIED

        assert isinstance(directive, SetTo)
        try:
            await self.gateway.set_rate_limit(channel.id, directive.seconds)
        except discord.HTTPException:
            self.log.exception(
                "Failed to set slowmode of channel %d to %ds", channel.id, directive.seconds
            )
            return Outcome.UPDATE_FAILED

        self.log.info(
            "%s set slowmode of channel %d to %ds",
            member.display_name,
            channel.id,
            directive.seconds,
        )
        await self._reply(event, f"slowmode set to {directive.formatted}")
        return Outcome.UPDATED

    async def _reply(self, event: MessageEvent, content: str) -> None:
        try:
            await self.gateway.reply(event, content)
        except discord.HTTPException:
            self.log.exception("Failed to reply to %r", event)
