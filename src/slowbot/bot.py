__all__ = ["Slowbot", "INVITE_PERMISSIONS"]

import logging

import discord
import lifesaver

log = logging.getLogger(__name__)

EXTENSIONS = ["slowbot.exts.slowmode"]

#: The permissions requested when inviting the bot to a guild.
INVITE_PERMISSIONS = discord.Permissions(
    manage_channels=True, send_messages=True, read_message_history=True
)


def guild_listing(guilds: list[discord.Guild]) -> str:
    lines = [f"{index}: {guild.name} ({guild.id})" for index, guild in enumerate(guilds, 1)]
    return "Connected guilds:\n" + "\n".join(lines)


class Slowbot(lifesaver.Bot):
    async def setup_hook(self) -> None:
        await super().setup_hook()

        for extension in EXTENSIONS:
            await self.load_extension(extension)

    async def on_ready(self) -> None:
        await super().on_ready()

        self._hide_obvious_commands()

        log.info(guild_listing(list(self.guilds)))

        if self.user is None:
            return
        url = discord.utils.oauth_url(self.user.id, permissions=INVITE_PERMISSIONS)
        log.info("Link to add the bot to your guild:\n%s", url)

    def _hide_obvious_commands(self) -> None:
        for name in {"help", "ping", "rtt", "jishaku"}:
            self._hide(name)

    def _hide(self, command_name: str) -> None:
        command = self.get_command(command_name)
        if command is not None:
            command.hidden = True
