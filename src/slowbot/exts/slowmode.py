import discord
import lifesaver

from slowbot.gateway import DiscordGateway
from slowbot.handler import SlowmodeHandler, has_bot_mention_prefix
from slowbot.models import MessageEvent


class Slowmode(lifesaver.Cog):
    """Changes channel slowmode when mentioned.

    Mention the bot followed by a duration (``30s``, ``5m``, ``1h30m``) to set
    the slowmode of the channel, ``0`` to remove it, or ``?`` to see the current
    slowmode. Requires the Manage Channels or Administrator permission.
    """

    def __init__(self, bot: lifesaver.Bot) -> None:
        super().__init__(bot)
        self.handler = SlowmodeHandler(DiscordGateway(bot.http), log=self.log)

    @lifesaver.Cog.listener()
    async def on_message(self, msg: discord.Message) -> None:
        if msg.author.bot or self.bot.user is None:
            return

        if not has_bot_mention_prefix(msg.content, self.bot.user.id):
            return

        outcome = await self.handler.handle(MessageEvent.from_message(msg))
        self.log.debug("Handled message %d: %s", msg.id, outcome.name)


async def setup(bot: lifesaver.Bot) -> None:
    await bot.add_cog(Slowmode(bot))
