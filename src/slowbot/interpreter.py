"""Turning a command message into a slowmode directive."""

__all__ = ["MIN_SLOWMODE", "MAX_SLOWMODE", "QUERY_ARGUMENT", "interpret"]

import datetime
from typing import Optional

from .directive import Directive, Invalid, Query, SetTo
from .duration import DurationError, parse_duration

#: Bounds of a channel's slowmode, in seconds, as accepted by Discord.
MIN_SLOWMODE = 0
MAX_SLOWMODE = 21600

QUERY_ARGUMENT = "?"


def interpret(body: str, current_rate_limit: int) -> Optional[Directive]:
    """Interpret the body of a message addressed to the bot.

    The first word is the mention of the bot and the second is the argument:
    ``?`` queries the current slowmode, anything else is parsed as a duration
    to set. Returns ``None`` when there is no argument at all.
    """
    words = body.split()
    if len(words) < 2:
        return None

    argument = words[1]
    if argument == QUERY_ARGUMENT:
        return Query(current_rate_limit)

    try:
        duration = parse_duration(argument)
    except DurationError as err:
        return Invalid(Invalid.UNPARSEABLE, error=err)

    # checked before truncating so that e.g. -0.5s isn't accepted as 0s
    if duration < datetime.timedelta(seconds=MIN_SLOWMODE):
        return Invalid(Invalid.OUT_OF_RANGE)

    seconds = duration // datetime.timedelta(seconds=1)
    if seconds > MAX_SLOWMODE:
        return Invalid(Invalid.OUT_OF_RANGE)

    return SetTo(seconds)
