"""Spoken-word rendering of 24-hour clock times.

WHAT: Turns an ``HH:MM`` string such as ``"06:01"`` into ``"six oh one am"``.
WHEN: Called by the time-words API router or directly by any Python caller.
WHY: Screen readers, voice prompts and notifications want the time the way a
person would say it rather than the digits.
HOW: Parse the string into a ``ClockTime``, handle midnight/noon, then pick
the hour word, the minute phrase and the am/pm suffix from fixed tables.
"""

from __future__ import annotations

import logging
import re
from typing import NamedTuple

LOGGER = logging.getLogger(__name__)

HOUR_WORDS = (
    "twelve", "one", "two", "three", "four", "five",
    "six", "seven", "eight", "nine", "ten", "eleven",
)
MINUTE_WORDS = (
    "oh", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
)
TENS_WORDS = ("twenty", "thirty", "forty", "fifty")

_CLOCK_RE = re.compile(r"([0-9]{2}):([0-9]{2})")


class InvalidInput(ValueError):
    """Raised when a value cannot be read as a 24-hour ``HH:MM`` time."""

    def __init__(self, value: object, message: str) -> None:
        super().__init__(message)
        self.value = value
        self.message = message


class ClockTime(NamedTuple):
    hour: int
    minute: int


def parse_clock_time(time: str) -> ClockTime:
    """Split ``HH:MM`` into a validated ``ClockTime``.

    Both fields must be exactly two ASCII digits; hour 00-23, minute 00-59.
    """
    if not isinstance(time, str):
        raise InvalidInput(time, "time must be a string in HH:MM format")
    match = _CLOCK_RE.fullmatch(time)
    if match is None:
        LOGGER.debug("Rejected malformed time %r", time)
        raise InvalidInput(time, f"'{time}' is not in HH:MM format")
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23:
        raise InvalidInput(time, f"hour {hour:02d} is out of range 00-23")
    if minute > 59:
        raise InvalidInput(time, f"minute {minute:02d} is out of range 00-59")
    return ClockTime(hour, minute)


def minute_phrase(minute: int) -> str:
    if not 0 <= minute <= 59:
        raise InvalidInput(minute, f"minute {minute} is out of range 0-59")
    if minute == 0:
        return "o'clock"
    if minute < 10:
        return f"oh {MINUTE_WORDS[minute]}"
    if minute < 20:
        return MINUTE_WORDS[minute]
    tens, ones = divmod(minute, 10)
    phrase = TENS_WORDS[tens - 2]
    if ones:
        phrase = f"{phrase} {MINUTE_WORDS[ones]}"
    return phrase


def format_time_words(time: str) -> str:
    """Return the English reading of ``time``, e.g. ``"23:23"`` -> ``"eleven twenty three pm"``.

    Raises ``InvalidInput`` for anything that is not a valid 24-hour ``HH:MM``.
    """
    clock = parse_clock_time(time)
    if clock == (0, 0):
        return "midnight"
    if clock == (12, 0):
        return "noon"

    period = "am" if clock.hour < 12 else "pm"
    hour_word = HOUR_WORDS[clock.hour % 12]
    return f"{hour_word} {minute_phrase(clock.minute)} {period}".strip()


__all__ = [
    "ClockTime",
    "InvalidInput",
    "format_time_words",
    "minute_phrase",
    "parse_clock_time",
]
