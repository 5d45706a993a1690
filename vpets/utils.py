"""
VirtualPets - Utilities and Constants

This module contains utility functions and constants used throughout the game.
"""

import time

# Seconds between two firings of the decay scheduler
TICK_INTERVAL_S = 7.5

# Seconds counted down before the process exits
EXIT_COUNTDOWN_S = 3

# Decay per tick, drawn from [low, high)
DECAY_RANGE = (2, 8)

# Feed/play amounts
DEFAULT_CARE_AMOUNT = 5
RANDOM_CARE_RANGE = (3, 8)

# Weight of boredom in the mood score (boredom alone rarely kills)
BOREDOM_WEIGHT = 0.2

# Mood at or above which a pet dies
DEATH_MOOD = 100

# Hunger/boredom above which a pet complains when spoken to
COMPLAIN_THRESHOLD = 25

# Mood of the inactive pet above which the player gets a reminder
REMINDER_MOOD = 25

PET_COUNT = 2

# (seconds per unit, singular name)
_LIFESPAN_UNITS = (
    (86400, "Day"),
    (3600, "Hour"),
    (60, "Minute"),
    (1, "Second"),
)


def clamp_low(value: int, lo: int = 0) -> int:
    """Clamp a value from below; needs are unbounded above."""
    return lo if value < lo else value


def now() -> float:
    """Get current time in seconds since epoch."""
    return time.time()


def title_case(text: str) -> str:
    """Title-case a display name ('rex the dog' -> 'Rex The Dog')."""
    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split(" "))


def plural(count: int, word: str) -> str:
    """Format '1 Minute' / '2 Minutes'."""
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def fmt_lifespan(seconds: float) -> str:
    """
    Format a duration into a human-readable lifespan string.

    Leading zero-valued units are omitted, lower ones are kept, so 90 seconds
    is '1 Minute and 30 Seconds' and 3600 seconds is
    '1 Hour, 0 Minutes and 0 Seconds'. A zero duration is '0 Seconds'.

    Args:
        seconds: Duration; fractions are dropped, negatives count as zero

    Returns:
        Formatted lifespan
    """
    remaining = max(0, int(seconds))
    parts: list[str] = []
    for size, name in _LIFESPAN_UNITS:
        count, remaining = divmod(remaining, size)
        if count or parts or size == 1:
            parts.append(plural(count, name))
    if len(parts) == 1:
        return parts[0]
    return ", ".join(parts[:-1]) + " and " + parts[-1]
