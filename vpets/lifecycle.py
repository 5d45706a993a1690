"""
VirtualPets - Game Lifecycle

End-of-game helpers: who died, how long they lived, whether to go again,
and the countdown before the process exits.
"""

import logging
import sys
import time
from typing import Callable, Iterable

from .errors import InvariantViolation
from .pet import Pet
from .ui import Console
from .utils import DEATH_MOOD, fmt_lifespan

logger = logging.getLogger(__name__)


def detect_deceased(pets: Iterable[Pet]) -> Pet:
    """
    Find the pet that ended the game.

    Only valid once the scheduler has latched game-over. If more than one pet
    is dead, the one that died first wins; pets that reached the death mood
    without a recorded death time come last, in list order.

    Raises:
        InvariantViolation: no pet has reached the death mood
    """
    dead = [p for p in pets if p.died_at is not None or p.mood() >= DEATH_MOOD]
    if dead:
        return min(dead, key=lambda p: (p.died_at is None, p.died_at or 0.0))
    raise InvariantViolation("game over was signalled but no pet has died")


def lifespan(born_at: float, died_at: float) -> str:
    """Human-readable time between birth and death."""
    return fmt_lifespan(died_at - born_at)


def prompt_restart(console: Console) -> bool:
    """Any answer starting with 'y' (any case) means yes."""
    answer = console.read_line()
    return answer.strip().lower().startswith("y")


def shutdown(
    console: Console,
    delay_seconds: int,
    sleep: Callable[[float], None] = time.sleep,
    exit: Callable[[int], None] = sys.exit,
) -> None:
    """
    Say goodbye, count down to zero on one line, then exit with status 0.

    Args:
        console: Where the countdown is shown
        delay_seconds: Seconds to count down from
        sleep: Sleep function (tests pass a no-op)
        exit: Process exit function
    """
    logger.info("Shutting down in %ds", delay_seconds)
    console.write("\nThanks for playing!\n")
    for remaining in range(max(0, int(delay_seconds)), -1, -1):
        console.write(f"\rExiting in {remaining}")
        if remaining:
            sleep(1.0)
    console.write("\n")
    exit(0)
