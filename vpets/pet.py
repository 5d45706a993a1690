"""
VirtualPets - Pet Model

This module contains the Pet dataclass and all related game logic for one virtual pet.
Every read-modify-write of a pet's needs happens under the pet's own lock, since the
decay scheduler thread and the interactive loop both mutate the same instance.
"""

from __future__ import annotations

import logging
import random
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Union

from .art import sprite_for
from .utils import (
    BOREDOM_WEIGHT,
    COMPLAIN_THRESHOLD,
    DEATH_MOOD,
    DECAY_RANGE,
    DEFAULT_CARE_AMOUNT,
    RANDOM_CARE_RANGE,
    clamp_low,
    now,
    title_case,
)

logger = logging.getLogger(__name__)

DEFAULT = "default"
RANDOM = "random"

Amount = Union[int, str]


class PetKind(Enum):
    """The kinds of pet on offer, in menu order."""

    CAT = "Cat"
    DOG = "Dog"
    RABBIT = "Rabbit"
    TURTLE = "Turtle"
    PARROT = "Parrot"
    HORSE = "Horse"

    @classmethod
    def from_index(cls, index: int) -> "PetKind":
        """Look a kind up by its zero-based menu position."""
        return list(cls)[index]


class MoodLabel(Enum):
    """Mood buckets, worst last."""

    EUPHORIC = "Having the time of its life"
    HAPPY = "Happy"
    UNHAPPY = "Unhappy"
    MAD = "Mad"
    RAGING_MAD = "Raging Mad"
    PASSED_OUT = "Passed Out"


# Upper (exclusive) mood bound of each label
MOOD_THRESHOLDS = (
    (5, MoodLabel.EUPHORIC),
    (25, MoodLabel.HAPPY),
    (50, MoodLabel.UNHAPPY),
    (75, MoodLabel.MAD),
    (95, MoodLabel.RAGING_MAD),
)

NOISES = {
    PetKind.CAT: "Meow",
    PetKind.DOG: "Woof",
    PetKind.RABBIT: "[Rabbit noises]",
    PetKind.TURTLE: "[Turtle noises]",
    PetKind.PARROT: "Ca-caw!",
    PetKind.HORSE: "Weugh",
}

PHRASES = {
    PetKind.CAT: (
        "{noise}. I knocked your cup off the table. You're welcome.",
        "Purrrr... {noise}. Scratch behind my ears, human.",
        "{noise}! The red dot came back and I almost had it.",
        "Hiss... oh, it's you. {noise}.",
    ),
    PetKind.DOG: (
        "{noise}! {noise}! Is it walk time? It's walk time!",
        "{noise}. I buried your sock. It's safe now.",
        "*wags tail* {noise}! You're my favourite person!",
        "{noise}? Did somebody say ball?",
    ),
    PetKind.RABBIT: (
        "{noise} *nose twitching intensifies*",
        "{noise} *binkies around the room*",
        "{noise} *chews on a carrot thoughtfully*",
    ),
    PetKind.TURTLE: (
        "{noise} *slowly blinks at you*",
        "{noise} *retreats into shell, then peeks out*",
        "{noise} *takes one step. Rests.*",
    ),
    PetKind.PARROT: (
        "{noise} You're funny!",
        "{noise} Pretty bird! Pretty bird!",
        "{noise} Who's a good parrot? Me!",
        "{noise} Crackers! Crackers!",
    ),
    PetKind.HORSE: (
        "{noise}. *stomps a hoof*",
        "Neigh! {noise}. Got any apples?",
        "{noise}. *flicks mane majestically*",
    ),
}

HUNGRY_AND_BORED = " ...and I'm starving and bored out of my mind!"
HUNGRY = " ...and my tummy is rumbling."
BORED = " ...and I'm sooo bored."


@dataclass(frozen=True)
class NeedChange:
    """Outcome of feeding or playing: a need before and after the action."""

    before: int
    after: int

    @property
    def amount(self) -> int:
        """How much the need actually went down."""
        return self.before - self.after


def _resolve_amount(amount: Amount, rng) -> int:
    if amount == DEFAULT:
        return DEFAULT_CARE_AMOUNT
    if amount == RANDOM:
        return rng.randrange(*RANDOM_CARE_RANGE)
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValueError(f"amount must be an int, {DEFAULT!r} or {RANDOM!r}, not {amount!r}")
    if amount < 0:
        raise ValueError(f"amount must not be negative, got {amount}")
    return amount


@dataclass
class Pet:
    """Represents one virtual pet with its needs and lifetime."""

    name: str
    kind: PetKind
    hunger: int = 0
    boredom: int = 0
    born_at: float = 0.0
    died_at: Optional[float] = None

    clock: Callable[[], float] = field(default=now, repr=False, compare=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.hunger = clamp_low(int(self.hunger))
        self.boredom = clamp_low(int(self.boredom))
        if self.born_at <= 0:
            self.born_at = self.clock()

    @property
    def display_name(self) -> str:
        return title_case(self.name)

    @property
    def alive(self) -> bool:
        with self._lock:
            return self.died_at is None

    @property
    def art(self) -> list[str]:
        return sprite_for(self.kind)

    def mood(self) -> float:
        """Distress score; higher is worse."""
        with self._lock:
            return self.hunger + BOREDOM_WEIGHT * self.boredom

    def mood_label(self) -> MoodLabel:
        """Map the mood score onto a label."""
        mood = self.mood()
        for bound, label in MOOD_THRESHOLDS:
            if mood < bound:
                return label
        return MoodLabel.PASSED_OUT

    def feed(self, amount: Amount = DEFAULT, rng=random) -> NeedChange:
        """
        Lower hunger by the default, a custom or a random amount.

        Args:
            amount: DEFAULT, RANDOM or a non-negative int
            rng: Source of random draws for RANDOM

        Returns:
            Hunger before and after; hunger never drops below zero
        """
        value = _resolve_amount(amount, rng)
        with self._lock:
            before = self.hunger
            if self.died_at is not None:
                return NeedChange(before, before)
            self.hunger = clamp_low(before - value)
            return NeedChange(before, self.hunger)

    def play(self, amount: Amount = DEFAULT, rng=random) -> NeedChange:
        """Lower boredom; same rules as feed()."""
        value = _resolve_amount(amount, rng)
        with self._lock:
            before = self.boredom
            if self.died_at is not None:
                return NeedChange(before, before)
            self.boredom = clamp_low(before - value)
            return NeedChange(before, self.boredom)

    def tick(self, rng=random) -> bool:
        """
        Let time pass for this pet: hunger and boredom both go up.

        Only the decay scheduler calls this. A dead pet is frozen and ignores it.

        Returns:
            True if this tick killed the pet
        """
        with self._lock:
            if self.died_at is not None:
                return False
            self.hunger += rng.randrange(*DECAY_RANGE)
            self.boredom += rng.randrange(*DECAY_RANGE)
            if self.mood() >= DEATH_MOOD:
                self.died_at = self.clock()
                logger.info("%s the %s died (mood %.1f)", self.display_name, self.kind.value, self.mood())
                return True
            return False

    def noise(self) -> str:
        return NOISES[self.kind]

    def speak(self, rng=random) -> str:
        """Pick a random line for this kind of pet and add how it feels."""
        line = rng.choice(PHRASES[self.kind]).format(noise=self.noise())
        with self._lock:
            hungry = self.hunger > COMPLAIN_THRESHOLD
            bored = self.boredom > COMPLAIN_THRESHOLD
        if hungry and bored:
            return line + HUNGRY_AND_BORED
        if hungry:
            return line + HUNGRY
        if bored:
            return line + BORED
        return line

    def status_window(self) -> str:
        """Name, kind, needs and mood as a text block."""
        with self._lock:
            hunger, boredom = self.hunger, self.boredom
            label = self.mood_label()
        return (
            f"Name: {self.display_name}\n"
            f"Type: {self.kind.value}\n"
            f"Hunger: {hunger}\n"
            f"Boredom: {boredom}\n"
            f"Mood: {label.value}"
        )
