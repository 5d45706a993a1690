"""
VirtualPets - ASCII Art

Sprites for each pet kind, plus the one shown on the obituary screen.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .pet import PetKind


SPRITES: dict[str, list[str]] = {
    "Cat": [
        "    /\\_/\\  ",
        "   ( o.o ) ",
        "    > ^ <  ",
        "   /     \\ ",
        "  (_/   \\_)~",
    ],
    "Dog": [
        "   __      _",
        "  o'')}____//",
        "   `_/      )",
        "   (_(_/-(_/ ",
    ],
    "Rabbit": [
        "   (\\(\\   ",
        "   ( -.-)  ",
        "   o_(\")(\")",
    ],
    "Turtle": [
        "        __     ",
        "   .,-;-;-,. /'_\\",
        " _/_/_/_|_\\_\\) / ",
        "'-<_><_><_><_>=/\\",
        "  `/_/====/_/-'\\_\\",
        "   \"\"     \"\"    \"\"",
    ],
    "Parrot": [
        "    .--.   ",
        "   /  o \\  ",
        "  |  \\_/>  ",
        "   \\    |  ",
        "    )   /  ",
        "   /__/|   ",
        "     /_|   ",
    ],
    "Horse": [
        "         ,--,  ",
        "   _ ___/ /\\|  ",
        " ,;'( )__, )  ~",
        "//  //   '--;  ",
        "'   \\     | ^  ",
        "     ^    ^    ",
    ],
}

RIP = [
    "   .-''''-.",
    "  /  RIP  \\",
    " |   xx   |",
    "  \\______/",
    "   (____)",
]


def sprite_for(kind: "PetKind") -> list[str]:
    """Get the sprite lines for a pet kind."""
    return SPRITES[kind.value]
