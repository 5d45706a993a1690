"""
VirtualPets

A terminal pet-keeping simulator: two pets get hungrier and more bored on
their own, and it is up to the player to keep both of them alive.
"""

import logging

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .game import SessionController
from .pet import Pet, PetKind
from .scheduler import DecayScheduler
from .session import Session

__all__ = ["DecayScheduler", "Pet", "PetKind", "Session", "SessionController", "__version__"]
