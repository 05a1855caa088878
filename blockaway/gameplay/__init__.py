"""Gameplay systems consuming generated block levels."""
from .animation import AnimationStep, MoveAnimation, SLIDE_SPEED
from .level import Level
from .movement import FLYAWAY_EDGE, MoveOutcome, flyaway_block, resolve_move
from .session import LevelProgress, LevelSession
