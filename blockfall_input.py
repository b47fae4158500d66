"""Keyboard to command mapping"""
from typing import Optional
import pygame
from blockfall_session import Command

KEYMAP = {
    pygame.K_LEFT: Command.LEFT,
    pygame.K_RIGHT: Command.RIGHT,
    pygame.K_UP: Command.ROTATE,
    pygame.K_DOWN: Command.DOWN,
}

def command_for_key(key) -> Optional[Command]:
    return KEYMAP.get(key)
