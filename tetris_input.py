"""Keyboard mapping: key -> action name -> GameSession call"""
from typing import Optional
import pygame
from tetris_game import GameSession

KEYMAP = {
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_DOWN: "soft_drop",
    pygame.K_UP: "rotate",
    pygame.K_SPACE: "pause",
    pygame.K_c: "hold",
    pygame.K_s: "hard_drop",
    pygame.K_RETURN: "start",
    pygame.K_KP_ENTER: "start",
}

def action_for_key(key: int, mods: int = 0) -> Optional[str]:
    action = KEYMAP.get(key)
    # Ctrl+S / Cmd+S must not hard-drop
    if action == "hard_drop" and mods & (pygame.KMOD_CTRL | pygame.KMOD_META):
        return None
    return action

def apply_action(game: GameSession, action: Optional[str]) -> bool:
    """Run an action on the session. Returns False if it was ignored."""
    if action is None: return False
    if action == "start":
        if game.running: return False
        game.start(); return True
    if not game.running: return False
    if action == "left": game.move(-1)
    elif action == "right": game.move(1)
    elif action == "soft_drop": game.soft_drop()
    elif action == "rotate": game.rotate()
    elif action == "pause": game.toggle_pause()
    elif action == "hold": game.hold()
    elif action == "hard_drop": game.hard_drop()
    else: return False
    return True
