"""
Input handling for the sandbox keyboard
"""

import pygame
from typing import Dict, List, Set
from dataclasses import dataclass, field

from ..config import HitFlag, MessageType, FORM_IRON_SWORD, FORM_HUNTING_BOW, FORM_FLAMES_TOME


@dataclass
class InputState:
    """Current state of the keyboard"""
    keys_pressed: Set[int] = field(default_factory=set)
    keys_just_pressed: Set[int] = field(default_factory=set)
    keys_just_released: Set[int] = field(default_factory=set)

    quit_requested: bool = False


class InputHandler:
    """
    Tracks key state and turns just-pressed keys into host events.
    """

    def __init__(self):
        self.state = InputState()
        self._prev_keys: Set[int] = set()

        # Key bindings (action -> key)
        self.bindings: Dict[str, int] = {
            'melee': pygame.K_j,
            'bash': pygame.K_b,
            'bow': pygame.K_r,
            'spell': pygame.K_f,
            'power_attack': pygame.K_p,
            'new_game': pygame.K_n,
            'load_game': pygame.K_l,
            'quit': pygame.K_ESCAPE,
        }

    def update(self):
        """
        Update input state. Call once per frame before processing events.
        """
        self._prev_keys = self.state.keys_pressed.copy()
        self.state.keys_just_pressed.clear()
        self.state.keys_just_released.clear()
        self.state.quit_requested = False

    def process_event(self, event: pygame.event.Event):
        """Process a single pygame event"""
        if event.type == pygame.QUIT:
            self.state.quit_requested = True

        elif event.type == pygame.KEYDOWN:
            self.state.keys_pressed.add(event.key)
            if event.key not in self._prev_keys:
                self.state.keys_just_pressed.add(event.key)
            if event.key == self.bindings['quit']:
                self.state.quit_requested = True

        elif event.type == pygame.KEYUP:
            self.state.keys_pressed.discard(event.key)
            self.state.keys_just_released.add(event.key)

    def is_action_just_pressed(self, action: str) -> bool:
        """Check if bound action key was just pressed"""
        if action in self.bindings:
            return self.bindings[action] in self.state.keys_just_pressed
        return False

    def just_pressed_actions(self) -> List[str]:
        """Actions whose key went down this frame, in binding order"""
        return [action for action in self.bindings if self.is_action_just_pressed(action)]

    def apply_to_host(self, host) -> List[str]:
        """
        Drive the sandbox host with this frame's actions.
        Return the actions that were applied.
        """
        applied = []
        for action in self.just_pressed_actions():
            if action == 'new_game':
                host.start_session(MessageType.NEW_GAME)
            elif action == 'load_game':
                host.start_session(MessageType.POST_LOAD_GAME)
            elif host.player() is None:
                # No session yet, nothing to swing
                continue
            elif action == 'melee':
                host.player_hit(FORM_IRON_SWORD)
            elif action == 'bash':
                host.player_hit(FORM_IRON_SWORD, HitFlag.BASH_ATTACK)
            elif action == 'bow':
                host.player_hit(FORM_HUNTING_BOW)
            elif action == 'spell':
                host.player_hit(FORM_FLAMES_TOME)
            elif action == 'power_attack':
                host.player_power_attack(FORM_IRON_SWORD)
            else:
                continue
            applied.append(action)
        return applied

    def set_binding(self, action: str, key: int):
        """Change a key binding"""
        self.bindings[action] = key

    def should_quit(self) -> bool:
        """Check if quit was requested"""
        return self.state.quit_requested
