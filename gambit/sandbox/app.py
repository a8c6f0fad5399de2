"""
Sandbox window for play-testing combos by hand
"""

import logging
import pygame
from typing import Tuple

from ..config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FPS, SANDBOX_TITLE, MAX_COMBO_LENGTH,
    ComboToken, WHITE, GRAY, GOLD, RED, GREEN, STAMINA_GOLD, UI_BG
)
from ..plugin import GambitPlugin
from .host import SandboxHost
from .input_handler import InputHandler

logger = logging.getLogger(__name__)

HELP_LINES = [
    "N = New game   L = Load game   ESC = Quit",
    "J = Sword hit  B = Bash  R = Bow hit  F = Spell",
    "P = Power attack (cash out)",
]


class SandboxApp:
    """
    Minimal window: the chain so far, the last cashout and player bars.
    """

    def __init__(self, plugin: GambitPlugin, host: SandboxHost):
        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(SANDBOX_TITLE)

        self.clock = pygame.time.Clock()
        self.running = True

        self.plugin = plugin
        self.host = host
        self.input_handler = InputHandler()

        self.title_font = pygame.font.Font(None, 48)
        self.chain_font = pygame.font.Font(None, 72)
        self.label_font = pygame.font.Font(None, 26)

    def run(self):
        """Main loop"""
        while self.running:
            self.clock.tick(FPS)

            self.input_handler.update()
            for event in pygame.event.get():
                self.input_handler.process_event(event)

            if self.input_handler.should_quit():
                self.running = False
                continue

            applied = self.input_handler.apply_to_host(self.host)
            if applied:
                logger.debug("Sandbox input: %s", ", ".join(applied))

            self._render()
            pygame.display.flip()

        pygame.quit()

    def _render(self):
        self.screen.fill(UI_BG)
        self._blit(self.title_font, SANDBOX_TITLE, (20, 20), GOLD)

        player = self.host.player()
        if player is None:
            self._blit(self.label_font, "Press N or L to start a session", (20, 90), GRAY)
        else:
            self._render_bar("Health", player.health, player.max_health, (20, 90), RED)
            self._render_bar("Stamina", player.stamina, player.max_stamina, (20, 120), STAMINA_GOLD)

        self._render_chain((20, 170))

        result = self.plugin.dispatcher.last_result
        if result is not None:
            text = f"Last cashout: {result.combo_id} {result.name or '(unmapped)'}"
            if result.rule is not None:
                text += f" (tier {result.rule.tier})"
            self._blit(self.label_font, text, (20, 260), GREEN if result.fired else GRAY)

        for i, line in enumerate(HELP_LINES):
            self._blit(self.label_font, line, (20, SCREEN_HEIGHT - 90 + i * 26), GRAY)

    def _render_chain(self, pos: Tuple[int, int]):
        """One slot per possible token, A for normal and B for bash"""
        x, y = pos
        tokens = self.plugin.store.sequence
        for i in range(MAX_COMBO_LENGTH):
            if i < len(tokens):
                letter = "A" if tokens[i] is ComboToken.NORMAL else "B"
                color = WHITE
            else:
                letter = "_"
                color = GRAY
            self._blit(self.chain_font, letter, (x + i * 56, y), color)

    def _render_bar(self, label: str, value: float, maximum: float,
                    pos: Tuple[int, int], color):
        x, y = pos
        width = 240
        fill = int(width * (value / maximum)) if maximum else 0
        pygame.draw.rect(self.screen, GRAY, (x + 90, y, width, 18), 1)
        pygame.draw.rect(self.screen, color, (x + 90, y, fill, 18))
        self._blit(self.label_font, label, (x, y), WHITE)

    def _blit(self, font: pygame.font.Font, text: str, pos: Tuple[int, int], color):
        self.screen.blit(font.render(text, True, color), pos)
