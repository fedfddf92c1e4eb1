"""Main PyGame loop, scene manager, event dispatch."""

from __future__ import annotations
import asyncio
import sys
import pygame
from shared.constants import SCREEN_WIDTH, SCREEN_HEIGHT, FPS, TITLE
from client.scenes.battle_scene import BattleScene
from client.scenes.starter_select import StarterSelectScene
from client.settings import load_settings, update_settings


class App:
    """Main application: owns the window, the scenes and the game loop."""

    def __init__(self):
        pygame.init()
        settings = load_settings()
        self.fullscreen: bool = settings.get("fullscreen", False)
        self.screen = self._apply_display_mode()
        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()
        self.running = True

        self.scenes: dict = {"starter_select": StarterSelectScene(self)}
        self.current_scene = None
        self.set_scene("starter_select")

    def _apply_display_mode(self) -> pygame.Surface:
        flags = 0 if sys.platform == "emscripten" else pygame.SCALED
        if self.fullscreen:
            flags |= pygame.FULLSCREEN
        return pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), flags)

    def toggle_fullscreen(self):
        self.fullscreen = not self.fullscreen
        pygame.display.toggle_fullscreen()
        if sys.platform != "emscripten":
            update_settings({"fullscreen": self.fullscreen})

    def set_scene(self, scene_name: str):
        self.current_scene = self.scenes.get(scene_name)
        if hasattr(self.current_scene, "on_enter"):
            self.current_scene.on_enter()

    def start_battle(self, starter_id: str):
        old = self.scenes.pop("battle", None)
        if old is not None:
            old.leave()
        print(f"[app] Starting practice battle with {starter_id}")
        self.scenes["battle"] = BattleScene(self, starter_id)
        self.set_scene("battle")

    async def run(self):
        while self.running:
            dt = self.clock.tick(FPS) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                    break
                if event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
                    self.toggle_fullscreen()
                    continue
                if self.current_scene:
                    self.current_scene.handle_event(event)

            if self.current_scene:
                self.current_scene.update(dt)
                self.current_scene.render(self.screen)

            pygame.display.flip()
            await asyncio.sleep(0)

        battle = self.scenes.get("battle")
        if battle is not None:
            battle.leave()
        pygame.quit()
