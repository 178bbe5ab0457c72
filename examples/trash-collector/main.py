"""Trash Collector - timed click-the-highlighted-item minigame with pygame.

Controls:
  M           Open the minigame popup
  Left-click  Start / Close buttons, collect the highlighted item
  Escape      Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from tick_minigame import (
    CatalogSpawner,
    ConfigError,
    RoundDriver,
    RoundManager,
    RoundStatus,
    SelectOutcome,
)

from game.catalog import CATALOG, load_config
from game.picking import bob_offset, pick_item
from ui.constants import BACKGROUND, FPS, SCREEN_H, SCREEN_W, TPS
from ui.hud import Hud
from ui.popup import Popup
from ui.renderer import draw_items

log = logging.getLogger("trash-collector")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Trash Collector - tick-minigame demo")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--config", type=str, default=None, metavar="FILE",
                   help="JSON file with round settings")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    try:
        config = load_config(args.config)
        config.validate()
    except ConfigError as exc:
        print(f"Invalid round settings: {exc}", file=sys.stderr)
        sys.exit(2)

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Trash Collector")
    clock = pygame.time.Clock()

    manager = RoundManager(spawner=CatalogSpawner(CATALOG), seed=args.seed)
    driver = RoundDriver(manager, step=1.0 / TPS)
    popup = Popup()
    hud = Hud()
    log.info("seed=%d", manager.seed)

    def on_end(mgr: RoundManager, status: RoundStatus) -> None:
        popup.show_end(status, mgr.summarize(), mgr.collected, mgr.target_count)

    manager.on_end(on_end)

    t = 0.0
    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0
        t += dt

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_m:
                    popup.open()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                action = popup.click(event.pos)
                if action == "start" and popup.begin():
                    driver.start(config)
                elif action == "close":
                    popup.close()
                elif popup.playing and manager.status is RoundStatus.RUNNING:
                    hit = pick_item(
                        manager.live_items, event.pos, config.bounds, manager.current_target,
                        bob=bob_offset(t),
                    )
                    if hit is not None:
                        driver.enqueue_select(hit)

        # --- Fixed-rate round steps ---
        for identity, outcome in driver.advance(dt):
            if outcome is SelectOutcome.IGNORED:
                log.debug("click on %r ignored", identity)

        # --- Render ---
        screen.fill(BACKGROUND)
        mouse = pygame.mouse.get_pos()
        popup.draw(screen, mouse)
        if popup.is_open and popup.playing:
            draw_items(screen, manager.live_items, config.bounds, manager.current_target, t)
            hud.draw(screen, manager)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
