from __future__ import annotations
import argparse
import sys
from typing import Dict, Tuple

try:
    import pygame  # type: ignore
except Exception:
    pygame = None

from config import (
    DAY_LENGTH_SECONDS,
    PHASE_DAY_ENDED,
    PHASE_IDLE,
    PHASE_ORDER_ACTIVE,
    TICK_INTERVAL,
)
from game import BakerySim
from game.autoplay import AutoPlayer
from game.text import format_clock

WIDTH = 960
HEIGHT = 640
BIN_W = 170
BIN_H = 86
CHIP = 30
DIGIT_KEYS = "0123456789"


def run_headless(days: int, seed: int, skill: float, day_length: int, dt: float = TICK_INTERVAL) -> BakerySim:
    if dt <= 0:
        raise ValueError("dt must be positive")
    sim = BakerySim(seed=seed, day_length=day_length)
    player = AutoPlayer(sim, skill=skill, seed=seed + 1)

    for day in range(1, days + 1):
        sim.start_day(day)
        while sim.phase != PHASE_DAY_ENDED:
            player.step()
            sim.tick(dt)
        s = sim.summary()
        print(
            f"day_done day={s.day} served={s.served} "
            f"tiers[perfect={s.perfect},ok={s.ok},failed={s.failed},timed_out={s.timed_out}]"
            f" coins={s.coins}"
        )
    return sim


class GameUI:
    def __init__(self, sim: BakerySim):
        if pygame is None:
            raise RuntimeError("pygame is required for graphical mode. Relaunch with --headless.")
        pygame.init()
        try:
            pygame.display.init()
        except pygame.error as exc:
            raise RuntimeError(f"Display subsystem is unavailable ({exc}). Relaunch with --headless.") from exc
        if not pygame.display.get_init():
            raise RuntimeError("Display subsystem is unavailable. Relaunch with --headless.")
        self.sim = sim
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Candy Bakery")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("arial", 24)
        self.small = pygame.font.SysFont("arial", 17)
        self.running = True
        self.bin_rects: Dict[str, pygame.Rect] = {}

        self.palette = {
            "bg": (255, 244, 236),
            "panel": (255, 228, 214),
            "panel_border": (214, 160, 150),
            "text": (72, 40, 48),
            "muted": (150, 112, 118),
            "bar": (246, 112, 146),
            "bar_bg": (236, 210, 206),
        }

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def handle_input(self) -> None:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                self.running = False
            if ev.type == pygame.KEYDOWN:
                self._handle_key(ev)
            if ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
                for key, rect in self.bin_rects.items():
                    if rect.collidepoint(ev.pos):
                        self.sim.add_to_tray(key)

    def _handle_key(self, ev) -> None:
        phase = self.sim.phase
        if phase == PHASE_IDLE:
            if ev.key in (pygame.K_RETURN, pygame.K_SPACE):
                self.sim.start_day()
            return
        if phase == PHASE_DAY_ENDED:
            if ev.key in (pygame.K_RETURN, pygame.K_n):
                self.sim.next_day()
            elif ev.key == pygame.K_r:
                self.sim.restart()
            return
        if ev.key == pygame.K_RETURN:
            self.sim.serve()
        elif ev.key == pygame.K_BACKSPACE:
            self.sim.undo_last()
        elif ev.key == pygame.K_c:
            self.sim.clear_tray()
        elif len(ev.unicode or "") == 1 and ev.unicode in DIGIT_KEYS:
            # 1-9 pick the first nine bins, 0 the tenth
            idx = (int(ev.unicode) - 1) % 10
            keys = self.sim.candy_keys
            if idx < len(keys):
                self.sim.add_to_tray(keys[idx])

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def _text(self, text: str, pos: Tuple[int, int], *, small: bool = False, color=None) -> None:
        font = self.small if small else self.font
        self.screen.blit(font.render(text, True, color or self.palette["text"]), pos)

    def _chip(self, key: str, center: Tuple[int, int], radius: int) -> None:
        color = tuple(self.sim.candies[key].get("color", (200, 200, 200)))
        pygame.draw.circle(self.screen, (255, 255, 255), center, radius + 2)
        pygame.draw.circle(self.screen, color, center, radius)

    def draw_hud(self) -> None:
        self._text(f"Day {self.sim.day}", (20, 16))
        self._text(f"Time {format_clock(self.sim.time_left)}", (160, 16))
        self._text(f"Coins {self.sim.state.coins}", (330, 16))

    def draw_order(self) -> None:
        panel = pygame.Rect(20, 56, WIDTH - 40, 96)
        pygame.draw.rect(self.screen, self.palette["panel"], panel, border_radius=12)
        pygame.draw.rect(self.screen, self.palette["panel_border"], panel, width=2, border_radius=12)
        if self.sim.order is None:
            self._text("Next customer is on the way...", (36, 72), color=self.palette["muted"])
        else:
            self._text(self.sim.order_text(), (36, 72))
        bar_bg = pygame.Rect(36, 114, panel.w - 32, 18)
        pygame.draw.rect(self.screen, self.palette["bar_bg"], bar_bg, border_radius=9)
        fill = pygame.Rect(bar_bg.x, bar_bg.y, int(bar_bg.w * self.sim.patience_fraction), bar_bg.h)
        pygame.draw.rect(self.screen, self.palette["bar"], fill, border_radius=9)

    def draw_bins(self) -> None:
        self.bin_rects = {}
        for idx, (key, candy) in enumerate(self.sim.candies.items()):
            col, row = idx % 5, idx // 5
            rect = pygame.Rect(20 + col * (BIN_W + 12), 170 + row * (BIN_H + 12), BIN_W, BIN_H)
            self.bin_rects[key] = rect
            pygame.draw.rect(self.screen, (255, 255, 255), rect, border_radius=10)
            pygame.draw.rect(self.screen, self.palette["panel_border"], rect, width=1, border_radius=10)
            self._chip(key, (rect.x + 26, rect.centery), 16)
            self._text(str(candy.get("display_name", key)), (rect.x + 50, rect.y + 22), small=True)
            self._text(f"[{(idx + 1) % 10}]", (rect.x + 50, rect.y + 46), small=True, color=self.palette["muted"])

    def draw_tray(self) -> None:
        tray = pygame.Rect(20, 390, WIDTH - 40, 90)
        pygame.draw.rect(self.screen, self.palette["panel"], tray, border_radius=12)
        for idx, key in enumerate(self.sim.tray_contents):
            self._chip(key, (tray.x + 30 + idx * (CHIP + 40), tray.centery), CHIP // 2 + 4)
        self._text(
            f"Tray {len(self.sim.tray_contents)}/{self.sim.tray.capacity}  "
            "(Enter serve, Backspace undo, C clear)",
            (20, 490),
            small=True,
            color=self.palette["muted"],
        )
        self._text(self.sim.last_message, (20, 520))

    def draw_summary(self) -> None:
        s = self.sim.summary()
        lines = [
            f"Day {s.day} is over!",
            f"Customers served: {s.served}",
            f"Perfect: {s.perfect}   Pretty good: {s.ok}   Failed: {s.failed}",
            f"Walked out: {s.timed_out}",
            f"Coins earned: {s.coins}",
            "Enter / N for the next day, R to restart",
        ]
        for idx, line in enumerate(lines):
            self._text(line, (WIDTH // 2 - 220, 160 + idx * 44))

    def draw(self) -> None:
        self.screen.fill(self.palette["bg"])
        if self.sim.phase == PHASE_IDLE:
            self._text("Candy Bakery", (WIDTH // 2 - 80, HEIGHT // 2 - 60))
            self._text("Press Enter to open the shop", (WIDTH // 2 - 150, HEIGHT // 2))
        elif self.sim.phase == PHASE_DAY_ENDED:
            self.draw_summary()
        else:
            self.draw_hud()
            self.draw_order()
            self.draw_bins()
            self.draw_tray()
            if self.sim.phase != PHASE_ORDER_ACTIVE:
                self.bin_rects = {}
        pygame.display.flip()

    def run(self) -> None:
        while self.running:
            dt = self.clock.tick(60) / 1000.0
            self.handle_input()
            self.sim.tick(dt)
            self.draw()
        pygame.quit()


def main() -> None:
    parser = argparse.ArgumentParser(description="Candy Bakery order-rush game")
    parser.add_argument("--headless", action="store_true", help="let a scripted shopkeeper play without graphics")
    parser.add_argument("--days", type=int, default=3, help="headless days to play")
    parser.add_argument("--seed", type=int, default=7, help="random seed for customer orders")
    parser.add_argument("--skill", type=float, default=0.8, help="headless chance of assembling a perfect tray")
    parser.add_argument("--day-length", type=int, default=DAY_LENGTH_SECONDS, help="seconds per shop day")
    parser.add_argument("--dt", type=float, default=TICK_INTERVAL, help="headless timestep")
    args = parser.parse_args()
    if args.days < 1:
        parser.error("--days must be at least 1")
    if args.day_length < 1:
        parser.error("--day-length must be at least 1")
    if args.dt <= 0:
        parser.error("--dt must be positive")

    if args.headless:
        run_headless(args.days, args.seed, args.skill, args.day_length, args.dt)
        return

    sim = BakerySim(seed=args.seed, day_length=args.day_length)
    try:
        ui = GameUI(sim)
    except RuntimeError as exc:
        print(f"Startup error: {exc}", file=sys.stderr)
        sys.exit(1)
    ui.run()


if __name__ == "__main__":
    main()
