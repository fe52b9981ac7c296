# lenia_sim/ui/renderer.py
from __future__ import annotations
import pygame
from ..sim.config import RENDER
from .markers import display_radius

# ---------- Colors / Theme ----------
BG_COLOR     = (0, 0, 0)
GRID_COLOR   = (22, 24, 30)
AXIS_COLOR   = (45, 50, 60)
HUD_COLOR    = (225, 225, 235)
HUD_DIM      = (150, 155, 165)

# ---------- Layout knobs ----------
HUD_PAD_X    = 12
HUD_PAD_Y    = 10
GRID_SPACING = 5.0          # world units between grid lines
MIN_PIXELS   = 1            # never draw a particle smaller than this

class Renderer:
    def __init__(self, screen, font_name="Menlo"):
        self.screen = screen
        self.pixels_per_unit = RENDER.pixels_per_unit
        self.font = pygame.font.SysFont(font_name, 14)
        self.show_hud = True
        self.show_grid = True

    # ---------- coordinate helpers ----------
    def world_to_screen(self, x, y):
        # camera fixed on the origin, +y pointing up
        w, h = self.screen.get_size()
        sx = w * 0.5 + x * self.pixels_per_unit
        sy = h * 0.5 - y * self.pixels_per_unit
        return int(sx), int(sy)

    # ---------- grid ----------
    def _draw_grid(self):
        w, h = self.screen.get_size()
        step = GRID_SPACING * self.pixels_per_unit
        if step < 4:
            return
        cx, cy = self.world_to_screen(0.0, 0.0)
        k0 = -int(cx // step) - 1
        for k in range(k0, k0 + int(w // step) + 3):
            sx = int(cx + k * step)
            pygame.draw.line(self.screen, AXIS_COLOR if k == 0 else GRID_COLOR, (sx, 0), (sx, h), 1)
        k0 = -int(cy // step) - 1
        for k in range(k0, k0 + int(h // step) + 3):
            sy = int(cy + k * step)
            pygame.draw.line(self.screen, AXIS_COLOR if k == 0 else GRID_COLOR, (0, sy), (w, sy), 1)

    # ---------- world ----------
    def draw_world(self, live):
        if self.show_grid:
            self._draw_grid()
        for c in live.world.creatures.values():
            for p in c.particles:
                r = display_radius(c.params.c_rep, p.fields.R_val)
                rpx = max(MIN_PIXELS, int(r * self.pixels_per_unit))
                pygame.draw.circle(self.screen, RENDER.particle_color, self.world_to_screen(p.x, p.y), rpx)

    def draw_hud(self, live, sim_speed, paused, rec_enabled):
        if not self.show_hud:
            return
        stats = live.stat_means()
        lines = [
            f"Step: {live.step_count}  Seed: {live.seed}  Solver: {live.solver}",
            f"Creatures: {len(live.world.creatures)}  Particles: {stats['n']}  "
            f"Coincident pairs: {live.last_coincident}",
            f"mean R: {stats['mean_r_val']:.3f}  mean U: {stats['mean_u_val']:.3f}  "
            f"mean |E'|: {stats['mean_e_grad']:.4f}",
            f"Sim speed: {sim_speed} steps/frame  {'PAUSED' if paused else ''}  {'REC ON' if rec_enabled else 'REC OFF'}",
            "Controls:",
            " Space Pause   R Reseed   [ ] SimSpeed   V toggle record   C clear record   S save NPZ   H HUD   Esc quit",
        ]
        x = HUD_PAD_X
        y = HUD_PAD_Y
        for i, s in enumerate(lines):
            col = HUD_COLOR if i < 4 else HUD_DIM
            self.screen.blit(self.font.render(s, True, col), (x, y))
            y += 18
