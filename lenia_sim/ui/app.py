# lenia_sim/ui/app.py
from __future__ import annotations
import pygame, random
from .renderer import Renderer, BG_COLOR
from .recorder import Recorder
from ..sim.live import LiveSim
from ..sim.config import INTEGRATOR, SCENE, SIM

def run_ui(seed: int = SIM.seed, solver: str = SIM.solver):
    pygame.init()
    pygame.display.set_caption("Particle Lenia (live)")
    W, H = 1280, 720
    screen = pygame.display.set_mode((W, H), pygame.RESIZABLE)
    clock = pygame.time.Clock()

    live = LiveSim(seed=seed, n_creatures=SCENE.n_creatures, n_particles=SCENE.n_particles, solver=solver)
    renderer = Renderer(screen)
    recorder = Recorder(enabled=False, stride_steps=2, step_size=INTEGRATOR.step_size)

    paused = False
    sim_speed = 1  # steps/frame
    running = True

    while running:
        clock.tick(60)

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            elif e.type == pygame.VIDEORESIZE:
                screen = pygame.display.set_mode(e.size, pygame.RESIZABLE)
                renderer.screen = screen
            elif e.type == pygame.KEYDOWN:
                if e.key == pygame.K_ESCAPE: running = False
                elif e.key == pygame.K_SPACE: paused = not paused
                elif e.key == pygame.K_r:
                    live.reset(random.randint(0, 1_000_000))
                    recorder.clear()
                    paused = False
                elif e.key == pygame.K_LEFTBRACKET:
                    sim_speed = max(1, sim_speed - 1)
                elif e.key == pygame.K_RIGHTBRACKET:
                    sim_speed = min(20, sim_speed + 1)
                elif e.key == pygame.K_v: recorder.toggle()
                elif e.key == pygame.K_c: recorder.clear()
                elif e.key == pygame.K_s: recorder.save_npz()
                elif e.key == pygame.K_h: renderer.show_hud = not renderer.show_hud

        if not paused:
            for _ in range(sim_speed):
                live.step()
            recorder.maybe_capture(live)

        screen.fill(BG_COLOR)
        renderer.draw_world(live)
        renderer.draw_hud(live, sim_speed, paused, recorder.enabled)
        pygame.display.flip()

    pygame.quit()
