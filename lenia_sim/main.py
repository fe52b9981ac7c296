# lenia_sim/main.py
from __future__ import annotations
import argparse
import logging
import uuid

from .sim.config import INTEGRATOR, SCENE, SIM
from .sim.engine import SOLVERS, step_world
from .sim.live import build_world
from .sim.metrics import summarize_step, append_csv

def run():
    parser = argparse.ArgumentParser(description="Particle Lenia: a particle creature driven by repulsion, potential and growth fields")
    parser.add_argument("--steps", type=int, default=SIM.steps)
    parser.add_argument("--seed", type=int, default=SIM.seed)
    parser.add_argument("--particles", type=int, default=SCENE.n_particles)
    parser.add_argument("--creatures", type=int, default=SCENE.n_creatures)
    parser.add_argument("--solver", choices=sorted(SOLVERS), default=SIM.solver)
    parser.add_argument("--csv", type=str, default=SIM.track_csv, help="per-step summary CSV ('' to disable)")
    parser.add_argument("--log-every", type=int, default=SIM.log_every)
    parser.add_argument("--plot", action="store_true", default=SIM.enable_plot, help="save a final snapshot PNG")
    parser.add_argument("--plot-path", type=str, default=SIM.plot_path)
    parser.add_argument("--ui", action="store_true", help="launch real-time UI")
    parser.add_argument("--verbose", action="store_true", help="debug logging from the solver")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")

    SCENE.n_particles = args.particles
    SCENE.n_creatures = args.creatures

    if args.ui:
        from .ui.app import run_ui
        run_ui(seed=args.seed, solver=args.solver)
        return

    world = build_world(args.seed, args.creatures, args.particles)
    session_id = uuid.uuid4().hex[:8]
    every = max(1, args.log_every)
    print(f"[run] session={session_id} creatures={args.creatures} particles={args.particles} "
          f"solver={args.solver} steps={args.steps}")

    for step in range(1, args.steps + 1):
        coincident = step_world(world, INTEGRATOR.step_size, args.solver)
        if step % every != 0 and step != args.steps:
            continue
        summary = summarize_step(step, world, session_id)
        print(
            f"Step {step:5d} | N={summary['n']:4d} "
            f"R={summary['mean_r_val']:.3f} (min {summary['min_r_val']:.3f}) "
            f"U={summary['mean_u_val']:.3f} (max {summary['max_u_val']:.3f}) "
            f"|E'|={summary['mean_e_grad']:.4f} spread={summary['spread']:.2f}"
            + (f" coincident={coincident}" if coincident else "")
        )
        if args.csv:
            append_csv(args.csv, summary)

    if args.plot:
        from .sim.visualize import snapshot
        snapshot(world, title=f"Step {args.steps} (seed {args.seed})", out_path=args.plot_path)

if __name__ == "__main__":
    run()
