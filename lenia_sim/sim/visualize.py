# lenia_sim/sim/visualize.py
from __future__ import annotations
from typing import Optional
import os

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from .config import RENDER
from .world import World
from ..ui.markers import display_radius

def snapshot(world: World, title: str = "", out_path: Optional[str] = None) -> Optional[str]:
    """Scatter of all particles, marker area following the display radius. Saves a PNG if out_path is given."""
    fig, ax = plt.subplots(figsize=(6, 6))
    ax.set_facecolor("black")
    ax.set_aspect("equal")
    for c in world.creatures.values():
        xs = [p.x for p in c.particles]
        ys = [p.y for p in c.particles]
        sizes = [(8.0 * display_radius(c.params.c_rep, p.fields.R_val)) ** 2 for p in c.particles]
        ax.scatter(xs, ys, s=sizes, c="white", alpha=0.8, edgecolors="none", label=f"Creature {c.id}")
    ax.set_title(title or "Snapshot")
    fig.tight_layout()
    if out_path:
        folder = os.path.dirname(out_path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        fig.savefig(out_path, dpi=RENDER.pixels_per_unit * 5)
        plt.close(fig)
        print(f"[OK] Saved {out_path}")
        return out_path
    plt.show()
    return None
