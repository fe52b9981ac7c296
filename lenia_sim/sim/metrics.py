# lenia_sim/sim/metrics.py
from __future__ import annotations
from typing import Dict
import os
import csv

from .models import vlen
from .world import World

def summarize_step(step: int, world: World, session_id: str = "") -> Dict[str, float]:
    ps = list(world.particles())
    n = len(ps)
    if n == 0:
        nan = float("nan")
        return dict(session_id=session_id, step=step, n=0,
                    mean_r_val=nan, min_r_val=nan, mean_u_val=nan, max_u_val=nan,
                    mean_e_grad=nan, spread=nan, centroid_x=nan, centroid_y=nan)
    cx = sum(p.x for p in ps) / n
    cy = sum(p.y for p in ps) / n
    spread = (sum((p.x - cx) ** 2 + (p.y - cy) ** 2 for p in ps) / n) ** 0.5
    return dict(
        session_id=session_id, step=step, n=n,
        mean_r_val=sum(p.fields.R_val for p in ps) / n,
        min_r_val=min(p.fields.R_val for p in ps),
        mean_u_val=sum(p.fields.U_val for p in ps) / n,
        max_u_val=max(p.fields.U_val for p in ps),
        mean_e_grad=sum(vlen(p.fields.E_grad) for p in ps) / n,
        spread=spread, centroid_x=cx, centroid_y=cy,
    )

def append_csv(path: str, row: Dict[str, float]) -> None:
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    write_header = not os.path.exists(path)
    with open(path, "a", newline="") as f:
        w = csv.DictWriter(f, fieldnames=list(row.keys()))
        if write_header:
            w.writeheader()
        w.writerow(row)
