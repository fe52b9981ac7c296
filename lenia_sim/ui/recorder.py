# lenia_sim/ui/recorder.py
from __future__ import annotations
import os, time
from typing import Optional
import numpy as np

class Recorder:
    """
    Capture snapshots every `stride_steps` frames for offline playback (NPZ).
    Stores: particle positions, R_val (for marker sizes), creature ids, step index.
    """
    def __init__(self, enabled=False, stride_steps=2, step_size=0.1):
        self.enabled = enabled
        self.stride_steps = max(1, int(stride_steps))
        self.step_size = float(step_size)
        self._tstep = 0
        self.pos_list = []
        self.r_val_list = []
        self.step_list = []
        self.creature_ids = None

    def toggle(self): self.enabled = not self.enabled; print(f"[Recorder] {'ON' if self.enabled else 'OFF'}")
    def clear(self):
        self._tstep = 0
        self.pos_list.clear(); self.r_val_list.clear(); self.step_list.clear()
        self.creature_ids = None
        print("[Recorder] cleared")

    def maybe_capture(self, live):
        if not self.enabled: return
        self._tstep += 1
        if (self._tstep % self.stride_steps) != 0: return

        ps = list(live.world.particles())
        N = len(ps)
        pos = np.zeros((N, 2), np.float32)
        r_val = np.zeros((N,), np.float32)
        for i, p in enumerate(ps):
            pos[i] = (p.x, p.y)
            r_val[i] = p.fields.R_val
        # particle count is fixed for a run; a reseed must clear() first
        if self.creature_ids is None:
            self.creature_ids = np.array([p.creature_id for p in ps], np.int32)
        elif len(self.creature_ids) != N:
            raise ValueError(f"particle count changed mid-recording ({len(self.creature_ids)} -> {N}); clear() first")

        self.pos_list.append(pos)
        self.r_val_list.append(r_val)
        self.step_list.append(live.step_count)

    def save_npz(self, out_path: Optional[str]=None):
        if not self.pos_list:
            print("[Recorder] nothing to save"); return None

        if out_path is None:
            stamp = time.strftime("%Y%m%d_%H%M%S")
            out_path = os.path.join("recordings", f"lenia_run_{stamp}.npz")
        folder = os.path.dirname(out_path)
        if folder:
            os.makedirs(folder, exist_ok=True)

        T = len(self.pos_list)
        np.savez_compressed(
            out_path,
            step_size=np.float32(self.step_size),
            stride_steps=np.int32(self.stride_steps),
            pos=np.stack(self.pos_list),
            r_val=np.stack(self.r_val_list),
            step=np.array(self.step_list, np.int32),
            creature_id=self.creature_ids,
        )
        print(f"[Recorder] saved: {out_path} (T={T}, N={len(self.creature_ids)})")
        return out_path
