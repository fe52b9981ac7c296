# lenia_sim/sim/config.py
from dataclasses import dataclass

# ------------------------------------------------------------
# FIELD KERNELS (per-creature defaults)
# ------------------------------------------------------------
@dataclass(frozen=True)
class FieldConfig:
    # potential (attraction) kernel over distance
    mu_k: float = 4.0
    sigma_k: float = 1.0
    w_k: float = 0.022
    # growth kernel over accumulated potential (weight is always 1.0)
    mu_g: float = 0.6
    sigma_g: float = 0.15
    # short-range repulsion
    c_rep: float = 1.0

# ------------------------------------------------------------
# INTEGRATION
# ------------------------------------------------------------
@dataclass(frozen=True)
class IntegratorConfig:
    step_size: float = 0.1

# ------------------------------------------------------------
# SCENE SETUP (consumed by World spawning, not by the solver)
# ------------------------------------------------------------
@dataclass(frozen=False)  # mutable so CLI/UI can resize the scene between runs
class SceneConfig:
    n_creatures: int = 1
    n_particles: int = 199
    spawn_radius: float = 10.0
    creature_spacing: float = 40.0   # distance between creature centres along x

# ------------------------------------------------------------
# PRESENTATION
# ------------------------------------------------------------
@dataclass(frozen=False)
class RenderConfig:
    pixels_per_unit: float = 24.0    # camera projection scale 1/24
    radius_scale: float = 5.0        # display radius = c_rep / (R_val * radius_scale)
    min_radius_r_val: float = 1e-6   # below this |R_val| the fallback radius is used
    fallback_radius: float = 0.5
    particle_color: tuple = (255, 255, 255)

# ------------------------------------------------------------
# HEADLESS SETTINGS
# ------------------------------------------------------------
@dataclass(frozen=False)
class SimConfig:
    seed: int = 42
    steps: int = 2000
    solver: str = "python"           # "python" | "numpy"
    track_csv: str | None = "runs/summary.csv"
    log_every: int = 100
    enable_plot: bool = False
    plot_path: str = "runs/snapshot.png"

# ------------------------------------------------------------
# EXPORT SINGLETONS
# ------------------------------------------------------------
FIELDS = FieldConfig()
INTEGRATOR = IntegratorConfig()
SCENE = SceneConfig()
RENDER = RenderConfig()
SIM = SimConfig()
