#!/usr/bin/env python3
"""
Analyze the per-step summary CSV written by `python -m lenia_sim.main`.

Features:
  - --session latest|<id> filters to a single run (rows from every run share one file)
  - Saves a cleaned CSV export and one PNG with three panels under --outdir:
      (1) mean / min R_val
      (2) mean / max U_val
      (3) mean |E_grad| and creature spread
Usage:
  python analyze_run_csv.py --summary runs/summary.csv --outdir reports --tag demo --session latest
"""
import argparse
import os
import sys
import time
import pandas as pd

# Use non-interactive backend for headless operation
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

NUMERIC = ("step", "n", "mean_r_val", "min_r_val", "mean_u_val", "max_u_val",
           "mean_e_grad", "spread", "centroid_x", "centroid_y")


# ------------------------- utilities -------------------------
def ensure_dir(p: str) -> None:
    os.makedirs(p, exist_ok=True)

def timestamp(tag: str | None = None) -> str:
    t = time.strftime("%Y%m%d_%H%M%S")
    return f"{t}__{tag}" if tag else t


# ------------------------- loading ---------------------------
def load_summary(path: str) -> pd.DataFrame:
    if not (path and os.path.exists(path)):
        print(
            "\n[ERROR] Summary CSV not found.\n"
            f"  Expected: {path}\n"
            "Hints:\n"
            "  • Run `python -m lenia_sim.main` first (CSV output is on by default).\n"
            "  • Check that --csv on the run matches --summary here.\n",
            file=sys.stderr
        )
        sys.exit(1)
    return pd.read_csv(path)

def latest_session_id(df: pd.DataFrame) -> str | None:
    """Return the last session_id in file order (used by --session latest)."""
    if "session_id" not in df.columns or len(df) == 0:
        return None
    s = df["session_id"].dropna()
    return str(s.iloc[-1]) if len(s) else None

def clean_summary(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    for col in NUMERIC:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce")
    # several sessions in one frame: average them per step
    if "session_id" in df.columns and df["session_id"].nunique() > 1:
        keep = [c for c in NUMERIC if c in df.columns and c != "step"]
        return df.groupby("step", as_index=False)[keep].mean().sort_values("step")
    return df.sort_values("step") if "step" in df.columns else df


# ------------------------- plotting --------------------------
def plot_summary(df: pd.DataFrame, outdir: str, tag: str | None) -> str:
    ensure_dir(outdir)
    fig, ax = plt.subplots(3, 1, figsize=(10, 11), sharex=True)

    # (1) repulsion
    if "mean_r_val" in df.columns:
        ax[0].plot(df["step"], df["mean_r_val"], label="mean R", color="black", linewidth=2.0)
    if "min_r_val" in df.columns:
        ax[0].plot(df["step"], df["min_r_val"], label="min R", linewidth=1.4)
    ax[0].set_ylabel("R_val")
    ax[0].legend(loc="best")
    ax[0].grid(alpha=0.25)

    # (2) potential
    if "mean_u_val" in df.columns:
        ax[1].plot(df["step"], df["mean_u_val"], label="mean U")
    if "max_u_val" in df.columns:
        ax[1].plot(df["step"], df["max_u_val"], label="max U")
    ax[1].set_ylabel("U_val")
    ax[1].legend(loc="best")
    ax[1].grid(alpha=0.25)

    # (3) motion
    if "mean_e_grad" in df.columns:
        ax[2].plot(df["step"], df["mean_e_grad"], color="tab:purple", label="mean |E_grad|")
    ax[2].set_xlabel("Step")
    ax[2].set_ylabel("|E_grad|")
    ax[2].grid(alpha=0.25)
    if "spread" in df.columns:
        twin = ax[2].twinx()
        twin.plot(df["step"], df["spread"], color="tab:orange", label="spread")
        twin.set_ylabel("RMS spread")
        twin.legend(loc="upper right")
    ax[2].legend(loc="upper left")

    fig.tight_layout()
    png = os.path.join(outdir, f"run_trends_{timestamp(tag)}.png")
    fig.savefig(png, dpi=160)
    plt.close(fig)
    print(f"[OK] Saved {png}")
    return png

def export_csv(df: pd.DataFrame, outdir: str, base: str, tag: str | None) -> str:
    ensure_dir(outdir)
    path = os.path.join(outdir, f"{base}_{timestamp(tag)}.csv")
    df.to_csv(path, index=False)
    print(f"[OK] Wrote {path}")
    return path


# ------------------------- main ------------------------------
def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--summary", type=str, default="runs/summary.csv",
                    help="Path to the per-step summary CSV written by the simulation")
    ap.add_argument("--outdir", type=str, default="reports",
                    help="Output directory for plots and exported CSVs")
    ap.add_argument("--tag", type=str, default="",
                    help="Optional label to append to filenames")
    ap.add_argument("--session", type=str, default="",
                    help="Session ID to analyze; use 'latest' to pick the most recent session automatically.")
    args = ap.parse_args()

    raw = load_summary(args.summary)
    df = raw.copy()

    if args.session:
        if "session_id" not in df.columns:
            print("[WARN] --session provided but CSV has no session_id; ignoring.")
        else:
            sid = latest_session_id(raw) if args.session == "latest" else args.session
            if sid:
                df = df[df["session_id"].astype(str) == sid].copy()
                print(f"[OK] Filtering analysis to session_id={sid}")
            else:
                print("[WARN] Could not resolve latest session_id; analyzing all data.")

    print(f"[INFO] Rows after filter: {len(df)}")
    if len(df) == 0:
        print("[WARN] Nothing to analyze.")
        return

    clean = clean_summary(df)
    export_csv(clean, args.outdir, base="run_summary", tag=(args.tag or None))
    plot_summary(clean, args.outdir, tag=(args.tag or None))

    print(f"\nDone. Outputs are in: {args.outdir}")

if __name__ == "__main__":
    main()
