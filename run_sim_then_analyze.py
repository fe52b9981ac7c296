#!/usr/bin/env python3
"""
One-shot runner:
  1) Run the headless simulation (appends per-step rows to the summary CSV)
  2) Analyze only the session that run just produced

Usage:
  python run_sim_then_analyze.py --steps 1000 --outdir reports --tag demo
"""
import argparse
import subprocess
import sys
import os
import csv

def get_latest_session_id(summary_path: str) -> str | None:
    if not os.path.exists(summary_path):
        return None
    last_sid = None
    with open(summary_path, newline="") as f:
        for row in csv.DictReader(f):
            sid = row.get("session_id")
            if sid:
                last_sid = sid
    return last_sid

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--csv", default="runs/summary.csv")
    ap.add_argument("--steps", type=int, default=1000)
    ap.add_argument("--seed", type=int, default=42)
    ap.add_argument("--outdir", default="reports")
    ap.add_argument("--tag", default="")
    args, passthru = ap.parse_known_args()

    # 1) Run the simulation
    sim_cmd = [sys.executable, "-m", "lenia_sim.main",
               "--steps", str(args.steps), "--seed", str(args.seed), "--csv", args.csv, *passthru]
    print("[launcher] Starting run:", " ".join(sim_cmd))
    ret = subprocess.call(sim_cmd)
    if ret != 0:
        print(f"[launcher] Simulation exited with code {ret}", file=sys.stderr)
        sys.exit(ret)

    # 2) Resolve latest session_id
    sid = get_latest_session_id(args.csv)
    if not sid:
        print("[launcher] No session_id found in summary CSV; did the run write any rows?")
        sys.exit(0)

    # 3) Analyze only this session
    ana_cmd = [
        sys.executable, "analyze_run_csv.py",
        "--summary", args.csv,
        "--outdir", args.outdir,
        "--tag", args.tag,
        "--session", sid
    ]
    print("[launcher] Analyzing session:", sid)
    print("[launcher] Running:", " ".join(ana_cmd))
    sys.exit(subprocess.call(ana_cmd))

if __name__ == "__main__":
    main()
