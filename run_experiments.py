#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(cmd):
    print("Running:", cmd)
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("python -m knight_tour.experiments.runner --grids 5 --max_paths 0 --out results/exhaust_5.csv")
    run("python -m knight_tour.experiments.runner --grids 5 6 7 8 --max_paths 1 --out results/first_tour.csv")
    run("python -m knight_tour.experiments.summarize results/exhaust_5.csv results/first_tour.csv --out results/summary.csv")

if __name__ == "__main__":
    main()
