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
    run("python -m eightpuzzle.experiments.runner instances/p8.txt --algo both --max_depth 50 --reference --out results/p8_both.csv")
    run("python -m eightpuzzle.experiments.runner instances/p8.txt --algo astar --tie_break fifo --out results/p8_astar_fifo.csv")
    run("python -m eightpuzzle.experiments.summarize results/p8_*.csv --out results/summary.csv")

if __name__ == "__main__":
    main()
