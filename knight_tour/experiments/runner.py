from __future__ import annotations
import argparse, csv
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from knight_tour.config import DEFAULT_RESULTS, MAX_GRID, MIN_GRID
from knight_tour.domains.board import symmetric_starts
from knight_tour.domains.moves import MoveTable, build_move_table
from knight_tour.logging_utils import get_logger
from knight_tour.search.backtrack import TourSearch
from knight_tour.search.validate import PathError

logger = get_logger()

HEADER = [
    "algorithm", "grid", "start", "paths", "dead_ends",
    "time_sec", "termination", "first_path",
]

@dataclass
class Instance:
    grid: int
    path: List[int]

def make_instances(grids: List[int], starts: Optional[List[int]]) -> List[Instance]:
    """Explicit starts apply to every grid; by default one start per symmetry class."""
    out: List[Instance] = []
    for g in grids:
        if not MIN_GRID <= g <= MAX_GRID:
            raise ValueError(f"grid {g} out of range {MIN_GRID}-{MAX_GRID}")
        for s in (starts if starts is not None else symmetric_starts(g)):
            out.append(Instance(grid=g, path=[s]))
    return out

def write_row(w, res):
    first = res.get("first_path")
    w.writerow([
        res.get("algorithm", ""), res.get("grid", ""), res.get("start", ""),
        res.get("paths", ""), res.get("dead_ends", ""),
        f"{res.get('time', 0.0):.6f}", res.get("termination", ""),
        " ".join(str(s) for s in first) if first else "",
    ])

def run_instance(table: MoveTable, inst: Instance, max_paths: Optional[int], pinned: bool):
    try:
        engine = TourSearch(table, inst.path, pinned=pinned)
    except PathError as e:
        logger.warning("Skipping %s on %dx%d: %s", inst.path, inst.grid, inst.grid, e)
        return None
    return engine.run(max_paths=max_paths)

def main(argv=None):
    ap = argparse.ArgumentParser(description="Knight's tour backtracking experiment runner")
    ap.add_argument("--grids", type=int, nargs="+", default=[5, 6])
    ap.add_argument("--starts", type=int, nargs="+", default=None,
                    help="Start squares (default: one per symmetry class)")
    ap.add_argument("--max_paths", type=int, default=1,
                    help="Stop each run after this many tours; 0 means exhaust")
    ap.add_argument("--pin", action="store_true", help="Do not backtrack past the start path")
    ap.add_argument("--out", type=Path, default=DEFAULT_RESULTS)
    args = ap.parse_args(argv)

    max_paths = args.max_paths if args.max_paths > 0 else None
    insts = make_instances(args.grids, args.starts)
    args.out.parent.mkdir(parents=True, exist_ok=True)

    tables = {g: build_move_table(g) for g in sorted(set(args.grids))}
    done = 0
    with args.out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        for inst in insts:
            res = run_instance(tables[inst.grid], inst, max_paths, args.pin)
            if res is None:
                continue
            write_row(w, res)
            done += 1
            logger.info("grid=%d start=%s paths=%d dead_ends=%d (%s)",
                        inst.grid, inst.path[0], res["paths"], res["dead_ends"], res["termination"])

    print(f"Wrote {args.out} ({done} runs)")
    return 0

if __name__ == "__main__":
    main()
