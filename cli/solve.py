#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
solve.py
--------
Parse a maze, optionally print it, solve it with BFS and report the result.

Example:
  python -m cli.solve -i maze.txt -d -s -p
  python -m cli.solve -i maze.txt -s --start 0,0 --goal 4,7 --plot out/maze.png
"""

from __future__ import annotations
import argparse, contextlib, sys
from typing import Optional, Sequence, Tuple

from envs.parser import parse_maze
from envs.render import format_distance, pretty_print
from planners import get_planner
from planners.bfs import corner_endpoints


def _parse_cell(s: str) -> Tuple[int, int]:
    token = s.strip().replace(" ", "")
    try:
        r, c = token.split(",")
        return int(r), int(c)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Bad cell '{s}', expected like 0,0")


def _open_or_exit(path: str, mode: str):
    try:
        return open(path, mode)
    except OSError as e:
        print(f"[ERR] Cannot open '{path}': {e.strerror}", file=sys.stderr)
        raise SystemExit(1)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="mopsolver",
        description="Solve a 0/1 text maze with breadth-first search.")
    ap.add_argument("-d", dest="pretty", action="store_true", help="Pretty-print the parsed maze")
    ap.add_argument("-s", dest="shortest", action="store_true", help="Print the length of the shortest solution")
    ap.add_argument("-p", dest="optimal_path", action="store_true", help="Print the maze with the optimal path marked")
    ap.add_argument("-i", dest="infile", type=str, default=None, help="Input maze file (default: stdin)")
    ap.add_argument("-o", dest="outfile", type=str, default=None, help="Output file (default: stdout)")
    ap.add_argument("--start", type=_parse_cell, default=None, help="Start cell R,C (default: top-left corner)")
    ap.add_argument("--goal", type=_parse_cell, default=None, help="Goal cell R,C (default: bottom-right corner)")
    ap.add_argument("--plot", type=str, default=None, help="Save a PNG of the maze (and path, if solved)")
    ap.add_argument("--verbose", action="store_true", help="Print search statistics to stderr")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    with contextlib.ExitStack() as stack:
        infile = stack.enter_context(_open_or_exit(args.infile, "r")) if args.infile else sys.stdin
        outfile = stack.enter_context(_open_or_exit(args.outfile, "w")) if args.outfile else sys.stdout

        maze = parse_maze(infile)
        if args.verbose:
            print(f"[info] parsed {maze.rows}x{maze.columns} maze", file=sys.stderr)

        if args.pretty:
            pretty_print(maze, outfile)

        path = None
        start, goal = corner_endpoints(maze)
        start = args.start or start
        goal = args.goal or goal
        if args.shortest or args.optimal_path or args.plot:
            planner = get_planner("bfs")
            res = planner.search(maze, start, goal,
                                 want_path=bool(args.plot),
                                 annotate=args.optimal_path)
            path = res.path
            if args.verbose:
                print(f"[info] bfs {start}->{goal}: distance={res.distance} "
                      f"nodes={planner.nodes_created} time={planner.execution_time:.4f}s",
                      file=sys.stderr)
            if args.shortest:
                outfile.write(format_distance(res.distance) + "\n")
            if args.optimal_path:
                pretty_print(maze, outfile)

        if args.plot:
            from tools.plot_maze import save_maze_figure  # lazy: matplotlib is slow to import
            save_maze_figure(maze, args.plot, path=path, start=start, goal=goal)
            print(f"[OK] Saved: {args.plot}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
