import argparse
import collections
import csv
import logging
import os
import statistics
import time

# Optional plotting
try:
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    HAS_MPL = True
except ImportError:
    HAS_MPL = False

from maze_slider.errors import SearchTimeout
from maze_slider.maze import Maze

logger = logging.getLogger(__name__)

DEFAULT_RUNS = 10
DEFAULT_WIDTH = 25
DEFAULT_HEIGHT = 25
DEFAULT_OUT_DIR = "metrics_output"

METRICS = [
    "gen_sec",
    "solve_sec",
    "wall_count",
    "path_length",
    "move_count",
    "instruction_count",
    "compression",
]


def run_single(width, height, seed=None, max_expansions=None):
    t0 = time.perf_counter()
    maze = Maze(width, height, seed=seed)
    gen_sec = time.perf_counter() - t0

    finished = True
    t0 = time.perf_counter()
    try:
        maze.compute_solution(max_expansions=max_expansions)
    except SearchTimeout:
        logger.warning("%dx%d maze (seed %s) hit the %s expansion cap", width, height, seed, max_expansions)
        finished = False
    solve_sec = time.perf_counter() - t0

    path_length = len(maze.solution_path) if finished else 0
    move_count = maze.get_solution().move_count if finished else 0
    result = {
        "width": width,
        "height": height,
        "seed": seed,
        "gen_sec": gen_sec,
        "solve_sec": solve_sec,
        "wall_count": len(maze.walls),
        "path_length": path_length,
        "move_count": move_count,
        "instruction_count": len(maze.instructions) if finished else 0,
        # fraction of single steps saved by sliding
        "compression": 1 - move_count / path_length if path_length else 0,
        "finished": finished,
    }
    return result


def summarize(values):
    """avg/min/max/stdev of one metric column; zeros for an empty column."""
    if not values:
        return {"avg": 0, "min": 0, "max": 0, "stdev": 0}
    return {
        "avg": statistics.mean(values),
        "min": min(values),
        "max": max(values),
        "stdev": statistics.pstdev(values),
    }


def aggregate_results(rows, group_by=("width", "height")):
    """
    One summary entry per maze size.

    Each entry carries the group key, the run count, `<metric>_<stat>` for
    every metric in METRICS and the fraction of runs that finished.
    """
    grouped = collections.defaultdict(list)
    for row in rows:
        grouped[tuple(row[k] for k in group_by)].append(row)

    summary = []
    for key, runs in grouped.items():
        entry = {"group": key, "count": len(runs)}
        for metric in METRICS:
            for stat_name, value in summarize([run[metric] for run in runs]).items():
                entry[f"{metric}_{stat_name}"] = value
        entry["finished_rate"] = sum(run["finished"] for run in runs) / len(runs)
        summary.append(entry)
    return summary


def flatten_summary(summary, group_by=("width", "height")):
    """Replaces the tuple group key with one column per grouping field."""
    flat = []
    for entry in summary:
        row = {k: v for k, v in entry.items() if k != "group"}
        row.update(zip(group_by, entry["group"]))
        flat.append(row)
    return flat


def write_csv(path, rows):
    if not rows:
        return
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=list(rows[0]))
        writer.writeheader()
        writer.writerows(rows)


def plot_metric(summary, metric_key, out_path):
    if not HAS_MPL:
        return
    labels = [f"{row['width']}x{row['height']}" for row in summary]
    values = [row.get(metric_key, 0) for row in summary]
    fig, ax = plt.subplots(figsize=(max(8, len(labels) * 0.6), 5))
    ax.bar(labels, values)
    ax.set_xlabel("maze size")
    ax.set_ylabel(metric_key)
    ax.tick_params(axis="x", labelrotation=45)
    fig.tight_layout()
    os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
    fig.savefig(out_path)
    plt.close(fig)


def positive_int(text):
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return value


def parse_size(text):
    try:
        w, h = text.lower().split("x")
    except ValueError:
        raise argparse.ArgumentTypeError(f"size must look like WIDTHxHEIGHT, got {text!r}") from None
    return positive_int(w), positive_int(h)


def build_parser():
    parser = argparse.ArgumentParser(description="Generate and solve batches of mazes and report metrics.")
    parser.add_argument("--runs", type=positive_int, default=DEFAULT_RUNS, help="Runs per maze size")
    parser.add_argument("--width", type=positive_int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=positive_int, default=DEFAULT_HEIGHT)
    parser.add_argument("--sizes", nargs="+", type=parse_size, default=None,
                        help="Maze sizes as WIDTHxHEIGHT; overrides --width/--height")
    parser.add_argument("--seed", type=int, default=None, help="Base seed; run i uses seed + i")
    parser.add_argument("--max_expansions", type=positive_int, default=None,
                        help="Give up on a solve after this many expansions")
    parser.add_argument("--out_dir", default=DEFAULT_OUT_DIR)
    parser.add_argument("--no-plot", dest="plot", action="store_false", help="Skip the matplotlib charts")
    parser.add_argument("--graph", action="store_true", help="Also render the first maze's passage tree with graphviz")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sizes = args.sizes or [(args.width, args.height)]

    seed_base = args.seed if args.seed is not None else int(time.time())
    all_rows = []
    for width, height in sizes:
        for i in range(args.runs):
            all_rows.append(run_single(width, height, seed=seed_base + i, max_expansions=args.max_expansions))
        logger.info("finished %d runs of %dx%d", args.runs, width, height)

    os.makedirs(args.out_dir, exist_ok=True)
    write_csv(os.path.join(args.out_dir, "raw_results.csv"), all_rows)

    summary = flatten_summary(aggregate_results(all_rows))
    write_csv(os.path.join(args.out_dir, "summary.csv"), summary)

    if args.plot and HAS_MPL:
        for metric in ["gen_sec_avg", "solve_sec_avg", "path_length_avg", "move_count_avg", "compression_avg"]:
            plot_metric(summary, metric, os.path.join(args.out_dir, f"{metric}.png"))

    if args.graph:
        from maze_slider.visualization import render_maze_tree
        width, height = sizes[0]
        maze = Maze(width, height, seed=seed_base)
        maze.compute_solution()
        render_maze_tree(maze, os.path.join(args.out_dir, "maze_tree"))

    print(f"Wrote results to {args.out_dir}")


if __name__ == "__main__":
    main()
