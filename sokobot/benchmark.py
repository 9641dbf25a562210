import logging
import time

import matplotlib.pyplot as plt

from sokobot.grid import Grid
from sokobot.levels import parse_level
from sokobot.puzzles import get_puzzle, get_puzzle_names
from sokobot.search import search
from sokobot.state import State


def run_benchmark(names, max_states=None):
    """Solve each named puzzle; returns one result dict per puzzle."""
    results = []
    for name in names:
        width, height, map_data, items_data = parse_level(get_puzzle(name))
        initial = State.from_level(Grid.from_map(width, height, map_data),
                                   items_data)

        t0 = time.perf_counter()
        outcome = search(initial, max_states=max_states)
        t1 = time.perf_counter()

        results.append({
            "name": name,
            "crates": len(initial.crates),
            "status": outcome.status,
            "moves": len(outcome.path) if outcome.solved else None,
            "states_explored": outcome.states_explored,
            "time_s": t1 - t0,
        })
    return results


def main():
    logging.basicConfig(level=logging.INFO)

    results = run_benchmark(get_puzzle_names())

    print("Results:")
    for row in results:
        print(row)

    names = [r["name"] for r in results]
    explored = [r["states_explored"] for r in results]
    times = [r["time_s"] for r in results]

    # Graph 1: states explored
    plt.figure()
    plt.bar(names, explored)
    plt.xticks(rotation=45, ha="right")
    plt.ylabel("States explored")
    plt.yscale("log")
    plt.title("Sokobot: States explored per puzzle")
    plt.tight_layout()
    plt.savefig("states_explored.png")
    plt.close()

    # Graph 2: runtime
    plt.figure()
    plt.bar(names, times)
    plt.xticks(rotation=45, ha="right")
    plt.ylabel("Time (seconds)")
    plt.title("Sokobot: Runtime per puzzle")
    plt.tight_layout()
    plt.savefig("runtime.png")
    plt.close()


if __name__ == "__main__":
    main()
