"""Quick CLI demo: run FIFO, LRU, MRU and OPT over one reference string.

Run from project root:
    python compare_demo.py                      # classic Belady string
    python compare_demo.py trace.txt --frames 4 # one page id per line
    python compare_demo.py --pages 8 --frames 3 --seed 1
"""
import argparse

from pranalyzer.policies import Strategy
from pranalyzer.simulation import simulate_reference
from pranalyzer.utils.trace_generator import ReferenceGenerator
from pranalyzer.utils.workload_loader import load_trace_file

BELADY_STRING = (1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5)


def run_demo(reference, frames):
    results = simulate_reference(reference, frames)

    print(f"Reference length: {len(reference)}, distinct pages: {len(set(reference))}, frames: {frames}")
    for strategy in Strategy:
        tally = results[strategy]
        rate = tally.hit_rate
        rate_text = f"{rate*100:.2f}%" if rate is not None else "N/A"
        print(f"{strategy.label:<5} faults: {tally.faults:<6} hits: {tally.hits:<6} hit rate: {rate_text}")
    return results


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("trace", nargs="?", default=None,
                        help="text file (one page id per line) or .npy reference string")
    parser.add_argument("--frames", type=int, default=3)
    parser.add_argument("--pages", type=int, default=None,
                        help="generate a random string over this many pages instead")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()
    if args.frames < 0:
        parser.error("--frames must be non-negative")

    if args.trace is not None:
        reference = load_trace_file(args.trace)
    elif args.pages is not None:
        reference = ReferenceGenerator(seed=args.seed).generate(args.pages, args.frames)
    else:
        reference = BELADY_STRING

    run_demo(reference, args.frames)
