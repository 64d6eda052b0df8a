"""Command-line entry point for the page replacement analyzer.

Prompts for any sweep parameter not given as a flag, runs the page-size
sweep and prints the hit-rate table. Example:

    python main.py --ram-size 16 --processes 10 --process-size 32 --seed 7
"""

import argparse

from pranalyzer.config import Config
from pranalyzer.simulation import SessionHistory, SweepParameters
from pranalyzer.utils.report import format_table
from pranalyzer.utils.trace_generator import ReferenceGenerator


def prompt_int(message, minimum=0):
    while True:
        raw = input(message)
        try:
            value = int(raw)
        except ValueError:
            print(f"Please enter an integer, got {raw!r}")
            continue
        if value < minimum:
            print(f"Value must be at least {minimum}")
            continue
        return value


def collect_parameters(args):
    num_processes = args.processes
    if num_processes is None:
        num_processes = prompt_int("Enter the number of processes: ", minimum=1)
    ram_size = args.ram_size
    if ram_size is None:
        ram_size = prompt_int("Enter the RAM size: ")
    process_size = args.process_size
    if process_size is None:
        process_size = prompt_int("Enter the process size: ")
    return SweepParameters(ram_size=ram_size,
                           num_processes=num_processes,
                           process_size=process_size)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Compare FIFO, LRU, MRU and OPT hit rates across page sizes"
    )
    parser.add_argument("--ram-size", type=int, default=None,
                        help="RAM size (prompted when omitted)")
    parser.add_argument("--processes", type=int, default=None,
                        help="number of processes per page size (prompted when omitted)")
    parser.add_argument("--process-size", type=int, default=None,
                        help="size of each process (prompted when omitted)")
    parser.add_argument("--seed", type=int, default=Config.seed,
                        help="random seed for reference strings")
    parser.add_argument("--refs-per-page", type=int, default=Config.refs_per_page,
                        help="reference string length per page of the process")
    parser.add_argument("--precision", type=int, default=Config.precision,
                        help="decimals printed for hit rates")
    parser.add_argument("--plot", action="store_true", default=Config.plot,
                        help="show a hit rate vs page size plot")
    parser.add_argument("--plot-path", type=str, default=Config.plot_path,
                        help="save the plot to this file")
    parser.add_argument("--verbose", action="store_true",
                        help="print a line after each page size")
    args = parser.parse_args(argv)
    for name in ("ram_size", "process_size"):
        value = getattr(args, name)
        if value is not None and value < 0:
            parser.error(f"--{name.replace('_', '-')} must be non-negative")
    if args.processes is not None and args.processes < 1:
        parser.error("--processes must be at least 1")
    if args.precision < 0:
        parser.error("--precision must be non-negative")
    return args


def print_progress(update):
    print(f"Page size {update['page_size']}: pages={update['page_count']}, "
          f"frames={update['frame_capacity']} ({update['progress']:.0f}%)")


def run(argv=None):
    args = parse_args(argv)
    params = collect_parameters(args)

    history = SessionHistory()
    generator = ReferenceGenerator(seed=args.seed, refs_per_page=args.refs_per_page)
    aggregator = history.run(params, generator=generator,
                             progress=print_progress if args.verbose else None)

    print("Results:")
    print(format_table(aggregator, precision=args.precision))

    if args.plot or args.plot_path:
        from pranalyzer.utils.plotter import Plotter
        Plotter().plot_hit_rates(
            aggregator,
            title=f"Hit Rate vs Page Size (RAM={params.ram_size}, process={params.process_size})",
            save_path=args.plot_path,
            show=args.plot,
        )
        if args.plot_path:
            print(f"Plot saved to {args.plot_path}")
    return aggregator


if __name__ == '__main__':
    run()
