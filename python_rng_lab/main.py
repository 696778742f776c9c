#!/usr/bin/env python3
"""
RNG Lab - Console Version
Interactive console application for sampling classical pseudo-random generators
and checking their output with a histogram.
"""
import sys
import argparse
import os
import time
from datetime import datetime

# Make sibling modules importable when run as a script
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from enums import GeneratorType, Result
from generator_bank import GeneratorBank
from histogram import build_histogram
from settings import Settings


INVALID_CHOICE_MESSAGE = "Invalid choice. Please select a valid generator or 0 to exit."


def run_selection(bank, ordinal, n, intervals):
    """Draw n values from the selected generator and bin them.

    Returns:
        tuple: (values, histogram)
    """
    generator = bank.get(ordinal)
    values = generator.sample(n)
    min_range, max_range = bank.histogram_range(ordinal)
    histogram = build_histogram(values, min_range, max_range, intervals)
    return values, histogram


def print_values(values):
    print("Random Values: " + ", ".join(f"{v:g}" for v in values))


def print_histogram(histogram):
    print(histogram.format_report())
    if histogram.dropped:
        print(f"Out of range: {histogram.dropped}/{histogram.total}")


def print_menu(bank):
    print("Choose a generator")
    for ordinal, name in bank.menu_entries():
        print(f"{ordinal}: {name}")
    print("0: Exit")


def parse_int(text, minimum=0):
    """Parse a menu answer.

    Returns:
        tuple: (Result, value or None)
    """
    try:
        value = int(text.strip())
    except (ValueError, AttributeError):
        return Result.INVALID_INPUT, None
    if value < minimum:
        return Result.INVALID_INPUT, None
    return Result.OK, value


def prompt_int(prompt, minimum=0):
    """Ask until a valid integer >= minimum is entered."""
    while True:
        result, value = parse_int(input(prompt), minimum)
        if result == Result.OK:
            return value
        print(f"Error: expected an integer >= {minimum}.")


def numbered_path(path, run):
    """plots/h.png -> plots/h_3.png for the third menu run."""
    stem, ext = os.path.splitext(path)
    return f"{stem}_{run}{ext}"


def show_plot(histogram, bank, ordinal, settings, save_path=None):
    try:
        from visualization import HistogramPlotter
        import matplotlib.pyplot as plt
    except ImportError:
        print("\nWarning: matplotlib is not installed. Install with: pip install matplotlib")
        return

    title = bank.get(ordinal).name
    plotter = HistogramPlotter(histogram, title=title)
    ax = plotter.plot(save_path=save_path, expected=bank.distribution(ordinal))
    try:
        if save_path:
            print(f"Plot saved to: {save_path}")
        if settings.is_plot():
            plt.show()
    finally:
        # The menu may plot many times; release each figure once done
        plt.close(ax.figure)


def report_selection(bank, ordinal, n, intervals, settings, run=None):
    """Sample, print and optionally plot one selection.

    run numbers the saved plot file so menu runs do not overwrite each other.
    """
    values, histogram = run_selection(bank, ordinal, n, intervals)
    if settings.is_show_values():
        print_values(values)
    print_histogram(histogram)
    if settings.is_plot() or settings.get_plot_save_path():
        save_path = settings.get_plot_save_path()
        if save_path and run is not None:
            save_path = numbered_path(save_path, run)
        show_plot(histogram, bank, ordinal, settings, save_path)
    return values, histogram


def interactive_loop(bank, settings):
    """Menu loop: pick a generator, enter n and N, print the results; 0 exits."""
    run = 0
    while True:
        print_menu(bank)
        try:
            result, choice = parse_int(input())
        except EOFError:
            return Result.EXIT

        if result != Result.OK:
            print(INVALID_CHOICE_MESSAGE)
            continue
        if choice == 0:
            return Result.EXIT
        if choice > len(bank):
            print(INVALID_CHOICE_MESSAGE)
            continue

        try:
            n = prompt_int("Enter the number of random values to generate: ", 0)
            intervals = prompt_int("Enter the number of intervals for histogram: ", 1)
        except EOFError:
            return Result.EXIT

        run += 1
        report_selection(bank, choice, n, intervals, settings, run=run)
        print()


def build_parser():
    parser = argparse.ArgumentParser(
        description='RNG Lab - classical pseudo-random generators with histogram check',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py
  python main.py --generator 7 --count 10000 --intervals 12 --no-values
  python main.py -g 1 -n 1000 -N 10 --seed 42 --plot-save plots/linear.png
        """
    )

    parser.add_argument('--generator', '-g', type=int, choices=[t.value for t in GeneratorType],
                        default=None,
                        help='Generator to run once (1=Linear ... 7=Polar); omit for the menu')
    parser.add_argument('--count', '-n', type=int, default=100,
                        help='Number of values to generate (default: 100)')
    parser.add_argument('--intervals', '-N', type=int, default=10,
                        help='Number of histogram intervals (default: 10)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for the seeded generators (default: wall clock)')
    parser.add_argument('--no-values', action='store_true',
                        help='Do not print the generated values')

    # Visualization flags
    parser.add_argument('--plot', action='store_true',
                        help='Show the histogram plot in a window; needs an interactive '
                             'matplotlib backend selected via MPLBACKEND (e.g. TkAgg), '
                             'otherwise nothing is displayed')
    parser.add_argument('--plot-save', type=str, default=None,
                        help='Save the histogram plot to the given image path '
                             '(menu runs are numbered: name_1.png, name_2.png, ...)')
    return parser


def settings_from_args(args):
    settings = Settings()
    settings.set_samples_cnt(args.count)
    settings.set_intervals_cnt(args.intervals)
    if args.generator is not None:
        settings.set_generator_type(GeneratorType(args.generator))
    settings.set_show_values(not args.no_values)
    settings.set_plot(args.plot)
    settings.set_plot_save_path(args.plot_save)
    settings.set_seed(args.seed)
    return settings


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.count < 0:
        parser.error("--count must be non-negative")
    if args.intervals < 1:
        parser.error("--intervals must be at least 1")

    settings = settings_from_args(args)
    start_time = time.time()

    try:
        bank = GeneratorBank.create_default(seed=settings.get_seed())

        if args.generator is None:
            interactive_loop(bank, settings)
            return 0

        print("=" * 60)
        print("RNG Lab")
        print("=" * 60)
        settings.print()
        print(f"Seed used: {bank.seed}")
        print("-" * 60)

        report_selection(bank, settings.get_generator_type(),
                         settings.get_samples_cnt(), settings.get_intervals_cnt(),
                         settings)

        print("-" * 60)
        print(f"Elapsed: {time.time() - start_time:.3f} s")
        return 0

    except KeyboardInterrupt:
        print()
        return 0
    except Exception as e:
        print()
        print("=" * 60)
        print("Error during execution:")
        print("=" * 60)
        print(f"Error: {e}")
        print(f"Time: {datetime.now().strftime('%d.%m.%Y %H:%M:%S')}")
        print("=" * 60)

        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == '__main__':
    sys.exit(main())
