"""Command-line interface for the UFC dashboard."""

import argparse
import json
import sys

from .analytics import ALL, MAIN_DIVISIONS, MAIN_METHODS, compute_dashboard
from .data.loader import DEFAULT_FIGHTERS_SOURCE, DEFAULT_FIGHTS_SOURCE, DashboardLoader, LoadStatus


def main():
    """Run the dashboard CLI."""
    parser = argparse.ArgumentParser(description="UFC fight and fighter statistics")
    parser.add_argument(
        "command",
        choices=["summary", "methods", "divisions", "fighters", "accuracy"],
        help="Command to run",
    )
    parser.add_argument(
        "--fights",
        default=DEFAULT_FIGHTS_SOURCE,
        help="Fight CSV file path or URL",
    )
    parser.add_argument(
        "--fighters",
        default=DEFAULT_FIGHTERS_SOURCE,
        help="Fighter CSV file path or URL",
    )
    parser.add_argument(
        "--division",
        default=ALL,
        help=f"Division filter (default: all; e.g. {', '.join(MAIN_DIVISIONS[:3])})",
    )
    parser.add_argument(
        "--method",
        default=ALL,
        help=f"Method filter (default: all; e.g. {', '.join(MAIN_METHODS[:2])})",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full dashboard data as JSON",
    )

    args = parser.parse_args()

    loader = DashboardLoader(fights_source=args.fights, fighters_source=args.fighters)
    state = loader.load_state()
    if state.status == LoadStatus.ERROR:
        print(f"Error loading data: {state.error}")
        sys.exit(1)

    dataset = state.dataset
    data = compute_dashboard(
        dataset.fights,
        dataset.fighters,
        division=args.division,
        method=args.method,
    )

    if args.json:
        print(json.dumps(data.to_dict(), indent=2))
        return

    if args.command == "summary":
        print(f"Fights:       {data.total_fights}")
        print(f"Title fights: {data.title_fights}")
        print(f"Fighters:     {data.total_fighters}")
        print(f"Finish rate:  {data.finish_rate}%")
        print(f"Skipped rows: {dataset.skipped_fights} fights, {dataset.skipped_fighters} fighters")

    elif args.command == "methods":
        for entry in data.method_data:
            print(f"{entry.method:<30} {entry.count:>6}")

    elif args.command == "divisions":
        print(f"{'Division':<20} {'Fights':>6} {'Sub %':>6} {'KO %':>6} {'Dec %':>6}")
        for d in data.division_data:
            print(
                f"{d.division:<20} {d.count:>6} {d.submission_rate:>6} "
                f"{d.knockout_rate:>6} {d.decision_rate:>6}"
            )

    elif args.command == "fighters":
        print("Top fighters by wins:")
        for i, s in enumerate(data.top_fighters, 1):
            print(f"  {i:>2}. {s.name:<30} {s.fighter.record:>10}  {s.win_rate:.1f}%")
        print("\nTop fighters by win rate (min 10 fights):")
        for i, s in enumerate(data.top_win_rate_fighters, 1):
            print(f"  {i:>2}. {s.name:<30} {s.fighter.record:>10}  {s.win_rate:.1f}%")

    elif args.command == "accuracy":
        for p in data.accuracy_data:
            print(f"{p.name:<30} acc {p.accuracy:>5.1f}%  win {p.win_rate:>5.1f}%  ({p.total_fights} fights)")


if __name__ == "__main__":
    main()
