#!/usr/bin/env python3
"""Course week to iCalendar exporter.

Loads a course's classes and weekly sessions from the course API (or a saved
snapshot), projects one week of the course calendar and writes it as an
iCalendar (.ics) file.
"""

import argparse
import logging
import sys
from datetime import date, datetime

from loader import CourseScheduleClient, load_snapshot
from timetable import TimetableError, WeekCalendar
from timetable import config
from timetable.view import WeekView
from transformer import ICalTransformer


def parse_date(date_str: str) -> date:
    """Parse date string in YYYY-MM-DD format."""
    try:
        return datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid date format: '{date_str}'. Expected YYYY-MM-DD."
        )


def print_week(view: WeekView, calendar: WeekCalendar) -> None:
    """Print a day-by-day summary of the week."""
    print(f"Week: {view.window.start} to {view.window.end}")
    for index, day in enumerate(view.window.days):
        marker = "*" if index == view.today_index else " "
        weekday = calendar.weekdays.weekday_at(index).value
        print(f"{marker} {weekday:<9} {day}")
        for session in view.sessions_on(day):
            print(f"      {session.time_slot.name:<12} {session.label}")
    print(
        f"Previous week: {'yes' if view.can_step_backward else 'no'}, "
        f"next week: {'yes' if view.can_step_forward else 'no'}"
    )


def main() -> None:
    """Main entry point for the exporter."""
    parser = argparse.ArgumentParser(
        description="Export one week of a course calendar to iCalendar format.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python3 course2iCal.py --course-id 42 --date 2025-01-08
  python3 course2iCal.py --input course.json --weeks 2 --output week.ics
        """
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--course-id",
        help="Id of the course to load from the course API"
    )
    source.add_argument(
        "--input",
        help="Path to a saved course snapshot (JSON)"
    )

    parser.add_argument(
        "--api-url",
        default=config.API_URL,
        help=f"Course API root (default: {config.API_URL}, env COURSE_API_URL)"
    )

    parser.add_argument(
        "--date",
        type=parse_date,
        default=None,
        help="Any day of the week to export (format: YYYY-MM-DD). "
             "Default: the current week, kept within the course period"
    )

    parser.add_argument(
        "--weeks",
        type=int,
        default=0,
        help="Number of weeks to move from the selected week (negative goes back)"
    )

    parser.add_argument(
        "-o", "--output",
        default="course_week.ics",
        help="Output file path (default: course_week.ics)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug logging"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Ensure output file has .ics extension
    output_path = args.output
    if not output_path.lower().endswith(".ics"):
        output_path = f"{output_path}.ics"

    now = datetime.now(config.TIMEZONE)
    calendar = WeekCalendar()

    try:
        if args.input:
            snapshot = load_snapshot(args.input)
        else:
            print(f"Fetching course {args.course_id} from: {args.api_url}")
            snapshot = CourseScheduleClient(args.api_url).fetch_course(args.course_id)

        valid_range = snapshot.date_range
        if args.date:
            window = calendar.window_containing(args.date)
        else:
            window = calendar.focus_window(now, valid_range)

        if args.weeks:
            moved = calendar.step(window, valid_range, args.weeks)
            if (moved.start - window.start).days // 7 != args.weeks:
                print("Warning: The course period does not extend that far; showing the last reachable week.")
            window = moved

        view = calendar.view(window, valid_range, snapshot.sessions, now)

        print(f"Found {len(snapshot.sessions)} weekly sessions, {len(view.sessions)} this week.")
        if not view.sessions:
            print("Warning: No sessions this week. The output file will be empty.")

        print_week(view, calendar)

        transformer = ICalTransformer()
        transformer.transform(view)
        transformer.save(output_path)

        print(f"Schedule saved to: {output_path}")

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        sys.exit(130)
    except (TimetableError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: Could not write {output_path}: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
