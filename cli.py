#!/usr/bin/env python3
"""
Workout Tracker command line interface.

Commands:
    serve   - run the web app
    list    - print the workouts kept in a file store
    export  - write the workouts kept in a file store to CSV

Example usage:
  python cli.py serve --port 8050
  python cli.py serve --storage file --data-dir workout_data
  python cli.py export --data-dir workout_data --output workouts.csv
"""

import argparse
import logging
import sys

from workout_tracker.frontend.utils.data_formatter import DataFormatter
from workout_tracker.storage.export import export_workouts_csv
from workout_tracker.storage.workout_store import JSONFileStorage, WorkoutStore
from workout_tracker.utils.config import get_config

logger = logging.getLogger(__name__)


def _open_file_store(args):
    config = get_config()
    data_dir = args.data_dir or config.storage.data_dir
    return WorkoutStore(JSONFileStorage(data_dir), config.storage.storage_key)


def cmd_serve(args):
    from workout_tracker.app import create_app

    config = get_config()
    config.update_storage_settings(backend=args.storage)
    if args.data_dir:
        config.update_storage_settings(data_dir=args.data_dir)

    app = create_app(config)
    logger.info(f"Starting workout tracker on {args.host}:{args.port} ({args.storage} storage)")
    app.run(debug=args.debug, host=args.host, port=args.port)
    return 0


def cmd_list(args):
    store = _open_file_store(args)
    if not len(store):
        print("No workouts stored")
        return 0

    fmt = DataFormatter()
    for workout in reversed(store.all()):
        if workout.is_running:
            extra = f"{fmt.format_fixed(workout.pace)} min/km, {fmt.format_number(workout.cadence)} spm"
        else:
            extra = f"{fmt.format_fixed(workout.speed)} km/h, {fmt.format_number(workout.elevation_gain)} m"
        print(f"{workout.id}  {fmt.workout_emoji(workout.type)} {workout.description}: "
              f"{fmt.format_number(workout.distance)} km, {fmt.format_number(workout.duration)} min, {extra}")
    return 0


def cmd_export(args):
    store = _open_file_store(args)
    export_workouts_csv(store.all(), args.output)
    print(f"Exported {len(store)} workouts to {args.output}")
    return 0


def build_parser():
    parser = argparse.ArgumentParser(
        description="Log running and cycling workouts on a map",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    serve = subparsers.add_parser('serve', help='Run the web app')
    serve.add_argument('--host', default='127.0.0.1', help='Host to bind (default: 127.0.0.1)')
    serve.add_argument('--port', type=int, default=8050, help='Port to listen on (default: 8050)')
    serve.add_argument('--debug', action='store_true', help='Run Dash in debug mode')
    serve.add_argument('--storage', choices=['browser', 'file'], default='browser',
                       help='Keep workouts in browser local storage or in a JSON file (default: browser)')
    serve.add_argument('--data-dir', help='Directory for the JSON file store')
    serve.set_defaults(func=cmd_serve)

    list_cmd = subparsers.add_parser('list', help='Print stored workouts, newest first')
    list_cmd.add_argument('--data-dir', help='Directory of the JSON file store')
    list_cmd.set_defaults(func=cmd_list)

    export = subparsers.add_parser('export', help='Export stored workouts to CSV')
    export.add_argument('--data-dir', help='Directory of the JSON file store')
    export.add_argument('--output', '-o', default='workouts.csv', help='CSV path (default: workouts.csv)')
    export.set_defaults(func=cmd_export)

    return parser


def main(argv=None):
    logging.basicConfig(level=logging.INFO)
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
