import argparse
import logging
import os

import dotenv

from . import hotspot_labels
from . import hotspot_types
from . import hotspots_engine
from .utils import logging_utils

from typing import Sequence

_HELP = """Commands:
  :TIME   Advance playback to TIME (ms), prints snapshot or delta.
  !TIME   Same as :TIME, but forces a snapshot.
  ?TIME   Show the hotspots visible at TIME, without moving playback.
  reset   Forget the playback position.
"""


def format_hotspots(hotspots: Sequence[hotspot_types.Marker]) -> str:
    return "[" + ", ".join(str(getattr(h, "id", h)) for h in hotspots) + "]"


def format_result(result: hotspot_types.UpdateResult) -> str:
    if result.snapshot is not None:
        return f"snapshot {format_hotspots(result.snapshot)}"
    delta = result.delta or hotspot_types.HotspotsDelta()
    return f"delta show={format_hotspots(delta.show)} hide={format_hotspots(delta.hide)}"


def run_command(engine: hotspots_engine.HotspotsEngine, command: str) -> str:
    """Runs a single command, and returns what should be printed."""
    command = command.strip()
    if command == "reset":
        engine.reset()
        return "Playback position reset."

    if not command or command[0] not in ":!?":
        return f"Unknown command {command!r}.\n{_HELP}"

    try:
        time = float(command[1:])
    except ValueError:
        return "Invalid time format."

    if command[0] == "?":
        return f"at {time}: {format_hotspots(engine.get_snapshot(time))}"
    result = engine.update_time(time, force_snapshot=command[0] == "!")
    return f"at {time}: {format_result(result)}"


def _start_cli(engine: hotspots_engine.HotspotsEngine):
    print(_HELP)
    while True:
        try:
            user_input = input("$ ")
        except EOFError:  # Ctrl+D
            break
        if user_input.strip():
            print(run_command(engine, user_input))


def replay(engine: hotspots_engine.HotspotsEngine, ticks: Sequence[float]) -> list[str]:
    return [run_command(engine, f":{tick}") for tick in ticks]


def main(argv: Sequence[str] | None = None):
    parser = argparse.ArgumentParser(description="Hotspots visibility tracker")
    parser.add_argument(
        "--hotspots-file",
        type=str,
        help="Path to the JSON file with hotspots.",
        required=True,
    )
    parser.add_argument(
        "--seek-threshold",
        type=float,
        help="Forward jump in ms that counts as a seek. Defaults to $HOTSPOTS_SEEK_THRESHOLD or 2000.",
    )
    parser.add_argument(
        "--ticks",
        type=float,
        nargs="+",
        help="Replay these playback times (ms) instead of starting interactive mode.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enables debug logging.",
    )
    args = parser.parse_args(argv)

    logging_utils.setup_logging(logging.DEBUG if args.verbose else logging.INFO)
    dotenv.load_dotenv()

    hotspots = hotspot_labels.HotspotsFile.load(args.hotspots_file).hotspots
    logging.info(
        f"Loaded {len(hotspots)} hotspots from {os.path.basename(args.hotspots_file)}"
    )
    engine = hotspots_engine.HotspotsEngine(
        hotspots, seek_threshold=args.seek_threshold
    )

    if args.ticks:
        for line in replay(engine, args.ticks):
            print(line)
        return

    _start_cli(engine)


if __name__ == "__main__":
    main()
