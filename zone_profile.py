#!env python3

import argparse
import logging
import runpy
import sys

from zoneprof.config import ProfilerConfig
from zoneprof.sampler import SignalSampler
from zoneprof.session import Session


def run(script, script_args, zone_name, out):
    session = Session(SignalSampler(), ProfilerConfig.from_env())
    sys.argv = [script] + script_args
    try:
        with session.zone(zone_name):
            runpy.run_path(script, run_name="__main__")
    finally:
        print(session.report(), end="")
        if out:
            session.write_trace(out)


def main():
    parser = argparse.ArgumentParser(
        description="Run a Python script inside a profiling zone and print the zone report.",
        usage="%(prog)s [-h] [-z ZONE] [-o OUT] [-v] script [args ...]",
        epilog="Options must come before the script; everything after it is passed to the script.",
    )
    parser.add_argument("-z", "--zone", type=str, help="The zone name (default: auto-named run)", default=None)
    parser.add_argument(
        "-o",
        "--out",
        type=str,
        help="Also write the zone timeline to this file (Perfetto trace)",
        default=None,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("script", type=str, help="The Python script to profile")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="Arguments passed to the script")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    run(args.script, args.args, args.zone, args.out)


if __name__ == "__main__":
    main()
