import argparse
import itertools
import logging.config
import os
import sys
from typing import List, Optional

import psutil

from fnv_hashmap.config import LOGGING
from fnv_hashmap.fnv import fnv1a_64, hash_key
from fnv_hashmap.hash_map import HashMap
from fnv_hashmap.logger.log_types import LogEvent
from fnv_hashmap.logger.logger import log_error_event, log_load_event, log_memory_event

CHUNK_LINES = 100000


def get_memory_usage() -> int:
    """Return current process RSS memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss


def load_file(input_path: str, delete_every: int = 0) -> HashMap:
    """
    build a table from a text file:
     1. every stripped line becomes a key, its 1-based line number the value
        (a repeated line overwrites the earlier number).
     2. with delete_every=N, every Nth line's key is deleted again afterwards.
    """
    log_memory_event(LogEvent.MEMORY_USAGE, "before_load", get_memory_usage())
    table = HashMap()
    line_no = 0
    with open(input_path, "r", encoding="utf-8") as fin:
        while True:
            # Read a chunk of lines to bound memory on large inputs
            chunk = list(itertools.islice(fin, CHUNK_LINES))
            if not chunk:
                break
            for line in chunk:
                line_no += 1
                table.set(line.rstrip("\r\n"), line_no)

    if delete_every > 0:
        with open(input_path, "r", encoding="utf-8") as fin:
            for idx, line in enumerate(fin, start=1):
                if idx % delete_every == 0:
                    table.delete(line.rstrip("\r\n"))

    log_memory_event(LogEvent.MEMORY_USAGE, "after_load", get_memory_usage())
    log_load_event(
        LogEvent.KEYS_LOADED,
        input_path,
        table.get_entries_count(),
        table.get_buckets_count(),
        table.load_factor(),
    )
    return table


def format_stats(table: HashMap) -> str:
    return (
        f"entries={table.get_entries_count()} "
        f"buckets={table.get_buckets_count()} "
        f"load_factor={table.load_factor():.3f} "
        f"longest_bucket={table.longest_bucket()}"
    )


def _cmd_load(args) -> int:
    try:
        table = load_file(args.input_file, delete_every=args.delete_every)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        log_error_event(LogEvent.LOAD_FAILED, str(e))
        return 1
    print(format_stats(table))
    return 0


def _cmd_hash(args) -> int:
    line = f"{fnv1a_64(args.key):#018x}"
    if args.buckets is not None:
        line += f" bucket={hash_key(args.key, args.buckets)}"
    print(line)
    return 0


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fnv-hashmap",
        description="Inspect the FNV-1a chained hash table.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    load_parser = subparsers.add_parser(
        "load",
        help="Load every line of a text file as a key and print table statistics",
    )
    load_parser.add_argument(
        "-i",
        "--input_file",
        required=True,
        type=str,
        help="Path to the text file whose lines become keys",
    )
    load_parser.add_argument(
        "-d",
        "--delete-every",
        type=int,
        default=0,
        help="Delete every Nth line's key after loading (0 disables)",
    )
    load_parser.set_defaults(func=_cmd_load)

    hash_parser = subparsers.add_parser(
        "hash",
        help="Print the 64-bit FNV-1a hash of a key",
    )
    hash_parser.add_argument("key", type=str)
    hash_parser.add_argument(
        "-b",
        "--buckets",
        type=_positive_int,
        default=None,
        help="Also print the bucket index for this bucket count",
    )
    hash_parser.set_defaults(func=_cmd_hash)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    logging.config.dictConfig(LOGGING)
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
