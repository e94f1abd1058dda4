import argparse
import sys

from corscheck.core.engine import Engine
from corscheck.core.models import group_results
from corscheck.core.pool import WorkerPool
from corscheck.parsers.targets import read_targets
from corscheck.reporters.console import Log
from corscheck.reporters.json_file import write_buckets


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="CORS misconfiguration checker")
    p.add_argument("-f", "--file", help="Path to the file containing URLs")
    p.add_argument("-c", "--concurrency", type=int, default=70,
                   help="Number of concurrent workers")
    p.add_argument("-to", "--timeout", type=float, default=10,
                   help="Per-request timeout [s]")
    p.add_argument("-o", "--output-dir", default=".",
                   help="Directory for the JSON result files")
    p.add_argument("--proxy", help="Proxy (e.g. http://127.0.0.1:8080)")
    p.add_argument("-v", "--verbose", action="count", default=1,
                   help="-v, -vv")
    p.add_argument("-q", "--quiet", action="store_true",
                   help="Only print findings and errors")
    return p


def main(argv=None) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    log = Log(verbose=0 if args.quiet else args.verbose)
    log.banner()

    if not args.file:
        p.print_usage(sys.stderr)
        return 1
    if args.concurrency < 1:
        log.fail(f"Concurrency must be at least 1, got {args.concurrency}")
        return 1

    try:
        urls = read_targets(args.file)
    except OSError as exc:
        log.fail(f"Error reading file: {exc}")
        return 1

    engine = Engine(timeout=args.timeout, proxy=args.proxy, logger=log)
    pool = WorkerPool(engine.probe, workers=args.concurrency, logger=log)

    found = []
    for result in pool.run(urls):
        log.result(result)
        found.append(result)

    try:
        written = write_buckets(group_results(found), args.output_dir)
    except OSError as exc:
        log.fail(f"Error writing results: {exc}")
        return 1

    if written:
        log.saved(written)
    else:
        log.nothing_found()
    return 0


if __name__ == "__main__":
    sys.exit(main())
