import argparse
import logging
import os
import random
import sys
from typing import Dict, Iterable, List, Optional, Sequence

from geometry import Point, same_cycle
from hulls import ALGORITHMS, compute_hull

DEFAULT_COUNT = 100
DEFAULT_LOW = -100.0
DEFAULT_HIGH = 100.0


def configure_logger(name: str, log_dir: Optional[str] = None, level: int = logging.INFO) -> logging.Logger:
    """Configure a logger to print to console and, optionally, save to a file."""
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False
    # configure_logger may be called once per run, keep one set of handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # Console handler
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(stream_handler)

    # File handler
    if log_dir:
        if not os.path.exists(log_dir):
            os.makedirs(log_dir)
        file_handler = logging.FileHandler(os.path.join(log_dir, f'{name}.log'))
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        logger.addHandler(file_handler)

    return logger


def generate_points(count: int = DEFAULT_COUNT, low: float = DEFAULT_LOW, high: float = DEFAULT_HIGH,
                    rng: Optional[random.Random] = None) -> List[Point]:
    """Uniformly random points in the square [low, high) x [low, high)."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if low >= high:
        raise ValueError(f"empty coordinate range [{low}, {high})")
    rng = rng or random.Random()
    span = high - low
    return [Point(low + rng.random() * span, low + rng.random() * span) for _ in range(count)]


def format_point(p: Point) -> str:
    return f"{p[0]:g}, {p[1]:g}"


def format_hull(name: str, hull: Sequence[Point]) -> str:
    lines = [f"{name} point count: {len(hull)}"]
    lines.extend(format_point(p) for p in hull)
    return "\n".join(lines)


def run_all(points: Sequence[Point], names: Optional[Iterable[str]] = None) -> Dict[str, List[Point]]:
    names = list(names) if names else list(ALGORITHMS)
    return {name: compute_hull(points, name) for name in names}


def compare_hulls(results: Dict[str, List[Point]]) -> bool:
    """True when every hull is the same cyclic sequence of vertices as the first one."""
    hulls = list(results.values())
    return all(same_cycle(hulls[0], h) for h in hulls[1:])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the convex hull algorithms on a random point set and compare them")
    parser.add_argument("--count", type=int, default=DEFAULT_COUNT, help="Number of random points.")
    parser.add_argument("--low", type=float, default=DEFAULT_LOW, help="Lower coordinate bound.")
    parser.add_argument("--high", type=float, default=DEFAULT_HIGH, help="Upper coordinate bound.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the point generator.")
    parser.add_argument("--algorithm", action="append", choices=list(ALGORITHMS), default=None,
                        help="Algorithm to run; repeat to run several. Defaults to all of them.")
    parser.add_argument("--quiet", action="store_true", help="Only print vertex counts, not coordinates.")
    parser.add_argument("--log-dir", type=str, default=None, help="Also write the log to this directory.")
    parser.add_argument("--verbose", action="store_true", help="Log debug messages from the algorithms.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    log = configure_logger("hull_demo", args.log_dir, level)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

    rng = random.Random(args.seed)
    try:
        points = generate_points(args.count, args.low, args.high, rng)
        results = run_all(points, args.algorithm)
    except ValueError as exc:
        log.error(f"Cannot compute hull: {exc}")
        return 1

    log.info(f"Generated {len(points)} points in [{args.low:g}, {args.high:g})")
    for name, hull in results.items():
        if args.quiet:
            log.info(f"{name} point count: {len(hull)}")
        else:
            log.info(format_hull(name, hull) + "\n")

    if compare_hulls(results):
        log.info(f"All {len(results)} algorithms agree")
        return 0
    log.warning("Algorithms disagree: " + ", ".join(f"{name}={len(h)}" for name, h in results.items()))
    return 2


if __name__ == "__main__":
    sys.exit(main())
