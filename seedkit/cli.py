from __future__ import annotations

import sys
import time
import base64
import logging
import argparse

from typing import List, Optional, Tuple

from seedkit.crack import recover_clock_seed
from seedkit.errors import SeedkitError
from seedkit.prng import DeterministicGenerator
from seedkit.secure import SecureGenerator
from seedkit.seeds import Seed, clock_seed, entropy_seed, passphrase_seed


def _warn_low_entropy(seed: Seed) -> None:
    if seed.low_entropy:
        print(
            f"Warning: {seed.origin} seed is low entropy; anyone who can guess it can reproduce every output.",
            file=sys.stderr,
        )


def cmd_bytes(n: int, *, fmt: str = "hex") -> bool:
    """Print ``n`` secure random bytes.

    Args:
        n: Number of bytes to draw from the system entropy source.
        fmt: Output encoding, "hex" or "base64".
    """
    data = SecureGenerator().next(n)
    if fmt == "base64":
        print(base64.b64encode(data).decode("ascii"))
    else:
        print(data.hex())
    return True


def cmd_below(bound: int, *, count: int = 1) -> bool:
    """Print ``count`` secure integers in [0, bound), one per line."""
    gen = SecureGenerator()
    for _ in range(count):
        print(gen.next_below(bound))
    return True


def _resolve_seed(seed_text: Optional[str], seed_hex: Optional[str], clock: bool, at: Optional[float]) -> Seed:
    chosen = [seed_text is not None, seed_hex is not None, clock]
    if sum(chosen) > 1:
        raise ValueError("Use only one of --seed, --seed-hex or --clock")
    if seed_hex is not None:
        return Seed(bytes.fromhex(seed_hex), "hex", False)
    if seed_text is not None:
        # Typed text is guessable, like a passphrase.
        return Seed(seed_text.encode("utf-8"), "text", True)
    if clock:
        return clock_seed(at)
    raise ValueError("One of --seed, --seed-hex or --clock is required")


def cmd_replay(
    seed: Seed,
    *,
    count: int = 4,
    value_range: Optional[Tuple[int, int]] = None,
) -> bool:
    """Print the first ``count`` outputs of a deterministic generator.

    Args:
        seed: Seed to construct the generator from.
        count: Number of draws to print.
        value_range: Optional (low, high); prints integers in [low, high) instead of digests.
    """
    _warn_low_entropy(seed)
    gen = DeterministicGenerator(seed)
    for _ in range(count):
        if value_range is not None:
            print(gen.next_in_range(*value_range))
        else:
            print(gen.next().hex())
    return True


def cmd_seed(
    *,
    entropy: bool = False,
    size: int = 32,
    passphrase: Optional[str] = None,
    salt_hex: Optional[str] = None,
    clock: bool = False,
) -> bool:
    """Print a freshly made seed in hex."""
    if sum([entropy, passphrase is not None, clock]) > 1:
        raise ValueError("Use only one of --entropy, --passphrase or --clock")
    if entropy:
        seed = entropy_seed(size=size)
    elif passphrase is not None:
        if salt_hex is None:
            raise ValueError("--salt-hex is required with --passphrase")
        seed = passphrase_seed(passphrase, bytes.fromhex(salt_hex))
    elif clock:
        seed = clock_seed()
    else:
        raise ValueError("One of --entropy, --passphrase or --clock is required")
    _warn_low_entropy(seed)
    print(seed.hex())
    return True


def cmd_crack_clock(digest_hex: str, *, start: float, end: float) -> bool:
    """Search clock seeds in [start, end] for one producing ``digest_hex`` as first output."""
    observed = bytes.fromhex(digest_hex)
    t0 = time.monotonic()
    found = recover_clock_seed(observed, start, end)
    elapsed = time.monotonic() - t0
    if found is None:
        print(f"No clock seed in [{int(start)}, {int(end)}] produces that output ({elapsed:.2f}s)")
        return False
    tick = int.from_bytes(found.material, "big")
    print(f"Recovered clock seed {found.hex()} (t={tick}) in {elapsed:.2f}s")
    return True


def main(argv: List[str] | None = None):
    ap = argparse.ArgumentParser(
        prog="seedkit",
        description="Deterministic versus secure random generation",
        epilog="Deterministic output is only as unpredictable as its seed.",
    )
    ap.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = ap.add_subparsers(dest="cmd", required=True)

    ap_bytes = sub.add_parser("bytes", help="Print secure random bytes")
    ap_bytes.add_argument("n", type=int, help="Number of bytes")
    ap_bytes.add_argument("--format", choices=["hex", "base64"], default="hex", help="Output encoding (default hex)")

    ap_below = sub.add_parser("below", help="Print secure integers in [0, BOUND)")
    ap_below.add_argument("bound", type=int, help="Exclusive upper bound")
    ap_below.add_argument("--count", "-n", type=int, default=1, help="How many integers (default 1)")

    ap_replay = sub.add_parser("replay", help="Print deterministic generator output for a seed")
    ap_replay.add_argument("--seed", help="Seed text (UTF-8)")
    ap_replay.add_argument("--seed-hex", help="Seed bytes in hex")
    ap_replay.add_argument("--clock", action="store_true", help="Seed from the wall clock (insecure)")
    ap_replay.add_argument("--at", type=float, help="Clock time to use with --clock (seconds since epoch)")
    ap_replay.add_argument("--count", "-n", type=int, default=4, help="Number of draws (default 4)")
    ap_replay.add_argument(
        "--range",
        nargs=2,
        type=int,
        metavar=("LOW", "HIGH"),
        help="Print integers in [LOW, HIGH) instead of raw digests",
    )

    ap_seed = sub.add_parser("seed", help="Make a seed and print it in hex")
    ap_seed.add_argument("--entropy", action="store_true", help="Draw from the system entropy source")
    ap_seed.add_argument("--size", type=int, default=32, help="Seed size with --entropy (default 32)")
    ap_seed.add_argument("--passphrase", help="Stretch a passphrase with Argon2id (low entropy)")
    ap_seed.add_argument("--salt-hex", help="Salt for --passphrase, at least 16 bytes in hex")
    ap_seed.add_argument("--clock", action="store_true", help="Seed from the wall clock (insecure)")

    ap_crack = sub.add_parser("crack-clock", help="Recover a clock seed from a first deterministic output")
    ap_crack.add_argument("digest", help="First output of the generator, in hex")
    ap_crack.add_argument("--start", type=float, required=True, help="Earliest plausible seeding time")
    ap_crack.add_argument("--end", type=float, required=True, help="Latest plausible seeding time")

    args = ap.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        if args.cmd == "bytes":
            cmd_bytes(args.n, fmt=args.format)
        elif args.cmd == "below":
            cmd_below(args.bound, count=args.count)
        elif args.cmd == "replay":
            seed = _resolve_seed(args.seed, args.seed_hex, args.clock, args.at)
            value_range = tuple(args.range) if args.range else None
            cmd_replay(seed, count=args.count, value_range=value_range)
        elif args.cmd == "seed":
            cmd_seed(
                entropy=args.entropy,
                size=args.size,
                passphrase=args.passphrase,
                salt_hex=args.salt_hex,
                clock=args.clock,
            )
        elif args.cmd == "crack-clock":
            success = cmd_crack_clock(args.digest, start=args.start, end=args.end)
            sys.exit(0 if success else 1)
        else:
            raise RuntimeError("Unknown command")
    except (SeedkitError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
