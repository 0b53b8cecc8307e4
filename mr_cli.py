import sys, argparse, logging, random

import gmpy2

from mrprime import DEFAULT_ROUNDS, summarize

log = logging.getLogger("mr_cli")

def main(argv=None):
    ap = argparse.ArgumentParser(description="Miller-Rabin probable-prime check")
    ap.add_argument("--rounds", "-k", type=int, default=DEFAULT_ROUNDS, help="Miller-Rabin rounds per number")
    ap.add_argument("--seed", type=int, default=None, help="rng seed for reproducibility")
    ap.add_argument("--no-builtin", action="store_true", help="skip the library cross-check")
    ap.add_argument("-v", "--verbose", action="store_true")
    ap.add_argument("N", nargs="*", help="optional list of integers (default: read stdin)")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if args.rounds < 1:
        ap.error("--rounds must be >= 1")
    rng = random.SystemRandom() if args.seed is None else random.Random(args.seed)
    log.info("testing with k=%d rounds (%s rng)", args.rounds, "seeded" if args.seed is not None else "system")

    rc = 0
    lines = args.N if args.N else sys.stdin
    for line in lines:
        line = line.strip()
        if not line: continue
        # mpz has no int-to-str digit limit
        try: n = gmpy2.mpz(line, 10)
        except ValueError:
            print(f"# skip: {line}", file=sys.stderr); rc |= 1; continue
        print(summarize(n, args.rounds, rng, builtin=not args.no_builtin))
    raise SystemExit(rc)

if __name__ == "__main__":
    main()
