import argparse
import json
import logging
import secrets
import sys
from pathlib import Path
from typing import Optional

from solfuzz.generator import SolidityGenerator
from solfuzz.sources import split_sources, to_standard_json


SEED_MASK = 2**64 - 1


def render(program: str, as_json: bool) -> str:
    if as_json:
        return json.dumps(to_standard_json(program), indent=2) + "\n"
    return program


def write_program(
    out_dir: Path, seed: int, program: str, *, split: bool, as_json: bool
) -> Path:
    if split:
        unit_dir = out_dir / f"seed_{seed}"
        for path, content in split_sources(program).items():
            target = unit_dir / path
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content)
        return unit_dir

    suffix = ".json" if as_json else ".sol"
    target = out_dir / f"seed_{seed}{suffix}"
    target.write_text(render(program, as_json))
    return target


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="solfuzz", description="Generate seeded Solidity test programs"
    )
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed of the first program (default: random 64-bit)")
    parser.add_argument("-n", "--num-programs", type=int, default=1,
                        help="Number of programs, seeded seed, seed+1, ... (default: 1)")
    parser.add_argument("-o", "--output-dir", type=str, default=None, metavar="DIR",
                        help="Write programs to DIR instead of stdout")
    parser.add_argument("--split", action="store_true",
                        help="With --output-dir, write one file per source unit")
    parser.add_argument("--json", action="store_true",
                        help="Emit standard JSON compiler input")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    if args.seed is not None and not 0 <= args.seed <= SEED_MASK:
        parser.error("--seed must be an unsigned 64-bit integer")
    if args.split and args.output_dir is None:
        parser.error("--split requires --output-dir")

    first_seed = args.seed if args.seed is not None else secrets.randbits(64)
    out_dir = Path(args.output_dir) if args.output_dir else None
    if out_dir is not None:
        out_dir.mkdir(parents=True, exist_ok=True)

    for i in range(args.num_programs):
        seed = (first_seed + i) & SEED_MASK
        program = SolidityGenerator(seed).generate_test_program()

        if out_dir is None:
            if not args.json:
                sys.stdout.write(f"// seed={seed}\n")
            sys.stdout.write(render(program, args.json))
            continue

        target = write_program(
            out_dir, seed, program, split=args.split, as_json=args.json
        )
        logging.info(f"seed={seed} -> {target}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
