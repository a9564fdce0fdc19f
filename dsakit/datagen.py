"""Generate files of random integers for sorting and searching experiments."""

from __future__ import annotations

import argparse
import random
from pathlib import Path


def generate_files(
    output_dir: str | Path,
    num_files: int = 100,
    num_elements: int = 1_000_000,
    min_val: int = -200,
    max_val: int = 200,
    seed: int | None = None,
) -> list[Path]:
    """Write ``num_files`` files of random integers in ``[min_val, max_val]``.

    Files are named ``inputdata_type5_001.dat`` onwards; each holds
    ``num_elements`` values separated by single spaces. Returns the paths written.
    """
    if min_val > max_val:
        raise ValueError("min_val must not exceed max_val")
    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)
    rng = random.Random(seed)
    written: list[Path] = []
    for index in range(1, num_files + 1):
        path = directory / f"inputdata_type5_{index:03d}.dat"
        with path.open("w", encoding="utf-8") as handle:
            handle.write(
                "".join(f"{rng.randint(min_val, max_val)} " for _ in range(num_elements))
            )
        written.append(path)
    return written


def main(argv: list[str] | None = None) -> int:
    """Generate data files from command-line options."""
    parser = argparse.ArgumentParser(description="Generate random integer data files.")
    parser.add_argument("output_dir", nargs="?", default="data")
    parser.add_argument("--files", type=int, default=100)
    parser.add_argument("--elements", type=int, default=1_000_000)
    parser.add_argument("--min", dest="min_val", type=int, default=-200)
    parser.add_argument("--max", dest="max_val", type=int, default=200)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    try:
        paths = generate_files(
            args.output_dir,
            args.files,
            args.elements,
            args.min_val,
            args.max_val,
            args.seed,
        )
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}")
        return 1
    for path in paths:
        print(f"Created file: {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())