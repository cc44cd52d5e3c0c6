#!/usr/bin/env python3
"""
Generate synthetic FASTA files for manual cryfa testing.
A few malformed records are mixed in so normalization has something to drop.
"""
import argparse
import sys
from pathlib import Path

import numpy as np

BASES = np.frombuffer(b"ACGT", dtype=np.uint8)


def random_sequence(rng, length):
    """Random DNA sequence as bytes."""
    return BASES[rng.integers(0, len(BASES), size=length)].tobytes()


def wrap_lines(seq, width):
    return [seq[i:i + width] for i in range(0, len(seq), width)]


def generate_fasta(rng, records, length, width, malformed_every):
    """Build the FASTA bytes; every Nth record gets a space in one sequence line."""
    out = []
    for index in range(records):
        lines = wrap_lines(random_sequence(rng, length), width)
        if malformed_every and index % malformed_every == malformed_every - 1:
            line_no = int(rng.integers(0, len(lines)))
            lines[line_no] = lines[line_no][:width // 2] + b" " + lines[line_no][width // 2:]
        out.append(b">seq%d synthetic\n" % index)
        out.extend(line + b"\n" for line in lines)
    return b"".join(out)


def main():
    parser = argparse.ArgumentParser(description="Generate a synthetic FASTA file")
    parser.add_argument("output", help="destination path")
    parser.add_argument("-n", "--records", type=int, default=100)
    parser.add_argument("-l", "--length", type=int, default=1000, help="bases per record")
    parser.add_argument("-w", "--width", type=int, default=60, help="bases per line")
    parser.add_argument("--malformed-every", type=int, default=10,
                        help="put a space in every Nth record (0 disables)")
    parser.add_argument("--seed", type=int, default=0)
    args = parser.parse_args()

    rng = np.random.default_rng(args.seed)
    data = generate_fasta(rng, args.records, args.length, args.width, args.malformed_every)
    output_path = Path(args.output)
    output_path.write_bytes(data)

    size_kb = output_path.stat().st_size / 1024
    print(f"  ✓ {output_path.name}: {args.records} records, {size_kb:.1f} KB")
    return 0


if __name__ == "__main__":
    sys.exit(main())
