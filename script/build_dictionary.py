"""
Clean a raw word list into a dictionary file.

Features:
- Lowercases and strips every line; drops blanks.
- Keeps only plain a–z words of at least --min-length letters.
- Preserves first-seen order by default (stable dedupe).
- Optional alphabetical sort AFTER dedupe.
- Optional --include file (e.g. start.txt) merged in so every root word is
  also a dictionary word.

Usage:
    python -m script.build_dictionary --in raw_words.txt \
        --out packages/datasets/data/dictionary.txt \
        --include packages/datasets/data/start.txt --sort
"""

import argparse
from pathlib import Path

from packages.datasets.io import read_words, unique_preserve_order, write_lines


def clean(words: list[str], min_length: int) -> list[str]:
    kept = [w for w in words if w.isalpha() and w.isascii() and len(w) >= min_length]
    return unique_preserve_order(kept)


def main():
    ap = argparse.ArgumentParser(description="Build a clean dictionary word list.")
    ap.add_argument("--in", dest="inp", required=True, help="raw input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--include", help="extra word list merged into the output")
    ap.add_argument("--min-length", type=int, default=1, help="drop words shorter than this")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    words = read_words(inp)
    if args.include:
        words += read_words(args.include)

    out = clean(words, args.min_length)
    if args.sort:
        out = sorted(out)

    write_lines(out, outp)
    print(f"Input: {inp} ({len(words)} words) -> Output: {outp} ({len(out)} unique)")


if __name__ == "__main__":
    main()
