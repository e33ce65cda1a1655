"""
cli.py — command line front end for dpalign

Usage:
    dpalign GATTACA GCATGCA
    dpalign --fasta1 a.fasta --fasta2 b.fasta --mode local --csv out.csv
    dpalign --example dna-indel --match 2 --mismatch -1 --gap -2 --image m.png

Prints the text report to stdout and writes any requested exports.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from . import default
from .aligners import AlignmentMode, align_sequences
from .dp_core import ScoringScheme
from .export import format_report, write_csv, write_matrix_csv, write_report

LOG = logging.getLogger("dpalign.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dpalign",
        description="Global (Needleman-Wunsch) or local (Smith-Waterman) pairwise alignment",
    )
    parser.add_argument("seq1", nargs="?", help="First sequence (raw text)")
    parser.add_argument("seq2", nargs="?", help="Second sequence (raw text)")
    parser.add_argument("--fasta1", type=str, default=None,
                        help="Read the first sequence from a FASTA/text file")
    parser.add_argument("--fasta2", type=str, default=None,
                        help="Read the second sequence from a FASTA/text file")
    parser.add_argument("--example", type=str, default=None,
                        choices=sorted(default.EXAMPLES),
                        help="Use a built-in example pair")
    parser.add_argument("--mode", "-m", type=str, default=AlignmentMode.GLOBAL.value,
                        choices=[mode.value for mode in AlignmentMode],
                        help="Alignment mode (default: global)")
    parser.add_argument("--match", type=int, default=default.DEFAULT_MATCH,
                        help=f"Match score (default: {default.DEFAULT_MATCH})")
    parser.add_argument("--mismatch", type=int, default=default.DEFAULT_MISMATCH,
                        help=f"Mismatch score (default: {default.DEFAULT_MISMATCH})")
    parser.add_argument("--gap", type=int, default=default.DEFAULT_GAP,
                        help=f"Gap score (default: {default.DEFAULT_GAP})")
    parser.add_argument("--report", type=str, default=None,
                        help="Write the text report to this path")
    parser.add_argument("--csv", type=str, default=None,
                        help="Write summary and alignment columns as CSV")
    parser.add_argument("--matrix-csv", type=str, default=None,
                        help="Write the DP score matrix as CSV")
    parser.add_argument("--image", type=str, default=None,
                        help="Save the score matrix heatmap (png, pdf, svg, ...)")
    parser.add_argument("--dpi", type=int, default=150,
                        help="Resolution for --image (default: 150)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")
    return parser


def _read_inputs(args: argparse.Namespace, parser: argparse.ArgumentParser):
    positional = [seq for seq in (args.seq1, args.seq2) if seq is not None]
    files = (args.fasta1, args.fasta2)

    if args.example is not None:
        if positional or any(path is not None for path in files):
            parser.error("--example cannot be combined with sequences or --fasta1/--fasta2")
        return default.get_example(args.example)

    # positional sequences fill, in order, the slots no file claimed
    raw = [None, None]
    for k, path in enumerate(files):
        if path is not None:
            with open(path, encoding="utf-8") as fh:
                raw[k] = fh.read()
    free = [k for k in range(2) if raw[k] is None]
    if len(positional) > len(free):
        parser.error("too many sequences: each --fasta1/--fasta2 replaces one positional sequence")
    for k, seq in zip(free, positional):
        raw[k] = seq
    if raw[0] is None or raw[1] is None:
        parser.error("two sequences are required (positional, --fasta1/--fasta2 or --example)")
    return raw[0], raw[1]


def _use_plot_backend() -> None:
    """Select the non-interactive backend; ImportError if the plot extra is missing."""
    import matplotlib
    import seaborn  # noqa: F401
    matplotlib.use("Agg")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.image:
        # checked before anything is written
        try:
            _use_plot_backend()
        except ImportError as err:
            sys.stderr.write(
                f"{parser.prog}: error: --image requires {err.name or 'matplotlib'}; "
                'install with: pip install "dpalign[plot]"\n'
            )
            return 1

    scoring = ScoringScheme(match=args.match, mismatch=args.mismatch, gap=args.gap)
    try:
        raw1, raw2 = _read_inputs(args, parser)
        result = align_sequences(raw1, raw2, scoring=scoring, mode=args.mode)

        sys.stdout.write(format_report(result))
        if args.report:
            LOG.info("Saved report to: %s", write_report(result, args.report))
        if args.csv:
            LOG.info("Saved CSV to: %s", write_csv(result, args.csv))
        if args.matrix_csv:
            LOG.info("Saved matrix CSV to: %s", write_matrix_csv(result, args.matrix_csv))
        if args.image:
            from .export import save_matrix_image
            LOG.info("Saved image to: %s", save_matrix_image(result, args.image, dpi=args.dpi))
    except (ValueError, OSError) as err:
        sys.stderr.write(f"{parser.prog}: error: {err}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
