"""
Command line for the MONAD evaluator and solver.

Examples:
  alu-monad eval 39924989499969
  alu-monad trace 16811412161117 --program monad.yaml
  alu-monad solve -v
  alu-monad -v eval 16811412161117

Without --program the ALU_PROGRAM file is used, else the built-in puzzle program.
-v/--verbose is accepted before or after the subcommand.
Exit codes: 0 on success, 1 when solve finds nothing, 2 on bad input or unreadable program files.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from ..config import AluConfig
from ..core.monad.engine import run, trace_steps
from ..core.monad.errors import MonadError
from ..core.monad.program import PUZZLE_PROGRAM
from ..core.monad.types import Program
from ..core.solver import Solver
from .program_file import load_document, parse_digits

logger = logging.getLogger(__name__)


def setup_logging(level: str = "WARNING") -> None:
    """Configure the root logger once (repeat calls only change the level)."""
    root = logging.getLogger()
    if not any(getattr(h, "_alu_handler", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        handler._alu_handler = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))


def _resolve_program(path: Optional[Path], config: AluConfig) -> tuple[Program, Optional[tuple[int, ...]]]:
    path = path or config.program_path
    if path is None:
        logger.debug("using built-in puzzle program")
        return PUZZLE_PROGRAM, None
    logger.debug("loading program from %s", path)
    doc = load_document(path)
    return doc.program, doc.digits


def _resolve_digits(raw: Optional[str], fallback: Optional[tuple[int, ...]]) -> tuple[int, ...]:
    if raw is not None:
        return parse_digits(raw)
    if fallback is not None:
        return fallback
    raise MonadError("no digits given (pass DIGITS or add 'digits' to the program file)")


def _cmd_eval(args: argparse.Namespace, config: AluConfig) -> int:
    program, doc_digits = _resolve_program(args.program, config)
    digits = _resolve_digits(args.digits, doc_digits)
    final = run(program, digits, digit_range=config.digit_range)
    print(f"final_state={final}")
    print(f"valid={'true' if final == 0 else 'false'}")
    return 0


def _cmd_trace(args: argparse.Namespace, config: AluConfig) -> int:
    program, doc_digits = _resolve_program(args.program, config)
    digits = _resolve_digits(args.digits, doc_digits)
    for rec in trace_steps(program, digits, digit_range=config.digit_range):
        branch = "match" if rec.matched else "push"
        ins = rec.instruction
        print(f"{rec.index:>3} {ins.kind.value:<6} a={ins.a:>4} b={ins.b:>4} digit={rec.digit} {branch:<5} state={rec.state_after}")
    return 0


def _cmd_solve(args: argparse.Namespace, config: AluConfig) -> int:
    program, _ = _resolve_program(args.program, config)
    result = Solver(program, digits=config.digits).solve()
    if result.count == 0:
        print("no valid digit sequence")
        return 1
    print(f"Smallest: {result.smallest_number}")
    print(f"Largest: {result.largest_number}")
    print(f"Total matches: {result.count}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="alu-monad", description="Evaluate and solve MONAD Keep/Reduce programs.")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    # SUPPRESS keeps a subcommand from resetting a -v given before it
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-v", "--verbose", action="store_true", default=argparse.SUPPRESS, help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    program_help = "YAML/JSON program file (default: $ALU_PROGRAM or the built-in puzzle program)"

    p_eval = sub.add_parser("eval", parents=[common], help="Print the final state for a digit sequence")
    p_eval.add_argument("digits", nargs="?", help="Input digits, e.g. 13579246899999")
    p_eval.add_argument("--program", type=Path, help=program_help)
    p_eval.set_defaults(func=_cmd_eval)

    p_trace = sub.add_parser("trace", parents=[common], help="Print the state after every step")
    p_trace.add_argument("digits", nargs="?", help="Input digits, e.g. 13579246899999")
    p_trace.add_argument("--program", type=Path, help=program_help)
    p_trace.set_defaults(func=_cmd_trace)

    p_solve = sub.add_parser("solve", parents=[common], help="Find the smallest and largest valid digit sequences")
    p_solve.add_argument("--program", type=Path, help=program_help)
    p_solve.set_defaults(func=_cmd_solve)
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = AluConfig.from_env()
    setup_logging("DEBUG" if args.verbose else config.log_level)

    try:
        return int(args.func(args, config))
    except (MonadError, OSError) as exc:
        print(f"alu-monad error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
