# tools/run_machine.py

import argparse
import sys
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path

from rich.console import Console

from config.config_loader import DEFAULT_CONFIG_PATH, load_config_or_defaults
from description.errors import InvalidInputSymbolError, TMSyntaxError
from description.parser import parse_description
from logger.logger import JSONLogger
from simulator.turing_machine import StepStatus

console = Console(highlight=False)

SEPARATOR = "-" * 45

@dataclass
class RunResult:
    steps: int
    halted: bool
    state: str
    output: str

# === Loading ===
def load_description(path):
    """Read a .tm file and parse it into a Description."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Description file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return parse_description(f.read())

# === Run Loop ===
def run_machine(machine, max_steps=None, verbose=False):
    """Step machine until it halts or max_steps calls were made. A limit <= 0 means no limit."""
    limit = max_steps if max_steps and max_steps > 0 else None

    while limit is None or machine.n_step() < limit:
        if machine.step(verbose) is StepStatus.HALTED:
            break

    return RunResult(
        steps=machine.n_step(),
        halted=machine.halted,
        state=machine.state.name,
        output=machine.output()
    )

def classify(result, description):
    if not result.halted:
        return "unfinished"
    if any(state.name == result.state for state in description.final_states):
        return "accepted"
    return "rejected"

# === Trace Rendering ===
def render_snapshot(snapshot):
    """Format one trace block: step, state, then index/tape/head rows for every tape."""
    lines = [
        f"Step   : {snapshot.step}",
        f"State  : {snapshot.state}"
    ]
    for i, view in enumerate(snapshot.tapes):
        indexes, symbols, heads = [], [], []
        for symbol, index in view.cells:
            label = str(abs(index))
            width = len(label)
            indexes.append(label)
            symbols.append(symbol.ljust(width))
            heads.append(("^" if index == view.head else "").ljust(width))
        lines.append(f"Index{i} : " + " ".join(indexes))
        lines.append(f"Tape{i}  : " + " ".join(symbols))
        lines.append(f"Head{i}  : " + " ".join(heads))
    lines = [line.rstrip() for line in lines]
    lines.append(SEPARATOR)
    return "\n".join(lines)

def print_snapshot(snapshot):
    console.print(render_snapshot(snapshot), markup=False)

def describe_input_error(word, error):
    """Point at the offending character of a rejected input word."""
    return "\n".join([
        f"Input: {word}",
        "       " + " " * error.index + "^",
        f"{error.symbol!r} at index {error.index} is not in the input alphabet."
    ])

# === End-to-End ===
def build_entry(program, word, result, verdict):
    entry = {"program": str(program), "input": word, "verdict": verdict}
    entry.update(asdict(result))
    entry["timestamp"] = datetime.now(timezone.utc).isoformat()
    return entry

def simulate(program, word, max_steps=None, verbose=None, config=None, logger=None):
    """Load program, check word, run the machine and log the run. Returns (result, verdict)."""
    config = config or load_config_or_defaults()
    if max_steps is None:
        max_steps = config["max_steps"]
    if verbose is None:
        verbose = config["verbose"]

    description = load_description(program)
    machine = description.build_machine(word, tracer=print_snapshot if verbose else None)
    result = run_machine(machine, max_steps=max_steps, verbose=verbose)
    verdict = classify(result, description)

    if config["log_runs"]:
        logger = logger or JSONLogger.from_config(config)
        logger.log_classified(build_entry(program, word, result, verdict))

    return result, verdict

def report(result, verdict):
    color = {
        "accepted": "green",
        "rejected": "red",
        "unfinished": "yellow"
    }[verdict]
    console.print(f"Result : {result.output}", markup=False)
    console.print(f"[{color}]{verdict.upper()}[/{color}] in state {result.state} after {result.steps:,} steps.")

# === CLI ===
def main(argv=None):
    parser = argparse.ArgumentParser(description="Run a multi-tape Turing machine on an input word.")
    parser.add_argument("program", help="Path to a .tm description")
    parser.add_argument("input", nargs="?", default="", help="Input word (default: empty)")
    parser.add_argument("--max_steps", type=int, help="Step limit, overrides the config (<= 0 for none)")
    parser.add_argument("--verbose", "-v", action="store_true", default=None, help="Print every step")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Runtime config file")
    args = parser.parse_args(argv)

    config = load_config_or_defaults(args.config)

    try:
        result, verdict = simulate(args.program, args.input, max_steps=args.max_steps,
                                   verbose=args.verbose, config=config)
    except FileNotFoundError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)
    except TMSyntaxError as e:
        console.print(f"[red]Syntax error in {args.program}:[/red] {e}")
        sys.exit(1)
    except InvalidInputSymbolError as e:
        console.print("[red]Illegal input[/red]")
        console.print(describe_input_error(args.input, e), markup=False)
        sys.exit(1)

    report(result, verdict)

if __name__ == "__main__":
    main()
