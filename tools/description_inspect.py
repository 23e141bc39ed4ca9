# tools/description_inspect.py

import argparse
import sys

from rich.console import Console
from rich.table import Table

from description.errors import TMSyntaxError
from simulator.symbols import WILDCARD
from tools.run_machine import load_description

console = Console(highlight=False)

def covers(earlier, later, blank):
    """True when every configuration that fires later would fire earlier first."""
    if earlier.trigger_state != later.trigger_state:
        return False
    for earlier_sym, later_sym in zip(earlier.trigger_symbols, later.trigger_symbols):
        if earlier_sym == later_sym:
            continue
        if earlier_sym == WILDCARD and later_sym != blank:
            continue
        return False
    return True

def find_shadowed(description):
    """Map the index of each unreachable transition to the index of the one that wins over it."""
    shadowed = {}
    transitions = description.transitions
    for j, later in enumerate(transitions):
        for i in range(j):
            if covers(transitions[i], later, description.blank):
                shadowed[j] = i
                break
    return shadowed

def names(states):
    return "{" + ", ".join(state.name for state in states) + "}"

def print_description(description):
    console.print("\n[bold]=== Machine ===[/bold]")
    console.print(f"  States: {names(description.states)}", markup=False)
    console.print(f"  Input Alphabet: {{{', '.join(description.input_alphabet)}}}", markup=False)
    console.print(f"  Tape Alphabet: {{{', '.join(description.tape_alphabet)}}}", markup=False)
    console.print(f"  Blank: {description.blank}", markup=False)
    console.print(f"  Initial State: {description.initial_state.name}", markup=False)
    console.print(f"  Final States: {names(description.final_states)}", markup=False)
    console.print(f"  Tapes: {description.num_tapes}")

    shadowed = find_shadowed(description)

    table = Table(title="Transitions (priority order)", show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right")
    table.add_column("State")
    table.add_column("Read")
    table.add_column("Write")
    table.add_column("Move")
    table.add_column("Next")
    table.add_column("Note")

    for idx, transition in enumerate(description.transitions):
        note = f"[yellow]shadowed by #{shadowed[idx]}[/yellow]" if idx in shadowed else ""
        table.add_row(
            str(idx),
            transition.trigger_state.name,
            "".join(transition.trigger_symbols),
            "".join(transition.result_symbols),
            "".join(d.value for d in transition.directions),
            transition.result_state.name,
            note
        )
    console.print(table)

    if shadowed:
        console.print(f"[yellow]{len(shadowed)} transition(s) can never fire.[/yellow]")

def main(argv=None):
    parser = argparse.ArgumentParser(description="Turing Machine Description Inspector")
    parser.add_argument("--program", required=True, help="Path to a .tm description")
    args = parser.parse_args(argv)

    try:
        description = load_description(args.program)
    except (FileNotFoundError, TMSyntaxError) as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    print_description(description)

if __name__ == "__main__":
    main()
