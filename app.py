# app.py

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.prompt import Prompt, IntPrompt, Confirm
from rich.table import Table

from config.config_loader import DEFAULT_CONFIG_PATH, load_config_or_defaults, save_config
from description.errors import InvalidInputSymbolError, TMSyntaxError
from tools.description_inspect import print_description
from tools.run_machine import describe_input_error, load_description, report, simulate
from tools.simulate_inputs import simulate_inputs, summarize

console = Console()

# === Utilities ===
def detect_programs(config):
    programs_dir = Path(config["programs_directory"])
    if not programs_dir.exists():
        return []
    return sorted(programs_dir.glob("*.tm"))

def choose_program(config):
    """List the .tm files in the programs directory and let the user pick one."""
    programs = detect_programs(config)
    if not programs:
        return Prompt.ask("Path to a .tm description")

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Index", justify="center")
    table.add_column("Program", justify="left")
    for idx, path in enumerate(programs):
        table.add_row(str(idx), path.name)
    console.print(table)

    idx_choice = IntPrompt.ask("Choose a program by Index", default=0)
    if idx_choice < 0 or idx_choice >= len(programs):
        console.print("[red]Invalid choice.[/red]")
        return None
    return str(programs[idx_choice])

def show_main_menu():
    console.print("\n[bold cyan]Multi-Tape Turing Machine Simulator[/bold cyan]")
    console.print("[1] Run a Machine")
    console.print("[2] Inspect a Description")
    console.print("[3] Simulate an Input Pool")
    console.print("[4] Edit Config")
    console.print("[5] Exit")

def run_and_report(program, word, config, max_steps=None, verbose=None):
    try:
        result, verdict = simulate(program, word, max_steps=max_steps, verbose=verbose, config=config)
    except (FileNotFoundError, TMSyntaxError) as e:
        console.print(f"[red]Error: {e}[/red]")
        return False
    except InvalidInputSymbolError as e:
        console.print("[red]Illegal input[/red]")
        console.print(describe_input_error(word, e), markup=False)
        return False
    report(result, verdict)
    return True

# === Menu Handlers ===
def handle_run(config):
    console.print("\n[bold]Run a Machine[/bold]")

    program = choose_program(config)
    if program is None:
        return
    word = Prompt.ask("Input word", default="")
    max_steps = IntPrompt.ask("Max Steps", default=config["max_steps"])
    verbose = Confirm.ask("Print every step?", default=config["verbose"])

    run_and_report(program, word, config, max_steps=max_steps, verbose=verbose)

def handle_inspect(config):
    console.print("\n[bold]Inspect a Description[/bold]")

    program = choose_program(config)
    if program is None:
        return
    try:
        print_description(load_description(program))
    except (FileNotFoundError, TMSyntaxError) as e:
        console.print(f"[red]Error: {e}[/red]")

def handle_simulate_pool(config):
    console.print("\n[bold]Simulate an Input Pool[/bold]")

    program = choose_program(config)
    if program is None:
        return
    pool_file = Prompt.ask("Pool file (one word per line)")
    if not Path(pool_file).exists():
        console.print(f"[red]Pool file not found: {pool_file}[/red]")
        return
    batch_size = IntPrompt.ask("Batch Size", default=256)
    max_steps = IntPrompt.ask("Max Steps", default=config["max_steps"])

    try:
        entries = simulate_inputs(program, pool_file, batch_size=batch_size, max_steps=max_steps, config=config)
    except (FileNotFoundError, TMSyntaxError) as e:
        console.print(f"[red]Error: {e}[/red]")
        return

    for verdict, count in sorted(summarize(entries).items()):
        console.print(f"  {verdict}: {count:,}")

def handle_edit_config(config, config_path):
    console.print("\n[bold]Edit Configuration[/bold]")

    max_steps = IntPrompt.ask("Max Steps (<= 0 for no limit)", default=config["max_steps"])
    verbose = Confirm.ask("Print every step by default?", default=config["verbose"])
    log_runs = Confirm.ask("Log runs?", default=config["log_runs"])
    programs_directory = Prompt.ask("Programs directory", default=config["programs_directory"])

    config.update({
        "max_steps": max_steps,
        "verbose": verbose,
        "log_runs": log_runs,
        "programs_directory": programs_directory
    })

    save_config(config, config_path)
    console.print("[green]Configuration updated successfully.[/green]")

def interactive_main(config_path):
    config = load_config_or_defaults(config_path)

    while True:
        show_main_menu()
        choice = Prompt.ask("\nChoose an option", choices=["1", "2", "3", "4", "5"], default="5")

        if choice == "1":
            handle_run(config)
        elif choice == "2":
            handle_inspect(config)
        elif choice == "3":
            handle_simulate_pool(config)
        elif choice == "4":
            handle_edit_config(config, config_path)
            config = load_config_or_defaults(config_path)
        elif choice == "5":
            console.print("[bold green]Goodbye![/bold green]")
            break

# === CLI Mode for Automation ===
def cli_main(args):
    config = load_config_or_defaults(args.config)
    ok = run_and_report(args.program, args.input, config, max_steps=args.max_steps,
                        verbose=True if args.verbose else None)
    if not ok:
        sys.exit(1)

def main():
    parser = argparse.ArgumentParser(description="Multi-Tape Turing Machine Simulator")
    parser.add_argument("--program", help="Run this .tm description immediately")
    parser.add_argument("--input", default="", help="Input word for --program")
    parser.add_argument("--max_steps", type=int, help="Step limit, overrides the config")
    parser.add_argument("--verbose", action="store_true", help="Print every step")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Runtime config file")
    args = parser.parse_args()

    if args.program:
        cli_main(args)
    else:
        interactive_main(args.config)

if __name__ == "__main__":
    main()
