# tools/simulate_inputs.py

import argparse
import json
from pathlib import Path

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, BarColumn, TextColumn, TimeElapsedColumn

from config.config_loader import DEFAULT_CONFIG_PATH, load_config_or_defaults
from description.errors import InvalidInputSymbolError
from logger.logger import JSONLogger
from tools.run_machine import build_entry, classify, load_description, run_machine

console = Console(highlight=False)

EMPTY_WORD = "-"

# === Utility Loaders ===
def load_input_pool(pool_file):
    """One word per line; a line holding only '-' is the empty word."""
    words = []
    with open(pool_file, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip()
            if not word:
                continue
            words.append("" if word == EMPTY_WORD else word)
    return words

def load_checkpoint(checkpoint_path):
    if checkpoint_path.exists():
        with open(checkpoint_path, "r", encoding="utf-8") as f:
            checkpoint = json.load(f)
        return checkpoint.get("completed", [])
    return []

def save_checkpoint(completed, checkpoint_path):
    with open(checkpoint_path, "w", encoding="utf-8") as f:
        json.dump({"completed": completed}, f, indent=4)

# === Main Simulation Runner ===
def simulate_inputs(program, pool_file, output_name="results", batch_size=256, max_steps=None, config=None):
    """Run program on every word of pool_file, resuming from the checkpoint. Returns the new entries."""
    config = config or load_config_or_defaults()
    if max_steps is None:
        max_steps = config["max_steps"]

    description = load_description(program)

    pool_name = Path(pool_file).stem
    results_folder = Path(config["results_directory"]) / pool_name
    results_folder.mkdir(parents=True, exist_ok=True)
    results_file = results_folder / f"{output_name}.jsonl"
    checkpoint_file = results_folder / f"{output_name}_checkpoint.json"

    all_words = load_input_pool(pool_file)
    completed = load_checkpoint(checkpoint_file)
    done = set(completed)

    # each distinct word runs once, in pool order
    pending_words = list(dict.fromkeys(w for w in all_words if w not in done))
    console.print(f"Loaded {len(all_words):,} input words. {len(pending_words):,} pending.")

    logger = JSONLogger.from_config(config) if config["log_runs"] else None
    all_entries = []

    with open(results_file, "a", encoding="utf-8") as results_fh:
        for batch_start in range(0, len(pending_words), batch_size):
            batch = pending_words[batch_start:batch_start + batch_size]

            with Progress(
                    SpinnerColumn(),
                    BarColumn(),
                    "[progress.percentage]{task.percentage:>3.0f}%",
                    TextColumn("{task.completed}/{task.total} Inputs"),
                    TimeElapsedColumn(),
                    console=console,
                    transient=True
            ) as progress:

                task = progress.add_task("[cyan]Simulating...", total=len(batch))
                batch_results = []

                for word in batch:
                    try:
                        machine = description.build_machine(word)
                    except InvalidInputSymbolError as e:
                        entry = {
                            "program": str(program),
                            "input": word,
                            "verdict": "illegal_input",
                            "index": e.index
                        }
                    else:
                        result = run_machine(machine, max_steps=max_steps)
                        entry = build_entry(program, word, result, classify(result, description))

                    batch_results.append(entry)
                    completed.append(word)
                    done.add(word)
                    progress.update(task, advance=1)

            # write once per batch, then checkpoint
            for entry in batch_results:
                results_fh.write(json.dumps(entry) + "\n")
            results_fh.flush()
            save_checkpoint(completed, checkpoint_file)

            if logger is not None:
                for entry in batch_results:
                    if entry["verdict"] != "illegal_input":
                        logger.log_classified(entry)

            all_entries.extend(batch_results)
            console.print(f"[INFO] Batch {batch_start // batch_size + 1} completed. Checkpoint saved.", markup=False)

    console.print(f"[green]All inputs simulated. Results saved to {results_file}[/green]")
    return all_entries

def summarize(entries):
    counts = {}
    for entry in entries:
        counts[entry["verdict"]] = counts.get(entry["verdict"], 0) + 1
    return counts

# === CLI ===
def main(argv=None):
    parser = argparse.ArgumentParser(description="Run one Turing machine over a pool of input words with checkpointing.")
    parser.add_argument("--program", required=True, help="Path to a .tm description")
    parser.add_argument("--pool", required=True, help="Path to input pool file (one word per line, '-' for empty)")
    parser.add_argument("--output", default="results", help="Output result file name (default: results)")
    parser.add_argument("--batch_size", type=int, default=256, help="Batch size per save/checkpoint")
    parser.add_argument("--max_steps", type=int, help="Step limit, overrides the config")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Runtime config file")
    args = parser.parse_args(argv)

    config = load_config_or_defaults(args.config)
    entries = simulate_inputs(
        args.program,
        args.pool,
        args.output,
        batch_size=args.batch_size,
        max_steps=args.max_steps,
        config=config
    )
    for verdict, count in sorted(summarize(entries).items()):
        console.print(f"  {verdict}: {count:,}")

if __name__ == "__main__":
    main()
