"""CLI for PassCraft: generate, batch, score, history (list/clear)."""

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from rich import print
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .alphabet import CharacterClass, GenerationOptions, PRESETS, options_for_preset
from .batch import MIN_BATCH, MAX_BATCH, generate_batch, export_batch
from .config import load_config, save_config, options_from_config, config_from_options
from .errors import PassCraftError
from .generator import generate_password
from .history import load_history, save_history, add_record, clear_history
from .score import Strength, StrengthResult, score_password

logger = logging.getLogger(__name__)
console = Console()

LABELS = {
    Strength.WEAK: ("Weak", "red"),
    Strength.MEDIUM: ("Medium", "yellow"),
    Strength.STRONG: ("Strong", "green"),
    Strength.VERY_STRONG: ("Very strong", "bold green"),
}

def _resolve_options(args, cfg: Dict[str, Any]) -> GenerationOptions:
    """Saved settings, then --preset, then explicit per-class flags."""
    opts = options_from_config(cfg)
    if args.preset:
        opts = options_for_preset(args.preset, opts)
    classes = set(opts.classes)
    for cls in CharacterClass:
        flag = getattr(args, cls.value)
        if flag is True:
            classes.add(cls)
        elif flag is False:
            classes.discard(cls)
    return opts._replace(
        classes=frozenset(classes),
        length=opts.length if args.length is None else args.length,
        exclude_similar=opts.exclude_similar if args.exclude_similar is None else args.exclude_similar,
        exclude_ambiguous=opts.exclude_ambiguous if args.exclude_ambiguous is None else args.exclude_ambiguous,
    )

def _print_strength(result: StrengthResult) -> None:
    label, style = LABELS[result.category]
    header = f"Strength: {result.score} / 100 ([{style}]{label}[/{style}])"
    body = (
        f"Length:     {result.length_points:>2} / 40\n"
        f"Variety:    {result.variety_points:>2} / 40\n"
        f"Complexity: {result.complexity_points:>2} / 20"
    )
    print(Panel(body, title=header))

def _fail(message: str) -> int:
    print(f"[red]{escape(message)}[/red]")
    return 1

def cmd_generate(args) -> int:
    cfg = load_config()
    try:
        options = _resolve_options(args, cfg)
        logger.debug("resolved options: %s", options)
        pw = generate_password(options)
    except PassCraftError as e:
        return _fail(f"Cannot generate password: {e}")

    history_enabled = cfg["history_enabled"] if args.history is None else args.history
    cfg = config_from_options(options, cfg)
    cfg["history_enabled"] = history_enabled
    save_config(cfg)

    # soft_wrap: long passwords must not get line breaks inserted
    console.print(f"[bold green]Password:[/bold green] {escape(pw)}", soft_wrap=True)
    _print_strength(score_password(pw))

    if history_enabled:
        save_history(add_record(load_history(), pw))
    else:
        save_history([], enabled=False)
    return 0

def cmd_batch(args) -> int:
    cfg = load_config()
    try:
        options = _resolve_options(args, cfg)
        passwords = generate_batch(options, args.count)
    except PassCraftError as e:
        return _fail(f"Cannot generate passwords: {e}")

    save_config(config_from_options(options, cfg))

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", width=4)
    table.add_column("Strength")
    table.add_column("Password", overflow="fold")
    for i, pw in enumerate(passwords, start=1):
        result = score_password(pw)
        label, style = LABELS[result.category]
        table.add_row(str(i), f"[{style}]{result.score} {label}[/{style}]", escape(pw))
    print(table)

    if args.export is not None:
        try:
            out = export_batch(passwords, args.export or None)
        except OSError as e:
            return _fail(f"Failed to export passwords: {e}")
        print(f"[green]Exported {len(passwords)} passwords to:[/green] {escape(out)}")
    return 0

def cmd_score(args) -> int:
    _print_strength(score_password(args.password))
    return 0

def cmd_history_list(args) -> int:
    cfg = load_config()
    if not cfg["history_enabled"]:
        print("[yellow]History is disabled.[/yellow]")
        return 0
    records = load_history()
    if not records:
        print("[yellow]No history yet.[/yellow]")
        return 0
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", width=4)
    table.add_column("Generated (UTC)")
    table.add_column("Password", overflow="fold")
    for i, r in enumerate(records, start=1):
        table.add_row(str(i), r.timestamp[:16].replace("T", " "), escape(r.password))
    print(table)
    return 0

def cmd_history_clear(args) -> int:
    if not args.yes:
        confirm = input("Clear all password history? (yes/NO): ")
        if confirm.lower() != "yes":
            print("Aborted.")
            return 0
    clear_history()
    print("[green]History cleared.[/green]")
    return 0

def _add_generation_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--length", "-l", type=int, help="Password length")
    p.add_argument("--preset", "-p", type=str,
                   help=f"Character class preset: {', '.join(PRESETS)}")
    for cls in CharacterClass:
        p.add_argument(f"--{cls.value}", action=argparse.BooleanOptionalAction, default=None,
                       help=f"Include {cls.value}")
    p.add_argument("--exclude-similar", action=argparse.BooleanOptionalAction, default=None,
                   help="Leave out look-alike characters (0 O I l 1)")
    p.add_argument("--exclude-ambiguous", action=argparse.BooleanOptionalAction, default=None,
                   help="Leave out brackets, quotes, slashes and similar punctuation")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="passcraft")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate a password")
    _add_generation_args(gen)
    gen.add_argument("--history", action=argparse.BooleanOptionalAction, default=None,
                     help="Record the password in local history")
    gen.set_defaults(func=cmd_generate)

    bt = sub.add_parser("batch", help=f"Generate {MIN_BATCH}-{MAX_BATCH} passwords at once")
    _add_generation_args(bt)
    bt.add_argument("--count", "-n", type=int, default=10, help="How many passwords to generate")
    bt.add_argument("--export", "-o", nargs="?", const="", default=None,
                    help="Write the list to a text file (default: passwords_<date>.txt)")
    bt.set_defaults(func=cmd_batch)

    sc = sub.add_parser("score", help="Score a password")
    sc.add_argument("password", type=str, help="Password to evaluate (wrap in quotes)")
    sc.set_defaults(func=cmd_score)

    h = sub.add_parser("history", help="Password history")
    hsub = h.add_subparsers(dest="hcmd", required=True)

    h_list = hsub.add_parser("list", help="Show recent passwords, newest first")
    h_list.set_defaults(func=cmd_history_list)

    h_clear = hsub.add_parser("clear", help="Delete all history")
    h_clear.add_argument("--yes", "-y", action="store_true", help="Do not ask for confirmation")
    h_clear.set_defaults(func=cmd_history_clear)

    return parser

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )
    return args.func(args)

if __name__ == "__main__":
    sys.exit(main())
