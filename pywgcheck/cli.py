"""Defines the command-line interface for the wgcheck application.

This module uses the `click` library to create the CLI and `rich` to render
results. It is the entry point for checking configuration files, checking a
set of form fields, and managing settings. Only verdicts and error strings are
ever printed; configuration content is echoed back only when the user asks
for the rendered form config with `--print-config`.
"""
import json
import sys
import io
import click
import logging
from typing import Any, Dict, List, Optional, Tuple

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .core.config import Config
from .core.validator import validate_config, validate_form
from .utils.config_text import build_config_text

# Configure rich console for output.
console = Console(emoji=False, highlight=False)
err_console = Console(stderr=True, emoji=False, highlight=False)

logger = logging.getLogger(__name__)

FORM_OPTIONS = (
    ("private_key", "PrivateKey"),
    ("address", "Address"),
    ("dns", "DNS"),
    ("public_key", "PublicKey"),
    ("preshared_key", "PreSharedKey"),
    ("allowed_ips", "AllowedIPs"),
    ("keepalive", "PersistentKeepAlive"),
    ("endpoint", "Endpoint"),
)


class AliasedGroup(click.Group):
    """A custom click Group that supports command aliases and case-insensitivity."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._aliases: Dict[str, str] = {}

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        """Gets a command by name, checking for aliases and prefixes.

        Args:
            ctx: The click context.
            cmd_name: The command name entered by the user.

        Returns:
            The matched click command, or None.
        """
        cmd_name = cmd_name.lower()
        rv = super().get_command(ctx, cmd_name)
        if rv is not None:
            return rv
        if cmd_name in self._aliases:
            return super().get_command(ctx, self._aliases[cmd_name])
        matches = [x for x in self.list_commands(ctx) if x.startswith(cmd_name)]
        if not matches:
            return None
        if len(matches) == 1:
            return super().get_command(ctx, matches[0])
        ctx.fail(f"Ambiguous command: '{cmd_name}'. Matches: {', '.join(sorted(matches))}")
        return None

    def add_alias(self, alias: str, command_name: str) -> None:
        self._aliases[alias.lower()] = command_name.lower()


def _resolve_format(config_obj: Config, json_output: bool, md_output: bool) -> str:
    if json_output:
        return "json"
    if md_output:
        return "md"
    return config_obj.output_format()


def _apply_colors(config_obj: Config) -> None:
    console.no_color = not config_obj.get("colors", True)


def _log_level(verbose: bool, debug: bool, config_obj: Config) -> int:
    """Picks the log level from the flags, falling back to the `verbose` setting."""
    if debug:
        return logging.DEBUG
    if verbose or config_obj.get("verbose"):
        return logging.INFO
    return logging.WARNING


@click.group(cls=AliasedGroup, invoke_without_command=True, context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="pywgcheck")
@click.option("--verbose", is_flag=True, help="Enable verbose output.")
@click.option("--debug", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, verbose: bool, debug: bool) -> None:
    """Validate WireGuard tunnel configurations without storing them.

    wgcheck reads `[Interface]`/`[Peer]` configuration files, or the same
    fields given as options, and reports every problem it finds. Nothing you
    check is written to disk or to the logs.
    """
    if sys.platform == "win32" and isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(encoding='utf-8')
    log_level = _log_level(verbose, debug, Config())
    logging.basicConfig(level=log_level, format='%(asctime)s - %(levelname)s - %(message)s')
    logger.debug("Debug mode enabled.")

    if ctx.invoked_subcommand is None:
        console.print("Use 'wgcheck check <file>' to validate a config file, or 'wgcheck --help' for more commands.")


@main.command()
@click.argument("files", nargs=-1, required=True, type=click.File("r", encoding="utf-8-sig"))
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="Path to a custom settings file.")
@click.option("--json", "json_output", is_flag=True, help="Output results in JSON format.")
@click.option("--md", "md_output", is_flag=True, help="Output results in Markdown format.")
def check(files: Tuple[io.TextIOBase, ...], config_path: Optional[str], json_output: bool, md_output: bool) -> None:
    """Validate one or more configuration files.

    Use '-' to read a configuration from standard input. The command exits
    with status 1 if any file is invalid, unless `fail_on_invalid` is turned
    off in the settings.
    """
    config_obj = Config(config_path=config_path)
    _apply_colors(config_obj)

    all_results = []
    unreadable = []
    for handle in files:
        name = getattr(handle, "name", "-")
        source = "<stdin>" if name in ("-", "<stdin>") else click.format_filename(name)
        try:
            text = handle.read()
        except UnicodeDecodeError:
            err_console.print(f"[red]Could not read {escape(source)}: not valid UTF-8 text[/red]")
            unreadable.append(source)
            continue
        except OSError as e:
            err_console.print(f"[red]Could not read {escape(source)}: {escape(str(e.strerror))}[/red]")
            unreadable.append(source)
            continue
        result = validate_config(text)
        all_results.append({"source": source, **result.to_dict()})

    _emit(all_results, _resolve_format(config_obj, json_output, md_output))

    if unreadable:
        sys.exit(1)
    if config_obj.should_fail() and any(not r["valid"] for r in all_results):
        sys.exit(1)


@main.command()
@click.option("--private-key", help="Interface PrivateKey.")
@click.option("--address", help="Interface Address, a single CIDR block.")
@click.option("--dns", help="Interface DNS servers, comma separated.")
@click.option("--public-key", help="Peer PublicKey.")
@click.option("--preshared-key", help="Peer PreSharedKey.")
@click.option("--allowed-ips", help="Peer AllowedIPs, comma separated.")
@click.option("--keepalive", help="Peer PersistentKeepAlive in seconds.")
@click.option("--endpoint", help="Peer Endpoint as host:port.")
@click.option("--print-config", is_flag=True, help="Print the assembled config when the fields are valid.")
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="Path to a custom settings file.")
@click.option("--json", "json_output", is_flag=True, help="Output results in JSON format.")
@click.option("--md", "md_output", is_flag=True, help="Output results in Markdown format.")
def form(print_config: bool, config_path: Optional[str], json_output: bool, md_output: bool, **options: Optional[str]) -> None:
    """Validate configuration fields given as options.

    The fields follow the same rules as a configuration file, except that
    `--address` takes exactly one CIDR block.
    """
    config_obj = Config(config_path=config_path)
    _apply_colors(config_obj)

    fields = {name: options[option] for option, name in FORM_OPTIONS if options.get(option) is not None}
    result = validate_form(fields)

    if print_config and result.valid:
        click.echo(build_config_text(fields))
    else:
        _emit([{"source": "form", **result.to_dict()}], _resolve_format(config_obj, json_output, md_output))

    if config_obj.should_fail() and not result.valid:
        sys.exit(1)


def _emit(all_results: List[Dict[str, Any]], output: str) -> None:
    if output == "json":
        click.echo(json.dumps(all_results, indent=2))
    elif output == "md":
        click.echo(_format_results_as_markdown(all_results))
    else:
        _display_results(all_results)


def _format_results_as_markdown(all_results: List[Dict[str, Any]]) -> str:
    """Formats a list of validation results into a Markdown string.

    Args:
        all_results: A list of result dictionaries.

    Returns:
        A Markdown-formatted string representing the results.
    """
    markdown = ""
    for results in all_results:
        markdown += f"# Validation of `{results['source']}`\n\n"
        if results["valid"]:
            markdown += "Valid configuration.\n"
        else:
            markdown += "## Errors\n"
            for error in results["errors"]:
                markdown += f"- {error}\n"
        markdown += "\n---\n"
    return markdown


def _display_results(all_results: List[Dict[str, Any]]) -> None:
    """Displays validation results as rich tables with a closing summary.

    Args:
        all_results: A list of result dictionaries.
    """
    for results in all_results:
        source = escape(results["source"])
        if results["valid"]:
            console.print(f"[green]{source}: valid[/green]")
            continue

        table = Table(title=f"Errors in {source}")
        table.add_column("#", style="cyan", justify="right")
        table.add_column("Message")
        for i, error in enumerate(results["errors"], start=1):
            table.add_row(str(i), escape(error))
        console.print(table)

    invalid = [r for r in all_results if not r["valid"]]
    if invalid:
        total_errors = sum(len(r["errors"]) for r in invalid)
        console.print(Panel(f"{len(invalid)} of {len(all_results)} invalid, {total_errors} error(s).", style="red", title="Check Complete"))


@main.command()
@click.argument("action", type=click.Choice(['get', 'set', 'list', 'reset']), required=True)
@click.argument("key", type=str, required=False)
@click.argument("value", type=str, required=False)
def config(action: str, key: Optional[str], value: Optional[str]) -> None:
    """Manage the wgcheck settings.

    \b
    ACTION:
        get <key>         Get a setting.
        set <key> <value> Set a setting and save it to the user file.
        list              List all current settings.
        reset             Delete the user settings file.
    """
    config_obj = Config()
    if action == "list":
        console.print(Panel(escape(json.dumps(config_obj.config, indent=2)), title="Current Settings"))
    elif action == "get":
        if not key:
            click.echo("Error: 'get' action requires a key.", err=True)
            sys.exit(1)
        click.echo(config_obj.get(key))
    elif action == "set":
        if not key or value is None:
            click.echo("Error: 'set' action requires a key and a value.", err=True)
            sys.exit(1)
        processed_value = Config.coerce(key, value)
        config_obj.set(key, processed_value)
        try:
            config_obj.save_user_config()
            console.print(f"[green]'{escape(key)}' set to '{escape(str(processed_value))}' and saved to user config.[/green]")
        except IOError as e:
            click.echo(f"Error saving configuration: {e}", err=True)
            sys.exit(1)
    elif action == "reset":
        if Config.reset_user_config():
            console.print("[green]Configuration reset to defaults.[/green]")
        else:
            console.print("[yellow]No user configuration file to reset.[/yellow]")


main.add_alias('c', 'check')
main.add_alias('f', 'form')

if __name__ == "__main__":
    main()
