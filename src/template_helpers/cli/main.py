from collections.abc import Sequence
from pathlib import Path

import typer
from jinja2 import TemplateError
from rich.console import Console
from rich.text import Text

from template_helpers.config import HelperSettings
from template_helpers.errors import HelperError
from template_helpers.templating import build_registry, create_environment
from template_helpers.utilities.logger import configure_library_logging

app = typer.Typer(help="Render Jinja2 templates with helper functions")


def parse_var_pairs(pairs: Sequence[str] | None) -> dict[str, str]:
    """Parse repeatable key=value pairs into a dict."""
    parsed: dict[str, str] = {}
    for raw_pair in pairs or ():
        if "=" not in raw_pair:
            raise typer.BadParameter(f"invalid --var '{raw_pair}'. Expected key=value.")
        raw_key, value = raw_pair.split("=", 1)
        key = raw_key.strip()
        if not key:
            raise typer.BadParameter(f"invalid --var '{raw_pair}'. Key cannot be empty.")
        parsed[key] = value
    return parsed


@app.command()
def render(
    template: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="Template file to render"
    ),
    var: list[str] = typer.Option(None, "--var", "-v", help="Context value as key=value"),
    output: Path = typer.Option(None, "--output", "-o", help="Write to a file instead of stdout"),
    base_dir: Path = typer.Option(
        None, "--base-dir", help="Directory relative file paths resolve against"
    ),
    log_level: str = typer.Option("warning", "--log-level", help="Logging level"),
):
    """
    Render a template file with every helper available.
    """
    configure_library_logging(log_level)
    context = parse_var_pairs(var)
    settings = HelperSettings.from_env(base_dir=base_dir)
    env = create_environment(settings)

    try:
        rendered = env.from_string(template.read_text(encoding="utf-8")).render(context)
    except (HelperError, TemplateError) as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    if output is None:
        typer.echo(rendered, nl=False)
        return
    try:
        output.write_text(rendered, encoding="utf-8")
    except OSError as exc:
        typer.echo(f"error: cannot write {output}: {exc.strerror or exc}", err=True)
        raise typer.Exit(code=1) from exc


@app.command("helpers")
def list_helpers():
    """
    List registered helpers and their signatures.
    """
    console = Console(soft_wrap=True, highlight=False)
    registry = build_registry(HelperSettings.from_env())
    for helper in sorted(registry, key=lambda h: h.name):
        console.print(Text(str(helper.signature), style="cyan"))
        if helper.signature.description:
            console.print(Text(f"    {helper.signature.description}", style="dim"))


if __name__ == "__main__":
    app()
