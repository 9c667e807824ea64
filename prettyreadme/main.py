"""Main CLI entry point for prettyreadme."""

import sys
from pathlib import Path

import click

from .args import DocifyArgs
from .augment import find_fenced_blocks, insert_markers
from .config import Config
from .errors import DocifyError
from .links import SubstitutionRequest, count_links, rewrite_links
from .loader import load_readme, resolve_readme_path


def log(ctx: click.Context, message: str) -> None:
    """Echo progress to stderr when --verbose is set."""
    if ctx.obj["verbose"]:
        click.echo(message, err=True)


@click.group()
@click.version_option()
@click.option(
    "--config", "config_path", type=click.Path(dir_okay=False, path_type=Path), help="Path to config file",
)
@click.option("--verbose", "-v", is_flag=True, help="Report what was changed")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """Adapt README files for rustdoc embedding."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    try:
        ctx.obj["config"] = Config.from_file(config_path) if config_path else Config.load()
    except DocifyError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument("readme")
@click.argument("docs_url")
@click.argument("replacement")
@click.option("--project-root", type=click.Path(file_okay=False, path_type=Path), help="Directory README is relative to")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Write to file instead of stdout")
@click.pass_context
def docify(
    ctx: click.Context,
    readme: str,
    docs_url: str,
    replacement: str,
    project_root: Path | None,
    output: Path | None,
) -> None:
    """Augment Rust code blocks and replace DOCS_URL with REPLACEMENT."""
    config = ctx.obj["config"]

    try:
        args = DocifyArgs.from_args((readme, docs_url, replacement))
        readme_path = resolve_readme_path(args.readme_path, project_root or config.project_root)
        log(ctx, f"📖 Reading {readme_path}...")
        text = load_readme(readme_path, argument="readme_path")
    except DocifyError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)

    request = SubstitutionRequest(args.docs_url, args.replacement_url)
    found = find_fenced_blocks(text, config.languages)
    log(ctx, f"🦀 Augmenting {len(found)} Rust code block(s)")
    augmented = insert_markers(text, found)

    # The marker line can contain the target too
    log(ctx, f"🔗 Rewrote {count_links(augmented, request)} link(s)")
    result = rewrite_links(augmented, request)

    if output is None:
        # color=True: ANSI escapes are document content, not styling
        click.echo(result, nl=False, color=True)
        return

    with output.open("w", encoding="utf-8", newline="") as f:
        f.write(result)
    log(ctx, f"✅ Wrote {output}")


@cli.command()
@click.argument("readme")
@click.option("--project-root", type=click.Path(file_okay=False, path_type=Path), help="Directory README is relative to")
@click.pass_context
def blocks(ctx: click.Context, readme: str, project_root: Path | None) -> None:
    """List the Rust code blocks that docify would augment."""
    config = ctx.obj["config"]
    readme_path = resolve_readme_path(readme, project_root or config.project_root)

    try:
        text = load_readme(readme_path, argument="readme_path")
    except DocifyError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)

    found = find_fenced_blocks(text, config.languages)
    if not found:
        click.echo("No Rust code blocks found")
        return

    click.echo(f"Found {len(found)} Rust code block(s) in {readme_path}:\n")
    for block in found:
        click.echo(f"  • line {block.line_number}: ```{block.language} ({block.body_lines} line(s))")


def main() -> None:
    """Entry point for prettyreadme command."""
    cli(obj={})


if __name__ == "__main__":
    main()
