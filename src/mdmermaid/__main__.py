"""CLI entry point for mdmermaid."""

import logging
import sys

import click

from mdmermaid.config import RenderConfig
from mdmermaid.pipeline import render, render_document


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--escape", "escape_html", is_flag=True, help="Escape HTML in the document before rendering")
@click.option("--extensions", "-x", "extensions", is_flag=True, help="Enable wiki links, heading ids, callouts, blockquotes and tables")
@click.option("--document", "-D", "document", is_flag=True, help="Wrap the output in the viewer container")
@click.option("--diagram-tag", "diagram_tag", type=str, default="mermaid", help="Fence tag marking diagram blocks")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Log diagram processing to stderr")
def main(
    input: str | None,
    output: str | None,
    escape_html: bool,
    extensions: bool,
    document: bool,
    diagram_tag: str,
    verbose: bool,
) -> None:
    """Render Markdown with Mermaid flowcharts to HTML."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if input:
        try:
            with open(input, encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    config = RenderConfig(diagram_tag=diagram_tag, escape_html=escape_html, extensions=extensions)
    rendered = render_document(text, config) if document else render(text, config)

    if output:
        try:
            with open(output, "w", encoding="utf-8") as f:
                f.write(rendered + "\n")
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered)


if __name__ == "__main__":
    main()
