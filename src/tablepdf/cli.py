"""CLI interface for the table PDF generator."""

import json
import logging
from pathlib import Path

import click

from tablepdf.builder import create_pdf, record_layout
from tablepdf.config import RenderSettings, load_settings
from tablepdf.errors import LayoutError, TemplateError
from tablepdf.render.recording import placement_to_dict
from tablepdf.template import load_template
from tablepdf.utils.dimensions import PAGE_SIZES


def _build_settings(settings_path: Path | None, page_size: str | None, font_family: str | None) -> RenderSettings:
    """Load settings from file (or defaults) and apply CLI overrides."""
    settings = load_settings(settings_path) if settings_path else RenderSettings()

    updates = {}
    if page_size:
        updates["page_size"] = page_size.lower()
    if font_family:
        updates["font_family"] = font_family
    return settings.model_copy(update=updates)


@click.group()
@click.version_option(package_name="table-pdf-generator")
@click.option("-v", "--verbose", is_flag=True, help="Log layout progress to stderr.")
def main(verbose: bool) -> None:
    """Generate paginated PDF documents from JSON table templates."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("template_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "-o",
    "--output",
    type=click.Path(path_type=Path),
    help="Output PDF file path. Defaults to the template name with a .pdf extension.",
)
@click.option(
    "--settings",
    "settings_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a TOML settings file with a [render] table.",
)
@click.option(
    "--page-size",
    type=click.Choice(list(PAGE_SIZES.keys()), case_sensitive=False),
    help="Page size for the document.",
)
@click.option(
    "--font-family",
    type=str,
    help="Font family: Times (default), Helvetica or Courier.",
)
def render(
    template_path: Path,
    output: Path | None,
    settings_path: Path | None,
    page_size: str | None,
    font_family: str | None,
) -> None:
    """Render TEMPLATE_PATH to a PDF document."""
    try:
        settings = _build_settings(settings_path, page_size, font_family)
        template = load_template(template_path)

        if output is None:
            output = template_path.with_suffix(".pdf")

        pages = create_pdf(template, output, settings)
        click.echo(f"✓ PDF with {pages} page(s) saved to: {output}")

    except (TemplateError, LayoutError, FileNotFoundError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


@main.command()
@click.argument("template_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--settings",
    "settings_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a TOML settings file with a [render] table.",
)
@click.option(
    "--page-size",
    type=click.Choice(list(PAGE_SIZES.keys()), case_sensitive=False),
    help="Page size for the layout.",
)
def layout(template_path: Path, settings_path: Path | None, page_size: str | None) -> None:
    """
    Print the placement instructions for TEMPLATE_PATH as JSON lines.

    Each line is one text, image or line placement with its page number and
    absolute position in points.
    """
    try:
        settings = _build_settings(settings_path, page_size, None)
        surface = record_layout(load_template(template_path), settings)
        for placement in surface.placements:
            click.echo(json.dumps(placement_to_dict(placement)))

    except (TemplateError, LayoutError, FileNotFoundError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


@main.command()
@click.argument("template_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def validate(template_path: Path) -> None:
    """Check that TEMPLATE_PATH is a valid template."""
    try:
        template = load_template(template_path)
        row_count = sum(len(table.rows) for table in template.tables)
        click.echo(f"✓ Template is valid: {len(template.tables)} table(s), {row_count} row(s)")

    except (TemplateError, FileNotFoundError) as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
