"""CLI entry point for spk-openapi."""

from pathlib import Path

import click

from spk_openapi.config import CustomizerConfig
from spk_openapi.customizer import OpenApiCustomizer
from spk_openapi.errors import SpecificationNotFoundError
from spk_openapi.model import Document
from spk_openapi.render import dump_json, dump_yaml


def _render(document: Document, output: Path | None, fmt: str) -> str:
    """Render document as YAML or JSON, guessing from the output suffix for 'auto'."""
    if fmt == "auto":
        fmt = "json" if output is not None and output.suffix.lower() == ".json" else "yaml"

    if fmt == "json":
        return dump_json(document)
    return dump_yaml(document)


@click.group()
def main():
    """SPK OpenAPI: add standard security schemes and headers to OpenAPI documents."""
    pass


@main.command()
@click.argument("source")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output file. Defaults to stdout.")
@click.option("--format", "fmt", default="auto", type=click.Choice(["auto", "yaml", "json"]), help="Output format.")
@click.option(
    "--security-schemes/--no-security-schemes",
    default=True,
    envvar="SPK_OPENAPI_SECURITY_SCHEMES",
    help="Add the SpkToken and BasicAuth security schemes.",
)
@click.option(
    "--standard-headers/--no-standard-headers",
    default=True,
    envvar="SPK_OPENAPI_STANDARD_HEADERS",
    help="Add X-Application-Id, X-Correlation-Id and X-Request-Origin to every operation.",
)
def customize(source: str, output: Path | None, fmt: str, security_schemes: bool, standard_headers: bool):
    """Customize the OpenAPI document at SOURCE (a file or package:resource)."""
    config = CustomizerConfig(with_security_schemes=security_schemes, with_standard_headers=standard_headers)
    customizer = OpenApiCustomizer.from_config(config)

    click.echo(f"Reading {source}...", err=True)
    try:
        document = customizer.load_and_customize(source)
    except SpecificationNotFoundError as e:
        raise click.ClickException(str(e)) from e

    click.echo(
        f"Customized {len(document.paths)} paths "
        f"(security schemes: {'on' if security_schemes else 'off'}, "
        f"standard headers: {'on' if standard_headers else 'off'}).",
        err=True,
    )

    result = _render(document, output, fmt)
    if output is None:
        click.echo(result, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(result, encoding="utf-8")
    click.echo(f"Customized specification saved to {output}", err=True)
