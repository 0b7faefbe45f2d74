import json
import logging

import click

from .analyzer import AnalysisError
from .config import AnalyzerConfig, RenderConfig
from .generator import OutputFormat, SchemaGenerator
from .model.signatures import SignatureSyntaxError
from .reflection import ClassModelError


def load_config(path):
    """Read the analyzer and render sections of a JSON config file."""
    with open(path) as f:
        data = json.load(f)

    if "analyzer" in data or "render" in data:
        return AnalyzerConfig.from_dict(data.get("analyzer", {})), RenderConfig.from_dict(data.get("render", {}))

    # A flat file only configures the analyzer
    return AnalyzerConfig.from_dict(data), RenderConfig()


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--format", "-f", "output_format", default="json", type=click.Choice([f.value for f in OutputFormat]))
@click.option("--output", "-o", default=None, type=click.Path(resolve_path=True), help="Write to a file instead of stdout")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log analysis progress")
@click.argument("model", type=click.Path(exists=True, resolve_path=True))
@click.argument("root", nargs=-1, required=True)
def class_schema(config, output_format, output, verbose, model, root):
    """Analyze ROOT types of the class MODEL into a schema registry."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    with open(model) as f:
        class_model = json.load(f)

    if config is not None:
        analyzer_config, render_config = load_config(config)
    else:
        analyzer_config, render_config = AnalyzerConfig(), RenderConfig()

    try:
        generator = SchemaGenerator(class_model, analyzer_config, render_config)
        result = generator.analyze(*root)
    except (AnalysisError, ClassModelError, SignatureSyntaxError) as e:
        raise click.ClickException(str(e)) from e

    out = generator.render(result, output_format)
    if output is None:
        click.echo(out, nl=False)
    else:
        with open(output, "w") as f:
            f.write(out)
