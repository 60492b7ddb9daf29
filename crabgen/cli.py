import logging
import traceback
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn

from crabgen.codegen.codegen import Codegen
from crabgen.config import get_config

console = Console()
app = typer.Typer(
    name='crabgen',
    help='Generate Rust API objects and typestate builders from records documents',
    no_args_is_help=True,
)


@app.command()
def generate(
    config: Annotated[
        str | None,
        typer.Option(
            '--config', '-c', help='Path to configuration file (YAML or JSON)'
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option('--verbose', '-v', help='Show debug logging')
    ] = False,
) -> None:
    """Generate Rust code from configuration.

    If no config file is specified, will look for crabgen.yaml / crabgen.yml
    or a [tool.crabgen] table in pyproject.toml in the current directory.

    Examples:
        crabgen generate
        crabgen generate --config my-config.yaml
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(message)s',
        handlers=[RichHandler(console=console, show_path=False)],
    )

    try:
        config = get_config(config)

        for document_config in config.documents:
            with Progress(
                SpinnerColumn(),
                TextColumn('[progress.description]{task.description}'),
                console=console,
            ) as progress:
                task = progress.add_task(
                    f'Generating code for {document_config.source} in {document_config.output}...',
                    total=None,
                )

                written = Codegen(document_config, config.generator).generate()

                progress.update(
                    task,
                    description=f'Code generation completed for {document_config.source}!',
                )
            console.print('[dim]Generated files:[/dim]')
            console.print(f'  - {written}')

        console.print('[green]Successfully generated code[/green]')

    except Exception as e:
        console.print(f'[red]Error:[/red] {str(e)}')
        if verbose:
            traceback.print_exc()
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show the version of crabgen."""
    from crabgen import __version__

    console.print(f'crabgen version: {__version__}')


if __name__ == '__main__':
    app()
