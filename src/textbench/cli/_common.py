"""Shared CLI helpers: the tool factory, the run driver, exit codes."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..config import RunConfig, load_config
from ..exceptions import ConfigurationError, InputRootNotFoundError, TextBenchError
from ..logging_config import setup_logging
from ..reporting import MatplotlibSink, PlotSink, ThroughputReporter
from ..runner import InstrumentedRunner, RunResult
from ..transforms import get_transform

console = Console()
err_console = Console(stderr=True)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_FATAL = 2

# Exit status typer uses for bad arguments and unknown options
_PARSER_USAGE_STATUS = 2


def build_sink(config: RunConfig) -> Optional[PlotSink]:
    """Pick the plot sink for this run, or None when plotting is off."""
    if not config.show_plot and not config.plot_file:
        return None
    save_path = Path(config.plot_file) if config.plot_file else None
    return MatplotlibSink(save_path=save_path, interactive=config.show_plot)


def execute(
    transform_name: str,
    input_directory: Path,
    output_directory: Path,
    config: RunConfig,
    sink: Optional[PlotSink] = None,
) -> RunResult:
    """
    Run one transform over a tree and report the results.

    Raises:
        InputRootNotFoundError: If the input directory is unusable
    """
    transform = get_transform(transform_name)

    with err_console.status(f"[bold]{transform.description}[/bold]") as status:
        runner = InstrumentedRunner(
            transform,
            config=config,
            on_file=lambda sample: status.update(f"Processed {escape(sample.relative_path)}"),
        )
        result = runner.run(input_directory, output_directory)

    reporter = ThroughputReporter(
        transform,
        console=console,
        sink=sink,
        marker_style=config.marker_style,
        show_file_table=config.show_file_table,
    )
    reporter.report(result.samples, result.totals, result.failures)
    return result


def build_tool(transform_name: str) -> typer.Typer:
    """Build the single-command typer app for one transform."""
    transform = get_transform(transform_name)

    app = typer.Typer(
        name=f"textbench-{transform.name}",
        help=f"{transform.description}, mirroring the input tree and reporting throughput.",
        add_completion=False,
        rich_markup_mode="rich",
    )

    @app.command()
    def run(
        input_directory: Path = typer.Argument(
            ...,
            help="Directory tree to read",
        ),
        output_directory: Path = typer.Argument(
            ...,
            help="Directory the mirrored output tree is written to",
            file_okay=False,
        ),
        config: Optional[Path] = typer.Option(
            None,
            "--config",
            "-c",
            help="Configuration file path (TOML format)",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
        ),
        extension: Optional[str] = typer.Option(
            None,
            "--extension",
            "-e",
            help="File extension to process (default: .txt)",
        ),
        plot: Optional[bool] = typer.Option(
            None,
            "--plot/--no-plot",
            help="Show the throughput plot window",
        ),
        save_plot: Optional[Path] = typer.Option(
            None,
            "--save-plot",
            help="Save the throughput plot to this image file",
            dir_okay=False,
        ),
        follow_symlinks: Optional[bool] = typer.Option(
            None,
            "--follow-symlinks/--no-follow-symlinks",
            help="Follow symbolic links while walking the input tree",
        ),
        verbose: bool = typer.Option(
            False,
            "--verbose",
            "-v",
            help="Enable verbose (DEBUG) logging",
        ),
        quiet: bool = typer.Option(
            False,
            "--quiet",
            "-q",
            help="Suppress all but ERROR logging",
        ),
        log_file: Optional[Path] = typer.Option(
            None,
            "--log-file",
            help="Also append log records to this file",
            dir_okay=False,
        ),
    ) -> None:
        try:
            settings = load_config(
                config_file=config,
                extension=extension,
                show_plot=plot,
                plot_file=str(save_plot) if save_plot is not None else None,
                follow_symlinks=follow_symlinks,
                verbose=verbose,
                quiet=quiet,
                log_file=str(log_file) if log_file is not None else None,
            )
        except ConfigurationError as e:
            err_console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
            raise

        setup_logging(verbose=settings.verbose, quiet=settings.quiet, log_file=settings.log_file)

        try:
            execute(
                transform.name,
                input_directory,
                output_directory,
                settings,
                sink=build_sink(settings),
            )
        except InputRootNotFoundError as e:
            err_console.print(f"[red]Error:[/red] {escape(str(e))}")
            raise

    return app


def invoke(app: typer.Typer, argv: Optional[list[str]] = None) -> int:
    """
    Run a tool app and translate the outcome into a process exit code.

    Typer reports usage errors (wrong argument count, unknown options) by
    exiting with 2; those map to 1, since 2 is reserved for fatal run errors
    (any TextBenchError flagged ``fatal``) that the command reports and re-raises.
    """
    try:
        app(args=argv, prog_name=app.info.name)
    except SystemExit as e:
        code = e.code if isinstance(e.code, int) else EXIT_OK
        return EXIT_USAGE if code == _PARSER_USAGE_STATUS else code
    except TextBenchError as e:
        if not e.fatal:
            raise
        return EXIT_FATAL
    return EXIT_OK
