"""CLI for the pay equity engine.

Commands:
- predicted-pay: Fit the predicted-pay regression and write enriched jobs and chart data
- benefits: Detect female-class benefit disadvantages and write the benefits worksheet
- point-spread: Show the job point spread and the derived comparable value range
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Protocol

import typer
from rich import print as rprint
from rich.markup import escape

from . import __version__
from .application.benefits import run_benefits_check
from .application.job_inputs import load_jobs
from .application.predicted_pay import run_predicted_pay_report
from .config import AnalysisConfig
from .config_file import load_analysis_config_file
from .domain.benefits import point_spread
from .protocols import FileSystem


class DependenciesBuilder(Protocol):
    """Protocol for constructing CLI dependencies."""

    def __call__(self, *, config: AnalysisConfig) -> CliDependencies:
        """Build dependencies for CLI commands."""
        ...


@dataclass(frozen=True)
class CliDependencies:
    """Concrete dependencies required by the CLI."""

    fs: FileSystem


@dataclass(frozen=True)
class CliContext:
    """Runtime CLI context for a single command invocation."""

    config: AnalysisConfig
    deps: CliDependencies


class CliContextNotInitialisedError(typer.BadParameter):
    """Raised when CLI context is missing."""

    def __init__(self) -> None:
        super().__init__("CLI context is not initialised. Use the pay-equity entry point.")


def _get_context(ctx: typer.Context) -> CliContext:
    if not isinstance(ctx.obj, CliContext):
        raise CliContextNotInitialisedError()
    return ctx.obj


def _version_callback(value: bool) -> None:
    if value:
        rprint(f"pay-equity {__version__}")
        raise typer.Exit()


def _format_money(value: float) -> str:
    return f"${value:,.2f}"


def create_app(deps_builder: DependenciesBuilder) -> typer.Typer:
    """Create a Typer app wired with the provided dependencies builder."""
    app = typer.Typer(
        add_completion=False,
        help="Pay equity analysis: predicted-pay regression and benefits disparity detection",
    )

    @app.callback()
    def main(
        ctx: typer.Context,
        config_path: Annotated[
            Path | None,
            typer.Option(
                "--config",
                help="TOML config file (overrides environment values)",
            ),
        ] = None,
        version: Annotated[
            bool,
            typer.Option(
                "--version",
                callback=_version_callback,
                is_eager=True,
                help="Show the package version and exit",
            ),
        ] = False,
    ) -> None:
        """Initialise CLI context."""
        _ = version
        config = AnalysisConfig.from_env()
        deps = deps_builder(config=config)
        if config_path is not None:
            config = config.with_file_overrides(
                load_analysis_config_file(path=config_path, fs=deps.fs)
            )
        ctx.obj = CliContext(config=config, deps=deps)

    @app.command(name="predicted-pay")
    def predicted_pay(
        ctx: typer.Context,
        jobs_path: Annotated[
            Path | None,
            typer.Option(
                "--input",
                "-i",
                help="Jobs CSV (default: PAY_EQUITY_JOBS_PATH or data/jobs.csv)",
            ),
        ] = None,
        out_dir: Annotated[
            Path | None,
            typer.Option(
                "--output-dir",
                "-o",
                help="Directory for output files",
            ),
        ] = None,
    ) -> None:
        """Fit predicted pay over job points and flag over/under-paid classes."""
        state = _get_context(ctx)
        result = run_predicted_pay_report(
            jobs_path=jobs_path,
            out_dir=out_dir,
            config=state.config,
            fs=state.deps.fs,
        )
        regression = result.analysis.regression
        rprint("[green]✓ Predicted pay complete:[/green]")
        rprint(
            f"  {regression.eligible_count:,} eligible jobs, "
            f"{result.analysis.excluded_jobs:,} excluded"
        )
        rprint(
            f"  slope={regression.slope:.4f} intercept={regression.intercept:.4f} "
            f"r²={regression.r_squared:.4f}"
        )
        rprint(
            f"  Predicted pay range: {_format_money(regression.min_predicted_pay)} at "
            f"{regression.min_points:g} points → {_format_money(regression.max_predicted_pay)} "
            f"at {regression.max_points:g} points"
        )
        rprint(f"  jobs: {result.jobs_path}")
        rprint(f"  regression: {result.regression_path}")
        rprint(f"  chart: {result.chart_path}")

    @app.command()
    def benefits(
        ctx: typer.Context,
        jobs_path: Annotated[
            Path | None,
            typer.Option(
                "--input",
                "-i",
                help="Jobs CSV (default: PAY_EQUITY_JOBS_PATH or data/jobs.csv)",
            ),
        ] = None,
        contributions_path: Annotated[
            Path | None,
            typer.Option(
                "--contributions",
                "-c",
                help="Employer contributions CSV (job_number, employer_contribution)",
            ),
        ] = None,
        out_dir: Annotated[
            Path | None,
            typer.Option(
                "--output-dir",
                "-o",
                help="Directory for output files",
            ),
        ] = None,
        value_range: Annotated[
            float | None,
            typer.Option(
                "--range",
                min=0.0,
                help="Comparable value range in points (default: 10% of the point spread)",
            ),
        ] = None,
    ) -> None:
        """Check whether female classes receive lower benefits than comparable male classes."""
        state = _get_context(ctx)
        config = state.config
        if value_range is not None:
            config = config.with_overrides(comparable_value_range=value_range)
        result = run_benefits_check(
            jobs_path=jobs_path,
            contributions_path=contributions_path,
            out_dir=out_dir,
            config=config,
            fs=state.deps.fs,
        )
        worksheet = result.worksheet
        rprint(f"  Comparable value range: ±{worksheet.comparable_value_range:g} points")
        if worksheet.trigger_detected:
            rprint("[red]✗ Benefits disadvantage detected:[/red]")
            rprint(f"  {escape(worksheet.trigger_explanation)}")
        else:
            rprint("[green]✓ No benefits disadvantage detected[/green]")
        rprint(f"  worksheet: {result.worksheet_path}")

    @app.command(name="point-spread")
    def point_spread_command(
        ctx: typer.Context,
        jobs_path: Annotated[
            Path | None,
            typer.Option(
                "--input",
                "-i",
                help="Jobs CSV (default: PAY_EQUITY_JOBS_PATH or data/jobs.csv)",
            ),
        ] = None,
    ) -> None:
        """Show the job point spread and the comparable value range derived from it."""
        state = _get_context(ctx)
        config = state.config
        jobs = load_jobs(jobs_path or Path(config.jobs_path), state.deps.fs)
        spread = point_spread(jobs, fraction=config.comparable_value_fraction)
        rprint(f"  Lowest points: {spread.lowest_points}")
        rprint(f"  Highest points: {spread.highest_points}")
        rprint(f"  Point range: {spread.point_range}")
        rprint(f"  Comparable value range: ±{spread.comparable_value_range} points")

    _ = (main, predicted_pay, benefits, point_spread_command)

    return app
