"""
CLI entry point for Employee Time Visualizer.

PURPOSE: Run the fetch -> aggregate -> render -> write pipeline once.

USAGE:
    # Generate both artifacts in the current directory
    python -m employee_time_visualizer

    # Or via CLI command (after install)
    employee-time-visualizer
    employee-time-visualizer --output-dir reports
    employee-time-visualizer --url https://example.test/api/entries --timeout 10

EXIT CODES:
    0  Artifacts written, or the source had no non-deleted entries
    1  Fetch failed, or an artifact could not be rendered or written
"""

from __future__ import annotations

import argparse
import logging
import sys
from functools import lru_cache
from typing import TYPE_CHECKING

from .config import Config
from .errors import DegenerateAggregateError, FetchError, RenderError

if TYPE_CHECKING:
    from .client import TimeEntryClient
    from .models import TimeEntry
    from .presenters import ChartPresenter
    from .statistics import StatisticsEngine
    from .storage import ArtifactStore

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


@lru_cache(maxsize=1)
def _get_logger() -> logging.Logger:
    """Get module logger (cached for thread safety)."""
    logging.basicConfig(level=logging.INFO)
    return logging.getLogger(__name__)


def _log(message: str, *, emoji: str = "") -> None:
    """Log message with optional emoji prefix for CLI output.

    Args:
        message: The message to log.
        emoji: Optional emoji prefix for visual CLI feedback.
    """
    prefix = f"{emoji} " if emoji else ""
    _get_logger().info(f"{prefix}{message}")


def _fetch_entries(
    client: TimeEntryClient | None,
    url: str | None,
    timeout: float | None,
) -> list[TimeEntry]:
    """Fetch entries, closing the client afterwards only if created here."""
    from .client import TimeEntryClient as Client

    if client is not None:
        return client.fetch_entries()
    with Client(url=url, timeout=timeout) as owned:
        return owned.fetch_entries()


def run_pipeline(
    client: TimeEntryClient | None = None,
    store: ArtifactStore | None = None,
    engine: StatisticsEngine | None = None,
    chart_presenter: ChartPresenter | None = None,
    *,
    url: str | None = None,
    timeout: float | None = None,
    output_dir: str | None = None,
) -> int:
    """
    Fetch time entries, aggregate them, and write the report and chart.

    Runs the stages strictly in sequence. Both artifacts are rendered in
    memory before anything touches the disk, then committed together.

    Business context: One run produces the two deliverables that
    management reviews: the ranked hours table and the share-of-hours
    pie chart.

    Error handling:
    - FetchError: logged, 'Error: ...' printed, no artifacts, exit 1
    - No non-deleted entries: message printed, no artifacts, exit 0
    - DegenerateAggregateError: chart skipped with a warning, a chart
      from a previous run removed, report still written, exit 0
    - RenderError: logged, 'Error: ...' printed, no artifacts, exit 1

    Args:
        client: Optional TimeEntryClient. The caller keeps ownership.
            Default: a client created and closed by this call.
        store: Optional ArtifactStore. Default: store on output_dir.
        engine: Optional StatisticsEngine. Default: new instance.
        chart_presenter: Optional ChartPresenter. Default: new instance
            sharing engine.
        url: Source URL for the default client. Default: Config.API_URL.
        timeout: Request timeout for the default client, in seconds.
        output_dir: Output directory for the default store. Default:
            current directory.

    Returns:
        Process exit code (EXIT_SUCCESS or EXIT_FAILURE).

    Example:
        >>> run_pipeline(output_dir="reports")
        Files generated successfully!
        - reports/employee_table.html
        - reports/employee_pie_chart.png
        0
    """
    from .presenters import ChartPresenter as Charts
    from .report import render_report_html
    from .statistics import StatisticsEngine as StatsEngine
    from .storage import ArtifactStore as Store

    engine = engine or StatsEngine()
    chart_presenter = chart_presenter or Charts(statistics=engine)
    store = store or Store(output_dir)

    _log("Fetching data from API...", emoji="🌐")
    try:
        entries = _fetch_entries(client, url, timeout)
    except FetchError as e:
        _get_logger().error(f"Fetch failed: {e}")
        # Note: Using print() intentionally for stdout piping support
        print(f"Error: {e}")
        return EXIT_FAILURE

    summaries = engine.aggregate(entries)
    if not summaries:
        _log(f"No active entries among {len(entries)} fetched; nothing to render", emoji="⚠️")
        print("No data retrieved from API.")
        return EXIT_SUCCESS

    _log(f"Aggregated {len(entries)} entries into {len(summaries)} employees", emoji="📊")

    try:
        artifacts = {Config.HTML_FILENAME: render_report_html(summaries).encode("utf-8")}
        obsolete: list[str] = []
        try:
            artifacts[Config.CHART_FILENAME] = chart_presenter.render_pie_chart(summaries)
        except DegenerateAggregateError as e:
            _log(f"Skipping pie chart: {e}", emoji="⚠️")
            # drop the chart from a previous run
            obsolete.append(Config.CHART_FILENAME)
        written = store.commit(artifacts, obsolete=obsolete)
    except RenderError as e:
        _get_logger().error(f"Rendering failed: {e}")
        print(f"Error: {e}")
        return EXIT_FAILURE

    print("Files generated successfully!")
    for path in written:
        print(f"- {path}")
    return EXIT_SUCCESS


def main() -> int:
    """
    Main CLI entry point for Employee Time Visualizer.

    Parses command-line arguments and runs the pipeline once. All
    arguments are optional; with none, the configured source is fetched
    and artifacts are written to the current directory.

    Business context: This is the entry point installed as the
    'employee-time-visualizer' console script, suitable for cron jobs
    and CI since the exit code reflects success.

    Options:
    - --output-dir DIR: Where to write the artifacts
    - --url URL: Override the time source endpoint
    - --timeout SECONDS: Override the request timeout

    Returns:
        Exit code 0 for success (including an empty dataset), 1 when the
        fetch or rendering failed.

    Raises:
        SystemExit: On --help, --version or argument parsing errors.

    Example:
        >>> # From command line:
        >>> # employee-time-visualizer --output-dir reports
        >>> sys.exit(main())  # Typical usage pattern
    """
    from .__version__ import __version__

    parser = argparse.ArgumentParser(
        prog="employee-time-visualizer",
        description="Employee Time Visualizer - Ranked hours report and pie chart",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory for the generated files (default: current directory)",
    )
    parser.add_argument(
        "--url",
        default=None,
        help="Time entries endpoint (default: built-in source)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help=f"Request timeout in seconds (default: {Config.REQUEST_TIMEOUT_SECONDS:g})",
    )

    args = parser.parse_args()

    return run_pipeline(url=args.url, timeout=args.timeout, output_dir=args.output_dir)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
