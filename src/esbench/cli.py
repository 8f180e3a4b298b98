# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Command line interface of esbench."""

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter

from esbench.common.config import CampaignCLIConfig, ChartsCLIConfig, Groups
from esbench.common.config.cli_parameter import CLIParameter

app = App(
    name="esbench",
    help="Sweep search-engine benchmark configurations and aggregate the results into chart data.",
)


@app.command(name="campaign")
def campaign(config: Annotated[CampaignCLIConfig, Parameter(name="*")]) -> None:
    """Run a parameter sweep campaign.

    Examples:
        esbench campaign --variable documentsPerBatch --min 100 --max 1000 --increment 300 --repetitions 3
        esbench campaign --variable indexType --repetitions 2 --chart-name "Index Type Comparison"
    """
    from esbench.cli_runner import run_campaign_command

    run_campaign_command(config)


@app.command(name="charts")
def charts(
    config: Annotated[ChartsCLIConfig | None, Parameter(name="*")] = None,
) -> None:
    """Aggregate result files and export chart data.

    Examples:
        esbench charts
        esbench charts --list
        esbench charts --chart-name "Batch Size Scaling" --output-dir data/charts
    """
    from esbench.cli_runner import run_charts_command

    run_charts_command(config or ChartsCLIConfig())


@app.command(name="clear-cache")
def clear_cache(
    results_dir: Annotated[
        Path | None,
        CLIParameter(name=("--results-dir",), group=Groups.AGGREGATION),
    ] = None,
    cache_file: Annotated[
        Path | None,
        CLIParameter(name=("--cache-file",), group=Groups.AGGREGATION),
    ] = None,
    verbose: Annotated[
        bool,
        CLIParameter(name=("--verbose", "-v"), group=Groups.OUTPUT),
    ] = False,
) -> None:
    """Delete the aggregation cache.

    Parameters
    ----------
    results_dir
        Results directory the cache belongs to. Defaults to ESBENCH_RESULTS_DIR.
    cache_file
        Cache file to delete. Defaults to <results-dir>/../cache/aggregations.json.
    verbose
        Enable debug logging.
    """
    from esbench.cli_runner import run_clear_cache_command

    run_clear_cache_command(results_dir=results_dir, cache_file=cache_file, verbose=verbose)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
