# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pathlib import Path
from typing import Annotated

from pydantic import Field

from esbench.common.config.base_config import BaseConfig
from esbench.common.config.cli_parameter import CLIParameter
from esbench.common.config.groups import Groups

__all__ = ["ChartsCLIConfig"]


class ChartsCLIConfig(BaseConfig):
    """Options of the ``esbench charts`` command."""

    results_dir: Annotated[
        Path | None,
        Field(description="Directory holding benchmark result files. Defaults to ESBENCH_RESULTS_DIR."),
        CLIParameter(name=("--results-dir",), group=Groups.AGGREGATION),
    ] = None

    chart_name: Annotated[
        str | None,
        Field(description="Only export the dataset with this name."),
        CLIParameter(name=("--chart-name",), group=Groups.AGGREGATION),
    ] = None

    max_parallel: Annotated[
        int | None,
        Field(ge=1, description="Maximum number of result files read concurrently. Defaults to ESBENCH_AGGREGATION_MAX_PARALLEL."),
        CLIParameter(name=("--max-parallel",), group=Groups.AGGREGATION),
    ] = None

    no_cache: Annotated[
        bool,
        Field(description="Ignore and do not write the aggregation cache."),
        CLIParameter(name=("--no-cache",), group=Groups.AGGREGATION),
    ] = False

    cache_file: Annotated[
        Path | None,
        Field(description="Aggregation cache file. Defaults to ESBENCH_CACHE_FILE or <results-dir>/../cache/aggregations.json."),
        CLIParameter(name=("--cache-file",), group=Groups.AGGREGATION),
    ] = None

    list_charts: Annotated[
        bool,
        Field(description="List available dataset names and exit."),
        CLIParameter(name=("--list",), group=Groups.OUTPUT),
    ] = False

    output_dir: Annotated[
        Path | None,
        Field(description="Directory chart data exports are written to."),
        CLIParameter(name=("--output-dir",), group=Groups.OUTPUT),
    ] = None

    verbose: Annotated[
        bool,
        Field(description="Enable debug logging."),
        CLIParameter(name=("--verbose", "-v"), group=Groups.OUTPUT),
    ] = False
