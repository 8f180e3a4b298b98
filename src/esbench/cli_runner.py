# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import asyncio
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from esbench.common.config import (
    CampaignCLIConfig,
    ChartsCLIConfig,
    OutputDefaults,
)
from esbench.common.environment import Environment
from esbench.common.exceptions import ConfigValidationError, DriverLoadError
from esbench.common.logging import setup_rich_logging

if TYPE_CHECKING:
    from esbench.orchestrator.aggregation.chart_data import ChartData
    from esbench.orchestrator.models import CampaignResult

logger = logging.getLogger(__name__)


def _resolve_cache_file(results_dir: Path, cache_file: Path | None) -> Path:
    from esbench.orchestrator.aggregation.stream import default_cache_file

    return cache_file or Environment.CACHE_FILE or default_cache_file(results_dir)


def run_campaign_command(config: CampaignCLIConfig) -> None:
    """Generate and execute a parameter sweep campaign, persisting one file per run."""
    from esbench.common.config import CampaignConfig
    from esbench.orchestrator.orchestrator import CampaignExecutor
    from esbench.orchestrator.runners import create_benchmark_runner, load_driver
    from esbench.orchestrator.variations import (
        create_base_config,
        generate_chart_name,
        generate_configurations,
        get_config_value,
    )
    from esbench.persistence.result_store import ResultFileStore

    setup_rich_logging(verbose=config.verbose)

    results_dir = config.results_dir or Environment.RESULTS_DIR
    chart_name = config.chart_name or generate_chart_name(config.variable)

    try:
        base_config = create_base_config(
            index_name=config.index_prefix,
            index_type=config.index_type,
            batches=config.batches,
            docs_per_batch=config.docs_per_batch,
            additional_fields=config.additional_fields,
            total_words=config.total_words,
            chart_name=chart_name,
        )
        campaign_config = CampaignConfig(
            base_config=base_config,
            variations=config.to_variation_spec(),
            repetitions=config.repetitions,
        )
        configurations = generate_configurations(
            campaign_config.base_config, campaign_config.variations
        )
        driver = load_driver(config.driver)
    except (ConfigValidationError, DriverLoadError) as e:
        logger.error(f"Invalid campaign configuration: {e}")
        sys.exit(1)

    values = [get_config_value(c, config.variable) for c in configurations]

    logger.info("=" * 80)
    logger.info("Starting Parameter Sweep Campaign")
    logger.info(f"  Variable: {config.variable} = {values}")
    logger.info(f"  Chart name: {chart_name}")
    logger.info(
        f"  Total runs: {len(configurations) * config.repetitions} "
        f"({len(configurations)} configs x {config.repetitions} repetitions)"
    )
    logger.info(
        f"  Base config: {base_config.number_of_batches} batches x "
        f"{base_config.documents_per_batch} docs, {base_config.index_type} index"
    )
    logger.info(f"  Driver: {config.driver}")
    logger.info(f"  Results directory: {results_dir}")
    logger.info("=" * 80)

    executor = CampaignExecutor(cooldown_seconds=config.cooldown_seconds, logger=logger)
    run_fn = create_benchmark_runner(driver, ResultFileStore(results_dir))

    try:
        result = executor.run(configurations, campaign_config.repetitions, run_fn)
    except Exception:
        logger.exception("Error executing campaign")
        raise

    _print_campaign_summary(result, chart_name, results_dir)

    if result.total_runs and result.completed_runs == 0:
        logger.error("All runs failed. Please check the error messages above.")
        sys.exit(1)


def _print_campaign_summary(
    result: "CampaignResult", chart_name: str, results_dir: Path
) -> None:
    logger.info("=" * 80)
    logger.info(f"Campaign {result.campaign_id} complete")
    logger.info(f"  Total runs: {result.total_runs}")
    logger.info(f"  Successful: {result.completed_runs}")
    logger.info(f"  Failed: {result.failed_runs}")
    logger.info(f"  Success rate: {result.success_rate:.1f}%")
    logger.info(
        f"  Total duration: {result.execution_time_ms:.0f}ms "
        f"({result.execution_time_ms / 1000:.2f}s)"
    )
    if result.total_runs:
        logger.info(
            f"  Average per run: {result.execution_time_ms / result.total_runs:.2f}ms"
        )
    logger.info(f"  Results: {len(result.result_refs)} file(s) in {results_dir}")
    logger.info(f"  Chart name: {chart_name}")
    for failure in result.failures:
        logger.warning(
            f"  Failed: {failure.label} (repetition {failure.repetition}): {failure.error}"
        )
    logger.info("=" * 80)


def run_charts_command(config: ChartsCLIConfig) -> None:
    """Aggregate the result directory and export chart data as JSON and CSV."""
    from esbench.exporters.chart import (
        ChartDataCsvExporter,
        ChartDataJsonExporter,
        ChartExporterConfig,
    )
    from esbench.orchestrator.aggregation.chart_data import (
        assemble,
        assemble_one,
        available_dataset_names,
    )
    from esbench.orchestrator.aggregation.stream import StreamAggregator

    setup_rich_logging(verbose=config.verbose)

    results_dir = config.results_dir or Environment.RESULTS_DIR
    aggregator = StreamAggregator(
        max_parallel=config.max_parallel or Environment.AGGREGATION_MAX_PARALLEL,
        enable_cache=not config.no_cache,
        cache_file=_resolve_cache_file(results_dir, config.cache_file),
        logger=logger,
    )
    datasets = aggregator.reduce(results_dir)
    names = available_dataset_names(datasets)

    if config.list_charts:
        logger.info(f"Available charts ({len(names)}):")
        for name in names:
            dataset = datasets[name]
            logger.info(
                f"  {name} [{dataset.variable}]: {len(dataset.samples)} value(s), "
                f"{dataset.sample_count} run(s)"
            )
        return

    if config.chart_name:
        chart = assemble_one(datasets, config.chart_name)
        if chart is None:
            logger.error(
                f"Chart '{config.chart_name}' not found. "
                f"Available charts: {', '.join(names) if names else 'none'}"
            )
            sys.exit(1)
        charts = [chart]
    else:
        charts = assemble(datasets)

    if not charts:
        logger.warning(
            f"No chart datasets found in {results_dir}. "
            f"Only results with a chart name are aggregated."
        )
        return

    output_dir = config.output_dir or OutputDefaults.CHARTS_DIR
    exporter_config = ChartExporterConfig(chart_data=charts, output_dir=output_dir)

    async def export_artifacts(exp_config: ChartExporterConfig) -> tuple[Path, Path]:
        """Export chart data to JSON and CSV concurrently."""
        json_exporter = ChartDataJsonExporter(exp_config)
        csv_exporter = ChartDataCsvExporter(exp_config)

        json_path, csv_path = await asyncio.gather(
            json_exporter.export(),
            csv_exporter.export(),
        )
        return json_path, csv_path

    json_path, csv_path = asyncio.run(export_artifacts(exporter_config))

    _print_chart_summary(charts)
    logger.info(f"Chart JSON written to: {json_path}")
    logger.info(f"Chart CSV written to: {csv_path}")


def _print_chart_summary(charts: list["ChartData"]) -> None:
    logger.info("=" * 80)
    for chart in charts:
        logger.info(f"{chart.dataset_name} ({chart.swept_field_name})")
        for point in chart.points:
            stats = point.stats
            logger.info(
                f"  {point.value}: indexing {stats.indexing.mean}ms, "
                f"search {stats.search.mean}ms, update {stats.update.mean}ms, "
                f"total {stats.total.mean}ms (n={stats.total.count})"
            )
    logger.info("=" * 80)


def run_clear_cache_command(
    results_dir: Path | None = None,
    cache_file: Path | None = None,
    verbose: bool = False,
) -> None:
    """Delete the aggregation cache so the next charts run re-reads every result file."""
    from esbench.orchestrator.aggregation.cache import AggregationCache

    setup_rich_logging(verbose=verbose)

    results_dir = results_dir or Environment.RESULTS_DIR
    cache = AggregationCache(_resolve_cache_file(results_dir, cache_file), logger=logger)
    if not cache.clear():
        logger.info(f"No aggregation cache at {cache.cache_file}")
