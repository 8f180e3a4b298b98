# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Sequential campaign executor."""

import logging
import time
from datetime import datetime, timezone
from pathlib import Path

from esbench.common.config.benchmark_config import BenchmarkConfig
from esbench.common.config.campaign_config import CampaignConfig
from esbench.common.exceptions import ConfigValidationError
from esbench.orchestrator.models import (
    CampaignResult,
    ProgressCallback,
    RunFailure,
    RunFunction,
    RunOutcome,
)
from esbench.orchestrator.variations import generate_configurations

__all__ = [
    "CampaignExecutor",
    "run_campaign",
]


def _generate_campaign_id(started_at: datetime) -> str:
    return "campaign_" + started_at.isoformat(timespec="milliseconds").replace(
        "+00:00", "Z"
    ).replace(":", "-").replace(".", "-")


class CampaignExecutor:
    """Runs every configuration of a campaign, one repetition at a time.

    Execution is configuration-major: all repetitions of the first
    configuration, then all of the second, and so on. A failing run is
    recorded and the executor moves on; nothing is retried and the campaign
    is never aborted by a run.
    """

    def __init__(
        self,
        cooldown_seconds: float = 0.0,
        progress_callback: ProgressCallback | None = None,
        logger: logging.Logger | None = None,
    ):
        """Initialize CampaignExecutor.

        Args:
            cooldown_seconds: Pause between consecutive runs (must be >= 0)
            progress_callback: Called with (runs_done, total_runs) after each
                configuration's repetitions complete
            logger: Logger to report progress on (defaults to this module's)
        """
        if cooldown_seconds < 0:
            raise ConfigValidationError(
                f"Invalid cooldown duration: {cooldown_seconds} seconds. "
                f"Cooldown must be non-negative (0 or greater)."
            )
        self.cooldown_seconds = cooldown_seconds
        self.progress_callback = progress_callback
        self.logger = logger or logging.getLogger(__name__)

    def run(
        self,
        configurations: list[BenchmarkConfig],
        repetitions: int,
        run_fn: RunFunction,
    ) -> CampaignResult:
        """Execute ``repetitions`` runs of every configuration.

        Args:
            configurations: Configurations to run, in order
            repetitions: Runs per configuration (must be >= 1)
            run_fn: Executes one run. It may return a RunOutcome, a result
                reference (str or Path), or None; raising marks the run failed.

        Returns:
            CampaignResult with counts, successful result references and failures
        """
        if repetitions < 1:
            raise ConfigValidationError(
                f"Invalid repetitions: {repetitions}. Each configuration must run at least once."
            )

        started_at = datetime.now(timezone.utc)
        start = time.perf_counter()
        campaign_id = _generate_campaign_id(started_at)
        total_runs = len(configurations) * repetitions

        self.logger.info(
            f"Starting campaign {campaign_id}: {total_runs} runs "
            f"({len(configurations)} configs x {repetitions} repetitions)"
        )

        result_refs: list[str] = []
        failures: list[RunFailure] = []
        completed_runs = 0
        runs_done = 0

        for config_index, config in enumerate(configurations):
            label = config.index_name
            self.logger.info("=" * 80)
            self.logger.info(f"Configuration {config_index + 1}/{len(configurations)}: {label}")
            self.logger.info("=" * 80)

            for repetition in range(1, repetitions + 1):
                outcome = self._execute_single_run(run_fn, config)
                runs_done += 1

                if outcome.success:
                    completed_runs += 1
                    if outcome.result_ref is not None:
                        result_refs.append(outcome.result_ref)
                    self.logger.info(
                        f"[{repetition}/{repetitions}] {label} completed successfully"
                    )
                else:
                    failures.append(
                        RunFailure(
                            label=label,
                            repetition=repetition,
                            error=outcome.error or "unknown error",
                        )
                    )
                    self.logger.error(
                        f"[{repetition}/{repetitions}] {label} failed: {outcome.error}"
                    )

                if runs_done < total_runs and self.cooldown_seconds > 0:
                    self.logger.debug(f"Applying cooldown: {self.cooldown_seconds}s")
                    time.sleep(self.cooldown_seconds)

            self.logger.info(
                f"Campaign progress: {runs_done / total_runs * 100:.1f}% ({runs_done}/{total_runs})"
            )
            if self.progress_callback is not None:
                self.progress_callback(runs_done, total_runs)

        execution_time_ms = (time.perf_counter() - start) * 1000
        result = CampaignResult(
            campaign_id=campaign_id,
            timestamp=started_at.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            total_runs=total_runs,
            completed_runs=completed_runs,
            failed_runs=len(failures),
            execution_time_ms=round(execution_time_ms, 2),
            configurations=configurations,
            result_refs=result_refs,
            failures=failures,
        )

        self.logger.info(
            f"All runs complete: {result.completed_runs}/{result.total_runs} successful "
            f"({result.success_rate:.1f}%), {result.failed_runs} failed, "
            f"{execution_time_ms / 1000:.2f}s"
        )
        return result

    def _execute_single_run(self, run_fn: RunFunction, config: BenchmarkConfig) -> RunOutcome:
        """Call ``run_fn`` once and normalize whatever it returns into a RunOutcome."""
        try:
            returned = run_fn(config)
        except Exception as e:
            self.logger.debug(f"Run of {config.index_name} raised", exc_info=True)
            return RunOutcome.failed(f"{type(e).__name__}: {e}")

        if isinstance(returned, RunOutcome):
            return returned
        if returned is None or isinstance(returned, str | Path):
            return RunOutcome.succeeded(returned)
        return RunOutcome.succeeded(str(returned))


def run_campaign(
    campaign_config: CampaignConfig,
    run_fn: RunFunction,
    executor: CampaignExecutor | None = None,
) -> CampaignResult:
    """Generate the configuration space, then execute it.

    Generation errors are raised before the first run starts.
    """
    configurations = generate_configurations(
        campaign_config.base_config, campaign_config.variations
    )
    executor = executor or CampaignExecutor()
    return executor.run(configurations, campaign_config.repetitions, run_fn)
