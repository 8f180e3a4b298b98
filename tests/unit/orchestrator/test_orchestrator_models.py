# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pathlib import Path

import pytest

from esbench.orchestrator.models import CampaignResult, RunFailure, RunOutcome


class TestRunOutcome:
    def test_succeeded_with_path(self):
        outcome = RunOutcome.succeeded(Path("results") / "benchmark_a.json")

        assert outcome.success
        assert outcome.result_ref == str(Path("results") / "benchmark_a.json")
        assert outcome.error is None

    def test_succeeded_without_reference(self):
        assert RunOutcome.succeeded().result_ref is None

    def test_failed(self):
        outcome = RunOutcome.failed("timeout")
        assert not outcome.success
        assert outcome.error == "timeout"


class TestCampaignResult:
    @pytest.mark.parametrize(
        "total,completed,expected",
        [(8, 7, 87.5), (4, 4, 100.0), (3, 0, 0.0), (0, 0, 0.0)],
    )
    def test_success_rate(self, total, completed, expected):
        result = CampaignResult(
            campaign_id="campaign_x",
            timestamp="2026-01-01T00:00:00.000Z",
            total_runs=total,
            completed_runs=completed,
            failed_runs=total - completed,
            execution_time_ms=1.0,
            configurations=[],
        )
        assert result.success_rate == expected

    def test_json_layout(self, base_config):
        result = CampaignResult(
            campaign_id="campaign_x",
            timestamp="2026-01-01T00:00:00.000Z",
            total_runs=2,
            completed_runs=1,
            failed_runs=1,
            execution_time_ms=12.5,
            configurations=[base_config],
            result_refs=["a.json"],
            failures=[RunFailure(label="test-campaign", repetition=2, error="boom")],
        )

        data = result.to_json_dict()

        assert data["campaignId"] == "campaign_x"
        assert data["completedRuns"] == 1
        assert data["configurations"][0]["indexName"] == "test-campaign"
        assert data["failures"] == [{"label": "test-campaign", "repetition": 2, "error": "boom"}]
