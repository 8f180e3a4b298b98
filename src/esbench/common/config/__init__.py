# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from esbench.common.config.base_config import BaseConfig, CamelModel
from esbench.common.config.benchmark_config import (
    BenchmarkConfig,
    FieldDefinition,
    FullTextSearch,
    FuzzySearch,
    IndexType,
    ProductStructureConfig,
    SearchQueries,
    SweepTag,
    SweepValue,
    UpdateConfig,
)
from esbench.common.config.campaign_config import (
    CampaignCLIConfig,
    CampaignConfig,
    VariableType,
    VariationSpec,
)
from esbench.common.config.charts_config import ChartsCLIConfig
from esbench.common.config.cli_parameter import CLIParameter
from esbench.common.config.config_defaults import (
    AggregationDefaults,
    BenchmarkDefaults,
    CampaignDefaults,
    OutputDefaults,
)
from esbench.common.config.groups import Groups

__all__ = [
    "AggregationDefaults",
    "BaseConfig",
    "BenchmarkConfig",
    "BenchmarkDefaults",
    "CLIParameter",
    "CamelModel",
    "CampaignCLIConfig",
    "CampaignConfig",
    "CampaignDefaults",
    "ChartsCLIConfig",
    "FieldDefinition",
    "FullTextSearch",
    "FuzzySearch",
    "Groups",
    "IndexType",
    "OutputDefaults",
    "ProductStructureConfig",
    "SearchQueries",
    "SweepTag",
    "SweepValue",
    "UpdateConfig",
    "VariableType",
    "VariationSpec",
]
