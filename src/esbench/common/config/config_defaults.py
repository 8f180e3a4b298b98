# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class BenchmarkDefaults:
    INDEX_TYPE = "standard"
    NUMBER_OF_BATCHES = 10
    DOCUMENTS_PER_BATCH = 100
    ADDITIONAL_FIELDS = 1
    TOTAL_WORDS = 10
    FUZZINESS = "AUTO"
    FULL_TEXT_TERMS = ("product", "electronic", "device", "news", "article")
    FUZZY_TERMS = ("produc", "electro", "devic", "nws", "articl")


@dataclass(frozen=True)
class CampaignDefaults:
    REPETITIONS = 3
    COOLDOWN_SECONDS = 0.0
    DRIVER = "simulated"
    BASE_INDEX_PREFIX = "cli-campaign"


@dataclass(frozen=True)
class AggregationDefaults:
    MAX_PARALLEL = 6
    ENABLE_CACHE = True
    CACHE_FILE_NAME = "aggregations.json"
    PROGRESS_LOG_INTERVAL = 50


@dataclass(frozen=True)
class OutputDefaults:
    RESULTS_DIR = Path("data/results")
    CHARTS_DIR = Path("data/charts")
    RESULT_FILE_PREFIX = "benchmark_"
    RESULT_FILE_SUFFIX = ".json"
