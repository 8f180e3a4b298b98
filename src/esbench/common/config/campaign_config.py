# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from enum import Enum
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, Field, field_validator

from esbench.common.config.base_config import BaseConfig
from esbench.common.config.benchmark_config import BenchmarkConfig, IndexType
from esbench.common.config.cli_parameter import CLIParameter
from esbench.common.config.config_defaults import BenchmarkDefaults, CampaignDefaults
from esbench.common.config.groups import Groups

__all__ = [
    "CampaignCLIConfig",
    "CampaignConfig",
    "VariableType",
    "VariationSpec",
]


class VariableType(str, Enum):
    """Configuration fields a campaign can sweep."""

    NUMBER_OF_BATCHES = "numberOfBatches"
    DOCUMENTS_PER_BATCH = "documentsPerBatch"
    DESCRIPTION_WORD_LENGTH = "descriptionWordLength"
    ADDITIONAL_FIELDS = "additionalFields"
    TOTAL_WORDS = "totalWords"
    INDEX_TYPE = "indexType"
    NUMBER_OF_UPDATE_BATCHES = "numberOfUpdateBatches"
    DOCUMENTS_PER_UPDATE_BATCH = "documentsPerUpdateBatch"
    FUZZINESS = "fuzziness"

    def __str__(self) -> str:
        return self.value


def _split_comma_values(v: str | list[str] | None) -> list[str] | None:
    if v is None:
        return None
    if isinstance(v, str):
        v = [v]
    parts = [part.strip() for item in v for part in str(item).split(",")]
    return [part for part in parts if part]


class VariationSpec(BaseModel):
    """What to sweep: a numeric range or an explicit list of values.

    Exactly one form is used. When ``values`` is given the numeric bounds are
    ignored. Bounds are checked when configurations are generated, not here.
    """

    variable: VariableType
    min: int | float | None = None
    max: int | float | None = None
    increment: int | float | None = None
    values: list[str] | None = None

    @field_validator("values", mode="before")
    @classmethod
    def parse_values_list(cls, v: str | list[str] | None) -> list[str] | None:
        return _split_comma_values(v)

    @property
    def is_enumerated(self) -> bool:
        return self.values is not None


class CampaignConfig(BaseModel):
    """A base configuration, what to vary, and how many times to repeat each value."""

    base_config: BenchmarkConfig
    variations: VariationSpec
    repetitions: int = CampaignDefaults.REPETITIONS


class CampaignCLIConfig(BaseConfig):
    """Options of the ``esbench campaign`` command."""

    variable: Annotated[
        VariableType,
        Field(description="Configuration field to sweep."),
        CLIParameter(name=("--variable",), group=Groups.PARAMETER_SWEEP),
    ]

    min_value: Annotated[
        float | None,
        Field(description="Lower bound of a numeric sweep (inclusive)."),
        CLIParameter(name=("--min",), group=Groups.PARAMETER_SWEEP),
    ] = None

    max_value: Annotated[
        float | None,
        Field(description="Upper bound of a numeric sweep (inclusive)."),
        CLIParameter(name=("--max",), group=Groups.PARAMETER_SWEEP),
    ] = None

    increment: Annotated[
        float | None,
        Field(description="Step of a numeric sweep. Must be positive."),
        CLIParameter(name=("--increment",), group=Groups.PARAMETER_SWEEP),
    ] = None

    values: Annotated[
        list[str] | None,
        Field(
            description="Explicit comma-separated values to sweep instead of a numeric range "
            "(e.g. --values standard,ngram,stemming). Sweeping indexType without values tests every index type.",
        ),
        CLIParameter(name=("--values",), group=Groups.PARAMETER_SWEEP),
    ] = None

    repetitions: Annotated[
        int,
        Field(ge=1, description="Number of times each configuration is run."),
        CLIParameter(name=("--repetitions",), group=Groups.PARAMETER_SWEEP),
    ] = CampaignDefaults.REPETITIONS

    index_type: Annotated[
        IndexType,
        Field(description="Base index type."),
        CLIParameter(name=("--index-type",), group=Groups.BASE_CONFIGURATION),
    ] = IndexType.STANDARD

    batches: Annotated[
        int,
        Field(ge=1, description="Base number of indexing batches."),
        CLIParameter(name=("--batches",), group=Groups.BASE_CONFIGURATION),
    ] = BenchmarkDefaults.NUMBER_OF_BATCHES

    docs_per_batch: Annotated[
        int,
        Field(ge=1, description="Base number of documents per indexing batch."),
        CLIParameter(name=("--docs-per-batch",), group=Groups.BASE_CONFIGURATION),
    ] = BenchmarkDefaults.DOCUMENTS_PER_BATCH

    additional_fields: Annotated[
        int,
        Field(ge=0, description="Base number of generated text fields besides the name."),
        CLIParameter(name=("--additional-fields",), group=Groups.BASE_CONFIGURATION),
    ] = BenchmarkDefaults.ADDITIONAL_FIELDS

    total_words: Annotated[
        int,
        Field(ge=0, description="Base number of words spread across the generated text fields."),
        CLIParameter(name=("--total-words",), group=Groups.BASE_CONFIGURATION),
    ] = BenchmarkDefaults.TOTAL_WORDS

    chart_name: Annotated[
        str | None,
        Field(description="Dataset name used to group results. Auto-generated from the variable when omitted."),
        CLIParameter(name=("--chart-name",), group=Groups.BASE_CONFIGURATION),
    ] = None

    index_prefix: Annotated[
        str,
        Field(min_length=1, description="Prefix of the generated index labels."),
        CLIParameter(name=("--index-prefix",), group=Groups.BASE_CONFIGURATION),
    ] = CampaignDefaults.BASE_INDEX_PREFIX

    driver: Annotated[
        str,
        Field(
            description="Workload driver: 'simulated' or an import reference 'package.module:factory'."
        ),
        CLIParameter(name=("--driver",), group=Groups.EXECUTION),
    ] = CampaignDefaults.DRIVER

    cooldown_seconds: Annotated[
        float,
        Field(ge=0, description="Pause between runs, in seconds."),
        CLIParameter(name=("--cooldown-seconds",), group=Groups.EXECUTION),
    ] = CampaignDefaults.COOLDOWN_SECONDS

    results_dir: Annotated[
        Path | None,
        Field(description="Directory result files are written to. Defaults to ESBENCH_RESULTS_DIR."),
        CLIParameter(name=("--results-dir",), group=Groups.OUTPUT),
    ] = None

    verbose: Annotated[
        bool,
        Field(description="Enable debug logging."),
        CLIParameter(name=("--verbose", "-v"), group=Groups.OUTPUT),
    ] = False

    @field_validator("values", mode="before")
    @classmethod
    def parse_values_list(cls, v: str | list[str] | None) -> list[str] | None:
        return _split_comma_values(v)

    def to_variation_spec(self) -> VariationSpec:
        return VariationSpec(
            variable=self.variable,
            min=_narrow(self.min_value),
            max=_narrow(self.max_value),
            increment=_narrow(self.increment),
            values=self.values,
        )


def _narrow(value: float | None) -> int | float | None:
    """Turn integral floats from the CLI back into ints so labels read 100, not 100.0."""
    if value is not None and float(value).is_integer():
        return int(value)
    return value
