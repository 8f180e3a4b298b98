# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Benchmark configuration models.

A BenchmarkConfig is the immutable description of one benchmark run. It is
stored verbatim inside every persisted result file, so its on-disk layout
(camelCase keys) is a compatibility contract with existing results.
"""

from enum import Enum

from pydantic import Field

from esbench.common.config.base_config import CamelModel
from esbench.common.config.config_defaults import BenchmarkDefaults

__all__ = [
    "BenchmarkConfig",
    "FieldDefinition",
    "FullTextSearch",
    "FuzzySearch",
    "IndexType",
    "ProductStructureConfig",
    "SearchQueries",
    "SweepTag",
    "SweepValue",
    "UpdateConfig",
]

SweepValue = int | float | str


class IndexType(str, Enum):
    """Analyzer strategy of the benchmark index."""

    STANDARD = "standard"
    NGRAM = "ngram"
    STEMMING = "stemming"

    def __str__(self) -> str:
        return self.value


class FieldDefinition(CamelModel):
    """One text field of the generated documents."""

    name: str
    word_count: int = Field(ge=0)


class ProductStructureConfig(CamelModel):
    """The two composite parameters that derive the document structure."""

    additional_fields: int = Field(default=BenchmarkDefaults.ADDITIONAL_FIELDS)
    total_words: int = Field(default=BenchmarkDefaults.TOTAL_WORDS)


class UpdateConfig(CamelModel):
    number_of_update_batches: int = Field(default=5, ge=1)
    documents_per_update_batch: int = Field(default=50, ge=1)


class FullTextSearch(CamelModel):
    fields: list[str] = Field(default_factory=lambda: ["description", "name"])
    terms: list[str] = Field(
        default_factory=lambda: list(BenchmarkDefaults.FULL_TEXT_TERMS)
    )


class FuzzySearch(CamelModel):
    # Only one field is supported for fuzzy search
    field: str = "description"
    terms: list[str] = Field(default_factory=lambda: list(BenchmarkDefaults.FUZZY_TERMS))
    fuzziness: int | str = BenchmarkDefaults.FUZZINESS


class SearchQueries(CamelModel):
    full_text_search: FullTextSearch = Field(default_factory=FullTextSearch)
    fuzzy_search: FuzzySearch = Field(default_factory=FuzzySearch)


class SweepTag(CamelModel):
    """Explicit record of which field a campaign swept and to which value."""

    field: str
    value: SweepValue


def _default_structure() -> list[FieldDefinition]:
    return [
        FieldDefinition(name="name", word_count=0),
        FieldDefinition(name="description", word_count=BenchmarkDefaults.TOTAL_WORDS),
    ]


class BenchmarkConfig(CamelModel):
    """Configuration of a single benchmark run.

    Attributes:
        index_name: Unique label; also used as the search index name
        index_type: Analyzer strategy for the index
        chart_name: Dataset name used to group results when aggregating
        number_of_batches: Number of bulk indexing batches
        documents_per_batch: Documents sent in each bulk indexing batch
        product_structure_config: Composite parameters the structure is derived from
        product_structure: Text fields of the generated documents
        update_config: Bulk update phase parameters
        search_queries: Full-text and fuzzy search phase parameters
        sweep: Swept field and value, set when the config was produced by a sweep
    """

    index_name: str = Field(min_length=1)
    index_type: IndexType = IndexType.STANDARD
    chart_name: str | None = None

    number_of_batches: int = Field(default=BenchmarkDefaults.NUMBER_OF_BATCHES, ge=1)
    documents_per_batch: int = Field(
        default=BenchmarkDefaults.DOCUMENTS_PER_BATCH, ge=1
    )

    product_structure_config: ProductStructureConfig = Field(
        default_factory=ProductStructureConfig
    )
    product_structure: list[FieldDefinition] = Field(default_factory=_default_structure)

    update_config: UpdateConfig = Field(default_factory=UpdateConfig)
    search_queries: SearchQueries = Field(default_factory=SearchQueries)

    sweep: SweepTag | None = None

    @property
    def total_documents(self) -> int:
        return self.number_of_batches * self.documents_per_batch
