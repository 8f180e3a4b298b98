# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Configuration space generation for parameter sweeps.

Every function here is pure: configurations are immutable and each variation
returns a new BenchmarkConfig.
"""

import logging
from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from esbench.common.config.benchmark_config import (
    BenchmarkConfig,
    IndexType,
    ProductStructureConfig,
    SweepTag,
    SweepValue,
)
from esbench.common.config.campaign_config import VariableType, VariationSpec
from esbench.common.config.config_defaults import BenchmarkDefaults
from esbench.common.exceptions import (
    ConfigValidationError,
    InvalidRangeError,
)
from esbench.generator.product_structure import (
    NAME_FIELD,
    generate_product_structure,
    get_searchable_fields,
)

logger = logging.getLogger(__name__)

__all__ = [
    "apply_variation",
    "create_base_config",
    "generate_chart_name",
    "generate_configurations",
    "generate_numeric_values",
    "get_config_value",
    "make_label",
]

# Absorbs float error in (max - min) / increment, e.g. (0.3 - 0.1) / 0.1
_STEP_EPSILON = 1e-9

_CHART_NAMES: dict[VariableType, str] = {
    VariableType.NUMBER_OF_BATCHES: "Batch Count Scaling",
    VariableType.DOCUMENTS_PER_BATCH: "Batch Size Scaling",
    VariableType.DESCRIPTION_WORD_LENGTH: "Description Length Scaling",
    VariableType.ADDITIONAL_FIELDS: "Field Count Scaling",
    VariableType.TOTAL_WORDS: "Word Count Scaling",
    VariableType.INDEX_TYPE: "Index Type Comparison",
    VariableType.NUMBER_OF_UPDATE_BATCHES: "Update Batch Count Scaling",
    VariableType.DOCUMENTS_PER_UPDATE_BATCH: "Update Batch Size Scaling",
    VariableType.FUZZINESS: "Fuzziness Comparison",
}

_CONFIG_GETTERS: dict[VariableType, Callable[[BenchmarkConfig], SweepValue]] = {
    VariableType.NUMBER_OF_BATCHES: lambda c: c.number_of_batches,
    VariableType.DOCUMENTS_PER_BATCH: lambda c: c.documents_per_batch,
    VariableType.DESCRIPTION_WORD_LENGTH: lambda c: c.product_structure_config.total_words,
    VariableType.ADDITIONAL_FIELDS: lambda c: c.product_structure_config.additional_fields,
    VariableType.TOTAL_WORDS: lambda c: c.product_structure_config.total_words,
    VariableType.INDEX_TYPE: lambda c: c.index_type.value,
    VariableType.NUMBER_OF_UPDATE_BATCHES: lambda c: c.update_config.number_of_update_batches,
    VariableType.DOCUMENTS_PER_UPDATE_BATCH: lambda c: c.update_config.documents_per_update_batch,
    VariableType.FUZZINESS: lambda c: c.search_queries.fuzzy_search.fuzziness,
}


def _to_variable(variable: VariableType | str) -> VariableType:
    try:
        return VariableType(variable)
    except ValueError as e:
        supported = ", ".join(v.value for v in VariableType)
        raise ConfigValidationError(
            f"Unsupported variable type: {variable!r}. Must be one of: {supported}"
        ) from e


def make_label(base_index_name: str, variable: VariableType | str, value: Any) -> str:
    """Label of a swept configuration: ``<base>-<field>-<value>``."""
    return f"{base_index_name}-{_to_variable(variable).value}-{value}"


def generate_chart_name(variable: VariableType | str) -> str:
    """Default dataset name for a sweep of ``variable``."""
    return _CHART_NAMES[_to_variable(variable)]


def generate_numeric_values(
    min_value: float, max_value: float, increment: float
) -> list[int | float]:
    """Inclusive arithmetic progression from ``min_value`` to ``max_value``.

    Values are computed as ``min + k * increment`` so float steps do not
    accumulate error.

    Raises:
        InvalidRangeError: If ``min_value >= max_value`` or ``increment <= 0``.

    Example:
        >>> generate_numeric_values(100, 1000, 300)
        [100, 400, 700, 1000]
    """
    if min_value >= max_value:
        raise InvalidRangeError(
            f"Invalid range: min ({min_value}) must be less than max ({max_value})"
        )
    if increment <= 0:
        raise InvalidRangeError(
            f"Invalid increment: {increment}. Increment must be positive."
        )

    steps = int((max_value - min_value) / increment + _STEP_EPSILON)
    all_ints = all(isinstance(v, int) for v in (min_value, max_value, increment))

    values: list[int | float] = []
    for k in range(steps + 1):
        value = min_value + k * increment
        values.append(value if all_ints else round(value, 10))
    return values


def get_config_value(config: BenchmarkConfig, variable: VariableType | str) -> SweepValue:
    """Typed value of the field ``variable`` refers to."""
    return _CONFIG_GETTERS[_to_variable(variable)](config)


def _restructure(data: dict[str, Any], additional_fields: Any, total_words: Any) -> None:
    # Validates the ints first so "3" is accepted the same way scalar fields are
    structure_config = ProductStructureConfig(
        additional_fields=additional_fields, total_words=total_words
    )
    structure = generate_product_structure(structure_config)
    searchable = get_searchable_fields(structure)

    data["product_structure_config"] = structure_config.model_dump()
    data["product_structure"] = [field.model_dump() for field in structure]
    data["search_queries"]["full_text_search"]["fields"] = searchable
    data["search_queries"]["fuzzy_search"]["field"] = searchable[0] if searchable else NAME_FIELD


def apply_variation(
    config: BenchmarkConfig, variable: VariableType | str, value: SweepValue
) -> BenchmarkConfig:
    """Return a copy of ``config`` with ``variable`` set to ``value``.

    Composite fields (``additionalFields``, ``totalWords``,
    ``descriptionWordLength``) rebuild the document structure from the other
    composite parameter of ``config`` and refresh the searchable fields.

    The result is labelled ``<config.index_name>-<variable>-<value>`` and
    carries an explicit sweep tag.

    Raises:
        ConfigValidationError: If the value does not fit the field.
        ProductStructureError: If a composite change yields an impossible structure.
    """
    variable = _to_variable(variable)
    data = config.model_dump()
    current = config.product_structure_config

    try:
        match variable:
            case VariableType.NUMBER_OF_BATCHES:
                data["number_of_batches"] = value
            case VariableType.DOCUMENTS_PER_BATCH:
                data["documents_per_batch"] = value
            case VariableType.INDEX_TYPE:
                data["index_type"] = value
            case VariableType.NUMBER_OF_UPDATE_BATCHES:
                data["update_config"]["number_of_update_batches"] = value
            case VariableType.DOCUMENTS_PER_UPDATE_BATCH:
                data["update_config"]["documents_per_update_batch"] = value
            case VariableType.FUZZINESS:
                data["search_queries"]["fuzzy_search"]["fuzziness"] = value
            case VariableType.DESCRIPTION_WORD_LENGTH:
                _restructure(data, 1, value)
            case VariableType.ADDITIONAL_FIELDS:
                _restructure(data, value, current.total_words)
            case VariableType.TOTAL_WORDS:
                _restructure(data, current.additional_fields, value)

        data["index_name"] = make_label(config.index_name, variable, value)
        varied = BenchmarkConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(
            f"Invalid value {value!r} for {variable.value}: {e.errors()[0]['msg']}"
        ) from e

    sweep = SweepTag(field=variable.value, value=get_config_value(varied, variable))
    return varied.model_copy(update={"sweep": sweep})


def _sweep_values(spec: VariationSpec) -> list[SweepValue]:
    if spec.values is not None:
        if not spec.values:
            raise ConfigValidationError(
                f"Sweep of {spec.variable.value} requires at least one value"
            )
        return list(spec.values)

    if spec.variable == VariableType.INDEX_TYPE:
        return [index_type.value for index_type in IndexType]

    if spec.min is None or spec.max is None or spec.increment is None:
        raise ConfigValidationError(
            f"Numeric sweep of {spec.variable.value} requires min, max and increment "
            f"(got min={spec.min}, max={spec.max}, increment={spec.increment}). "
            f"Use values for an enumerated sweep."
        )
    return generate_numeric_values(spec.min, spec.max, spec.increment)


def generate_configurations(
    base_config: BenchmarkConfig, spec: VariationSpec
) -> list[BenchmarkConfig]:
    """Expand a variation spec into one configuration per swept value.

    Order follows the value order. Nothing is generated unless every value
    applies cleanly.

    Raises:
        ConfigValidationError: On an invalid range, an empty value list, or a
            value the configuration rejects.
    """
    values = _sweep_values(spec)
    configurations = [apply_variation(base_config, spec.variable, v) for v in values]

    labels = [c.index_name for c in configurations]
    if len(set(labels)) != len(labels):
        duplicates = sorted({label for label in labels if labels.count(label) > 1})
        raise ConfigValidationError(f"Duplicate sweep values produce labels: {duplicates}")

    logger.debug(
        f"Generated {len(configurations)} configuration(s) for {spec.variable.value}: "
        f"{[get_config_value(c, spec.variable) for c in configurations]}"
    )
    return configurations


def create_base_config(
    index_name: str,
    index_type: IndexType | str = IndexType.STANDARD,
    batches: int = BenchmarkDefaults.NUMBER_OF_BATCHES,
    docs_per_batch: int = BenchmarkDefaults.DOCUMENTS_PER_BATCH,
    additional_fields: int = BenchmarkDefaults.ADDITIONAL_FIELDS,
    total_words: int = BenchmarkDefaults.TOTAL_WORDS,
    chart_name: str | None = None,
) -> BenchmarkConfig:
    """Build a campaign base configuration.

    The update phase touches half as many batches and documents per batch as
    indexing does, at least one of each.
    """
    structure_config = ProductStructureConfig(
        additional_fields=additional_fields, total_words=total_words
    )
    structure = generate_product_structure(structure_config)
    searchable = get_searchable_fields(structure)

    try:
        return BenchmarkConfig.model_validate(
            {
                "index_name": index_name,
                "index_type": index_type,
                "chart_name": chart_name,
                "number_of_batches": batches,
                "documents_per_batch": docs_per_batch,
                "product_structure_config": structure_config,
                "product_structure": structure,
                "update_config": {
                    "number_of_update_batches": max(1, batches // 2),
                    "documents_per_update_batch": max(1, docs_per_batch // 2),
                },
                "search_queries": {
                    "full_text_search": {
                        "fields": searchable,
                        "terms": list(BenchmarkDefaults.FULL_TEXT_TERMS),
                    },
                    "fuzzy_search": {
                        "field": searchable[0],
                        "terms": list(BenchmarkDefaults.FUZZY_TERMS),
                        "fuzziness": BenchmarkDefaults.FUZZINESS,
                    },
                },
            }
        )
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid base configuration: {e}") from e
