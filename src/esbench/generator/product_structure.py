# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Document structure derived from (additional fields, total words).

Every generated document has a ``name`` field filled by the data generator,
plus ``additional_fields`` corpus-backed text fields sharing ``total_words``
words between them.
"""

from esbench.common.config.benchmark_config import (
    FieldDefinition,
    ProductStructureConfig,
)
from esbench.common.exceptions import ProductStructureError

__all__ = [
    "NAME_FIELD",
    "generate_product_structure",
    "get_searchable_fields",
    "validate_product_structure_config",
]

NAME_FIELD = "name"
_FIRST_FIELD = "description"


def validate_product_structure_config(config: ProductStructureConfig) -> None:
    """Reject structures that cannot be generated.

    Raises:
        ProductStructureError: On negative counts, or when there are more
            additional fields than words to fill them with.
    """
    if config.additional_fields < 0:
        raise ProductStructureError(
            f"additionalFields must be >= 0, got {config.additional_fields}"
        )
    if config.total_words < 0:
        raise ProductStructureError(
            f"totalWords must be >= 0, got {config.total_words}"
        )
    if config.additional_fields > config.total_words:
        raise ProductStructureError(
            f"Cannot spread {config.total_words} word(s) across "
            f"{config.additional_fields} field(s): every additional field needs at least one word. "
            f"Increase totalWords or decrease additionalFields."
        )


def _field_name(position: int) -> str:
    return _FIRST_FIELD if position == 0 else f"field_{position + 1}"


def generate_product_structure(config: ProductStructureConfig) -> list[FieldDefinition]:
    """Build the field list for a structure config.

    Words are split evenly; the first fields absorb the remainder.

    Example:
        >>> [f.word_count for f in generate_product_structure(
        ...     ProductStructureConfig(additional_fields=3, total_words=10))]
        [0, 4, 3, 3]
    """
    validate_product_structure_config(config)

    structure = [FieldDefinition(name=NAME_FIELD, word_count=0)]
    if config.additional_fields == 0:
        return structure

    base, remainder = divmod(config.total_words, config.additional_fields)
    for position in range(config.additional_fields):
        words = base + (1 if position < remainder else 0)
        structure.append(FieldDefinition(name=_field_name(position), word_count=words))
    return structure


def get_searchable_fields(structure: list[FieldDefinition]) -> list[str]:
    """Text fields worth searching: every non-empty generated field, then ``name``."""
    return [
        field.name
        for field in structure
        if field.name != NAME_FIELD and field.word_count > 0
    ] + [NAME_FIELD]
