# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from esbench.generator.product_structure import (
    NAME_FIELD,
    generate_product_structure,
    get_searchable_fields,
    validate_product_structure_config,
)

__all__ = [
    "NAME_FIELD",
    "generate_product_structure",
    "get_searchable_fields",
    "validate_product_structure_config",
]
