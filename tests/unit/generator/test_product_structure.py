# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import pytest
from hypothesis import given
from hypothesis import strategies as st

from esbench.common.config import FieldDefinition, ProductStructureConfig
from esbench.common.exceptions import ConfigValidationError, ProductStructureError
from esbench.generator.product_structure import (
    generate_product_structure,
    get_searchable_fields,
    validate_product_structure_config,
)


def _words(additional_fields, total_words):
    structure = generate_product_structure(
        ProductStructureConfig(additional_fields=additional_fields, total_words=total_words)
    )
    return [f.word_count for f in structure]


class TestGenerateProductStructure:
    @pytest.mark.parametrize(
        "additional_fields,total_words,expected",
        [
            (3, 10, [0, 4, 3, 3]),
            (2, 9, [0, 5, 4]),
            (3, 30, [0, 10, 10, 10]),
            (1, 10, [0, 10]),
            (0, 10, [0]),
            (0, 0, [0]),
            (4, 4, [0, 1, 1, 1, 1]),
        ],
    )
    def test_word_distribution(self, additional_fields, total_words, expected):
        assert _words(additional_fields, total_words) == expected

    def test_field_names(self):
        structure = generate_product_structure(
            ProductStructureConfig(additional_fields=3, total_words=10)
        )
        assert [f.name for f in structure] == ["name", "description", "field_2", "field_3"]

    @given(
        additional_fields=st.integers(min_value=1, max_value=20),
        extra_words=st.integers(min_value=0, max_value=500),
    )
    def test_words_conserved_and_balanced(self, additional_fields, extra_words):
        total_words = additional_fields + extra_words
        words = _words(additional_fields, total_words)[1:]

        assert len(words) == additional_fields
        assert sum(words) == total_words
        assert max(words) - min(words) <= 1
        assert words == sorted(words, reverse=True)


class TestValidateProductStructureConfig:
    @pytest.mark.parametrize(
        "additional_fields,total_words,message",
        [
            (-1, 10, "additionalFields must be >= 0"),
            (1, -5, "totalWords must be >= 0"),
            (5, 3, "Cannot spread 3 word"),
        ],
    )
    def test_rejects(self, additional_fields, total_words, message):
        config = ProductStructureConfig(
            additional_fields=additional_fields, total_words=total_words
        )
        with pytest.raises(ProductStructureError, match=message):
            validate_product_structure_config(config)

    def test_is_a_configuration_error(self):
        with pytest.raises(ConfigValidationError):
            generate_product_structure(ProductStructureConfig(additional_fields=2, total_words=1))


class TestGetSearchableFields:
    def test_non_empty_fields_then_name(self):
        structure = [
            FieldDefinition(name="name", word_count=0),
            FieldDefinition(name="description", word_count=5),
            FieldDefinition(name="field_2", word_count=0),
            FieldDefinition(name="field_3", word_count=2),
        ]
        assert get_searchable_fields(structure) == ["description", "field_3", "name"]

    def test_name_only(self):
        assert get_searchable_fields([FieldDefinition(name="name", word_count=0)]) == ["name"]
