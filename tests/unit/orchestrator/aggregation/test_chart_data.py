# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import pytest

from esbench.orchestrator.aggregation.chart_data import (
    assemble,
    assemble_one,
    available_dataset_names,
    value_sort_key,
)
from esbench.orchestrator.aggregation.models import Dataset


def _dataset(name, variable, values):
    dataset = Dataset(name=name, variable=variable)
    for value, totals in values:
        for total in totals:
            dataset.sample_set(value).add(
                indexing=total / 2, search=1.0, update=total / 4, total=total
            )
    return dataset


@pytest.fixture
def datasets():
    return {
        "Word Count Scaling": _dataset(
            "Word Count Scaling",
            "totalWords",
            [(100, [10.0, 20.0, 30.0]), (20, [5.0]), (3, [1.0])],
        ),
        "Fuzziness Comparison": _dataset(
            "Fuzziness Comparison",
            "fuzziness",
            [("AUTO", [4.0]), (2, [2.0]), ("1", [3.0])],
        ),
    }


class TestValueSortKey:
    def test_numeric_before_strings(self):
        values = ["ngram", 10, "AUTO", 2.5, "100", -1]
        assert sorted(values, key=value_sort_key) == [-1, 2.5, 10, "100", "AUTO", "ngram"]

    def test_numbers_sort_numerically_not_lexically(self):
        assert sorted([100, 20, 3], key=value_sort_key) == [3, 20, 100]

    @pytest.mark.parametrize("value", ["nan", "inf", True])
    def test_non_finite_and_bool_sort_as_text(self, value):
        assert value_sort_key(value)[0] == 1


class TestAssemble:
    def test_ordered_by_dataset_name(self, datasets):
        assert [c.dataset_name for c in assemble(datasets)] == [
            "Fuzziness Comparison",
            "Word Count Scaling",
        ]

    def test_points_ordered_by_value(self, datasets):
        chart = assemble_one(datasets, "Word Count Scaling")

        assert chart.swept_field_name == "totalWords"
        assert [p.value for p in chart.points] == [3, 20, 100]
        assert [p.value for p in chart.raw_points] == [3, 20, 100]

    def test_mixed_values(self, datasets):
        chart = assemble_one(datasets, "Fuzziness Comparison")
        assert [p.value for p in chart.points] == [1, 2, "AUTO"]

    def test_numeric_text_shares_bucket_with_number(self):
        dataset = _dataset("Fuzziness Comparison", "fuzziness", [(1, [2.0]), ("1", [4.0])])

        chart = assemble_one({dataset.name: dataset}, dataset.name)

        assert [p.value for p in chart.points] == [1]
        assert chart.points[0].stats.total.count == 2

    def test_stats_per_metric(self, datasets):
        chart = assemble_one(datasets, "Word Count Scaling")
        point = chart.points[-1]

        assert point.stats.total.mean == 20.0
        assert point.stats.total.std == 8.16
        assert point.stats.total.count == 3
        assert point.stats.indexing.max == 15.0
        assert point.stats.update.min == 2.5
        assert point.stats.search.std == 0.0

    def test_raw_values_kept(self, datasets):
        chart = assemble_one(datasets, "Word Count Scaling")
        assert chart.raw_points[-1].raw_values.total == [10.0, 20.0, 30.0]

    def test_json_layout(self, datasets):
        data = assemble_one(datasets, "Word Count Scaling").to_json_dict()

        assert data["datasetName"] == "Word Count Scaling"
        assert data["sweptFieldName"] == "totalWords"
        assert data["points"][0]["stats"]["total"] == {
            "mean": 1.0,
            "median": 1.0,
            "min": 1.0,
            "max": 1.0,
            "std": 0.0,
            "count": 1,
        }
        assert data["rawPoints"][0]["rawValues"]["total"] == [1.0]

    def test_missing_dataset(self, datasets):
        assert assemble_one(datasets, "Nope") is None

    def test_empty(self):
        assert assemble({}) == []
        assert available_dataset_names({}) == []

    def test_available_names_sorted(self, datasets):
        assert available_dataset_names(datasets) == [
            "Fuzziness Comparison",
            "Word Count Scaling",
        ]
