# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Exception hierarchy for esbench.

Only configuration errors are fatal. Per-run failures are recorded on the
campaign result, and per-file failures are logged and skipped by the aggregator.
"""

__all__ = [
    "CacheCorruptionError",
    "ConfigValidationError",
    "DriverLoadError",
    "ESBenchError",
    "InvalidRangeError",
    "ProductStructureError",
    "ResultParseError",
]


class ESBenchError(Exception):
    """Base class for all esbench errors."""


class ConfigValidationError(ESBenchError, ValueError):
    """A campaign or sweep configuration is invalid. Raised before any run starts."""


class InvalidRangeError(ConfigValidationError):
    """Numeric sweep bounds are unusable (min >= max or increment <= 0)."""


class ProductStructureError(ConfigValidationError):
    """A field-count / word-count combination cannot produce a document structure."""


class ResultParseError(ESBenchError):
    """A persisted result file is unreadable or does not match the result schema."""

    def __init__(self, path, reason: str) -> None:
        super().__init__(f"Failed to parse result file {path}: {reason}")
        self.path = path
        self.reason = reason


class CacheCorruptionError(ESBenchError):
    """The aggregation cache file exists but cannot be used."""


class DriverLoadError(ESBenchError):
    """A workload driver reference could not be resolved."""
