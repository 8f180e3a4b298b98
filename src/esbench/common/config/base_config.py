# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseConfig(BaseModel):
    """Base class for CLI-facing configuration. Unknown keys are rejected."""

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
        use_enum_values=False,
    )


class CamelModel(BaseModel):
    """Base class for persisted domain records.

    Fields are snake_case in Python and camelCase on disk.
    Instances are immutable.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    def to_json_dict(self) -> dict:
        """Dump using on-disk (camelCase) keys."""
        return self.model_dump(mode="json", by_alias=True)
