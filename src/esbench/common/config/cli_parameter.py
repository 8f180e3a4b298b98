# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Any

from cyclopts import Parameter


def CLIParameter(*args: Any, **kwargs: Any) -> Parameter:  # noqa: N802
    """cyclopts Parameter with esbench defaults.

    Boolean flags get no ``--no-`` variant unless one is asked for.
    """
    kwargs.setdefault("negative", "")
    return Parameter(*args, **kwargs)
