# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Base class for chart data exporters."""

import asyncio
import logging
from abc import ABC, abstractmethod
from pathlib import Path

from esbench.exporters.chart.chart_exporter_config import ChartExporterConfig

logger = logging.getLogger(__name__)


class ChartBaseExporter(ABC):
    """Writes a list of ChartData to one file in the output directory.

    Subclasses choose the file name and render the content; the base class
    handles the directory and the write.
    """

    def __init__(self, config: ChartExporterConfig):
        self._chart_data = config.chart_data
        self._output_dir = Path(config.output_dir)

    @abstractmethod
    def get_file_name(self) -> str:
        """Return the name of the file this exporter writes."""

    @abstractmethod
    def _generate_content(self) -> str:
        """Render the full file content."""

    async def export(self) -> Path:
        """Write the export file and return its path."""
        self._output_dir.mkdir(parents=True, exist_ok=True)
        file_path = self._output_dir / self.get_file_name()

        content = self._generate_content()
        await asyncio.to_thread(file_path.write_text, content, encoding="utf-8")

        logger.debug(f"Exported {len(self._chart_data)} dataset(s) to {file_path}")
        return file_path
