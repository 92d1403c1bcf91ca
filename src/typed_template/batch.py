"""Render a prepared template once per DataFrame row."""

from __future__ import annotations

from typing import Any

import pandas as pd
from loguru import logger

from typed_template.config import Settings, get_settings
from typed_template.errors import TemplateError
from typed_template.template import PreparedTemplate


class TemplateBatchRenderer:
    """Fill a prepared template from DataFrame columns, one string per row."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    def render(
        self,
        dataframe: pd.DataFrame,
        prepared: PreparedTemplate,
        output_column: str | None = None,
    ) -> pd.DataFrame:
        """Return a copy of ``dataframe`` with the rendered text added."""
        if not isinstance(dataframe, pd.DataFrame):
            msg = "TemplateBatchRenderer expects a pandas.DataFrame."
            raise TypeError(msg)

        column = output_column or self.settings.batch_output_column
        missing_columns = [name for name in prepared.keys if name not in dataframe.columns]
        if missing_columns:
            logger.debug("Columns {} not found, their slots fall back to defaults", missing_columns)

        working_df = dataframe.copy()
        rendered = [
            self._render_row(prepared, position, row)
            for position, row in enumerate(self._iter_rows(working_df, prepared))
        ]
        working_df[column] = pd.Series(rendered, index=working_df.index, dtype=object)

        logger.debug("Rendered {} rows into column '{}'", len(rendered), column)
        return working_df

    @staticmethod
    def _iter_rows(dataframe: pd.DataFrame, prepared: PreparedTemplate) -> list[dict[str, Any]]:
        columns = [name for name in prepared.keys if name in dataframe.columns]
        if not columns:
            return [{} for _ in range(len(dataframe.index))]

        # Nullable dtypes keep integer columns with gaps as whole numbers.
        subset = dataframe[columns].convert_dtypes().astype(object)
        # NaN/NA cells count as missing so slot defaults apply.
        subset = subset.where(subset.notna(), None)
        return subset.to_dict(orient="records")

    @staticmethod
    def _render_row(prepared: PreparedTemplate, position: int, row: dict[str, Any]) -> str:
        try:
            return prepared(row)
        except TemplateError:
            logger.error("Failed to render row at position {}", position)
            raise
