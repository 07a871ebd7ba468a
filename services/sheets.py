"""Reporting exports appended as rows to the hiring spreadsheet."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Protocol

from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel

from app.coercion import sheet_cell
from app.config import ASSESSMENT_SHEET_RANGE, CANDIDATE_SHEET_RANGE, SPREADSHEET_ID, SURVEY_SHEET_RANGE
from services.google_api import GoogleClient

logger = logging.getLogger(__name__)


class RowAppender(Protocol):
    async def append_row(self, sheet_range: str, values: list[str]) -> None:
        ...


class GoogleSheetsRowAppender:
    def __init__(
        self,
        credentials_file: Path | None,
        *,
        spreadsheet_id: str = SPREADSHEET_ID,
        service: Any = None,
        http_factory: Callable[[], Any] | None = None,
    ) -> None:
        self.spreadsheet_id = spreadsheet_id
        self.client = GoogleClient("sheets", "v4", credentials_file, service=service, http_factory=http_factory)

    async def append_row(self, sheet_range: str, values: list[str]) -> None:
        await run_in_threadpool(self._append_sync, sheet_range, values)

    def _append_sync(self, sheet_range: str, values: list[str]) -> None:
        request = (
            self.client.service()
            .spreadsheets()
            .values()
            .append(
                spreadsheetId=self.spreadsheet_id,
                range=sheet_range,
                valueInputOption="USER_ENTERED",
                body={"values": [values]},
            )
        )
        self.client.execute(request)


@dataclass(frozen=True)
class SheetTarget:
    sheet_range: str
    defaults: dict[str, str] = field(default_factory=dict)


CANDIDATE_SUMMARY = SheetTarget(CANDIDATE_SHEET_RANGE, defaults={"total_score": "0"})
ASSESSMENT_PROFILE = SheetTarget(ASSESSMENT_SHEET_RANGE)
SURVEY_RESPONSE = SheetTarget(SURVEY_SHEET_RANGE)


class SheetExporter:
    """Render submitted fields into one row and append it to a sheet."""

    def __init__(self, appender: RowAppender) -> None:
        self.appender = appender

    @staticmethod
    def build_row(target: SheetTarget, record: BaseModel) -> list[str]:
        row = []
        for name in type(record).model_fields:
            value = getattr(record, name)
            if name in target.defaults:
                row.append(sheet_cell(value, default=target.defaults[name]))
            else:
                row.append(sheet_cell(value))
        return row

    async def export(self, target: SheetTarget, record: BaseModel) -> list[str]:
        row = self.build_row(target, record)
        await self.appender.append_row(target.sheet_range, row)
        logger.info("Data added to Google Sheet %s", target.sheet_range)
        return row
