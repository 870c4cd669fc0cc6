"""Path parameters shared by the routers."""

from typing import Annotated

from fastapi import Path

from healthchecker.schemas.common import MAX_ID

UserIdPath = Annotated[int, Path(ge=1, le=MAX_ID)]
ReportIdPath = Annotated[int, Path(ge=1, le=MAX_ID)]
