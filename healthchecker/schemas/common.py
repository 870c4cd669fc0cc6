"""Shared field types."""

from typing import Annotated

from pydantic import Field

# Primary and foreign keys are signed 32-bit INT columns.
MAX_ID = 2**31 - 1

EntityId = Annotated[int, Field(ge=1, le=MAX_ID)]
