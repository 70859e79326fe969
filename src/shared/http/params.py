from typing import Annotated, Optional

from fastapi import Path, Query

from src.shared.validation import MAX_ID

# Ids outside the Integer column range are rejected with a 400 before any query runs
EntityId = Annotated[int, Path(ge=1, le=MAX_ID)]
IdFilter = Annotated[Optional[int], Query(ge=1, le=MAX_ID)]
