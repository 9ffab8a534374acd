"""Learning-pattern assessment schemas.

Payload fields stay loosely typed: the scoring engine skips malformed entries
instead of rejecting the request, and a missing ``answers`` list is reported as
a 400 by the service.
"""

from typing import Any

from pydantic import Field

from learning_patterns.schemas.v1.common import CamelModel


class CalculateResultsRequest(CamelModel):
    answers: Any = None
    algorithm: str | None = None
    behavior_data: Any = Field(default=None, alias="behaviorData")


class SaveResultsRequest(CamelModel):
    results: Any = None
    timestamp: str | None = None
    user_id: str | None = Field(default=None, alias="userId")
