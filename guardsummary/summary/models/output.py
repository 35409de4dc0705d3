# Output document classes
from pydantic import BaseModel

from guardsummary.summary.models.model import Status
from guardsummary.summary.models.model import SummaryType


class RuleOutput(BaseModel):
    name: str
    status: Status | None = None


class GroupOutput(BaseModel):
    type: SummaryType
    rules: list[RuleOutput]


class SummaryDocument(BaseModel):
    """
    The formal object output by `--output json`.
    """

    data_file: str
    rules_file: str
    status: Status | None = None
    groups: list[GroupOutput]
