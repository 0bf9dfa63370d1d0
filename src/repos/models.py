from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

ItemStatus = Literal["loading", "success", "error"]


class RepoRecord(BaseModel):
    """
    Repository metadata as returned by GET /repos/{owner}/{name}.
    Fields other than the ones below are kept as-is.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    full_name: str                      # owner/name
    description: Optional[str] = None
    stargazers_count: int = Field(ge=0)
    forks_count: int = Field(ge=0)
    html_url: str


class RepoItemView(BaseModel):
    identifier: str
    status: ItemStatus
    record: Optional[RepoRecord] = None
    error: Optional[str] = None
