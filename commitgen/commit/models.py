"""Data models for the commitgen commit module.

Contains:
- Parts: Pydantic model for the structured record returned by the model
- Message: The final headline + body pair
"""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, StrictStr, field_validator


class Parts(BaseModel):
    """Structured commit information, raw or normalized.

    Attributes:
        commit_type: Commit type token (feat, fix, docs, etc.).
        description: Short imperative summary used in the headline.
        summary: Brief reason or impact of the change.
        body: Optional multi-line elaboration.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    commit_type: StrictStr = ""
    description: StrictStr = ""
    summary: StrictStr = ""
    body: StrictStr = ""

    @field_validator("commit_type", "description", "summary", "body", mode="before")
    @classmethod
    def null_as_empty(cls, v):
        """Treat JSON null as an empty string."""
        if v is None:
            return ""
        return v


@dataclass(frozen=True)
class Message:
    """The final commit message.

    Attributes:
        headline: Single line ``<ticket> [<type>] <description>``.
        body: Optional multi-line body (may be empty).
    """

    headline: str
    body: str = ""

    def render(self) -> str:
        """Render the message as headline, blank line, body."""
        if self.body:
            return f"{self.headline}\n\n{self.body}"
        return self.headline
