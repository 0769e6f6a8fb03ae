"""MilestoneDraft and MilestoneCreateRequest - user-entered rows and their POST body."""

from typing import Literal
from pydantic import BaseModel, Field

# Editable draft fields, in form display order
DRAFT_FIELDS = ("title", "description", "deadline", "budget")


class MilestoneDraft(BaseModel):
    """An unpersisted milestone row held by the form.

    All fields are raw form strings. Nothing here is validated; see
    drafts.validator for the completeness rules applied on submit.
    """

    title: str = Field(default="", description="Milestone title")
    description: str = Field(default="", description="What needs to be accomplished")
    deadline: str = Field(default="", description="Due date as entered (YYYY-MM-DD)")
    budget: str = Field(default="", description="Budget in USD as entered")


class MilestoneCreateRequest(BaseModel):
    """Body for POST /api/milestones."""

    project_id: int = Field(..., description="Parent project id")
    title: str
    description: str
    due_date: str = Field(..., description="Copied from MilestoneDraft.deadline")
    status: Literal["pending"] = "pending"
    budget: str = Field(..., description="Numeric string, passed through unchanged")

    @classmethod
    def from_draft(cls, project_id: int, draft: MilestoneDraft) -> "MilestoneCreateRequest":
        return cls(
            project_id=project_id,
            title=draft.title,
            description=draft.description,
            due_date=draft.deadline,
            budget=draft.budget,
        )

    class Config:
        json_schema_extra = {
            "example": {
                "project_id": 42,
                "title": "Project Planning Phase",
                "description": "Scope the work and recruit contributors",
                "due_date": "2026-03-31",
                "status": "pending",
                "budget": "8333",
            }
        }
