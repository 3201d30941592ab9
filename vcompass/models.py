from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Question(BaseModel):
    question: Optional[str] = None


class AnswerMeta(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: Optional[str] = None
    title: Optional[str] = None
    verified: Optional[bool] = None
    used_gemini: Optional[bool] = Field(default=None, alias="usedGemini")


class Answer(BaseModel):
    reply: str
    found: bool
    meta: AnswerMeta = Field(default_factory=AnswerMeta)


class HealthStatus(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: str
    name: str
    has_gemini: bool = Field(alias="hasGemini")
    documents: int


class ReloadResult(BaseModel):
    ok: bool
    count: Optional[int] = None
    error: Optional[str] = None
