"""Update question use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from stackit.domain.error import ValidationError
from stackit.domain.service import QuestionService
from stackit.domain.value import (
    Actor,
    Priority,
    QuestionCategory,
    QuestionId,
    UserId,
    UserRole,
)


class UpdateQuestionRequest(BaseModel):
    """Update question request. Fields left as None are not changed."""

    question_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    role: UserRole = UserRole.USER
    title: Optional[str] = None
    content: Optional[str] = None
    category: Optional[QuestionCategory] = None
    tags: Optional[list[str]] = None
    priority: Optional[Priority] = None


class UpdateQuestionResponse(BaseModel):
    """Update question response."""

    question_id: str
    title: str
    content: str
    category: QuestionCategory
    tags: list[str]
    priority: Priority
    edited_at: datetime | None


class UpdateQuestionUseCase:
    """Use case for editing a question.

    Edits never change votes, acceptance or points.
    """

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize update question use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: UpdateQuestionRequest) -> UpdateQuestionResponse:
        """Execute update question flow.

        Raises:
            NotFoundError: If question not found
            NotAuthorizedError: If the user is neither author nor moderator
            ValidationError: If nothing is changed or an edited field is invalid
        """
        changes = request.model_dump(
            include={"title", "content", "category", "tags", "priority"},
            exclude_none=True,
        )
        if not changes:
            raise ValidationError("Nothing to update")

        actor = Actor(user_id=UserId(UUID(request.user_id)), role=request.role)
        with logfire.span("update_question.execute", question_id=request.question_id):
            try:
                question = await self.question_service.update_question(
                    QuestionId(UUID(request.question_id)), actor, changes
                )
            except PydanticValidationError as e:
                raise ValidationError(str(e)) from e

            return UpdateQuestionResponse(
                question_id=str(question.id),
                title=question.title,
                content=question.content,
                category=question.category,
                tags=question.tags,
                priority=question.priority,
                edited_at=question.edited_at,
            )
