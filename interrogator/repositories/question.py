"""Question repository for CRUD and soft delete operations."""

from typing import List, Optional
from datetime import datetime
from sqlalchemy import select, and_
from sqlalchemy.ext.asyncio import AsyncSession

from interrogator.models.question import Question
from interrogator.schemas.question import QuestionCreate


class QuestionRepository:
    """Question repository for CRUD and soft delete operations."""
    
    def __init__(self, session: AsyncSession):
        self.session = session
    
    # ===== BASIC CRUD OPERATIONS =====
    
    async def create(self, question_data: QuestionCreate, created_by: Optional[int] = None) -> Question:
        """Create a new question."""
        question = Question(
            name=question_data.name,
            slug=question_data.slug,
            type=question_data.type,
            group_id=question_data.group_id,
            team_id=question_data.team_id,
            options=question_data.options,
            created_by=created_by
        )
        
        self.session.add(question)
        await self.session.commit()
        await self.session.refresh(question)
        return question
    
    async def get_by_id(self, question_id: int, include_deleted: bool = False) -> Optional[Question]:
        """Get question by ID."""
        query = select(Question).where(Question.id == question_id)
        if not include_deleted:
            query = query.where(Question.deleted_at.is_(None))
        result = await self.session.execute(query)
        return result.scalar_one_or_none()
    
    async def get_by_group(self, group_id: int, include_deleted: bool = False) -> List[Question]:
        """Get questions of a group, optionally including soft deleted ones."""
        query = select(Question).where(Question.group_id == group_id)
        if not include_deleted:
            query = query.where(Question.deleted_at.is_(None))
        query = query.order_by(Question.id.asc())
        result = await self.session.execute(query)
        return list(result.scalars().all())
    
    async def get_deleted_between(self, group_id: int, start: datetime, end: datetime) -> List[Question]:
        """Get questions of a group deleted within [start, end]."""
        query = (
            select(Question)
            .where(
                and_(
                    Question.group_id == group_id,
                    Question.deleted_at.is_not(None),
                    Question.deleted_at >= start,
                    Question.deleted_at <= end
                )
            )
            .order_by(Question.id.asc())
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())
    
    # ===== SOFT DELETE =====
    
    async def soft_delete(
        self,
        question: Question,
        deleted_at: Optional[datetime] = None,
        deleted_by: Optional[int] = None,
        commit: bool = True
    ) -> Question:
        """Soft delete question.
        
        With ``commit=False`` the change is only flushed so the caller can
        finish a larger transaction.
        """
        question.mark_deleted(deleted_at, deleted_by)
        self.session.add(question)
        await self._persist(question, commit)
        return question
    
    async def restore(self, question: Question, commit: bool = True) -> Question:
        """Restore a soft deleted question."""
        question.mark_restored()
        self.session.add(question)
        await self._persist(question, commit)
        return question
    
    async def _persist(self, question: Question, commit: bool) -> None:
        if commit:
            await self.session.commit()
            await self.session.refresh(question)
        else:
            await self.session.flush()
