"""Seeding script for sample sections, groups and questions."""

import asyncio
import sys
import argparse
import logging
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from faker import Faker

from interrogator.core.database import get_db, init_db
from interrogator.core.logging import setup_logging
from interrogator.models import Section, Group, Question
from interrogator.repositories.group import GroupRepository
from interrogator.repositories.question import QuestionRepository
from interrogator.schemas.group import GroupCreate
from interrogator.schemas.question import QuestionCreate

logger = logging.getLogger("interrogator.seed")

QUESTION_TYPES = ["small_text", "large_text", "numeric", "date_time", "choose_one", "choose_many"]


class GroupSeeder:
    """Seeds a handful of sections, each with ordered groups of questions."""
    
    def __init__(self, session: AsyncSession, sections: int = 2, groups_per_section: int = 3, questions_per_group: int = 4):
        self.session = session
        self.group_repo = GroupRepository(session)
        self.question_repo = QuestionRepository(session)
        self.sections = sections
        self.groups_per_section = groups_per_section
        self.questions_per_group = questions_per_group
        self.fake = Faker()
    
    async def create_section(self, index: int) -> Section:
        """Create a sample section."""
        section = Section(name=f"Section {index}", slug=f"section-{index}")
        self.session.add(section)
        await self.session.commit()
        await self.session.refresh(section)
        return section
    
    async def run_seeding(self) -> None:
        """Create sample data."""
        groups = questions = 0
        for s in range(1, self.sections + 1):
            section = await self.create_section(s)
            for g in range(1, self.groups_per_section + 1):
                group = await self.group_repo.create(GroupCreate(
                    name=self.fake.catch_phrase(),
                    slug=f"section-{s}-group-{g}",
                    section_id=section.id,
                    options={"order": g}
                ))
                groups += 1
                for q in range(1, self.questions_per_group + 1):
                    await self.question_repo.create(QuestionCreate(
                        name=self.fake.sentence(nb_words=8).rstrip(".") + "?",
                        slug=f"{group.slug}-question-{q}",
                        type=self.fake.random_element(QUESTION_TYPES),
                        group_id=group.id
                    ))
                    questions += 1
        
        logger.info("Seeded %d section(s), %d group(s), %d question(s)", self.sections, groups, questions)
    
    async def clear_all_data(self) -> None:
        """Remove all seeded rows, children first."""
        for model in (Question, Group, Section):
            await self.session.execute(delete(model))
        await self.session.commit()
        logger.info("Cleared sections, groups and questions")


async def main():
    """Main seeding function."""
    parser = argparse.ArgumentParser(description='Survey group seeding script')
    parser.add_argument('action', choices=['up', 'down'], help='up: create data, down: clear data')
    args = parser.parse_args()
    
    setup_logging(log_to_file=False)
    
    try:
        await init_db()
        async for session in get_db():
            seeder = GroupSeeder(session)
            
            if args.action == 'down':
                await seeder.clear_all_data()
            else:
                await seeder.run_seeding()
            break
            
    except Exception:
        logger.exception("Seeding failed")
        return 1
    
    return 0


if __name__ == "__main__":
    exit_code = asyncio.run(main())
    sys.exit(exit_code)
