import logging
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import from_db_error
from app.models.student import Student, SubjectScore, AffectiveRating, PsychomotorRating
from app.schemas.student_schema import StudentCreate
from app.services.ranking import ScoreRow, rank_students
from app.utils.db_utils import row_to_dict

logger = logging.getLogger(__name__)

class StudentService:
    @staticmethod
    async def save_student(db: AsyncSession, payload: StudentCreate) -> int:
        """
        Persists the student row, its subject scores and both rating maps as one unit.
        Nothing is kept if any insert fails.
        """
        try:
            student = Student(**payload.model_dump(exclude={"subjects", "affective", "psychomotor"}))
            db.add(student)
            await db.flush() # Assigns student.id
            student_id = student.id

            db.add_all([
                SubjectScore(
                    student_id=student_id,
                    subject_name=s.name,
                    ca1=s.ca1, ca2=s.ca2, ca3=s.ca3, exam=s.exam,
                    total=s.total, grade=s.grade, remark=s.remark,
                )
                for s in payload.subjects
            ])
            db.add_all([AffectiveRating(student_id=student_id, domain=d, rating=r) for d, r in payload.affective.items()])
            db.add_all([PsychomotorRating(student_id=student_id, domain=d, rating=r) for d, r in payload.psychomotor.items()])

            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            raise from_db_error(e, "Failed to save student") from e

        logger.info(
            f"Saved student {student_id} ({payload.adm_no}, {payload.class_name} term {payload.term}) "
            f"with {len(payload.subjects)} subjects"
        )
        return student_id

    @staticmethod
    async def list_students(db: AsyncSession, class_name: Optional[str] = None, term: Optional[str] = None) -> List[dict]:
        stmt = select(Student)
        if class_name:
            stmt = stmt.where(Student.class_name == class_name)
        if term:
            stmt = stmt.where(Student.term == term)
        stmt = stmt.order_by(Student.id)

        try:
            students = (await db.execute(stmt)).scalars().all()

            views = []
            for student in students:
                subjects = await db.execute(
                    select(SubjectScore).where(SubjectScore.student_id == student.id).order_by(SubjectScore.id)
                )
                affective = await db.execute(select(AffectiveRating).where(AffectiveRating.student_id == student.id))
                psychomotor = await db.execute(select(PsychomotorRating).where(PsychomotorRating.student_id == student.id))

                view = row_to_dict(student)
                view["subjects"] = [row_to_dict(s) for s in subjects.scalars()]
                view["affective"] = {a.domain: a.rating for a in affective.scalars()}
                view["psychomotor"] = {p.domain: p.rating for p in psychomotor.scalars()}
                views.append(view)
        except SQLAlchemyError as e:
            raise from_db_error(e, "Failed to fetch students") from e

        return views

    @staticmethod
    async def compute_positions(db: AsyncSession) -> int:
        """
        Recomputes position/position_of for every student, one UPDATE per student.
        Each (class, term) cohort is committed on its own, so a failed run leaves
        earlier cohorts updated; running it again is always safe.
        """
        try:
            result = await db.execute(
                select(Student.id, Student.class_name, Student.term, Student.average_score).order_by(Student.id)
            )
            placements = rank_students(ScoreRow(*row) for row in result.all())

            for p in placements:
                await db.execute(
                    update(Student)
                    .where(Student.id == p.student_id)
                    .values(position=p.position, position_of=p.position_of)
                )
                # Last member of its cohort
                if p.position == p.position_of:
                    await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            raise from_db_error(e, "Failed to compute positions") from e

        logger.info(f"Computed positions for {len(placements)} students")
        return len(placements)
