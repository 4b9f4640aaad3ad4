import logging

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Config
from app.models.assessment import AssessmentConfig
from app.models.class_arm import ClassArm
from app.models.school import SchoolInfo
from app.models.user import User
from app.security import get_password_hash

logger = logging.getLogger(__name__)

CLASS_LEVELS = ["JSS1", "JSS2", "JSS3", "SS1", "SS2", "SS3"]
ARM_LETTERS = ["A", "B", "C", "D", "E"]
ROSTER_SIZE = 50

DEFAULT_SCHOOL = {
    "name": "Divine Progressive College",
    "address": "KM4 Along Gboko, Aliade Road, Luga, Gboko West",
    "email": "school@email.com",
    "phone": "+234 812 345 6789",
    "session": "2024/2025",
    "principal_name": "Dr. Adebayo Okafor",
    "principal_comment": "Keep up the good work",
}

def class_arm_names():
    return [level + letter for level in CLASS_LEVELS for letter in ARM_LETTERS]

async def seed_defaults(db: AsyncSession):
    """Default admin, school info and the 30 class arms. Each step skips if its rows already exist."""
    # 1. Admin user
    result = await db.execute(select(User.id).where(User.username == "admin").limit(1))
    if result.scalar_one_or_none() is None:
        db.add(User(
            username="admin",
            password_hash=get_password_hash(Config.DEFAULT_ADMIN_PASSWORD),
            role="admin",
            name="Administrator",
            email="admin@school.com",
        ))
        await db.commit()
        logger.info("Default admin user created: admin")

    # 2. School info
    result = await db.execute(select(SchoolInfo.id).limit(1))
    if result.scalar_one_or_none() is None:
        db.add(SchoolInfo(**DEFAULT_SCHOOL))
        await db.commit()
        logger.info("Default school info created")

    # 3. Class arms + assessment config
    arm_count = (await db.execute(select(func.count(ClassArm.id)))).scalar() or 0
    if arm_count == 0:
        for name in class_arm_names():
            # Arm password is its own name in lower case, e.g. jss1a
            db.add(ClassArm(
                name=name,
                password_hash=get_password_hash(name.lower()),
                student_names=[""] * ROSTER_SIZE,
            ))
            existing = await db.execute(select(AssessmentConfig.id).where(AssessmentConfig.class_name == name))
            if existing.scalar_one_or_none() is None:
                db.add(AssessmentConfig(class_name=name, ca1_max=10, ca2_max=10, ca3_max=10, exam_max=70))
        await db.commit()
        logger.info(f"Created {len(class_arm_names())} class arms with assessment config")
