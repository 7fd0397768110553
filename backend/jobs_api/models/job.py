import enum

from sqlalchemy import CheckConstraint, Column, Integer, String, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from jobs_api.database import Base


class JobStatus(str, enum.Enum):
    INTERVIEW = "interview"
    PENDING = "pending"
    DECLINED = "declined"


ROLE_MAX_LENGTH = 100
COMPANY_MAX_LENGTH = 50


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)
    role = Column(String(ROLE_MAX_LENGTH), nullable=False)
    company = Column(String(COMPANY_MAX_LENGTH), nullable=False)
    status = Column(
        String(20),
        nullable=False,
        default=JobStatus.PENDING.value,
        server_default=JobStatus.PENDING.value,
    )
    created_by = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

    owner = relationship("User", back_populates="jobs")

    __table_args__ = (
        CheckConstraint(
            "status IN ('interview', 'pending', 'declined')",
            name="ck_jobs_status",
        ),
        Index("ix_jobs_owner_created", "created_by", "created_at"),
    )
