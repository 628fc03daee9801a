from pydantic import BaseModel
from sqlalchemy import Column, Integer, String, UniqueConstraint
from sqlalchemy import Enum as SQLEnum

from enums.user_role import UserRole
from models.base import Base


class RoleAssignment(Base):
    __tablename__ = 'user_roles'

    id = Column(Integer, primary_key=True)
    user_id = Column(String, nullable=False)
    role = Column(SQLEnum(UserRole, values_callable=lambda e: [m.value for m in e]), nullable=False)

    __table_args__ = (
        UniqueConstraint('user_id', 'role', name='uq_user_roles_user_role'),
    )


class RoleAssignmentDTO(BaseModel):
    id: int | None = None
    user_id: str | None = None
    role: UserRole | None = None
