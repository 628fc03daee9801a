from datetime import datetime

from pydantic import BaseModel
from sqlalchemy import Column, Integer, String, DateTime, func

from enums.user_role import UserRole
from models.base import Base


class UserProfile(Base):
    __tablename__ = 'profiles'

    id = Column(Integer, primary_key=True)
    # Identity issued by the external auth provider
    user_id = Column(String, nullable=False, unique=True)
    name = Column(String, nullable=False, default="")
    email = Column(String, nullable=False, default="")
    created_at = Column(DateTime, default=func.now())


class UserProfileDTO(BaseModel):
    id: int | None = None
    user_id: str | None = None
    name: str | None = None
    email: str | None = None
    created_at: datetime | None = None


class UserDTO(BaseModel):
    """Profile joined with its derived role, as listed in the admin console."""
    user_id: str
    name: str = ""
    email: str = ""
    role: UserRole = UserRole.USER
    created_at: datetime | None = None


class ActorDTO(BaseModel):
    """The current actor as provided by the identity collaborator."""
    id: str
    is_admin: bool = False
