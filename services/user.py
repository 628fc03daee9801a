import asyncio
import logging

from enums.user_role import UserRole
from models.user import UserProfileDTO, UserDTO, ActorDTO
from repositories.role import RoleRepository
from repositories.user import UserRepository
from storage.base import StorageBackend
from utils.permission_utils import is_admin_user


class UserService:

    @staticmethod
    async def create_if_not_exist(profile_dto: UserProfileDTO, storage: StorageBackend) -> UserProfileDTO:
        """Create the profile on first sign-in, refresh name and email afterwards."""
        profile = await UserRepository.get_by_user_id(profile_dto.user_id, storage)
        match profile:
            case None:
                profile_dto.id = await UserRepository.create(profile_dto, storage)
                logging.info(f"Created profile for user {profile_dto.user_id}")
                return profile_dto
            case _:
                update_profile_dto = UserProfileDTO(**profile.model_dump())
                update_profile_dto.name = profile_dto.name or profile.name
                update_profile_dto.email = profile_dto.email or profile.email
                await UserRepository.update(update_profile_dto, storage)
                return update_profile_dto

    @staticmethod
    async def get(user_id: str, storage: StorageBackend) -> UserProfileDTO | None:
        return await UserRepository.get_by_user_id(user_id, storage)

    @staticmethod
    async def resolve_actor(user_id: str | None, storage: StorageBackend) -> ActorDTO | None:
        """
        Build the current actor from the identity provider's user id.

        The admin flag is derived from role assignments on every call, so a
        role toggle takes effect on the actor's next request.

        Returns:
            ActorDTO, or None when nobody is signed in
        """
        if not user_id:
            return None
        return ActorDTO(id=user_id, is_admin=await is_admin_user(user_id, storage))

    @staticmethod
    async def get_role(user_id: str, storage: StorageBackend) -> UserRole:
        return UserRole.ADMIN if await is_admin_user(user_id, storage) else UserRole.USER

    @staticmethod
    async def get_users_with_roles(storage: StorageBackend, search: str | None = None) -> list[UserDTO]:
        """
        List every profile with its derived role.

        Args:
            storage: Storage backend
            search: Optional case-insensitive match on name or email

        Returns:
            List of UserDTO in profile creation order
        """
        profiles, assignments = await asyncio.gather(
            UserRepository.get_all(storage),
            RoleRepository.get_all(storage)
        )
        admin_ids = {assignment.user_id for assignment in assignments if assignment.role == UserRole.ADMIN}

        users = [
            UserDTO(
                user_id=profile.user_id,
                name=profile.name or "",
                email=profile.email or "",
                role=UserRole.ADMIN if profile.user_id in admin_ids else UserRole.USER,
                created_at=profile.created_at
            )
            for profile in profiles
        ]

        if search:
            needle = search.strip().lower()
            users = [user for user in users if needle in user.name.lower() or needle in user.email.lower()]
        return users
