from enums.entity_kind import EntityKind
from models.user import UserProfileDTO
from storage.base import StorageBackend, Ordering


class UserRepository:
    @staticmethod
    async def create(profile_dto: UserProfileDTO, storage: StorageBackend) -> int:
        record = profile_dto.model_dump(exclude={'id'}, exclude_none=True)
        return await storage.insert(EntityKind.USER_PROFILE, record)

    @staticmethod
    async def get_by_user_id(user_id: str, storage: StorageBackend) -> UserProfileDTO | None:
        records = await storage.query(EntityKind.USER_PROFILE, {'user_id': user_id})
        if records:
            return UserProfileDTO.model_validate(records[0])
        else:
            return None

    @staticmethod
    async def get_all(storage: StorageBackend) -> list[UserProfileDTO]:
        records = await storage.query(EntityKind.USER_PROFILE, order_by=[Ordering("id")])
        return [UserProfileDTO.model_validate(record) for record in records]

    @staticmethod
    async def delete(profile_id: int, storage: StorageBackend) -> None:
        await storage.delete(EntityKind.USER_PROFILE, profile_id)

    @staticmethod
    async def update(profile_dto: UserProfileDTO, storage: StorageBackend) -> None:
        patch = profile_dto.model_dump(include={'name', 'email'}, exclude_none=True)
        await storage.update(EntityKind.USER_PROFILE, profile_dto.id, patch)
