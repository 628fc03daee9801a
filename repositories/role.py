import logging

from enums.entity_kind import EntityKind
from enums.user_role import UserRole
from models.role_assignment import RoleAssignmentDTO
from storage.base import StorageBackend, Ordering

logger = logging.getLogger(__name__)


class RoleRepository:
    @staticmethod
    async def get_by_user_id(user_id: str, storage: StorageBackend) -> list[RoleAssignmentDTO]:
        records = await storage.query(EntityKind.ROLE_ASSIGNMENT, {'user_id': user_id}, [Ordering("id")])
        return [RoleAssignmentDTO.model_validate(record) for record in records]

    @staticmethod
    async def get_all(storage: StorageBackend) -> list[RoleAssignmentDTO]:
        records = await storage.query(EntityKind.ROLE_ASSIGNMENT, order_by=[Ordering("id")])
        return [RoleAssignmentDTO.model_validate(record) for record in records]

    @staticmethod
    async def has_role(user_id: str, role: UserRole, storage: StorageBackend) -> bool:
        records = await storage.query(EntityKind.ROLE_ASSIGNMENT, {'user_id': user_id, 'role': role})
        return len(records) > 0

    @staticmethod
    async def grant(user_id: str, role: UserRole, storage: StorageBackend) -> int:
        return await storage.insert(EntityKind.ROLE_ASSIGNMENT, {'user_id': user_id, 'role': role})

    @staticmethod
    async def revoke(user_id: str, role: UserRole, storage: StorageBackend) -> int:
        """
        Remove every assignment of the role from the user.

        Returns:
            Number of assignment rows removed
        """
        records = await storage.query(EntityKind.ROLE_ASSIGNMENT, {'user_id': user_id, 'role': role})
        for record in records:
            await storage.delete(EntityKind.ROLE_ASSIGNMENT, record['id'])
        return len(records)

    @staticmethod
    async def delete_by_user_id(user_id: str, storage: StorageBackend) -> int:
        records = await storage.query(EntityKind.ROLE_ASSIGNMENT, {'user_id': user_id})
        for record in records:
            await storage.delete(EntityKind.ROLE_ASSIGNMENT, record['id'])
        return len(records)
