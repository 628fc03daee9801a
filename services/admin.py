import logging

from enums.admin_action import AdminAction
from enums.user_role import UserRole
from exceptions.user import UserNotFoundException, SelfModificationException
from models.user import ActorDTO, UserDTO
from repositories.cart import CartRepository
from repositories.role import RoleRepository
from repositories.user import UserRepository
from services.user import UserService
from storage.base import StorageBackend
from utils.permission_utils import can_manage, require_admin


class AdminService:
    """
    Admin console operations on user accounts.

    Self-protection: an admin can never change their own role or delete their
    own account. This is checked before, and independently of, the
    authorization guard, so no admin can lock themselves out.
    """

    @staticmethod
    def _reject_self_modification(actor: ActorDTO | None, target_user_id: str, operation: str) -> None:
        if actor is not None and actor.id == target_user_id:
            logging.warning(f"⚠️ Admin {actor.id} attempted to {operation} their own account")
            raise SelfModificationException(actor.id, operation)

    @staticmethod
    async def toggle_admin(actor: ActorDTO | None, target_user_id: str, storage: StorageBackend) -> UserRole:
        """
        Grant or revoke the admin role of another user.

        If the target holds "admin", every admin assignment row for it is
        removed; otherwise one is inserted. Toggling twice restores the
        original state.

        Args:
            actor: Current actor
            target_user_id: User whose role changes
            storage: Storage backend

        Returns:
            The target's new role

        Raises:
            SelfModificationException: If actor and target are the same user
            PermissionDeniedException: If the actor is not an admin
        """
        AdminService._reject_self_modification(actor, target_user_id, "change the role of")
        actor = require_admin(actor, AdminAction.MANAGE_ROLES)

        if await RoleRepository.has_role(target_user_id, UserRole.ADMIN, storage):
            removed = await RoleRepository.revoke(target_user_id, UserRole.ADMIN, storage)
            logging.info(f"🔽 Admin {actor.id} revoked admin role of user {target_user_id} ({removed} assignments)")
            return UserRole.USER

        await RoleRepository.grant(target_user_id, UserRole.ADMIN, storage)
        logging.info(f"🔼 Admin {actor.id} granted admin role to user {target_user_id}")
        return UserRole.ADMIN

    @staticmethod
    async def delete_user(actor: ActorDTO | None, target_user_id: str, storage: StorageBackend) -> None:
        """
        Delete another user's profile, role assignments and saved cart.

        Orders are kept: they are the store's sales history.

        Raises:
            SelfModificationException: If actor and target are the same user
            PermissionDeniedException: If the actor is not an admin
            UserNotFoundException: If the target has no profile
        """
        AdminService._reject_self_modification(actor, target_user_id, "delete")
        actor = require_admin(actor, AdminAction.MANAGE_ROLES)

        profile = await UserRepository.get_by_user_id(target_user_id, storage)
        if profile is None:
            raise UserNotFoundException(target_user_id)

        await RoleRepository.delete_by_user_id(target_user_id, storage)
        await CartRepository.clear(target_user_id, storage)
        await UserRepository.delete(profile.id, storage)
        logging.info(f"🗑️ Admin {actor.id} deleted user {target_user_id}")

    @staticmethod
    async def list_users(actor: ActorDTO | None, storage: StorageBackend, search: str | None = None) -> list[UserDTO]:
        """User directory for the admin console. Empty for anyone but admins."""
        if not can_manage(actor, AdminAction.MANAGE_ROLES):
            return []
        return await UserService.get_users_with_roles(storage, search)
