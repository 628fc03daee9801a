"""
Centralized permission utilities for actor authorization.

This module is the single choke point for privileged actions. Every admin
mutation (order status, catalog, roles) and every admin-only read goes
through can_manage(), so the rule "admin role assignment required" lives in
exactly one place.

Denied reads are expected to return empty results at the call site; denied
mutations raise through require_admin() and write nothing.
"""

import logging

from enums.admin_action import AdminAction
from enums.user_role import UserRole
from exceptions.authorization import PermissionDeniedException, NotAuthenticatedException
from models.user import ActorDTO
from repositories.role import RoleRepository
from storage.base import StorageBackend

logger = logging.getLogger(__name__)


def can_manage(actor: ActorDTO | None, action: AdminAction) -> bool:
    """
    Check whether an actor may perform a privileged action.

    Every AdminAction currently requires the admin flag; the action is
    taken anyway so call sites state what they are about to do.

    Args:
        actor: Current actor, None when signed out
        action: Privileged action being attempted

    Returns:
        True if the actor is signed in and an admin, False otherwise

    Example:
        >>> can_manage(ActorDTO(id="u1", is_admin=True), AdminAction.MANAGE_ROLES)
        True
        >>> can_manage(None, AdminAction.VIEW_ALL_ORDERS)
        False
    """
    return actor is not None and actor.is_admin


def require_admin(actor: ActorDTO | None, action: AdminAction) -> ActorDTO:
    """
    Guard a privileged mutation.

    Returns:
        The actor, once authorized

    Raises:
        PermissionDeniedException: If can_manage() denies the action
    """
    if not can_manage(actor, action):
        actor_id = actor.id if actor else None
        logger.warning(f"Permission denied: actor {actor_id} attempted {action.value}")
        raise PermissionDeniedException(actor_id, action.value)
    return actor


def require_authenticated(actor: ActorDTO | None, operation: str) -> ActorDTO:
    """Raise NotAuthenticatedException if nobody is signed in."""
    if actor is None:
        logger.warning(f"Unauthenticated attempt to {operation}")
        raise NotAuthenticatedException(operation)
    return actor


async def is_admin_user(user_id: str, storage: StorageBackend) -> bool:
    """
    Derive the admin flag of a user from their role assignments.

    Absence of an "admin" assignment means ordinary-user privilege.

    Args:
        user_id: Identity issued by the auth provider
        storage: Storage backend

    Returns:
        True if the user holds at least one admin assignment
    """
    return await RoleRepository.has_role(user_id, UserRole.ADMIN, storage)
