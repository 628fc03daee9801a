"""
Unit Tests for AdminService

Role toggling, account deletion and the user directory, including the
self-protection rule (admins cannot change or delete their own account).
"""

import pytest
from unittest.mock import patch

from enums.user_role import UserRole
from exceptions import (
    AuthorizationException,
    PermissionDeniedException,
    SelfModificationException,
    UserNotFoundException,
)
from models.user import UserProfileDTO
from repositories.role import RoleRepository
from repositories.user import UserRepository
from services.admin import AdminService
from services.cart import Cart, CartService
from services.order import OrderService
from services.user import UserService


async def _seed_users(storage):
    await UserService.create_if_not_exist(UserProfileDTO(user_id="admin-1", name="Meera Admin",
                                                         email="meera@store.test"), storage)
    await UserService.create_if_not_exist(UserProfileDTO(user_id="customer-1", name="Ravi Kumar",
                                                         email="ravi@mail.test"), storage)
    await UserService.create_if_not_exist(UserProfileDTO(user_id="customer-2", name="Asha Rao",
                                                         email="asha@mail.test"), storage)
    await RoleRepository.grant("admin-1", UserRole.ADMIN, storage)


class TestToggleAdmin:
    """Test toggle_admin() method."""

    @pytest.mark.asyncio
    async def test_grant_and_revoke(self, storage, admin_actor):
        await _seed_users(storage)

        granted = await AdminService.toggle_admin(admin_actor, "customer-1", storage)
        assert granted == UserRole.ADMIN
        assert await RoleRepository.has_role("customer-1", UserRole.ADMIN, storage)

        revoked = await AdminService.toggle_admin(admin_actor, "customer-1", storage)
        assert revoked == UserRole.USER
        assert not await RoleRepository.has_role("customer-1", UserRole.ADMIN, storage)

    @pytest.mark.asyncio
    async def test_toggle_twice_restores_state(self, storage, admin_actor):
        await _seed_users(storage)
        await RoleRepository.grant("customer-2", UserRole.ADMIN, storage)
        before = await RoleRepository.get_by_user_id("customer-2", storage)

        await AdminService.toggle_admin(admin_actor, "customer-2", storage)
        await AdminService.toggle_admin(admin_actor, "customer-2", storage)
        after = await RoleRepository.get_by_user_id("customer-2", storage)

        assert [r.role for r in after] == [r.role for r in before] == [UserRole.ADMIN]

    @pytest.mark.asyncio
    async def test_self_toggle_rejected(self, storage, admin_actor):
        await _seed_users(storage)

        with pytest.raises(SelfModificationException):
            await AdminService.toggle_admin(admin_actor, admin_actor.id, storage)

        assert await RoleRepository.has_role(admin_actor.id, UserRole.ADMIN, storage)

    @pytest.mark.asyncio
    @patch('services.admin.require_admin')
    async def test_self_check_runs_before_guard(self, mock_require, storage, admin_actor):
        with pytest.raises(SelfModificationException):
            await AdminService.toggle_admin(admin_actor, admin_actor.id, storage)

        mock_require.assert_not_called()

    @pytest.mark.asyncio
    async def test_self_toggle_rejected_for_non_admin(self, storage, customer_actor):
        with pytest.raises(SelfModificationException):
            await AdminService.toggle_admin(customer_actor, customer_actor.id, storage)

    @pytest.mark.asyncio
    async def test_non_admin_denied(self, storage, customer_actor):
        await _seed_users(storage)

        with pytest.raises(PermissionDeniedException):
            await AdminService.toggle_admin(customer_actor, "customer-2", storage)

        assert not await RoleRepository.has_role("customer-2", UserRole.ADMIN, storage)

    @pytest.mark.asyncio
    async def test_anonymous_denied(self, storage):
        with pytest.raises(AuthorizationException):
            await AdminService.toggle_admin(None, "customer-2", storage)

    @pytest.mark.asyncio
    async def test_revoke_removes_duplicate_rows(self, local_storage, admin_actor):
        """The local backend has no unique constraint, so duplicates can exist."""
        await RoleRepository.grant("customer-1", UserRole.ADMIN, local_storage)
        await RoleRepository.grant("customer-1", UserRole.ADMIN, local_storage)

        new_role = await AdminService.toggle_admin(admin_actor, "customer-1", local_storage)

        assert new_role == UserRole.USER
        assert await RoleRepository.get_by_user_id("customer-1", local_storage) == []

    @pytest.mark.asyncio
    async def test_new_role_reflected_in_actor(self, storage, admin_actor):
        await _seed_users(storage)

        await AdminService.toggle_admin(admin_actor, "customer-1", storage)
        actor = await UserService.resolve_actor("customer-1", storage)

        assert actor.is_admin is True


class TestDeleteUser:
    """Test delete_user() method."""

    @pytest.mark.asyncio
    async def test_delete_removes_profile_and_roles(self, storage, admin_actor):
        await _seed_users(storage)
        await RoleRepository.grant("customer-1", UserRole.ADMIN, storage)

        await AdminService.delete_user(admin_actor, "customer-1", storage)

        assert await UserRepository.get_by_user_id("customer-1", storage) is None
        assert await RoleRepository.get_by_user_id("customer-1", storage) == []

    @pytest.mark.asyncio
    async def test_delete_keeps_orders(self, storage, admin_actor, customer_actor, sofa):
        await _seed_users(storage)
        cart = Cart(customer_actor.id)
        cart.add_or_increment(sofa)
        await CartService.save(cart, storage)
        order = await OrderService.place_order(customer_actor, cart, "COD", "1 Lake View, Kochi", storage)

        await AdminService.delete_user(admin_actor, customer_actor.id, storage)

        assert (await OrderService.get_order(admin_actor, order.id, storage)).user_id == customer_actor.id
        assert (await CartService.load(customer_actor.id, storage)).is_empty

    @pytest.mark.asyncio
    async def test_self_delete_rejected(self, storage, admin_actor):
        await _seed_users(storage)

        with pytest.raises(SelfModificationException):
            await AdminService.delete_user(admin_actor, admin_actor.id, storage)

        assert await UserRepository.get_by_user_id(admin_actor.id, storage) is not None

    @pytest.mark.asyncio
    async def test_non_admin_denied(self, storage, customer_actor):
        await _seed_users(storage)

        with pytest.raises(PermissionDeniedException):
            await AdminService.delete_user(customer_actor, "customer-2", storage)

        assert await UserRepository.get_by_user_id("customer-2", storage) is not None

    @pytest.mark.asyncio
    async def test_unknown_user(self, storage, admin_actor):
        with pytest.raises(UserNotFoundException):
            await AdminService.delete_user(admin_actor, "ghost", storage)


class TestListUsers:
    """Test list_users() method."""

    @pytest.mark.asyncio
    async def test_lists_users_with_roles(self, storage, admin_actor):
        await _seed_users(storage)

        users = await AdminService.list_users(admin_actor, storage)

        assert [(user.user_id, user.role) for user in users] == [
            ("admin-1", UserRole.ADMIN),
            ("customer-1", UserRole.USER),
            ("customer-2", UserRole.USER),
        ]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("search,expected", [
        ("ravi", ["customer-1"]),
        ("MAIL.TEST", ["customer-1", "customer-2"]),
        ("nobody", []),
    ])
    async def test_search(self, storage, admin_actor, search, expected):
        await _seed_users(storage)

        users = await AdminService.list_users(admin_actor, storage, search=search)

        assert [user.user_id for user in users] == expected

    @pytest.mark.asyncio
    async def test_denied_is_empty(self, storage, customer_actor):
        await _seed_users(storage)

        assert await AdminService.list_users(customer_actor, storage) == []
        assert await AdminService.list_users(None, storage) == []
