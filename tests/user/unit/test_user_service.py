"""
Unit Tests for UserService
"""

import pytest

from enums.user_role import UserRole
from models.user import UserProfileDTO
from repositories.role import RoleRepository
from repositories.user import UserRepository
from services.user import UserService


class TestCreateIfNotExist:

    @pytest.mark.asyncio
    async def test_creates_once(self, storage):
        await UserService.create_if_not_exist(UserProfileDTO(user_id="u1", name="Ravi", email="r@mail.test"), storage)
        await UserService.create_if_not_exist(UserProfileDTO(user_id="u1", name="Ravi K"), storage)

        profiles = await UserRepository.get_all(storage)
        assert len(profiles) == 1
        assert profiles[0].name == "Ravi K"
        assert profiles[0].email == "r@mail.test"


class TestResolveActor:

    @pytest.mark.asyncio
    async def test_signed_out(self, storage):
        assert await UserService.resolve_actor(None, storage) is None

    @pytest.mark.asyncio
    async def test_ordinary_user(self, storage):
        actor = await UserService.resolve_actor("u1", storage)

        assert actor.id == "u1"
        assert actor.is_admin is False
        assert await UserService.get_role("u1", storage) == UserRole.USER

    @pytest.mark.asyncio
    async def test_admin(self, storage):
        await RoleRepository.grant("u1", UserRole.ADMIN, storage)

        actor = await UserService.resolve_actor("u1", storage)

        assert actor.is_admin is True
        assert await UserService.get_role("u1", storage) == UserRole.ADMIN


class TestGetUsersWithRoles:

    @pytest.mark.asyncio
    async def test_roles_derived_and_search_matches_name_or_email(self, storage):
        await UserService.create_if_not_exist(UserProfileDTO(user_id="u1", name="Ravi", email="ravi@mail.test"), storage)
        await UserService.create_if_not_exist(UserProfileDTO(user_id="u2", name="Meena", email="m@shop.test"), storage)
        await RoleRepository.grant("u2", UserRole.ADMIN, storage)

        users = await UserService.get_users_with_roles(storage)

        assert [user.user_id for user in users] == ["u1", "u2"]
        assert [user.role for user in users] == [UserRole.USER, UserRole.ADMIN]
        assert [user.user_id for user in await UserService.get_users_with_roles(storage, "RAVI")] == ["u1"]
        assert [user.user_id for user in await UserService.get_users_with_roles(storage, "shop.test")] == ["u2"]
        assert await UserService.get_users_with_roles(storage, "nobody") == []
