"""Role checks used by the booking and inventory APIs."""

from __future__ import annotations

import pytest
from rest_framework.test import APIRequestFactory, force_authenticate
from rest_framework.request import Request

from apps.users.models import User
from apps.users.permissions import IsHotelStaff, IsHotelStaffOrCreateOnly

pytestmark = pytest.mark.django_db


class _View:
    def __init__(self, action):
        self.action = action


def _request(user=None):
    request = APIRequestFactory().get("/")
    if user is not None:
        force_authenticate(request, user=user)
    drf_request = Request(request)
    if user is not None:
        drf_request.user = user
    return drf_request


@pytest.mark.parametrize(
    "role, expected",
    [
        (User.RoleChoices.GUEST, False),
        (User.RoleChoices.FRONT_DESK, True),
        (User.RoleChoices.HOUSEKEEPING, True),
        (User.RoleChoices.ADMIN, True),
    ],
)
def test_staff_roles(role, expected):
    user = User.objects.create_user(email=f"{role.value}@example.com", password="Secret123", role=role)

    assert user.is_hotel_staff() is expected
    assert IsHotelStaff().has_permission(_request(user), _View("list")) is expected


def test_django_staff_flag_counts_as_hotel_staff():
    user = User.objects.create_user(email="ops@example.com", password="Secret123", is_staff=True)

    assert user.is_hotel_staff()


def test_anyone_may_create_booking():
    permission = IsHotelStaffOrCreateOnly()

    assert permission.has_permission(_request(), _View("create"))
    assert not permission.has_permission(_request(), _View("list"))


def test_superuser_is_admin():
    user = User.objects.create_superuser(email="root@example.com", password="Secret123")

    assert user.is_hotel_admin()
    assert user.role == User.RoleChoices.ADMIN
