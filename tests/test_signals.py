import pytest
from django.test import override_settings

from forum_access.services import get_forum_access
from forum_access.signals import connect_forum_signals

pytestmark = pytest.mark.django_db


def test_deleting_forum_removes_it_from_associations(member, admin_user, forums):
    access = get_forum_access()
    staff, general = forums["staff"], forums["general"]
    access.set_associations(member.pk, {staff.pk, general.pk})
    access.set_associations(admin_user.pk, {staff.pk})

    staff.delete()

    assert access.get_associations(member.pk) == {general.pk}
    assert access.get_associations(admin_user.pk) == set()


def test_signals_connect_when_forum_model_installed():
    assert connect_forum_signals() is True


@override_settings(FORUM_ACCESS_FORUM_MODEL="missing.Forum")
def test_signals_skip_missing_forum_model():
    assert connect_forum_signals() is False
