import pytest
from django.urls import reverse

from forum_access.services import get_forum_access

pytestmark = pytest.mark.django_db


def _page(user):
    return reverse("forum_access:user_associations", kwargs={"user_id": user.pk})


def test_anonymous_user_is_sent_to_login(client, member):
    resp = client.get(_page(member))

    assert resp.status_code == 302
    assert "/admin/login/" in resp["Location"]


def test_non_manager_gets_no_permission_page(client, member):
    client.force_login(member)

    resp = client.get(_page(member))

    assert resp.status_code == 403
    assert b"permission" in resp.content


def test_manager_sees_forum_checkboxes(client, admin_user, member, forums):
    get_forum_access().set_associations(member.pk, {forums["staff"].pk})
    client.force_login(admin_user)

    resp = client.get(_page(member))

    assert resp.status_code == 200
    content = resp.content.decode()
    assert "Forum Associations" in content
    assert "General" in content and "Staff" in content and "Clients" in content
    assert "Draft" not in content


def test_manager_sees_no_forums_message(client, admin_user, member):
    client.force_login(admin_user)

    resp = client.get(_page(member))

    assert "There are currently no published forums" in resp.content.decode()


def test_unknown_profile_user_is_404(client, admin_user):
    client.force_login(admin_user)
    resp = client.get(reverse("forum_access:user_associations", kwargs={"user_id": 999999}))
    assert resp.status_code == 404


def test_manager_save_overwrites_associations(client, admin_user, member, forums):
    access = get_forum_access()
    access.set_associations(member.pk, {forums["clients"].pk})
    client.force_login(admin_user)

    resp = client.post(_page(member), {
        "forum_associations": [forums["general"].pk, forums["staff"].pk],
    })

    assert resp.status_code == 302
    assert resp["Location"] == _page(member)
    assert access.get_associations(member.pk) == {forums["general"].pk, forums["staff"].pk}


def test_manager_save_with_nothing_checked_empties_associations(client, admin_user, member, forums):
    access = get_forum_access()
    access.set_associations(member.pk, {forums["clients"].pk})
    client.force_login(admin_user)

    client.post(_page(member), {})

    assert access.get_associations(member.pk) == set()


def test_non_manager_cannot_save(client, member, forums):
    client.force_login(member)

    resp = client.post(_page(member), {"forum_associations": [forums["general"].pk]})

    assert resp.status_code == 403
    assert get_forum_access().get_associations(member.pk) == set()


def test_ajax_associate_and_disassociate(client, admin_user, member, forums):
    client.force_login(admin_user)
    url_add = reverse("forum_access:ajax_associate")
    url_remove = reverse("forum_access:ajax_disassociate")
    forum_id = forums["staff"].pk

    resp = client.post(url_add, {"user_id": member.pk, "forum_id": forum_id})
    assert resp.status_code == 200
    assert resp.json() == {"ok": True, "changed": True, "forum_ids": [forum_id]}

    resp = client.post(url_add, {"user_id": member.pk, "forum_id": forum_id})
    assert resp.json()["changed"] is False

    resp = client.post(url_remove, {"user_id": member.pk, "forum_id": forum_id})
    assert resp.json() == {"ok": True, "changed": True, "forum_ids": []}

    resp = client.post(url_remove, {"user_id": member.pk, "forum_id": forum_id})
    assert resp.json()["changed"] is False


@pytest.mark.parametrize("payload", [{}, {"user_id": "x", "forum_id": "1"}, {"user_id": "1", "forum_id": "-2"}])
def test_ajax_rejects_invalid_ids(client, admin_user, payload):
    client.force_login(admin_user)

    resp = client.post(reverse("forum_access:ajax_associate"), payload)

    assert resp.status_code == 400
    assert resp.json()["ok"] is False


def test_ajax_unknown_user_is_404(client, admin_user):
    client.force_login(admin_user)

    resp = client.post(reverse("forum_access:ajax_associate"), {"user_id": 999999, "forum_id": 1})

    assert resp.status_code == 404


def test_ajax_requires_post(client, admin_user):
    client.force_login(admin_user)
    assert client.get(reverse("forum_access:ajax_associate")).status_code == 405


def test_ajax_forbidden_for_non_manager(client, member, forums):
    client.force_login(member)

    resp = client.post(reverse("forum_access:ajax_associate"), {"user_id": member.pk, "forum_id": forums["staff"].pk})

    assert resp.status_code == 403
    assert get_forum_access().get_associations(member.pk) == set()


@pytest.mark.parametrize("field", ["forum_id", "user_id"])
@pytest.mark.parametrize("value", ["²", "9" * 5000])
def test_ajax_rejects_non_ascii_and_oversized_ids(client, admin_user, member, field, value):
    client.force_login(admin_user)
    payload = {"user_id": member.pk, "forum_id": 1}
    payload[field] = value

    resp = client.post(reverse("forum_access:ajax_associate"), payload)

    assert resp.status_code == 400
    assert resp.json()["ok"] is False


def test_manager_save_with_non_ascii_digit_saves_nothing(client, admin_user, member, forums):
    client.force_login(admin_user)

    resp = client.post(_page(member), {"forum_associations": ["²"]})

    assert resp.status_code == 302
    assert get_forum_access().get_associations(member.pk) == set()
