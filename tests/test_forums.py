import pytest
from django.test import override_settings
from django.urls import reverse

from forum_access.services import get_forum_access

pytestmark = pytest.mark.django_db


def _titles(resp):
    return [f.title for f in resp.context["forums"]]


def test_archive_shows_only_associated_forums(client, member, forums):
    get_forum_access().set_associations(member.pk, {forums["staff"].pk})
    client.force_login(member)

    resp = client.get(reverse("forums:forum_list"))

    assert resp.status_code == 200
    assert _titles(resp) == ["Staff"]


def test_archive_shows_all_published_forums_to_administrator(client, admin_user, forums):
    client.force_login(admin_user)

    resp = client.get(reverse("forums:forum_list"))

    assert _titles(resp) == ["General", "Staff", "Clients"]


def test_archive_is_empty_for_anonymous_visitor(client, forums):
    resp = client.get(reverse("forums:forum_list"))

    assert _titles(resp) == []
    assert b"No forums to show." in resp.content


def test_archive_never_lists_drafts(client, member, forums):
    get_forum_access().set_associations(member.pk, {forums["draft"].pk, forums["general"].pk})
    client.force_login(member)

    resp = client.get(reverse("forums:forum_list"))

    assert _titles(resp) == ["General"]


def test_detail_for_associated_forum(client, member, forums):
    forum = forums["general"]
    get_forum_access().add_association(member.pk, forum.pk)
    client.force_login(member)

    resp = client.get(reverse("forums:forum_detail", args=[forum.pk]))

    assert resp.status_code == 200
    assert b"General" in resp.content


def test_detail_for_unassociated_forum_is_denied(client, member, forums):
    client.force_login(member)

    resp = client.get(reverse("forums:forum_detail", args=[forums["staff"].pk]))

    assert resp.status_code == 403
    assert b"You are not able to view this forum." in resp.content


@override_settings(FORUM_ACCESS_DENIED_MESSAGE="Ask an administrator for access.")
def test_detail_denial_shows_configured_message(client, member, forums):
    client.force_login(member)

    resp = client.get(reverse("forums:forum_detail", args=[forums["staff"].pk]))

    assert resp.status_code == 403
    assert b"Ask an administrator for access." in resp.content


def test_detail_for_draft_is_404(client, admin_user, forums):
    client.force_login(admin_user)

    resp = client.get(reverse("forums:forum_detail", args=[forums["draft"].pk]))

    assert resp.status_code == 404


def test_home_redirects_to_archive(client):
    resp = client.get("/")
    assert resp.status_code == 302
    assert resp["Location"] == reverse("forums:forum_list")
