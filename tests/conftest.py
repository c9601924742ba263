import pytest

from forum_access.backends import MemoryMetaStore, StaticAdministrators, StaticForumCatalog
from forum_access.services import ForumAssociations
from forums.constants import STATUS_DRAFT, STATUS_PUBLISH
from forums.models import Forum

ADMIN_ID = 1


@pytest.fixture
def meta_store():
    return MemoryMetaStore()


@pytest.fixture
def catalog():
    return StaticForumCatalog({9: "Nine", 5: "Five", 7: "Seven"})


@pytest.fixture
def access(meta_store, catalog):
    return ForumAssociations(meta_store, StaticAdministrators({ADMIN_ID}), catalog)


@pytest.fixture
def admin_user(django_user_model):
    return django_user_model.objects.create_superuser("admin", "admin@example.com", "pw")


@pytest.fixture
def member(django_user_model):
    return django_user_model.objects.create_user("member", "member@example.com", "pw")


@pytest.fixture
def forums(db):
    return {
        "general": Forum.objects.create(title="General", status=STATUS_PUBLISH),
        "staff": Forum.objects.create(title="Staff", status=STATUS_PUBLISH),
        "clients": Forum.objects.create(title="Clients", status=STATUS_PUBLISH),
        "draft": Forum.objects.create(title="Draft", status=STATUS_DRAFT),
    }
