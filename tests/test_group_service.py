import pytest

from interrogator.core.exceptions import BusinessLogicError, GroupNotFoundError
from interrogator.models import Question, Section
from interrogator.schemas.group import (
    GroupCreate, GroupUpdate, GroupFilterParams,
    GroupOptionSet, GroupOptionUnset, GroupOptionsSync
)


def _create_data(section, slug="household", **kwargs) -> GroupCreate:
    return GroupCreate(name=kwargs.pop("name", "Household"), slug=slug, section_id=section.id, **kwargs)


async def test_create_group_returns_response_with_order(group_service, section):
    response = await group_service.create_group(_create_data(section, options={"order": 2}), created_by=7)

    assert response.id is not None
    assert response.slug == "household"
    assert response.order == 2
    assert response.is_deleted is False


async def test_create_group_rejects_duplicate_slug(group_service, section):
    await group_service.create_group(_create_data(section))

    with pytest.raises(BusinessLogicError) as exc_info:
        await group_service.create_group(_create_data(section, name="Other"))

    assert exc_info.value.status_code == 400


async def test_duplicate_slug_check_includes_deleted_groups(group_service, section):
    created = await group_service.create_group(_create_data(section))
    await group_service.delete_group(created.id)

    with pytest.raises(BusinessLogicError):
        await group_service.create_group(_create_data(section))


async def test_get_group_by_id_and_slug(group_service, section):
    created = await group_service.create_group(_create_data(section))

    assert (await group_service.get_group(created.id)).slug == "household"
    assert (await group_service.get_group("household")).id == created.id


async def test_get_group_without_identifier_is_not_found(group_service):
    with pytest.raises(GroupNotFoundError) as exc_info:
        await group_service.get_group(None)

    assert exc_info.value.status_code == 404
    assert exc_info.value.lookup is None


async def test_update_group(group_service, section):
    created = await group_service.create_group(_create_data(section))

    updated = await group_service.update_group("household", GroupUpdate(name="  Home  ", slug="home"), updated_by=3)

    assert updated.id == created.id
    assert updated.name == "Home"
    assert updated.slug == "home"
    assert updated.updated_at is not None


async def test_update_group_rejects_taken_slug(group_service, section):
    await group_service.create_group(_create_data(section))
    await group_service.create_group(_create_data(section, slug="employment", name="Employment"))

    with pytest.raises(BusinessLogicError):
        await group_service.update_group("employment", GroupUpdate(slug="household"))


async def test_delete_and_restore_group_by_slug(group_service, section, make_question, group_repo, session):
    created = await group_service.create_group(_create_data(section))
    group = await group_repo.get_by_id(created.id)
    question = await make_question(group, "age")

    message = await group_service.delete_group("household")

    assert message.success is True
    assert message.data["id"] == created.id
    with pytest.raises(GroupNotFoundError):
        await group_service.get_group("household")
    assert (await group_service.get_group("household", include_deleted=True)).is_deleted is True
    assert (await session.get(Question, question.id)).deleted_at is not None

    restored = await group_service.restore_group("household")

    assert restored.is_deleted is False
    assert (await session.get(Question, question.id)).deleted_at is None


async def test_restore_unknown_group_fails(group_service):
    with pytest.raises(GroupNotFoundError):
        await group_service.restore_group("unknown-slug")


async def test_option_operations(group_service, section):
    await group_service.create_group(_create_data(section, options={"order": 1, "color": "red"}))

    response = await group_service.set_option("household", GroupOptionSet(key="required", value=True))
    assert response.options == {"order": 1, "color": "red", "required": True}

    response = await group_service.unset_option("household", GroupOptionUnset(key="required"))
    assert response.options == {"order": 1, "color": "red"}

    response = await group_service.sync_options("household", GroupOptionsSync(options={"order": 2}))
    assert response.options == {"order": 2}
    assert response.order == 2


async def test_get_section_groups_sorted_by_order(group_service, section):
    await group_service.create_group(_create_data(section, slug="third", options={"order": 3}))
    await group_service.create_group(_create_data(section, slug="first"))
    await group_service.create_group(_create_data(section, slug="second", options={"order": 2}))

    groups = await group_service.get_section_groups(section.id)

    assert [group.slug for group in groups] == ["first", "second", "third"]


async def test_get_groups_filters_and_paginates(group_service, section, session):
    other_section = Section(name="Work", slug="work")
    session.add(other_section)
    await session.commit()

    for index in range(5):
        await group_service.create_group(_create_data(section, slug=f"household-{index}", name=f"Household {index}"))
    await group_service.create_group(_create_data(other_section, slug="employment", name="Employment"))
    await group_service.delete_group("household-0")

    page = await group_service.get_groups(GroupFilterParams(section_id=section.id, size=2, sort_by="slug"))
    assert page.total == 4
    assert page.pages == 2
    assert [group.slug for group in page.items] == ["household-1", "household-2"]

    with_deleted = await group_service.get_groups(GroupFilterParams(section_id=section.id, include_deleted=True))
    assert with_deleted.total == 5

    only_deleted = await group_service.get_groups(GroupFilterParams(only_deleted=True))
    assert [group.slug for group in only_deleted.items] == ["household-0"]

    searched = await group_service.get_groups(GroupFilterParams(search="employ"))
    assert [group.slug for group in searched.items] == ["employment"]


@pytest.mark.parametrize("slug", ["Bad Slug!", "42"])
def test_group_create_validates_slug(slug):
    with pytest.raises(ValueError):
        GroupCreate(name="Household", slug=slug, section_id=1)
