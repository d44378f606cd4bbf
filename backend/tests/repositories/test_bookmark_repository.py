"""Tests for the SQLAlchemy bookmark repository (PostgreSQL)."""
import pytest
from sqlalchemy import select
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from models.bookmark import Bookmark
from repositories.bookmark_repository import SqlAlchemyBookmarkRepository
from schemas.bookmark import BookmarkCreate, BookmarkUpdate
from services.exceptions import StoreUnavailableError


@pytest.fixture
def repo(db_session: AsyncSession) -> SqlAlchemyBookmarkRepository:
    """Repository bound to the rolled-back test session."""
    return SqlAlchemyBookmarkRepository(db_session)


@pytest.fixture
async def stored(repo: SqlAlchemyBookmarkRepository) -> Bookmark:
    """A bookmark with every field set."""
    return await repo.create(
        BookmarkCreate(
            title="Example",
            url="https://example.com",
            description="An <em>example</em> site",
            rating=4,
        ),
    )


async def test__list_all__empty(repo: SqlAlchemyBookmarkRepository) -> None:
    assert await repo.list_all() == []


async def test__create__assigns_id_and_keeps_raw_values(
    repo: SqlAlchemyBookmarkRepository, db_session: AsyncSession,
) -> None:
    bookmark = await repo.create(
        BookmarkCreate(title="<script>x</script>", url="https://example.com"),
    )

    assert bookmark.id is not None
    result = await db_session.execute(select(Bookmark).where(Bookmark.id == bookmark.id))
    row = result.scalar_one()
    assert row.title == "<script>x</script>"
    assert row.url == "https://example.com"
    assert row.description is None
    assert row.rating is None


async def test__list_all__insertion_order(repo: SqlAlchemyBookmarkRepository) -> None:
    created = [
        await repo.create(BookmarkCreate(title=f"B{i}", url=f"https://b{i}.example"))
        for i in range(3)
    ]
    listed = await repo.list_all()
    assert [b.id for b in listed] == [b.id for b in created]


async def test__get_by_id__found_and_missing(
    repo: SqlAlchemyBookmarkRepository, stored: Bookmark,
) -> None:
    assert (await repo.get_by_id(stored.id)).title == "Example"
    assert await repo.get_by_id(stored.id + 1000) is None


async def test__update_by_id__merges_only_supplied_fields(
    repo: SqlAlchemyBookmarkRepository, stored: Bookmark, db_session: AsyncSession,
) -> None:
    bookmark_id = stored.id
    count = await repo.update_by_id(bookmark_id, BookmarkUpdate(title="Renamed"))
    assert count == 1

    db_session.expire_all()
    row = await repo.get_by_id(bookmark_id)
    assert row.title == "Renamed"
    assert row.url == "https://example.com"
    assert row.description == "An <em>example</em> site"
    assert row.rating == 4


async def test__update_by_id__explicit_none_clears(
    repo: SqlAlchemyBookmarkRepository, stored: Bookmark, db_session: AsyncSession,
) -> None:
    bookmark_id = stored.id
    await repo.update_by_id(bookmark_id, BookmarkUpdate(description=None, rating=None))

    db_session.expire_all()
    row = await repo.get_by_id(bookmark_id)
    assert row.description is None
    assert row.rating is None
    assert row.title == "Example"


async def test__update_by_id__missing_row(repo: SqlAlchemyBookmarkRepository) -> None:
    assert await repo.update_by_id(987654, BookmarkUpdate(title="x")) == 0


async def test__delete_by_id(
    repo: SqlAlchemyBookmarkRepository, stored: Bookmark,
) -> None:
    assert await repo.delete_by_id(stored.id) == 1
    assert await repo.get_by_id(stored.id) is None
    assert await repo.delete_by_id(stored.id) == 0


async def test__ids_not_reused_after_delete(
    repo: SqlAlchemyBookmarkRepository, stored: Bookmark,
) -> None:
    await repo.delete_by_id(stored.id)
    new = await repo.create(BookmarkCreate(title="Next", url="https://next.example"))
    assert new.id > stored.id


async def test__store_errors_are_wrapped() -> None:
    """Driver errors surface as StoreUnavailableError with the cause chained."""

    class FailingSession:
        async def execute(self, *_args: object, **_kwargs: object) -> None:
            raise OperationalError("SELECT", {}, Exception("connection refused"))

    repo = SqlAlchemyBookmarkRepository(FailingSession())  # type: ignore[arg-type]

    with pytest.raises(StoreUnavailableError) as exc_info:
        await repo.list_all()
    assert isinstance(exc_info.value.__cause__, OperationalError)


async def test__commit_errors_are_wrapped() -> None:
    """A failing commit surfaces as StoreUnavailableError with the cause chained."""

    class FailingCommitSession:
        async def commit(self) -> None:
            raise OperationalError("COMMIT", {}, Exception("server closed the connection"))

    repo = SqlAlchemyBookmarkRepository(FailingCommitSession())  # type: ignore[arg-type]

    with pytest.raises(StoreUnavailableError) as exc_info:
        await repo.commit()
    assert isinstance(exc_info.value.__cause__, OperationalError)
