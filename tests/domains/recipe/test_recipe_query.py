import pytest
from sqlalchemy import update

from domains.recipe.models import Difficulty, PublicationStatus, Recipe
from domains.recipe.query import RecipeListFilter, build_count_query, build_page_query
from domains.recipe.repository import RecipeRepository


async def publish(repo: RecipeRepository, author, admin, request, **columns) -> int:
    recipe_id = await repo.create_recipe(author.id, request)
    await repo.update_status(recipe_id, PublicationStatus.PUBLISHED, admin.id, "")
    if columns:
        await repo.session.execute(
            update(Recipe)
            .where(Recipe.id == recipe_id)
            .values(**columns)
            .execution_options(synchronize_session=False)
        )
        await repo.session.commit()
    return recipe_id


@pytest.fixture
def repo(db_session):
    return RecipeRepository(db_session)


@pytest.mark.asyncio
async def test_only_published_and_active_recipes_listed(repo, author, admin, recipe_request):
    """[Query] 기본 조건: 공개 + 삭제되지 않음"""
    visible = await publish(repo, author, admin, recipe_request(title="공개"))
    deleted = await publish(repo, author, admin, recipe_request(title="삭제됨"))
    await repo.soft_delete_recipe(deleted)
    await repo.create_recipe(author.id, recipe_request(title="검토중"))

    filters = RecipeListFilter()
    rows = await repo.list_recipes(filters, page=1, limit=10)

    assert await repo.count_recipes(filters) == 1
    assert [row["id"] for row in rows] == [visible]
    assert rows[0]["author_name"] == "작성자"


@pytest.mark.asyncio
async def test_search_is_case_insensitive_on_title_or_description(repo, author, admin, recipe_request):
    await publish(repo, author, admin, recipe_request(title="Paella Valenciana"))
    other = recipe_request(title="Tortilla")
    other.description = "con PAELLA de acompañamiento"
    await publish(repo, author, admin, other)
    await publish(repo, author, admin, recipe_request(title="Gazpacho"))

    filters = RecipeListFilter(search="paella")

    assert await repo.count_recipes(filters) == 2


@pytest.mark.asyncio
async def test_search_escapes_wildcards(repo, author, admin, recipe_request):
    await publish(repo, author, admin, recipe_request(title="100% cacao"))
    await publish(repo, author, admin, recipe_request(title="1000 hojas"))

    assert await repo.count_recipes(RecipeListFilter(search="100%")) == 1
    assert await repo.count_recipes(RecipeListFilter(search="_")) == 0


@pytest.mark.asyncio
async def test_filters_difficulty_prep_time_and_category(repo, author, admin, recipe_request):
    easy = recipe_request(title="쉬움")
    easy.categories = [1]
    hard = recipe_request(title="어려움")
    hard.difficulty = Difficulty.HARD
    hard.prep_time = 120
    hard.categories = [1, 2]

    easy_id = await publish(repo, author, admin, easy)
    hard_id = await publish(repo, author, admin, hard)

    by_difficulty = await repo.list_recipes(RecipeListFilter(difficulty=Difficulty.HARD), 1, 10)
    assert [row["id"] for row in by_difficulty] == [hard_id]

    by_time = await repo.list_recipes(RecipeListFilter(max_prep_time=60), 1, 10)
    assert [row["id"] for row in by_time] == [easy_id]

    assert await repo.count_recipes(RecipeListFilter(category_id=1)) == 2
    assert await repo.count_recipes(RecipeListFilter(category_id=2)) == 1


@pytest.mark.asyncio
async def test_popular_orders_by_like_count(repo, author, admin, recipe_request):
    low = await publish(repo, author, admin, recipe_request(title="low"), like_count=1)
    high = await publish(repo, author, admin, recipe_request(title="high"), like_count=10)
    mid = await publish(repo, author, admin, recipe_request(title="mid"), like_count=5)

    rows = await repo.list_recipes(RecipeListFilter(popular=True), 1, 10)

    assert [row["id"] for row in rows] == [high, mid, low]


@pytest.mark.asyncio
async def test_pagination_uses_same_predicates(repo, author, admin, recipe_request):
    ids = [await publish(repo, author, admin, recipe_request(title=f"r{i}")) for i in range(5)]

    filters = RecipeListFilter()
    first = await repo.list_recipes(filters, page=1, limit=2)
    last = await repo.list_recipes(filters, page=3, limit=2)

    assert len(first) == 2
    assert len(last) == 1
    # 같은 공개 시각이면 id 역순
    assert [row["id"] for row in first] == [ids[4], ids[3]]
    assert last[0]["id"] == ids[0]


def test_count_and_page_queries_share_joins():
    filters = RecipeListFilter(category_id=3, search="x")

    count_sql = str(build_count_query(filters))
    page_sql = str(build_page_query(filters, page=1, limit=10))

    for fragment in ("recipe_authors", "users", "recipe_categories"):
        assert fragment in count_sql
        assert fragment in page_sql
