import pytest
from sqlalchemy import select

from domains.recipe.models import Recipe, Review

RECIPE_PAYLOAD = {
    "titulo": "Tortilla de patatas",
    "descripcion": "Clásica",
    "porciones": 4,
    "dificultad": "Media",
    "tiempo_preparacion": 40,
    "pasos": [
        {"numero": 1, "descripcion": "Pelar las patatas"},
        {"numero": 2, "descripcion": "Freír y cuajar"},
    ],
    "ingredientes": [{"nombre": "Patata", "cantidad": 4}],
    "categorias": [],
}


@pytest.mark.asyncio
async def test_create_recipe(client, author_headers):
    """[API] 레시피 등록 -> 201, 검토 대기"""
    response = await client.post("/api/v1/recipes", json=RECIPE_PAYLOAD, headers=author_headers)

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["data"]["id"] > 0


@pytest.mark.asyncio
async def test_create_recipe_requires_token(client):
    response = await client.post("/api/v1/recipes", json=RECIPE_PAYLOAD)

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_create_recipe_missing_fields(client, author_headers):
    payload = {**RECIPE_PAYLOAD, "pasos": []}

    response = await client.post("/api/v1/recipes", json=payload, headers=author_headers)

    assert response.status_code == 400
    assert response.json()["code"] == "MISSING_RECIPE_FIELD"


@pytest.mark.asyncio
async def test_list_recipes(client, published_recipe):
    response = await client.get("/api/v1/recipes", params={"page": 1, "limit": 5})

    assert response.status_code == 200
    body = response.json()
    assert [r["id"] for r in body["data"]] == [published_recipe]
    assert body["pagination"] == {"total": 1, "total_pages": 1, "page": 1, "limit": 5}


@pytest.mark.asyncio
@pytest.mark.parametrize("params", [{"page": 0}, {"limit": 0}, {"page": "abc"}])
async def test_list_recipes_invalid_pagination(client, params):
    response = await client.get("/api/v1/recipes", params=params)

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_list_recipes_filters(client, published_recipe):
    response = await client.get(
        "/api/v1/recipes", params={"dificultad": "Difícil", "busqueda": "김치"}
    )

    assert response.status_code == 200
    assert response.json()["pagination"]["total"] == 0


@pytest.mark.asyncio
async def test_get_recipe_detail(client, published_recipe):
    response = await client.get(f"/api/v1/recipes/{published_recipe}")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["status"] == "Publicada"
    assert [s["step_number"] for s in data["steps"]] == [1, 2]
    assert data["ingredients"][0]["name"] == "김치"
    assert data["view_count"] == 1


@pytest.mark.asyncio
async def test_get_unpublished_recipe(client, author_headers):
    created = await client.post("/api/v1/recipes", json=RECIPE_PAYLOAD, headers=author_headers)

    response = await client.get(f"/api/v1/recipes/{created.json()['data']['id']}")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_view_count_per_viewer(client, db_session, published_recipe, reader_headers):
    """[API] 같은 조회자는 쿨다운 동안 한 번만, 로그인 사용자는 별도 집계"""
    await client.get(f"/api/v1/recipes/{published_recipe}")
    await client.get(f"/api/v1/recipes/{published_recipe}")
    await client.get(f"/api/v1/recipes/{published_recipe}", headers=reader_headers)

    views = await db_session.scalar(select(Recipe.view_count).where(Recipe.id == published_recipe))
    assert views == 2


@pytest.mark.asyncio
async def test_update_recipe_by_principal(client, db_session, published_recipe, author_headers):
    payload = {**RECIPE_PAYLOAD, "titulo": "Nuevo título"}

    response = await client.put(f"/api/v1/recipes/{published_recipe}", json=payload, headers=author_headers)

    assert response.status_code == 200
    row = (
        await db_session.execute(select(Recipe.title, Recipe.status).where(Recipe.id == published_recipe))
    ).one()
    assert row.title == "Nuevo título"
    assert row.status == "En_Revision"


@pytest.mark.asyncio
async def test_update_recipe_by_other_user(client, published_recipe, reader_headers):
    response = await client.put(f"/api/v1/recipes/{published_recipe}", json=RECIPE_PAYLOAD, headers=reader_headers)

    assert response.status_code == 403
    assert response.json()["code"] == "RECIPE_FORBIDDEN"


@pytest.mark.asyncio
async def test_status_update_requires_admin(client, published_recipe, author_headers):
    response = await client.put(
        f"/api/v1/recipes/{published_recipe}/status",
        json={"nuevo_estado": "Rechazada"},
        headers=author_headers,
    )

    assert response.status_code == 403
    assert response.json()["code"] == "ADMIN_REQUIRED"


@pytest.mark.asyncio
async def test_status_update_by_admin(client, db_session, published_recipe, admin_headers):
    response = await client.put(
        f"/api/v1/recipes/{published_recipe}/status",
        json={"nuevo_estado": "Rechazada", "notas_revisor": "Faltan fotos"},
        headers=admin_headers,
    )

    assert response.status_code == 200
    results = (
        await db_session.execute(
            select(Review.result).where(Review.recipe_id == published_recipe).order_by(Review.id)
        )
    ).scalars().all()
    # fixture 의 공개 + 이번 반려
    assert results == ["Publicada", "Rechazada"]


@pytest.mark.asyncio
async def test_status_update_invalid_state(client, published_recipe, admin_headers):
    response = await client.put(
        f"/api/v1/recipes/{published_recipe}/status",
        json={"nuevo_estado": "Borrador"},
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_STATUS"


@pytest.mark.asyncio
async def test_status_update_missing_recipe(client, admin_headers):
    response = await client.put(
        "/api/v1/recipes/9999/status", json={"nuevo_estado": "Publicada"}, headers=admin_headers
    )

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_and_restore(client, published_recipe, author_headers):
    deleted = await client.delete(f"/api/v1/recipes/{published_recipe}", headers=author_headers)
    assert deleted.status_code == 200

    again = await client.delete(f"/api/v1/recipes/{published_recipe}", headers=author_headers)
    assert again.status_code == 404

    detail = await client.get(f"/api/v1/recipes/{published_recipe}")
    assert detail.status_code == 404

    restored = await client.put(f"/api/v1/recipes/{published_recipe}/restore", headers=author_headers)
    assert restored.status_code == 200


@pytest.mark.asyncio
async def test_delete_by_non_principal(client, published_recipe, reader_headers):
    response = await client.delete(f"/api/v1/recipes/{published_recipe}", headers=reader_headers)

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_restore_by_non_principal(client, published_recipe, author_headers, reader_headers):
    await client.delete(f"/api/v1/recipes/{published_recipe}", headers=author_headers)

    response = await client.put(f"/api/v1/recipes/{published_recipe}/restore", headers=reader_headers)

    assert response.status_code == 403
    assert response.json()["code"] == "RECIPE_FORBIDDEN"


@pytest.mark.asyncio
async def test_restore_by_admin(client, published_recipe, author_headers, admin_headers):
    await client.delete(f"/api/v1/recipes/{published_recipe}", headers=author_headers)

    response = await client.put(f"/api/v1/recipes/{published_recipe}/restore", headers=admin_headers)

    assert response.status_code == 200
