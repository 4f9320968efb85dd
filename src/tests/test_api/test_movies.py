import pytest
from bson import ObjectId
from pymongo.errors import AutoReconnect

MOVIE_ID = "507f1f77bcf86cd799439011"


@pytest.mark.api
@pytest.mark.asyncio
async def test_list_movies_is_capped_at_ten(client, seed_movies):
    resp = await client.get("/api/movies")

    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == 200
    assert len(data["data"]) == 10
    assert data["data"][0]["_id"] == str(seed_movies[0]["_id"])


@pytest.mark.api
@pytest.mark.asyncio
async def test_list_movies_empty(client):
    resp = await client.get("/api/movies")
    assert resp.status_code == 200
    assert resp.json() == {"status": 200, "data": []}


@pytest.mark.api
@pytest.mark.asyncio
async def test_get_movie_by_id(client, seed_movies):
    movie = seed_movies[3]

    resp = await client.get(f"/api/movies/{movie['_id']}")

    assert resp.status_code == 200
    assert resp.json() == {
        "status": 200,
        "data": {
            "_id": str(movie["_id"]),
            "title": movie["title"],
            "year": movie["year"]
        }
    }


@pytest.mark.api
@pytest.mark.asyncio
async def test_get_movie_not_found(client):
    resp = await client.get(f"/api/movies/{ObjectId()}")
    assert resp.status_code == 404
    assert resp.json() == {"status": 404, "message": "Movie not found"}


@pytest.mark.api
@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["GET", "PUT", "DELETE", "POST"])
@pytest.mark.parametrize(
    "movie_id", ["invalid-id", "123", MOVIE_ID + "f", MOVIE_ID + "%0A"]
)
async def test_invalid_movie_id_rejected_before_database(
    client, fake_db, method, movie_id
):
    resp = await client.request(
        method,
        f"/api/movies/{movie_id}",
        json={"title": "Foo"} if method in ("PUT", "POST") else None
    )

    assert resp.status_code == 400
    assert resp.json() == {"status": 400, "message": "Invalid movie ID"}
    assert fake_db.calls == []


@pytest.mark.api
@pytest.mark.asyncio
async def test_create_movie_with_given_id_then_get(client, fake_db):
    resp = await client.post(f"/api/movies/{MOVIE_ID}", json={"title": "Foo"})

    assert resp.status_code == 201
    assert resp.json() == {
        "status": 201,
        "message": "Movie created",
        "data": {"acknowledged": True, "insertedId": MOVIE_ID}
    }
    stored = await fake_db["movies"].find_one({"_id": ObjectId(MOVIE_ID)})
    assert stored == {"_id": ObjectId(MOVIE_ID), "title": "Foo"}

    resp = await client.get(f"/api/movies/{MOVIE_ID}")
    assert resp.status_code == 200
    assert resp.json() == {
        "status": 200,
        "data": {"_id": MOVIE_ID, "title": "Foo"}
    }


@pytest.mark.api
@pytest.mark.asyncio
async def test_create_movie_with_existing_id(client):
    await client.post(f"/api/movies/{MOVIE_ID}", json={"title": "Foo"})

    resp = await client.post(f"/api/movies/{MOVIE_ID}", json={"title": "Bar"})

    assert resp.status_code == 400
    assert resp.json()["status"] == 400


@pytest.mark.api
@pytest.mark.asyncio
async def test_update_movie(client, fake_db, seed_movies):
    movie_id = seed_movies[0]["_id"]

    resp = await client.put(
        f"/api/movies/{movie_id}",
        json={"title": "Renamed", "rated": "PG"}
    )

    assert resp.status_code == 200
    assert resp.json() == {
        "status": 200,
        "message": "Movie updated",
        "data": {
            "acknowledged": True,
            "matchedCount": 1,
            "modifiedCount": 1,
            "upsertedId": None
        }
    }
    stored = await fake_db["movies"].find_one({"_id": movie_id})
    assert stored["title"] == "Renamed"
    assert stored["rated"] == "PG"
    assert stored["year"] == seed_movies[0]["year"]


@pytest.mark.api
@pytest.mark.asyncio
async def test_update_missing_movie_reports_no_match(client):
    resp = await client.put(f"/api/movies/{ObjectId()}", json={"title": "X"})

    assert resp.status_code == 200
    assert resp.json()["data"]["matchedCount"] == 0


@pytest.mark.api
@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [{}, {"_id": "5a9427648b0beebeb69579e7", "title": "X"}],
    ids=["empty-set", "immutable-id"]
)
async def test_update_movie_rejected_by_server(
    client, fake_db, seed_movies, payload
):
    movie_id = seed_movies[0]["_id"]

    resp = await client.put(f"/api/movies/{movie_id}", json=payload)

    assert resp.status_code == 500
    assert resp.json() == {
        "status": 500,
        "message": "Internal Server Error",
        "error": "An unexpected database error occurred."
    }
    stored = await fake_db["movies"].find_one({"_id": movie_id})
    assert stored["title"] == seed_movies[0]["title"]


@pytest.mark.api
@pytest.mark.asyncio
async def test_delete_movie_keeps_comments(
    client, fake_db, seed_movies, seed_comments
):
    movie_id = seed_movies[0]["_id"]

    resp = await client.delete(f"/api/movies/{movie_id}")

    assert resp.status_code == 200
    assert resp.json() == {
        "status": 200,
        "message": "Movie deleted",
        "data": {"acknowledged": True, "deletedCount": 1}
    }
    assert await fake_db["movies"].find_one({"_id": movie_id}) is None
    orphans = await fake_db["comments"].find({"movie_id": movie_id}).to_list()
    assert len(orphans) == 2


@pytest.mark.api
@pytest.mark.asyncio
async def test_database_error_returns_sanitized_500(client, fake_db):
    fake_db.fail_all(AutoReconnect("connection reset by 10.0.0.12"))

    resp = await client.get(f"/api/movies/{MOVIE_ID}")

    assert resp.status_code == 500
    data = resp.json()
    assert data["status"] == 500
    assert data["message"] == "Internal Server Error"
    assert "10.0.0.12" not in data["error"]


@pytest.mark.api
@pytest.mark.asyncio
async def test_list_movies_database_error(client, fake_db):
    fake_db.fail_all(AutoReconnect("boom"))

    resp = await client.get("/api/movies")

    assert resp.status_code == 500
