"""API tests for the /links CRUD endpoints."""

import asyncio
import uuid

import pytest

from shortlinks.api.dependencies import get_link_service
from shortlinks.services.link_service import LinkService

NO_BODY = object()

INVALID_BODIES = [
    NO_BODY,
    {},
    # invalid name
    {"url": "https://example.com"},
    {"name": None, "url": "https://example.com"},
    {"name": True, "url": "https://example.com"},
    {"name": 42, "url": "https://example.com"},
    {"name": {"nested": "json"}, "url": "https://example.com"},
    {"name": "", "url": "https://example.com"},
    {"name": "a/b", "url": "https://example.com/ab"},
    # invalid url
    {"name": "docs"},
    {"name": "docs", "url": None},
    {"name": "docs", "url": False},
    {"name": "docs", "url": 42},
    {"name": "docs", "url": ["https://example.com"]},
    {"name": "docs", "url": ""},
    {"name": "docs", "url": "docs"},
]

INVALID_IDS = ["42", "docs", "not-a-uuid"]


def send_kwargs(payload):
    return {} if payload is NO_BODY else {"json": payload}


def assert_bad_request(response):
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Bad Request"
    assert isinstance(body["message"], list)
    assert body["message"]
    assert all(isinstance(message, str) for message in body["message"])


class TestListLinks:

    @pytest.mark.asyncio
    async def test_without_data(self, client):
        response = await client.get("/links")
        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_with_data(self, client, create_link):
        links = [
            await create_link(f"name-{i}", f"https://example.com/{i}")
            for i in range(3)
        ]

        response = await client.get("/links")

        assert response.status_code == 200
        body = response.json()
        assert len(body) == 3
        assert sorted(body, key=lambda link: link["name"]) == links


class TestCreateLink:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", INVALID_BODIES)
    async def test_rejects_invalid_body(self, client, stored_links, payload):
        response = await client.post("/links", **send_kwargs(payload))
        assert_bad_request(response)
        assert await stored_links() == []

    @pytest.mark.asyncio
    async def test_rejects_malformed_json(self, client):
        response = await client.post(
            "/links",
            content=b"{not json",
            headers={"Content-Type": "application/json"}
        )
        assert_bad_request(response)

    @pytest.mark.asyncio
    async def test_accepts_valid_body(self, client, stored_links):
        payload = {"name": "docs", "url": "https://example.com/docs"}

        response = await client.post("/links", json=payload)

        assert response.status_code == 201
        body = response.json()
        assert body == {**payload, "id": body["id"]}
        uuid.UUID(body["id"])

        [link] = await stored_links()
        assert {"id": str(link.id), "name": link.name, "url": link.url} == body

    @pytest.mark.asyncio
    async def test_duplicate_name(self, client, create_link, stored_links):
        await create_link("docs", "https://example.com/docs")

        response = await client.post("/links", json={"name": "docs", "url": "https://other.example.com"})

        assert response.status_code == 409
        assert response.json() == {"error": "Conflict", "message": "Short name already exists"}
        assert len(await stored_links()) == 1

    @pytest.mark.asyncio
    async def test_concurrent_creates_on_same_name(self, client, stored_links):
        payload = {"name": "race", "url": "https://example.com/race"}

        responses = await asyncio.gather(
            client.post("/links", json=payload),
            client.post("/links", json=payload),
        )

        assert sorted(response.status_code for response in responses) == [201, 409]
        assert len(await stored_links()) == 1

    @pytest.mark.asyncio
    async def test_store_failure_is_internal_error(self, app, client, unavailable_store):
        app.dependency_overrides[get_link_service] = lambda: LinkService(unavailable_store)

        response = await client.post("/links", json={"name": "docs", "url": "https://example.com/docs"})

        assert response.status_code == 500
        assert response.json() == {"error": "Internal Server Error", "message": "Internal Server Error"}


class TestGetLink:

    @pytest.mark.asyncio
    async def test_get_by_id(self, client, create_link):
        link = await create_link("docs", "https://example.com/docs")
        response = await client.get(f"/links/{link['id']}")
        assert response.status_code == 200
        assert response.json() == link

    @pytest.mark.asyncio
    async def test_not_found(self, client):
        response = await client.get(f"/links/{uuid.uuid4()}")
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found", "message": "Not Found"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("link_id", INVALID_IDS)
    async def test_rejects_invalid_id(self, client, link_id):
        assert_bad_request(await client.get(f"/links/{link_id}"))


class TestUpdateLink:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("link_id", INVALID_IDS)
    async def test_rejects_invalid_id(self, client, link_id):
        response = await client.put(f"/links/{link_id}", json={"name": "x", "url": "https://x.org"})
        assert_bad_request(response)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", INVALID_BODIES)
    async def test_rejects_invalid_body(self, client, create_link, stored_links, payload):
        link = await create_link("docs", "https://example.com/docs")

        response = await client.put(f"/links/{link['id']}", **send_kwargs(payload))

        assert_bad_request(response)
        [stored] = await stored_links()
        assert (stored.name, stored.url) == ("docs", "https://example.com/docs")

    @pytest.mark.asyncio
    async def test_not_found(self, client):
        response = await client.put(f"/links/{uuid.uuid4()}", json={"name": "x", "url": "https://x.org"})
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found", "message": "Not Found"}

    @pytest.mark.asyncio
    async def test_update(self, client, create_link, stored_links):
        link = await create_link("x", "https://x.example.com")
        payload = {"name": "x2", "url": "https://x.org"}

        response = await client.put(f"/links/{link['id']}", json=payload)

        assert response.status_code == 200
        assert response.json() == {**payload, "id": link["id"]}
        [stored] = await stored_links()
        assert (str(stored.id), stored.name, stored.url) == (link["id"], "x2", "https://x.org")

    @pytest.mark.asyncio
    async def test_rename_onto_taken_name(self, client, create_link):
        await create_link("a", "https://a.example.com")
        b = await create_link("b", "https://b.example.com")

        response = await client.put(f"/links/{b['id']}", json={"name": "a", "url": "https://b.example.com"})

        assert response.status_code == 409
        assert response.json()["message"] == "Short name already exists"


class TestDeleteLink:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("link_id", INVALID_IDS)
    async def test_rejects_invalid_id(self, client, link_id):
        assert_bad_request(await client.delete(f"/links/{link_id}"))

    @pytest.mark.asyncio
    async def test_not_found(self, client):
        link_id = str(uuid.uuid4())

        response = await client.delete(f"/links/{link_id}")

        assert response.status_code == 404
        assert response.json() == {
            "error": "Not Found",
            "message": f'Link with ID: "{link_id}" not found',
        }

    @pytest.mark.asyncio
    async def test_delete(self, client, create_link, stored_links):
        link = await create_link("docs", "https://example.com/docs")

        response = await client.delete(f"/links/{link['id']}")

        assert response.status_code == 200
        assert response.content == b""
        assert await stored_links() == []

    @pytest.mark.asyncio
    async def test_second_delete_is_not_found(self, client, create_link):
        link = await create_link("docs", "https://example.com/docs")

        first = await client.delete(f"/links/{link['id']}")
        second = await client.delete(f"/links/{link['id']}")

        assert first.status_code == 200
        assert second.status_code == 404
        assert link["id"] in second.json()["message"]
