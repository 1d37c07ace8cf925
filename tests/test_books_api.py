"""
Bookshelf API: Book Endpoint Tests
===================================

What:  End-to-end tests for /book routes through the full middleware stack.
How:   HTTPX AsyncClient over ASGITransport; each test gets a fresh app and shelf.
"""

import pytest


class TestCreateBook:

    @pytest.mark.asyncio
    async def test_create_returns_201_and_record(self, test_client, sample_book_data):
        response = await test_client.post("/book", json=sample_book_data)

        assert response.status_code == 201
        assert response.json() == sample_book_data

    @pytest.mark.asyncio
    async def test_create_duplicate_returns_409(self, test_client, sample_book_data):
        await test_client.post("/book", json=sample_book_data)

        response = await test_client.post("/book", json=dict(sample_book_data, title="Copy"))

        assert response.status_code == 409
        body = response.json()
        assert body["error"] == "duplicate_key"
        assert body["details"]["key"] == sample_book_data["isbn"]

        stored = await test_client.get(f"/book/{sample_book_data['isbn']}")
        assert stored.json()["title"] == "Eloquent JavaScript"

    @pytest.mark.asyncio
    async def test_create_missing_field_returns_400(self, test_client, sample_book_data):
        data = dict(sample_book_data)
        del data["author"]

        response = await test_client.post("/book", json=data)

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "invalid_input"
        assert body["details"]["errors"][0]["field"] == "author"
        assert body["request_id"]

    @pytest.mark.asyncio
    async def test_create_non_numeric_pages_returns_400(self, test_client, sample_book_data):
        response = await test_client.post("/book", json=dict(sample_book_data, numOfPages="many"))

        assert response.status_code == 400
        assert "numOfPages" in response.json()["message"]

    @pytest.mark.asyncio
    async def test_create_boolean_pages_returns_400(self, test_client, sample_book_data):
        response = await test_client.post("/book", json=dict(sample_book_data, numOfPages=True))

        assert response.status_code == 400
        assert response.json()["details"]["field"] == "numOfPages"
        assert (await test_client.get("/book")).json() == []

    @pytest.mark.asyncio
    async def test_create_malformed_json_returns_400(self, test_client):
        response = await test_client.post(
            "/book",
            content=b'{"isbn": "123",',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "invalid_input"

    @pytest.mark.asyncio
    async def test_create_json_array_returns_400(self, test_client, sample_book_data):
        response = await test_client.post("/book", json=[sample_book_data])

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_create_from_html_form(self, test_client):
        form = {
            "isbn": "9781593275846",
            "title": "Eloquent JavaScript",
            "author": "Marijn Haverbeke",
            "publishedDate": "",
            "publisher": "No Starch Press",
            "numOfPages": "472",
        }

        response = await test_client.post("/book", data=form)

        assert response.status_code == 201
        body = response.json()
        assert body["numOfPages"] == 472
        assert body["publishedDate"] is None


class TestReadBooks:

    @pytest.mark.asyncio
    async def test_list_empty(self, test_client):
        response = await test_client.get("/book")

        assert response.status_code == 200
        assert response.json() == []
        assert response.headers["X-Total-Count"] == "0"

    @pytest.mark.asyncio
    async def test_list_returns_all_in_order(self, test_client, sample_book_data, second_book_data):
        await test_client.post("/book", json=sample_book_data)
        await test_client.post("/book", json=second_book_data)

        response = await test_client.get("/book")

        assert response.status_code == 200
        assert [b["isbn"] for b in response.json()] == [
            sample_book_data["isbn"],
            second_book_data["isbn"],
        ]
        assert response.headers["X-Total-Count"] == "2"

    @pytest.mark.asyncio
    async def test_get_by_isbn(self, test_client, sample_book_data):
        await test_client.post("/book", json=sample_book_data)

        response = await test_client.get(f"/book/{sample_book_data['isbn']}")

        assert response.status_code == 200
        assert response.json() == sample_book_data

    @pytest.mark.asyncio
    async def test_get_unknown_returns_404(self, test_client):
        response = await test_client.get("/book/0000000000")

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "not_found"
        assert "0000000000" in body["message"]


class TestUpdateBook:

    @pytest.mark.asyncio
    async def test_put_replaces_fields_and_ignores_body_isbn(self, test_client, sample_book_data):
        await test_client.post("/book", json=sample_book_data)
        new_data = dict(sample_book_data, isbn="1111111111", title="Eloquent JavaScript, 3rd Edition")

        response = await test_client.put(f"/book/{sample_book_data['isbn']}", json=new_data)

        assert response.status_code == 200
        body = response.json()
        assert body["isbn"] == sample_book_data["isbn"]
        assert body["title"] == "Eloquent JavaScript, 3rd Edition"
        assert (await test_client.get("/book/1111111111")).status_code == 404

    @pytest.mark.asyncio
    async def test_put_unknown_returns_404(self, test_client, sample_book_data):
        response = await test_client.put("/book/0000000000", json=sample_book_data)

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_put_incomplete_returns_400(self, test_client, sample_book_data):
        await test_client.post("/book", json=sample_book_data)

        response = await test_client.put(
            f"/book/{sample_book_data['isbn']}", json={"title": "Only a title"}
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_post_form_to_isbn_updates(self, test_client, sample_book_data):
        """The edit page submits a form with POST to /book/{isbn}."""
        await test_client.post("/book", json=sample_book_data)
        form = {
            "isbn": sample_book_data["isbn"],
            "title": "Eloquent JavaScript",
            "author": "Marijn Haverbeke",
            "publishedDate": "2018-12-04",
            "publisher": "No Starch Press",
            "numOfPages": "448",
        }

        response = await test_client.post(f"/book/{sample_book_data['isbn']}", data=form)

        assert response.status_code == 200
        assert response.json()["numOfPages"] == 448
        assert response.json()["publishedDate"] == "2018-12-04"

    @pytest.mark.asyncio
    async def test_patch_changes_one_field(self, test_client, sample_book_data):
        await test_client.post("/book", json=sample_book_data)

        response = await test_client.patch(
            f"/book/{sample_book_data['isbn']}", json={"publisher": "No Starch"}
        )

        assert response.status_code == 200
        assert response.json() == dict(sample_book_data, publisher="No Starch")

    @pytest.mark.asyncio
    async def test_patch_unknown_returns_404(self, test_client):
        response = await test_client.patch("/book/0000000000", json={"title": "x"})

        assert response.status_code == 404


class TestDeleteBook:

    @pytest.mark.asyncio
    async def test_example_scenario(self, test_client):
        """create → get → delete → get 404, as in the README walkthrough."""
        book = {
            "isbn": "9781593275846",
            "title": "Eloquent JavaScript",
            "author": "Marijn Haverbeke",
            "publisher": "No Starch Press",
            "numOfPages": 472,
        }

        assert (await test_client.post("/book", json=book)).status_code == 201

        fetched = await test_client.get("/book/9781593275846")
        assert fetched.status_code == 200
        assert fetched.json() == dict(book, publishedDate=None)

        deleted = await test_client.delete("/book/9781593275846")
        assert deleted.status_code == 200
        assert "9781593275846" in deleted.json()["message"]

        assert (await test_client.get("/book/9781593275846")).status_code == 404
        assert (await test_client.get("/book")).json() == []

    @pytest.mark.asyncio
    async def test_delete_unknown_returns_404(self, test_client):
        response = await test_client.delete("/book/0000000000")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_twice_returns_404(self, test_client, sample_book_data):
        await test_client.post("/book", json=sample_book_data)

        first = await test_client.delete(f"/book/{sample_book_data['isbn']}")
        second = await test_client.delete(f"/book/{sample_book_data['isbn']}")

        assert first.status_code == 200
        assert second.status_code == 404


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_reports_book_count(self, test_client, sample_book_data):
        await test_client.post("/book", json=sample_book_data)

        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["books"] == 1
        assert body["uptime_seconds"] >= 0
