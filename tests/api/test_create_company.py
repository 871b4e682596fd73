"""Create Company: POST /companies.

Tests cover:
    - Valid input → 201, empty body, Location pointing at the new row
    - The Location id resolves to the same (sanitized) name and city
    - Empty name / digit-bearing city / missing fields → 400 + errors, no row written
    - Markup in name and city is stored HTML-escaped
    - A bare & before letters is escaped, never decoded as an entity
"""


async def test_create_returns_201_with_location(client, count_companies):
    res = await client.post(
        "/companies", json={"companyName": "Globex", "companyCity": "Springfield"},
    )
    assert res.status_code == 201
    assert res.content == b""
    assert res.headers["location"].startswith("/companies/")
    assert await count_companies() == 1


async def test_location_resolves_to_created_company(client):
    res = await client.post(
        "/companies", json={"companyName": "Initech", "companyCity": "Austin"},
    )
    company_id = res.headers["location"].rsplit("/", 1)[1]

    fetched = await client.get(f"/companies/{company_id}")

    assert fetched.status_code == 200
    assert fetched.json() == [{
        "company_id": int(company_id),
        "company_name": "Initech",
        "company_city": "Austin",
    }]


async def test_create_assigns_distinct_ids(client):
    first = await client.post(
        "/companies", json={"companyName": "A", "companyCity": "Denver"},
    )
    second = await client.post(
        "/companies", json={"companyName": "B", "companyCity": "Denver"},
    )
    assert first.headers["location"] != second.headers["location"]


async def test_empty_name_is_rejected_without_insert(client, count_companies):
    res = await client.post(
        "/companies", json={"companyName": "", "companyCity": "Boston"},
    )
    assert res.status_code == 400
    errors = res.json()["errors"]
    assert [e["field"] for e in errors] == ["companyName"]
    assert errors[0]["location"] == "body"
    assert await count_companies() == 0


async def test_city_with_digits_is_rejected_without_insert(client, count_companies):
    res = await client.post(
        "/companies", json={"companyName": "Acme", "companyCity": "Boston 2"},
    )
    assert res.status_code == 400
    errors = res.json()["errors"]
    assert [e["field"] for e in errors] == ["companyCity"]
    assert "letters and spaces" in errors[0]["message"]
    assert await count_companies() == 0


async def test_every_violated_field_is_listed(client, count_companies):
    res = await client.post(
        "/companies", json={"companyName": "", "companyCity": "R2D2"},
    )
    assert res.status_code == 400
    fields = {e["field"] for e in res.json()["errors"]}
    assert fields == {"companyName", "companyCity"}
    assert await count_companies() == 0


async def test_missing_fields_are_rejected(client, count_companies):
    res = await client.post("/companies", json={})
    assert res.status_code == 400
    fields = {e["field"] for e in res.json()["errors"]}
    assert fields == {"companyName", "companyCity"}
    assert await count_companies() == 0


async def test_markup_is_stored_escaped(client, read_companies):
    res = await client.post(
        "/companies",
        json={"companyName": "<b>Tom & Jerry</b>", "companyCity": "New York"},
    )
    assert res.status_code == 201

    rows = await read_companies()
    assert rows[0][1] == "&lt;b&gt;Tom &amp; Jerry&lt;/b&gt;"
    assert rows[0][2] == "New York"


async def test_ampersand_before_letters_is_stored_literally_escaped(client, read_companies):
    res = await client.post(
        "/companies",
        json={"companyName": "Smith&copy Tom&parachute", "companyCity": "Boston"},
    )
    assert res.status_code == 201

    rows = await read_companies()
    assert rows[0][1] == "Smith&amp;copy Tom&amp;parachute"
