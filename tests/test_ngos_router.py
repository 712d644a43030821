from ngo_importer import import_ngos

def test_list_ngos_sorted_by_name(client, db_path):
    import_ngos(db_path=db_path)

    response = client.get("/api/v1/ngos")

    assert response.status_code == 200
    names = [ngo["name"] for ngo in response.json()]
    assert names == ["Annapurna Community Kitchen", "Feeding Hands Trust", "Roti Bank Foundation"]

def test_list_ngos_empty(client):
    assert client.get("/api/v1/ngos").json() == []

def test_get_ngo_details(client, db_path):
    import_ngos(db_path=db_path)

    response = client.get("/api/v1/ngos/7e2a4b6c-1d3f-4a5b-8c9d-0e1f2a3b4c33")

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Feeding Hands Trust"
    assert body["contact_phone"] is None
    assert body["capacity_kg"] is None

def test_get_unknown_ngo(client):
    response = client.get("/api/v1/ngos/does-not-exist")

    assert response.status_code == 404
