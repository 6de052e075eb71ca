def test_create_and_list_in_order(admin_client, client):
    second = admin_client.post('/api/contact-links', json={"name": "GitHub", "url": "https://github.com/me", "order": 2})
    first = admin_client.post('/api/contact-links', json={"name": "Email", "url": "mailto:me@example.com", "order": 1})
    assert second.status_code == 201
    assert first.status_code == 201

    links = client.get('/api/contact-links').get_json()
    assert [l["name"] for l in links] == ["Email", "GitHub"]
    assert links[0]["isActive"] is True
    assert links[0]["showOnDesktop"] is True
    assert links[0]["iconUrl"] == ""


def test_requires_name_and_url(admin_client):
    response = admin_client.post('/api/contact-links', json={"name": "GitHub"})
    assert response.status_code == 400
    assert response.get_json() == {"error": "Name and URL are required"}


def test_multipart_update_coerces_strings(admin_client):
    link = admin_client.post('/api/contact-links', json={"name": "GitHub", "url": "https://github.com/me"}).get_json()

    response = admin_client.put('/api/contact-links', data={
        "id": str(link["id"]),
        "name": "GitHub",
        "url": "https://github.com/me2",
        "isActive": "false",
        "showOnDesktop": "false",
        "order": "4",
    }, content_type='multipart/form-data')

    assert response.status_code == 200
    updated = response.get_json()
    assert updated["url"] == "https://github.com/me2"
    assert updated["isActive"] is False
    assert updated["showOnDesktop"] is False
    assert updated["order"] == 4


def test_create_inactive_from_form(admin_client):
    response = admin_client.post('/api/contact-links', data={
        "name": "Old blog", "url": "https://old.example.com", "isActive": "false"
    }, content_type='multipart/form-data')
    assert response.get_json()["isActive"] is False


def test_delete_is_hard(admin_client, client):
    link = admin_client.post('/api/contact-links', json={"name": "GitHub", "url": "https://github.com/me"}).get_json()
    assert admin_client.delete(f'/api/contact-links?id={link["id"]}').get_json() == {"success": True}
    assert client.get('/api/contact-links').get_json() == []


def test_delete_requires_id(admin_client):
    assert admin_client.delete('/api/contact-links?id=abc').status_code == 400
