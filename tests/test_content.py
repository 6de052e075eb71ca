def test_missing_section_returns_placeholder(client):
    response = client.get('/api/content?section=about')
    assert response.status_code == 200
    assert response.get_json() == {"section": "about", "title": "", "content": "", "imageUrl": ""}


def test_put_upserts_by_section(admin_client, client):
    first = admin_client.put('/api/content', json={"section": "about", "title": "About me", "content": "hi"})
    assert first.status_code == 200

    second = admin_client.put('/api/content', json={"section": "about", "content": "hello again"})
    assert second.get_json()["id"] == first.get_json()["id"]

    fetched = client.get('/api/content?section=about').get_json()
    assert fetched["title"] == "About me"
    assert fetched["content"] == "hello again"


def test_list_all_sections(admin_client, client):
    admin_client.put('/api/content', json={"section": "about", "title": "About"})
    admin_client.put('/api/content', json={"section": "home_greeting", "content": "**hi**"})

    sections = [c["section"] for c in client.get('/api/content').get_json()]
    assert sections == ["about", "home_greeting"]


def test_put_requires_section(admin_client):
    response = admin_client.put('/api/content', json={"title": "orphan"})
    assert response.status_code == 400
    assert response.get_json() == {"error": "Section is required"}
