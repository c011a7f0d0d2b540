import json

import pytest
import requests
import responses

from backend.clients.jsonplaceholder_client import ApiResponse, JsonPlaceholderClient
from backend.utils.errors import ExternalServiceError

BASE = "https://jsonplaceholder.test"


@pytest.fixture
def api():
    return JsonPlaceholderClient(BASE, timeout=5)


@responses.activate
def test_get_post(api):
    responses.add(responses.GET, f"{BASE}/posts/1", json={"id": 1, "userId": 1, "title": "t", "body": "b"})
    result = api.get_post(1)
    assert isinstance(result, ApiResponse)
    assert result.status == 200
    assert result.status_text == "OK"
    assert result.data["title"] == "t"


@responses.activate
def test_create_post_sends_json_body(api):
    responses.add(responses.POST, f"{BASE}/posts", json={"id": 101, "title": "new"}, status=201)
    result = api.create_post({"userId": 1, "title": "new", "body": "b"})
    assert result.status == 201
    assert result.data["id"] == 101
    assert json.loads(responses.calls[0].request.body) == {"userId": 1, "title": "new", "body": "b"}


@responses.activate
def test_delete_post_with_empty_body(api):
    responses.add(responses.DELETE, f"{BASE}/posts/1", body="", status=200)
    assert api.delete_post(1).data == {}


@pytest.mark.parametrize("call, path", [
    (lambda c: c.get_posts(), "/posts"),
    (lambda c: c.get_comments_by_post(3), "/posts/3/comments"),
    (lambda c: c.get_users(), "/users"),
    (lambda c: c.get_user(2), "/users/2"),
    (lambda c: c.get_todos_by_user(2), "/users/2/todos"),
    (lambda c: c.get_albums_by_user(2), "/users/2/albums"),
    (lambda c: c.get_photos_by_album(4), "/albums/4/photos"),
])
@responses.activate
def test_list_endpoints_hit_expected_paths(api, call, path):
    responses.add(responses.GET, f"{BASE}{path}", json=[])
    assert call(api).data == []
    assert responses.calls[0].request.url == f"{BASE}{path}"


@responses.activate
def test_update_post_uses_put(api):
    responses.add(responses.PUT, f"{BASE}/posts/1", json={"id": 1, "title": "edited"})
    assert api.update_post(1, {"title": "edited"}).data["title"] == "edited"


@responses.activate
def test_http_error_becomes_external_service_error(api):
    responses.add(responses.GET, f"{BASE}/users/999", json={}, status=404)
    with pytest.raises(ExternalServiceError) as info:
        api.get_user(999)
    assert info.value.service_name == "JSONPlaceholder"
    assert "404" in info.value.message


@responses.activate
def test_connection_error_becomes_external_service_error(api):
    responses.add(responses.GET, f"{BASE}/posts", body=requests.ConnectionError("refused"))
    with pytest.raises(ExternalServiceError):
        api.get_posts()
