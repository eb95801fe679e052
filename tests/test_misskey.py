import pytest
import responses
from responses import matchers

from booruposter.misskey import MisskeyClient, MisskeyError, PostVisibility

BASE = "https://misskey.example.com"


@pytest.fixture
def client():
    return MisskeyClient("token", BASE)


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


def test_visibility_from_string():
    assert PostVisibility("public") is PostVisibility.PUBLIC
    assert PostVisibility("home") is PostVisibility.HOME
    assert PostVisibility("followers") is PostVisibility.FOLLOWERS


def test_visibility_to_string():
    assert str(PostVisibility("followers")) == "followers"
    assert str(PostVisibility("public")) == "public"


def test_invalid_visibility():
    with pytest.raises(ValueError):
        PostVisibility("specified")


def test_find_file_by_name_returns_first_id(client, mocked):
    mocked.post(
        f"{BASE}/api/drive/files/find",
        json=[{"id": "first"}, {"id": "second"}],
        match=[
            matchers.json_params_matcher({"name": "abcd.jpg"}),
            matchers.header_matcher({"Authorization": "Bearer token"}),
        ],
    )
    assert client.find_file_by_name("abcd.jpg") == "first"


def test_find_file_by_name_empty(client, mocked):
    mocked.post(f"{BASE}/api/drive/files/find", json=[])
    with pytest.raises(MisskeyError, match=r"Misskey returned \[\] when searching for file x.png"):
        client.find_file_by_name("x.png")


def test_find_file_http_error(client, mocked):
    mocked.post(f"{BASE}/api/drive/files/find", status=500)
    with pytest.raises(MisskeyError):
        client.find_file_by_name("x.png")


def test_find_file_bad_json(client, mocked):
    mocked.post(f"{BASE}/api/drive/files/find", body="not json")
    with pytest.raises(MisskeyError):
        client.find_file_by_name("x.png")


def test_upload_file_from_url_sends_payload(client, mocked):
    mocked.post(
        f"{BASE}/api/drive/files/upload-from-url",
        status=204,
        match=[
            matchers.json_params_matcher(
                {"url": "https://img.example.com/a.jpg", "isSensitive": True}
            )
        ],
    )
    assert client.upload_file_from_url("https://img.example.com/a.jpg", True) is None
    assert len(mocked.calls) == 1


def test_upload_failure(client, mocked):
    mocked.post(f"{BASE}/api/drive/files/upload-from-url", status=400)
    with pytest.raises(MisskeyError):
        client.upload_file_from_url("https://img.example.com/a.jpg", False)


def test_post_message(client, mocked):
    mocked.post(
        f"{BASE}/api/notes/create",
        json={"createdNote": {"id": "note1"}},
        match=[
            matchers.json_params_matcher(
                {"text": "hello", "fileIds": ["file1"], "visibility": "home"}
            )
        ],
    )
    assert client.post_message("hello", ["file1"], PostVisibility.HOME) == "note1"


def test_post_message_missing_note(client, mocked):
    mocked.post(f"{BASE}/api/notes/create", json={"error": {}})
    with pytest.raises(MisskeyError):
        client.post_message("hello", [], PostVisibility.PUBLIC)