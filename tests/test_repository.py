from unittest.mock import MagicMock

import httpx
import pytest

from security_service.models.records import OtpRecord, PasswordRecord
from security_service.storage.repository import InMemoryRepository, SupabaseRepository
from security_service.storage.supabase import SupabaseClient

OTP = OtpRecord(
    token="tok-1",
    code="123456",
    address="+23799505678",
    channel="SMS",
    expires=1_700_000_900_000,
    created=1_700_000_000_000,
)


def _mock_supabase():
    """Create a chainable mock supabase client."""
    mock = MagicMock()
    mock_query = MagicMock()
    mock_result = MagicMock()
    mock_result.data = []

    mock_query.select.return_value = mock_query
    mock_query.upsert.return_value = mock_query
    mock_query.delete.return_value = mock_query
    mock_query.eq.return_value = mock_query
    mock_query.limit.return_value = mock_query
    mock_query.execute.return_value = mock_result

    mock.table.return_value = mock_query
    return mock, mock_query, mock_result


def test_in_memory_repository():
    repository = InMemoryRepository(PasswordRecord, "id")
    password = PasswordRecord(id=1, hash="h", created=1, updated=1)

    assert repository.get(1) is None
    repository.put(password)
    assert repository.get(1) == password
    assert repository.delete(1) is True
    assert repository.delete(1) is False
    assert repository.get(1) is None


def test_in_memory_repository_returns_copies():
    repository = InMemoryRepository(OtpRecord, "token")
    repository.put(OTP)

    stored = repository.get("tok-1")
    stored.code = "000000"

    assert repository.get("tok-1").code == "123456"


def test_supabase_repository_get():
    mock_sb, mock_query, mock_result = _mock_supabase()
    mock_result.data = [{**OTP.__dict__, "extra": "ignored"}]
    repository = SupabaseRepository(mock_sb, "otps", OtpRecord, "token")

    otp = repository.get("tok-1")

    assert otp == OTP
    mock_sb.table.assert_called_with("otps")
    mock_query.eq.assert_called_with("token", "tok-1")
    mock_query.limit.assert_called_with(1)


def test_supabase_repository_get_missing():
    mock_sb, _, _ = _mock_supabase()
    repository = SupabaseRepository(mock_sb, "otps", OtpRecord, "token")

    assert repository.get("unknown") is None


def test_supabase_repository_put():
    mock_sb, mock_query, _ = _mock_supabase()
    repository = SupabaseRepository(mock_sb, "otps", OtpRecord, "token")

    repository.put(OTP)

    mock_query.upsert.assert_called_once_with(OTP.__dict__)
    mock_query.execute.assert_called_once()


def test_supabase_repository_delete():
    mock_sb, mock_query, mock_result = _mock_supabase()
    repository = SupabaseRepository(mock_sb, "passwords", PasswordRecord, "id")

    assert repository.delete(100) is False
    mock_query.eq.assert_called_with("id", 100)

    mock_result.data = [{"id": 100}]
    assert repository.delete(100) is True


def test_supabase_client_builds_postgrest_request():
    http = MagicMock()
    resp = MagicMock()
    resp.content = b'[{"token": "tok-1"}]'
    resp.json.return_value = [{"token": "tok-1"}]
    http.get.return_value = resp
    client = SupabaseClient("https://example.supabase.co/", "key", client=http)

    result = client.table("otps").select("token").eq("token", "tok-1").limit(1).execute()

    assert result.data == [{"token": "tok-1"}]
    args, kwargs = http.get.call_args
    assert args[0] == "https://example.supabase.co/rest/v1/otps"
    assert kwargs["params"] == {"select": "token", "token": "eq.tok-1", "limit": "1"}
    assert kwargs["headers"]["apikey"] == "key"


def test_supabase_client_upsert_prefers_merge():
    http = MagicMock()
    resp = MagicMock()
    resp.content = b""
    http.post.return_value = resp
    client = SupabaseClient("https://example.supabase.co", "key", client=http)

    result = client.table("otps").upsert({"token": "tok-1"}).execute()

    assert result.data == []
    kwargs = http.post.call_args.kwargs
    assert kwargs["json"] == {"token": "tok-1"}
    assert "resolution=merge-duplicates" in kwargs["headers"]["Prefer"]


def test_supabase_client_raises_http_errors():
    request = httpx.Request("GET", "https://example.supabase.co/rest/v1/otps")
    http = MagicMock()
    http.get.return_value = httpx.Response(503, request=request)
    client = SupabaseClient("https://example.supabase.co", "key", client=http)

    with pytest.raises(httpx.HTTPStatusError):
        client.table("otps").select().execute()
