"""Tests for cliauth.auth.credentials."""

import base64
import os

import pytest

from cliauth.auth.credentials import decode_jwt_payload, identity_from_id_token, read_credential_file
from cliauth.exceptions import CredentialFileMalformed, CredentialFileUnreadable, TokenDecodeFailed


class TestReadCredentialFile:
    def test_reads_json_object(self, tmp_path, write_json):
        path = write_json(tmp_path / "creds.json", {"a": 1})
        assert read_credential_file(path) == {"a": 1}

    def test_missing_file(self, tmp_path):
        with pytest.raises(CredentialFileUnreadable) as exc_info:
            read_credential_file(tmp_path / "nope.json")
        assert exc_info.value.missing is True
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_directory_is_unreadable_not_missing(self, tmp_path):
        with pytest.raises(CredentialFileUnreadable) as exc_info:
            read_credential_file(tmp_path)
        assert exc_info.value.missing is False

    @pytest.mark.skipif(not hasattr(os, "geteuid") or os.geteuid() == 0, reason="root ignores file modes")
    def test_permission_denied(self, tmp_path, write_json):
        path = write_json(tmp_path / "creds.json", {"a": 1})
        path.chmod(0)
        try:
            with pytest.raises(CredentialFileUnreadable):
                read_credential_file(path)
        finally:
            path.chmod(0o600)

    def test_truncated_file_is_malformed(self, tmp_path, write_json):
        path = write_json(tmp_path / "creds.json", '{"claudeAiOauth": {"accessToken": "sk-ant-')
        with pytest.raises(CredentialFileMalformed) as exc_info:
            read_credential_file(path)
        assert "sk-ant" not in str(exc_info.value)

    def test_empty_file_is_malformed(self, tmp_path, write_json):
        path = write_json(tmp_path / "creds.json", "")
        with pytest.raises(CredentialFileMalformed):
            read_credential_file(path)

    def test_non_object_is_malformed(self, tmp_path, write_json):
        path = write_json(tmp_path / "creds.json", ["not", "an", "object"])
        with pytest.raises(CredentialFileMalformed):
            read_credential_file(path)


class TestDecodeJwtPayload:
    def test_decodes_claims(self, make_jwt):
        assert decode_jwt_payload(make_jwt({"email": "a@b.com"})) == {"email": "a@b.com"}

    def test_handles_missing_padding(self, make_jwt):
        # Payload lengths that need different amounts of "=" padding
        for email in ("a@b.co", "ab@b.co", "abc@b.co"):
            assert decode_jwt_payload(make_jwt({"email": email}))["email"] == email

    @pytest.mark.parametrize("token", ["", "only-one", "two.parts", "a.b.c.d"])
    def test_wrong_segment_count(self, token):
        with pytest.raises(TokenDecodeFailed):
            decode_jwt_payload(token)

    def test_corrupted_base64(self):
        with pytest.raises(TokenDecodeFailed):
            decode_jwt_payload("header.!!!not*base64!!!.sig")

    def test_payload_not_json(self):
        segment = base64.urlsafe_b64encode(b"not json").rstrip(b"=").decode()
        with pytest.raises(TokenDecodeFailed):
            decode_jwt_payload(f"h.{segment}.s")

    def test_payload_not_object(self):
        segment = base64.urlsafe_b64encode(b"[1, 2]").rstrip(b"=").decode()
        with pytest.raises(TokenDecodeFailed):
            decode_jwt_payload(f"h.{segment}.s")

    def test_non_string_token(self):
        with pytest.raises(TokenDecodeFailed):
            decode_jwt_payload(12345)


class TestIdentityFromIdToken:
    def test_prefers_email(self, make_jwt):
        assert identity_from_id_token(make_jwt({"email": "a@b.com", "user": "alice"})) == "a@b.com"

    def test_falls_back_to_user(self, make_jwt):
        assert identity_from_id_token(make_jwt({"user": "alice"})) == "alice"

    def test_no_identity_claims(self, make_jwt):
        assert identity_from_id_token(make_jwt({"sub": "123"})) == "Authenticated"

    def test_decode_failure_is_swallowed(self):
        assert identity_from_id_token("header.%%%.sig") == "Authenticated"
