from finance_quiz.services.telegram_updates import (
    extract_routed_kind,
    extract_sender_id,
    extract_update_id,
    is_valid_webhook_secret,
)


def test_extract_update_id_returns_int_for_valid_payload() -> None:
    assert extract_update_id({"update_id": 42, "message": {}}) == 42
    assert extract_update_id({"update_id": 0}) == 0


def test_extract_update_id_returns_none_for_invalid_payload() -> None:
    assert extract_update_id({"update_id": "42"}) is None
    assert extract_update_id({"update_id": True}) is None
    assert extract_update_id({"update_id": -1}) is None
    assert extract_update_id({"message": {}}) is None
    assert extract_update_id("not-a-dict") is None


def test_extract_routed_kind_picks_quiz_update_kinds() -> None:
    assert extract_routed_kind({"update_id": 1, "message": {"text": "/start"}}) == "message"
    assert extract_routed_kind({"update_id": 1, "callback_query": {"data": "quiz:next"}}) == "callback_query"
    assert extract_routed_kind({"update_id": 1, "edited_message": {}}) is None
    assert extract_routed_kind({"update_id": 1, "message": "broken"}) is None


def test_extract_sender_id_reads_from_user() -> None:
    assert extract_sender_id({"callback_query": {"from": {"id": 101}}}) == 101
    assert extract_sender_id({"message": {"from": {"id": True}}}) is None
    assert extract_sender_id({"message": {"chat": {"id": 5}}}) is None
    assert extract_sender_id({"poll": {"from": {"id": 5}}}) is None


def test_is_valid_webhook_secret_accepts_exact_match() -> None:
    assert is_valid_webhook_secret(expected_secret="abc123", received_secret="abc123") is True


def test_is_valid_webhook_secret_rejects_missing_or_mismatch() -> None:
    assert is_valid_webhook_secret(expected_secret="abc123", received_secret=None) is False
    assert is_valid_webhook_secret(expected_secret="abc123", received_secret="wrong") is False
    assert is_valid_webhook_secret(expected_secret="", received_secret="") is False
