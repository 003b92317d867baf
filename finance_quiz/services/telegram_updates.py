from __future__ import annotations

import secrets

# Update kinds the quiz routers subscribe to.
ROUTED_UPDATE_KINDS: tuple[str, ...] = ("message", "callback_query")


def extract_update_id(update_payload: object) -> int | None:
    if not isinstance(update_payload, dict):
        return None

    update_id = update_payload.get("update_id")
    if isinstance(update_id, bool) or not isinstance(update_id, int) or update_id < 0:
        return None
    return update_id


def extract_routed_kind(update_payload: dict[str, object]) -> str | None:
    for kind in ROUTED_UPDATE_KINDS:
        if isinstance(update_payload.get(kind), dict):
            return kind
    return None


def extract_sender_id(update_payload: dict[str, object]) -> int | None:
    kind = extract_routed_kind(update_payload)
    if kind is None:
        return None

    body = update_payload[kind]
    sender = body.get("from") if isinstance(body, dict) else None
    if not isinstance(sender, dict):
        return None
    sender_id = sender.get("id")
    if isinstance(sender_id, int) and not isinstance(sender_id, bool):
        return sender_id
    return None


def is_valid_webhook_secret(*, expected_secret: str, received_secret: str | None) -> bool:
    if not expected_secret or not received_secret:
        return False
    return secrets.compare_digest(expected_secret, received_secret)
