from __future__ import annotations

import json

from protokit.diagnostics.json_codec import dumps_bytes, dumps_text


def test_dumps_text_round_trips_plain_payload() -> None:
    payload = {"b": 1, "a": [1, 2]}

    assert json.loads(dumps_text(payload)) == payload


def test_dumps_bytes_sorts_keys_when_requested() -> None:
    assert dumps_bytes({"b": 1, "a": 2}, sort_keys=True) == b'{"a":2,"b":1}'


def test_unknown_values_render_via_repr() -> None:
    class Marker:
        def __repr__(self) -> str:
            return "Marker()"

    assert json.loads(dumps_text({"value": Marker()})) == {"value": "Marker()"}
    assert json.loads(dumps_text({"value": Marker()}, compact=False)) == {"value": "Marker()"}
