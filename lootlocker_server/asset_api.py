"""Server API calls for assets and the key value storage of asset instances."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from lootlocker_server.asset_models import Asset, InstanceKeyValueSet, KeyValueSet
from lootlocker_server.endpoints import endpoint_by_name
from lootlocker_server.http_client import ErrorData, HttpClient, ServerResponse

KeyValueInput = Union[KeyValueSet, Mapping[str, Any]]


def _lowered(data: Any) -> dict[str, Any]:
    if not isinstance(data, Mapping):
        return {}
    return {str(key).lower(): value for key, value in data.items()}


def _list_of(value: Any) -> list[Any]:
    return [item for item in value if isinstance(item, Mapping)] if isinstance(value, list) else []


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str):
        try:
            return int(float(value.strip()))
        except ValueError:
            return 0
    return 0


@dataclass
class _ResponseFields:
    """The transport outcome shared by every typed response."""

    response: ServerResponse = field(default_factory=ServerResponse)

    @property
    def success(self) -> bool:
        return self.response.success

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def error(self) -> str:
        return self.response.error

    @property
    def error_data(self) -> ErrorData:
        return self.response.error_data

    @property
    def text(self) -> str:
        return self.response.text


@dataclass
class GetAssetsResponse(_ResponseFields):
    """The assets of the game, and how many there are in total."""

    total: int = 0
    items: list[Asset] = field(default_factory=list)

    @classmethod
    def from_response(cls, response: ServerResponse) -> GetAssetsResponse:
        values = _lowered(response.json())
        return cls(
            response=response,
            total=_to_int(values.get("total")),
            items=[Asset.from_dict(item) for item in _list_of(values.get("items"))],
        )


@dataclass
class KeyValuePairsResponse(_ResponseFields):
    """The key value pairs currently stored on an asset instance."""

    storage: list[InstanceKeyValueSet] = field(default_factory=list)

    @classmethod
    def from_response(cls, response: ServerResponse) -> KeyValuePairsResponse:
        values = _lowered(response.json())
        return cls(
            response=response,
            storage=[
                InstanceKeyValueSet.from_dict(item) for item in _list_of(values.get("storage"))
            ],
        )


def _pair_dict(pair: KeyValueInput) -> dict[str, str]:
    if isinstance(pair, KeyValueSet):
        return pair.to_dict()
    return KeyValueSet.from_dict(pair).to_dict()


class AssetApi:
    """Reads assets and manages key value storage on asset instances."""

    def __init__(self, client: HttpClient | None = None) -> None:
        self.client = client if client is not None else HttpClient()

    def get_assets(self) -> GetAssetsResponse:
        """All assets of the game, with the server's default pagination."""
        return self.client.send(
            endpoint_by_name("get_assets"), parse=GetAssetsResponse.from_response
        )

    def get_paginated_assets(self, count: int, after: int) -> GetAssetsResponse:
        """A page of assets; non-positive ``count`` or ``after`` are left out."""
        query: list[tuple[str, object]] = []
        if count > 0:
            query.append(("count", int(count)))
        if after > 0:
            query.append(("after", int(after)))
        return self.client.send(
            endpoint_by_name("get_assets"), query=query, parse=GetAssetsResponse.from_response
        )

    def get_key_value_pairs(self, player_id: int, asset_instance_id: int) -> KeyValuePairsResponse:
        """All key value pairs stored on an asset instance."""
        return self.client.send(
            endpoint_by_name("get_asset_instance_key_value_pairs"),
            (player_id, asset_instance_id),
            parse=KeyValuePairsResponse.from_response,
        )

    def get_key_value_pair(
        self, player_id: int, asset_instance_id: int, pair_id: int
    ) -> KeyValuePairsResponse:
        """One key value pair of an asset instance, by its id."""
        return self.client.send(
            endpoint_by_name("get_asset_instance_key_value_pair_by_id"),
            (player_id, asset_instance_id, pair_id),
            parse=KeyValuePairsResponse.from_response,
        )

    def add_key_value_pair(
        self, player_id: int, asset_instance_id: int, key: str, value: str
    ) -> KeyValuePairsResponse:
        """Store a new key value pair on an asset instance."""
        return self.client.send(
            endpoint_by_name("add_key_value_pair_to_asset_instance"),
            (player_id, asset_instance_id),
            body=KeyValueSet(key=key, value=value),
            parse=KeyValuePairsResponse.from_response,
        )

    def update_key_value_pairs(
        self, player_id: int, asset_instance_id: int, pairs: Iterable[KeyValueInput]
    ) -> KeyValuePairsResponse:
        """Update one or more key value pairs on an asset instance."""
        return self.client.send(
            endpoint_by_name("update_key_value_pairs"),
            (player_id, asset_instance_id),
            body={"storage": [_pair_dict(pair) for pair in pairs]},
            parse=KeyValuePairsResponse.from_response,
        )

    def update_key_value_pair(
        self, player_id: int, asset_instance_id: int, pair_id: int, key: str, value: str
    ) -> KeyValuePairsResponse:
        """Update a single key value pair of an asset instance, by its id."""
        return self.client.send(
            endpoint_by_name("update_key_value_pair_by_id"),
            (player_id, asset_instance_id, pair_id),
            body=KeyValueSet(key=key, value=value),
            parse=KeyValuePairsResponse.from_response,
        )

    def delete_key_value_pair(
        self, player_id: int, asset_instance_id: int, pair_id: int
    ) -> KeyValuePairsResponse:
        """Remove a key value pair from an asset instance, by its id."""
        return self.client.send(
            endpoint_by_name("delete_key_value_pair_by_id"),
            (player_id, asset_instance_id, pair_id),
            parse=KeyValuePairsResponse.from_response,
        )