# lootlocker_server

A Python client for the LootLocker server API.

## What is in the package

- `lootlocker_server.endpoints`
  - Every server endpoint is an `Endpoint`, which holds a path and an `HttpMethod`.
  - `Endpoint.url(*args, domain_key="")` fills in the domain key and the positional path arguments. It raises `ValueError` when too few arguments are given.
  - `endpoint_by_name(name)` looks an endpoint up by its snake_case name, for example `"get_assets"` or `"submit_score"`. An unknown name raises `KeyError`.
  - `method_display_name(value)` returns the name of a method, or `"Invalid"` for an unknown value.
- `lootlocker_server.logger`
  - `ServerLogger` writes messages to a standard `logging` logger.
  - A message is written only when its `LogLevel` passes the configured `LogLevelLimit`.
  - With `LogLevelLimit.ALL_AS_NORMAL`, every message is written at display level.
- `lootlocker_server.http_client`
  - `HttpClient` sends JSON requests with `send` and multipart file uploads with `upload_file` and `upload_raw_file`.
  - The client adds identity headers and the `LL-Version` header. When `ServerState.token` is set, it also adds the session token as `x-auth-token`.
  - A failed call gives a `ServerResponse` with `success=False`, the HTTP status and parsed `ErrorData`, and the failure is logged as a warning.
  - Helpers: `append_query`, `build_multipart_body`, `describe_failed_request`, `is_empty_json`.
- `lootlocker_server.asset_models`
  - Dataclasses for assets, variations, rental options, files, rarities and key/value storage.
  - Each has a `from_dict` that reads the server's JSON. Keys are matched case-insensitively, and missing fields get their defaults.
- `lootlocker_server.asset_api`
  - `AssetApi` lists assets, with or without pagination, and manages the key/value pairs stored on asset instances.
  - Its calls return `GetAssetsResponse` or `KeyValuePairsResponse`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from lootlocker_server.endpoints import endpoint_by_name
from lootlocker_server.http_client import HttpClient
from lootlocker_server.asset_api import AssetApi

print(endpoint_by_name("get_assets").url(domain_key="mygame"))
# https://mygame.api.lootlocker.io/server/assets

client = HttpClient(domain_key="mygame", api_version="2021-03-01")
client.state.token = "token"  # session token obtained elsewhere

assets = AssetApi(client)

page = assets.get_paginated_assets(count=10, after=0)
if page.success:
    for asset in page.items:
        print(asset.id, asset.name)
else:
    print(page.status_code, page.error)

pairs = assets.add_key_value_pair(player_id=1, asset_instance_id=42, key="colour", value="red")
print([(p.key, p.value) for p in pairs.storage])
```

Requests do not raise on HTTP or connection failure. Check `success`, `status_code`, `error` and `error_data` on the returned response.

## What the package does not do

- Typed calls exist only for assets and asset-instance key/value storage, through `AssetApi`.
- The other endpoints in `lootlocker_server.endpoints` have no typed wrappers and no response models. These include sessions, leaderboards, progressions, inventories, player files, drop tables, currencies and wallets. You can still call them with `HttpClient.send` and read the raw `ServerResponse`.
- The package does not start or keep alive a session. You set the token on `ServerState` yourself.
- There is no command-line tool.