"""Server API endpoints and the HTTP methods they are called with."""

from __future__ import annotations

import enum
from dataclasses import dataclass

BASE_URL = "https://{domainKey}api.lootlocker.io/server/"

INVALID_METHOD_NAME = "Invalid"


class HttpMethod(enum.IntEnum):
    """HTTP verbs understood by the server client."""

    GET = 0
    POST = 1
    DELETE = 2
    PUT = 3
    HEAD = 4
    CREATE = 5
    OPTIONS = 6
    PATCH = 7
    UPLOAD = 8


def method_display_name(value: HttpMethod | int) -> str:
    """Return the display name of a method, or "Invalid" for an unknown value."""
    try:
        return HttpMethod(value).name
    except ValueError:
        return INVALID_METHOD_NAME


@dataclass(frozen=True)
class Endpoint:
    """A server endpoint: a path below the base URL and the method to call it with."""

    path: str
    method: HttpMethod = HttpMethod.GET

    @property
    def template(self) -> str:
        """The full URL template, including the domain key placeholder."""
        return BASE_URL + self.path

    @property
    def method_name(self) -> str:
        return method_display_name(self.method)

    def url(self, *args: object, domain_key: str = "") -> str:
        """Fill in the domain key and the positional arguments of the URL."""
        prefix = f"{domain_key}." if domain_key else ""
        filled = self.template.replace("{domainKey}", prefix)
        try:
            return filled.format(*args)
        except IndexError as exc:
            raise ValueError(
                f"endpoint {self.path!r} needs more arguments than the {len(args)} given"
            ) from exc


_G, _P, _D, _U, _A = (
    HttpMethod.GET,
    HttpMethod.POST,
    HttpMethod.DELETE,
    HttpMethod.PUT,
    HttpMethod.PATCH,
)

ENDPOINTS: dict[str, Endpoint] = {
    # Auth
    "start_session": Endpoint("session", _P),
    "maintaining_session": Endpoint("ping", _G),
    # Leaderboards
    "create_leaderboard": Endpoint("leaderboards", _P),
    "update_leaderboard": Endpoint("leaderboards/{0}", _U),
    "delete_leaderboard": Endpoint("leaderboards/{0}", _D),
    "submit_score": Endpoint("leaderboards/{0}/submit", _P),
    "get_all_member_ranks": Endpoint("leaderboards/member/{0}", _G),
    "get_scores_from_leaderboard": Endpoint("leaderboards/{0}/list", _G),
    # Assets
    "get_assets": Endpoint("assets", _G),
    # Asset instances
    "get_asset_instance_key_value_pairs": Endpoint("player/{0}/assets/instances/{1}/storage", _G),
    "get_asset_instance_key_value_pair_by_id": Endpoint(
        "player/{0}/assets/instances/{1}/storage/{2}", _G
    ),
    "add_key_value_pair_to_asset_instance": Endpoint("player/{0}/assets/instances/{1}/storage", _P),
    "update_key_value_pairs": Endpoint("player/{0}/assets/instances/{1}/storage", _U),
    "update_key_value_pair_by_id": Endpoint("player/{0}/assets/instances/{1}/storage/{2}", _U),
    "delete_key_value_pair_by_id": Endpoint("player/{0}/assets/instances/{1}/storage/{2}", _D),
    # Asset instance progressions
    "get_all_instance_progressions": Endpoint("players/{0}/assets/instances/{1}/progressions", _G),
    "get_single_instance_progression": Endpoint(
        "players/{0}/assets/instances/{1}/progressions/{2}", _G
    ),
    "add_points_to_instance_progression": Endpoint(
        "players/{0}/assets/instances/{1}/progressions/{2}/points/add", _P
    ),
    "subtract_points_from_instance_progression": Endpoint(
        "players/{0}/assets/instances/{1}/progressions/{2}/points/subtract", _P
    ),
    "reset_instance_progression": Endpoint(
        "players/{0}/assets/instances/{1}/progressions/{2}/reset", _P
    ),
    "delete_instance_progression": Endpoint(
        "players/{0}/assets/instances/{1}/progressions/{2}", _D
    ),
    # Drop tables
    "compute_and_lock_drop_table": Endpoint("player/{0}/droptables/{1}/compute", _P),
    "pick_drops_from_drop_table": Endpoint("player/{0}/droptables/{1}/pick", _P),
    # Player lookup
    "lookup_multiple_player_names_using_ids": Endpoint("players/lookup/name", _G),
    # Player inventory
    "get_universal_inventory": Endpoint("inventory/universal", _G),
    "get_player_inventory": Endpoint("player/{0}/inventory", _G),
    "add_asset_to_player_inventory": Endpoint("player/{0}/inventory", _P),
    "alter_player_inventory": Endpoint("player/{0}/inventory", _A),
    "get_player_loadout": Endpoint("player/{0}/loadout", _G),
    "equip_asset_to_player_loadout": Endpoint("player/{0}/loadout", _P),
    "unequip_asset_from_player_loadout": Endpoint("player/{0}/loadout/{1}", _D),
    # Player persistent storage
    "get_player_persistent_storage": Endpoint("players/storage", _G),
    "get_multiple_players_public_persistent_storage_values": Endpoint("players/storage/lookup", _P),
    "update_player_persistent_storage": Endpoint("players/storage", _A),
    "delete_player_persistent_storage": Endpoint("players/storage", _D),
    # Player files
    "list_player_files": Endpoint("players/{0}/files", _G),
    "get_player_file_by_id": Endpoint("players/{0}/files/{1}", _G),
    "delete_player_file": Endpoint("players/{0}/files/{1}", _D),
    "upload_player_file": Endpoint("players/{0}/files", _P),
    "update_player_file": Endpoint("players/{0}/files/{1}", _U),
    # Triggers
    "invoke_trigger_for_player": Endpoint("trigger", _P),
    # Characters
    "get_player_characters": Endpoint("player/{0}/characters", _G),
    "get_character_inventory": Endpoint("player/{0}/character/{1}/inventory", _G),
    "get_character_loadout": Endpoint("player/{0}/characters/{1}/loadout", _G),
    "equip_asset_to_character_loadout": Endpoint("player/{0}/characters/{1}/loadout", _P),
    "unequip_asset_from_character_loadout": Endpoint("player/{0}/characters/{1}/loadout/{2}", _D),
    # Heroes
    "get_player_heroes": Endpoint("player/{0}/heroes", _G),
    "get_hero_inventory": Endpoint("player/{0}/heroes{1}/inventory", _G),
    "get_hero_loadout": Endpoint("player/{0}/heroes/{1}/loadout", _G),
    "equip_asset_to_hero_loadout": Endpoint("player/{0}/heroes/{1}/loadout", _P),
    "unequip_asset_from_hero_loadout": Endpoint("player/{0}/heroes/{1}/loadout/{2}", _D),
    # Purchases
    "check_purchase_status": Endpoint("player/{0}/purhcase/{1}", _G),
    # Game progressions
    "get_all_progressions": Endpoint("progressions", _G),
    "get_progression": Endpoint("progressions/{0}", _G),
    "get_progression_tiers": Endpoint("progressions/{0}/tiers", _G),
    # Player progressions
    "get_progressions_for_player": Endpoint("players/{0}/progressions", _G),
    "get_progressions_by_key_for_player": Endpoint("players/{0}/progressions/{1}", _G),
    "add_points_to_progression_for_player": Endpoint(
        "players/{0}/progressions/{1}/points/add", _P
    ),
    "subtract_points_from_progression_for_player": Endpoint(
        "players/{0}/progressions/{1}/points/subtract", _P
    ),
    "reset_progression_for_player": Endpoint("players/{0}/progressions/{1}/reset", _P),
    "delete_progression_for_player": Endpoint("players/{0}/progressions/{1}", _D),
    # Character progressions
    "get_progressions_for_character": Endpoint("players/{0}/characters/{1}/progressions", _G),
    "get_progressions_by_key_for_character": Endpoint(
        "players/{0}/characters/{1}/progressions/{2}", _G
    ),
    "add_points_to_progression_for_character": Endpoint(
        "players/{0}/characters/{1}/progressions/{2}/points/add", _P
    ),
    "subtract_points_from_progression_for_character": Endpoint(
        "players/{0}/characters/{1}/progressions/{2}/points/subtract", _P
    ),
    "reset_progression_for_character": Endpoint(
        "players/{0}/characters/{1}/progressions/{2}/reset", _P
    ),
    "delete_progression_for_character": Endpoint(
        "players/{0}/characters/{1}/progressions/{2}", _D
    ),
    # Currencies
    "list_currencies": Endpoint("currencies", _G),
    # Balances
    "list_balances_in_wallet": Endpoint("balances/wallet/{0}", _G),
    "get_wallet_by_wallet_id": Endpoint("wallet/{0}", _G),
    "get_wallet_by_holder_id": Endpoint("wallet/holder/{0}", _G),
    "credit_balance_to_wallet": Endpoint("balances/credit", _P),
    "debit_balance_to_wallet": Endpoint("balances/debit", _P),
    "create_wallet": Endpoint("wallet", _P),
}


def endpoint_by_name(name: str) -> Endpoint:
    """Look up an endpoint by its snake_case name."""
    try:
        return ENDPOINTS[name]
    except KeyError:
        raise KeyError(f"unknown endpoint: {name!r}") from None