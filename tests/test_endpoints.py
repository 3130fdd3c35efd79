import pytest

from lootlocker_server.endpoints import (
    BASE_URL,
    ENDPOINTS,
    Endpoint,
    HttpMethod,
    endpoint_by_name,
    method_display_name,
)


def test_base_url_fixed_by_source():
    assert BASE_URL == "https://{domainKey}api.lootlocker.io/server/"
    assert endpoint_by_name("start_session").template == BASE_URL + "session"


def test_get_assets_url_without_domain_key():
    assert endpoint_by_name("get_assets").url() == "https://api.lootlocker.io/server/assets"


def test_domain_key_is_prefixed_with_dot():
    url = endpoint_by_name("get_assets").url(domain_key="mygame")
    assert url == "https://mygame.api.lootlocker.io/server/assets"


def test_positional_arguments_are_filled_in_order():
    endpoint = endpoint_by_name("get_asset_instance_key_value_pair_by_id")
    assert endpoint.url(5, 7, 9) == (
        "https://api.lootlocker.io/server/player/5/assets/instances/7/storage/9"
    )


def test_missing_arguments_raise_value_error():
    with pytest.raises(ValueError):
        endpoint_by_name("update_leaderboard").url()


def test_methods_of_known_endpoints():
    assert endpoint_by_name("start_session").method is HttpMethod.POST
    assert endpoint_by_name("maintaining_session").method is HttpMethod.GET
    assert endpoint_by_name("alter_player_inventory").method is HttpMethod.PATCH
    assert endpoint_by_name("update_key_value_pairs").method is HttpMethod.PUT
    assert endpoint_by_name("delete_key_value_pair_by_id").method is HttpMethod.DELETE


def test_unknown_endpoint_raises_key_error():
    with pytest.raises(KeyError):
        endpoint_by_name("no_such_endpoint")


def test_every_template_starts_with_base_url():
    assert all(e.template.startswith(BASE_URL) for e in ENDPOINTS.values())


def test_method_values_match_source_numbering():
    names = [method_display_name(value) for value in range(9)]
    assert names == [
        "GET",
        "POST",
        "DELETE",
        "PUT",
        "HEAD",
        "CREATE",
        "OPTIONS",
        "PATCH",
        "UPLOAD",
    ]


@pytest.mark.parametrize("method", list(HttpMethod))
def test_display_name_is_member_name(method):
    assert method_display_name(method) == method.name
    assert method_display_name(int(method)) == method.name


def test_display_name_of_unknown_value_is_invalid():
    assert method_display_name(42) == "Invalid"


def test_endpoint_method_name_property():
    assert Endpoint("x", HttpMethod.OPTIONS).method_name == "OPTIONS"
    assert Endpoint("x").method_name == "GET"