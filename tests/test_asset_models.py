import pytest

from lootlocker_server.asset_models import (
    Asset,
    AssetCandidateInformation,
    AssetFile,
    AssetRarity,
    AssetVariation,
    AssetWithoutPackageContent,
    HeroEquipException,
    InstanceKeyValueSet,
    KeyValueSet,
    PackageContentItem,
    RentalOption,
    VariationProperty,
)


def test_key_value_set_round_trip():
    pair = KeyValueSet(key="colour", value="blue")
    assert KeyValueSet.from_dict(pair.to_dict()) == pair


def test_key_value_set_to_dict_uses_lowercase_keys():
    assert KeyValueSet(key="a", value="b").to_dict() == {"key": "a", "value": "b"}


def test_key_value_set_keys_are_case_insensitive():
    pair = KeyValueSet.from_dict({"Key": "level", "VALUE": "3"})
    assert (pair.key, pair.value) == ("level", "3")


@pytest.mark.parametrize("data", [None, [], "text", 7])
def test_non_object_input_gives_defaults(data):
    assert KeyValueSet.from_dict(data) == KeyValueSet()
    assert Asset.from_dict(data) == Asset()


def test_instance_key_value_set():
    pair = InstanceKeyValueSet.from_dict({"id": 12, "key": "k", "value": "v"})
    assert pair == InstanceKeyValueSet(id=12, key="k", value="v")


def test_number_value_is_read_as_text():
    pair = KeyValueSet.from_dict({"key": "score", "value": 42})
    assert pair.value == "42"


def test_rental_option_optional_fields_missing():
    option = RentalOption.from_dict({"id": 3, "name": "week", "price": 100})
    assert option.duration is None
    assert option.sales_price is None
    assert option.price == 100


def test_rental_option_optional_fields_present_and_links():
    option = RentalOption.from_dict(
        {"duration": 3600, "sales_price": None, "links": {"thumbnail": "thumb.png"}}
    )
    assert option.duration == 3600
    assert option.sales_price is None
    assert option.thumbnail == "thumb.png"


def test_rarity_and_file_and_candidate():
    assert AssetRarity.from_dict({"name": "Rare", "short_name": "R", "color": "ff0"}) == (
        AssetRarity(name="Rare", short_name="R", color="ff0")
    )
    assert AssetFile.from_dict({"url": "u", "tags": ["a", "b"]}) == AssetFile(url="u", tags=["a", "b"])
    candidate = AssetCandidateInformation.from_dict(
        {"created_by_player_id": 9, "created_by_player_uid": "UID"}
    )
    assert (candidate.created_by_player_id, candidate.created_by_player_uid) == (9, "UID")


def test_hero_equip_exception():
    exception = HeroEquipException.from_dict({"can_equip": True, "hero_id": 4, "hero_name": "Ann"})
    assert exception == HeroEquipException(can_equip=True, hero_id=4, hero_name="Ann")


def test_variation_with_properties():
    variation = AssetVariation.from_dict(
        {
            "id": 5,
            "name": "red",
            "properties": [{"material_path": "m", "binding_path": "b", "bone_id": 2}],
            "links": {"thumbnail": "t"},
        }
    )
    assert variation.properties == [VariationProperty(material_path="m", binding_path="b", bone_id=2)]
    assert variation.thumbnail == "t"


def test_list_entries_that_are_not_objects_are_skipped():
    variation = AssetVariation.from_dict({"properties": [1, {"bone_id": 7}, "x"]})
    assert [prop.bone_id for prop in variation.properties] == [7]


def _asset_json():
    return {
        "id": 1,
        "uuid": "uuid-1",
        "name": "Sword",
        "active": True,
        "price": 50,
        "sales_price": 25,
        "character_classes": [1, 2],
        "marked_new": None,
        "unlocks_context": True,
        "rarity": {"name": "Epic"},
        "storage": [{"key": "k", "value": "v"}],
        "drop_table_max_picks": 3,
        "links": {"thumbnail": "sword.png"},
        "package_contents": [
            {"variation_id": 8, "quantity": 2, "asset": {"id": 2, "name": "Shield"}}
        ],
    }


def test_asset_reads_nested_values():
    asset = Asset.from_dict(_asset_json())
    assert asset.name == "Sword"
    assert asset.active is True
    assert asset.sales_price == 25
    assert asset.character_classes == [1, 2]
    assert asset.marked_new is None
    assert asset.unlocks_context is True
    assert asset.rarity.name == "Epic"
    assert asset.storage == [KeyValueSet(key="k", value="v")]
    assert asset.drop_table_max_picks == 3
    assert asset.thumbnail == "sword.png"


def test_asset_package_contents():
    asset = Asset.from_dict(_asset_json())
    item = asset.package_contents[0]
    assert item.variation_id == 8
    assert item.quantity == 2
    assert item.asset.name == "Shield"
    assert isinstance(item.asset, AssetWithoutPackageContent) and not isinstance(item.asset, Asset)


def test_package_content_item_without_variation():
    item = PackageContentItem.from_dict({"quantity": 1})
    assert item.variation_id is None
    assert item.asset == AssetWithoutPackageContent()


def test_asset_without_package_content_ignores_package_contents():
    plain = AssetWithoutPackageContent.from_dict(_asset_json())
    full = Asset.from_dict(_asset_json())
    assert plain.name == full.name
    assert not hasattr(plain, "package_contents")


def test_unlocks_context_from_text():
    assert AssetWithoutPackageContent.from_dict({"unlocks_context": "TRUE"}).unlocks_context is True
    assert AssetWithoutPackageContent.from_dict({"unlocks_context": "false"}).unlocks_context is False
    assert AssetWithoutPackageContent.from_dict({}).unlocks_context is None


def test_numeric_text_reads_as_number():
    asset = Asset.from_dict({"price": "30", "sales_price": "15", "popularity_score": "bad"})
    assert asset.price == 30
    assert asset.sales_price == 15
    assert asset.popularity_score == 0


def test_default_lists_are_independent():
    first, second = Asset(), Asset()
    first.files.append(AssetFile(url="x"))
    assert second.files == []