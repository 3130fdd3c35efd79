"""Asset data returned by the server API, read from its JSON form."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

T = TypeVar("T")


def _fields(data: Any) -> dict[str, Any]:
    """A case-insensitive view of a JSON object; anything else reads as empty."""
    if not isinstance(data, Mapping):
        return {}
    return {str(key).lower(): value for key, value in data.items()}


def _as_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _opt_str(value: Any) -> str | None:
    return None if value is None else _as_str(value)


def _opt_int(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        try:
            return int(float(value.strip()))
        except ValueError:
            return None
    return None


def _as_int(value: Any) -> int:
    number = _opt_int(value)
    return 0 if number is None else number


def _opt_bool(value: Any) -> bool | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return None


def _as_bool(value: Any) -> bool:
    return bool(_opt_bool(value))


def _str_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [_as_str(item) for item in value]


def _int_list(value: Any) -> list[int]:
    if not isinstance(value, list):
        return []
    return [_as_int(item) for item in value]


def _objects(value: Any, build: Callable[[Any], T]) -> list[T]:
    if not isinstance(value, list):
        return []
    return [build(item) for item in value if isinstance(item, Mapping)]


def _thumbnail(links: Any) -> str:
    return _as_str(_fields(links).get("thumbnail"))


@dataclass
class KeyValueSet:
    """A key and the value stored under it."""

    key: str = ""
    value: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> KeyValueSet:
        values = _fields(data)
        return cls(key=_as_str(values.get("key")), value=_as_str(values.get("value")))

    def to_dict(self) -> dict[str, str]:
        """The JSON form sent to the server."""
        return {"key": self.key, "value": self.value}


@dataclass
class InstanceKeyValueSet:
    """A key value pair stored on an asset instance, with its id."""

    id: int = 0
    key: str = ""
    value: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> InstanceKeyValueSet:
        values = _fields(data)
        return cls(
            id=_as_int(values.get("id")),
            key=_as_str(values.get("key")),
            value=_as_str(values.get("value")),
        )


@dataclass
class RentalOption:
    """One way to rent an asset."""

    id: int = 0
    name: str = ""
    duration: int | None = None
    price: int = 0
    sales_price: int | None = None
    thumbnail: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> RentalOption:
        values = _fields(data)
        return cls(
            id=_as_int(values.get("id")),
            name=_as_str(values.get("name")),
            duration=_opt_int(values.get("duration")),
            price=_as_int(values.get("price")),
            sales_price=_opt_int(values.get("sales_price")),
            thumbnail=_thumbnail(values.get("links")),
        )


@dataclass
class AssetRarity:
    """The rarity class of an asset."""

    name: str = ""
    short_name: str = ""
    color: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> AssetRarity:
        values = _fields(data)
        return cls(
            name=_as_str(values.get("name")),
            short_name=_as_str(values.get("short_name")),
            color=_as_str(values.get("color")),
        )


@dataclass
class AssetFile:
    """A downloadable file attached to an asset."""

    url: str = ""
    tags: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> AssetFile:
        values = _fields(data)
        return cls(url=_as_str(values.get("url")), tags=_str_list(values.get("tags")))


@dataclass
class AssetCandidateInformation:
    """The player who created a user-generated asset."""

    created_by_player_id: int = 0
    created_by_player_uid: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> AssetCandidateInformation:
        values = _fields(data)
        return cls(
            created_by_player_id=_as_int(values.get("created_by_player_id")),
            created_by_player_uid=_as_str(values.get("created_by_player_uid")),
        )


@dataclass
class VariationProperty:
    """Material and binding settings of a variation for one bone."""

    material_path: str = ""
    binding_path: str = ""
    bone_id: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> VariationProperty:
        values = _fields(data)
        return cls(
            material_path=_as_str(values.get("material_path")),
            binding_path=_as_str(values.get("binding_path")),
            bone_id=_as_int(values.get("bone_id")),
        )


@dataclass
class HeroEquipException:
    """Whether a particular hero may equip an asset."""

    can_equip: bool = False
    hero_id: int = 0
    hero_name: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> HeroEquipException:
        values = _fields(data)
        return cls(
            can_equip=_as_bool(values.get("can_equip")),
            hero_id=_as_int(values.get("hero_id")),
            hero_name=_as_str(values.get("hero_name")),
        )


@dataclass
class AssetVariation:
    """A variation of an asset."""

    id: int = 0
    name: str = ""
    primary_color: str = ""
    secondary_color: str = ""
    properties: list[VariationProperty] = field(default_factory=list)
    thumbnail: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> AssetVariation:
        values = _fields(data)
        return cls(
            id=_as_int(values.get("id")),
            name=_as_str(values.get("name")),
            primary_color=_as_str(values.get("primary_color")),
            secondary_color=_as_str(values.get("secondary_color")),
            properties=_objects(values.get("properties"), VariationProperty.from_dict),
            thumbnail=_thumbnail(values.get("links")),
        )


@dataclass
class AssetWithoutPackageContent:
    """An asset, without the assets a package refers to."""

    id: int = 0
    uuid: str = ""
    name: str = ""
    active: bool = False
    price: int = 0
    sales_price: int | None = None
    display_price: str = ""
    shop_thumbnail: str = ""
    context: str = ""
    context_id: int = 0
    character_classes: list[int] = field(default_factory=list)
    detachable: bool = False
    purchasable: bool = False
    initially_purchasable: bool = False
    updated: str = ""
    marked_new: str | None = None
    default_variation_id: int = 0
    variations: list[AssetVariation] = field(default_factory=list)
    description: str = ""
    featured: bool = False
    context_locked: bool = False
    unlocks_context: bool | None = None
    rarity: AssetRarity = field(default_factory=AssetRarity)
    popular: bool = False
    popularity_score: int = 0
    unique_instance: bool = False
    rental_options: list[RentalOption] = field(default_factory=list)
    files: list[AssetFile] = field(default_factory=list)
    data_entities: list[str] = field(default_factory=list)
    asset_candidate: AssetCandidateInformation = field(
        default_factory=AssetCandidateInformation
    )
    drop_table_max_picks: int | None = None
    thumbnail: str = ""
    storage: list[KeyValueSet] = field(default_factory=list)
    hero_equip_exceptions: list[HeroEquipException] = field(default_factory=list)

    @staticmethod
    def _common_fields(values: dict[str, Any]) -> dict[str, Any]:
        return {
            "id": _as_int(values.get("id")),
            "uuid": _as_str(values.get("uuid")),
            "name": _as_str(values.get("name")),
            "active": _as_bool(values.get("active")),
            "price": _as_int(values.get("price")),
            "sales_price": _opt_int(values.get("sales_price")),
            "display_price": _as_str(values.get("display_price")),
            "shop_thumbnail": _as_str(values.get("shop_thumbnail")),
            "context": _as_str(values.get("context")),
            "context_id": _as_int(values.get("context_id")),
            "character_classes": _int_list(values.get("character_classes")),
            "detachable": _as_bool(values.get("detachable")),
            "purchasable": _as_bool(values.get("purchasable")),
            "initially_purchasable": _as_bool(values.get("initially_purchasable")),
            "updated": _as_str(values.get("updated")),
            "marked_new": _opt_str(values.get("marked_new")),
            "default_variation_id": _as_int(values.get("default_variation_id")),
            "variations": _objects(values.get("variations"), AssetVariation.from_dict),
            "description": _as_str(values.get("description")),
            "featured": _as_bool(values.get("featured")),
            "context_locked": _as_bool(values.get("context_locked")),
            "unlocks_context": _opt_bool(values.get("unlocks_context")),
            "rarity": AssetRarity.from_dict(values.get("rarity")),
            "popular": _as_bool(values.get("popular")),
            "popularity_score": _as_int(values.get("popularity_score")),
            "unique_instance": _as_bool(values.get("unique_instance")),
            "rental_options": _objects(values.get("rental_options"), RentalOption.from_dict),
            "files": _objects(values.get("files"), AssetFile.from_dict),
            "data_entities": _str_list(values.get("data_entities")),
            "asset_candidate": AssetCandidateInformation.from_dict(
                values.get("asset_candidate")
            ),
            "drop_table_max_picks": _opt_int(values.get("drop_table_max_picks")),
            "thumbnail": _thumbnail(values.get("links")),
            "storage": _objects(values.get("storage"), KeyValueSet.from_dict),
            "hero_equip_exceptions": _objects(
                values.get("hero_equip_exceptions"), HeroEquipException.from_dict
            ),
        }

    @classmethod
    def from_dict(cls, data: Any) -> AssetWithoutPackageContent:
        return cls(**cls._common_fields(_fields(data)))


@dataclass
class PackageContentItem:
    """One entry of a package: an asset and how many of it."""

    variation_id: int | None = None
    quantity: int = 0
    asset: AssetWithoutPackageContent = field(default_factory=AssetWithoutPackageContent)

    @classmethod
    def from_dict(cls, data: Any) -> PackageContentItem:
        values = _fields(data)
        return cls(
            variation_id=_opt_int(values.get("variation_id")),
            quantity=_as_int(values.get("quantity")),
            asset=AssetWithoutPackageContent.from_dict(values.get("asset")),
        )


@dataclass
class Asset(AssetWithoutPackageContent):
    """An asset, with the contents of the package it may be."""

    package_contents: list[PackageContentItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> Asset:
        values = _fields(data)
        return cls(
            **cls._common_fields(values),
            package_contents=_objects(
                values.get("package_contents"), PackageContentItem.from_dict
            ),
        )