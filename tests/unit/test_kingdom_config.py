"""Unit tests for the kingdom configuration value object and settings."""

from __future__ import annotations

import pytest

from kingdom.config import Settings, get_settings
from kingdom.domain.enums import Archetype
from kingdom.domain.errors import ValidationError
from kingdom.domain.kingdom_config import TEMPLATE_NAMES, KingdomConfig


def _config(**overrides) -> KingdomConfig:
    values = {
        "kingdom_name": "Avaloria",
        "founding_year": 1000,
        "allowed_structure_types": ["WizardTower", "DragonLair"],
        "resource_limits": {"Gold": 10000, "Mana": 5000},
    }
    values.update(overrides)
    return KingdomConfig.create(**values)


def test_equal_values_are_equal_and_hash_identically():
    first = _config()
    second = _config()
    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1


def test_allowed_types_compare_as_a_set():
    assert _config(allowed_structure_types=["DragonLair", "WizardTower"]) == _config()


@pytest.mark.parametrize(
    "overrides",
    [
        {"kingdom_name": "Mystara"},
        {"founding_year": 1001},
        {"allowed_structure_types": ["WizardTower"]},
        {"resource_limits": {"Gold": 1}},
    ],
)
def test_any_differing_field_breaks_equality(overrides):
    assert _config(**overrides) != _config()


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"kingdom_name": ""}, "Kingdom name cannot be empty"),
        ({"kingdom_name": "   "}, "Kingdom name cannot be empty"),
        ({"founding_year": 0}, "Founding year must be positive"),
        ({"founding_year": -5}, "Founding year must be positive"),
        ({"allowed_structure_types": []}, "at least one structure type"),
        ({"resource_limits": {}}, "Resource limits cannot be empty"),
    ],
)
def test_invalid_config_raises(overrides, message):
    with pytest.raises(ValidationError, match=message):
        _config(**overrides)


def test_config_is_frozen():
    config = _config()
    with pytest.raises(AttributeError):
        config.kingdom_name = "Other"  # type: ignore[misc]


def test_config_copies_its_inputs():
    limits = {"Gold": 10}
    config = _config(resource_limits=limits)
    limits["Gold"] = 99
    assert config.resource_limits["Gold"] == 10
    with pytest.raises(TypeError):
        config.resource_limits["Gold"] = 5  # type: ignore[index]


def test_default_preset():
    config = KingdomConfig.default()
    assert config.kingdom_name == "Avaloria"
    assert config.founding_year == 1000
    assert config.allowed_structure_types == frozenset(a.value for a in Archetype)
    assert dict(config.resource_limits) == {"Gold": 10000, "Mana": 5000}
    assert str(config) == "Avaloria (Founded: 1000)"


def test_magic_preset():
    config = KingdomConfig.from_template("Magic")
    assert config.kingdom_name == "Mystara"
    assert config.founding_year == 1200
    assert config.allows(Archetype.WIZARD_TOWER)
    assert config.allows("MysticLibrary")
    assert not config.allows(Archetype.DRAGON_LAIR)
    assert dict(config.resource_limits) == {"Mana": 10000}


def test_military_preset():
    config = KingdomConfig.from_template("military")
    assert str(config) == "Ironhold (Founded: 800)"
    assert config.allowed_structure_types == {"EnchantedCastle", "DragonLair"}
    assert dict(config.resource_limits) == {"Gold": 20000}


def test_unknown_template_falls_back_to_default():
    assert KingdomConfig.from_template("pastoral") == KingdomConfig.default()
    assert set(TEMPLATE_NAMES) == {"default", "magic", "military"}


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("KINGDOM_TEMPLATE", raising=False)
    monkeypatch.delenv("KINGDOM_LOG_LEVEL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.template == "default"
    assert settings.log_level == "INFO"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("KINGDOM_TEMPLATE", "magic")
    monkeypatch.setenv("KINGDOM_LOG_LEVEL", "DEBUG")
    settings = Settings(_env_file=None)
    assert settings.template == "magic"
    assert settings.log_level == "DEBUG"


def test_get_settings_is_cached():
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()


def test_bare_string_allowed_types_rejected():
    with pytest.raises(ValidationError, match="collection of names"):
        KingdomConfig("X", 1, "WizardTower", {"Gold": 1})  # type: ignore[arg-type]
    with pytest.raises(ValidationError, match="collection of names"):
        _config(allowed_structure_types="WizardTower")


def test_single_allowed_type_in_a_list_is_allowed():
    config = _config(allowed_structure_types=["WizardTower"])
    assert config.allows("WizardTower")
    assert config.allowed_structure_types == {"WizardTower"}


@pytest.mark.parametrize("limit", ["lots", 2.5, True, None])
def test_non_integer_resource_limits_rejected(limit):
    with pytest.raises(ValidationError, match="must be an integer"):
        _config(resource_limits={"Gold": 10, "Mana": limit})
