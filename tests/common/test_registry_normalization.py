import pytest

from common.base_registry import BaseRegistry, camel_to_snake, normalize_key

# What this tests
# - Key normalization (Camel→snake, '-'→'_'), duplicate registration ValueError,
#   unregistered name KeyError, data values via add().


def test_camel_and_hyphen_normalization_and_lookup():
    reg = BaseRegistry()

    @reg.register()
    def easeInSine(t):
        return t

    assert reg.get("easeInSine") is easeInSine
    assert reg.get("ease_in_sine") is easeInSine
    assert reg.get("ease-in-sine") is easeInSine


def test_duplicate_registration_raises_and_unregistered_get_raises():
    reg = BaseRegistry()
    reg.add("calm", {"a": 1})
    with pytest.raises(ValueError):
        reg.add("Calm", {"a": 2})
    with pytest.raises(KeyError):
        reg.get("stormy")


def test_same_object_can_be_registered_twice():
    reg = BaseRegistry()
    value = {"x": 1}
    reg.add("v", value)
    reg.add("v", value)
    assert reg.list_all() == ["v"]


def test_unregister_and_clear():
    reg = BaseRegistry()
    reg.add("one", 1)
    reg.add("two", 2)
    reg.unregister("ONE")
    reg.unregister("missing")
    assert reg.list_all() == ["two"]
    snapshot = reg.registry
    reg.clear()
    assert reg.list_all() == []
    assert snapshot == {"two": 2}


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("phaseDescentstart", "phase_descentstart"),
        ("awakeningNodeAlpha_start", "awakening_node_alpha_start"),
        ("HermeticAscent", "hermetic_ascent"),
        ("already_snake", "already_snake"),
        ("with-hyphen", "with_hyphen"),
    ],
)
def test_normalize_key(raw, expected):
    assert normalize_key(raw) == expected


def test_invalid_keys():
    with pytest.raises(ValueError):
        normalize_key("")
    with pytest.raises(TypeError):
        normalize_key(3)  # type: ignore[arg-type]
    assert camel_to_snake("easeInOutCubic") == "ease_in_out_cubic"
