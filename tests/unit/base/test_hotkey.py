"""Unit tests for Hotkey."""

import pytest

from settings_sync.modules.base.hotkey import Hotkey


class TestHotkeyValue:

    def test_of_fills_key_name(self):
        hotkey = Hotkey.of(0x51, win=True, shift=True)
        assert hotkey.key == "Q"
        assert str(hotkey) == "Win + Shift + Q"

    def test_function_key_name(self):
        assert Hotkey.of(0x70, ctrl=True).key == "F1"
        assert str(Hotkey.of(0x87)) == "F24"

    def test_equality_is_by_value(self):
        assert Hotkey.of(0x41, alt=True) == Hotkey.of(0x41, alt=True)
        assert Hotkey.of(0x41, alt=True) != Hotkey.of(0x41, ctrl=True)

    def test_is_empty(self):
        assert Hotkey().is_empty()
        assert not Hotkey(win=True).is_empty()
        assert not Hotkey.of(0x41).is_empty()


class TestHotkeySerialization:

    def test_to_dict_keys(self):
        assert Hotkey.of(0x4F, win=True, shift=True).to_dict() == {
            "win": True,
            "ctrl": False,
            "alt": False,
            "shift": True,
            "code": 79,
            "key": "O",
        }

    def test_from_dict_tolerates_missing_fields(self):
        hotkey = Hotkey.from_dict({"ctrl": True, "code": 65})
        assert hotkey == Hotkey(ctrl=True, code=65, key="A")

    @pytest.mark.parametrize("payload", [None, "Win+Q", 12, {"code": "abc"}, {"code": [1]}])
    def test_from_dict_malformed_is_none(self, payload):
        assert Hotkey.from_dict(payload) is None


class TestHotkeyParse:

    def test_parse_modifiers_and_letter(self):
        assert Hotkey.parse("Win+Shift+q") == Hotkey.of(0x51, win=True, shift=True)

    def test_parse_function_key(self):
        assert Hotkey.parse("ctrl + alt + F5") == Hotkey.of(0x74, ctrl=True, alt=True)

    def test_parse_modifiers_only(self):
        hotkey = Hotkey.parse("Ctrl+Shift")
        assert hotkey.code == 0
        assert hotkey.ctrl and hotkey.shift

    @pytest.mark.parametrize("text", ["", "Win+", "Win+Q+W", "Win+Escape", "F25"])
    def test_parse_rejects_bad_input(self, text):
        with pytest.raises(ValueError):
            Hotkey.parse(text)
