from .command_protocol import GENERAL_ENVELOPE_KEY, MODULE_ENVELOPE_KEY, SettingsMessage

__all__ = ["GENERAL_ENVELOPE_KEY", "MODULE_ENVELOPE_KEY", "SettingsMessage"]
