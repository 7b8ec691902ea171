import json
from typing import Any, Dict, Mapping, Optional, Tuple

from settings_sync.core.logging_utils import get_module_logger

logger = get_module_logger("SettingsMessage")

MODULE_ENVELOPE_KEY = "powertoys"
GENERAL_ENVELOPE_KEY = "general"


class SettingsMessage:
    """Builders and parser for the JSON envelopes sent to the control process."""

    @staticmethod
    def module_settings(module_name: str, settings: Mapping[str, Any]) -> str:
        """
        Wrap one module's persisted settings document.

        Args:
            module_name: Module display name, used as the inner key
            settings: The full persisted document of that module

        Returns:
            Compact JSON string ``{"powertoys": {module_name: settings}}``
        """
        return json.dumps({MODULE_ENVELOPE_KEY: {module_name: dict(settings)}})

    @staticmethod
    def general_settings(snapshot: Mapping[str, Any]) -> str:
        """Wrap the general settings snapshot as ``{"general": snapshot}``."""
        return json.dumps({GENERAL_ENVELOPE_KEY: dict(snapshot)})

    @staticmethod
    def parse(raw_json: str) -> Optional[Dict[str, Any]]:
        try:
            data = json.loads(raw_json.strip())
        except json.JSONDecodeError as e:
            logger.warning("Failed to parse settings message: %s - %s", e, raw_json[:100])
            return None

        if not isinstance(data, dict):
            logger.warning("Settings message is not an object: %s", raw_json[:100])
            return None

        if MODULE_ENVELOPE_KEY not in data and GENERAL_ENVELOPE_KEY not in data:
            logger.warning("Settings message has no known envelope key: %s", raw_json[:100])
            return None

        return data

    @staticmethod
    def unwrap_module(raw_json: str) -> Optional[Tuple[str, Dict[str, Any]]]:
        """Return ``(module_name, settings)`` from a module envelope, else None."""
        data = SettingsMessage.parse(raw_json)
        if data is None:
            return None
        modules = data.get(MODULE_ENVELOPE_KEY)
        if not isinstance(modules, dict) or len(modules) != 1:
            return None
        (name, settings), = modules.items()
        if not isinstance(settings, dict):
            return None
        return name, settings


__all__ = ["GENERAL_ENVELOPE_KEY", "MODULE_ENVELOPE_KEY", "SettingsMessage"]
