"""Allow ``python -m settings_sync`` to inspect or change module settings.

Examples::

    python -m settings_sync --camera "USB Camera" show
    python -m settings_sync set toolbar-position "Bottom center"
    python -m settings_sync set camera-hotkey "Win+Shift+O"
    python -m settings_sync pick-overlay ~/Pictures/away.png

Every change is written to the settings store and the resulting
notification is printed as one JSON line on stdout.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Callable, Dict, Optional, Sequence

from settings_sync.cli.common import add_common_cli_arguments, configure_from_args, parse_bool
from settings_sync.core.general_settings import GeneralSettingsRepository
from settings_sync.core.logging_utils import get_module_logger
from settings_sync.core.notification_channel import (
    BufferedNotificationChannel,
    NotificationChannel,
    StreamNotificationChannel,
)
from settings_sync.core.settings_store import SettingsStore
from settings_sync.modules.base.devices import StaticDeviceProvider
from settings_sync.modules.base.file_picker import FixedPathPicker
from settings_sync.modules.base.hotkey import Hotkey
from settings_sync.modules.base.option_codec import TOOLBAR_MONITORS, TOOLBAR_POSITIONS, OptionCodec
from settings_sync.modules.VideoConference import VideoConferenceSettingsEngine

logger = get_module_logger("CLI")


def _device_index(names: Sequence[str], value: str) -> int:
    if value.lstrip("-").isdigit():
        index = int(value)
        if not 0 <= index < len(names):
            raise ValueError(f"Index {index} out of range ({len(names)} devices)")
        return index
    try:
        return list(names).index(value)
    except ValueError:
        raise ValueError(f"'{value}' is not one of: {', '.join(names) or '(none)'}") from None


def _option_index(codec: OptionCodec, value: str) -> int:
    if value.isdigit():
        index = int(value)
        if index >= len(codec):
            raise ValueError(f"Index {index} out of range 0..{len(codec) - 1}")
        return index
    member = codec.decode(value)
    if member is None:
        raise ValueError(f"Expected one of: {', '.join(codec.symbols)}")
    return int(member)


def _hotkey(value: str) -> Optional[Hotkey]:
    if value.strip().lower() in {"", "none"}:
        return None
    return Hotkey.parse(value)


def _setters(engine: VideoConferenceSettingsEngine) -> Dict[str, Callable[[str], bool]]:
    return {
        "enabled": lambda v: engine.set_enabled(parse_bool(v)),
        "camera": lambda v: engine.set_selected_camera_index(_device_index(engine.cameras, v)),
        "microphone": lambda v: engine.set_selected_microphone_index(_device_index(engine.microphones, v)),
        "camera-and-microphone-hotkey": lambda v: engine.set_camera_and_microphone_hotkey(_hotkey(v)),
        "microphone-hotkey": lambda v: engine.set_microphone_hotkey(_hotkey(v)),
        "camera-hotkey": lambda v: engine.set_camera_hotkey(_hotkey(v)),
        "overlay": lambda v: engine.set_overlay_image_path(v),
        "toolbar-position": lambda v: engine.set_toolbar_position_index(_option_index(TOOLBAR_POSITIONS, v)),
        "toolbar-monitor": lambda v: engine.set_toolbar_monitor_index(_option_index(TOOLBAR_MONITORS, v)),
        "hide-toolbar": lambda v: engine.set_hide_toolbar_when_unmuted(parse_bool(v)),
    }


SETTABLE_FIELDS = (
    "enabled",
    "camera",
    "microphone",
    "camera-and-microphone-hotkey",
    "microphone-hotkey",
    "camera-hotkey",
    "overlay",
    "toolbar-position",
    "toolbar-monitor",
    "hide-toolbar",
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="settings_sync",
        description="Inspect and change Video Conference module settings",
    )
    add_common_cli_arguments(parser)
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("show", help="Print the current settings as JSON")

    set_parser = commands.add_parser("set", help="Change one setting")
    set_parser.add_argument("field", choices=SETTABLE_FIELDS)
    set_parser.add_argument("value")

    commands.add_parser("clear-overlay", help="Remove the camera overlay image")

    pick_parser = commands.add_parser("pick-overlay", help="Use an image as camera overlay")
    pick_parser.add_argument("path")
    return parser


def build_engine(args: argparse.Namespace, channel: NotificationChannel) -> VideoConferenceSettingsEngine:
    store = SettingsStore(args.settings_dir)
    general = GeneralSettingsRepository(store, channel)
    picker = FixedPathPicker(args.path) if getattr(args, "path", None) else None
    return VideoConferenceSettingsEngine(
        store,
        channel,
        general,
        StaticDeviceProvider(args.cameras, args.microphones),
        picker,
        config_subfolder=args.subfolder,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_from_args(args)

    channel: NotificationChannel = BufferedNotificationChannel() if args.no_notify else StreamNotificationChannel()
    engine = build_engine(args, channel)

    if args.command == "show":
        print(json.dumps(engine.snapshot(), indent=2))
        return 0

    if args.command == "clear-overlay":
        result = engine.clear_overlay_image()
        return 0 if result.saved else 1

    if args.command == "pick-overlay":
        changed = asyncio.run(engine.select_overlay_image())
        return 0 if changed and engine.last_commit and engine.last_commit.saved else 1

    try:
        changed = _setters(engine)[args.field](args.value)
    except ValueError as exc:
        parser.error(f"{args.field}: {exc}")
    if not changed:
        logger.info("%s unchanged", args.field)
        return 0
    if engine.last_commit is not None and not engine.last_commit.saved:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
