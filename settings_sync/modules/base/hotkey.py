"""Key-combination value objects shared by module settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

_VK_F1 = 0x70
_VK_F24 = 0x87


def _key_name(code: int) -> str:
    if 0x30 <= code <= 0x39 or 0x41 <= code <= 0x5A:
        return chr(code)
    if _VK_F1 <= code <= _VK_F24:
        return f"F{code - _VK_F1 + 1}"
    return ""


@dataclass(frozen=True, slots=True)
class Hotkey:
    """Modifier flags plus a virtual key code (0 means no key)."""

    win: bool = False
    ctrl: bool = False
    alt: bool = False
    shift: bool = False
    code: int = 0
    key: str = ""

    @classmethod
    def of(cls, code: int, *, win: bool = False, ctrl: bool = False,
           alt: bool = False, shift: bool = False) -> "Hotkey":
        return cls(win=win, ctrl=ctrl, alt=alt, shift=shift, code=code, key=_key_name(code))

    def is_empty(self) -> bool:
        return self.code == 0 and not (self.win or self.ctrl or self.alt or self.shift)

    def __str__(self) -> str:
        parts = [name for name, flag in (("Win", self.win), ("Ctrl", self.ctrl),
                                         ("Alt", self.alt), ("Shift", self.shift)) if flag]
        label = self.key or _key_name(self.code) or (str(self.code) if self.code else "")
        if label:
            parts.append(label)
        return " + ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "win": self.win,
            "ctrl": self.ctrl,
            "alt": self.alt,
            "shift": self.shift,
            "code": self.code,
            "key": self.key,
        }

    @classmethod
    def from_dict(cls, payload: Any) -> Optional["Hotkey"]:
        """Build from a persisted object; ``None`` for null or malformed input."""
        if not isinstance(payload, dict):
            return None
        try:
            code = int(payload.get("code", 0) or 0)
        except (TypeError, ValueError, OverflowError):
            return None
        return cls(
            win=bool(payload.get("win", False)),
            ctrl=bool(payload.get("ctrl", False)),
            alt=bool(payload.get("alt", False)),
            shift=bool(payload.get("shift", False)),
            code=code,
            key=str(payload.get("key") or _key_name(code)),
        )

    @classmethod
    def parse(cls, text: str) -> "Hotkey":
        """Parse ``"Win+Shift+Q"`` style text; raises ValueError on bad input."""
        flags = {"win": False, "ctrl": False, "alt": False, "shift": False}
        code = 0
        for token in (part.strip() for part in text.split("+")):
            lowered = token.lower()
            if not token:
                raise ValueError(f"Empty key in hotkey '{text}'")
            if lowered in flags:
                flags[lowered] = True
            elif code:
                raise ValueError(f"More than one key in hotkey '{text}'")
            elif len(token) == 1 and token.isalnum():
                code = ord(token.upper())
            elif lowered.startswith("f") and lowered[1:].isdigit() and 1 <= int(lowered[1:]) <= 24:
                code = _VK_F1 + int(lowered[1:]) - 1
            else:
                raise ValueError(f"Unknown key '{token}' in hotkey '{text}'")
        return cls.of(code, **flags)


__all__ = ["Hotkey"]
