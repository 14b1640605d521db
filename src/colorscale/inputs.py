from __future__ import annotations

"""Seed color definitions for a whole color system.

A :class:`ColorInput` names every accent color once per appearance and
carries the per-appearance gray and background constants. It is an explicit
value built by the caller; nothing is looked up dynamically.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, List, Mapping

from .color_types import parse_hex
from .errors import InvalidColorFormat, InvalidColorInput


@dataclass(frozen=True)
class ColorConstants:
    """Gray seed and page background of one appearance."""

    gray: str
    background: str


@dataclass(frozen=True)
class ColorInput:
    """Accent seeds per appearance plus the per-appearance constants.

    Attributes
    ----------
    light, dark:
        Mapping of color name to hex seed. Both must name the same colors.
    light_constants, dark_constants:
        Gray and background seeds of each appearance.
    """

    light: Mapping[str, str]
    dark: Mapping[str, str]
    light_constants: ColorConstants
    dark_constants: ColorConstants
    color_names: List[str] = field(init=False, compare=False)

    def __post_init__(self) -> None:
        # Freeze the mappings so the value cannot change after construction.
        object.__setattr__(self, "light", MappingProxyType(dict(self.light)))
        object.__setattr__(self, "dark", MappingProxyType(dict(self.dark)))
        object.__setattr__(self, "color_names", list(self.light.keys()))

    @classmethod
    def create(
        cls,
        light_colors: Mapping[str, str],
        dark_colors: Mapping[str, str],
        light_constants: ColorConstants | Mapping[str, str],
        dark_constants: ColorConstants | Mapping[str, str],
    ) -> "ColorInput":
        """Create a ColorInput from plain mappings."""
        return cls(
            light=light_colors,
            dark=dark_colors,
            light_constants=_constants(light_constants),
            dark_constants=_constants(dark_constants),
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ColorInput":
        """Build from ``{"light": {...}, "dark": {...}, "constants": {"light": {...}, "dark": {...}}}``."""
        try:
            constants = data["constants"]
            return cls.create(data["light"], data["dark"], constants["light"], constants["dark"])
        except KeyError as exc:
            raise InvalidColorInput(
                f"missing key {exc.args[0]!r}; expected light, dark, constants.light, constants.dark"
            ) from exc
        except (TypeError, AttributeError) as exc:
            raise InvalidColorInput(f"malformed color input: {exc}") from exc

    def constants(self, appearance: str) -> ColorConstants:
        return self.light_constants if appearance == "light" else self.dark_constants

    def colors(self, appearance: str) -> Mapping[str, str]:
        return self.light if appearance == "light" else self.dark

    def validate(self) -> None:
        """Check structure and hex syntax.

        Raises
        ------
        InvalidColorInput
            Empty definitions, light/dark name mismatch or missing constants.
        InvalidColorFormat
            A seed is not a well-formed hex color.
        """
        if not self.light:
            raise InvalidColorInput("Light color definitions cannot be empty")
        if not self.dark:
            raise InvalidColorInput("Dark color definitions cannot be empty")

        missing_in_dark = [k for k in self.light if k not in self.dark]
        missing_in_light = [k for k in self.dark if k not in self.light]
        if missing_in_dark:
            raise InvalidColorInput(f"Missing dark variants for colors: {', '.join(missing_in_dark)}")
        if missing_in_light:
            raise InvalidColorInput(f"Missing light variants for colors: {', '.join(missing_in_light)}")

        for appearance in ("light", "dark"):
            consts = self.constants(appearance)
            if not consts.gray or not consts.background:
                raise InvalidColorInput(f"{appearance.capitalize()} constants must include gray and background")
            seeds = list(self.colors(appearance).items())
            seeds += [("gray", consts.gray), ("background", consts.background)]
            for name, value in seeds:
                try:
                    parse_hex(value)
                except InvalidColorFormat as exc:
                    raise InvalidColorFormat(value, f"{appearance} color {name!r}") from exc

    def to_dict(self) -> dict:
        return {
            "light": dict(self.light),
            "dark": dict(self.dark),
            "constants": {
                "light": {"gray": self.light_constants.gray, "background": self.light_constants.background},
                "dark": {"gray": self.dark_constants.gray, "background": self.dark_constants.background},
            },
        }


def _constants(value: ColorConstants | Mapping[str, str]) -> ColorConstants:
    if isinstance(value, ColorConstants):
        return value
    return ColorConstants(gray=value.get("gray", ""), background=value.get("background", ""))


__all__ = ["ColorConstants", "ColorInput"]
