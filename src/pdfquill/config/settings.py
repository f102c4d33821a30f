#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, replace

from ..errors import InvalidLayoutError
from ..fonts import FontSettings
from ..paper import PaperType
from ..render.geometry import Margins, PageLayout


@dataclass(frozen=True)
class PermissionSettings:
    """Document permissions handed to the encoder; not enforced by layout."""

    can_print: bool = True
    can_modify: bool = True
    can_extract_content: bool = True

    @property
    def is_restricted(self) -> bool:
        return not (self.can_print and self.can_modify and self.can_extract_content)


@dataclass(frozen=True)
class PrinterConfig:
    """Everything a printer needs at construction time.

    Configs are immutable; the ``with_*`` methods return updated copies and
    validate their argument straight away.
    """

    paper_type: PaperType = PaperType.A4
    margin_left: float | None = None
    margin_right: float | None = None
    margin_top: float | None = None
    margin_bottom: float | None = None
    font_settings: FontSettings | None = field(default=None, compare=False)
    configure_fonts: Callable[[FontSettings], None] | None = field(default=None, compare=False)
    permissions: PermissionSettings = field(default_factory=PermissionSettings)
    configure_permissions: Callable[[PermissionSettings], PermissionSettings] | None = field(
        default=None, compare=False
    )
    preserve_spaces: bool = False

    def __post_init__(self) -> None:
        if self.paper_type is None:
            raise InvalidLayoutError("paper_type cannot be None")
        for side in ("left", "right", "top", "bottom"):
            _validate_margin(getattr(self, f"margin_{side}"), f"margin_{side}")
        if self.font_settings is not None:
            object.__setattr__(self, "font_settings", self.font_settings.copy())

    def with_paper_type(self, paper_type: PaperType) -> PrinterConfig:
        if paper_type is None:
            raise InvalidLayoutError("paper_type cannot be None")
        return replace(self, paper_type=paper_type)

    def with_margins(
        self, left: float, right: float, top: float, bottom: float
    ) -> PrinterConfig:
        return replace(
            self, margin_left=left, margin_right=right, margin_top=top, margin_bottom=bottom
        )

    def with_margin_left(self, value: float) -> PrinterConfig:
        return replace(self, margin_left=value)

    def with_margin_right(self, value: float) -> PrinterConfig:
        return replace(self, margin_right=value)

    def with_margin_top(self, value: float) -> PrinterConfig:
        return replace(self, margin_top=value)

    def with_margin_bottom(self, value: float) -> PrinterConfig:
        return replace(self, margin_bottom=value)

    def with_page_layout(self, layout: PageLayout) -> PrinterConfig:
        """Seed paper, margins and fonts from an existing layout (fonts are copied)."""
        if layout is None:
            raise InvalidLayoutError("page_layout cannot be None")
        margins = layout.margins
        return replace(
            self,
            paper_type=layout.paper_type,
            margin_left=margins.left,
            margin_right=margins.right,
            margin_top=margins.top,
            margin_bottom=margins.bottom,
            font_settings=layout.font_settings,
        )

    def with_font_settings(self, font_settings: FontSettings) -> PrinterConfig:
        return replace(self, font_settings=font_settings)

    def with_font_customizer(self, customizer: Callable[[FontSettings], None]) -> PrinterConfig:
        return replace(self, configure_fonts=customizer)

    def with_permissions(self, permissions: PermissionSettings) -> PrinterConfig:
        return replace(self, permissions=permissions)

    def with_permission_customizer(
        self, customizer: Callable[[PermissionSettings], PermissionSettings]
    ) -> PrinterConfig:
        return replace(self, configure_permissions=customizer)

    def with_preserve_spaces(self, preserve_spaces: bool) -> PrinterConfig:
        return replace(self, preserve_spaces=bool(preserve_spaces))

    @property
    def has_custom_margins(self) -> bool:
        return any(
            value is not None
            for value in (self.margin_left, self.margin_right, self.margin_top, self.margin_bottom)
        )

    def resolve_margins(self) -> Margins:
        base = Margins.default_for(self.paper_type)
        if not self.has_custom_margins:
            return base
        return Margins(
            left=base.left if self.margin_left is None else self.margin_left,
            right=base.right if self.margin_right is None else self.margin_right,
            top=base.top if self.margin_top is None else self.margin_top,
            bottom=base.bottom if self.margin_bottom is None else self.margin_bottom,
        )

    def resolve_permissions(self) -> PermissionSettings:
        permissions = self.permissions
        if self.configure_permissions is not None:
            permissions = self.configure_permissions(permissions)
            if not isinstance(permissions, PermissionSettings):
                raise TypeError("configure_permissions must return PermissionSettings")
        return permissions

    def build_layout(self) -> PageLayout:
        """Build a fresh layout; font settings are copied, never shared."""
        font_settings = self.font_settings.copy() if self.font_settings else FontSettings()
        if self.configure_fonts is not None:
            self.configure_fonts(font_settings)
        return PageLayout(self.paper_type, self.resolve_margins(), font_settings)


def _validate_margin(value: float | None, field_name: str) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidLayoutError(f"{field_name} must be a number")
    if value < 0:
        raise InvalidLayoutError(f"{field_name} cannot be negative")


__all__ = ["PermissionSettings", "PrinterConfig"]
