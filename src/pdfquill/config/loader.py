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

import os
import sys
import tomllib
from pathlib import Path

from platformdirs import user_config_dir

from ..errors import InvalidLayoutError
from ..fonts import FontSettings
from ..paper import PaperType
from .settings import PermissionSettings, PrinterConfig

CONFIG_FILENAME = "config.toml"
CONFIG_PATH_ENV = "PDFQUILL_CONFIG"
XDG_CONFIG_ENV = "XDG_CONFIG_HOME"


def user_config_path() -> Path:
    xdg_override = os.environ.get(XDG_CONFIG_ENV)
    if xdg_override:
        return Path(xdg_override) / "pdfquill" / CONFIG_FILENAME
    if sys.platform == "darwin":
        return Path.home() / ".config" / "pdfquill" / CONFIG_FILENAME
    return Path(user_config_dir("pdfquill", appauthor=False)) / CONFIG_FILENAME


def resolve_config_path(path: str | Path | None = None) -> Path | None:
    """Explicit path, then ``$PDFQUILL_CONFIG``, then the user config file if present."""
    if path:
        return Path(path).expanduser()
    env_path = os.environ.get(CONFIG_PATH_ENV, "").strip()
    if env_path:
        return Path(env_path).expanduser()
    candidate = user_config_path()
    if candidate.is_file():
        return candidate
    return None


def load_printer_config(
    path: str | Path | None = None,
    *,
    paper: str | None = None,
) -> PrinterConfig:
    config_path = resolve_config_path(path)
    data = _load_toml(config_path) if config_path is not None else {}
    config = build_printer_config(data)
    if paper:
        config = config.with_paper_type(_parse_paper(paper, field="paper"))
    return config


def build_printer_config(data: dict[str, object]) -> PrinterConfig:
    page_cfg = _get_dict(data, "page")
    margins_cfg = _get_dict(data, "margins")
    font_cfg = _get_dict(data, "font")
    permissions_cfg = _get_dict(data, "permissions")
    text_cfg = _get_dict(data, "text")

    paper_value = page_cfg.get("paper")
    paper_type = (
        PaperType.A4 if paper_value is None else _parse_paper(paper_value, field="page.paper")
    )
    try:
        return PrinterConfig(
            paper_type=paper_type,
            margin_left=_parse_optional_margin(margins_cfg.get("left"), field="margins.left"),
            margin_right=_parse_optional_margin(margins_cfg.get("right"), field="margins.right"),
            margin_top=_parse_optional_margin(margins_cfg.get("top"), field="margins.top"),
            margin_bottom=_parse_optional_margin(
                margins_cfg.get("bottom"), field="margins.bottom"
            ),
            font_settings=_parse_font_settings(font_cfg),
            permissions=PermissionSettings(
                can_print=_parse_bool(permissions_cfg.get("print"), field="permissions.print"),
                can_modify=_parse_bool(permissions_cfg.get("modify"), field="permissions.modify"),
                can_extract_content=_parse_bool(
                    permissions_cfg.get("extract_content"), field="permissions.extract_content"
                ),
            ),
            preserve_spaces=_parse_bool(
                text_cfg.get("preserve_spaces"), field="text.preserve_spaces", default=False
            ),
        )
    except InvalidLayoutError as exc:
        raise ValueError(str(exc)) from exc


def _parse_font_settings(cfg: dict[str, object]) -> FontSettings | None:
    if not cfg:
        return None
    family = cfg.get("family", "Courier")
    if not isinstance(family, str) or not family.strip():
        raise ValueError("font.family must be a non-empty string")
    size = _parse_positive_int(cfg.get("size", FontSettings().font_size), field="font.size")
    try:
        return FontSettings.for_family(family, size)
    except InvalidLayoutError as exc:
        raise ValueError(f"font.family: {exc}") from exc


def _parse_paper(value: object, *, field: str) -> PaperType:
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    try:
        return PaperType.from_name(value)
    except InvalidLayoutError as exc:
        raise ValueError(f"{field}: {exc}") from exc


def _parse_optional_margin(value: object, *, field: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{field} must be a number")
    if value < 0:
        raise ValueError(f"{field} cannot be negative")
    return float(value)


def _parse_positive_int(value: object, *, field: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{field} must be a positive integer")
    if isinstance(value, str):
        text = value.strip()
        try:
            value = int(text)
        except ValueError as exc:
            raise ValueError(f"{field} must be a positive integer") from exc
    if not isinstance(value, int) or value <= 0:
        raise ValueError(f"{field} must be a positive integer")
    return value


def _parse_bool(value: object, *, field: str, default: bool = True) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{field} must be a boolean")


def _load_toml(path: Path) -> dict[str, object]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"[{key}] must be a table")
    return value


__all__ = [
    "CONFIG_PATH_ENV",
    "build_printer_config",
    "load_printer_config",
    "resolve_config_path",
    "user_config_path",
]
