"""Host collaborators queried by rules: header video, styles, icons, menu items."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


class ThemeHost(Protocol):
    """What the rendering host exposes to rewrite rules."""

    def has_header_video(self) -> bool: ...

    def inject_styles(self, handle: str, css: str) -> None: ...

    def get_theme_icon(self, name: str) -> str: ...


@dataclass(frozen=True)
class MenuItem:
    """Metadata handed to the nav menu item filter."""

    classes: tuple[str, ...] = ()


@dataclass
class StaticThemeHost:
    """ThemeHost answering from static settings and recording injected styles.

    Attributes:
        header_video: Answer for :meth:`has_header_video`.
        icons: Icon markup by name; unknown names render as ``""``.
        styles: Injected CSS chunks by stylesheet handle, in injection order.
    """

    header_video: bool = False
    icons: dict[str, str] = field(default_factory=dict)
    styles: dict[str, list[str]] = field(default_factory=dict)

    def has_header_video(self) -> bool:
        return self.header_video

    def inject_styles(self, handle: str, css: str) -> None:
        self.styles.setdefault(handle, []).append(css)

    def get_theme_icon(self, name: str) -> str:
        return self.icons.get(name, "")
