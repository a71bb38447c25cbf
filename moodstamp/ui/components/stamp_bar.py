import flet as ft
from moodstamp.config import (
    COLOR_BORDER,
    COLOR_CARD,
    COLOR_PRIMARY,
    COLOR_REACTED_BG,
    COLOR_TEXT_MUTED,
    BORDER_RADIUS_CHIP,
    StampConfigMap,
)
from moodstamp.domain.models import AggregatedStamp
from moodstamp.ui.helpers import format_count, reactor_tooltip


class StampBar(ft.Container):
    """Chips for a post's aggregated stamps plus an add-menu."""

    def __init__(
        self,
        groups: tuple[AggregatedStamp, ...],
        stamp_config: StampConfigMap,
        current_anonymous_id: str | None,
        on_toggle_callback,
    ):
        super().__init__()
        self.groups = groups
        self.stamp_config = stamp_config
        self.current_anonymous_id = current_anonymous_id
        self.on_toggle_callback = on_toggle_callback

        self.padding = ft.Padding.symmetric(vertical=4)
        self.content = self._build_content()

    def _handle_toggle(self, stamp_type: str):
        if self.on_toggle_callback:
            self.on_toggle_callback(stamp_type)

    def _glyph_for(self, group: AggregatedStamp) -> str:
        cfg = self.stamp_config.get(group.type)
        return cfg.glyph if cfg else group.native

    def _build_chip(self, group: AggregatedStamp) -> ft.Container:
        cfg = self.stamp_config.get(group.type)
        reacted = group.reacted_by(self.current_anonymous_id)
        return ft.Container(
            content=ft.Row(
                controls=[
                    ft.Text(self._glyph_for(group), size=16),
                    ft.Text(format_count(group.count), size=12, color=COLOR_TEXT_MUTED),
                ],
                spacing=6,
                vertical_alignment=ft.CrossAxisAlignment.CENTER,
            ),
            padding=ft.Padding.symmetric(horizontal=10, vertical=6),
            bgcolor=COLOR_REACTED_BG if reacted else COLOR_CARD,
            border=ft.Border.all(1, COLOR_PRIMARY if reacted else COLOR_BORDER),
            border_radius=BORDER_RADIUS_CHIP,
            ink=True,
            tooltip=reactor_tooltip(cfg.label if cfg else group.type, group.reactors),
            data=group.type,
            on_click=lambda _e, t=group.type: self._handle_toggle(t),
        )

    def _build_content(self):
        chips: list[ft.Control] = [self._build_chip(g) for g in self.groups]
        chips.append(
            ft.PopupMenuButton(
                icon=ft.Icons.ADD_REACTION_OUTLINED,
                tooltip="スタンプを追加",
                items=[
                    ft.PopupMenuItem(
                        content=ft.Text(f"{cfg.glyph} {cfg.label}"),
                        on_click=(lambda _e, t=stamp_type: self._handle_toggle(t)),
                    )
                    for stamp_type, cfg in self.stamp_config.items()
                ],
            )
        )

        return ft.Row(
            controls=chips,
            spacing=8,
            run_spacing=8,
            wrap=True,
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        )
