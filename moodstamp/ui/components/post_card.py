import flet as ft
from moodstamp.config import (
    COLOR_CARD,
    COLOR_TEXT_MAIN,
    COLOR_TEXT_MUTED,
    BORDER_RADIUS_CARD,
    StampConfigMap,
)
from moodstamp.domain.models import AggregatedStamp, Post, find_emotion
from moodstamp.ui.components.stamp_bar import StampBar
from moodstamp.ui.helpers import format_datetime


class PostCard(ft.Container):
    def __init__(
        self,
        post: Post,
        groups: tuple[AggregatedStamp, ...],
        stamp_config: StampConfigMap,
        current_anonymous_id: str | None,
        on_toggle_stamp_callback,
    ):
        super().__init__()
        self.post = post
        self.groups = groups
        self.stamp_config = stamp_config
        self.current_anonymous_id = current_anonymous_id
        self.on_toggle_stamp_callback = on_toggle_stamp_callback

        self.padding = ft.Padding.all(16)
        self.bgcolor = COLOR_CARD
        self.border_radius = BORDER_RADIUS_CARD
        self.shadow = ft.BoxShadow(
            blur_radius=2,
            color=ft.Colors.BLACK_12,
            offset=ft.Offset(0, 1),
        )
        self.margin = ft.Margin.only(bottom=12)

        self.stamp_bar = StampBar(
            groups=self.groups,
            stamp_config=self.stamp_config,
            current_anonymous_id=self.current_anonymous_id,
            on_toggle_callback=self._handle_toggle,
        )
        self.content = self._build_content()

    def _handle_toggle(self, stamp_type: str):
        if self.on_toggle_stamp_callback:
            self.on_toggle_stamp_callback(self.post["id"], stamp_type)

    def _build_content(self):
        post = self.post
        emotion = find_emotion(post["emotion"])
        emotion_text = f"{emotion.emoji} {emotion.name}" if emotion else post["emotion"]

        return ft.Column(
            controls=[
                ft.Row(
                    controls=[
                        ft.Text(emotion_text, size=13, weight=ft.FontWeight.W_600),
                        ft.Text(
                            format_datetime(post["created_at"]),
                            size=12,
                            color=COLOR_TEXT_MUTED,
                        ),
                    ],
                    spacing=8,
                ),
                ft.Text(post["content"], size=15, color=COLOR_TEXT_MAIN),
                self.stamp_bar,
            ],
            spacing=8,
        )
