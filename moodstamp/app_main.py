"""
app_main.py - MoodStamp メインアプリケーション
MoodStamp v0.1
"""

import logging

import flet as ft

from moodstamp.config import APP_TITLE, COLOR_BG, COLOR_PRIMARY, get_stamp_config
from moodstamp.seed import seed_posts
from moodstamp.services import stamp_service
from moodstamp.ui.components.post_card import PostCard
from moodstamp.ui.helpers import current_anonymous_id
from moodstamp.ui_state import AppState

logger = logging.getLogger(__name__)


def toggle_post_stamp(state: AppState, post_id: str, stamp_type: str, stamp_config) -> bool:
    """投稿のスタンプを付け外しする。投稿が見つからなければ False。"""
    post = state.find_post(post_id)
    if post is None:
        logger.warning(f"Post not found: {post_id}")
        return False
    old_stamps = post.stamps
    post.stamps = stamp_service.toggle_stamp(
        old_stamps, stamp_type, state.anonymous_id, stamp_config
    )
    # 古い入力の集計結果はもう参照されない
    stamp_service.invalidate(old_stamps)
    return True


def build_post_list(state: AppState, stamp_config, on_toggle) -> ft.ListView:
    return ft.ListView(
        controls=[
            PostCard(
                post=post,
                groups=stamp_service.get_aggregated(post.stamps),
                stamp_config=stamp_config,
                current_anonymous_id=state.anonymous_id,
                on_toggle_stamp_callback=on_toggle,
            )
            for post in state.posts
        ],
        expand=True,
        padding=ft.Padding.all(24),
    )


# ==========================================================================
# メインアプリ
# ==========================================================================


def main(page: ft.Page):
    page.title = APP_TITLE
    page.theme_mode = ft.ThemeMode.LIGHT
    page.bgcolor = COLOR_BG
    page.padding = 0
    page.theme = ft.Theme(color_scheme_seed=COLOR_PRIMARY)

    stamp_config = get_stamp_config()
    state = AppState(anonymous_id=current_anonymous_id(), posts=seed_posts())

    def refresh():
        page.controls.clear()
        page.controls.append(build_post_list(state, stamp_config, handle_toggle))
        page.update()

    def handle_toggle(post_id: str, stamp_type: str):
        try:
            changed = toggle_post_stamp(state, post_id, stamp_type, stamp_config)
        except ValueError as e:
            snack = ft.SnackBar(ft.Text(str(e)))
            page.overlay.append(snack)
            snack.open = True
            page.update()
            return
        if changed:
            refresh()

    page.appbar = ft.AppBar(title=ft.Text(APP_TITLE, weight=ft.FontWeight.BOLD))
    refresh()
    logger.info(f"Started as {state.anonymous_id}, {len(state.posts)} posts")
