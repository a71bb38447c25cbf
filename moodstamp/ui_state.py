"""
ui_state.py - UI state container
"""
from moodstamp.domain.models import Post


class AppState:
    def __init__(self, anonymous_id: str, posts: list[Post] | None = None):
        self.anonymous_id: str = anonymous_id
        self.posts: list[Post] = posts or []

    def find_post(self, post_id: str) -> Post | None:
        return next((p for p in self.posts if p.id == post_id), None)
