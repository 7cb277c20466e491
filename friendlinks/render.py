from __future__ import annotations

from html import escape
from pathlib import Path

from friendlinks.models import Endpoint, FriendsList

BLOGS_TITLE = "博客"
NON_BLOGS_TITLE = "非博客"
AVATAR_ALT = "头像"


def render_item(item: Endpoint) -> str:
    description = escape(item.description) if item.description else ""
    return f"""  <li class="friends-item">
    <a target="_blank" href="{escape(item.url)}">
      <div class="friends-item__avatar">
        <img
          loading="lazy"
          src="{escape(item.avatar)}"
          alt="{AVATAR_ALT}"
        />
      </div>
      <p class="friends-item__name">{escape(item.name)}</p>
      <aside class="friends-item__description">{description}</aside>
    </a>
  </li>"""


def render_section(title: str, items: list[Endpoint]) -> str:
    list_items = "\n".join(render_item(item) for item in items if not item.hidden)
    return (
        f'<h3 class="friends-title">{escape(title)}</h3>\n\n'
        f'<ul class="friends-grid">\n{list_items}\n</ul>'
    )


def render_html(friends: FriendsList, footer: str = "") -> str:
    sections = [
        render_section(BLOGS_TITLE, friends.blogs),
        render_section(NON_BLOGS_TITLE, friends.non_blogs),
    ]
    return "\n\n".join(sections) + "\n" + footer


def write_html(path: str | Path, html: str) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html, encoding="utf-8")
    return path
