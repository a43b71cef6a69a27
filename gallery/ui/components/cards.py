"""Card-style components for the gallery listings."""
from __future__ import annotations

from typing import Iterable

from markupsafe import Markup, escape


def tag_chips(tags: Iterable[str] | None) -> Markup:
    if not tags:
        return Markup("")
    chips = "".join(f"<span class=\"chip\">{escape(tag)}</span>" for tag in tags)
    return Markup(f"<div class=\"chips\">{chips}</div>")


def painting_card(*, painting_id: str, name: str | None, description: str | None) -> Markup:
    """Return a thumbnail card linking to the painting detail page."""

    title = name or "Untitled"
    return Markup(
        f"""
        <article class=\"card\">
            <a href=\"/paintings/{painting_id}\">
                <img src=\"/paintings/{painting_id}/image\" alt=\"{escape(title)}\" class=\"card-media\" loading=\"lazy\">
            </a>
            <h3 class=\"card-title\"><a href=\"/paintings/{painting_id}\">{escape(title)}</a></h3>
            <p class=\"card-text\">{escape(description or "")}</p>
        </article>
        """
    )


def audio_card(
    *,
    audio_id: str,
    title: str,
    artist: str,
    genre: str,
    tags: Iterable[str] | None = None,
) -> Markup:
    return Markup(
        f"""
        <article class=\"card\">
            <h3 class=\"card-title\"><a href=\"/music/{audio_id}\">{escape(title)}</a></h3>
            <p class=\"card-meta\">{escape(artist)} &middot; {escape(genre)}</p>
            <audio controls preload=\"none\" src=\"/music/{audio_id}/file\" class=\"card-audio\"></audio>
            {tag_chips(tags)}
        </article>
        """
    )


def video_card(
    *,
    video_id: str,
    title: str,
    choreographer: str,
    genre: str,
    file_url: str,
    tags: Iterable[str] | None = None,
) -> Markup:
    return Markup(
        f"""
        <article class=\"card\">
            <video controls preload=\"metadata\" src=\"{escape(file_url)}\" class=\"card-media\"></video>
            <h3 class=\"card-title\"><a href=\"/dance-videos/{video_id}\">{escape(title)}</a></h3>
            <p class=\"card-meta\">{escape(choreographer)} &middot; {escape(genre)}</p>
            {tag_chips(tags)}
        </article>
        """
    )


__all__ = ["tag_chips", "painting_card", "audio_card", "video_card"]
