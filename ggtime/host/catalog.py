"""
Game Catalog - Popular games offered on the create-session form.
"""

from __future__ import annotations


POPULAR_GAMES: tuple[str, ...] = (
    "🎮 Valorant",
    "⚔️ League of Legends",
    "🔫 Call of Duty",
    "🏗️ Fortnite",
    "🎯 Apex Legends",
    "⛏️ Minecraft",
    "🚀 Rocket League",
    "👾 Among Us",
)


def effective_game_name(typed_name: str, selected_popular: str | None = None) -> str:
    """A selected popular game wins over whatever was typed."""
    if selected_popular is not None:
        return selected_popular
    return typed_name


def can_share(typed_name: str, selected_popular: str | None = None) -> bool:
    """The form can be shared once the game name is not blank."""
    return bool(effective_game_name(typed_name, selected_popular).strip())
