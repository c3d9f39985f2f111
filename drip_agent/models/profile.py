"""
Raw social profile acquired for a handle.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class Profile(BaseModel):
    """Social profile as fetched, parsed from direct input, or generated for a demo."""

    model_config = ConfigDict(frozen=True)

    handle: str
    bio: str = ""
    followers: int = 0
    following: int = 0
    tweets: list[str] = []
    location: Optional[str] = None
    name: Optional[str] = None
    profile_image_url: Optional[str] = None
