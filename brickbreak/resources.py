"""Named cache of loaded textures."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Union

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402


@dataclass(eq=False)
class Texture:
    """An image loaded from disk."""

    path: str
    alpha: bool
    surface: Any
    width: int
    height: int


class ResourceManager:
    """Loads textures once and hands them out by name."""

    def __init__(self) -> None:
        self.textures: Dict[str, Texture] = {}

    def load_texture(self, path: Union[str, Path], alpha: bool, name: str) -> Texture:
        """Load an image file and cache it under name, replacing any earlier one."""
        file = Path(path)
        if not file.is_file():
            raise FileNotFoundError(f"texture file not found: {file}")
        surface = pygame.image.load(str(file))
        width, height = surface.get_size()
        texture = Texture(str(file), bool(alpha), surface, width, height)
        self.textures[name] = texture
        return texture

    def get_texture(self, name: str) -> Texture:
        """The texture cached under name."""
        try:
            return self.textures[name]
        except KeyError:
            raise KeyError(f"no texture named {name!r}") from None

    def clear(self) -> None:
        """Forget every cached texture."""
        self.textures.clear()