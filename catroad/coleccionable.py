"""Collectible items that the cat can pick up."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

import pygame

from catroad.rect import Rect

POSICION_OCULTA = (-100.0, -100.0)


@dataclass
class Coleccionable:
    """A collectible with an optional image, hidden once collected."""

    tipo: str = ""
    posicion_x: int = 0
    posicion_y: int = 0
    recolectado: bool = False
    imagen: pygame.Surface | None = field(default=None, repr=False)
    _sprite_pos: tuple[float, float] = field(
        default=(0.0, 0.0), init=False, repr=False
    )

    def __post_init__(self) -> None:
        self._sprite_pos = (float(self.posicion_x), float(self.posicion_y))

    @property
    def posicion_sprite(self) -> tuple[float, float]:
        """Where the image is drawn."""
        return self._sprite_pos

    def cargar_textura(self, ruta_archivo: str | os.PathLike[str]) -> None:
        """Load the item's image; raises OSError if it cannot be loaded."""
        try:
            self.imagen = pygame.image.load(os.fspath(ruta_archivo))
        except (OSError, pygame.error) as exc:
            raise OSError(f"no se pudo cargar la textura: {ruta_archivo}") from exc

    def set_posicion(self, x: int, y: int) -> None:
        """Place the item and its image at (x, y)."""
        self.posicion_x = x
        self.posicion_y = y
        self._sprite_pos = (float(x), float(y))

    def recolectar(self) -> None:
        """Mark the item collected and move its image off screen."""
        if not self.recolectado:
            self.recolectado = True
            self._sprite_pos = POSICION_OCULTA

    def bounds(self) -> Rect:
        """Return the screen area of the image; empty without an image."""
        ancho, alto = self.imagen.get_size() if self.imagen is not None else (0, 0)
        x, y = self._sprite_pos
        return Rect(x, y, float(ancho), float(alto))

    def dibujar(self, superficie: pygame.Surface) -> None:
        """Draw the item unless it has been collected."""
        if not self.recolectado and self.imagen is not None:
            superficie.blit(self.imagen, self._sprite_pos)