"""A level: background, obstacles and collectibles."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

import pygame

from catroad.coleccionable import Coleccionable
from catroad.obstaculo import Obstaculo

NUM_OBSTACULOS = 5
NUM_COLECCIONABLES = 3


@dataclass
class Nivel:
    """One level of the game."""

    tema: str = ""
    obstaculos: list[Obstaculo] = field(default_factory=list)
    coleccionables: list[Coleccionable] = field(default_factory=list)
    fondo: pygame.Surface | None = field(default=None, repr=False)

    def generar_obstaculos(self) -> None:
        """Replace the obstacles with a fresh set of default ones."""
        self.obstaculos = [Obstaculo() for _ in range(NUM_OBSTACULOS)]

    def generar_coleccionables(self) -> None:
        """Replace the collectibles with a fresh set of default ones."""
        self.coleccionables = [Coleccionable() for _ in range(NUM_COLECCIONABLES)]

    def cargar_recursos(self, ruta_fondo: str | os.PathLike[str]) -> None:
        """Load the background image, reporting a failure on stderr."""
        try:
            self.fondo = pygame.image.load(os.fspath(ruta_fondo))
        except (OSError, pygame.error):
            print(
                f"Error al cargar la textura del fondo desde: {os.fspath(ruta_fondo)}",
                file=sys.stderr,
            )

    def renderizar(self, superficie: pygame.Surface) -> None:
        """Draw the background and then the collectibles."""
        if self.fondo is not None:
            superficie.blit(self.fondo, (0, 0))
        for coleccionable in self.coleccionables:
            coleccionable.dibujar(superficie)