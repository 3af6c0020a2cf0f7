"""Obstacles placed on a level."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Obstaculo:
    """A rectangular obstacle that can be destroyed."""

    tipo: str = ""
    posicion_x: int = 0
    posicion_y: int = 0
    ancho: int = 1
    alto: int = 1
    activo: bool = True

    def set_posicion(self, x: int, y: int) -> None:
        """Place the obstacle at (x, y)."""
        self.posicion_x = x
        self.posicion_y = y

    def set_tamano(self, w: int, h: int) -> None:
        """Resize the obstacle."""
        self.ancho = w
        self.alto = h

    def destruir(self) -> None:
        """Deactivate the obstacle."""
        self.activo = False

    def colisiona_con(self, x: int, y: int, w: int, h: int) -> bool:
        """Return True if the active obstacle overlaps the given area."""
        return (
            self.activo
            and self.posicion_x < x + w
            and self.posicion_x + self.ancho > x
            and self.posicion_y < y + h
            and self.posicion_y + self.alto > y
        )