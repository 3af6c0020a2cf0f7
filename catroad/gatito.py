"""The player's cat: position, lives and energy."""

from __future__ import annotations

from dataclasses import dataclass

from catroad.rect import Rect

PASO = 10
TAMANO_SPRITE = 64


@dataclass
class Gatito:
    """The cat controlled by the player."""

    nombre: str = "Gatito"
    posicion_x: int = 0
    posicion_y: int = 0
    vidas: int = 3
    energia: int = 100

    def mover_arriba(self, limite_superior: int = 0) -> None:
        """Move one step up unless that would cross the upper limit."""
        if self.posicion_y - PASO >= limite_superior:
            self.posicion_y -= PASO

    def mover_abajo(self, alto_ventana: int, alto_sprite: int = TAMANO_SPRITE) -> None:
        """Move one step down while the sprite stays inside the window."""
        if self.posicion_y + PASO <= alto_ventana - alto_sprite:
            self.posicion_y += PASO

    def mover_izquierda(self, limite_izquierdo: int = 0) -> None:
        """Move one step left unless that would cross the left limit."""
        if self.posicion_x - PASO >= limite_izquierdo:
            self.posicion_x -= PASO

    def mover_derecha(self, ancho_ventana: int, ancho_sprite: int = TAMANO_SPRITE) -> None:
        """Move one step right while the sprite stays inside the window."""
        if self.posicion_x + PASO <= ancho_ventana - ancho_sprite:
            self.posicion_x += PASO

    def perder_vida(self) -> None:
        """Lose a life; lives never drop below zero."""
        if self.vidas > 0:
            self.vidas -= 1

    def ganar_vida(self) -> None:
        """Gain a life."""
        self.vidas += 1

    def consumir_energia(self, e: int) -> None:
        """Spend energy."""
        self.energia -= e

    def recargar_energia(self, e: int) -> None:
        """Restore energy."""
        self.energia += e

    def bounds(self) -> Rect:
        """Return the area the cat occupies on screen."""
        return Rect(
            float(self.posicion_x),
            float(self.posicion_y),
            float(TAMANO_SPRITE),
            float(TAMANO_SPRITE),
        )