"""An animated character moved with the arrow keys."""

from __future__ import annotations

import argparse
import os

import pygame

from catroad.rect import Rect

RUTA_IMAGEN = "assets/images/mi_imagen.png"
TAMANO_CUADRO = 50
VELOCIDAD = 0.1

FRAME_TIME = 0.1
NUM_FRAMES = 4
FRAME_ANCHO = 64
FRAME_ALTO = 36
FRAME_X = 17
FRAME_Y = 133


class Personaje:
    """A coloured square with an animated sprite on top of it."""

    def __init__(
        self,
        posicion: tuple[float, float],
        color: pygame.Color | tuple[int, int, int] | str,
        ruta_imagen: str | os.PathLike[str] = RUTA_IMAGEN,
    ) -> None:
        x, y = posicion
        self.shape = Rect(float(x), float(y), float(TAMANO_CUADRO), float(TAMANO_CUADRO))
        self.color = pygame.Color(color)
        self.posicion_sprite = (float(x), float(y))
        self.frame_time = FRAME_TIME
        self.num_frames = NUM_FRAMES
        self.current_frame = 0
        self.recorte: Rect | None = None
        self._transcurrido = 0.0
        try:
            self.imagen: pygame.Surface | None = pygame.image.load(os.fspath(ruta_imagen))
        except (OSError, pygame.error):
            self.imagen = None

    def move(self, offset_x: float, offset_y: float) -> None:
        """Shift both the square and the sprite."""
        self.shape = self.shape.moved(offset_x, offset_y)
        x, y = self.posicion_sprite
        self.posicion_sprite = (x + offset_x, y + offset_y)

    def update(self, elapsed: float) -> None:
        """Advance the animation once the frame time has passed."""
        self._transcurrido += elapsed
        if self._transcurrido >= self.frame_time:
            self.current_frame = (self.current_frame + 1) % self.num_frames
            self.recorte = self.frame_rect()
            self._transcurrido = 0.0

    def frame_rect(self) -> Rect:
        """Return the area of the sprite sheet for the current frame."""
        return Rect(
            float(self.current_frame * FRAME_ANCHO + FRAME_X),
            float(FRAME_Y),
            float(FRAME_ANCHO),
            float(FRAME_ALTO),
        )

    def _draw(self, superficie: pygame.Surface) -> None:
        cuadro = pygame.Rect(
            round(self.shape.x),
            round(self.shape.y),
            round(self.shape.width),
            round(self.shape.height),
        )
        pygame.draw.rect(superficie, self.color, cuadro)
        if self.imagen is None:
            return
        destino = (round(self.posicion_sprite[0]), round(self.posicion_sprite[1]))
        if self.recorte is None:
            superficie.blit(self.imagen, destino)
        else:
            area = pygame.Rect(
                round(self.recorte.x),
                round(self.recorte.y),
                round(self.recorte.width),
                round(self.recorte.height),
            )
            superficie.blit(self.imagen, destino, area)


def main(argv: list[str] | None = None) -> int:
    """Open a window and move an animated character with the arrow keys."""
    parser = argparse.ArgumentParser(prog="catroad-personaje")
    parser.parse_args(argv)
    pygame.init()
    try:
        pantalla = pygame.display.set_mode((800, 600))
        pygame.display.set_caption("DinoChrome")
        pika = Personaje((400, 300), pygame.Color(255, 0, 0))
        reloj = pygame.time.Clock()
        abierta = True
        while abierta:
            for evento in pygame.event.get():
                if evento.type == pygame.QUIT:
                    abierta = False
            if not abierta:
                break
            teclas = pygame.key.get_pressed()
            if teclas[pygame.K_LEFT]:
                pika.move(-VELOCIDAD, 0)
            if teclas[pygame.K_RIGHT]:
                pika.move(VELOCIDAD, 0)
            if teclas[pygame.K_UP]:
                pika.move(0, -VELOCIDAD)
            if teclas[pygame.K_DOWN]:
                pika.move(0, VELOCIDAD)

            pika.update(reloj.tick() / 1000.0)

            pantalla.fill((0, 0, 0))
            pika._draw(pantalla)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0