"""The Cat Road game: start screen, main loop and collectible pickup."""

from __future__ import annotations

import argparse
import os
from collections.abc import Collection
from dataclasses import dataclass, field

import pygame

from catroad.coleccionable import Coleccionable
from catroad.gatito import Gatito
from catroad.nivel import Nivel
from catroad.puntaje import Puntaje

ANCHO_VENTANA = 800
ALTO_VENTANA = 600
PUNTOS_POR_COLECCIONABLE = 10

RUTA_FUENTE_JUEGO = "Platinum Sign.ttf"
RUTA_FONDO_INICIO = "assets/images/fondo_inicio.png"
RUTA_FUENTE_INICIO = "assets/fonts/Platinum Sign.ttf"

COLECCIONABLES_INICIALES: tuple[tuple[str, tuple[int, int]], ...] = (
    ("assets/coleccionable1.png", (100, 200)),
    ("assets/coleccionable2.png", (300, 400)),
)

BLANCO = pygame.Color(255, 255, 255)
NEGRO = pygame.Color(0, 0, 0)

_TECLAS_MOVIMIENTO = (pygame.K_UP, pygame.K_DOWN, pygame.K_LEFT, pygame.K_RIGHT)


class _Ventana:
    """The main game window, with an optional image shown on each frame."""

    def __init__(
        self,
        ancho: int = ANCHO_VENTANA,
        alto: int = ALTO_VENTANA,
        titulo: str = "Juego",
    ) -> None:
        pygame.display.init()
        self.window = pygame.display.set_mode((ancho, alto))
        pygame.display.set_caption(titulo)
        self.imagen: pygame.Surface | None = None
        self.abierta = True

    def cargar_imagen(self, ruta_imagen: str | os.PathLike[str]) -> bool:
        try:
            self.imagen = pygame.image.load(os.fspath(ruta_imagen))
        except (OSError, pygame.error):
            return False
        return True

    def mostrar(self) -> None:
        self.window.fill(NEGRO)
        if self.imagen is not None:
            self.window.blit(self.imagen, (0, 0))
        pygame.display.flip()

    def manejar_eventos(self) -> None:
        for evento in pygame.event.get():
            if evento.type == pygame.QUIT:
                self.abierta = False


def _cargar_fuente(ruta: str, tamano: int) -> pygame.font.Font:
    pygame.font.init()
    return pygame.font.Font(ruta, tamano)


@dataclass
class JuegoCatCross:
    """The game state: the cat, the level, the score and the collectibles."""

    personaje: Gatito = field(default_factory=Gatito)
    nivel_actual: Nivel = field(default_factory=Nivel)
    puntaje: Puntaje = field(default_factory=Puntaje)
    coleccionables: list[Coleccionable] = field(default_factory=list)

    def inicializar_coleccionables(self) -> None:
        """Add the starting collectibles; images that fail to load are left out."""
        for ruta, (x, y) in COLECCIONABLES_INICIALES:
            coleccionable = Coleccionable()
            try:
                coleccionable.cargar_textura(ruta)
            except OSError:
                pass
            coleccionable.set_posicion(x, y)
            self.coleccionables.append(coleccionable)

    def verificar_colisiones_coleccionables(self) -> None:
        """Collect every item the cat touches and add to the score for each."""
        jugador = self.personaje.bounds()
        for coleccionable in self.coleccionables:
            if not coleccionable.recolectado and coleccionable.bounds().intersects(
                jugador
            ):
                coleccionable.recolectar()
                self.puntaje.aumentar(PUNTOS_POR_COLECCIONABLE)

    def manejar_teclas(self, teclas: Collection[int]) -> None:
        """Move the cat for each arrow key in the set of pressed keys."""
        if pygame.K_UP in teclas:
            self.personaje.mover_arriba(0)
        if pygame.K_DOWN in teclas:
            self.personaje.mover_abajo(ALTO_VENTANA)
        if pygame.K_LEFT in teclas:
            self.personaje.mover_izquierda(0)
        if pygame.K_RIGHT in teclas:
            self.personaje.mover_derecha(ANCHO_VENTANA)

    def _dibujar_coleccionables(self, superficie: pygame.Surface) -> None:
        for coleccionable in self.coleccionables:
            coleccionable.dibujar(superficie)

    def _dibujar_puntaje(
        self, superficie: pygame.Surface, fuente: pygame.font.Font, x: int, y: int
    ) -> None:
        for linea in self.puntaje.texto().splitlines():
            superficie.blit(fuente.render(linea, True, NEGRO), (x, y))
            y += fuente.get_linesize()

    def mostrar_pantalla_inicio(self) -> None:
        """Show the title screen until Enter is pressed or the window is closed.

        Raises RuntimeError if the background or the font cannot be loaded and
        SystemExit when Escape is pressed.
        """
        try:
            fondo = pygame.image.load(RUTA_FONDO_INICIO)
        except (OSError, pygame.error) as exc:
            raise RuntimeError("No se pudo cargar la textura del fondo") from exc
        try:
            fuente_titulo = _cargar_fuente(RUTA_FUENTE_INICIO, 50)
            fuente_opciones = _cargar_fuente(RUTA_FUENTE_INICIO, 30)
        except (OSError, pygame.error) as exc:
            raise RuntimeError("No se pudo cargar la fuente") from exc

        textos = (
            (fuente_titulo.render("CAT ROAD", True, BLANCO), (250, 100)),
            (fuente_opciones.render("Presiona Enter para Jugar", True, BLANCO), (200, 300)),
            (fuente_opciones.render("Presiona Esc para Salir", True, BLANCO), (200, 400)),
        )

        pygame.display.init()
        pantalla = pygame.display.set_mode((ANCHO_VENTANA, ALTO_VENTANA))
        pygame.display.set_caption("Cat Road")

        abierta = True
        while abierta:
            for evento in pygame.event.get():
                if evento.type == pygame.QUIT:
                    abierta = False
                presionadas = pygame.key.get_pressed()
                if presionadas[pygame.K_RETURN]:
                    abierta = False
                if presionadas[pygame.K_ESCAPE]:
                    pygame.display.quit()
                    raise SystemExit(0)
            if not abierta:
                break
            pantalla.fill(NEGRO)
            pantalla.blit(fondo, (0, 0))
            for superficie, posicion in textos:
                pantalla.blit(superficie, posicion)
            pygame.display.flip()

    def iniciar_juego(self) -> None:
        """Run the main loop until the window is closed."""
        try:
            fuente: pygame.font.Font | None = _cargar_fuente(RUTA_FUENTE_JUEGO, 24)
        except (OSError, pygame.error):
            fuente = None
        self.inicializar_coleccionables()
        ventana = _Ventana()
        while ventana.abierta:
            ventana.manejar_eventos()
            if not ventana.abierta:
                break
            presionadas = pygame.key.get_pressed()
            self.manejar_teclas(
                {tecla for tecla in _TECLAS_MOVIMIENTO if presionadas[tecla]}
            )
            self._dibujar_coleccionables(ventana.window)
            self.verificar_colisiones_coleccionables()
            ventana.mostrar()
            if fuente is not None:
                self._dibujar_puntaje(ventana.window, fuente, 10, 10)


def main(argv: list[str] | None = None) -> int:
    """Show the start screen, then play the game."""
    parser = argparse.ArgumentParser(prog="catroad", description="Cat Road")
    parser.parse_args(argv)
    pygame.init()
    try:
        juego = JuegoCatCross()
        juego.mostrar_pantalla_inicio()
        juego.iniciar_juego()
    finally:
        pygame.quit()
    return 0