import pygame
import pytest

from catroad.personaje import FRAME_TIME, NUM_FRAMES, Personaje
from catroad.rect import Rect

ROJO = pygame.Color(255, 0, 0)


@pytest.fixture
def pika(tmp_path):
    return Personaje((400, 300), ROJO, ruta_imagen=tmp_path / "falta.png")


def test_posicion_inicial(pika):
    assert pika.shape == Rect(400.0, 300.0, 50.0, 50.0)
    assert pika.posicion_sprite == (400.0, 300.0)


def test_imagen_ausente(pika):
    assert pika.imagen is None


def test_imagen_cargada(tmp_path):
    ruta = tmp_path / "hoja.png"
    pygame.image.save(pygame.Surface((300, 200)), str(ruta))
    personaje = Personaje((0, 0), ROJO, ruta_imagen=ruta)
    assert personaje.imagen.get_size() == (300, 200)


def test_move_desplaza_cuadro_y_sprite(pika):
    pika.move(5, -5)
    assert pika.shape == Rect(400.0, 300.0, 50.0, 50.0).moved(5, -5)
    assert pika.posicion_sprite == (pika.shape.x, pika.shape.y)


def test_move_ida_y_vuelta(pika):
    pika.move(3, 7)
    pika.move(-3, -7)
    assert pika.shape == Rect(400.0, 300.0, 50.0, 50.0)


def test_update_antes_de_tiempo_no_avanza(pika):
    pika.update(FRAME_TIME / 2)
    assert pika.current_frame == 0
    assert pika.recorte is None


def test_update_avanza_frame(pika):
    pika.update(FRAME_TIME)
    assert pika.current_frame == 1
    assert pika.recorte == pika.frame_rect()


def test_update_acumula_tiempo(pika):
    pika.update(0.05)
    pika.update(0.05)
    assert pika.current_frame == 1


def test_update_reinicia_reloj(pika):
    pika.update(FRAME_TIME)
    pika.update(FRAME_TIME / 2)
    assert pika.current_frame == 1


def test_animacion_da_la_vuelta(pika):
    for _ in range(NUM_FRAMES):
        pika.update(FRAME_TIME)
    assert pika.current_frame == 0
    assert pika.frame_rect() == Rect(17.0, 133.0, 64.0, 36.0)
    assert pika.recorte == Rect(17.0, 133.0, 64.0, 36.0)


def test_frames_distintos_mismo_tamano(pika):
    rects = []
    for _ in range(NUM_FRAMES):
        rects.append(pika.frame_rect())
        pika.update(FRAME_TIME)
    assert len(set(rects)) == NUM_FRAMES
    assert all((r.width, r.height, r.y) == (64.0, 36.0, 133.0) for r in rects)


def test_draw_pinta_cuadro(pika):
    superficie = pygame.Surface((800, 600))
    pika._draw(superficie)
    assert superficie.get_at((400, 300)) == ROJO
    assert superficie.get_at((10, 10)) == pygame.Color(0, 0, 0)