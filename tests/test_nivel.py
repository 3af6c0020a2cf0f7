import pygame
import pytest

from catroad.coleccionable import Coleccionable
from catroad.nivel import NUM_COLECCIONABLES, NUM_OBSTACULOS, Nivel
from catroad.obstaculo import Obstaculo

AZUL = pygame.Color(0, 0, 255)
VERDE = pygame.Color(0, 255, 0)
NEGRO = pygame.Color(0, 0, 0)


def _guardar(tmp_path, nombre, tamano, color):
    superficie = pygame.Surface(tamano)
    superficie.fill(color)
    ruta = tmp_path / nombre
    pygame.image.save(superficie, str(ruta))
    return ruta


@pytest.fixture
def fondo_azul(tmp_path):
    return _guardar(tmp_path, "fondo.bmp", (30, 30), AZUL)


def test_new_level_is_empty():
    n = Nivel()
    assert n.tema == ""
    assert n.obstaculos == []
    assert n.coleccionables == []
    assert n.fondo is None


def test_generar_obstaculos_creates_defaults():
    n = Nivel()
    n.generar_obstaculos()
    assert len(n.obstaculos) == NUM_OBSTACULOS == 5
    assert all(o == Obstaculo() for o in n.obstaculos)


def test_generar_obstaculos_replaces_previous():
    n = Nivel()
    n.generar_obstaculos()
    n.obstaculos[0].destruir()
    n.generar_obstaculos()
    assert len(n.obstaculos) == NUM_OBSTACULOS
    assert all(o.activo for o in n.obstaculos)


def test_generar_coleccionables_creates_defaults():
    n = Nivel()
    n.generar_coleccionables()
    n.generar_coleccionables()
    assert len(n.coleccionables) == NUM_COLECCIONABLES == 3
    assert not any(c.recolectado for c in n.coleccionables)


def test_cargar_recursos_missing_reports_error(tmp_path, capsys):
    n = Nivel()
    ruta = tmp_path / "no_hay.png"
    n.cargar_recursos(ruta)
    err = capsys.readouterr().err
    assert "Error al cargar la textura del fondo desde: " in err
    assert str(ruta) in err
    assert n.fondo is None


def test_cargar_recursos_loads_background(fondo_azul):
    n = Nivel()
    n.cargar_recursos(fondo_azul)
    assert n.fondo.get_size() == (30, 30)


def test_failed_load_keeps_previous_background(fondo_azul, tmp_path):
    n = Nivel()
    n.cargar_recursos(fondo_azul)
    n.cargar_recursos(tmp_path / "no_hay.png")
    assert n.fondo.get_size() == (30, 30)


def test_renderizar_draws_background_then_collectibles(fondo_azul, tmp_path):
    n = Nivel()
    n.cargar_recursos(fondo_azul)
    c = Coleccionable()
    c.cargar_textura(_guardar(tmp_path, "verde.bmp", (4, 4), VERDE))
    c.set_posicion(10, 10)
    n.coleccionables.append(c)
    lienzo = pygame.Surface((40, 40))
    lienzo.fill(NEGRO)
    n.renderizar(lienzo)
    assert lienzo.get_at((0, 0)) == AZUL
    assert lienzo.get_at((11, 11)) == VERDE
    assert lienzo.get_at((35, 35)) == NEGRO


def test_renderizar_without_resources_leaves_surface(tmp_path):
    n = Nivel()
    n.generar_coleccionables()
    lienzo = pygame.Surface((10, 10))
    lienzo.fill(NEGRO)
    n.renderizar(lienzo)
    assert lienzo.get_at((0, 0)) == NEGRO