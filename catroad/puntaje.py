"""Score keeping with a persisted high score."""

from __future__ import annotations

import contextlib
import os
import re
from dataclasses import dataclass

_ENTERO = re.compile(r"[+-]?\d+")


@dataclass
class Puntaje:
    """The current score and the highest score reached."""

    valor: int = 0
    maximo: int = 0

    def aumentar(self, cantidad: int) -> None:
        """Add to the score, raising the high score if it is exceeded."""
        self.valor += cantidad
        if self.valor > self.maximo:
            self.maximo = self.valor

    def reiniciar(self) -> None:
        """Reset the current score; the high score is kept."""
        self.valor = 0

    def guardar_maximo(self, archivo: str | os.PathLike[str]) -> None:
        """Write the high score to a file; a file that cannot be opened is ignored."""
        with contextlib.suppress(OSError):
            with open(archivo, "w", encoding="utf-8") as out:
                out.write(str(self.maximo))

    def cargar_maximo(self, archivo: str | os.PathLike[str]) -> None:
        """Read the high score from a file.

        A missing or unreadable file leaves the high score unchanged, as does an
        empty one; content that does not start with an integer resets it to 0.
        """
        try:
            with open(archivo, encoding="utf-8") as fichero:
                contenido = fichero.read()
        except (OSError, UnicodeDecodeError):
            return
        contenido = contenido.lstrip()
        if not contenido:
            return
        coincidencia = _ENTERO.match(contenido)
        self.maximo = int(coincidencia.group()) if coincidencia else 0

    def texto(self) -> str:
        """Return the text shown on screen for the score."""
        return f"Puntaje: {self.valor}\nMaximo: {self.maximo}"