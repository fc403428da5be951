"""Interactive menu for loading, filtering and saving bitmap images."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Callable, Iterator, Optional, TextIO, Union

from bmptool.bmp8 import Bmp8Image
from bmptool.bmp24 import Bmp24Image
from bmptool.errors import BmpError
from bmptool.kernels import (
    box_blur_kernel,
    emboss_kernel,
    gaussian_blur_kernel,
    outline_kernel,
    sharpen_kernel,
)

_PathLike = Union[str, "PathLike[str]"]

OUTPUT_8BIT = "output_8bit.bmp"
OUTPUT_24BIT = "output_24bit.bmp"

_MAIN_MENU = (
    "\n=== Menu ===\n"
    "1. Ouvrir une image\n"
    "2. Sauvegarder l'image\n"
    "3. Appliquer un filtre\n"
    "4. Afficher les informations\n"
    "5. Quitter\n> "
)

_FILTER_MENU = (
    "\n--- Filtre à appliquer ---\n"
    "1. Négatif\n"
    "2. Luminosité\n"
    "3. Seuillage (seulement pour 8 bits)\n"
    "4. Flou (24 bits uniquement)\n"
    "5. Flou Gaussien (24 bits uniquement)\n"
    "6. Contours (24 bits uniquement)\n"
    "7. Relief (24 bits uniquement)\n"
    "8. Netteté (24 bits uniquement)\n"
    "> "
)

# choice -> (kernel factory, success message, message when no 24-bit image)
_KERNEL_FILTERS: dict[int, tuple[Callable[[], tuple], str, str]] = {
    4: (
        box_blur_kernel,
        "Filtre Flou appliqué.",
        "Erreur : flou disponible seulement pour 24 bits.",
    ),
    5: (
        gaussian_blur_kernel,
        "Filtre Flou Gaussien mis",
        "Attention flou gaussien disponible seulement pour 24 bits",
    ),
    6: (
        outline_kernel,
        "Détection des contours appliquée.",
        "Attention détection contours disponible seulement pour 24 bits",
    ),
    7: (
        emboss_kernel,
        "Filtre Relief appliqué",
        "Attention relief disponible seulement pour 24 bits",
    ),
    8: (
        sharpen_kernel,
        "Filtre Netteté appliqué.",
        "Erreur : netteté disponible seulement pour 24 bits.",
    ),
}

_NO_IMAGE = "Erreur : aucune image chargée"


@dataclass
class Session:
    """The image currently being edited, either 8-bit or 24-bit."""

    output_dir: Path = field(default_factory=Path)
    image8: Optional[Bmp8Image] = None
    image24: Optional[Bmp24Image] = None

    def open(self, path: _PathLike) -> Union[Bmp8Image, Bmp24Image]:
        """Load path as an 8-bit image, falling back to 24-bit; raise BmpError if neither works."""
        try:
            image8 = Bmp8Image.load(path)
        except (OSError, BmpError):
            self.image8 = None
        else:
            self.image8 = image8
            self.image24 = None
            return image8
        try:
            image24 = Bmp24Image.load(path)
        except (OSError, BmpError) as exc:
            raise BmpError(f"Fichier invalide : {path}") from exc
        self.image24 = image24
        return image24

    def save(self) -> Path:
        """Write the current image to its fixed output file and return that path."""
        if self.image8 is not None:
            target = Path(self.output_dir) / OUTPUT_8BIT
            self.image8.save(target)
        elif self.image24 is not None:
            target = Path(self.output_dir) / OUTPUT_24BIT
            self.image24.save(target)
        else:
            raise ValueError(_NO_IMAGE)
        return target

    def describe(self) -> str:
        """Summary of the current image."""
        if self.image8 is not None:
            return "Image 8 bits :\n" + self.image8.info()
        if self.image24 is not None:
            img = self.image24
            return (
                "Image 24 bits :\n"
                f"- Largeur : {img.width} px\n"
                f"- Hauteur : {img.height} px\n"
                f"- Profondeur : {img.color_depth} bits"
            )
        raise ValueError(_NO_IMAGE)


class _EndOfInput(Exception):
    pass


class _Reader:
    """Whitespace-separated token reader over a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._tokens: Iterator[str] = (tok for line in stream for tok in line.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise _EndOfInput from None

    def integer(self) -> Optional[int]:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            return None


def _open(session: Session, reader: _Reader, out: TextIO) -> None:
    out.write("Chemin du fichier : ")
    path = reader.word()
    try:
        image = session.open(path)
    except BmpError:
        out.write("Fichier invalide\n")
        return
    if isinstance(image, Bmp8Image):
        out.write(image.info() + "\n")
        out.write("Image 8 bits ouvert\n")
    else:
        out.write("Image 24 bits ouvert\n")
        out.write(
            f"Largeur: {image.width}, Hauteur: {image.height}, "
            f"Profondeur: {image.color_depth}\n"
        )


def _save(session: Session, out: TextIO) -> None:
    try:
        session.save()
    except ValueError:
        out.write(_NO_IMAGE + "\n")
        return
    if session.image8 is not None:
        out.write("Image 8 bits sauvegardee\n")
    else:
        out.write("Image 24 bits sauvegardée\n")


def _filter(session: Session, reader: _Reader, out: TextIO) -> None:
    out.write(_FILTER_MENU)
    choice = reader.integer()
    image = session.image8 if session.image8 is not None else session.image24

    if choice == 1:
        if image is None:
            out.write("Erreur : aucune image.\n")
        else:
            image.negative()
    elif choice == 2:
        out.write("Valeur de luminosité : ")
        value = reader.integer()
        if value is None:
            out.write("Choix invalide.\n")
        elif image is None:
            out.write("Erreur : aucune image.\n")
        else:
            image.brightness(value)
    elif choice == 3:
        if session.image8 is None:
            out.write("Erreur : seuillage seulement disponible pour les images 8 bits.\n")
            return
        out.write("Seuil (0-255) : ")
        level = reader.integer()
        if level is None:
            out.write("Choix invalide.\n")
        else:
            session.image8.threshold(level)
    elif choice in _KERNEL_FILTERS:
        factory, done, unavailable = _KERNEL_FILTERS[choice]
        if session.image24 is None:
            out.write(unavailable + "\n")
        else:
            session.image24.apply_filter(factory())
            out.write(done + "\n")
    else:
        out.write("Choix invalide.\n")


def _describe(session: Session, out: TextIO) -> None:
    try:
        out.write(session.describe() + "\n")
    except ValueError:
        out.write(_NO_IMAGE + ".\n")


def run(input_stream: TextIO, output_stream: TextIO) -> int:
    """Drive the menu from input_stream until the user quits or input ends."""
    session = Session()
    reader = _Reader(input_stream)
    try:
        while True:
            output_stream.write(_MAIN_MENU)
            choice = reader.integer()
            if choice == 1:
                _open(session, reader, output_stream)
            elif choice == 2:
                _save(session, output_stream)
            elif choice == 3:
                _filter(session, reader, output_stream)
            elif choice == 4:
                _describe(session, output_stream)
            elif choice == 5:
                output_stream.write("Fermeture du programme.\n")
                break
            else:
                output_stream.write("Choix invalide.\n")
    except _EndOfInput:
        pass
    output_stream.flush()
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        prog="bmptool", description="Interactive editor for 8-bit and 24-bit BMP images."
    )
    parser.parse_args(argv)
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())