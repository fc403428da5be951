import io
import struct

import pytest

from bmptool.bmp8 import Bmp8Image
from bmptool.bmp24 import Bmp24Image, Pixel
from bmptool.cli import Session, run
from bmptool.errors import BmpError


def _write_bmp8(path, width, height, pixels):
    data = bytes(pixels)
    header = struct.pack(
        "<2sIHHIIiiHHIIiiII",
        b"BM",
        54 + 1024 + len(data),
        0,
        0,
        54 + 1024,
        40,
        width,
        height,
        1,
        8,
        0,
        len(data),
        0,
        0,
        256,
        0,
    )
    table = b"".join(bytes((i, i, i, 0)) for i in range(256))
    path.write_bytes(header + table + data)
    return path


def _write_bmp24(path, width, height, colour=None):
    image = Bmp24Image.blank(width, height)
    if colour is not None:
        image.data = [[colour for _ in range(width)] for _ in range(height)]
    image.save(path)
    return path


def _run(text):
    out = io.StringIO()
    code = run(io.StringIO(text), out)
    return code, out.getvalue()


def test_open_8bit_sets_image8(tmp_path):
    path = _write_bmp8(tmp_path / "g.bmp", 2, 2, [1, 2, 3, 4])
    session = Session(output_dir=tmp_path)
    image = session.open(path)
    assert isinstance(image, Bmp8Image)
    assert session.image8 is image
    assert session.image24 is None
    assert list(image.data) == [1, 2, 3, 4]


def test_open_24bit_replaces_8bit(tmp_path):
    p8 = _write_bmp8(tmp_path / "g.bmp", 2, 2, [1, 2, 3, 4])
    p24 = _write_bmp24(tmp_path / "c.bmp", 3, 2)
    session = Session(output_dir=tmp_path)
    session.open(p8)
    image = session.open(p24)
    assert isinstance(image, Bmp24Image)
    assert session.image24 is image
    assert session.image8 is None
    assert (image.width, image.height) == (3, 2)


def test_open_invalid_file_raises(tmp_path):
    session = Session(output_dir=tmp_path)
    with pytest.raises(BmpError):
        session.open(tmp_path / "missing.bmp")
    assert session.image8 is None and session.image24 is None


def test_open_8bit_then_invalid_clears_8bit(tmp_path):
    p8 = _write_bmp8(tmp_path / "g.bmp", 1, 1, [9])
    session = Session(output_dir=tmp_path)
    session.open(p8)
    with pytest.raises(BmpError):
        session.open(tmp_path / "missing.bmp")
    assert session.image8 is None


def test_save_without_image_raises(tmp_path):
    with pytest.raises(ValueError):
        Session(output_dir=tmp_path).save()


def test_describe_without_image_raises(tmp_path):
    with pytest.raises(ValueError):
        Session(output_dir=tmp_path).describe()


def test_save_8bit_round_trip(tmp_path):
    src = _write_bmp8(tmp_path / "g.bmp", 2, 2, [10, 20, 30, 40])
    session = Session(output_dir=tmp_path)
    session.open(src)
    target = session.save()
    assert target == tmp_path / "output_8bit.bmp"
    assert list(Bmp8Image.load(target).data) == [10, 20, 30, 40]


def test_save_24bit_round_trip(tmp_path):
    src = _write_bmp24(tmp_path / "c.bmp", 2, 3, Pixel(5, 6, 7))
    session = Session(output_dir=tmp_path)
    session.open(src)
    target = session.save()
    assert target == tmp_path / "output_24bit.bmp"
    assert Bmp24Image.load(target).data == session.image24.data


def test_describe_24bit(tmp_path):
    session = Session(output_dir=tmp_path)
    session.open(_write_bmp24(tmp_path / "c.bmp", 3, 2))
    text = session.describe()
    assert text.startswith("Image 24 bits :")
    assert "- Largeur : 3 px" in text
    assert "- Hauteur : 2 px" in text
    assert "- Profondeur : 24 bits" in text


def test_describe_8bit_uses_info(tmp_path):
    session = Session(output_dir=tmp_path)
    session.open(_write_bmp8(tmp_path / "g.bmp", 2, 2, [0, 0, 0, 0]))
    text = session.describe()
    assert text == "Image 8 bits :\n" + session.image8.info()


def test_run_quit(tmp_path):
    code, output = _run("5\n")
    assert code == 0
    assert "Fermeture du programme." in output


def test_run_end_of_input_stops(tmp_path):
    code, output = _run("")
    assert code == 0
    assert "Fermeture du programme." not in output
    assert "=== Menu ===" in output


def test_run_invalid_choice(tmp_path):
    _, output = _run("9\n5\n")
    assert "Choix invalide." in output


def test_run_save_without_image(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _, output = _run("2\n5\n")
    assert "Erreur : aucune image chargée" in output
    assert not (tmp_path / "output_8bit.bmp").exists()


def test_run_negative_24bit_and_save(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    src = _write_bmp24(tmp_path / "c.bmp", 2, 2)
    _, output = _run(f"1\n{src}\n3\n1\n2\n5\n")
    assert "Image 24 bits ouvert" in output
    assert "Image 24 bits sauvegardée" in output
    saved = Bmp24Image.load(tmp_path / "output_24bit.bmp")
    assert all(p == Pixel(255, 255, 255) for row in saved.data for p in row)


def test_run_brightness_8bit(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    src = _write_bmp8(tmp_path / "g.bmp", 2, 2, [0, 100, 200, 250])
    _, output = _run(f"1\n{src}\n3\n2\n10\n2\n5\n")
    assert "Image 8 bits ouvert" in output
    assert "Image 8 bits sauvegardee" in output
    saved = Bmp8Image.load(tmp_path / "output_8bit.bmp")
    assert list(saved.data) == [10, 110, 210, 255]


def test_run_threshold_8bit(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    src = _write_bmp8(tmp_path / "g.bmp", 2, 2, [0, 127, 128, 255])
    _run(f"1\n{src}\n3\n3\n128\n2\n5\n")
    saved = Bmp8Image.load(tmp_path / "output_8bit.bmp")
    assert list(saved.data) == [0, 0, 255, 255]


def test_run_threshold_refused_for_24bit(tmp_path):
    src = _write_bmp24(tmp_path / "c.bmp", 2, 2)
    _, output = _run(f"1\n{src}\n3\n3\n5\n")
    assert "Erreur : seuillage seulement disponible pour les images 8 bits." in output


def test_run_blur_refused_for_8bit(tmp_path):
    src = _write_bmp8(tmp_path / "g.bmp", 1, 1, [3])
    _, output = _run(f"1\n{src}\n3\n4\n5\n")
    assert "Erreur : flou disponible seulement pour 24 bits." in output


def test_run_gaussian_blur_keeps_uniform_image(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    src = _write_bmp24(tmp_path / "c.bmp", 1, 1, Pixel(80, 80, 80))
    _, output = _run(f"1\n{src}\n3\n5\n2\n5\n")
    assert "Filtre Flou Gaussien mis" in output
    saved = Bmp24Image.load(tmp_path / "output_24bit.bmp")
    # A single pixel only sees the kernel's centre weight of 4/16.
    assert saved.data == [[Pixel(20, 20, 20)]]


def test_run_invalid_file(tmp_path):
    _, output = _run(f"1\n{tmp_path / 'nope.bmp'}\n5\n")
    assert "Fichier invalide" in output


def test_run_info_24bit(tmp_path):
    src = _write_bmp24(tmp_path / "c.bmp", 4, 1)
    _, output = _run(f"1\n{src}\n4\n5\n")
    assert "- Largeur : 4 px" in output
    assert "Largeur: 4, Hauteur: 1, Profondeur: 24" in output


def test_run_filter_without_image(tmp_path):
    _, output = _run("3\n1\n5\n")
    assert "Erreur : aucune image." in output