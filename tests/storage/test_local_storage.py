import pytest

from frota_premio.core.exceptions import ValidationError
from frota_premio.storage.local import LocalFileStorage


def test_save_and_resolve(tmp_path):
    storage = LocalFileStorage(tmp_path)

    relative = storage.save(folder="comprovantes", filename="../ticket viagem.pdf", data=b"%PDF")

    assert relative.startswith("comprovantes/")
    assert relative.endswith("_ticket_viagem.pdf")
    path = storage.resolve(relative)
    assert path.read_bytes() == b"%PDF"
    assert path.parent == tmp_path.resolve() / "comprovantes"


def test_resolve_rejects_paths_outside_base_dir(tmp_path):
    storage = LocalFileStorage(tmp_path / "uploads")
    (tmp_path / "segredo.txt").write_text("x")

    with pytest.raises(ValidationError, match="Arquivo inválido"):
        storage.resolve("../segredo.txt")


def test_resolve_missing_file(tmp_path):
    with pytest.raises(ValidationError, match="não encontrado"):
        LocalFileStorage(tmp_path).resolve("comprovantes/nada.pdf")


def test_save_rejects_empty_name(tmp_path):
    with pytest.raises(ValidationError):
        LocalFileStorage(tmp_path).save(folder="comprovantes", filename="..", data=b"x")
