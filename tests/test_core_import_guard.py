import importlib.util
from pathlib import Path


def _load_guard():
    script = (
        Path(__file__).resolve().parent.parent / "scripts" / "check_core_imports.py"
    )
    spec = importlib.util.spec_from_file_location("check_core_imports", script)
    module = importlib.util.module_from_spec(spec)
    assert spec.loader is not None  # for mypy
    spec.loader.exec_module(module)
    return module


def test_core_import_guard_passes():
    exit_code = _load_guard().main()
    assert exit_code == 0, "core import guard failed"


def test_core_import_guard_flags_models_imports(tmp_path):
    bad = tmp_path / "bad.py"
    bad.write_text(
        "import jsonhal.models\n"
        "from ..models import Hal\n"
        "from .. import models\n"
        "from ..utils.time_parser import parse_timestamp\n"
    )
    errors = _load_guard().scan_file(bad)
    assert len(errors) == 3
