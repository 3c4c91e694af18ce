import pytest


@pytest.fixture
def source_tree(tmp_path):
    """Small project: two Kotlin files, one Java file, generated output and notes."""
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "Main.kt").write_text("fun main() {\n    println(\"hi\")\n}\n", encoding="utf-8")
    (tmp_path / "src" / "Util.kt").write_text("val x = a?.b ?: 0\n", encoding="utf-8")
    (tmp_path / "src" / "App.java").write_text("if (a != b) { c++; }\n", encoding="utf-8")
    (tmp_path / "generated").mkdir()
    (tmp_path / "generated" / "Gen.kt").write_text("!!!!!!\n", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("// not code\n", encoding="utf-8")
    return tmp_path
