import pytest


@pytest.fixture
def marked_source():
    """A small source file with one alignment group and a stop marker."""
    return (
        "# align_by \"= ;\"\n"
        "let a = 111;\n"
        "let bbb = 2;\n"
        "\n"
        "# align_by stop\n"
        "# align_by \"=\"\n"
        "x = 1\n"
        "long_name = 2\n"
    )


@pytest.fixture
def aligned_source():
    """``marked_source`` after alignment."""
    return (
        "# align_by \"= ;\"\n"
        "let a   = 111;\n"
        "let bbb =   2;\n"
        "\n"
        "# align_by stop\n"
        "# align_by \"=\"\n"
        "x = 1\n"
        "long_name = 2\n"
    )


@pytest.fixture
def project_dir(tmp_path, marked_source):
    """Write a tiny project tree and return its root."""
    root = tmp_path / "project"
    (root / "src").mkdir(parents=True)
    (root / "pyproject.toml").write_text("[project]\nname = 'demo'\n")
    (root / "src" / "marked.rs").write_text(marked_source)
    (root / "src" / "plain.rs").write_text("fn main() {}\n")
    return root
