import pytest
from jinja2 import TemplateNotFound

from raspipass.page import PAGE_TITLE, build_index, render_index


def test_version_from_file(paths, version_file):
    version_file.write_text("1.2.3\n")
    templates = build_index(paths)
    assert templates.get_template_vars("version") == ["1.2.3"]
    assert "1.2.3" in render_index(paths)


def test_version_defaults_to_zero(paths):
    templates = build_index(paths)
    assert templates.get_template_vars("version") == "0"
    assert "Version: 0</p>" in render_index(paths)


def test_title_and_app_name(paths, version_file):
    assert build_index(paths).get_template_vars("title") == "RaspiPass Configuration Page"
    version_file.write_text("9.9\n")
    html = render_index(paths)
    assert f"<title>{PAGE_TITLE}</title>" in html
    assert "<h1>RaspiPass</h1>" in html


def test_caching_always_off(paths):
    assert build_index(paths).caching is False


def test_consecutive_renders_are_independent(paths, version_file):
    version_file.write_text("1.0\n")
    first = render_index(paths)
    version_file.write_text("2.0\n")
    second = render_index(paths)
    version_file.unlink()
    third = render_index(paths)

    assert "1.0" in first and "2.0" not in first
    assert "2.0" in second and "1.0" not in second
    assert "Version: 0</p>" in third


def test_missing_template_raises(paths, tmp_path):
    paths.template_dir = str(tmp_path / "empty")
    with pytest.raises(TemplateNotFound):
        render_index(paths)


def test_non_utf8_version_file_still_renders(paths, version_file):
    version_file.write_bytes(b"1.2.3-\xe9\n")
    html = render_index(paths)
    assert "1.2.3-\ufffd" in html
