from pathlib import Path

import pytest

from vsixpack.config.loader import CONFIG_FILENAME, PackagerConfig, load_packager_config
from vsixpack.errors import ConfigurationError


def test_missing_file_gives_defaults(tmp_path: Path):
    assert load_packager_config(tmp_path) == PackagerConfig()


def test_reads_yaml(tmp_path: Path):
    (tmp_path / CONFIG_FILENAME).write_text(
        "package:\n"
        "  base_content_url: https://example.com/blob/main\n"
        "  strict: true\n"
        "content_types:\n"
        "  wasm: application/wasm\n"
        "  .FOO: application/x-foo\n"
        "ignore:\n"
        "  - 'test/**'\n",
        encoding="utf-8",
    )
    cfg = load_packager_config(tmp_path)
    assert cfg.base_content_url == "https://example.com/blob/main"
    assert cfg.base_images_url is None
    assert cfg.strict is True
    assert cfg.content_types == {".wasm": "application/wasm", ".foo": "application/x-foo"}
    assert cfg.ignore == ("test/**",)


def test_overrides_replace_only_given_values(tmp_path: Path):
    cfg = PackagerConfig(base_content_url="a", strict=True)
    out = cfg.with_overrides(base_content_url=None, base_images_url="b", strict=None)
    assert out.base_content_url == "a"
    assert out.base_images_url == "b"
    assert out.strict is True


@pytest.mark.parametrize("text", ["- a\n- b\n", "package: 3\n", "ignore: nope\n", "content_types:\n  .x: 1\n"])
def test_rejects_ill_shaped_config(tmp_path: Path, text: str):
    (tmp_path / CONFIG_FILENAME).write_text(text, encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_packager_config(tmp_path)


def test_explicit_path_must_exist(tmp_path: Path):
    with pytest.raises(ConfigurationError, match="not found"):
        load_packager_config(tmp_path, tmp_path / "nope.yml")
