import yaml
import pytest

from docmerge.adapters.manifest import SCHEMA_PATH, ManifestError, load_manifest, load_schema
from docmerge.core.labels import EN, RU
from docmerge.core.model import DocumentSpec
from docmerge.core.version import MetadataVersion, StaticVersion


def _write_manifest(path, data):
    path.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")
    return path


def _valid():
    return {
        "kind": "docmerge.manifest",
        "version": 1,
        "title": "AURA",
        "lang": "ru",
        "base_dir": "docs",
        "output": "build/full.md",
        "version_source": {"metadata": "package.json"},
        "sections": [
            {"title": "Part I", "documents": ["a.md", "b.md"]},
            {"title": None, "documents": ["c.md"]},
        ],
    }


def test_load_valid_manifest(tmp_path):
    path = _write_manifest(tmp_path / "merge.yml", _valid())

    config = load_manifest(path)

    assert config.title == "AURA"
    assert config.base_dir == tmp_path / "docs"
    assert config.output_path == tmp_path / "build" / "full.md"
    assert config.labels is RU
    assert isinstance(config.version_source, MetadataVersion)
    assert config.version_source.path == tmp_path / "package.json"
    assert config.documents == (
        DocumentSpec("a.md", "Part I"),
        DocumentSpec("b.md", "Part I"),
        DocumentSpec("c.md", None),
    )


def test_defaults_for_optional_keys(tmp_path):
    data = _valid()
    for key in ("lang", "base_dir", "version_source"):
        del data[key]
    config = load_manifest(_write_manifest(tmp_path / "merge.yml", data))

    assert config.base_dir == tmp_path
    assert config.labels is EN
    assert isinstance(config.version_source, StaticVersion)
    assert config.version_source.resolve() == "0.0.0"


def test_static_version(tmp_path):
    data = _valid()
    data["version_source"] = {"static": "0.3"}
    config = load_manifest(_write_manifest(tmp_path / "merge.yml", data))
    assert config.version_source.resolve() == "0.3"


@pytest.mark.parametrize(
    "mutate",
    [
        lambda d: d.pop("sections"),
        lambda d: d.update(kind="something.else"),
        lambda d: d.update(sections=[]),
        lambda d: d["sections"][0].update(documents=[]),
        lambda d: d.update(lang="de"),
        lambda d: d.update(extra="nope"),
        lambda d: d.update(version_source={"static": "1", "metadata": "package.json"}),
    ],
)
def test_schema_violations_raise(tmp_path, mutate):
    data = _valid()
    mutate(data)
    path = _write_manifest(tmp_path / "merge.yml", data)

    with pytest.raises(ManifestError, match="violates schema"):
        load_manifest(path)


def test_missing_manifest_file(tmp_path):
    with pytest.raises(ManifestError, match="Cannot read manifest"):
        load_manifest(tmp_path / "absent.yml")


def test_invalid_yaml(tmp_path):
    path = tmp_path / "merge.yml"
    path.write_text("sections: [unclosed\n", encoding="utf-8")
    with pytest.raises(ManifestError, match="Invalid YAML"):
        load_manifest(path)


def test_manifest_error_is_value_error():
    assert issubclass(ManifestError, ValueError)


def test_schema_ships_as_json_contract():
    assert SCHEMA_PATH.name == "docmerge-manifest.v1.schema.json"
    assert SCHEMA_PATH.is_file()
    schema = load_schema()
    assert schema["properties"]["kind"]["const"] == "docmerge.manifest"
    assert schema["additionalProperties"] is False


def test_short_title(tmp_path):
    data = _valid()
    data["short_title"] = "A"
    config = load_manifest(_write_manifest(tmp_path / "merge.yml", data))

    assert config.title == "AURA"
    assert config.display_title == "A"
    assert load_manifest(_write_manifest(tmp_path / "plain.yml", _valid())).display_title == "AURA"
