"""
Tests for domain models — defaults, validation, lookups.
"""

import pytest
from pydantic import ValidationError

from image_lister.core.models import GeneratedFile, ImageBinding, ImagesConfig


class TestImagesConfig:
    def test_defaults(self):
        """Defaults describe the project's own asset folders."""
        config = ImagesConfig()
        assert config.module == "Images"
        assert config.output == "src/Images.elm"
        assert [(b.name, b.pattern) for b in config.bindings] == [
            ("enteriorok", "assets/enteriorok/*"),
            ("latvanytervek", "assets/latvanytervek/*"),
        ]

    def test_defaults_not_shared(self):
        a = ImagesConfig()
        b = ImagesConfig()
        a.bindings.append(ImageBinding(name="extra", pattern="x/*"))
        assert len(b.bindings) == 2

    def test_dotted_module(self):
        assert ImagesConfig(module="Assets.Images").module == "Assets.Images"

    @pytest.mark.parametrize("name", ["images", "Assets.images", "", "Im ages", "1Images"])
    def test_bad_module(self, name):
        with pytest.raises(ValidationError):
            ImagesConfig(module=name)

    def test_no_bindings(self):
        with pytest.raises(ValidationError, match="at least one binding"):
            ImagesConfig(bindings=[])

    def test_mapping_bindings(self):
        config = ImagesConfig.model_validate({"bindings": {"a": "x/*", "b": "y/*"}})
        assert [b.name for b in config.bindings] == ["a", "b"]


class TestImageBinding:
    @pytest.mark.parametrize("name", ["photos", "photos2", "my_photos", "myPhotos"])
    def test_good_names(self, name):
        assert ImageBinding(name=name, pattern="*").name == name

    @pytest.mark.parametrize(
        "name",
        ["Photos", "2photos", "my-photos", "", "_x",
         "import", "type", "module", "if", "let", "case", "port", "where"],
    )
    def test_bad_names(self, name):
        with pytest.raises(ValidationError):
            ImageBinding(name=name, pattern="*")


class TestGeneratedFile:
    def test_defaults(self):
        f = GeneratedFile(path="src/Images.elm", content="x")
        assert f.reason == ""

    def test_roundtrip_dump(self):
        f = GeneratedFile(path="a", content="b", reason="c")
        assert GeneratedFile.model_validate(f.model_dump()) == f
