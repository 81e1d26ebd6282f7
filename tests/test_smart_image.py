"""Tests for AssetProbe and SmartImage - validates on-disk fallback resolution."""

import sys
import unicodedata
from pathlib import Path

import pytest
from PIL import Image

from designquest.image_resolver import LARGE_MARKER, ImageResolver
from designquest.smart_image import AssetProbe, placeholder_html, smart_image


def make_image(path: Path):
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGB", (8, 6), "red").save(path, format="JPEG")
    return path


@pytest.fixture
def assets(tmp_path):
    root = tmp_path / "assets"
    root.mkdir()
    return root


class TestAssetProbe:
    """Tests for mapping candidates onto asset files."""

    def test_existing_image_accepted(self, assets):
        make_image(assets / "works" / "a.jpeg")
        probe = AssetProbe(assets, "/")
        assert probe("/works/a.jpeg")
        assert probe.local_path("/works/a.jpeg") == (assets / "works" / "a.jpeg").resolve()

    def test_missing_file_rejected(self, assets):
        assert not AssetProbe(assets, "/")("/works/missing.jpeg")

    def test_non_image_rejected(self, assets):
        """A file that does not decode counts as a load failure."""
        bad = assets / "works" / "broken.jpeg"
        bad.parent.mkdir(parents=True)
        bad.write_text("not an image")
        assert not AssetProbe(assets, "/")("/works/broken.jpeg")

    def test_directory_rejected(self, assets):
        (assets / "works").mkdir()
        assert not AssetProbe(assets, "/")("/works")

    def test_base_path_prefix(self, assets):
        make_image(assets / "a.jpeg")
        probe = AssetProbe(assets, "/site/")
        assert probe("/site/a.jpeg")
        assert not probe("/other/a.jpeg")

    def test_base_path_without_trailing_slash(self, assets):
        make_image(assets / "a.jpeg")
        probe = AssetProbe(assets, "/site")
        assert probe.base_path == "/site/"
        assert probe("/site/a.jpeg")
        assert not probe("/sitex/a.jpeg")

    def test_escape_outside_assets_rejected(self, assets, tmp_path):
        make_image(tmp_path / "secret.jpeg")
        probe = AssetProbe(assets, "/")
        assert probe.local_path("/../secret.jpeg") is None
        assert not probe("/../secret.jpeg")

    def test_absolute_candidates_left_to_browser(self, assets):
        probe = AssetProbe(assets, "/")
        assert probe("https://example.com/x.png")
        assert probe.local_path("https://example.com/x.png") is None


class TestResolverAgainstDisk:
    """End-to-end ladder runs against real files."""

    @pytest.mark.skipif(sys.platform == "darwin", reason="APFS matches NFC and NFD names")
    def test_nfd_file_found_from_nfc_request(self, assets):
        name = unicodedata.normalize("NFD", "がいな.jpeg")
        make_image(assets / "works" / name)
        r = ImageResolver(unicodedata.normalize("NFC", "works/がいな.jpeg"), "/")
        found = r.resolve(AssetProbe(assets, "/"))
        assert found == unicodedata.normalize("NFD", "/works/がいな.jpeg")
        assert r.attempt == 2

    @pytest.mark.skipif(sys.platform == "darwin", reason="APFS matches NFC and NFD names")
    def test_nfd_file_found_under_non_ascii_base_path(self, assets):
        """The NFD step decomposes the base path as well; it must still map to the file."""
        base = unicodedata.normalize("NFC", "/café/")
        name = unicodedata.normalize("NFD", "がいな.jpeg")
        make_image(assets / "works" / name)
        r = ImageResolver(unicodedata.normalize("NFC", "works/がいな.jpeg"), base)
        found = r.resolve(AssetProbe(assets, base))
        assert found == unicodedata.normalize("NFD", "/café/works/がいな.jpeg")
        assert r.attempt == 2

    def test_jpg_found_from_jpeg_request(self, assets):
        make_image(assets / "07_design_reviews" / "review_01.jpg")
        r = ImageResolver("07_design_reviews/review_01.jpeg", "/")
        assert r.resolve(AssetProbe(assets, "/")) == "/07_design_reviews/review_01.jpg"
        assert r.attempt == 3

    def test_large_variant_found(self, assets):
        """poster.jpeg missing, poster.jpg missing, poster（大）.jpg present."""
        make_image(assets / "works" / f"poster{LARGE_MARKER}.jpg")
        r = ImageResolver("works/poster.jpeg", "/")
        assert r.resolve(AssetProbe(assets, "/")) == f"/works/poster{LARGE_MARKER}.jpg"
        assert r.attempt == 4

    def test_icon_never_tries_large_variant(self, assets):
        make_image(assets / "img" / f"icon{LARGE_MARKER}.jpg")
        r = ImageResolver("img/icon.jpeg", "/")
        assert r.resolve(AssetProbe(assets, "/")) is None
        assert r.failed

    def test_each_instance_repeats_the_ladder(self, assets):
        make_image(assets / "a.jpg")
        probe = AssetProbe(assets, "/")
        first, second = ImageResolver("a.jpeg", "/"), ImageResolver("a.jpeg", "/")
        assert first.resolve(probe) == second.resolve(probe) == "/a.jpg"
        assert first.attempt == second.attempt == 3


class TestPlaceholder:
    """Tests for the not-found placeholder."""

    def test_shows_label_and_original_src(self):
        html = placeholder_html("works/<poster>.jpeg")
        assert "Image Not Found" in html
        assert "works/&lt;poster&gt;.jpeg" in html
        assert "<poster>" not in html

    def test_smart_image_returns_none_when_exhausted(self, assets):
        assert smart_image("works/missing.jpeg", probe=AssetProbe(assets, "/")) is None

    def test_smart_image_passes_absolute_through(self, assets):
        url = "https://example.com/x.png"
        assert smart_image(url, "x", probe=AssetProbe(assets, "/")) == url
