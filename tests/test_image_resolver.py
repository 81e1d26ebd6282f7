"""Unit tests for the image fallback ladder and resolver state machine."""

import unicodedata

import pytest

from designquest.image_resolver import (
    FALLBACK_LADDER,
    LARGE_MARKER,
    ImageResolver,
    is_absolute,
    resolve_src,
    swap_jpeg_extension,
    toggle_large_suffix,
)


def nfd(s):
    return unicodedata.normalize("NFD", s)


def nfc(s):
    return unicodedata.normalize("NFC", s)


class TestResolveSrc:
    """Tests for absolute/relative classification."""

    @pytest.mark.parametrize("src", [
        "http://example.com/a.png",
        "https://example.com/x.png",
        "//cdn.example.com/a//b.png",
        "data:image/png;base64,iVBORw0KGgo=",
    ])
    def test_absolute_unchanged(self, src):
        """Scheme and data markers pass through untouched."""
        assert is_absolute(src)
        assert resolve_src(src, "/base/") == src

    def test_relative_prefixed_with_base(self):
        """Relative paths get the base path in front."""
        assert resolve_src("img/photo.jpeg", "/") == "/img/photo.jpeg"
        assert resolve_src("img/photo.jpeg", "/site/") == "/site/img/photo.jpeg"

    def test_collapses_separator_runs(self):
        """No run of 2+ slashes survives relative resolution."""
        out = resolve_src("//a///b////c.png".lstrip("/"), "/base//")
        assert out == "/base/a/b/c.png"
        assert "//" not in resolve_src("/x//y.png", "/")

    def test_leading_slash_on_relative(self):
        """A relative path with its own leading slash does not double up."""
        assert resolve_src("/01_dtp_design/a.jpeg", "/") == "/01_dtp_design/a.jpeg"


class TestLadderSteps:
    """Tests for the individual path transformations."""

    def test_swap_jpeg_to_jpg(self):
        assert swap_jpeg_extension("/a/b.jpeg") == "/a/b.jpg"

    def test_swap_jpg_to_jpeg(self):
        assert swap_jpeg_extension("/a/b.jpg") == "/a/b.jpeg"

    def test_swap_other_extension_noop(self):
        assert swap_jpeg_extension("/a/b.png") == "/a/b.png"
        assert swap_jpeg_extension("/a.jpeg/b.png") == "/a.jpeg/b.png"

    def test_insert_marker_before_extension(self):
        """Marker goes right before the last extension."""
        assert toggle_large_suffix("/works/v1.2/poster.jpeg") == f"/works/v1.2/poster{LARGE_MARKER}.jpeg"

    def test_remove_marker(self):
        assert toggle_large_suffix(f"/works/poster{LARGE_MARKER}.jpeg") == "/works/poster.jpeg"

    def test_icon_paths_never_get_marker(self):
        """img/ and Xgd paths are excluded from insertion."""
        assert toggle_large_suffix("/img/icon.jpeg") == "/img/icon.jpeg"
        assert toggle_large_suffix("/qr/Xgd_code.png") == "/qr/Xgd_code.png"

    def test_icon_paths_still_lose_marker(self):
        """The guard only applies to insertion."""
        assert toggle_large_suffix(f"/img/icon{LARGE_MARKER}.jpeg") == "/img/icon.jpeg"

    def test_no_extension_unchanged(self):
        assert toggle_large_suffix("/works/poster") == "/works/poster"

    def test_ladder_order(self):
        assert [f.__name__ for f in FALLBACK_LADDER] == [
            "to_nfc", "to_nfd", "swap_jpeg_extension", "toggle_large_suffix",
        ]


class TestImageResolver:
    """Tests for the resolver state machine."""

    def test_initial_state(self):
        r = ImageResolver("img/photo.jpeg", "/")
        assert r.candidate == "/img/photo.jpeg"
        assert r.attempt == 0
        assert not r.failed

    def test_example_sequence_all_fail(self):
        """Five candidates are probed, then the resolver gives up."""
        tried = []

        def probe(c):
            tried.append(c)
            return False

        r = ImageResolver("img/photo.jpeg", "/")
        assert r.resolve(probe) is None
        assert r.failed
        assert tried == [
            "/img/photo.jpeg",
            "/img/photo.jpeg",
            "/img/photo.jpeg",
            "/img/photo.jpg",
            "/img/photo.jpg",
        ]

    def test_failed_is_terminal(self):
        """Further failure signals after exhaustion change nothing."""
        r = ImageResolver("works/a.jpeg", "/")
        for _ in range(5):
            r.on_error()
        assert r.failed
        snapshot = (r.candidate, r.attempt)
        r.on_error(); r.on_error()
        assert r.failed
        assert (r.candidate, r.attempt) == snapshot

    def test_never_more_than_five_probes(self):
        calls = []
        ImageResolver("works/a.png", "/").resolve(lambda c: calls.append(c) or False)
        assert len(calls) == 5

    def test_steps_chain_from_current_candidate(self):
        """Step 3 applies to the NFD form produced by step 2, not to the input."""
        r = ImageResolver(nfc("作品/が.jpeg"), "/")
        r.on_error(); r.on_error(); r.on_error()
        assert r.attempt == 3
        assert r.candidate == nfd("/作品/が.jpg")

    def test_marker_step_uses_swapped_extension(self):
        r = ImageResolver("works/poster.jpeg", "/")
        for _ in range(4):
            r.on_error()
        assert r.attempt == 4
        assert r.candidate == f"/works/poster{LARGE_MARKER}.jpg"

    def test_stops_at_first_success(self):
        r = ImageResolver("works/poster.jpeg", "/")
        assert r.resolve(lambda c: c.endswith(".jpg")) == "/works/poster.jpg"
        assert r.attempt == 3
        assert not r.failed

    def test_success_needs_no_transition(self):
        r = ImageResolver("works/poster.jpeg", "/")
        assert r.resolve(lambda c: True) == "/works/poster.jpeg"
        assert r.attempt == 0

    def test_set_source_resets_mid_ladder(self):
        """A new input discards fallback state and restarts at attempt 0."""
        r = ImageResolver("works/poster.jpeg", "/")
        r.on_error(); r.on_error(); r.on_error()
        r.set_source("works/other.png")
        assert r.attempt == 0
        assert r.candidate == "/works/other.png"
        assert r.original == "works/other.png"
        assert not r.failed

    def test_set_source_resets_after_failure(self):
        r = ImageResolver("works/poster.jpeg", "/")
        r.resolve(lambda c: False)
        r.set_source("works/next.jpeg")
        assert not r.failed
        assert r.candidate == "/works/next.jpeg"

    def test_set_source_same_value_keeps_state(self):
        r = ImageResolver("works/poster.jpeg", "/")
        r.on_error(); r.on_error()
        r.set_source("works/poster.jpeg")
        assert r.attempt == 2

    def test_original_kept_for_placeholder(self):
        r = ImageResolver("works/poster.jpeg", "/site/")
        r.resolve(lambda c: False)
        assert r.original == "works/poster.jpeg"

    def test_absolute_source_stays_as_given(self):
        """Absolute URLs keep their form when the probe accepts them."""
        url = "https://example.com/x.png"
        r = ImageResolver(url, "/")
        assert r.resolve(lambda c: True) == url
