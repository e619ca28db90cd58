from __future__ import annotations

import httpx
import pytest

from css_optimizer.host.processor import StyleProcessor
from css_optimizer.host.sources import SourceResolver
from css_optimizer.model.registration import InlineStyle, StyleRegistration
from css_optimizer.model.settings import OptimizerSettings

SITE = "https://example.com"


@pytest.fixture
def remote_requests():
    return []


@pytest.fixture
def resolver(tmp_path, remote_requests):
    (tmp_path / "css").mkdir()
    (tmp_path / "css" / "style.css").write_text(
        "/* theme */\n.a { color: red; color: blue; }\n"
        ".b { background: url(img/bg.png); }\n"
        "@media (max-width: 600px) { .a { color: green; } }\n",
        encoding="utf-8",
    )

    def handler(request: httpx.Request) -> httpx.Response:
        remote_requests.append(str(request.url))
        if request.url.host == "cdn.test":
            return httpx.Response(200, text=".cdn { margin: 0 }")
        return httpx.Response(404)

    return SourceResolver(tmp_path, client=httpx.Client(transport=httpx.MockTransport(handler)))


def _processor(resolver, **settings) -> StyleProcessor:
    return StyleProcessor(OptimizerSettings(**settings), resolver, site_url=SITE)


class TestStyleProcessor:
    def test_local_stylesheet(self, resolver, remote_requests) -> None:
        styles = _processor(resolver).process([StyleRegistration("theme", "/css/style.css")])
        assert styles == (
            InlineStyle(
                handle="theme-optimized",
                css=(
                    ".a{color:blue}"
                    '.b{background:url("https://example.com/css/img/bg.png")}'
                    "@media (max-width:600px){.a{color:green}}"
                ),
                source="https://example.com/css/style.css",
                original_size=styles[0].original_size,
            ),
        )
        assert remote_requests == []

    def test_media_queries_dropped_when_not_preserved(self, resolver) -> None:
        styles = _processor(resolver, preserve_media_queries=False).process(
            [StyleRegistration("theme", "/css/style.css")]
        )
        assert "@media" not in styles[0].css

    def test_remote_stylesheet(self, resolver) -> None:
        styles = _processor(resolver).process([StyleRegistration("cdn", "//cdn.test/lib.css")])
        assert [(s.handle, s.css, s.source) for s in styles] == [
            ("cdn-optimized", ".cdn{margin:0}", "https://cdn.test/lib.css")
        ]

    def test_disabled(self, resolver) -> None:
        assert _processor(resolver, enabled=False).process([StyleRegistration("theme", "/css/style.css")]) == ()

    def test_skipped_and_missing_do_not_stop_others(self, resolver) -> None:
        registrations = [
            StyleRegistration("admin-bar", "/css/style.css"),
            StyleRegistration("missing", "/css/missing.css"),
            StyleRegistration("empty", ""),
            StyleRegistration("theme", "/css/style.css"),
        ]
        styles = _processor(resolver).process(registrations)
        assert [s.handle for s in styles] == ["theme-optimized"]

    def test_excluded_url_pattern(self, resolver) -> None:
        processor = _processor(resolver, excluded_urls=("https://example.com/css/*",))
        assert processor.process([StyleRegistration("theme", "/css/style.css")]) == ()

    def test_original_size_recorded(self, resolver, tmp_path) -> None:
        original = (tmp_path / "css" / "style.css").read_text(encoding="utf-8")
        style = _processor(resolver).process_one(StyleRegistration("theme", "/css/style.css"))
        assert style is not None
        assert style.original_size == len(original)
        assert len(style.css) < style.original_size
