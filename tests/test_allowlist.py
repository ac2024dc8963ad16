import pytest

from aiscan.core.allowlist import AllowList, domain_of


class TestDomainOf:
    @pytest.mark.parametrize(
        "url, domain",
        [
            ("https://www.Example.com/a/b", "example.com"),
            ("http://example.com:8080/", "example.com"),
            ("example.com/path", "example.com"),
        ],
    )
    def test_normalizes(self, url, domain):
        assert domain_of(url) == domain


class TestAllowList:
    def test_domain_entry_skips_every_path(self):
        allowlist = AllowList(["example.com"])
        assert allowlist.should_skip("https://example.com/")
        assert allowlist.should_skip("https://www.example.com/news/1")
        assert not allowlist.should_skip("https://other.com/")

    def test_path_entry_skips_only_prefix(self):
        allowlist = AllowList(["example.org/private"])
        assert allowlist.should_skip("https://example.org/private")
        assert allowlist.should_skip("https://example.org/private/notes")
        assert not allowlist.should_skip("https://example.org/privateer")
        assert not allowlist.should_skip("https://example.org/public")

    def test_blank_entries_ignored(self):
        allowlist = AllowList(["", "  "])
        assert len(allowlist) == 0

    def test_len(self):
        assert len(AllowList(["a.com", "b.com/x", "b.com/y"])) == 3
