import pytest

from aiscan.db.database import get_connection
from aiscan.db.queries import LOCAL_DOMAIN, get_domain_history, get_latest, result_domain, store_result

from conftest import FURTHERMORE_TEXT


@pytest.fixture
def conn(tmp_path):
    conn = get_connection(tmp_path / "aiscan.db")
    yield conn
    conn.close()


class TestResultSink:
    def test_store_and_fetch_latest(self, conn, analyzer):
        result = analyzer.run(FURTHERMORE_TEXT, url="https://www.example.com/a")
        store_result(conn, result)

        latest = get_latest(conn, "example.com")
        assert latest is not None
        assert latest["score"] == pytest.approx(result.score)
        assert latest["match_map"] == {2: 2}
        assert latest["clamped"] is False

    def test_latest_is_newest(self, conn, analyzer):
        store_result(conn, analyzer.run("nothing here", url="https://example.com/old"))
        store_result(conn, analyzer.run(FURTHERMORE_TEXT, url="https://example.com/new"))
        assert get_latest(conn, "example.com")["url"] == "https://example.com/new"
        assert len(get_domain_history(conn, "example.com")) == 2

    def test_keyed_by_domain(self, conn, analyzer):
        store_result(conn, analyzer.run(FURTHERMORE_TEXT, url="https://a.com/x"))
        assert get_latest(conn, "b.com") is None

    def test_local_results(self, conn, analyzer):
        result = analyzer.run(FURTHERMORE_TEXT, file_path="post.txt")
        assert result_domain(result) == LOCAL_DOMAIN
        store_result(conn, result)
        assert get_latest(conn, LOCAL_DOMAIN)["file_path"] == "post.txt"
