"""
Unit tests for SQLiteRecentQueryStore
"""


class TestRecentQueryStore:
    """Test suite for the recent-search list"""

    def test_most_recent_first(self, recent_store):
        recent_store.touch("cats", 100)
        recent_store.touch("dogs", 200)
        recent_store.touch("birds", 150)

        assert [entry.query for entry in recent_store.most_recent(10)] == ["dogs", "birds", "cats"]

    def test_touch_refreshes_existing_entry(self, recent_store):
        recent_store.touch("cats", 100)
        recent_store.touch("dogs", 200)
        recent_store.touch("cats", 300)

        entries = recent_store.most_recent(10)

        assert [entry.query for entry in entries] == ["cats", "dogs"]
        assert entries[0].last_used_at == 300
        assert recent_store.count() == 2

    def test_tie_goes_to_latest_touch(self, recent_store):
        recent_store.touch("cats", 100)
        recent_store.touch("dogs", 100)

        assert [entry.query for entry in recent_store.most_recent(10)] == ["dogs", "cats"]

    def test_blank_query_is_ignored(self, recent_store):
        recent_store.touch("", 100)
        recent_store.touch("   ", 100)

        assert recent_store.count() == 0

    def test_limit(self, recent_store):
        for i in range(5):
            recent_store.touch(f"q{i}", i)

        assert [entry.query for entry in recent_store.most_recent(2)] == ["q4", "q3"]

    def test_retain_only(self, recent_store):
        for i in range(12):
            recent_store.touch(f"q{i}", 1000 + i)

        removed = recent_store.retain_only(10)

        assert removed == 2
        assert recent_store.count() == 10
        remaining = [entry.query for entry in recent_store.most_recent(20)]
        assert "q0" not in remaining and "q1" not in remaining
        assert remaining[0] == "q11"

    def test_retain_only_zero_empties(self, recent_store):
        recent_store.touch("cats", 1)

        recent_store.retain_only(0)

        assert recent_store.count() == 0

    def test_delete_and_clear(self, recent_store):
        recent_store.touch("cats", 1)
        recent_store.touch("dogs", 2)

        recent_store.delete("cats")
        assert [entry.query for entry in recent_store.most_recent(10)] == ["dogs"]

        recent_store.delete("missing")
        recent_store.clear_all()
        assert recent_store.count() == 0
