"""Unit tests for the definition index."""

import threading

from env_utils.core.index import DefinitionIndex
from env_utils.models.env import EnvVarDefinition, Location


def _definition(name: str, value: str, path: str = "/p/a.env") -> EnvVarDefinition:
    return EnvVarDefinition(name=name, value=value, location=Location(path=path, line=0))


class TestDefinitionIndex:
    """Tests for DefinitionIndex."""

    def test_empty(self):
        """Test a fresh index."""
        index = DefinitionIndex()
        assert len(index) == 0
        assert index.get("PORT") == ()
        assert "PORT" not in index
        assert index.generation == 0

    def test_put_appends_in_order(self):
        """Test that put keeps discovery order per name."""
        index = DefinitionIndex()
        index.put(_definition("PORT", "1"))
        index.put(_definition("HOST", "h"))
        index.put(_definition("PORT", "2"))

        assert [d.value for d in index.get("PORT")] == ["1", "2"]
        assert index.names() == ("PORT", "HOST")
        assert index.definition_count() == 3

    def test_put_never_mutates_a_returned_tuple(self):
        """Test that readers keep a stable view across writes."""
        index = DefinitionIndex()
        index.put(_definition("PORT", "1"))
        before = index.get("PORT")
        index.put(_definition("PORT", "2"))

        assert len(before) == 1
        assert len(index.get("PORT")) == 2

    def test_replace_swaps_everything(self):
        """Test that replace drops names missing from the new mapping."""
        index = DefinitionIndex()
        index.replace({"OLD": [_definition("OLD", "x")]})
        index.replace({"NEW": [_definition("NEW", "y")]})

        assert "OLD" not in index
        assert list(index) == ["NEW"]
        assert index.generation == 2

    def test_snapshot_is_independent(self):
        """Test that a snapshot does not change after a replace."""
        index = DefinitionIndex()
        index.replace({"A": [_definition("A", "1")]})
        snap = index.snapshot()
        index.replace({})

        assert set(snap) == {"A"}
        assert len(index) == 0

    def test_clear(self):
        """Test that clear empties the index."""
        index = DefinitionIndex()
        index.put(_definition("A", "1"))
        index.clear()

        assert len(index) == 0
        assert index.generation == 1

    def test_concurrent_puts(self):
        """Test that concurrent puts lose no definitions."""
        index = DefinitionIndex()

        def worker(n):
            for i in range(200):
                index.put(_definition("PORT", f"{n}-{i}"))

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(index.get("PORT")) == 800
