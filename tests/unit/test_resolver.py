"""Unit tests for proximity ordering."""

import pytest

from env_utils.core.index import DefinitionIndex
from env_utils.core.resolver import ProximityResolver, distance_score, rank_by_proximity
from env_utils.models.env import EnvVarDefinition, Location


def _definition(path: str, value: str = "v", name: str = "PORT") -> EnvVarDefinition:
    return EnvVarDefinition(name=name, value=value, location=Location(path=path, line=0))


class TestDistanceScore:
    """Tests for distance_score."""

    @pytest.mark.parametrize(
        "definition_path,expected",
        [
            ("/w/a/b/x.env", 0),
            ("/w/a/b/c/x.env", 1),
            ("/w/a/b/c/d/x.env", 2),
            ("/w/a/x.env", 2),
            ("/w/a/c/x.env", 3),
            ("/w/x.env", 4),
            ("/w/z/y/x.env", 6),
        ],
    )
    def test_scores_from_origin(self, definition_path, expected):
        """Test distances from /w/a/b to various directories."""
        assert distance_score("/w/a/b/main.txt", definition_path) == expected

    def test_relative_paths(self):
        """Test that relative paths are scored the same way."""
        assert distance_score("a/b/main.txt", "a/c/x.env") == 3
        assert distance_score("a/main.txt", "a/c/x.env") == 1

    def test_bare_filenames_share_a_directory(self):
        """Test files without a directory component."""
        assert distance_score("main.txt", "x.env") == 0


class TestRankByProximity:
    """Tests for rank_by_proximity."""

    def test_closest_first(self):
        """Test that definitions are sorted by ascending distance."""
        defs = [_definition("/w/a/c/x.env"), _definition("/w/a/x.env"), _definition("/w/a/b/x.env")]
        ranked = rank_by_proximity(defs, "/w/a/b/main.txt")
        assert [d.location.path for d in ranked] == ["/w/a/b/x.env", "/w/a/x.env", "/w/a/c/x.env"]

    def test_child_beats_parent(self):
        """Test that a child directory ranks before the parent."""
        defs = [_definition("/w/x.env"), _definition("/w/a/c/x.env")]
        ranked = rank_by_proximity(defs, "/w/a/main.txt")
        assert [d.location.path for d in ranked] == ["/w/a/c/x.env", "/w/x.env"]

    def test_parent_beats_sibling(self):
        """Test that the parent directory ranks before a sibling."""
        defs = [_definition("/w/a/x.env"), _definition("/w/x.env")]
        ranked = rank_by_proximity(defs, "/w/b/main.txt")
        assert [d.location.path for d in ranked] == ["/w/x.env", "/w/a/x.env"]

    def test_ties_keep_discovery_order(self):
        """Test that the sort is stable."""
        defs = [_definition("/w/a/x.env", "first"), _definition("/w/c/x.env", "second")]
        ranked = rank_by_proximity(defs, "/w/b/main.txt")
        assert [d.value for d in ranked] == ["first", "second"]


class TestProximityResolver:
    """Tests for ProximityResolver."""

    @pytest.fixture
    def resolver(self):
        index = DefinitionIndex()
        index.replace(
            {
                "PORT": [_definition("/w/lib/x.env", "9090"), _definition("/w/app/x.env", "8080")],
                "HOST": [_definition("/w/app/x.env", "localhost", name="HOST")],
            }
        )
        return ProximityResolver(index)

    def test_without_origin_uses_index_order(self, resolver):
        """Test that no origin means discovery order."""
        assert [d.value for d in resolver.resolve("PORT")] == ["9090", "8080"]

    def test_origin_reorders(self, resolver):
        """Test that the closest definition comes first."""
        assert [d.value for d in resolver.resolve("PORT", "/w/app/main.txt")] == ["8080", "9090"]
        assert resolver.resolve_best("PORT", "/w/app/main.txt").value == "8080"

    def test_single_candidate(self, resolver):
        """Test a name with one definition."""
        assert resolver.resolve_best("HOST", "/elsewhere/f.txt").value == "localhost"

    def test_unknown_name(self, resolver):
        """Test that unknown names resolve to nothing."""
        assert resolver.resolve("MISSING") == ()
        assert resolver.resolve_best("MISSING", "/w/app/main.txt") is None
