"""Unit tests for package metadata."""

import fhe_audit


class TestVersion:
    def test_version_matches_pyproject(self, project_version: str) -> None:
        assert fhe_audit.__version__ == project_version
