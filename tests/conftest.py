"""Pytest configuration and fixtures."""

import shutil
import tempfile
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from git_history.models import RawCommitRecord
from git_history.processing.normalizer import CommitNormalizer
from git_history.sources.base import CommandSource


NEW_FILE_DIFF = """diff --git a/src/x.ts b/src/x.ts
new file mode 100644
index 0000000..3b18e51
--- /dev/null
+++ b/src/x.ts
@@ -0,0 +1,7 @@
+export function x() {
+  const a = 1;
+  const b = 2;
+  const c = a + b;
+  console.log(c);
+  return c;
+}
"""

MULTI_FILE_DIFF = """diff --git a/README.md b/README.md
index 1111111..2222222 100644
--- a/README.md
+++ b/README.md
@@ -1,3 +1,3 @@
 # Project
-Old description
+New description
+More text
diff --git a/legacy.py b/legacy.py
deleted file mode 100644
index 3333333..0000000
--- a/legacy.py
+++ /dev/null
@@ -1,2 +0,0 @@
-import os
-print(os.getcwd())
diff --git a/old_name.py b/new_name.py
similarity index 90%
rename from old_name.py
rename to new_name.py
index 4444444..5555555 100644
--- a/old_name.py
+++ b/new_name.py
@@ -1,2 +1,2 @@
-x = 1
+x = 2
"""


def make_record(index: int = 0, **overrides) -> RawCommitRecord:
    """Build a raw commit record with sensible defaults."""
    data = {
        "hash": f"{index:040x}",
        "date": "2023-01-01T10:00:00Z",
        "message": f"Commit number {index}",
        "author_name": "Test Author",
        "author_email": "test@example.com",
    }
    data.update(overrides)
    return RawCommitRecord(**data)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def normalizer():
    """Commit normalizer with default diff parser."""
    return CommitNormalizer()


@pytest.fixture
def sample_records():
    """Ten raw records, newest first."""
    return [make_record(i) for i in range(10)]


@pytest.fixture
def sample_commits(normalizer, sample_records):
    """Ten normalized commits, newest first."""
    return normalizer.normalize_many(sample_records)


@pytest.fixture
def mock_source():
    """Command source double with async methods."""
    source = AsyncMock(spec=CommandSource)
    source.path = "/test/repo"
    source.is_valid_repository.return_value = True
    source.fetch_log.return_value = []
    source.fetch_commit.return_value = None
    source.fetch_branches.return_value = ["main", "develop"]
    source.fetch_current_branch.return_value = "main"
    source.fetch_remotes.return_value = ["origin"]
    return source


@pytest.fixture
def sample_python_code():
    """Sample Python code for testing."""
    return '''"""Sample module for testing."""


class Calculator:
    """A simple calculator class."""

    def add(self, a: int, b: int) -> int:
        return a + b
'''


@pytest.fixture
def sample_git_repo(temp_dir, sample_python_code):
    """Create a sample git repository with two commits."""
    import git

    repo_path = temp_dir / "sample_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)
    actor = git.Actor("Test Author", "test@example.com")

    (repo_path / "calculator.py").write_text(sample_python_code)
    (repo_path / "README.md").write_text("# Sample Repository\n\nThis is a test repository.\n")
    repo.index.add(["calculator.py", "README.md"])
    repo.index.commit("Initial commit", author=actor, committer=actor)

    (repo_path / "calculator.py").write_text(sample_python_code + "\n# Added comment\n")
    repo.index.add(["calculator.py"])
    repo.index.commit("Update calculator with comment", author=actor, committer=actor)

    repo.close()
    return repo_path


@pytest.fixture
def record_factory():
    """Factory for raw commit records."""
    return make_record


@pytest.fixture
def new_file_diff():
    """Diff adding src/x.ts with seven lines."""
    return NEW_FILE_DIFF


@pytest.fixture
def multi_file_diff():
    """Diff modifying, deleting, and renaming one file each."""
    return MULTI_FILE_DIFF
