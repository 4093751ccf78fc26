from pathlib import Path

from hunkview.diff.models import FileStatus
from hunkview.diff.validation import check_changeset
from hunkview.patch import parse_patch

SIMPLE_PATCH = """\
--- a/src/main.py
+++ b/src/main.py
@@ -1,3 +1,4 @@
 def foo():
+    print("hello")
     pass
"""

MULTI_FILE_PATCH = """\
--- a/src/main.py
+++ b/src/main.py
@@ -1,2 +1,3 @@
 def foo():
+    print("hello")
     pass
--- a/src/utils.py
+++ b/src/utils.py
@@ -1,2 +1,3 @@
 def bar():
+    return 42
     pass
"""

BAD_COUNT_PATCH = """\
diff --git a/x.py b/x.py
--- a/x.py
+++ b/x.py
@@ -1,9 +1,9 @@
-a
+b
diff --git a/y.py b/y.py
--- a/y.py
+++ b/y.py
@@ -1 +1 @@
-c
+d
"""


def _fixture(name: str) -> Path:
    return Path(__file__).parent / "fixtures" / name


def test_parse_simple_patch():
    files = parse_patch(SIMPLE_PATCH)
    assert len(files) == 1
    file = files[0]
    assert file.path == "src/main.py"
    assert file.status == FileStatus.MODIFIED
    assert file.previous_path is None
    assert (file.additions, file.deletions) == (1, 0)
    hunk = file.hunks[0]
    assert (hunk.old_start, hunk.old_count, hunk.new_start, hunk.new_count) == (1, 3, 1, 4)
    assert hunk.body.startswith("@@ -1,3 +1,4 @@")


def test_parse_plain_multi_file_patch():
    files = parse_patch(MULTI_FILE_PATCH)
    assert [f.path for f in files] == ["src/main.py", "src/utils.py"]
    assert all(f.additions == 1 for f in files)


def test_parse_git_fixture():
    files = parse_patch(_fixture("sample.diff").read_text(encoding="utf-8"))
    by_path = {f.path: f for f in files}
    assert [f.path for f in files] == [
        "src/main.py",
        "src/new_file.py",
        "src/old_file.py",
        "docs/b.md",
        "assets/logo.png",
    ]

    main = by_path["src/main.py"]
    assert len(main.hunks) == 2
    assert (main.additions, main.deletions) == (2, 1)
    assert main.hunks[1].body.rstrip("\n").endswith("\\ No newline at end of file")

    assert by_path["src/new_file.py"].status == FileStatus.ADDED
    assert by_path["src/new_file.py"].additions == 2

    deleted = by_path["src/old_file.py"]
    assert deleted.status == FileStatus.DELETED
    assert deleted.deletions == 1

    renamed = by_path["docs/b.md"]
    assert renamed.status == FileStatus.RENAMED
    assert renamed.previous_path == "docs/a.md"
    assert renamed.hunks == ()

    binary = by_path["assets/logo.png"]
    assert binary.status == FileStatus.MODIFIED
    assert binary.hunks == ()


def test_parsed_totals_agree_with_cross_check():
    files = parse_patch(_fixture("sample.diff").read_text(encoding="utf-8"))
    codes = {w.code for w in check_changeset(files)}
    assert "additions_mismatch" not in codes
    assert "deletions_mismatch" not in codes


def test_short_hunk_does_not_swallow_next_file():
    files = parse_patch(BAD_COUNT_PATCH)
    assert [f.path for f in files] == ["x.py", "y.py"]
    assert files[0].hunks[0].body == "@@ -1,9 +1,9 @@\n-a\n+b\n"


def test_parse_empty_patch():
    assert parse_patch("") == []


def test_form_feed_inside_context_line_stays_in_hunk():
    patch = (
        "diff --git a/x.py b/x.py\n--- a/x.py\n+++ b/x.py\n"
        "@@ -1,3 +1,3 @@\n a\x0cb\n-old\n+new\n tail\n"
    )
    files = parse_patch(patch)
    assert len(files) == 1
    assert (files[0].additions, files[0].deletions) == (1, 1)
    body = files[0].hunks[0].body
    assert " a\x0cb\n" in body
    assert body.endswith(" tail\n")


def test_unicode_line_separator_inside_context_line_stays_in_hunk():
    patch = (
        "diff --git a/doc.md b/doc.md\n--- a/doc.md\n+++ b/doc.md\n"
        "@@ -1,2 +1,2 @@\n intro\u2028more\n-before\n+after\n"
    )
    files = parse_patch(patch)
    assert (files[0].additions, files[0].deletions) == (1, 1)
    assert "\u2028" in files[0].hunks[0].body


def test_crlf_patch_lines_are_trimmed():
    patch = "--- a/w.txt\r\n+++ b/w.txt\r\n@@ -1 +1 @@\r\n-a\r\n+b\r\n"
    files = parse_patch(patch)
    assert files[0].path == "w.txt"
    assert (files[0].additions, files[0].deletions) == (1, 1)
