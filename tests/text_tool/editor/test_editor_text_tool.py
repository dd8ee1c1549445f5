"""Tests for the editor tool operations."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from text_tool import TextToolExecutionError
from text_tool.editor import EditorSettings, EditorTextTool


RUST_SOURCE = (
    "pub fn keep(){}\n"
    "\n"
    "pub fn target(a: i32) -> i32 {\n"
    "  let x = a + 1;\n"
    "  x\n"
    "}\n"
    "\n"
    "pub fn keep2(){}\n"
)


class TestEditorDefinition:
    """Test the editor tool's definition."""

    def test_operations(self, editor_tool):
        """Test every operation is advertised."""
        definition = editor_tool.get_definition()

        assert definition.name == "editor"
        assert definition.parameters[0].enum == [
            "edit", "find", "replace_text", "delete_text", "insert_text", "delete_lines",
            "delete_function", "create_file", "overwrite_file", "open_file", "goto_line", "session_summary"
        ]

    def test_schema_includes_option_objects(self, editor_tool):
        """Test normalization and matching are described as objects."""
        properties = editor_tool.get_definition().to_json_schema()["function"]["parameters"]["properties"]

        assert properties["normalization"]["type"] == "object"
        assert set(properties["normalization"]["properties"]) == {
            "normalize_eol", "trim_lines", "normalize_whitespace", "ignore_case"
        }
        assert "fuzzy_threshold" in properties["matching"]["properties"]
        assert properties["mode"]["enum"] == ["replace", "insert", "delete", "create", "overwrite"]


class TestEditReplace:
    """Test the edit operation in replace mode."""

    def test_replace_single_occurrence(self, run_editor, tmp_path):
        """Test a unique match is replaced."""
        (tmp_path / "a.txt").write_text("hello world\n")
        result = run_editor("edit", path="a.txt", old_text="world", new_text="there")

        assert result.success is True
        assert (tmp_path / "a.txt").read_text() == "hello there\n"
        assert result.data["strategy"] == "literal"
        assert result.data["applied_at"][0]["line_start"] == 1
        assert result.data["characters_changed"] == 0
        assert result.message == "Successfully replaced occurrence 1 in a.txt"

    def test_multiple_matches_reported(self, run_editor, tmp_path):
        """Test an ambiguous match is a diagnostic and the file is left alone."""
        (tmp_path / "a.txt").write_text("foo\nfoo\nfoo\n")
        result = run_editor("edit", path="a.txt", old_text="foo", new_text="bar")

        assert result.success is False
        assert result.data["error_type"] == "multiple_matches"
        assert result.data["total_matches"] == 3
        assert [m["line_start"] for m in result.data["matches"]] == [1, 2, 3]
        assert result.data["suggestions"][0]["type"] == "select_occurrence"
        assert (tmp_path / "a.txt").read_text() == "foo\nfoo\nfoo\n"

    def test_occurrence_selects_match(self, run_editor, tmp_path):
        """Test occurrence picks the k-th match."""
        (tmp_path / "a.txt").write_text("foo\nfoo\nfoo\n")
        result = run_editor("edit", path="a.txt", old_text="foo", new_text="bar", occurrence=2)

        assert result.success is True
        assert (tmp_path / "a.txt").read_text() == "foo\nbar\nfoo\n"

    def test_occurrence_out_of_range(self, run_editor, tmp_path):
        """Test an occurrence past the last match is a diagnostic."""
        (tmp_path / "a.txt").write_text("foo\nfoo\n")
        result = run_editor("edit", path="a.txt", old_text="foo", new_text="bar", occurrence=5)

        assert result.success is False
        assert result.data["error_type"] == "occurrence_out_of_range"
        assert result.data["total_matches"] == 2
        assert "Invalid occurrence 5. Found 2 matches" in result.message

    def test_no_match_suggests_case(self, run_editor, tmp_path):
        """Test a case-only difference produces a suggestion."""
        (tmp_path / "a.txt").write_text("Hello\n")
        result = run_editor("edit", path="a.txt", old_text="hello", new_text="bye", matching={"fuzzy": False})

        assert result.success is False
        assert result.data["error_type"] == "no_matches"
        assert result.data["suggestions"][0]["type"] == "case_difference"
        assert result.message == "No matches found for 'hello' in a.txt"

    def test_ignore_case_replace(self, run_editor, tmp_path):
        """Test case-insensitive matching replaces the original-case text."""
        (tmp_path / "a.txt").write_text("Hello\n")
        result = run_editor(
            "edit", path="a.txt", old_text="hello", new_text="bye", normalization={"ignore_case": True}
        )

        assert result.success is True
        assert (tmp_path / "a.txt").read_text() == "bye\n"

    def test_fuzzy_replace(self, run_editor, tmp_path):
        """Test a fuzzy match replaces the similar line."""
        (tmp_path / "lib.rs").write_text("fn target(a: i64)\n{\n}\n")
        result = run_editor("edit", path="lib.rs", old_text="fn target(a: i32)", new_text="fn target(a: i32)")

        assert result.success is True
        assert result.data["strategy"] == "fuzzy"
        assert result.data["similarity"] >= 0.8
        assert (tmp_path / "lib.rs").read_text() == "fn target(a: i32)\n{\n}\n"

    def test_regex_replace(self, run_editor, tmp_path):
        """Test regex matching."""
        (tmp_path / "a.txt").write_text("value = 42\n")
        result = run_editor("edit", path="a.txt", old_text=r"\d+", new_text="N", matching={"regex": True})

        assert result.success is True
        assert result.data["strategy"] == "regex"
        assert (tmp_path / "a.txt").read_text() == "value = N\n"

    def test_invalid_regex(self, run_editor, tmp_path):
        """Test an invalid regex is a hard error."""
        (tmp_path / "a.txt").write_text("x\n")

        with pytest.raises(TextToolExecutionError) as exc_info:
            run_editor("edit", path="a.txt", old_text="(", new_text="y", matching={"regex": True})

        assert "Invalid regular expression" in str(exc_info.value)

    def test_crlf_preserved(self, run_editor, tmp_path):
        """Test CRLF line endings survive an edit across lines."""
        (tmp_path / "a.txt").write_bytes(b"one\r\ntwo\r\nthree\r\n")
        result = run_editor("edit", path="a.txt", old_text="two\nthree", new_text="2\r\n3")

        assert result.success is True
        assert (tmp_path / "a.txt").read_bytes() == b"one\r\n2\r\n3\r\n"
        assert result.data["applied_at"][0]["original_text"] == "two\r\nthree"

    def test_replace_then_find(self, run_editor, tmp_path):
        """Test the new text is found where it was written."""
        (tmp_path / "a.txt").write_text("alpha\nbeta\ngamma\n")
        edit = run_editor("edit", path="a.txt", old_text="beta", new_text="delta")
        found = run_editor("find", path="a.txt", old_text="delta")

        assert found.success is True
        assert found.data["selected"]["char_start"] == edit.data["applied_at"][0]["char_start"]
        assert found.data["selected"]["line_start"] == 2

    def test_preview_does_not_write(self, run_editor, tmp_path):
        """Test preview reports the change without writing."""
        (tmp_path / "a.txt").write_text("hello world\n")
        result = run_editor("edit", path="a.txt", old_text="world", new_text="there", preview=True)

        assert result.success is True
        assert result.data["preview"] is True
        assert result.data["match"]["matched_text"] == "world"
        assert (tmp_path / "a.txt").read_text() == "hello world\n"

    def test_file_not_found(self, run_editor):
        """Test a missing file is a hard error."""
        with pytest.raises(TextToolExecutionError) as exc_info:
            run_editor("edit", path="missing.txt", old_text="a", new_text="b")

        assert str(exc_info.value) == "File not found: missing.txt"

    def test_empty_old_text(self, run_editor, tmp_path):
        """Test an empty search string is rejected."""
        (tmp_path / "a.txt").write_text("x\n")

        with pytest.raises(TextToolExecutionError) as exc_info:
            run_editor("edit", path="a.txt", old_text="", new_text="b")

        assert "'old_text' must not be empty" in str(exc_info.value)

    def test_invalid_mode(self, run_editor, tmp_path):
        """Test unknown modes are rejected."""
        with pytest.raises(TextToolExecutionError) as exc_info:
            run_editor("edit", path="a.txt", mode="append", new_text="x")

        assert "Invalid mode 'append'" in str(exc_info.value)

    def test_unknown_normalization_option(self, run_editor, tmp_path):
        """Test unknown normalization flags are rejected."""
        (tmp_path / "a.txt").write_text("x\n")

        with pytest.raises(TextToolExecutionError) as exc_info:
            run_editor("edit", path="a.txt", old_text="x", normalization={"fold_tabs": True})

        assert "Unknown normalization option(s): fold_tabs" in str(exc_info.value)

    def test_file_too_large(self, session, make_tool_call, tmp_path):
        """Test the file size limit."""
        tool = EditorTextTool(EditorSettings(max_file_size_mb=0))
        (tmp_path / "a.txt").write_text("x\n")

        with pytest.raises(TextToolExecutionError) as exc_info:
            tool.execute(
                make_tool_call("editor", {"operation": "edit", "path": "a.txt", "old_text": "x"}), session
            )

        assert "File too large" in str(exc_info.value)

    def test_invalid_encoding(self, run_editor, tmp_path):
        """Test undecodable files are a hard error."""
        (tmp_path / "a.bin").write_bytes(b"\xff\xfe\xfa")

        with pytest.raises(TextToolExecutionError) as exc_info:
            run_editor("edit", path="a.bin", old_text="x")

        assert "Failed to decode file" in str(exc_info.value)


class TestEditOtherModes:
    """Test the edit operation's other modes."""

    def test_delete_mode(self, run_editor, tmp_path):
        """Test delete mode removes the match."""
        (tmp_path / "a.txt").write_text("keep remove keep\n")
        result = run_editor("edit", path="a.txt", old_text=" remove", mode="delete")

        assert result.success is True
        assert result.data["mode"] == "delete"
        assert (tmp_path / "a.txt").read_text() == "keep keep\n"

    def test_insert_mode(self, run_editor, tmp_path):
        """Test insert mode adds new_text after line_number."""
        (tmp_path / "a.txt").write_text("a\nb\n")
        result = run_editor("edit", path="a.txt", mode="insert", new_text="x", line_number=1)

        assert result.success is True
        assert (tmp_path / "a.txt").read_text() == "a\nx\nb\n"

    def test_insert_mode_requires_line_number(self, run_editor, tmp_path):
        """Test insert mode needs a line number."""
        (tmp_path / "a.txt").write_text("a\n")

        with pytest.raises(TextToolExecutionError) as exc_info:
            run_editor("edit", path="a.txt", mode="insert", new_text="x")

        assert "'line_number' is required for insert mode" in str(exc_info.value)

    def test_create_mode(self, run_editor, tmp_path):
        """Test create mode writes a new file."""
        result = run_editor("edit", path="new.txt", mode="create", new_text="content\n")

        assert result.success is True
        assert (tmp_path / "new.txt").read_text() == "content\n"

    def test_overwrite_mode(self, run_editor, tmp_path):
        """Test overwrite mode replaces a file's content."""
        (tmp_path / "a.txt").write_text("old\n")
        result = run_editor("edit", path="a.txt", mode="overwrite", new_text="new\n")

        assert result.success is True
        assert (tmp_path / "a.txt").read_text() == "new\n"


class TestExactTextOperations:
    """Test replace_text and delete_text, which match exactly."""

    def test_replace_text_is_case_sensitive(self, run_editor, tmp_path):
        """Test only the exact text is replaced."""
        (tmp_path / "a.txt").write_text("Hello\nhello\n")
        result = run_editor("replace_text", path="a.txt", old_text="hello", new_text="bye")

        assert result.success is True
        assert (tmp_path / "a.txt").read_text() == "Hello\nbye\n"

    def test_replace_text_has_no_fuzzy_fallback(self, run_editor, tmp_path):
        """Test near misses are reported rather than replaced."""
        (tmp_path / "a.txt").write_text("fn target(a: i64)\n")
        result = run_editor("replace_text", path="a.txt", old_text="fn target(a: i32)", new_text="x")

        assert result.success is False
        assert result.data["error_type"] == "no_matches"

    def test_replace_text_does_not_normalize_line_endings(self, run_editor, tmp_path):
        """Test an LF pattern does not match CRLF text, and the difference is diagnosed."""
        (tmp_path / "a.txt").write_bytes(b"a\r\nb\r\n")
        result = run_editor("replace_text", path="a.txt", old_text="a\nb", new_text="x")

        assert result.success is False
        assert "eol_difference" in [s["type"] for s in result.data["suggestions"]]

    def test_replace_text_rejects_matching_options(self, run_editor, tmp_path):
        """Test matching options belong to edit and find only."""
        (tmp_path / "a.txt").write_text("a\n")

        with pytest.raises(TextToolExecutionError) as exc_info:
            run_editor("replace_text", path="a.txt", old_text="a", matching={"regex": True})

        assert "not valid for operation 'replace_text'" in str(exc_info.value)

    def test_delete_text(self, run_editor, tmp_path):
        """Test the selected occurrence is deleted."""
        (tmp_path / "a.txt").write_text("x, y, x, z\n")
        result = run_editor("delete_text", path="a.txt", text_to_delete="x, ", occurrence=2)

        assert result.success is True
        assert (tmp_path / "a.txt").read_text() == "x, y, z\n"

    def test_delete_text_multiple(self, run_editor, tmp_path):
        """Test ambiguous deletions are diagnosed."""
        (tmp_path / "a.txt").write_text("x x\n")
        result = run_editor("delete_text", path="a.txt", text_to_delete="x")

        assert result.success is False
        assert result.data["error_type"] == "multiple_matches"


class TestLineOperations:
    """Test insert_text and delete_lines."""

    def test_insert_before_line(self, run_editor, tmp_path):
        """Test inserting before a line."""
        (tmp_path / "a.txt").write_text("a\nb\n")
        result = run_editor("insert_text", path="a.txt", text="x", line_number=2, position="before_line")

        assert result.success is True
        assert result.data["line_number"] == 2
        assert (tmp_path / "a.txt").read_text() == "a\nx\nb\n"

    def test_insert_at_end(self, run_editor, tmp_path):
        """Test appending."""
        (tmp_path / "a.txt").write_text("a\nb")
        result = run_editor("insert_text", path="a.txt", text="c", line_number=1, position="at_end")

        assert result.success is True
        assert (tmp_path / "a.txt").read_text() == "a\nb\nc\n"

    def test_insert_invalid_line(self, run_editor, tmp_path):
        """Test a line past the end is a diagnostic."""
        (tmp_path / "a.txt").write_text("a\n")
        result = run_editor("insert_text", path="a.txt", text="x", line_number=5)

        assert result.success is False
        assert result.data["error_type"] == "invalid_line_range"
        assert result.data["total_lines"] == 1

    def test_insert_invalid_position(self, run_editor, tmp_path):
        """Test unknown positions are a hard error."""
        (tmp_path / "a.txt").write_text("a\n")

        with pytest.raises(TextToolExecutionError):
            run_editor("insert_text", path="a.txt", text="x", line_number=1, position="middle")

    def test_delete_lines(self, run_editor, tmp_path):
        """Test deleting lines 2 to 4."""
        (tmp_path / "a.txt").write_text("a\nb\nc\nd\ne\n")
        result = run_editor("delete_lines", path="a.txt", start_line=2, end_line=4)

        assert result.success is True
        assert result.data["lines_deleted"] == 3
        assert (tmp_path / "a.txt").read_text() == "a\ne\n"

    def test_delete_lines_preview(self, run_editor, tmp_path):
        """Test preview leaves the file alone."""
        (tmp_path / "a.txt").write_text("a\nb\n")
        result = run_editor("delete_lines", path="a.txt", start_line=1, end_line=1, preview=True)

        assert result.data["preview"] is True
        assert (tmp_path / "a.txt").read_text() == "a\nb\n"

    def test_delete_lines_invalid_range(self, run_editor, tmp_path):
        """Test an invalid range is a diagnostic."""
        (tmp_path / "a.txt").write_text("a\nb\n")
        result = run_editor("delete_lines", path="a.txt", start_line=3, end_line=1)

        assert result.success is False
        assert result.data["error_type"] == "invalid_line_range"
        assert (tmp_path / "a.txt").read_text() == "a\nb\n"

    def test_delete_lines_string_numbers(self, run_editor, tmp_path):
        """Test line numbers given as strings are accepted."""
        (tmp_path / "a.txt").write_text("a\nb\n")
        result = run_editor("delete_lines", path="a.txt", start_line="1", end_line="1")

        assert result.success is True
        assert (tmp_path / "a.txt").read_text() == "b\n"


class TestDeleteFunction:
    """Test structural deletion."""

    def test_delete_function(self, run_editor, tmp_path):
        """Test the function is removed and its neighbours kept."""
        (tmp_path / "lib.rs").write_text(RUST_SOURCE)
        result = run_editor("delete_function", file_name="lib.rs", function_name="target")

        assert result.success is True
        assert result.data["start_line"] == 3
        assert result.data["end_line"] == 6
        assert result.data["lines_deleted"] == 4
        content = (tmp_path / "lib.rs").read_text()
        assert "fn target(" not in content
        assert "pub fn keep(){}" in content
        assert "pub fn keep2(){}" in content

    def test_delete_function_by_path(self, run_editor, tmp_path):
        """Test the file may be named with path."""
        (tmp_path / "lib.rs").write_text(RUST_SOURCE)
        result = run_editor("delete_function", path="lib.rs", function_name="keep2")

        assert result.success is True
        assert "keep2" not in (tmp_path / "lib.rs").read_text()

    def test_bodyless_declaration(self, run_editor, tmp_path):
        """Test a declaration without a body is not found and the file is unchanged."""
        (tmp_path / "lib.rs").write_text("fn foo(&self);")
        result = run_editor("delete_function", file_name="lib.rs", function_name="foo")

        assert result.success is False
        assert result.data["error_type"] == "function_not_found"
        assert len(result.data["suggestions"]) == 4
        assert (tmp_path / "lib.rs").read_text() == "fn foo(&self);"

    def test_unsupported_language(self, run_editor, tmp_path):
        """Test other languages are a diagnostic."""
        (tmp_path / "script.py").write_text("def target():\n    pass\n")
        result = run_editor("delete_function", file_name="script.py", function_name="target")

        assert result.success is False
        assert result.data["error_type"] == "unsupported_language"
        assert "supported: rust" in result.message
        assert {s["type"] for s in result.data["suggestions"]} == {"delete_lines", "delete_text"}

    def test_missing_file(self, run_editor):
        """Test a missing Rust file is a hard error."""
        with pytest.raises(TextToolExecutionError):
            run_editor("delete_function", file_name="missing.rs", function_name="target")

    def test_blank_function_name(self, run_editor, tmp_path):
        """Test a blank name is rejected."""
        with pytest.raises(TextToolExecutionError):
            run_editor("delete_function", file_name="lib.rs", function_name="  ")


class TestFileOperations:
    """Test create_file and overwrite_file."""

    def test_create_file(self, run_editor, tmp_path):
        """Test creating a file."""
        result = run_editor("create_file", path="new.txt", content="a\nb\n")

        assert result.success is True
        assert result.data["lines_created"] == 2
        assert (tmp_path / "new.txt").read_text() == "a\nb\n"

    def test_create_file_exists(self, run_editor, tmp_path):
        """Test creating over an existing file fails."""
        (tmp_path / "a.txt").write_text("x")

        with pytest.raises(TextToolExecutionError) as exc_info:
            run_editor("create_file", path="a.txt", content="y")

        assert str(exc_info.value) == "File already exists: a.txt"
        assert (tmp_path / "a.txt").read_text() == "x"

    def test_create_file_missing_parent(self, run_editor, tmp_path):
        """Test a missing parent directory needs create_parents."""
        with pytest.raises(TextToolExecutionError) as exc_info:
            run_editor("create_file", path="sub/dir/new.txt", content="x")

        assert "create_parents" in str(exc_info.value)

    def test_create_file_with_parents(self, run_editor, tmp_path):
        """Test parent directories are created on request."""
        result = run_editor("create_file", path="sub/dir/new.txt", content="x", create_parents=True)

        assert result.success is True
        assert (tmp_path / "sub" / "dir" / "new.txt").read_text() == "x"

    def test_create_file_permissions(self, run_editor, tmp_path):
        """Test new files get permissions from the umask rather than the temporary file's."""
        run_editor("create_file", path="new.txt", content="x")

        umask = os.umask(0)
        os.umask(umask)
        assert (tmp_path / "new.txt").stat().st_mode & 0o777 == 0o666 & ~umask

    def test_create_file_preview(self, run_editor, tmp_path):
        """Test preview does not create the file."""
        result = run_editor("create_file", path="new.txt", content="x", preview=True)

        assert result.data["preview"] is True
        assert not (tmp_path / "new.txt").exists()

    def test_overwrite_file(self, run_editor, tmp_path):
        """Test replacing a file's content."""
        (tmp_path / "a.txt").write_text("old")
        result = run_editor("overwrite_file", path="a.txt", content="new\r\n")

        assert result.success is True
        assert (tmp_path / "a.txt").read_bytes() == b"new\r\n"

    def test_overwrite_missing_file(self, run_editor):
        """Test overwriting a file that does not exist fails."""
        with pytest.raises(TextToolExecutionError) as exc_info:
            run_editor("overwrite_file", path="missing.txt", content="x")

        assert str(exc_info.value) == "File not found: missing.txt"

    def test_no_temporary_files_left(self, run_editor, tmp_path):
        """Test atomic writes clean up after themselves."""
        (tmp_path / "a.txt").write_text("x\n")
        run_editor("edit", path="a.txt", old_text="x", new_text="y")

        assert sorted(p.name for p in tmp_path.iterdir()) == ["a.txt"]

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
    @pytest.mark.parametrize("mode", [0o600, 0o755, 0o640])
    def test_edit_keeps_file_permissions(self, run_editor, tmp_path, mode):
        """Test rewriting a file keeps its existing permission bits."""
        target = tmp_path / "a.txt"
        target.write_text("x\n")
        target.chmod(mode)

        run_editor("edit", path="a.txt", old_text="x", new_text="y")

        assert target.read_text() == "y\n"
        assert target.stat().st_mode & 0o777 == mode

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
    def test_overwrite_keeps_file_permissions(self, run_editor, tmp_path):
        """Test overwriting a script keeps it executable."""
        script = tmp_path / "run.sh"
        script.write_text("echo old\n")
        script.chmod(0o755)

        run_editor("overwrite_file", path="run.sh", content="echo new\n")

        assert script.stat().st_mode & 0o777 == 0o755

    def test_failed_write_removes_temporary_file(self, run_editor, tmp_path):
        """Test a failed rename leaves neither a temporary file nor a changed target."""
        (tmp_path / "a.txt").write_text("x\n")

        with patch.object(Path, "replace", side_effect=OSError("disk full")):
            with pytest.raises(TextToolExecutionError) as exc_info:
                run_editor("edit", path="a.txt", old_text="x", new_text="y")

        assert str(exc_info.value) == "Failed to write file: disk full"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["a.txt"]
        assert (tmp_path / "a.txt").read_text() == "x\n"

    def test_unencodable_content(self, session, make_tool_call, tmp_path):
        """Test content the configured encoding cannot represent is rejected."""
        tool = EditorTextTool(EditorSettings(encoding="ascii"))
        call = make_tool_call("editor", {"operation": "create_file", "path": "new.txt", "content": "café"})

        with pytest.raises(TextToolExecutionError) as exc_info:
            tool.execute(call, session)

        assert str(exc_info.value).startswith("Content cannot be encoded as ascii")
        assert list(tmp_path.iterdir()) == []


class TestFindAndNavigation:
    """Test find, open_file, goto_line and session_summary."""

    def test_find_lists_matches(self, run_editor, tmp_path):
        """Test find reports every match without writing."""
        (tmp_path / "a.txt").write_text("foo\nbar\nfoo\n")
        result = run_editor("find", path="a.txt", old_text="foo", occurrence=2)

        assert result.success is True
        assert result.data["total_matches"] == 2
        assert result.data["selected"]["line_start"] == 3
        assert (tmp_path / "a.txt").read_text() == "foo\nbar\nfoo\n"

    def test_find_ambiguous(self, run_editor, tmp_path):
        """Test find without an occurrence reports ambiguity like edit does."""
        (tmp_path / "a.txt").write_text("foo\nfoo\n")
        result = run_editor("find", path="a.txt", old_text="foo")

        assert result.success is False
        assert result.data["error_type"] == "multiple_matches"

    def test_open_file(self, run_editor, tmp_path):
        """Test opening a file returns a numbered window."""
        (tmp_path / "a.txt").write_text("one\r\ntwo\r\n")
        result = run_editor("open_file", path="a.txt")

        assert result.success is True
        assert result.data["total_lines"] == 2
        assert result.data["lines"] == ["   1 | one", "   2 | two"]

    def test_open_file_at_line(self, run_editor, tmp_path):
        """Test opening a file at a line moves the window."""
        (tmp_path / "a.txt").write_text("".join(f"line {i}\n" for i in range(1, 21)))
        result = run_editor("open_file", path="a.txt", line_number=15)

        assert result.data["window_start"] == 13

    def test_open_file_bad_line(self, run_editor, tmp_path):
        """Test opening at a line past the end is a diagnostic."""
        (tmp_path / "a.txt").write_text("one\n")
        result = run_editor("open_file", path="a.txt", line_number=9)

        assert result.success is False
        assert result.data["error_type"] == "invalid_line_range"

    def test_goto_line(self, run_editor, tmp_path):
        """Test moving the window of the open file."""
        (tmp_path / "a.txt").write_text("".join(f"line {i}\n" for i in range(1, 21)))
        run_editor("open_file", path="a.txt")
        result = run_editor("goto_line", line_number=20)

        assert result.success is True
        assert result.data["is_at_end"] is True

    def test_goto_line_without_open_file(self, run_editor):
        """Test goto_line needs an open file."""
        result = run_editor("goto_line", line_number=1)

        assert result.success is False
        assert result.data["error_type"] == "no_open_file"

    def test_goto_line_out_of_range(self, run_editor, tmp_path):
        """Test a line outside the open file is a diagnostic."""
        (tmp_path / "a.txt").write_text("one\n")
        run_editor("open_file", path="a.txt")
        result = run_editor("goto_line", line_number=3)

        assert result.success is False
        assert result.data["error_type"] == "invalid_line_range"
        assert result.data["total_lines"] == 1

    def test_edit_refreshes_open_file(self, run_editor, session, tmp_path):
        """Test an edit updates the open file's window."""
        (tmp_path / "a.txt").write_text("a\nb\n")
        run_editor("open_file", path="a.txt")
        run_editor("delete_lines", path="a.txt", start_line=1, end_line=1)

        assert session.current_view()["lines"] == ["   1 | b"]

    def test_session_summary(self, run_editor, tmp_path):
        """Test the summary lists open files and history."""
        (tmp_path / "a.txt").write_text("a\n")
        run_editor("open_file", path="a.txt")
        run_editor("edit", path="a.txt", old_text="a", new_text="b")
        result = run_editor("session_summary")

        assert result.success is True
        assert result.data["history_length"] == 2
        assert result.data["history"][1]["operation"] == "Replaced occurrence 1 at line 1 in a.txt"
        assert len(result.data["open_files"]) == 1
