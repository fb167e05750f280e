"""Tests for the indentation-aware emitter."""

import pytest

from cs2kt.transpiler.emitter import IndentedEmitter


class TestIndentedEmitter:
    """Test text emission and indentation depth."""

    def test_empty(self):
        """Test that a fresh emitter is empty at depth 0."""
        emitter = IndentedEmitter()
        assert emitter.depth == 0
        assert emitter.getvalue() == ""

    def test_indented_write_line_at_depth_two(self):
        """Test the exact leading whitespace at depth 2."""
        emitter = IndentedEmitter(depth=2)
        emitter.indented_write_line("x")
        assert emitter.getvalue() == "        x\n"

    def test_write_is_raw(self):
        """Test that write never adds indentation."""
        emitter = IndentedEmitter(depth=3)
        emitter.write("a")
        emitter.write("b")
        assert emitter.getvalue() == "ab"

    def test_indent_then_continue_inline(self):
        """Test writing whitespace only, then continuing the line."""
        emitter = IndentedEmitter(depth=1)
        emitter.indent()
        emitter.write("val x = 1")
        emitter.newline()
        assert emitter.getvalue() == "    val x = 1\n"

    def test_buffer_is_concatenation_in_call_order(self):
        """Test that the buffer is every write in order."""
        emitter = IndentedEmitter()
        emitter.indented_write_line("class A {")
        with emitter.indented():
            emitter.indented_write("fun f()")
            emitter.write(" {")
            emitter.newline()
            emitter.indented_write_line("}")
        emitter.indented_write_line("}")
        assert emitter.getvalue() == "class A {\n    fun f() {\n    }\n}\n"

    def test_writes_do_not_change_depth(self):
        """Test that only the caller changes the depth."""
        emitter = IndentedEmitter(depth=1)
        emitter.indented_write_line("x")
        emitter.indent()
        emitter.write("y")
        assert emitter.depth == 1

    def test_indented_restores_depth(self):
        """Test that the nested scope restores the depth on exit."""
        emitter = IndentedEmitter()
        with emitter.indented():
            assert emitter.depth == 1
            with emitter.indented():
                assert emitter.depth == 2
        assert emitter.depth == 0

    def test_indented_restores_depth_on_error(self):
        """Test that the depth is restored when the scope raises."""
        emitter = IndentedEmitter()
        with pytest.raises(RuntimeError):
            with emitter.indented():
                raise RuntimeError("boom")
        assert emitter.depth == 0

    def test_dedent(self):
        """Test leaving a level manually."""
        emitter = IndentedEmitter(depth=2)
        emitter.dedent()
        assert emitter.indentation() == "    "

    def test_dedent_below_zero_raises(self):
        """Test that the depth never goes negative."""
        with pytest.raises(ValueError, match="below depth 0"):
            IndentedEmitter().dedent()

    def test_negative_depth_rejected(self):
        """Test that a negative starting depth is rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            IndentedEmitter(depth=-1)

    def test_depth_assignment_validated(self):
        """Test that assigning a negative depth is rejected."""
        emitter = IndentedEmitter()
        with pytest.raises(ValueError, match="non-negative"):
            emitter.depth -= 1
        with pytest.raises(ValueError, match="non-negative"):
            emitter.depth = -3
        assert emitter.depth == 0
