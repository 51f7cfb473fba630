"""
Property tests for sequence operations.

Each property should hold for any list of integers.
"""

from hypothesis import given, strategies as st

from fpkit import array as A
from fpkit.option import NOTHING, Some

ints = st.lists(st.integers(min_value=-50, max_value=50), max_size=30)


class TestPredicateProperties:
    @given(seq=ints)
    def test_all_true_any_false(self, seq):
        """all with an always-true predicate holds; any with always-false does not."""
        assert A.all(seq, lambda _: True) is True
        assert A.any(seq, lambda _: False) is False

    @given(seq=ints, threshold=st.integers(min_value=-50, max_value=50))
    def test_any_is_not_all_not(self, seq, threshold):
        """any(p) == not all(not p)."""
        pred = lambda n: n > threshold  # noqa: E731
        assert A.any(seq, pred) == (not A.all(seq, lambda n: not pred(n)))


class TestStructuralProperties:
    @given(seq=ints, item=st.integers())
    def test_append_properties(self, seq, item):
        """append leaves the input intact and grows the result by one."""
        before = list(seq)
        result = A.append(seq, item)
        assert seq == before
        assert result == before + [item]
        assert len(result) == len(seq) + 1

    @given(seq=ints, index=st.integers(min_value=-40, max_value=40))
    def test_at_in_range_iff_some(self, seq, index):
        """at(s, i) is Some(s[i]) exactly when 0 <= i < len(s)."""
        result = A.at(seq, index)
        if 0 <= index < len(seq):
            assert result == Some(seq[index])
        else:
            assert result is NOTHING

    @given(a=ints, b=ints, c=ints)
    def test_concat_associative(self, a, b, c):
        assert A.concat(A.concat(a, b), c) == A.concat(a, A.concat(b, c))

    @given(a=ints, b=ints)
    def test_concat_lengths(self, a, b):
        result = A.concat(a, b)
        assert len(result) == len(a) + len(b)
        assert result[:len(a)] == a

    @given(seq=ints)
    def test_clone_equal_but_distinct(self, seq):
        copy = A.clone(seq)
        assert copy == seq
        assert copy is not seq


class TestDiffProperties:
    @given(seq=ints, t1=ints, t2=ints)
    def test_diff_composes_as_union(self, seq, t1, t2):
        """Two diffs in a row equal one diff against both."""
        assert A.diff(A.diff(seq, t1), t2) == A.diff(seq, t1 + t2)

    @given(seq=ints, subtract=ints)
    def test_diff_preserves_order(self, seq, subtract):
        result = A.diff(seq, subtract)
        assert result == [n for n in seq if n not in subtract]
        assert all(n not in subtract for n in result)


class TestDropFindProperties:
    @given(seq=ints, count=st.integers(min_value=-40, max_value=40))
    def test_drop(self, seq, count):
        """drop is never Nothing; out-of-range counts give an empty tail."""
        result = A.drop(seq, count)
        if 0 < count < len(seq):
            assert result == Some(seq[count:])
        else:
            assert result == Some([])

    @given(seq=ints, threshold=st.integers(min_value=-50, max_value=50))
    def test_find_first_match(self, seq, threshold):
        matches = [n for n in seq if n > threshold]
        result = A.find(seq, lambda n: n > threshold)
        if matches:
            assert result == Some(matches[0])
        else:
            assert result is NOTHING
