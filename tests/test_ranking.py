import io

from trigrams.counter import TrigramTable, count_trigrams
from trigrams.ranking import format_report, report, top_trigrams


def make_table(counts):
    table = TrigramTable()
    for key, count in counts:
        for _ in range(count):
            table.add(key)
    return table


def test_sorted_by_count_descending():
    table = make_table([("a b c", 1), ("d e f", 3), ("g h i", 2), ("j k l", 4)])

    assert top_trigrams(table) == [("j k l", 4), ("d e f", 3), ("g h i", 2)]


def test_fewer_entries_than_limit():
    table = make_table([("a b c", 2), ("d e f", 1)])

    assert top_trigrams(table) == [("a b c", 2), ("d e f", 1)]


def test_equal_counts_keep_first_seen_order():
    table = make_table([("x y z", 1), ("a b c", 1), ("m n o", 1), ("p q r", 1)])

    assert top_trigrams(table) == [("x y z", 1), ("a b c", 1), ("m n o", 1)]


def test_custom_limit():
    table = make_table([("a b c", 2), ("d e f", 1)])

    assert top_trigrams(table, limit=1) == [("a b c", 2)]


def test_format_report():
    assert format_report([("the cat sat", 2), ("cat sat the", 1)]) == "the cat sat - 2\ncat sat the - 1"


def test_report_writes_trailing_newline():
    stream = io.StringIO()
    report(count_trigrams("the cat sat the cat sat the cat ran".split()), stream)

    lines = stream.getvalue().split("\n")
    assert lines[-1] == ""
    assert lines[:-1] == ["the cat sat - 2", "cat sat the - 2", "sat the cat - 2"]
