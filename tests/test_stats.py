import pytest

from cuble import stats


def test_new_stats_and_labels():
    assert stats.new_stats() == [0] * 7
    assert stats.bucket_labels() == ["1", "2", "3", "4", "5", "6", "6+"]


def test_record_win_buckets():
    record = stats.new_stats()
    record = stats.record_win(record, 1)
    record = stats.record_win(record, 6)
    record = stats.record_win(record, 9)
    assert record == [1, 0, 0, 0, 0, 1, 1]


def test_record_win_returns_copy():
    original = stats.new_stats()
    stats.record_win(original, 2)
    assert original == [0] * 7


def test_migrate_folds_legacy_layout():
    legacy = [1, 2, 3, 4, 5, 6] + [1] * 16
    assert stats.migrate_stats(legacy) == [1, 2, 3, 4, 5, 6, 16]
    assert stats.migrate_stats(None) == [0] * 7
    assert stats.migrate_stats([0, 1, 0, 0, 0, 0, 2]) == [0, 1, 0, 0, 0, 0, 2]
    with pytest.raises(ValueError):
        stats.migrate_stats([1, 2, 3])
