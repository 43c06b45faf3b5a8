import pytest

from sdtcore.analysis import ZeroCrossing


def _feed(detector, samples):
    return [detector.process(s) for s in samples]


def test_no_output_until_window_full():
    zc = ZeroCrossing(4)
    results = _feed(zc, [1.0, 1.0, 1.0, 1.0])
    assert results[:3] == [None, None, None]
    assert results[3] == 0.0


def test_constant_signal_has_no_crossings():
    zc = ZeroCrossing(8)
    results = [r for r in _feed(zc, [0.5] * 32) if r is not None]
    assert len(results) == 4
    assert all(r == 0.0 for r in results)


def test_silence_has_no_crossings():
    zc = ZeroCrossing(6, overlap=1.0)
    results = _feed(zc, [0.0] * 12)
    assert results == [0.0] * 12


def test_alternating_signal_crosses_between_every_pair():
    size = 10
    zc = ZeroCrossing(size)
    samples = [1.0 if i % 2 == 0 else -1.0 for i in range(size)]
    results = _feed(zc, samples)
    assert results[-1] == pytest.approx((size - 1) / size)


def test_window_holds_most_recent_samples():
    zc = ZeroCrossing(4, overlap=1.0)
    first = zc.process(1.0)
    assert first == 0.25
    rates = _feed(zc, [1.0, 1.0, 1.0])
    assert rates[-1] == 0.0


def test_overlap_sets_hop_size():
    zc = ZeroCrossing(4, overlap=0.5)
    assert zc.hop == 2
    results = _feed(zc, [1.0] * 8)
    assert [r is not None for r in results] == [False, True] * 4


def test_total_overlap_outputs_every_sample():
    zc = ZeroCrossing(5, overlap=1.0)
    assert zc.hop == 1
    assert all(r is not None for r in _feed(zc, [0.1, -0.1, 0.2, -0.2, 0.3]))


def test_overlap_is_clipped_to_window():
    zc = ZeroCrossing(4, overlap=-3.0)
    assert zc.hop == zc.size
    zc.overlap = 5.0
    assert zc.hop == 1


def test_rate_bounded_by_window():
    zc = ZeroCrossing(16, overlap=0.75)
    samples = [(-1.0) ** (i // 3) * (i % 5) for i in range(200)]
    rates = [r for r in _feed(zc, samples) if r is not None]
    assert rates
    assert all(0.0 <= r <= (zc.size - 1) / zc.size for r in rates)


def test_invalid_size_raises():
    with pytest.raises(ValueError):
        ZeroCrossing(0)