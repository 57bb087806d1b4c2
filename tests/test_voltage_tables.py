import numpy as np
import pytest

from composite_gradients.constants import SAMPLE_COUNTS
from composite_gradients.voltage_tables import (
    APPROX_NES_TABLE,
    NES_TABLE,
    SKIP_08_TABLE,
    VOLTAGE_TABLES,
    build_skip_voltage_table,
    build_voltage_table,
    voltage_table,
)


@pytest.mark.parametrize("n", SAMPLE_COUNTS)
def test_uniform_tables_mirror_around_half(n):
    table = build_voltage_table(n)
    lum = table.luma
    sat = table.saturation
    assert len(table) == n
    for k in range(n):
        assert lum[k] + lum[n - 1 - k] == pytest.approx(1.0, abs=1e-6)
        assert sat[k] == pytest.approx(sat[n - 1 - k], abs=1e-6)
    for k in range(n // 2):
        assert lum[k] == pytest.approx((k + 1) / (n + 2), abs=1e-6)
        assert sat[k] == pytest.approx(lum[k], abs=1e-6)


@pytest.mark.parametrize("n", SAMPLE_COUNTS)
def test_uniform_tables_ascend_dark_to_light(n):
    assert np.all(np.diff(build_voltage_table(n).luma) > 0)


def test_saturation_is_half_swing():
    table = voltage_table(16)
    expected = np.minimum(table.luma, 1.0 - table.luma)
    assert np.allclose(table.saturation, expected)


def test_skip_table_literal_values():
    table = build_skip_voltage_table()
    assert table.luma.tolist() == pytest.approx(
        [0.1, 0.3, 0.6, 0.8, 0.2, 0.4, 0.7, 0.9]
    )
    assert table.saturation.tolist() == pytest.approx(
        [0.1, 0.3, 0.6, 0.8, 0.8, 0.6, 0.3, 0.1]
    )
    assert SKIP_08_TABLE.luma.tolist() == pytest.approx(table.luma.tolist())


def test_approx_nes_constants_are_not_the_step_formula():
    assert APPROX_NES_TABLE.luma.tolist() == pytest.approx([0.2, 0.35, 0.65, 0.85])
    assert APPROX_NES_TABLE.saturation.tolist() == pytest.approx(
        [0.2, 0.35, 0.35, 0.15]
    )
    assert not np.allclose(APPROX_NES_TABLE.luma, build_voltage_table(4).luma)


def test_nes_table_levels():
    assert NES_TABLE.luma.tolist() == pytest.approx([0.1995, 0.342, 0.654, 0.8575])
    assert NES_TABLE.saturation.tolist() == pytest.approx(
        [0.1995, 0.342, 0.346, 0.1425]
    )


def test_shared_tables_built_once():
    assert set(VOLTAGE_TABLES) == set(SAMPLE_COUNTS)
    assert voltage_table(24) is voltage_table(24)


def test_tables_are_read_only():
    with pytest.raises(ValueError):
        voltage_table(8).luma[0] = 0.5


def test_unsupported_count_is_a_lookup_error():
    with pytest.raises(KeyError):
        voltage_table(7)


def test_samples_pairs_levels():
    samples = APPROX_NES_TABLE.samples()
    assert [s.luma for s in samples] == pytest.approx([0.2, 0.35, 0.65, 0.85])
    assert samples[3].saturation == pytest.approx(0.15)


def test_index_ranges():
    table = voltage_table(12)
    assert table.index_range() == range(0, 12)
    assert table.index_range("lower") == range(0, 6)
    assert table.index_range("upper") == range(6, 12)


def test_ascending_luma_reorders_pairs():
    from composite_gradients.voltage_tables import ascending_luma

    ordered = ascending_luma(SKIP_08_TABLE)
    assert ordered.luma.tolist() == pytest.approx([0.1, 0.2, 0.3, 0.4, 0.6, 0.7, 0.8, 0.9])
    assert ordered.saturation.tolist() == pytest.approx(
        [0.1, 0.8, 0.3, 0.6, 0.6, 0.3, 0.8, 0.1]
    )
    # the literal table is left alone
    assert SKIP_08_TABLE.luma.tolist() == pytest.approx(
        [0.1, 0.3, 0.6, 0.8, 0.2, 0.4, 0.7, 0.9]
    )


def test_ascending_luma_keeps_ordered_tables():
    from composite_gradients.voltage_tables import ascending_luma

    assert ascending_luma(voltage_table(16)) is voltage_table(16)
    assert ascending_luma(APPROX_NES_TABLE) is APPROX_NES_TABLE
