import math

import pytest

from binomial_pricing.options import (
    OptionParameters,
    binomial_tree_price,
    lattice_to_frame,
    lattice_to_wide,
)


@pytest.fixture
def result():
    params = OptionParameters(
        spot=100.0,
        strike=95.0,
        rate=0.02,
        time_to_expiry=0.5,
        volatility=0.3,
        steps=3,
        option_type="put",
    )
    return binomial_tree_price(params)


def test_lattice_to_frame_has_one_row_per_node(result):
    df = lattice_to_frame(result)

    assert list(df.columns) == ["step", "up_moves", "stock_price", "option_value"]
    assert len(df) == 10
    assert df["step"].dtype == "int64"
    assert df["stock_price"].dtype == "float64"
    assert df[["step", "up_moves"]].values.tolist()[:4] == [
        [0, 0],
        [1, 0],
        [1, 1],
        [2, 0],
    ]

    root = df.iloc[0]
    assert root["stock_price"] == 100.0
    assert root["option_value"] == result.option_price


def test_lattice_to_frame_zero_steps():
    params = OptionParameters(
        spot=100.0,
        strike=95.0,
        rate=0.02,
        time_to_expiry=0.5,
        volatility=0.3,
        steps=0,
    )
    df = lattice_to_frame(binomial_tree_price(params))

    assert len(df) == 1
    assert df.loc[0, "option_value"] == 5.0


def test_lattice_to_wide_is_triangular(result):
    wide = lattice_to_wide(result, value="option_value")

    assert wide.shape == (4, 4)
    assert list(wide.index) == [3, 2, 1, 0]
    assert list(wide.columns) == [0, 1, 2, 3]
    for step in range(4):
        for up_moves in range(4):
            cell = wide.loc[up_moves, step]
            if up_moves > step:
                assert math.isnan(cell)
            else:
                assert cell == result.node(step, up_moves).option_value


def test_lattice_to_wide_defaults_to_stock_prices(result):
    wide = lattice_to_wide(result)

    assert wide.loc[0, 0] == 100.0
    assert wide.loc[3, 3] == result.node(3, 3).stock_price


def test_lattice_to_wide_rejects_unknown_value(result):
    with pytest.raises(ValueError, match="stock_price"):
        lattice_to_wide(result, value="delta")
