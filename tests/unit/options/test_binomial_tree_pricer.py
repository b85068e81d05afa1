import pytest

from binomial_pricing.options import (
    BinomialTreePricer,
    InvalidParameterError,
    LatticePriceModel,
    OptionParameters,
    OptionType,
    StepLimitExceededError,
    binomial_tree_price,
)


def _params(steps: int, option_type: OptionType = OptionType.CALL) -> OptionParameters:
    return OptionParameters(
        spot=102.0,
        strike=100.0,
        rate=0.03,
        time_to_expiry=45 / 365.0,
        volatility=0.25,
        steps=steps,
        option_type=option_type,
    )


def test_binomial_tree_pricer_is_lattice_price_model():
    assert isinstance(BinomialTreePricer(), LatticePriceModel)


@pytest.mark.parametrize("option_type", [OptionType.CALL, OptionType.PUT])
def test_pricer_matches_functional_api(option_type: OptionType):
    params = _params(steps=40, option_type=option_type)

    assert BinomialTreePricer().price(params) == binomial_tree_price(params)


def test_step_cap_allows_requests_at_the_limit():
    result = BinomialTreePricer(max_steps=10).price(_params(steps=10))

    assert result.steps == 10


def test_step_cap_rejects_larger_requests():
    with pytest.raises(StepLimitExceededError, match="steps=11 exceeds max_steps=10"):
        BinomialTreePricer(max_steps=10).price(_params(steps=11))


def test_uncapped_pricer_accepts_large_trees():
    result = BinomialTreePricer().price(_params(steps=400))

    assert len(result.lattice[-1]) == 401


def test_invalid_steps_are_reported_before_the_cap_check():
    with pytest.raises(InvalidParameterError, match="steps"):
        BinomialTreePricer(max_steps=10).price(_params(steps="12"))


def test_negative_max_steps_raise():
    with pytest.raises(InvalidParameterError, match="max_steps: must be >= 0"):
        BinomialTreePricer(max_steps=-1)


@pytest.mark.parametrize("max_steps", ["10", 10.0, 2.5, True])
def test_non_integer_max_steps_raise(max_steps):
    with pytest.raises(InvalidParameterError, match="max_steps: must be an integer") as exc:
        BinomialTreePricer(max_steps=max_steps)

    assert exc.value.parameter == "max_steps"
    assert isinstance(exc.value, ValueError)
