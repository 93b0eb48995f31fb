import pytest

from mpcalc.calculator import Calculator
from mpcalc.config import CalculatorSettings


@pytest.fixture
def calc():
    return Calculator(CalculatorSettings(precision=30))
