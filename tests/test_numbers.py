import pytest

from kata.numbers import fizzbuzz, largest, main, multiply, prime_factorize


@pytest.mark.parametrize(
    "num, expected",
    [
        (0, "0"),
        (1, "1"),
        (3, "Fizz"),
        (5, "Buzz"),
        (15, "FizzBuzz"),
        (-1, "-1"),
        (-3, "Fizz"),
        (-5, "Buzz"),
        (-15, "FizzBuzz"),
    ],
)
def test_fizzbuzz(num, expected):
    assert fizzbuzz(num) == expected


def test_prime_factorize():
    assert prime_factorize(100) == [2, 2, 5, 5]


def test_prime_factorize_prime():
    assert prime_factorize(13) == [13]


def test_prime_factorize_product_invariant():
    for n in range(2, 300):
        factors = prime_factorize(n)
        assert factors == sorted(factors)
        product = 1
        for f in factors:
            product *= f
        assert product == n


def test_prime_factorize_negative():
    with pytest.raises(ValueError):
        prime_factorize(-4)


def test_largest():
    assert largest([34, 50, 25, 100, 7]) == 100
    assert largest([100.2, 34.5, 6000.9, 89.1, 413.2]) == 6000.9


def test_largest_empty():
    with pytest.raises(ValueError):
        largest([])


def test_multiply_ok():
    assert multiply("10", "2") == 20
    assert multiply("-3", "+4") == -12


def test_multiply_invalid_digit():
    with pytest.raises(ValueError, match="invalid digit found in string"):
        multiply("t", "2")


def test_multiply_empty():
    with pytest.raises(ValueError, match="empty string"):
        multiply("", "2")


def test_multiply_out_of_range():
    with pytest.raises(ValueError, match="too large"):
        multiply("2147483648", "1")
    with pytest.raises(OverflowError):
        multiply("2147483647", "2")


def test_main_multiply(capsys):
    assert main(["multiply"]) == 0
    assert capsys.readouterr().out == "n: 20\nError: invalid digit found in string\n"


def test_main_factor(capsys):
    main(["factor", "100"])
    assert capsys.readouterr().out == "[2, 2, 5, 5]\n"


def test_main_factor_invalid(capsys):
    main(["factor", "abc"])
    assert capsys.readouterr().out == "2以上の正の整数を入力してください\n"


def test_main_largest(capsys):
    main(["largest"])
    assert capsys.readouterr().out == (
        "The largets number is 100\nThe largets number is 6000.9\n"
    )


def test_main_fizzbuzz(capsys):
    main(["fizzbuzz"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 101
    assert lines[0] == "0"
    assert lines[15] == "FizzBuzz"
    assert lines[100] == "Buzz"