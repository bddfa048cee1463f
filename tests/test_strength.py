import pytest

from motus.strength import PasswordStrength, classify, from_label


def test_classify_mapping():
    assert classify(0) is PasswordStrength.VERY_WEAK
    assert classify(1) is PasswordStrength.WEAK
    assert classify(2) is PasswordStrength.REASONABLE
    assert classify(3) is PasswordStrength.STRONG
    assert classify(4) is PasswordStrength.VERY_STRONG


def test_classify_preserves_order():
    levels = [classify(s) for s in range(5)]
    assert levels == sorted(levels)
    assert len(set(levels)) == 5


@pytest.mark.parametrize("score", [5, -1, 100, True, 2.0, "3", None])
def test_classify_rejects_out_of_domain(score):
    with pytest.raises(ValueError):
        classify(score)


def test_labels():
    assert [str(classify(s)) for s in range(5)] == [
        "very weak", "weak", "reasonable", "strong", "very strong",
    ]


def test_from_label():
    for level in PasswordStrength:
        assert from_label(level.label) is level
    with pytest.raises(ValueError):
        from_label("very week")


def test_every_level_has_a_color():
    assert all(level.color for level in PasswordStrength)
