import pytest

from reflector_solver.src.lens import (
    LensBoxes,
    LensStep,
    StepParseError,
    hash_sum,
    holiday_hash,
    parse_step,
    parse_steps,
)

SEQUENCE = "rn=1,cm-,qp=3,cm=2,qp-,pc=4,ot=9,ab=5,pc-,pc=6,ot=7\n"


def test_holiday_hash():
    assert holiday_hash("HASH") == 52
    assert holiday_hash("") == 0
    assert holiday_hash("rn") == 0
    assert holiday_hash("qp") == 1


def test_parse_steps_strips_and_splits_lines():
    assert parse_steps(" a=1 ,b-\nc=2,\n") == ["a=1", "b-", "c=2"]


def test_hash_sum_example():
    assert hash_sum(parse_steps(SEQUENCE)) == 1320


def test_parse_step():
    assert parse_step("rn=1") == LensStep("rn", "=", 1)
    assert parse_step("cm-") == LensStep("cm", "-")
    assert parse_step("pc=4").box == 3


@pytest.mark.parametrize("raw", ["rn", "rn=", "=1", "rn=0", "rn=12", "rn-1", "r n=1"])
def test_parse_step_rejects_malformed(raw):
    with pytest.raises(StepParseError):
        parse_step(raw)


def test_boxes_example():
    boxes = LensBoxes().run(parse_steps(SEQUENCE))
    assert boxes.contents(0) == [("rn", 1), ("cm", 2)]
    assert boxes.contents(1) == []
    assert boxes.contents(3) == [("ot", 7), ("ab", 5), ("pc", 6)]
    assert boxes.focusing_power() == 145


def test_replace_keeps_slot():
    boxes = LensBoxes()
    for raw in ["rn=1", "cm=2", "rn=5"]:
        boxes.apply(parse_step(raw))
    assert boxes.contents(0) == [("rn", 5), ("cm", 2)]


def test_remove_missing_label_is_noop():
    boxes = LensBoxes()
    boxes.apply(parse_step("zz-"))
    assert boxes.focusing_power() == 0


def test_holiday_hash_uses_utf8_bytes():
    # U+00E9 encodes to 0xC3 0xA9
    assert holiday_hash("\u00e9") == 92
