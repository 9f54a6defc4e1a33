"""Tests for the display projector — scorecard slots, glyphs and layouts."""

import pytest
from tenpin.core.display import DisplayFrame, Glyphs, Mark, SlotLayout, project, project_frame
from tenpin.core.frame import Frame
from tenpin.core.sequencer import build

# X | 7/ | 9- | X | -8 | 8/ | -6 | X | X | X81
SAMPLE_GAME = [10, 7, 3, 9, 0, 10, 0, 8, 8, 2, 0, 6, 10, 10, 10, 8, 1]


def _card(rolls, **kwargs) -> list[DisplayFrame]:
    return project(build(rolls).frames, **kwargs)


class TestPadding:
    def test_empty_scorecard_has_all_frames(self):
        card = project([])
        assert len(card) == 10
        assert [d.number for d in card] == list(range(1, 11))
        for d in card:
            assert d.slots == ("", "", "")
            assert d.score == ""
            assert d.marks == (None, None, None)

    def test_only_final_placeholder_is_last(self):
        card = project([], number_of_frames=5)
        assert [d.is_last_frame for d in card] == [False] * 4 + [True]

    def test_partial_game_is_padded(self):
        card = _card([3, 4, 5])
        assert len(card) == 10
        assert card[0].slots == ("3", "4", "")
        assert card[1].slots == ("5", "", "")
        assert card[2].slots == ("", "", "")


class TestNormalFrames:
    def test_sample_game_boxed(self):
        card = _card(SAMPLE_GAME)
        assert [d.slots for d in card] == [
            ("", "X", ""),
            ("7", "/", ""),
            ("9", "-", ""),
            ("", "X", ""),
            ("-", "8", ""),
            ("8", "/", ""),
            ("-", "6", ""),
            ("", "X", ""),
            ("", "X", ""),
            ("X", "8", "1"),
        ]
        assert [d.score for d in card] == [
            "20", "39", "48", "66", "74", "84", "90", "120", "148", "167",
        ]

    def test_leading_layout_puts_strike_first(self):
        card = _card(SAMPLE_GAME, layout=SlotLayout.LEADING)
        assert card[0].slots == ("X", "", "")
        assert card[0].is_strike(0)
        assert card[1].slots == ("7", "/", "")
        # the last frame is laid out the same either way
        assert card[9].slots == ("X", "8", "1")

    def test_boxed_strike_mark_flags(self):
        card = _card([10])
        assert card[0].marks == (None, Mark.STRIKE, None)
        assert card[0].is_strike(1)
        assert not card[0].is_strike(0)

    def test_spare_mark_flags(self):
        card = _card([6, 4])
        assert card[0].is_spare(1)
        assert card[0].slots == ("6", "/", "")

    def test_borrowed_bonus_rolls_not_shown(self):
        card = _card([10, 3, 4])
        assert card[0].slots == ("", "X", "")
        assert card[1].slots == ("3", "4", "")

    def test_zero_glyph(self):
        card = _card([0, 0])
        assert card[0].slots == ("-", "-", "")
        assert card[0].score == "0"

    def test_custom_glyphs(self):
        glyphs = Glyphs(strike="S", spare="P", zero="0")
        card = _card([10, 5, 5, 0], glyphs=glyphs)
        assert card[0].slots[1] == "S"
        assert card[1].slots == ("5", "P", "")
        assert card[2].slots == ("0", "", "")


class TestScoreVisibility:
    def test_spare_score_hidden_until_bonus(self):
        assert _card([5, 5])[0].score == ""
        assert _card([5, 5, 3])[0].score == "13"

    def test_strike_score_hidden_until_both_bonus_rolls(self):
        assert _card([10])[0].score == ""
        assert _card([10, 3])[0].score == ""
        assert _card([10, 3, 4])[0].score == "17"

    def test_open_frame_score_after_second_roll(self):
        assert _card([3])[0].score == ""
        assert _card([3, 4])[0].score == "7"


class TestLastFrame:
    @pytest.mark.parametrize(
        "tenth, slots, marks",
        [
            ((10, 10, 10), ("X", "X", "X"), (Mark.STRIKE, Mark.STRIKE, Mark.STRIKE)),
            ((9, 1, 10), ("9", "/", "X"), (None, Mark.SPARE, Mark.STRIKE)),
            ((10, 3, 7), ("X", "3", "/"), (Mark.STRIKE, None, Mark.SPARE)),
            ((10, 0, 0), ("X", "-", "-"), (Mark.STRIKE, None, None)),
            ((10, 10, 3), ("X", "X", "3"), (Mark.STRIKE, Mark.STRIKE, None)),
            ((10, 0, 10), ("X", "-", "/"), (Mark.STRIKE, None, Mark.SPARE)),
            ((3, 4, None), ("3", "4", ""), (None, None, None)),
            ((0, 10, 5), ("-", "/", "5"), (None, Mark.SPARE, None)),
        ],
    )
    def test_last_frame_slots(self, tenth, slots, marks):
        frame = Frame(*tenth, is_last_frame=True)
        for layout in SlotLayout:
            d = project_frame(frame, number=10, layout=layout)
            assert d.slots == slots
            assert d.marks == marks

    def test_last_frame_partial(self):
        d = project_frame(Frame(10, None, None, is_last_frame=True), number=10)
        assert d.slots == ("X", "", "")
        assert d.score == ""
